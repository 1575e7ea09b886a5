# app/core/config.py

import os
from dotenv import load_dotenv

# Caminho da raiz do projeto (onde está o main.py e o .env)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
ENV_PATH = os.path.join(BASE_DIR, ".env")

# Carrega variáveis do arquivo .env, se existir
if os.path.exists(ENV_PATH):
    load_dotenv(ENV_PATH)

# Prazos fixos (segundos); não vêm do ambiente de propósito
CLIENT_TIMEOUT = 0.3
FETCH_TIMEOUT = 0.2
PERSIST_TIMEOUT = 0.01


class Settings:
    def __init__(self) -> None:
        self.DATABASE_URL: str = os.getenv(
            "DATABASE_URL",
            "sqlite:///./cotacoes.db",
        )
        self.QUOTE_API_URL: str = os.getenv(
            "QUOTE_API_URL",
            "https://economia.awesomeapi.com.br/json/last/USD-BRL",
        )

        # Servidor HTTP local
        self.SERVER_HOST: str = os.getenv("SERVER_HOST", "0.0.0.0")
        self.SERVER_PORT: int = int(os.getenv("SERVER_PORT", "8080"))

        # Cliente
        self.SERVER_URL: str = os.getenv("SERVER_URL", "http://localhost:8080/cotacao")
        self.QUOTE_FILE_PATH: str = os.getenv("QUOTE_FILE_PATH", "cotacao.txt")

        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
