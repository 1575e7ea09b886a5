# app/core/logging_config.py

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configura o logger raiz; chamado só pelos pontos de entrada (main.py / client.py)."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
