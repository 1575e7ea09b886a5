# app/core/database.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from app.core.config import PERSIST_TIMEOUT, settings
from app.core.deadline import Deadline

# Quantas instruções da VM do SQLite entre cada checagem do prazo
PROGRESS_STEPS = 100

Base = declarative_base()


def build_engine(url: str | None = None) -> Engine:
    """
    Cria a engine sem pool: cada requisição abre a própria conexão
    e ela é fechada ao ser devolvida.
    """
    url = url or settings.DATABASE_URL
    if url.startswith("sqlite"):
        # timeout = espera máxima por lock do arquivo
        return create_engine(
            url,
            poolclass=NullPool,
            connect_args={"check_same_thread": False, "timeout": PERSIST_TIMEOUT},
            echo=False,
            future=True,
        )
    return create_engine(url, poolclass=NullPool, echo=False, future=True)


@contextmanager
def statement_deadline(conn: Connection, deadline: Deadline) -> Iterator[None]:
    """
    Interrompe o comando em execução quando o prazo acaba.
    No SQLite usa o progress handler; o chamador ainda deve chamar
    deadline.check() antes do commit para os demais bancos.
    """
    if conn.dialect.name != "sqlite":
        yield
        return

    raw = conn.connection.dbapi_connection
    # retorno != 0 aborta o comando com "interrupted"
    raw.set_progress_handler(lambda: 1 if deadline.expired else 0, PROGRESS_STEPS)
    try:
        yield
    finally:
        raw.set_progress_handler(None, 0)
