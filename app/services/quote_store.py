# app/services/quote_store.py

from __future__ import annotations

import logging

from sqlalchemy import insert
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.database import Base, build_engine, statement_deadline
from app.core.deadline import Deadline
from app.core.errors import InsertError, SchemaError, StoreConnectionError, StoreTimeoutError
from app.models.quote import QuoteRecord
from app.schemas.quote import Quote

logger = logging.getLogger(__name__)


class QuoteStore:
    """Grava cada cotação buscada como uma nova linha em `cotacoes`."""

    def __init__(self, engine: Engine | None = None) -> None:
        self.engine = engine or build_engine()

    def persist(self, quote: Quote, timeout: float) -> None:
        """
        Cria a tabela (se preciso) e insere a cotação.
        Cada etapa tem o próprio prazo de `timeout` segundos.
        """
        try:
            conn = self.engine.connect()
        except SQLAlchemyError as e:
            raise StoreConnectionError(f"Não foi possível abrir o banco: {e}") from e

        with conn:
            self._create_schema(conn, timeout)
            self._insert(conn, quote, timeout)

    def _create_schema(self, conn: Connection, timeout: float) -> None:
        deadline = Deadline(timeout, error=StoreTimeoutError)
        try:
            with statement_deadline(conn, deadline), conn.begin():
                # checkfirst: equivalente ao CREATE TABLE IF NOT EXISTS
                Base.metadata.create_all(bind=conn, tables=[QuoteRecord.__table__], checkfirst=True)
                deadline.check("criação da tabela")
        except StoreTimeoutError:
            logger.warning("Timeout ao criar a tabela no banco de dados")
            raise
        except SQLAlchemyError as e:
            if deadline.expired:
                logger.warning("Timeout ao criar a tabela no banco de dados")
                raise StoreTimeoutError("criação da tabela", timeout) from e
            raise SchemaError(f"Erro ao criar a tabela: {e}") from e

    def _insert(self, conn: Connection, quote: Quote, timeout: float) -> None:
        deadline = Deadline(timeout, error=StoreTimeoutError)
        try:
            with statement_deadline(conn, deadline), conn.begin():
                conn.execute(insert(QuoteRecord.__table__), QuoteRecord.values_from(quote))
                deadline.check("inserção da cotação")
        except StoreTimeoutError:
            logger.warning("Timeout ao inserir a cotação no banco de dados")
            raise
        except SQLAlchemyError as e:
            if deadline.expired:
                logger.warning("Timeout ao inserir a cotação no banco de dados")
                raise StoreTimeoutError("inserção da cotação", timeout) from e
            raise InsertError(f"Erro ao inserir a cotação: {e}") from e
