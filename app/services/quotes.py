# app/services/quotes.py

from __future__ import annotations

import logging
from typing import Protocol

from fastapi.concurrency import run_in_threadpool

from app.core.config import FETCH_TIMEOUT, PERSIST_TIMEOUT
from app.schemas.quote import Quote

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    async def fetch(self, timeout: float) -> Quote: ...


class Store(Protocol):
    def persist(self, quote: Quote, timeout: float) -> None: ...


class QuoteService:
    """
    Um ciclo por requisição: busca -> grava -> responde.
    Nada é guardado entre requisições.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        store: Store,
        *,
        fetch_timeout: float = FETCH_TIMEOUT,
        persist_timeout: float = PERSIST_TIMEOUT,
    ) -> None:
        self.fetcher = fetcher
        self.store = store
        self.fetch_timeout = fetch_timeout
        self.persist_timeout = persist_timeout

    async def get_quote(self) -> Quote:
        """
        Busca e grava uma cotação. Erro na busca: nada é gravado (FetchError).
        Erro na gravação: a cotação buscada é descartada (StoreError).
        """
        quote = await self.fetch_quote()
        await self.persist_quote(quote)
        return quote

    async def fetch_quote(self) -> Quote:
        quote = await self.fetcher.fetch(self.fetch_timeout)
        logger.info("Cotação do dólar: %s", quote.bid)
        return quote

    async def persist_quote(self, quote: Quote) -> None:
        # o banco é síncrono: roda fora do event loop, com prazo novo
        await run_in_threadpool(self.store.persist, quote, self.persist_timeout)
