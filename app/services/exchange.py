from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from app.core.config import settings
from app.core.errors import DecodeError, FetchTimeoutError, TransportError, UpstreamStatusError
from app.schemas.quote import Quote, UpstreamEnvelope

logger = logging.getLogger(__name__)


async def _get(url: str, transport: httpx.AsyncBaseTransport | None) -> httpx.Response:
    async with httpx.AsyncClient(transport=transport) as client:
        return await client.get(url)


async def get_json(url: str, timeout: float, *, transport: httpx.AsyncBaseTransport | None = None) -> Any:
    """
    Um único GET com prazo total de `timeout` segundos (conexão + resposta + corpo).
    Só HTTP 200 é aceito; sem retentativa: qualquer falha vira um FetchError.
    """
    try:
        r = await asyncio.wait_for(_get(url, transport), timeout=timeout)
    except (asyncio.TimeoutError, httpx.TimeoutException) as e:
        logger.warning("Timeout ao chamar %s", url)
        raise FetchTimeoutError(f"GET {url}", timeout) from e
    except httpx.HTTPError as e:
        raise TransportError(f"Falha de conexão com {url}: {e}") from e

    if r.status_code != httpx.codes.OK:
        raise UpstreamStatusError(r.status_code, url)

    try:
        return r.json()
    except ValueError as e:
        raise DecodeError(f"Resposta de {url} não é JSON válido") from e


class QuoteFetcher:
    """Busca a cotação USD/BRL na AwesomeAPI."""

    def __init__(
        self,
        url: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url or settings.QUOTE_API_URL
        self._transport = transport

    async def fetch(self, timeout: float) -> Quote:
        data = await get_json(self.url, timeout, transport=self._transport)
        try:
            return UpstreamEnvelope.model_validate(data).unwrap()
        except ValidationError as e:
            raise DecodeError(f"Formato inesperado da API de cotação: {e}") from e
