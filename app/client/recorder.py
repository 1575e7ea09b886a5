# app/client/recorder.py

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from app.core.errors import DecodeError, QuoteFileError, QuoteServiceError
from app.schemas.quote import Quote
from app.services.exchange import get_json

logger = logging.getLogger(__name__)


async def fetch_server_quote(
    url: str,
    timeout: float,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Quote:
    """Pede a cotação ao servidor local; qualquer status != 200 é erro."""
    data = await get_json(url, timeout, transport=transport)
    try:
        return Quote.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Resposta do servidor fora do formato esperado: {e}") from e


def format_quote_line(quote: Quote) -> str:
    return f"Dólar: {quote.bid}\n"


def append_quote_line(path: str, quote: Quote) -> None:
    # "a" cria o arquivo se não existir e nunca trunca
    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(format_quote_line(quote))
    except OSError as e:
        raise QuoteFileError(f"Erro ao escrever cotação em {path}: {e}") from e


async def record_quote(
    url: str,
    path: str,
    timeout: float,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bool:
    """
    Execução única do cliente: busca no servidor e acrescenta uma linha no arquivo.
    Falhas são só logadas; retorna True se a linha foi escrita.
    """
    try:
        quote = await fetch_server_quote(url, timeout, transport=transport)
    except QuoteServiceError as e:
        logger.error("Erro ao obter cotação do server: %s", e)
        return False

    try:
        append_quote_line(path, quote)
    except QuoteFileError as e:
        logger.error("%s", e)
        return False

    logger.info("Cotação salva com sucesso no arquivo %s", path)
    return True
