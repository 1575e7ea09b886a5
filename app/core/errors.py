# app/core/errors.py

from __future__ import annotations


class QuoteServiceError(RuntimeError):
    """Base de todos os erros do pipeline de cotação."""


class QuoteTimeoutError(QuoteServiceError):
    def __init__(self, step: str, timeout: float) -> None:
        super().__init__(f"{step}: prazo de {timeout * 1000:.0f}ms esgotado")
        self.step = step
        self.timeout = timeout


# --- lado da busca (API externa / servidor) ---

class FetchError(QuoteServiceError):
    """Falha ao obter a cotação; nada foi gravado."""


class FetchTimeoutError(QuoteTimeoutError, FetchError):
    pass


class TransportError(FetchError):
    pass


class UpstreamStatusError(FetchError):
    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"{url} retornou status {status_code}")
        self.status_code = status_code
        self.url = url


class DecodeError(FetchError):
    pass


# --- lado do banco ---

class StoreError(QuoteServiceError):
    """Falha ao gravar uma cotação já obtida."""


class StoreTimeoutError(QuoteTimeoutError, StoreError):
    pass


class StoreConnectionError(StoreError):
    pass


class SchemaError(StoreError):
    pass


class InsertError(StoreError):
    pass


# --- lado do cliente ---

class QuoteFileError(QuoteServiceError):
    pass
