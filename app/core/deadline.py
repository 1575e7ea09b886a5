# app/core/deadline.py

from __future__ import annotations

import time

from app.core.errors import QuoteTimeoutError


class Deadline:
    """Prazo de uma única etapa bloqueante; o relógio começa na construção."""

    def __init__(self, timeout: float, *, error: type[QuoteTimeoutError] = QuoteTimeoutError) -> None:
        self.timeout = timeout
        self._error = error
        self._expires_at = time.monotonic() + timeout

    def remaining(self) -> float:
        return max(0.0, self._expires_at - time.monotonic())

    @property
    def expired(self) -> bool:
        return time.monotonic() >= self._expires_at

    def check(self, step: str) -> None:
        if self.expired:
            raise self._error(step, self.timeout)
