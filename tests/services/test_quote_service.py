from __future__ import annotations

import asyncio
import logging

import pytest

from app.core.errors import (
    DecodeError,
    FetchError,
    FetchTimeoutError,
    InsertError,
    StoreConnectionError,
    StoreError,
    StoreTimeoutError,
    TransportError,
    UpstreamStatusError,
)
from app.services.quotes import QuoteService
from tests.fakes import FakeFetcher, FakeStore


def test_fetch_quote_logs_bid(quote, caplog) -> None:
    service = QuoteService(FakeFetcher(quote), FakeStore())

    with caplog.at_level(logging.INFO):
        assert asyncio.run(service.fetch_quote()) is quote

    assert "Cotação do dólar: 5.00" in caplog.text


def test_fetch_quote_propagates_errors() -> None:
    service = QuoteService(FakeFetcher(error=TransportError("recusado")), FakeStore())

    with pytest.raises(TransportError):
        asyncio.run(service.fetch_quote())


def test_persist_quote_gets_its_own_deadline(quote) -> None:
    store = FakeStore()
    service = QuoteService(FakeFetcher(quote), store, fetch_timeout=0.5, persist_timeout=0.05)

    asyncio.run(service.persist_quote(quote))

    assert store.timeouts == [0.05]
    assert store.persisted == [quote]


def test_persist_quote_propagates_store_errors(quote) -> None:
    service = QuoteService(FakeFetcher(quote), FakeStore(error=InsertError("falhou")))

    with pytest.raises(InsertError):
        asyncio.run(service.persist_quote(quote))


def test_get_quote_fetches_then_persists(quote) -> None:
    fetcher = FakeFetcher(quote)
    store = FakeStore()
    service = QuoteService(fetcher, store)

    assert asyncio.run(service.get_quote()) is quote

    assert fetcher.calls == [0.2]
    assert store.timeouts == [0.01]
    assert store.persisted == [quote]


@pytest.mark.parametrize(
    "error",
    [
        FetchTimeoutError("GET upstream", 0.2),
        TransportError("recusado"),
        UpstreamStatusError(503, "https://economia.awesomeapi.com.br"),
        DecodeError("corpo inválido"),
    ],
)
def test_get_quote_skips_persist_after_fetch_failure(error) -> None:
    store = FakeStore()
    service = QuoteService(FakeFetcher(error=error), store)

    with pytest.raises(FetchError):
        asyncio.run(service.get_quote())

    assert store.call_count == 0


def test_get_quote_times_out_slow_fetch_without_persisting(quote) -> None:
    store = FakeStore()
    service = QuoteService(FakeFetcher(quote, delay=1.0), store, fetch_timeout=0.05)

    with pytest.raises(FetchTimeoutError):
        asyncio.run(service.get_quote())

    assert store.call_count == 0


@pytest.mark.parametrize(
    "error",
    [
        StoreTimeoutError("inserção da cotação", 0.01),
        StoreConnectionError("sem banco"),
        InsertError("disco cheio"),
    ],
)
def test_get_quote_propagates_store_errors(quote, error) -> None:
    store = FakeStore(error=error)
    service = QuoteService(FakeFetcher(quote), store)

    with pytest.raises(StoreError) as exc:
        asyncio.run(service.get_quote())

    assert exc.value is error
    assert store.call_count == 1
