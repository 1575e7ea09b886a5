from __future__ import annotations

from typing import Any, Generator

import pytest
from sqlalchemy import Engine

from app.core.database import build_engine
from app.schemas.quote import Quote
from app.services.quote_store import QuoteStore

QUOTE_PAYLOAD: dict[str, str] = {
    "code": "USD",
    "codein": "BRL",
    "name": "Dólar Americano/Real Brasileiro",
    "high": "5.0512",
    "low": "4.9871",
    "varBid": "0.0123",
    "pctChange": "0.25",
    "bid": "5.00",
    "ask": "5.0015",
    "timestamp": "1700000000",
    "create_date": "2023-11-14 19:13:20",
}


@pytest.fixture
def quote_payload() -> dict[str, str]:
    return dict(QUOTE_PAYLOAD)


@pytest.fixture
def upstream_payload(quote_payload: dict[str, str]) -> dict[str, Any]:
    return {"USDBRL": quote_payload}


@pytest.fixture
def quote(quote_payload: dict[str, str]) -> Quote:
    return Quote.model_validate(quote_payload)


@pytest.fixture
def engine(tmp_path) -> Generator[Engine, None, None]:
    engine = build_engine(f"sqlite:///{tmp_path / 'cotacoes.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine: Engine) -> QuoteStore:
    return QuoteStore(engine)
