# app/schemas/quote.py

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# Todos os valores chegam como texto ("5.2345"), inclusive os numéricos
class Quote(BaseModel):
    """Um par de moedas (ex.: USD/BRL) num instante, no formato plano da API."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
    )

    code: str = Field(min_length=1)
    codein: str = Field(min_length=1)
    name: str = Field(min_length=1)
    high: str = Field(min_length=1)
    low: str = Field(min_length=1)
    var_bid: str = Field(alias="varBid", min_length=1)
    pct_change: str = Field(alias="pctChange", min_length=1)
    bid: str = Field(min_length=1)
    ask: str = Field(min_length=1)
    timestamp: str = Field(min_length=1)
    create_date: str = Field(min_length=1)

    def to_wire(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


class UpstreamEnvelope(BaseModel):
    """Resposta da AwesomeAPI: o par vem embrulhado na chave "USDBRL"."""

    model_config = ConfigDict(frozen=True)

    USDBRL: Quote

    def unwrap(self) -> Quote:
        return self.USDBRL
