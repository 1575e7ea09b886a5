# app/models/quote.py

from __future__ import annotations

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base
from app.schemas.quote import Quote


class QuoteRecord(Base):
    """
    Histórico das cotações observadas. Só recebe INSERT:
    nenhuma linha é alterada ou apagada pela aplicação.
    """
    __tablename__ = "cotacoes"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # nomes das colunas = nomes dos campos no JSON da API
    code: Mapped[str] = mapped_column(Text, nullable=False)
    codein: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    high: Mapped[str] = mapped_column(Text, nullable=False)
    low: Mapped[str] = mapped_column(Text, nullable=False)
    var_bid: Mapped[str] = mapped_column("varBid", Text, nullable=False)
    pct_change: Mapped[str] = mapped_column("pctChange", Text, nullable=False)
    bid: Mapped[str] = mapped_column(Text, nullable=False)
    ask: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[str] = mapped_column(Text, nullable=False)
    create_date: Mapped[str] = mapped_column(Text, nullable=False)

    @staticmethod
    def values_from(quote: Quote) -> dict[str, str]:
        """Parâmetros do INSERT, chaveados pelo nome da coluna."""
        return quote.to_wire()
