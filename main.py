# main.py

import logging

import uvicorn
from fastapi import FastAPI

from app.api.quotes import build_router
from app.core.config import settings
from app.core.logging_config import configure_logging
from app.services.exchange import QuoteFetcher
from app.services.quote_store import QuoteStore
from app.services.quotes import Fetcher, QuoteService, Store

logger = logging.getLogger(__name__)


def create_app(fetcher: Fetcher | None = None, store: Store | None = None) -> FastAPI:
    app = FastAPI(
        title="Cotação USD/BRL",
        version="0.1.0",
    )

    service = QuoteService(
        fetcher=fetcher or QuoteFetcher(),
        store=store or QuoteStore(),
    )
    app.include_router(build_router(service))

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    logger.info("Servidor iniciado na porta %s...", settings.SERVER_PORT)
    uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT)
