# app/api/quotes.py

import logging

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from app.core.errors import QuoteServiceError, StoreError
from app.schemas.quote import Quote
from app.services.quotes import QuoteService

logger = logging.getLogger(__name__)


def build_router(service: QuoteService) -> APIRouter:
    """
    Monta as rotas de cotação em cima de um serviço já configurado.
    Nos testes basta passar um serviço com fetcher/store falsos.
    """
    router = APIRouter(tags=["cotacao"])

    @router.get("/cotacao", response_model=Quote)
    async def get_cotacao():
        """
        Busca a cotação USD/BRL, grava no banco e devolve o par (sem o envelope "USDBRL").
        Só responde 200 se a gravação também deu certo.
        """
        try:
            return await service.get_quote()
        except StoreError as e:
            logger.error("Erro ao salvar cotação: %s", e)
            message = "Erro ao salvar cotação"
        except QuoteServiceError as e:
            logger.error("Erro ao obter cotação: %s", e)
            message = "Erro ao obter cotação"

        return PlainTextResponse(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return router
