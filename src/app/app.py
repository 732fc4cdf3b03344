"""Entrypoint do serviço de normalização de chargebacks.

Inicializa logging e expõe a aplicação ASGI (FastAPI). O pipeline
(registry de mapeamentos, avaliador e validador) é construído no
lifespan, antes de aceitar tráfego: se qualquer mapeamento falhar,
o processo não sobe.

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import build_pipeline, initialize_app, validate_runtime_settings
from config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from chargebacks.pipeline import ChargebackPipeline

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


def create_app(pipeline: ChargebackPipeline | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        pipeline: Pipeline já construído (testes). Se None, é construído
            no startup a partir das settings de ambiente.

    Returns:
        Aplicação FastAPI configurada.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Startup: valida settings e carrega mapeamentos (falha = não sobe)."""
        logger.info("app_starting", extra={"component": "app"})
        validate_runtime_settings()
        app.state.pipeline = pipeline if pipeline is not None else build_pipeline()

        yield

        logger.info("app_shutting_down", extra={"component": "app"})
        app.state.pipeline = None

    fastapi_app = FastAPI(
        title="Chargeback Mapper",
        description="Normalização de webhooks de chargeback por provider",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    fastapi_app.state.pipeline = pipeline

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"component": "app"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting chargeback-mapper in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
