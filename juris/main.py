"""
Ponto de entrada principal da API do Juris Gestão.

Este módulo configura a aplicação FastAPI com todas as rotas,
middlewares e handlers de exceção.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from juris.api.router import api_router
from juris.core.config import settings
from juris.core.logging import setup_logging
from juris.core.middleware import RequestContextMiddleware, setup_exception_handlers
from juris.db.base import Base
from juris.db.session import engine

# Registra os modelos no metadata
import juris.models  # noqa: F401

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia o ciclo de vida da aplicação."""
    # Startup
    setup_logging()
    logger.info(
        "Iniciando Juris Gestão API",
        version=settings.VERSION,
        environment=settings.ENVIRONMENT,
    )

    if settings.AUTO_CREATE_TABLES:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Tabelas criadas")

    yield

    # Shutdown
    await engine.dispose()
    logger.info("Encerrando Juris Gestão API")


def create_application() -> FastAPI:
    """Factory para criar a aplicação FastAPI."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Gestão de processos, prazos, audiências e honorários para escritórios de advocacia",
        version=settings.VERSION,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # request_id no contexto de log
    app.add_middleware(RequestContextMiddleware)

    # Erros no formato {message, errors?}
    setup_exception_handlers(app)

    # Rotas
    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


app = create_application()


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Health check fora do prefixo da API."""
    return {"status": "healthy", "version": settings.VERSION}
