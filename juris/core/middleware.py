"""
Middleware de tratamento de exceções.

Converte exceções em respostas HTTP padronizadas: `{message, errors?}`.
"""

import traceback
import uuid

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from juris.core.config import settings
from juris.core.exceptions import (
    ConstraintError,
    JurisException,
    ResourceNotFoundError,
    StorageError,
    ValidationError,
)
from juris.schemas.base import ErrorResponse
from juris.schemas.validation import field_errors

logger = structlog.get_logger()

# Mapeia exceções para status HTTP
STATUS_MAP: dict[type[JurisException], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ResourceNotFoundError: status.HTTP_404_NOT_FOUND,
    ConstraintError: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def create_error_response(
    status_code: int,
    message: str,
    errors: list[dict[str, str]] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Cria resposta de erro padronizada."""
    content = ErrorResponse(message=message, errors=errors).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def status_for(exc: JurisException) -> int:
    """Status HTTP da exceção (500 quando não mapeada)."""
    for exc_type, http_status in STATUS_MAP.items():
        if isinstance(exc, exc_type):
            return http_status
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def juris_exception_handler(request: Request, exc: JurisException) -> JSONResponse:
    """Handler para exceções da aplicação."""
    status_code = status_for(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        "Juris exception",
        code=exc.code,
        message=exc.message,
        path=request.url.path,
        details=exc.details,
    )

    errors = exc.errors if isinstance(exc, ValidationError) else None
    return create_error_response(status_code, exc.message, errors)


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Erros de validação do FastAPI viram 400 com a lista de campos."""
    errors = field_errors(exc.errors())
    logger.warning("Validation error", path=request.url.path, errors=errors)
    return create_error_response(
        status.HTTP_400_BAD_REQUEST,
        ValidationError().message,
        errors,
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Erros HTTP do framework (rota inexistente, método não permitido)."""
    return create_error_response(
        exc.status_code,
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler para exceções não tratadas."""
    logger.error(
        "Unhandled exception",
        exc_type=type(exc).__name__,
        message=str(exc),
        path=request.url.path,
        traceback=traceback.format_exc() if settings.DEBUG else None,
    )

    return create_error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Erro interno do servidor",
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Registra handlers de exceção na aplicação."""
    app.add_exception_handler(JurisException, juris_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)


class RequestContextMiddleware:
    """
    Middleware para adicionar contexto às requisições.

    Adiciona request_id ao contexto de log e ao header X-Request-ID.
    """

    def __init__(self, app: FastAPI):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = str(uuid.uuid4())[:8]

        # Bind request context to structlog
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=scope.get("path", ""),
            method=scope.get("method", ""),
        )

        # Add request_id header to response
        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((b"x-request-id", request_id.encode()))
                message["headers"] = headers
            await send(message)

        await self.app(scope, receive, send_wrapper)
