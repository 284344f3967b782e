"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ensresolve import __version__
from ensresolve.api.routes import health_router, resolve_router
from ensresolve.api.schemas import APIError, ErrorDetail
from ensresolve.config import get_settings
from ensresolve.core.exceptions import (
    EnsResolveError,
    InvalidFormatError,
    NotFoundError,
    UnrecognizedSuffixError,
    ValidationError,
)
from ensresolve.logging_config import configure_logging
from ensresolve.resolution.registry import ResolverRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Configures logging and builds the resolver registry from settings.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Initializing resolver registry...")
    app.state.resolver_registry = ResolverRegistry.from_settings(settings)
    logger.info(
        f"Application startup complete (provider order: {settings.provider_order})"
    )

    yield

    # Adapters open a client per call, so there is nothing to close
    logger.info("Application shutdown complete")


def _error_response(status_code: int, code: str, exc: EnsResolveError) -> JSONResponse:
    field = None
    details = dict(exc.details)
    if isinstance(exc, (InvalidFormatError, UnrecognizedSuffixError)):
        field = "identifier"
        details["identifier"] = exc.identifier
    if isinstance(exc, UnrecognizedSuffixError):
        details["suffix"] = exc.suffix

    body = APIError(
        error=ErrorDetail(
            code=code,
            message=exc.message,
            field=field,
            details=details or None,
        )
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Map classification errors to 422."""
    code = "UNRECOGNIZED_SUFFIX" if isinstance(exc, UnrecognizedSuffixError) else "INVALID_FORMAT"
    return _error_response(422, code, exc)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    """Map an empty resolution outcome to 404."""
    return _error_response(404, "NOT_FOUND", exc)


def create_app(
    *,
    title: str = "ensresolve API",
    description: str = "Naming-service identifier classification and resolution API",
    version: str = __version__,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        version: API version
        cors_origins: List of allowed CORS origins

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Configure CORS
    if cors_origins is None:
        cors_origins = get_settings().cors_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(resolve_router, prefix="/api/v1")

    return app


# For uvicorn direct execution
app = create_app()


def main() -> None:
    """Serve the API with uvicorn using settings from the environment."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "ensresolve.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
