"""FastAPI main application module."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ... import __version__
from ...application.exceptions import CarNotFoundError, UpstreamServiceError
from ...infrastructure.logging import get_logger, setup_logging_from_env
from ...infrastructure.services import initialize_services, shutdown_services
from .assembler import CARS_COLLECTION_TEMPLATE, LinkBuildError
from .config import Settings, get_settings
from .middleware import RequestResponseLoggingMiddleware
from .routes import cars, health


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    # Startup
    setup_logging_from_env(get_settings().log_level)
    logger.info("Starting Vehicles API")
    await initialize_services()

    yield

    # Shutdown
    logger.info("Shutting down Vehicles API")
    await shutdown_services()


def _error(status_code: int, detail: str, error_type: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "type": error_type, **extra}
    )


def add_exception_handlers(app: FastAPI) -> None:
    """Add custom exception handlers to the FastAPI application."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle malformed path parameters and payloads."""
        logger.warning(f"Malformed request on {request.url}: {len(exc.errors())} error(s)")
        return _error(
            status.HTTP_400_BAD_REQUEST,
            "Request does not match the documented format",
            "validation_error",
            errors=jsonable_encoder(exc.errors())
        )

    @app.exception_handler(ValidationError)
    async def response_validation_error_handler(request: Request, exc: ValidationError):
        """Handle invalid data produced while building a response."""
        logger.error(f"Response model error on {request.url}: {str(exc)}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error occurred", "runtime_error")

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        """Handle validation errors from business logic."""
        logger.warning(f"Validation error on {request.url}: {str(exc)}")
        return _error(status.HTTP_400_BAD_REQUEST, str(exc), "validation_error")

    @app.exception_handler(CarNotFoundError)
    async def car_not_found_handler(request: Request, exc: CarNotFoundError):
        """Handle lookups of unknown cars."""
        logger.warning(f"Not found on {request.url}: {str(exc)}")
        return _error(status.HTTP_404_NOT_FOUND, str(exc), "not_found")

    @app.exception_handler(UpstreamServiceError)
    async def upstream_error_handler(request: Request, exc: UpstreamServiceError):
        """Handle unavailable upstream dependencies."""
        logger.error(f"Upstream error on {request.url}: {str(exc)}")
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"Required {exc.service} service is unavailable",
            "upstream_unavailable"
        )

    @app.exception_handler(LinkBuildError)
    async def link_build_error_handler(request: Request, exc: LinkBuildError):
        """Handle failures building canonical resource URLs."""
        logger.error(f"Link build error on {request.url}: {str(exc)}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error occurred", "runtime_error")

    @app.exception_handler(RuntimeError)
    async def runtime_error_handler(request: Request, exc: RuntimeError):
        """Handle runtime errors from business logic."""
        logger.error(f"Runtime error on {request.url}: {str(exc)}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error occurred", "runtime_error")


def use_documented_error_responses(app: FastAPI) -> None:
    """Drop FastAPI's automatic 422 responses from the OpenAPI schema.

    Malformed requests are answered with 400 by the handlers above.
    """
    build_openapi = app.openapi

    def openapi() -> dict:
        if app.openapi_schema:
            return app.openapi_schema
        schema = build_openapi()
        for path_item in schema.get("paths", {}).values():
            for operation in path_item.values():
                operation.get("responses", {}).pop("422", None)
        app.openapi_schema = schema
        return schema

    app.openapi = openapi


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Vehicles API",
        description="REST API for maintaining vehicle inventory records",
        version=__version__,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    add_exception_handlers(app)
    use_documented_error_responses(app)

    if settings.log_requests:
        app.add_middleware(
            RequestResponseLoggingMiddleware,
            log_request_body=settings.log_request_body,
            max_body_size=settings.log_max_body_size
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=settings.cors_methods,
        allow_headers=settings.cors_headers,
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(cars.router, prefix=CARS_COLLECTION_TEMPLATE, tags=["cars"])

    return app


# Create app instance
app = create_app()
