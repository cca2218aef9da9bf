"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from datastream_validator.api.routes import health, validation
from datastream_validator.config import get_settings
from datastream_validator.utils.logging_config import configure_logging

# Configure logging before doing anything else
configure_logging()
from datastream_validator.utils.exceptions import (
    DatastreamValidatorError,
    ValidationError,
)

settings = get_settings()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Starting Datastream Validator", version=settings.app_version)
    yield
    logger.info("Shutting down Datastream Validator")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Structural signature and consistency checks for image, document, audio and video datastreams",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # Request-ID middleware: binds a per-request ID into the structlog context.
    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        response: Response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    # Exception handlers
    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": "Validation Error",
                "detail": exc.message,
                "code": "VALIDATION_ERROR",
            },
        )

    @app.exception_handler(DatastreamValidatorError)
    async def service_error_handler(
        request: Request, exc: DatastreamValidatorError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={
                "error": "Service Error",
                "detail": exc.message,
                "code": "SERVICE_ERROR",
            },
        )

    # Include routers
    app.include_router(health.router)

    # API v1 routers
    app.include_router(
        validation.router,
        prefix=settings.api_prefix,
    )

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "datastream_validator.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
