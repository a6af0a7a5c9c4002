# app/main.py
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.shared.config import settings, AppEnv
from app.shared.container import container
from app.shared.logging_config import configure_logging
from app.shared.telemetry import setup_telemetry, instrument_fastapi
from app.adapters.api.routers import candidates, health
from app.adapters.persistence.database import create_tables

logger = structlog.get_logger()

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application Lifecycle Manager.
    1. Startup: logging, telemetry, DI wiring, schema creation.
    2. Shutdown: releases the database pool.
    """
    configure_logging()
    setup_telemetry(settings.OTEL_SERVICE_NAME, __version__)

    logger.info("app_startup", env=settings.APP_ENV.value, storage=settings.STORAGE_BACKEND.value)

    # We must explicitly tell the container which modules use the @inject decorator.
    container.wire(modules=["app.adapters.api.dependencies"])

    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables(container.db_engine())
        logger.info("database_tables_ready")

    yield

    logger.info("app_shutdown")
    await container.db_engine().dispose()

def create_app() -> FastAPI:
    """
    Factory function to create the FastAPI application.
    """
    app = FastAPI(
        title="Candidate Intake API",
        version=__version__,
        description="Candidate registration with CV upload (Hexagonal Architecture)",
        docs_url="/docs" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        redoc_url="/redoc" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Auto-Instrument FastAPI for Tracing
    instrument_fastapi(app)

    # Global Exception Handlers: every error body carries a "message" key
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        content = exc.detail if isinstance(exc.detail, dict) else {"message": exc.detail}
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request.", "details": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions to avoid leaking stack traces in Prod.
        """
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "An unexpected error occurred." if not settings.DEBUG else str(exc)},
        )

    @app.get("/", tags=["System"])
    async def root():
        return {"message": "Candidate Intake API", "version": __version__}

    # Mount Routes (the intake form posts to /api/candidates)
    app.include_router(health.router)
    app.include_router(candidates.router)
    app.include_router(candidates.router, prefix="/api", include_in_schema=False)

    return app

# Entry point for Uvicorn
app = create_app()
