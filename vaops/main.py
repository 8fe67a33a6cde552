"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional
import logging

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

from vaops.application.dto.base_dto import HealthCheckResponseDTO
from vaops.config import Settings, get_settings
from vaops.infrastructure.auth.supabase_auth import SupabaseIdentityService
from vaops.infrastructure.db.database import Database
from vaops.infrastructure.events.event_setup import initialize_event_system
from vaops.infrastructure.rendering.report_renderer import ReportRenderer
from vaops.infrastructure.web.middleware.error_handler import ErrorHandlerMiddleware
from vaops.infrastructure.web.routers import clients, invoices, time_reports

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def init_sentry(settings: Settings) -> bool:
    """Initialize Sentry when a DSN is configured outside development."""
    if not settings.sentry_dsn or settings.is_development:
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        traces_sample_rate=settings.sentry_traces_sample_rate,
        environment=settings.environment,
        integrations=[
            FastApiIntegration(transaction_style="endpoint"),
            SqlalchemyIntegration(),
        ],
    )
    logger.info("Sentry initialized")
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Every shared resource is created here and released on shutdown.
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")

    init_sentry(settings)

    owns_database = getattr(app.state, "database", None) is None
    if owns_database:
        app.state.database = Database(settings.database_url, echo=settings.debug)
    if not settings.is_production:
        app.state.database.create_all()

    app.state.event_dispatcher = initialize_event_system()
    app.state.identity = SupabaseIdentityService.from_settings(settings)
    app.state.report_renderer = ReportRenderer()

    yield

    # Shutdown
    logger.info("Shutting down application")
    app.state.event_dispatcher.close()
    if owns_database:
        app.state.database.dispose()
        app.state.database = None


def create_application(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
        redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
        openapi_url=f"{settings.api_prefix}/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.database = database

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add custom error handler middleware
    app.add_middleware(ErrorHandlerMiddleware, debug=settings.debug)

    # Include routers
    app.include_router(
        time_reports.router,
        prefix=f"{settings.api_prefix}/time-reports",
        tags=["Time Reports"]
    )
    app.include_router(
        invoices.router,
        prefix=f"{settings.api_prefix}/invoices",
        tags=["Invoices"]
    )
    app.include_router(
        clients.router,
        prefix=f"{settings.api_prefix}/clients",
        tags=["Clients"]
    )

    # Root endpoint
    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "environment": settings.environment,
            "docs": f"{settings.api_prefix}/docs" if settings.debug else None,
            "health": f"{settings.api_prefix}/health"
        }

    # Health check endpoint
    @app.get(f"{settings.api_prefix}/health", response_model=HealthCheckResponseDTO)
    async def health_check() -> HealthCheckResponseDTO:
        """Health check endpoint for monitoring."""
        return HealthCheckResponseDTO(
            status="healthy",
            environment=settings.environment,
            version=settings.api_version
        )

    # Custom 404 handler
    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc):
        """Custom 404 error handler."""
        detail = getattr(exc, "detail", None)
        if isinstance(detail, dict):
            return JSONResponse(status_code=404, content={"detail": detail})
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "message": f"The path {request.url.path} was not found",
                "path": request.url.path
            }
        )

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "vaops.main:create_application",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )
