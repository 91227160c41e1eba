"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from civic.config import Settings
from civic.interface.api.routes import (
    admin,
    comments,
    health,
    identity,
    location,
    topics,
    votes,
)
from civic.util.di.container import create_container, setup_di
from civic.util.observability import instrument_fastapi, instrument_httpx


async def _store_unavailable(request: Request, exc: Exception) -> JSONResponse:
    """Report data store failures as a retryable 503.

    The request transaction has already been rolled back by the time this runs.
    """
    logfire.error(
        "Data store error",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service temporarily unavailable, please try again"},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (defaults to the production container)
    """
    settings = Settings()

    # Instrument httpx for outbound geolocation requests
    instrument_httpx()

    app_instance = FastAPI(
        title="Civic Check API",
        description="Backend API for voting on and discussing municipal changes",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(SQLAlchemyError, _store_unavailable)

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(identity.router)
    app_instance.include_router(location.router)
    app_instance.include_router(topics.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(admin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
