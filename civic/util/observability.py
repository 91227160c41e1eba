"""Observability configuration using Logfire.

Logfire provides:
- Structured logging with OpenTelemetry
- Tracing of requests, SQL and outbound lookups
- Integration with the libraries we use (FastAPI, SQLAlchemy, httpx)

Usage:
    import logfire

    # Structured logging
    logfire.info("Topic created", topic_id=str(topic.id))

    # Manual spans around domain operations
    with logfire.span("vote_service.cast_vote", topic_id=str(topic_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from civic.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Sets up Logfire with environment-specific configuration:
    - Development: local console only unless a token is provided
    - Production: sends to Logfire when a token is provided

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN to enable cloud sending
    - If the token is present, telemetry is sent by default
    - Can be explicitly controlled with OBSERVABILITY__SEND_TO_LOGFIRE

    Args:
        settings: Application settings
    """
    # Priority: explicit setting > token presence > default (False)
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "civic-backend",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
        # No sampling; vote and admin traffic is low volume
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Automatically traces:
    - Topic, vote, comment and location requests
    - Admin login and moderation requests
    - Request duration and errors (including 503s from the data store)

    Headers are not captured: cookies carry the admin session token.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        """Map request attributes, handling both HTTP and WebSocket requests."""
        result = {**attributes}

        # WebSocket scopes have no method
        if hasattr(request, "method"):
            result["method"] = request.method

        if hasattr(request, "url"):
            result["path"] = request.url.path

        # Direct peer only; X-Forwarded-For is resolved by the location route
        if hasattr(request, "client") and request.client:
            result["client_host"] = request.client.host

        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Automatically traces:
    - Vote upserts and deletes
    - Topic row locks (SELECT ... FOR UPDATE) and counter updates
    - Audit log inserts
    - Query duration and transaction boundaries

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Instrument httpx client with Logfire.

    Automatically traces:
    - ip-api.com lookups for the geo-fence IP fallback
    - Lookup latency and failures
    """
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
