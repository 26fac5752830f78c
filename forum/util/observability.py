"""Logfire setup for the forum API.

Spans wrap every ledger mutation so a single request shows the reaction
change and the resulting point delta side by side:

    import logfire

    with logfire.span("reaction_service.like", reactable_id=str(post_id)):
        ...
    logfire.info("Points applied", user_id=str(author_id), delta=3)
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.config import ObservabilitySettings, Settings

# Load balancer probes hit this every few seconds
UNTRACED_PATHS = ("/health",)


def should_send(observability: ObservabilitySettings) -> bool:
    """Decide whether spans leave the process.

    An explicit ``send_to_logfire`` wins; otherwise a token turns sending on.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send(settings.observability)

    logfire.configure(
        service_name="forum-api",
        service_version=settings.version,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire ready",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace requests to the forum routes.

    Headers stay out of spans because they carry the bearer token and the
    ``access_token`` cookie.

    Args:
        app: FastAPI application instance
    """

    def _route_attributes(request, attributes):
        route = request.scope.get("route")
        return {
            **attributes,
            "route": getattr(route, "path", request.url.path),
        }

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=",".join(UNTRACED_PATHS),
        request_attributes_mapper=_route_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace ledger and repository SQL."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace uploads to and deletes from the image host."""
    logfire.instrument_httpx()
