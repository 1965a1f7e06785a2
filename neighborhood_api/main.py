"""
FastAPI application with upstream client lifecycle management.
"""

import time
from contextlib import asynccontextmanager
from zoneinfo import ZoneInfo

from fastapi import FastAPI, Request

from neighborhood_api.config import Settings, settings
from neighborhood_api.infrastructure.observability.logging import (
    get_logger,
    log_request,
    setup_logging,
)
from neighborhood_api.middleware import RequestContextMiddleware
from neighborhood_api.routes import health, neighbors
from neighborhood_api.services.airtable.client import AirtableClient, AirtableConfig
from neighborhood_api.services.hackatime.client import HackatimeClient
from neighborhood_api.services.neighbors import (
    ActivityService,
    NeighborLeaderboardService,
    RosterService,
)

# Setup logging before creating the app
setup_logging(log_level=settings.LOG_LEVEL)
logger = get_logger(__name__)


def build_leaderboard_service(
    config: Settings,
) -> tuple[NeighborLeaderboardService, AirtableClient, HackatimeClient]:
    """Wire the leaderboard service and the HTTP clients it owns."""
    tz = ZoneInfo(config.LEADERBOARD_TIMEZONE) if config.LEADERBOARD_TIMEZONE else None

    airtable = AirtableClient(AirtableConfig.from_settings(config))
    hackatime = HackatimeClient(
        base_url=config.HACKATIME_BASE_URL,
        timeout=config.HACKATIME_TIMEOUT,
    )

    service = NeighborLeaderboardService(
        roster=RosterService(airtable, table=config.AIRTABLE_NEIGHBORS_TABLE),
        activity=ActivityService(hackatime, tz=tz),
        tz=tz,
    )
    return service, airtable, hackatime


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build upstream clients once per process and close them on shutdown."""
    logger.info("Application starting", environment=settings.environment, debug=settings.debug)

    if not (settings.NEIGHBORHOOD_AIRTABLE_API_KEY and settings.NEIGHBORHOOD_AIRTABLE_BASE_ID):
        logger.warning("Airtable credentials missing; roster requests will fail")

    service, airtable, hackatime = build_leaderboard_service(settings)
    app.state.leaderboard_service = service

    yield

    logger.info("Application shutting down")

    shutdown_errors = []

    for name, client in (("airtable", airtable), ("hackatime", hackatime)):
        try:
            await client.close()
        except Exception as e:
            logger.error("Error closing HTTP client", client=name, error=str(e))
            shutdown_errors.append(f"{name}: {e}")

    if shutdown_errors:
        logger.warning("Some clients had shutdown errors", errors=shutdown_errors)
    else:
        logger.info("All clients closed successfully")


app = FastAPI(
    title="Neighborhood API",
    description="Weekly Hackatime leaderboard for in-person neighbors",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(RequestContextMiddleware)

# Include routers
app.include_router(health.router)
app.include_router(neighbors.router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log HTTP requests with timing."""
    start_time = time.time()
    response = await call_next(request)
    process_time = (time.time() - start_time) * 1000

    log_request(
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round(process_time, 2),
        request_id=getattr(request.state, "request_id", None),
    )
    return response


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
