"""
Neighbor API Routes
HTTP endpoint for the weekly in-person leaderboard.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from neighborhood_api.infrastructure.observability.logging import get_logger
from neighborhood_api.models.api.neighbor_response import (
    MessageResponse,
    NeighborResponse,
    NeighborsListResponse,
)
from neighborhood_api.services.airtable.client import AirtableError
from neighborhood_api.services.neighbors.leaderboard_service import NeighborLeaderboardService

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["neighbors"])

METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"
FETCH_ERROR_MESSAGE = "Error fetching in-person neighbors"

# Registered for every verb so non-GET calls get our body rather than FastAPI's default 405
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


def get_leaderboard_service(request: Request) -> NeighborLeaderboardService:
    """Leaderboard service built at startup (see main.lifespan)."""
    return request.app.state.leaderboard_service


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=MessageResponse(message=message).model_dump(),
    )


@router.api_route(
    "/getInPersonNeighbors",
    methods=ALL_METHODS,
    response_model=NeighborsListResponse,
    responses={
        405: {"model": MessageResponse},
        500: {"model": MessageResponse},
    },
)
async def get_in_person_neighbors(
    request: Request,
    service: NeighborLeaderboardService = Depends(get_leaderboard_service),
):
    """In-person neighbors with this week's Hackatime hours, most hours first."""
    if request.method != "GET":
        return _message(status.HTTP_405_METHOD_NOT_ALLOWED, METHOD_NOT_ALLOWED_MESSAGE)

    try:
        leaderboard = await service.get_in_person_leaderboard()

        return NeighborsListResponse(
            neighbors=[NeighborResponse.from_domain(neighbor) for neighbor in leaderboard]
        )

    except AirtableError as e:
        logger.error(
            "Error fetching in-person neighbors",
            error=str(e),
            status_code=e.status_code,
            error_type=e.error_type,
        )
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, FETCH_ERROR_MESSAGE)
    except Exception:
        logger.exception("Unexpected error building in-person leaderboard")
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, FETCH_ERROR_MESSAGE)
