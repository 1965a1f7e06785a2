"""
Weekly leaderboard of in-person neighbors.
Fetches the roster, looks up every neighbor's Hackatime hours concurrently and
sorts the result by hours, highest first.
"""

import asyncio
from datetime import tzinfo

from neighborhood_api.infrastructure.observability.logging import get_logger
from neighborhood_api.models.domain.neighbor_domain import (
    EnrichedNeighbor,
    NeighborRecord,
    WeekWindow,
)
from neighborhood_api.services.neighbors.activity_service import ActivityService
from neighborhood_api.services.neighbors.roster_service import RosterService
from neighborhood_api.utils.week_window import get_week_window

logger = get_logger(__name__)


class NeighborLeaderboardService:
    """
    Orchestrates roster and activity lookups for one request.

    Roster failures propagate to the caller. Activity lookups cannot fail, so
    the fan-out always joins with a full result set.
    """

    def __init__(self, roster: RosterService, activity: ActivityService, tz: tzinfo | None = None):
        self.roster = roster
        self.activity = activity
        self.tz = tz

    async def _enrich(self, record: NeighborRecord, window: WeekWindow) -> EnrichedNeighbor:
        if not record.slack_id:
            return EnrichedNeighbor.build(record, 0.0)

        hours = await self.activity.get_weekly_hours(record.slack_id, window)
        return EnrichedNeighbor.build(record, hours)

    async def get_in_person_leaderboard(self) -> list[EnrichedNeighbor]:
        """
        In-person neighbors with this week's hours, sorted descending.

        Raises:
            AirtableError: If the roster query fails
        """
        records = await self.roster.fetch_in_person_neighbors()
        window = get_week_window(tz=self.tz)

        enriched = await asyncio.gather(*(self._enrich(record, window) for record in records))

        leaderboard = sorted(enriched, key=lambda neighbor: neighbor.weekly_hours, reverse=True)

        logger.info(
            "Leaderboard built",
            neighbor_count=len(leaderboard),
            week_start=window.start,
            week_end=window.end,
        )
        return leaderboard
