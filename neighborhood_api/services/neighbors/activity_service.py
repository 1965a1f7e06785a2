"""
Weekly activity for a single neighbor, derived from Hackatime spans.
Failures never leave this module: a neighbor we cannot read counts 0 hours.
"""

from datetime import tzinfo

from neighborhood_api.infrastructure.observability.logging import get_logger
from neighborhood_api.models.domain.neighbor_domain import TimeSpan, WeekWindow
from neighborhood_api.services.hackatime.client import HackatimeClient
from neighborhood_api.utils.week_window import get_week_window

logger = get_logger(__name__)

SECONDS_PER_HOUR = 3600


def sum_hours_in_window(spans: list[TimeSpan], window: WeekWindow) -> float:
    """Total hours of spans whose end_time falls inside the window (inclusive)."""
    total_seconds = sum(span.duration or 0 for span in spans if window.contains(span.end_time))
    return total_seconds / SECONDS_PER_HOUR


class ActivityService:
    def __init__(self, hackatime: HackatimeClient, tz: tzinfo | None = None):
        self.hackatime = hackatime
        self.tz = tz

    async def get_weekly_hours(self, slack_id: str, window: WeekWindow | None = None) -> float:
        """
        Hours logged by a user in the given week (default: current week).

        Returns 0.0 on any upstream or payload error.
        """
        if window is None:
            window = get_week_window(tz=self.tz)

        try:
            spans = await self.hackatime.get_spans(slack_id)
            hours = sum_hours_in_window(spans, window)
        except Exception as e:
            logger.warning(
                "Error fetching Hackatime data",
                slack_id=slack_id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return 0.0

        return max(hours, 0.0)
