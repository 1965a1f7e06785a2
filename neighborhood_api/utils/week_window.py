"""
Calendar week boundaries for the weekly leaderboard.

Weeks run Monday to Sunday. Boundaries are computed in host local time unless
an aware reference instant or an explicit zone is supplied. Around DST
transitions the window is one hour shorter or longer than 7 days.
"""

import math
from datetime import date, datetime, time, timedelta, tzinfo

from neighborhood_api.models.domain.neighbor_domain import WeekWindow

END_OF_DAY = time(23, 59, 59, 999000)


def _epoch_seconds(day: date, at: time, tz: tzinfo | None) -> int:
    moment = datetime.combine(day, at, tzinfo=tz)
    return math.floor(moment.timestamp())


def get_week_window(now: datetime | None = None, tz: tzinfo | None = None) -> WeekWindow:
    """
    Compute the Monday-Sunday window containing a reference instant.

    Args:
        now: Reference instant (default: current time)
        tz: Zone for the boundaries (default: zone of `now`, else host local time)

    Returns:
        WeekWindow with integer epoch seconds
    """
    if now is None:
        now = datetime.now(tz)
    elif tz is not None:
        now = now.astimezone(tz) if now.tzinfo else now.replace(tzinfo=tz)

    zone = now.tzinfo
    monday = now.date() - timedelta(days=now.weekday())
    sunday = monday + timedelta(days=6)

    return WeekWindow(
        start=_epoch_seconds(monday, time.min, zone),
        end=_epoch_seconds(sunday, END_OF_DAY, zone),
    )
