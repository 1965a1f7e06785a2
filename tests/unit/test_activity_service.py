from unittest.mock import AsyncMock

import httpx
import pytest

from neighborhood_api.models.domain.neighbor_domain import TimeSpan, WeekWindow
from neighborhood_api.services.hackatime.client import HackatimeError
from neighborhood_api.services.neighbors.activity_service import (
    ActivityService,
    sum_hours_in_window,
)

WINDOW = WeekWindow(start=1_704_067_200, end=1_704_671_999)


def _service(get_spans: AsyncMock) -> ActivityService:
    hackatime = AsyncMock()
    hackatime.get_spans = get_spans
    return ActivityService(hackatime)


def test_only_spans_ending_inside_window_count():
    spans = [
        TimeSpan(start_time=None, end_time=WINDOW.start + 10, duration=3600),
        TimeSpan(start_time=None, end_time=WINDOW.end + 100, duration=7200),
    ]

    assert sum_hours_in_window(spans, WINDOW) == 1.0


def test_window_edges_are_inclusive():
    spans = [
        TimeSpan(start_time=None, end_time=WINDOW.start, duration=1800),
        TimeSpan(start_time=None, end_time=WINDOW.end, duration=1800),
        TimeSpan(start_time=None, end_time=WINDOW.start - 1, duration=1800),
    ]

    assert sum_hours_in_window(spans, WINDOW) == 1.0


def test_span_without_duration_or_end_time_contributes_nothing():
    spans = [
        TimeSpan.from_api({"end_time": WINDOW.start + 5}),
        TimeSpan.from_api({"duration": 3600}),
    ]

    assert sum_hours_in_window(spans, WINDOW) == 0.0


@pytest.mark.asyncio
async def test_get_weekly_hours_sums_spans():
    get_spans = AsyncMock(
        return_value=[
            TimeSpan(start_time=None, end_time=WINDOW.start + 60, duration=5400),
            TimeSpan(start_time=None, end_time=WINDOW.start + 120, duration=1800),
        ]
    )
    service = _service(get_spans)

    hours = await service.get_weekly_hours("U123", WINDOW)

    assert hours == 2.0
    get_spans.assert_awaited_once_with("U123")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        HackatimeError("Hackatime API responded with status: 500", status_code=500),
        httpx.ConnectError("connection refused"),
        ValueError("bad payload"),
    ],
)
async def test_get_weekly_hours_degrades_to_zero(error):
    service = _service(AsyncMock(side_effect=error))

    hours = await service.get_weekly_hours("U123", WINDOW)

    assert hours == 0.0


@pytest.mark.asyncio
async def test_get_weekly_hours_uses_current_week_by_default(monkeypatch):
    monkeypatch.setattr(
        "neighborhood_api.services.neighbors.activity_service.get_week_window",
        lambda tz=None: WINDOW,
    )
    service = _service(
        AsyncMock(return_value=[TimeSpan(start_time=None, end_time=WINDOW.end, duration=360)])
    )

    assert await service.get_weekly_hours("U123") == 0.1
