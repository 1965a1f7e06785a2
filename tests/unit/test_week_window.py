from datetime import UTC, datetime, timedelta, timezone

import pytest

from neighborhood_api.utils.week_window import get_week_window

WEEK_SECONDS = 7 * 86400


@pytest.mark.parametrize(
    "now",
    [
        datetime(2024, 1, 1, 0, 0, tzinfo=UTC),  # Monday midnight
        datetime(2024, 1, 3, 15, 30, tzinfo=UTC),  # Wednesday
        datetime(2024, 1, 6, 23, 59, tzinfo=UTC),  # Saturday
        datetime(2024, 1, 7, 12, 0, tzinfo=UTC),  # Sunday goes back six days
    ],
)
def test_week_window_utc(now):
    window = get_week_window(now)

    assert window.start == int(datetime(2024, 1, 1, tzinfo=UTC).timestamp())
    assert window.end == int(datetime(2024, 1, 7, 23, 59, 59, tzinfo=UTC).timestamp())
    assert window.end - window.start == WEEK_SECONDS - 1


def test_week_window_host_local_time():
    window = get_week_window(datetime(2024, 5, 15, 9, 0))

    start = datetime.fromtimestamp(window.start)
    end = datetime.fromtimestamp(window.end)

    assert start == datetime(2024, 5, 13, 0, 0, 0)
    assert start.weekday() == 0
    assert end == datetime(2024, 5, 19, 23, 59, 59)
    assert end.weekday() == 6


def test_week_window_explicit_zone_shifts_boundaries():
    plus_ten = timezone(timedelta(hours=10))

    # Sunday 20:00 UTC is already Monday morning at UTC+10
    now = datetime(2024, 1, 7, 20, 0, tzinfo=UTC)
    utc_window = get_week_window(now)
    shifted_window = get_week_window(now, tz=plus_ten)

    assert shifted_window.start == int(datetime(2024, 1, 8, tzinfo=plus_ten).timestamp())
    assert shifted_window.start > utc_window.start
    assert shifted_window.end - shifted_window.start == WEEK_SECONDS - 1


def test_week_window_contains_is_inclusive():
    window = get_week_window(datetime(2024, 1, 3, tzinfo=UTC))

    assert window.contains(window.start)
    assert window.contains(window.end)
    assert not window.contains(window.start - 1)
    assert not window.contains(window.end + 1)
    assert not window.contains(None)


def test_week_window_defaults_to_now():
    window = get_week_window()
    now = datetime.now().timestamp()

    assert window.start <= now <= window.end + 1
