# neighborhood_api/models/domain/neighbor_domain.py
"""
Neighbor Domain Models
Domain models for roster records, activity spans and the weekly leaderboard.
Used by services for internal processing; routes convert them to API models.
"""

import math
from dataclasses import dataclass
from typing import Any

# Airtable field names projected from the Neighbors table
FIELD_PFP = "Pfp (from slackNeighbor)"
FIELD_SLACK_ID = "Slack ID (from slackNeighbor)"
FIELD_SLACK_FULL_NAME = "Full Name (from slackNeighbor)"
FIELD_GITHUB_USERNAME = "githubUsername"
FIELD_FULL_NAME = "Full Name"
FIELD_AIRPORT = "airport"
FIELD_IS_IRL = "isIRL"

NEIGHBOR_FIELDS = [
    FIELD_PFP,
    FIELD_SLACK_ID,
    FIELD_SLACK_FULL_NAME,
    FIELD_GITHUB_USERNAME,
    FIELD_FULL_NAME,
    FIELD_AIRPORT,
    FIELD_IS_IRL,
]


def _first_lookup_value(value: Any) -> Any:
    """Lookup fields come back from Airtable as arrays; take the first entry."""
    if isinstance(value, list):
        return value[0] if value else None
    return value


def _text_or_none(value: Any) -> str | None:
    value = _first_lookup_value(value)
    if value is None or value == "":
        return None
    return str(value)


@dataclass(frozen=True)
class WeekWindow:
    """Monday 00:00:00 to Sunday 23:59:59.999 as epoch seconds."""

    start: int
    end: int

    def contains(self, timestamp: float | None) -> bool:
        if timestamp is None:
            return False
        return self.start <= timestamp <= self.end


@dataclass(frozen=True)
class TimeSpan:
    """A contiguous interval of recorded activity from Hackatime."""

    start_time: float | None
    end_time: float | None
    duration: float

    @classmethod
    def from_api(cls, data: dict) -> "TimeSpan":
        if not isinstance(data, dict):
            raise ValueError(f"Span must be an object, got {type(data).__name__}")
        return cls(
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
            duration=data.get("duration") or 0,
        )


@dataclass(frozen=True)
class NeighborRecord:
    """An in-person neighbor as stored in the roster table."""

    id: str
    pfp: str | None
    slack_id: str | None
    slack_full_name: str | None
    github_username: str | None
    full_name: str | None
    airport: str | None
    is_irl: bool

    @classmethod
    def from_airtable(cls, record: dict) -> "NeighborRecord":
        fields = record.get("fields") or {}

        pfp = None
        attachment = _first_lookup_value(fields.get(FIELD_PFP))
        if isinstance(attachment, dict):
            pfp = attachment.get("url") or None

        return cls(
            id=record["id"],
            pfp=pfp,
            slack_id=_text_or_none(fields.get(FIELD_SLACK_ID)),
            slack_full_name=_text_or_none(fields.get(FIELD_SLACK_FULL_NAME)),
            github_username=_text_or_none(fields.get(FIELD_GITHUB_USERNAME)),
            full_name=_text_or_none(fields.get(FIELD_FULL_NAME)),
            airport=_text_or_none(fields.get(FIELD_AIRPORT)),
            is_irl=bool(fields.get(FIELD_IS_IRL, False)),
        )


def round_hours(hours: float) -> float:
    """Round to one decimal place, halves rounding up (0.25 -> 0.3)."""
    return math.floor(hours * 10 + 0.5) / 10


@dataclass(frozen=True)
class EnrichedNeighbor:
    """A roster record with this week's tracked hours attached."""

    record: NeighborRecord
    weekly_hours: float

    @classmethod
    def build(cls, record: NeighborRecord, hours: float) -> "EnrichedNeighbor":
        return cls(record=record, weekly_hours=round_hours(max(hours, 0.0)))
