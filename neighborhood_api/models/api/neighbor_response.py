# neighborhood_api/models/api/neighbor_response.py
"""
Neighbor API response models.
Used by routes for output formatting; field aliases give the camelCase keys
clients expect.
"""

from pydantic import BaseModel, ConfigDict, Field

from neighborhood_api.models.domain.neighbor_domain import EnrichedNeighbor


class NeighborResponse(BaseModel):
    """
    Response model for one leaderboard entry.

    slackId and slackFullName are single strings. Earlier clients received the raw
    Airtable lookup arrays for these two keys and must read the scalar now.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Airtable record ID")
    pfp: str | None = Field(None, description="Profile picture URL")
    slack_id: str | None = Field(None, alias="slackId", description="Slack user ID")
    slack_full_name: str | None = Field(None, alias="slackFullName", description="Name on Slack")
    github_username: str | None = Field(None, alias="githubUsername", description="GitHub username")
    full_name: str | None = Field(None, alias="fullName", description="Name on the roster")
    airport: str | None = Field(None, description="Home airport code")
    is_irl: bool = Field(False, alias="isIRL", description="Attending in person")
    weekly_hours: float = Field(..., ge=0, alias="weeklyHours", description="Hours logged this week")

    @classmethod
    def from_domain(cls, neighbor: EnrichedNeighbor) -> "NeighborResponse":
        record = neighbor.record
        return cls(
            id=record.id,
            pfp=record.pfp,
            slack_id=record.slack_id,
            slack_full_name=record.slack_full_name,
            github_username=record.github_username,
            full_name=record.full_name,
            airport=record.airport,
            is_irl=record.is_irl,
            weekly_hours=neighbor.weekly_hours,
        )


class NeighborsListResponse(BaseModel):
    """Response for the in-person leaderboard."""

    neighbors: list[NeighborResponse] = Field(..., description="Neighbors sorted by weekly hours")


class MessageResponse(BaseModel):
    """Error body used by the neighbors endpoints."""

    message: str = Field(..., description="Human readable message")
