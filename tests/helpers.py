from neighborhood_api.models.domain.neighbor_domain import (
    FIELD_AIRPORT,
    FIELD_FULL_NAME,
    FIELD_GITHUB_USERNAME,
    FIELD_IS_IRL,
    FIELD_PFP,
    FIELD_SLACK_FULL_NAME,
    FIELD_SLACK_ID,
    NeighborRecord,
)


def make_airtable_record(
    record_id: str,
    slack_id: str | None = None,
    full_name: str | None = None,
    airport: str | None = "SFO",
    is_irl: bool = True,
) -> dict:
    """Raw record in the shape Airtable returns for the Neighbors projection."""
    fields = {FIELD_AIRPORT: airport, FIELD_IS_IRL: is_irl}
    if slack_id:
        fields[FIELD_SLACK_ID] = [slack_id]
        fields[FIELD_SLACK_FULL_NAME] = [f"{full_name or slack_id} (slack)"]
        fields[FIELD_PFP] = [{"id": f"att-{record_id}", "url": f"https://img.example/{slack_id}.png"}]
    if full_name:
        fields[FIELD_FULL_NAME] = full_name
        fields[FIELD_GITHUB_USERNAME] = full_name.lower().replace(" ", "-")
    return {"id": record_id, "createdTime": "2025-01-01T00:00:00.000Z", "fields": fields}


def make_neighbor(record_id: str, slack_id: str | None = None) -> NeighborRecord:
    return NeighborRecord(
        id=record_id,
        pfp=None,
        slack_id=slack_id,
        slack_full_name=None,
        github_username=None,
        full_name=None,
        airport="SFO",
        is_irl=True,
    )


class FakeRoster:
    def __init__(self, neighbors: list[NeighborRecord] | None = None, error: Exception | None = None):
        self.neighbors = neighbors or []
        self.error = error
        self.calls = 0

    async def fetch_in_person_neighbors(self) -> list[NeighborRecord]:
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.neighbors)


class FakeActivity:
    def __init__(self, hours: dict[str, float] | None = None):
        self.hours = hours or {}
        self.calls: list[str] = []

    async def get_weekly_hours(self, slack_id: str, window=None) -> float:
        self.calls.append(slack_id)
        return self.hours.get(slack_id, 0.0)


