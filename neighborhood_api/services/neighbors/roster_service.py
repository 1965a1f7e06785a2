"""Roster of in-person neighbors from the Airtable Neighbors table."""

from neighborhood_api.infrastructure.observability.logging import get_logger
from neighborhood_api.models.domain.neighbor_domain import NEIGHBOR_FIELDS, NeighborRecord
from neighborhood_api.services.airtable.client import AirtableClient

logger = get_logger(__name__)

DEFAULT_TABLE = "Neighbors"
IN_PERSON_FORMULA = "isIRL = TRUE()"


class RosterService:
    def __init__(self, airtable: AirtableClient, table: str = DEFAULT_TABLE):
        self.airtable = airtable
        self.table = table

    async def fetch_in_person_neighbors(self) -> list[NeighborRecord]:
        """
        All neighbors flagged as in person, across every page.

        Raises:
            AirtableError: If the query fails
        """
        records = await self.airtable.list_records(
            self.table,
            fields=NEIGHBOR_FIELDS,
            filter_by_formula=IN_PERSON_FORMULA,
        )
        neighbors = [NeighborRecord.from_airtable(record) for record in records]

        logger.info("In-person roster fetched", table=self.table, neighbor_count=len(neighbors))
        return neighbors
