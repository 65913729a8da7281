"""Bills API client - recent bills, bill details."""

from congress_client.base import BaseClient
from congress_client.bills.schemas import BillType
from congress_client.schemas import Chamber, PageOptions


class BillsClient(BaseClient):
    """Client for bill endpoints."""

    async def recent_bills(
        self,
        congress: int,
        chamber: Chamber | str,
        type: BillType | str,
        options: PageOptions | None = None,
    ) -> str:
        """GET /{congress}/{chamber}/bills/{type} - 20 most recent bills of a type."""
        return await self._get(self._path(congress, chamber, "bills", type), options)

    async def member_bills(self, member_id: str, type: BillType | str, options: PageOptions | None = None) -> str:
        """GET /members/{id}/bills/{type} - bills recently introduced or updated by a member."""
        return await self._get(self._path("members", member_id, "bills", type), options)

    async def bill(self, congress: int, bill_id: str) -> str:
        """GET /{congress}/bills/{id} - bill details including actions."""
        return await self._get(self._path(congress, "bills", bill_id))

    async def bill_subjects(self, congress: int, bill_id: str) -> str:
        """GET /{congress}/bills/{id}/subjects."""
        return await self._get(self._path(congress, "bills", bill_id, "subjects"))

    async def bill_amendments(self, congress: int, bill_id: str) -> str:
        """GET /{congress}/bills/{id}/amendments."""
        return await self._get(self._path(congress, "bills", bill_id, "amendments"))

    async def related_bills(self, congress: int, bill_id: str) -> str:
        """GET /{congress}/bills/{id}/related."""
        return await self._get(self._path(congress, "bills", bill_id, "related"))

    async def bill_cosponsors(self, congress: int, bill_id: str) -> str:
        """GET /{congress}/bills/{id}/cosponsors."""
        return await self._get(self._path(congress, "bills", bill_id, "cosponsors"))
