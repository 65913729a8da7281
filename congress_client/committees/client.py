"""Committees and floor schedule client."""

from congress_client.base import BaseClient
from congress_client.schemas import Chamber


class CommitteesClient(BaseClient):
    """Client for committee and floor schedule endpoints."""

    async def committees(self, congress: int, chamber: Chamber | str) -> str:
        """GET /{congress}/{chamber}/committees."""
        return await self._get(self._path(congress, chamber, "committees"))

    async def committee(self, congress: int, chamber: Chamber | str, committee_id: str) -> str:
        """GET /{congress}/{chamber}/committees/{id} - committee members."""
        return await self._get(self._path(congress, chamber, "committees", committee_id))

    async def schedule(self, chamber: Chamber | str) -> str:
        """GET /{chamber}/schedule - today's floor schedule, current Congress only."""
        return await self._get(self._path(chamber, "schedule"))
