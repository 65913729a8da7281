"""Nominations API client - presidential civilian nominations."""

from congress_client.base import BaseClient
from congress_client.nominations.schemas import NomineeCategory


class NominationsClient(BaseClient):
    """Client for nominee endpoints."""

    async def nominees(self, congress: int, category: NomineeCategory | str) -> str:
        """GET /{congress}/nominees/{category}."""
        return await self._get(self._path(congress, "nominees", category))

    async def nominee(self, congress: int, nominee_id: str) -> str:
        """GET /{congress}/nominees/{id}."""
        return await self._get(self._path(congress, "nominees", nominee_id))

    async def nominees_by_state(self, congress: int, state: str) -> str:
        """GET /{congress}/nominees/state/{state} - 20 most recent nominees from a state."""
        return await self._get(self._path(congress, "nominees", "state", state))
