"""Members API client - rosters, bios, member comparisons."""

from congress_client.base import BaseClient
from congress_client.bills.schemas import CosponsorType
from congress_client.members.schemas import MemberListOptions
from congress_client.schemas import Chamber, PageOptions


class MembersClient(BaseClient):
    """Client for member endpoints."""

    async def members(self, congress: int, chamber: Chamber | str, options: MemberListOptions | None = None) -> str:
        """GET /{congress}/{chamber}/members - members of a chamber in a Congress."""
        return await self._get(self._path(congress, chamber, "members"), options)

    async def member(self, member_id: str) -> str:
        """GET /members/{id} - biographical and role information."""
        return await self._get(self._path("members", member_id))

    async def new_members(self) -> str:
        """GET /members/new - most recent new members of the current Congress."""
        return await self._get(self._path("members", "new"))

    async def current_members(self, chamber: Chamber | str, state: str, district: str | int | None = None) -> str:
        """GET /members/{chamber}/{state}[/{district}]/current - current members for a state.

        The district segment is only sent for House requests with a non-empty district.
        """
        segments = ["members", chamber, state]
        if chamber == Chamber.HOUSE and district not in (None, ""):
            segments.append(district)
        return await self._get(self._path(*segments, "current"))

    async def leaving_members(self, congress: int, chamber: Chamber | str) -> str:
        """GET /{congress}/{chamber}/members/leaving - members leaving office."""
        return await self._get(self._path(congress, chamber, "members", "leaving"))

    async def member_votes(self, member_id: str, options: PageOptions | None = None) -> str:
        """GET /members/{id}/votes - most recent vote positions."""
        return await self._get(self._path("members", member_id, "votes"), options)

    async def compare_votes(self, first_id: str, second_id: str, congress: int, chamber: Chamber | str) -> str:
        """GET /members/{id1}/votes/{id2}/{congress}/{chamber} - vote agreement of two members."""
        return await self._get(self._path("members", first_id, "votes", second_id, congress, chamber))

    async def member_cosponsored_bills(
        self,
        member_id: str,
        type: CosponsorType | str,
        options: PageOptions | None = None,
    ) -> str:
        """GET /members/{id}/bills/{cosponsored|withdrawn} - cosponsorships of a member."""
        return await self._get(self._path("members", member_id, "bills", type), options)

    async def compare_sponsorships(self, first_id: str, second_id: str, congress: int, chamber: Chamber | str) -> str:
        """GET /members/{id1}/bills/{id2}/{congress}/{chamber} - bills both members sponsored."""
        return await self._get(self._path("members", first_id, "bills", second_id, congress, chamber))

    async def floor_appearances(self, member_id: str, options: PageOptions | None = None) -> str:
        """GET /members/{id}/floor_appearances."""
        return await self._get(self._path("members", member_id, "floor_appearances"), options)

    async def state_party_counts(self) -> str:
        """GET /states/members/party - party counts per state, current Congress."""
        return await self._get(self._path("states", "members", "party"))
