"""Votes API client."""

from datetime import date

from congress_client.base import BaseClient
from congress_client.schemas import Chamber, PageOptions
from congress_client.votes.schemas import VoteType


class VotesClient(BaseClient):
    """Client for roll-call vote endpoints."""

    async def roll_call_vote(self, congress: int, chamber: Chamber | str, session: int, roll_call: int) -> str:
        """GET /{congress}/{chamber}/sessions/{session}/votes/{roll_call} - one vote with all positions."""
        return await self._get(self._path(congress, chamber, "sessions", session, "votes", roll_call))

    async def votes_by_type(
        self,
        congress: int,
        chamber: Chamber | str,
        vote_type: VoteType | str,
        options: PageOptions | None = None,
    ) -> str:
        """GET /{congress}/{chamber}/votes/{type} - missed, party, lone-no or perfect votes."""
        return await self._get(self._path(congress, chamber, "votes", vote_type), options)

    async def votes_by_month(self, chamber: Chamber | str, year: int, month: int) -> str:
        """GET /{chamber}/votes/{year}/{month}."""
        return await self._get(self._path(chamber, "votes", year, month))

    async def votes_by_date_range(self, chamber: Chamber | str, start: date | str, end: date | str) -> str:
        """GET /{chamber}/votes/{start}/{end} - votes in a range shorter than 30 days."""
        return await self._get(self._path(chamber, "votes", start, end))

    async def nomination_votes(self, congress: int, options: PageOptions | None = None) -> str:
        """GET /{congress}/nominations - Senate roll-call votes on nominations."""
        return await self._get(self._path(congress, "nominations"), options)
