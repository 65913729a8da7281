"""Votes API client."""

from congress_client.votes.client import VotesClient
from congress_client.votes.schemas import VoteType

__all__ = [
    "VotesClient",
    "VoteType",
]
