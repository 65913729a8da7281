"""Full Congress API client."""

import inspect

from congress_client.bills import BillsClient
from congress_client.committees import CommitteesClient
from congress_client.members import MembersClient
from congress_client.nominations import NominationsClient
from congress_client.votes import VotesClient


class CongressClient(MembersClient, VotesClient, BillsClient, NominationsClient, CommitteesClient):
    """Every endpoint on one client."""


# Public endpoint coroutines, by name
OPERATIONS = sorted(
    name
    for name, _ in inspect.getmembers(CongressClient, inspect.iscoroutinefunction)
    if not name.startswith("_")
)
