"""Congress API client package."""

from congress_client.base import BaseClient
from congress_client.bills import BillsClient, BillType, CosponsorType
from congress_client.client import OPERATIONS, CongressClient
from congress_client.committees import CommitteesClient
from congress_client.config import ClientConfig
from congress_client.errors import CongressAPIError, ConfigurationError, TransportError
from congress_client.members import MemberListOptions, MembersClient
from congress_client.nominations import NominationsClient, NomineeCategory
from congress_client.schemas import Chamber, PageOptions, ResponseFormat
from congress_client.votes import VotesClient, VoteType

__all__ = [
    # Base
    "BaseClient",
    "ClientConfig",
    "OPERATIONS",
    # Clients
    "CongressClient",
    "MembersClient",
    "VotesClient",
    "BillsClient",
    "NominationsClient",
    "CommitteesClient",
    # Types
    "Chamber",
    "ResponseFormat",
    "BillType",
    "CosponsorType",
    "VoteType",
    "NomineeCategory",
    "MemberListOptions",
    "PageOptions",
    # Errors
    "CongressAPIError",
    "ConfigurationError",
    "TransportError",
]
