"""Members API client - rosters, bios, member comparisons."""

from congress_client.members.client import MembersClient
from congress_client.members.schemas import MemberListOptions

__all__ = [
    "MembersClient",
    "MemberListOptions",
]
