"""Members API options."""

from congress_client.schemas import Options


class MemberListOptions(Options):
    """Filters for a chamber's member list."""

    state: str | None = None
    district: str | int | None = None
