"""Committees and floor schedule client."""

from congress_client.committees.client import CommitteesClient

__all__ = ["CommitteesClient"]
