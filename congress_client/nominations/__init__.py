"""Nominations API client."""

from congress_client.nominations.client import NominationsClient
from congress_client.nominations.schemas import NomineeCategory

__all__ = [
    "NominationsClient",
    "NomineeCategory",
]
