"""Nominations API enums."""

from enum import StrEnum


class NomineeCategory(StrEnum):
    """Nomination lists by status."""

    RECEIVED = "received"
    UPDATED = "updated"
    CONFIRMED = "confirmed"
    WITHDRAWN = "withdrawn"
