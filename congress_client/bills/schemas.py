"""Bills API enums."""

from enum import StrEnum


class BillType(StrEnum):
    """Recent-bill listings."""

    INTRODUCED = "introduced"
    UPDATED = "updated"
    ACTIVE = "active"
    PASSED = "passed"
    ENACTED = "enacted"
    VETOED = "vetoed"


class CosponsorType(StrEnum):
    """Cosponsorship listings for a member."""

    COSPONSORED = "cosponsored"
    WITHDRAWN = "withdrawn"
