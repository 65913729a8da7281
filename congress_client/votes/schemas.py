"""Votes API enums."""

from enum import StrEnum


class VoteType(StrEnum):
    """Vote categories tracked per member."""

    MISSED = "missed"
    PARTY = "party"
    LONE_NO = "loneno"
    PERFECT = "perfect"
