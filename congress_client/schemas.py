"""Shared enums and option structures."""

from enum import StrEnum

from pydantic import BaseModel, Field


class ResponseFormat(StrEnum):
    """Payload format, also the resource suffix."""

    XML = "xml"
    JSON = "json"


class Chamber(StrEnum):
    """Legislative chamber."""

    HOUSE = "house"
    SENATE = "senate"


class Options(BaseModel):
    """Base for optional query parameters of an endpoint."""

    class Config:
        extra = "forbid"
        frozen = True

    def to_params(self) -> dict:
        """Set fields only, in declaration order."""
        return self.model_dump(by_alias=True, exclude_none=True)


class PageOptions(Options):
    """Paging for list endpoints (the service pages by 20)."""

    offset: int | None = Field(default=None, ge=0)
