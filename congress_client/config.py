"""Client configuration."""

from dataclasses import dataclass

import settings
from congress_client.errors import ConfigurationError
from congress_client.schemas import ResponseFormat

ROOT_PATH = "us/legislative/congress"


def parse_timeout(value: str | float | None) -> float | None:
    """Seconds from an env value; empty or "none" means no timeout."""
    if value is None or str(value).strip().lower() in ("", "none"):
        return None
    try:
        timeout = float(value)
    except ValueError:
        raise ConfigurationError(f"Invalid timeout: {value!r}. Must be a number of seconds or empty") from None
    if timeout <= 0:
        raise ConfigurationError(f"Invalid timeout: {value!r}. Must be positive")
    return timeout


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings shared by every request of a client."""

    api_key: str
    api_version: str
    format: ResponseFormat = ResponseFormat.XML
    base_url: str = settings.API_BASE_URL
    timeout: float | None = settings.DEFAULT_TIMEOUT

    def __post_init__(self):
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError("api_key is required")
        if not self.api_version or not self.api_version.strip():
            raise ConfigurationError("api_version is required")
        try:
            fmt = ResponseFormat(str(self.format).lower())
        except ValueError:
            raise ConfigurationError(f"Unknown format: {self.format!r}. Must be one of: xml, json") from None
        object.__setattr__(self, "format", fmt)

    @property
    def root_uri(self) -> str:
        """Base path every resource path is built under."""
        return f"{self.base_url.rstrip('/')}/{self.api_version}/{ROOT_PATH}"

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfig":
        """Build config from CONGRESS_API_* environment settings."""
        values = {
            "api_key": settings.API_KEY,
            "api_version": settings.API_VERSION,
            "format": settings.API_FORMAT,
            "base_url": settings.API_BASE_URL,
            "timeout": settings.API_TIMEOUT,
        }
        values.update(overrides)
        values["timeout"] = parse_timeout(values["timeout"])
        return cls(**values)
