"""Client errors."""

from congress_client.paths import redact_uri


class CongressAPIError(Exception):
    """Base error for the Congress API client."""


class ConfigurationError(CongressAPIError):
    """Invalid client configuration."""

    def __init__(self, message: str = "Invalid configuration"):
        self.message = message
        super().__init__(self.message)


class TransportError(CongressAPIError):
    """GET request failed: connection error, timeout or non-2xx status."""

    def __init__(
        self,
        uri: str,
        status_code: int | None = None,
        cause: BaseException | None = None,
        fallback: bool = False,
    ):
        self.uri = uri
        self.status_code = status_code
        self.cause = cause
        self.fallback = fallback

        if status_code is not None:
            reason = f"status {status_code}"
        else:
            reason = f"{type(cause).__name__}: {cause}" if cause else "unknown error"
        via = " (fallback fetch)" if fallback else ""
        self.message = f"GET {redact_uri(uri)} failed{via}: {reason}"
        super().__init__(self.message)
