"""Base HTTP client - the single request path used by every endpoint."""

from typing import Any

import httpx
from loguru import logger

from congress_client.config import ClientConfig
from congress_client.errors import TransportError
from congress_client.paths import build_uri, redact_uri, resource_path
from congress_client.schemas import Options


class BaseClient:
    """Async Congress API client.

    Use as an async context manager to share one pooled connection across
    calls. Calls made outside the context still work: each one falls back to
    a one-shot client that is opened and closed around the single request.
    """

    def __init__(self, config: ClientConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._depth = 0
        self._request_count = 0
        self._fallback_count = 0
        logger.debug(
            "{}: version={}, format={}",
            self.__class__.__name__,
            config.api_version,
            config.format,
        )

    @classmethod
    def from_env(cls, transport: httpx.AsyncBaseTransport | None = None, **overrides):
        """Client configured from CONGRESS_API_* environment settings."""
        return cls(ClientConfig.from_env(**overrides), transport=transport)

    async def __aenter__(self):
        # Nested or concurrent entries share the session opened by the outermost one
        if self._depth == 0:
            self._client = self._new_client()
        self._depth += 1
        return self

    async def __aexit__(self, *_):
        self._depth -= 1
        if self._depth > 0:
            return
        logger.info("Total API requests: {} ({} via fallback)", self._request_count, self._fallback_count)
        if self._client:
            client, self._client = self._client, None
            await client.aclose()

    @property
    def request_count(self) -> int:
        return self._request_count

    @property
    def fallback_count(self) -> int:
        return self._fallback_count

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            follow_redirects=True,
            transport=self._transport,
        )

    def _path(self, *segments: Any) -> str:
        """Resource path under the configured root with the format suffix."""
        return resource_path(self.config.root_uri, *segments, fmt=self.config.format)

    def build_uri(self, path: str, options: Options | None = None) -> str:
        """Final URI for a resource path: api key first, then any options."""
        params = options.to_params() if options is not None else None
        return build_uri(path, self.config.api_key, params)

    async def _get(self, path: str, options: Options | None = None) -> str:
        """GET a resource path and return the raw body. Single attempt."""
        uri = self.build_uri(path, options)
        self._request_count += 1
        fallback = self._client is None

        try:
            if fallback:
                self._fallback_count += 1
                logger.warning("No open session, falling back to one-shot fetch for {}", redact_uri(uri))
                async with self._new_client() as client:
                    resp = await client.get(uri)
            else:
                resp = await self._client.get(uri)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(uri, status_code=e.response.status_code, cause=e, fallback=fallback) from None
        except httpx.HTTPError as e:
            raise TransportError(uri, cause=e, fallback=fallback) from None

        logger.debug("GET {} -> {}", redact_uri(uri), resp.status_code)
        return resp.text
