"""HTTP access to the Scryfall card database."""

import json
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

import httpx

from .config import Settings, get_settings

logger = logging.getLogger("scrybot.client")


class ScrybotError(Exception):
    """Base class for scrybot errors."""


class TransportError(ScrybotError):
    """No HTTP response was obtained (DNS failure, refused connection, timeout)."""

    def __init__(self, url: str, message: str):
        super().__init__(f"Request to {url} failed: {message}")
        self.url = url


@dataclass(frozen=True)
class UpstreamResponse:
    """
    Normalized upstream response.

    Header names are lower-cased and the mapping is read-only, so
    ``response.headers["x-scryfall-card"]`` works whatever casing the
    server used.
    """

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""

    def __post_init__(self):
        normalized = {k.lower(): v for k, v in dict(self.headers).items()}
        object.__setattr__(self, "headers", MappingProxyType(normalized))

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    def json(self) -> Any:
        """Parse the body as JSON. Raises json.JSONDecodeError on malformed bodies."""
        return json.loads(self.body)

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "UpstreamResponse":
        return cls(
            status_code=response.status_code,
            headers=dict(response.headers.items()),
            body=response.text,
        )


class CardQueryClient:
    """
    Issues single GET requests and returns every HTTP response as data.

    Non-2xx statuses are not errors here; only a missing response
    (transport failure) raises.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            settings: Settings providing User-Agent and timeout; defaults to env
            http_client: Shared client to use instead of one per request
        """
        self.settings = settings or get_settings()
        self.http_client = http_client

    @property
    def headers(self) -> dict:
        return {
            "User-Agent": self.settings.user_agent,
            "Accept": "*/*",
        }

    async def fetch(self, url: str) -> UpstreamResponse:
        """
        GET ``url`` once.

        Returns:
            UpstreamResponse for any HTTP status

        Raises:
            TransportError: When no response was received
        """
        logger.debug(f"GET {url}", extra={"url": url})

        kwargs = {"headers": self.headers}
        if self.settings.timeout is not None:
            kwargs["timeout"] = self.settings.timeout

        try:
            if self.http_client is not None:
                resp = await self.http_client.get(url, **kwargs)
            else:
                async with httpx.AsyncClient() as client:
                    resp = await client.get(url, **kwargs)
        except httpx.TransportError as e:
            logger.warning(
                f"Transport error fetching {url}: {e!r}",
                extra={"url": url, "error": repr(e)},
            )
            raise TransportError(url, repr(e)) from e

        response = UpstreamResponse.from_httpx(resp)
        if not response.ok:
            logger.info(
                f"Upstream returned {response.status_code} for {url}",
                extra={"url": url, "status_code": response.status_code},
            )
        return response
