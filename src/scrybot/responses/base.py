"""Common contract for card response variants."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional
from urllib.parse import urlencode

from ..client import CardQueryClient, UpstreamResponse
from ..config import Settings, get_settings
from ..log_decorator import log_resolve
from ..types import Attachment, QueryDescriptor, TransformChain
from .assembly import resolve_attachment

logger = logging.getLogger("scrybot.responses")

UNKNOWN_REASON = "unknown reason"


def card_title(line: str) -> str:
    """
    Card name from a rendered name line, without its mana cost.

    Examples:
        "Lightning Bolt {R}" -> "Lightning Bolt"
        "Forest" -> "Forest"
    """
    return line.split("{", 1)[0].strip()


class CardResponse(ABC):
    """
    One way of answering a card query.

    Subclasses choose the endpoint and query parameters, turn the upstream
    response into an attachment, and list the transforms run afterwards.
    ``resolve()`` is the same for every variant.
    """

    endpoint = "/cards/named"

    def __init__(
        self,
        card_name: str,
        *,
        client: Optional[CardQueryClient] = None,
        settings: Optional[Settings] = None,
        transforms: Optional[Iterable] = None,
    ):
        """
        Args:
            card_name: User query, used verbatim
            client: Query client; a new one is built from settings if omitted
            settings: Defaults to the client's settings, then the environment
            transforms: Override the variant's default transform chain
        """
        self.card_name = card_name
        if settings is None:
            settings = client.settings if client is not None else get_settings()
        self.settings = settings
        self.client = client or CardQueryClient(settings)
        self.transforms: TransformChain = (
            tuple(transforms) if transforms is not None else self.default_transforms()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.card_name!r})"

    def default_transforms(self) -> TransformChain:
        return ()

    @abstractmethod
    def build_query_descriptor(self) -> QueryDescriptor:
        ...

    def build_url(self) -> str:
        return f"{self.settings.api_base}{self.endpoint}?{urlencode(self.build_query_descriptor())}"

    def parse_attachment(self, response: UpstreamResponse) -> Attachment:
        """Non-200 responses become a "No results" attachment for every variant."""
        if not response.ok:
            return self.error_attachment(response)
        return self.build_attachment(response)

    @abstractmethod
    def build_attachment(self, response: UpstreamResponse) -> Attachment:
        """Attachment for a 200 response."""

    def error_attachment(self, response: UpstreamResponse) -> Attachment:
        details = None
        try:
            error = response.json()
        except ValueError:
            logger.warning(
                f"Unparseable {response.status_code} body for {self.card_name!r}",
                extra={"card_name": self.card_name, "status_code": response.status_code},
            )
        else:
            if isinstance(error, dict):
                details = error.get("details")
        return self.attachment(
            title=f"No results for {self.card_name}, ({details or UNKNOWN_REASON})"
        )

    def name_title(self, line: str) -> str:
        """Card name from the name line, or the query when the line is only a cost."""
        return card_title(line) or self.card_name

    def attachment(self, **fields: Any) -> Attachment:
        """Attachment with the brand color; None values are dropped."""
        result = {k: v for k, v in fields.items() if v is not None}
        result["color"] = self.settings.color
        return result

    @log_resolve
    async def resolve(self) -> Attachment:
        return await resolve_attachment(self, self.client)
