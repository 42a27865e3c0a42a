"""Turn card-name queries into chat attachments backed by Scryfall."""

__version__ = "0.1.0"

from .client import CardQueryClient, ScrybotError, TransportError, UpstreamResponse  # noqa: E402
from .config import Settings, get_settings  # noqa: E402
from .logging_config import JSONFormatter, setup_logging  # noqa: E402
from .responses import (  # noqa: E402
    RESPONSE_TYPES,
    CardResponse,
    ImageResponse,
    MultiResponse,
    PriceResponse,
    TextResponse,
    make_response,
)

__all__ = [
    "CardQueryClient",
    "ScrybotError",
    "TransportError",
    "UpstreamResponse",
    "Settings",
    "get_settings",
    "JSONFormatter",
    "setup_logging",
    "RESPONSE_TYPES",
    "CardResponse",
    "TextResponse",
    "ImageResponse",
    "PriceResponse",
    "MultiResponse",
    "make_response",
]
