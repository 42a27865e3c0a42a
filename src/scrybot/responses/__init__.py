from typing import Dict, Type

from .assembly import apply_transforms, resolve_attachment
from .base import CardResponse, card_title
from .image import ImageResponse
from .multi import MultiResponse
from .price import PriceResponse
from .text import TextResponse

RESPONSE_TYPES: Dict[str, Type[CardResponse]] = {
    "text": TextResponse,
    "image": ImageResponse,
    "price": PriceResponse,
    "multi": MultiResponse,
}


def make_response(kind: str, card_name: str, **kwargs) -> CardResponse:
    """
    Build the response variant registered under ``kind``.

    Raises:
        ValueError: If ``kind`` is not one of RESPONSE_TYPES
    """
    try:
        response_cls = RESPONSE_TYPES[kind]
    except KeyError:
        raise ValueError(
            f"Unknown response kind {kind!r}; expected one of {sorted(RESPONSE_TYPES)}"
        ) from None
    return response_cls(card_name, **kwargs)


__all__ = [
    "CardResponse",
    "TextResponse",
    "ImageResponse",
    "PriceResponse",
    "MultiResponse",
    "RESPONSE_TYPES",
    "make_response",
    "apply_transforms",
    "resolve_attachment",
    "card_title",
]
