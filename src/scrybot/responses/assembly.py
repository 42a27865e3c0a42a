"""Shared resolve algorithm: fetch, parse, then run the transform chain."""

from typing import TYPE_CHECKING, Iterable

from ..client import CardQueryClient
from ..types import Attachment, Transform

if TYPE_CHECKING:
    from .base import CardResponse


def apply_transforms(attachment: Attachment, transforms: Iterable[Transform]) -> Attachment:
    """Fold ``transforms`` left to right; each sees the previous one's output."""
    for transform in transforms:
        attachment = transform(attachment)
    return attachment


async def resolve_attachment(response: "CardResponse", client: CardQueryClient) -> Attachment:
    """
    Run one response variant end to end.

    Args:
        response: Variant supplying URL, parser and transform chain
        client: Query client issuing the single request

    Returns:
        The final attachment

    Raises:
        TransportError: When the request got no response
        ValueError: When the body cannot be parsed (e.g. json.JSONDecodeError)
    """
    upstream = await client.fetch(response.build_url())
    attachment = response.parse_attachment(upstream)
    if response.transforms:
        attachment = apply_transforms(attachment, response.transforms)
    return attachment
