"""
Shared types for card responses.

Attachments use Slack's attachment keys so they can be posted as-is.
"""

from typing import Any, Callable, Dict, Tuple

# Brand color carried by every attachment
COLOR = "#431E3F"

Attachment = Dict[str, Any]
"""Chat attachment: text, title, title_link, image_url, color, fields, footer."""

QueryDescriptor = Dict[str, str]
"""Query parameters sent to the card database."""

Transform = Callable[[Attachment], Attachment]
"""Pure attachment rewrite applied after parsing."""

TransformChain = Tuple[Transform, ...]
