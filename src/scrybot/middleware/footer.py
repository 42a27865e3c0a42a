"""Footer stamp identifying the data source."""

from typing import Optional

from ..config import DEFAULT_FOOTER, DEFAULT_FOOTER_ICON
from ..types import Attachment, Transform


def make_footer(text: str = DEFAULT_FOOTER, icon: Optional[str] = DEFAULT_FOOTER_ICON) -> Transform:
    """
    Build a footer transform.

    Sets the footer keys instead of appending text, so stamping twice
    yields the same attachment.
    """

    def footer(attachment: Attachment) -> Attachment:
        stamped = dict(attachment)
        stamped["footer"] = text
        if icon:
            stamped["footer_icon"] = icon
        return stamped

    return footer


footer = make_footer()
