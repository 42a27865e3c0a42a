"""Strip parenthesised reminder text from card text."""

import re

from ..types import Attachment

REMINDER_PATTERN = re.compile(r"\s*\([^()]*\)")


def strip_reminder_text(text: str) -> str:
    lines = []
    for line in text.split("\n"):
        stripped = REMINDER_PATTERN.sub("", line).rstrip()
        # A line that was only reminder text disappears entirely
        if line.strip() and not stripped.strip():
            continue
        lines.append(stripped)
    return "\n".join(lines)


def reminder_text(attachment: Attachment) -> Attachment:
    result = dict(attachment)
    if isinstance(result.get("text"), str):
        result["text"] = strip_reminder_text(result["text"])
    return result
