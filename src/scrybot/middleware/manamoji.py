"""Replace card symbols like {R} or {2/W} with chat emoji codes."""

import re

from ..types import Attachment

SYMBOL_PATTERN = re.compile(r"\{([^{}]+)\}")

# Symbols with a matching :mana-*: emoji
VALID_SYMBOL = re.compile(
    r"^(?:\d{1,2}|[WUBRGCXYZSTQEP]|[WUBRGC2]/[WUBRGP]|[WUBRG]/[WUBRG]/P|H[WUBRG]|½|∞)$"
)

FIELDS = ("title", "text")


def _emoji(match: re.Match) -> str:
    symbol = match.group(1).upper()
    if not VALID_SYMBOL.match(symbol):
        return match.group(0)
    name = symbol.replace("/", "").replace("½", "half").replace("∞", "infinity")
    return f":mana-{name.lower()}:"


def symbols_to_emoji(value: str) -> str:
    """
    Examples:
        "{2}{R}" -> ":mana-2::mana-r:"
        "{W/P}" -> ":mana-wp:"
        "{FOO}" -> "{FOO}"
    """
    return SYMBOL_PATTERN.sub(_emoji, value)


def manamoji(attachment: Attachment) -> Attachment:
    result = dict(attachment)
    for key in FIELDS:
        if isinstance(result.get(key), str):
            result[key] = symbols_to_emoji(result[key])
    return result
