"""Italicise and link ability words that open a line of card text."""

import re

from ..types import Attachment

WIKI_URL = "https://mtg.fandom.com/wiki/"

ABILITY_WORDS = (
    "Adamant",
    "Addendum",
    "Alliance",
    "Battalion",
    "Bloodrush",
    "Channel",
    "Chroma",
    "Cohort",
    "Constellation",
    "Converge",
    "Corrupted",
    "Coven",
    "Delirium",
    "Domain",
    "Eminence",
    "Enrage",
    "Fateful hour",
    "Ferocious",
    "Formidable",
    "Grandeur",
    "Hellbent",
    "Heroic",
    "Imprint",
    "Inspired",
    "Join forces",
    "Kinship",
    "Landfall",
    "Lieutenant",
    "Magecraft",
    "Metalcraft",
    "Morbid",
    "Pack tactics",
    "Parley",
    "Radiance",
    "Raid",
    "Rally",
    "Revolt",
    "Spectacle",
    "Spell mastery",
    "Strive",
    "Sweep",
    "Tempting offer",
    "Threshold",
    "Undergrowth",
    "Will of the council",
)

ABILITY_WORD_PATTERN = re.compile(
    r"^(" + "|".join(re.escape(w) for w in ABILITY_WORDS) + r") —", re.MULTILINE
)


def _link(match: re.Match) -> str:
    word = match.group(1)
    return f"_<{WIKI_URL}{word.replace(' ', '_')}|{word}>_ —"


def link_ability_words(text: str) -> str:
    """
    Examples:
        "Landfall — Whenever..." -> "_<https://mtg.fandom.com/wiki/Landfall|Landfall>_ — Whenever..."
    """
    return ABILITY_WORD_PATTERN.sub(_link, text)


def ability_words(attachment: Attachment) -> Attachment:
    result = dict(attachment)
    if isinstance(result.get("text"), str):
        result["text"] = link_ability_words(result["text"])
    return result
