"""
Attachment transforms applied after a response is parsed.

Each transform takes an attachment and returns a new one; none of them
mutate their input or raise on attachments lacking the fields they touch.
"""

from .ability_words import ability_words
from .footer import footer, make_footer
from .manamoji import manamoji
from .reminder_text import reminder_text

__all__ = [
    "ability_words",
    "footer",
    "make_footer",
    "manamoji",
    "reminder_text",
]
