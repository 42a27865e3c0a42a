from ..client import UpstreamResponse
from ..middleware import ability_words, make_footer, manamoji, reminder_text
from ..types import Attachment, QueryDescriptor, TransformChain
from .base import CardResponse

CARD_URL_HEADER = "x-scryfall-card"


class TextResponse(CardResponse):
    """Full card text: name line as title, oracle text below."""

    def default_transforms(self) -> TransformChain:
        return (
            make_footer(self.settings.footer, self.settings.footer_icon),
            manamoji,
            reminder_text,
            ability_words,
        )

    def build_query_descriptor(self) -> QueryDescriptor:
        return {"fuzzy": self.card_name, "format": "text"}

    def build_attachment(self, response: UpstreamResponse) -> Attachment:
        title, _, text = response.body.partition("\n")
        return self.attachment(
            text=text,
            title=title,
            title_link=response.headers.get(CARD_URL_HEADER),
        )
