from ..client import UpstreamResponse
from ..middleware import make_footer
from ..types import Attachment, QueryDescriptor, TransformChain
from .base import CardResponse

# Chat attachments render at most this many fields
MAX_COUNT = 25


class MultiResponse(CardResponse):
    """Full-text search listing every matching printing, one field each."""

    endpoint = "/cards/search"

    def default_transforms(self) -> TransformChain:
        return (make_footer(self.settings.footer, self.settings.footer_icon),)

    def build_query_descriptor(self) -> QueryDescriptor:
        # "++" asks for every printing, not just one per card
        return {"q": f"++{self.card_name}"}

    def build_attachment(self, response: UpstreamResponse) -> Attachment:
        card_list = response.json()

        if not isinstance(card_list, dict) or card_list.get("data") is None:
            return self.attachment(title=f"No results for {self.card_name}")

        fields = [
            {"value": f"<{card['scryfall_uri']}|{card['name']}> - {card['set_name']}"}
            for card in card_list["data"][:MAX_COUNT]
        ]
        total = card_list.get("total_cards", len(card_list["data"]))

        return self.attachment(
            fields=fields,
            title=f"{self.card_name} showing {len(fields)} of {total}",
        )
