from urllib.parse import quote_plus

from ..client import UpstreamResponse
from ..middleware import make_footer
from ..types import Attachment, TransformChain
from .text import CARD_URL_HEADER, TextResponse

# (source name, search URL template taking the quoted card name)
PRICE_SOURCES = (
    ("TCGplayer", "https://www.tcgplayer.com/search/magic/product?q={}"),
    ("Cardmarket", "https://www.cardmarket.com/en/Magic/Products/Search?searchString={}"),
    ("Cardhoarder", "https://www.cardhoarder.com/cards?data%5Bsearch%5D={}"),
)


class PriceResponse(TextResponse):
    """One short field per price source, each linking to that source's listing."""

    def default_transforms(self) -> TransformChain:
        return (make_footer(self.settings.footer, self.settings.footer_icon),)

    def build_attachment(self, response: UpstreamResponse) -> Attachment:
        """
        Field values are links labelled "<source> price", not price figures:
        the text rendering carries no prices, so each link opens that
        source's search page for the card.
        """
        title = self.name_title(response.body.split("\n", 1)[0])
        quoted = quote_plus(title)
        fields = [
            {"title": source, "value": f"<{template.format(quoted)}|{source} price>", "short": True}
            for source, template in PRICE_SOURCES
        ]
        return self.attachment(
            fields=fields,
            title=title,
            title_link=response.headers.get(CARD_URL_HEADER),
        )
