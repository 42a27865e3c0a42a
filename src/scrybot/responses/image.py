from ..client import UpstreamResponse
from ..middleware import make_footer, manamoji
from ..types import Attachment, TransformChain
from .text import CARD_URL_HEADER, TextResponse

CARD_IMAGE_HEADER = "x-scryfall-card-image"


class ImageResponse(TextResponse):
    """Card image with the bare card name as title."""

    def default_transforms(self) -> TransformChain:
        return (make_footer(self.settings.footer, self.settings.footer_icon), manamoji)

    def build_attachment(self, response: UpstreamResponse) -> Attachment:
        first_line = response.body.split("\n", 1)[0]
        return self.attachment(
            image_url=response.headers.get(CARD_IMAGE_HEADER),
            title=self.name_title(first_line),
            title_link=response.headers.get(CARD_URL_HEADER),
        )
