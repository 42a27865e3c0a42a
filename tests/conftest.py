"""Shared fixtures: fixed settings and a query client backed by httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest
import pytest_asyncio

from scrybot.client import CardQueryClient
from scrybot.config import Settings

BOLT_TEXT = (
    "Lightning Bolt {R}\n"
    "Instant\n"
    "Lightning Bolt deals 3 damage to any target."
)
BOLT_HEADERS = {
    "X-Scryfall-Card": "https://scryfall.com/card/clu/141/lightning-bolt",
    "X-Scryfall-Card-Image": "https://cards.scryfall.io/large/front/lightning-bolt.jpg",
}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_base="https://api.test",
        user_agent="scrybot-tests",
        footer="Scryfall",
        footer_icon=None,
    )


class RecordingHandler:
    """MockTransport handler returning a canned response and remembering requests."""

    def __init__(self, status_code: int = 200, body: str = "", headers: dict | None = None):
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body, headers=self.headers)


@pytest_asyncio.fixture
async def make_client(settings):
    """Yield a factory building a CardQueryClient around a handler; clients close on teardown."""
    http_clients: list[httpx.AsyncClient] = []

    def factory(handler) -> CardQueryClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return CardQueryClient(settings=settings, http_client=http_client)

    yield factory

    for http_client in http_clients:
        await http_client.aclose()


def search_body(count: int, total: int | None = None) -> str:
    cards = [
        {
            "name": f"Card {i}",
            "set_name": f"Set {i}",
            "scryfall_uri": f"https://scryfall.com/card/set/{i}",
        }
        for i in range(count)
    ]
    return json.dumps({"data": cards, "total_cards": count if total is None else total})
