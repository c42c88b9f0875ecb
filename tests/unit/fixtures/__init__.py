"""Test fixture utilities: payload builders and an in-memory gateway.

Usage:
    from tests.unit.fixtures import FakeGateway, make_page, make_result

    gateway = FakeGateway({FIRST_PAGE_URL: make_page([make_result(1, "Rick")])})
"""

import asyncio
import copy
from typing import Any, Dict, List, Optional

from rickandmorty._core._models import RawEnvelope

BASE_URL = "https://api.test"
FIRST_PAGE_URL = f"{BASE_URL}/character"
PAGE_2_URL = f"{BASE_URL}/character?page=2"
PAGE_3_URL = f"{BASE_URL}/character?page=3"


def make_result(
    id: int,
    name: str,
    *,
    type: Optional[str] = None,
    image: Optional[str] = "https://img.test/avatar.jpeg",
) -> Dict[str, Any]:
    """Build one ``results`` entry as the provider sends it."""
    return {
        "id": id,
        "name": name,
        "status": "Alive",
        "species": "Human",
        "type": type,
        "gender": "Male",
        "image": image,
    }


def make_page(
    results: List[Dict[str, Any]],
    next: Optional[str] = None,
    prev: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a page envelope payload."""
    return {"info": {"next": next, "prev": prev}, "results": results}


class FakeGateway:
    """In-memory gateway keyed by URL.

    ``pages`` maps a URL (``FIRST_PAGE_URL`` for the first page) either to a
    payload dict or to an exception instance to raise. ``gates`` optionally
    maps a URL to an ``asyncio.Event`` the fetch waits on before answering.
    """

    def __init__(self, pages: Dict[Optional[str], Any]) -> None:
        self.pages = pages
        self.calls: List[Optional[str]] = []
        self.gates: Dict[Optional[str], asyncio.Event] = {}

    async def fetch_first_page(self) -> RawEnvelope:
        return await self._get(FIRST_PAGE_URL)

    async def fetch_page(self, link: Optional[str]) -> RawEnvelope:
        return await self._get(link)

    async def _get(self, url: Optional[str]) -> RawEnvelope:
        self.calls.append(url)
        if url in self.gates:
            await self.gates[url].wait()
        page = self.pages[url]
        if isinstance(page, Exception):
            raise page
        return RawEnvelope.from_json(copy.deepcopy(page))
