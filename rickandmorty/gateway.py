"""Fetch gateway: request, validate and decode pages of the collection.

The gateway exposes two narrow operations, ``fetch_first_page`` and
``fetch_page``, which share a single request/validate/decode routine
parameterized by a target descriptor (``FirstPage`` or ``PageLink``).

Requests are blocking (``requests``) and run in a worker thread through
``asyncio.to_thread`` so the calling task suspends without blocking the
event loop.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol, Union, runtime_checkable

import requests

from ._core._models import RawEnvelope
from ._core._request import RequestConfig, RequestsTransport, Transport
from ._core._validators import parse_url
from .config import ApiSystem
from .errors import BadResponse, DecodingError, HttpError, InvalidRequest

logger = logging.getLogger(__name__)

__all__ = [
    "FetchGateway",
    "FirstPage",
    "FirstPageFetcher",
    "PageFetcher",
    "PageGateway",
    "PageLink",
]


class FirstPageFetcher(Protocol):
    async def fetch_first_page(self) -> RawEnvelope: ...


class PageFetcher(Protocol):
    async def fetch_page(self, link: Optional[str]) -> RawEnvelope: ...


@runtime_checkable
class PageGateway(FirstPageFetcher, PageFetcher, Protocol):
    """Both fetch operations, as required by ``PaginationController``."""


@dataclass(frozen=True)
class FirstPage:
    """Target the fixed first page of the collection."""


@dataclass(frozen=True)
class PageLink:
    """Target an opaque link supplied by the provider."""

    link: Optional[str] = field(default=None)


FetchTarget = Union[FirstPage, PageLink]


class FetchGateway:
    """Fetch raw pages of the character collection over HTTP.

    Parameters:
        system: Where the collection lives; defaults to ``ApiSystem.from_env()``.
        transport: Blocking HTTP transport; defaults to ``RequestsTransport``.
        config: Per request settings (headers, timeout).

    No retries are performed: a failed fetch raises once.
    """

    def __init__(
        self,
        system: Optional[ApiSystem] = None,
        transport: Optional[Transport] = None,
        config: Optional[RequestConfig] = None,
    ) -> None:
        self.system = system or ApiSystem.from_env()
        self.transport = transport or RequestsTransport()
        self.config = config or RequestConfig()

    async def fetch_first_page(self) -> RawEnvelope:
        """Fetch the first page of the collection.

        Raises:
            NetworkError: one of its subclasses, on any failure.
        """
        return await self._fetch(FirstPage())

    async def fetch_page(self, link: Optional[str]) -> RawEnvelope:
        """Fetch the page behind *link*, as given by ``info.next``/``info.prev``.

        Raises:
            InvalidRequest: if *link* is absent or malformed; no request is made.
            NetworkError: one of its other subclasses, on any other failure.
        """
        return await self._fetch(PageLink(link))

    def _resolve(self, target: FetchTarget) -> str:
        raw = self.system.character_url if isinstance(target, FirstPage) else target.link
        if raw is None:
            raise InvalidRequest()
        url = parse_url(raw)
        if url is None:
            raise InvalidRequest(raw)
        return url

    async def _fetch(self, target: FetchTarget) -> RawEnvelope:
        url = self._resolve(target)

        try:
            response = await asyncio.to_thread(self.transport.get, url, self.config)
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise BadResponse(f"No response from {url}") from exc

        status_code = getattr(response, "status_code", None)
        if not isinstance(status_code, int) or isinstance(status_code, bool):
            raise BadResponse(f"Uninterpretable response from {url}")

        if not 200 <= status_code <= 299:
            logger.info("GET %s returned status %s", url, status_code)
            raise HttpError(status_code)

        try:
            envelope = RawEnvelope.from_bytes(response.body)
        except (ValueError, RecursionError) as exc:
            logger.info("Could not decode page from %s: %s", url, exc)
            raise DecodingError(str(exc)) from exc

        logger.debug(
            "Fetched %d results from %s (next=%s, prev=%s)",
            len(envelope.results),
            url,
            envelope.info.next,
            envelope.info.prev,
        )
        return envelope
