"""Core HTTP request wrapper used by the fetch gateway."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import MutableMapping, Optional, Protocol

import requests

log = logging.getLogger(__name__)


@dataclass
class RequestConfig:
    """Configuration for a single request.

    ``timeout`` defaults to ``None``: the transport waits for the server for
    as long as it takes.
    """

    method: str = "GET"
    headers: MutableMapping[str, str] = field(default_factory=dict)
    timeout: Optional[float] = None


@dataclass(frozen=True)
class TransportResponse:
    """Status and raw body of a completed HTTP exchange."""

    status_code: Optional[int]
    body: bytes = b""


class Transport(Protocol):
    """Anything able to perform a blocking GET and hand back status + body."""

    def get(
        self, url: str, config: RequestConfig
    ) -> Optional[TransportResponse]: ...


class RequestsTransport:
    """``Transport`` backed by a ``requests.Session``."""

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self.session = session or requests.Session()

    def get(self, url: str, config: RequestConfig) -> Optional[TransportResponse]:
        """Perform the request described by *config* against *url*.

        Raises:
            requests.RequestException: if the exchange itself failed.
        """
        headers = dict(config.headers)  # copy to avoid mutating caller data
        log.debug("%s %s", config.method, url)
        resp = self.session.request(
            method=config.method,
            url=url,
            headers=headers,
            timeout=config.timeout,
        )
        return TransportResponse(status_code=resp.status_code, body=resp.content)
