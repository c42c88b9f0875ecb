"""Observable pagination state machine.

``PaginationController`` owns a ``ControllerState`` snapshot and replaces it
on every transition. Observers registered with ``subscribe`` receive each
new snapshot exactly once, right after the swap.

The controller is meant to be driven from a single asyncio event loop. It
does not cancel or sequence fetches beyond the ``is_loading`` guard of
``load_next``/``load_previous``: ``load_first`` may start while another
fetch is in flight, and whichever fetch completes last decides the final
records and envelope.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from functools import partial
from typing import Any, Awaitable, Callable, List, Optional, Tuple

from ._core._models import RawEnvelope
from .config import ApiSystem
from .errors import NetworkError
from .gateway import FetchGateway, PageGateway
from .mappers import map_envelope
from .models import ControllerState, PageEnvelope, Record
from .strings import INITIAL_LOAD_FAILED, NEXT_PAGE_FAILED, PREVIOUS_PAGE_FAILED

logger = logging.getLogger(__name__)

Subscriber = Callable[[ControllerState], Any]


class PaginationController:
    """Load pages of the character collection and publish the result.

    Parameters:
        gateway: Object providing ``fetch_first_page`` and ``fetch_page``;
            defaults to a ``FetchGateway`` for *system*.
        system: API location used to build the default gateway.

    Examples:
        >>> controller = PaginationController()
        >>> await controller.load_first()  # doctest: +SKIP
        >>> [r.name for r in controller.records]  # doctest: +SKIP
        ['Rick Sanchez', 'Morty Smith', ...]
        >>> await controller.load_next()  # doctest: +SKIP
    """

    def __init__(
        self,
        gateway: Optional[PageGateway] = None,
        system: Optional[ApiSystem] = None,
    ) -> None:
        self.gateway: PageGateway = gateway or FetchGateway(system=system)
        self._state = ControllerState()
        self._subscribers: List[Subscriber] = []
        self._last_failed: Optional[Callable[[], Awaitable[None]]] = None

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._state.records

    @property
    def envelope(self) -> Optional[PageEnvelope]:
        return self._state.envelope

    @property
    def has_next(self) -> bool:
        return self._state.has_next

    @property
    def has_previous(self) -> bool:
        return self._state.has_previous

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def error_message(self) -> Optional[str]:
        return self._state.error_message

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback* to receive every new state snapshot.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    async def load_first(self) -> None:
        """Load the first page. Allowed at any time, even while loading."""
        await self._load(
            self.gateway.fetch_first_page, INITIAL_LOAD_FAILED, self.load_first
        )

    async def load_next(self) -> None:
        """Load the next page; no-op while loading or on the last page."""
        envelope = self._state.envelope
        if self._state.is_loading or envelope is None or envelope.next is None:
            return
        await self._load(
            partial(self.gateway.fetch_page, envelope.next),
            NEXT_PAGE_FAILED,
            self.load_next,
        )

    async def load_previous(self) -> None:
        """Load the previous page; no-op while loading or on the first page."""
        envelope = self._state.envelope
        if self._state.is_loading or envelope is None or envelope.previous is None:
            return
        await self._load(
            partial(self.gateway.fetch_page, envelope.previous),
            PREVIOUS_PAGE_FAILED,
            self.load_previous,
        )

    async def retry(self) -> None:
        """Re-invoke the operation whose failure set the current error message."""
        if self._state.error_message is None or self._last_failed is None:
            return
        await self._last_failed()

    async def _load(
        self,
        fetch: Callable[[], Awaitable[RawEnvelope]],
        failure_message: str,
        operation: Callable[[], Awaitable[None]],
    ) -> None:
        self._last_failed = None
        self._transition(is_loading=True, error_message=None, last_error=None)

        try:
            raw = await fetch()
        except NetworkError as exc:
            logger.warning("%s: %s", type(exc).__name__, exc)
            self._fail(exc, failure_message, operation)
            return
        except Exception as exc:
            logger.exception("Unexpected error while loading a page")
            error = NetworkError(str(exc))
            error.__cause__ = exc
            self._fail(error, failure_message, operation)
            return

        envelope = map_envelope(raw)
        self._transition(records=envelope.records, envelope=envelope, is_loading=False)

    def _fail(
        self,
        error: NetworkError,
        message: str,
        operation: Callable[[], Awaitable[None]],
    ) -> None:
        self._last_failed = operation
        self._transition(is_loading=False, error_message=message, last_error=error)

    def _transition(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)
        state = self._state
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception:
                logger.exception("State subscriber %r failed", callback)
