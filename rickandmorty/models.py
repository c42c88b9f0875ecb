"""Domain models exposed to the presentation layer.

``Record`` and ``PageEnvelope`` are produced by the mappers in
``rickandmorty.mappers``; ``ControllerState`` is the snapshot published by
``PaginationController``. All three are frozen: a new instance replaces the
old one on every change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ._core._validators import parse_url
from .errors import NetworkError


@dataclass(frozen=True)
class Record:
    """One character of the collection, ready for display.

    Attributes:
        id: Display key, unique within a page.
        name: Character name.
        status: Free-form status reported by the provider ("Alive", "Dead", ...).
        species: Free-form species.
        gender: Free-form gender.
        type: Sub-type of the species, ``None`` when the provider sent none.
            Fallback text is chosen at display time, see
            ``rickandmorty.formatting.display_type``.
        image: Raw avatar link as sent by the provider, if any.
    """

    id: int
    name: str
    status: str
    species: str
    gender: str
    type: Optional[str] = None
    image: Optional[str] = None

    @property
    def image_url(self) -> Optional[str]:
        """The avatar URL, or ``None`` when absent or malformed."""
        return parse_url(self.image)


@dataclass(frozen=True)
class PageEnvelope:
    """One page of records together with its navigation links.

    The links are opaque: they are only ever handed back to the gateway.
    """

    next: Optional[str] = None
    previous: Optional[str] = None
    records: Tuple[Record, ...] = ()

    @property
    def has_next(self) -> bool:
        return self.next is not None

    @property
    def has_previous(self) -> bool:
        return self.previous is not None


@dataclass(frozen=True)
class ControllerState:
    """Read-only snapshot of a ``PaginationController``.

    Attributes:
        records: Records of the page currently displayed.
        envelope: The last successfully loaded page, ``None`` before the
            first successful load.
        is_loading: True while a fetch is in flight.
        error_message: User-facing text set by a failed fetch and cleared
            when the next fetch starts.
        last_error: The typed error behind ``error_message``.
    """

    records: Tuple[Record, ...] = ()
    envelope: Optional[PageEnvelope] = None
    is_loading: bool = False
    error_message: Optional[str] = None
    last_error: Optional[NetworkError] = None

    @property
    def has_next(self) -> bool:
        return self.envelope is not None and self.envelope.has_next

    @property
    def has_previous(self) -> bool:
        return self.envelope is not None and self.envelope.has_previous
