"""Pure transformations from raw wire models into domain models."""

from ._core._models import RawEnvelope, RawRecord
from ._core._validators import parse_url
from .models import PageEnvelope, Record


def map_record(raw: RawRecord) -> Record:
    """Map a raw result into a ``Record``.

    Optional fields keep their absence: a missing ``type`` stays ``None``
    and the image link is parsed lazily by ``Record.image_url``.
    """
    return Record(
        id=raw.id,
        name=raw.name,
        status=raw.status,
        species=raw.species,
        gender=raw.gender,
        type=raw.type,
        image=raw.image,
    )


def map_envelope(raw: RawEnvelope) -> PageEnvelope:
    """Map a raw envelope into a ``PageEnvelope``.

    A navigation link that does not parse as a URL is dropped, which only
    disables the matching navigation action.
    """
    return PageEnvelope(
        next=parse_url(raw.info.next),
        previous=parse_url(raw.info.prev),
        records=tuple(map_record(result) for result in raw.results),
    )
