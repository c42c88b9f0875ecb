"""Display-time helpers for records.

Records keep optional fields as ``None``; choosing the fallback text is left
to whoever renders them, so the same record can be shown as "N/A" in one
place and "No type" in another.
"""

import json
from dataclasses import asdict
from typing import Iterable, List, Optional, Sequence, Tuple

from tabulate import tabulate

from . import strings
from .models import Record

TABLE_HEADERS = ["id", "name", "status", "species", "type", "gender"]


def display_type(record: Record, fallback: str = strings.NO_TYPE) -> str:
    """Return the record's type, or *fallback* when it has none."""
    # the provider sends "" as well as null for "no type"
    return record.type or fallback


def detail_rows(
    record: Record, fallback: str = strings.NOT_AVAILABLE
) -> List[Tuple[str, str]]:
    """Label/value pairs for a record detail view."""
    return [
        (strings.STATUS, record.status),
        (strings.SPECIES, record.species),
        (strings.TYPE, display_type(record, fallback)),
        (strings.GENDER, record.gender),
    ]


def to_table(
    records: Iterable[Record],
    *,
    fallback: str = strings.NO_TYPE,
    headers: Optional[Sequence[str]] = None,
) -> str:
    """Render records as a GitHub style table using ``tabulate``."""
    rows = [
        [r.id, r.name, r.status, r.species, display_type(r, fallback), r.gender]
        for r in records
    ]
    return tabulate(rows, headers=headers or TABLE_HEADERS, tablefmt="github")


def to_json(records: Iterable[Record], *, indent: int = 2) -> str:
    """Serialize records to a pretty-printed JSON array.

    Absent optional fields are written as ``null``.
    """
    return json.dumps([asdict(r) for r in records], indent=indent)
