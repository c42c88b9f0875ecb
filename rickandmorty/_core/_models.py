"""Raw wire models for the character collection payload."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Union

from ._validators import optional_str, require_fields, require_type

RECORD_REQUIRED_FIELDS = ("id", "name", "status", "species", "gender")


@dataclass(frozen=True)
class RawRecord:
    """One entry of ``results`` exactly as the provider sent it."""

    id: int
    name: str
    status: str
    species: str
    gender: str
    type: Optional[str] = None
    image: Optional[str] = None

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "RawRecord":
        require_type(payload, dict, "result")
        require_fields(payload, RECORD_REQUIRED_FIELDS)
        require_type(payload["id"], int, "id")
        for key in RECORD_REQUIRED_FIELDS[1:]:
            require_type(payload[key], str, key)
        return cls(
            id=payload["id"],
            name=payload["name"],
            status=payload["status"],
            species=payload["species"],
            gender=payload["gender"],
            type=optional_str(payload, "type"),
            image=optional_str(payload, "image"),
        )


@dataclass(frozen=True)
class RawPageInfo:
    """The ``info`` block: links to the neighbouring pages, if any."""

    next: Optional[str] = None
    prev: Optional[str] = None

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "RawPageInfo":
        require_type(payload, dict, "info")
        return cls(next=optional_str(payload, "next"), prev=optional_str(payload, "prev"))


@dataclass(frozen=True)
class RawEnvelope:
    """Container for one page of the character collection."""

    info: RawPageInfo
    results: List[RawRecord]

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "RawEnvelope":
        """Build an envelope from decoded JSON.

        Raises:
            ValueError: if a required field is missing or has the wrong type.
        """
        require_type(payload, dict, "envelope")
        require_fields(payload, ("info", "results"))
        require_type(payload["results"], list, "results")
        return cls(
            info=RawPageInfo.from_json(payload["info"]),
            results=[RawRecord.from_json(item) for item in payload["results"]],
        )

    @classmethod
    def from_bytes(cls, body: Union[bytes, str]) -> "RawEnvelope":
        """Decode a JSON response body.

        Raises:
            ValueError: if *body* is not valid JSON or not envelope shaped.
            RecursionError: if *body* is nested too deeply to decode.
        """
        return cls.from_json(json.loads(body))
