"""API endpoint configuration."""

import os
from dataclasses import dataclass, replace

from typing_extensions import Self

BASE_URL_ENV = "RICKANDMORTY_API_URL"


@dataclass(frozen=True)
class ApiSystem:
    """Location of the character collection.

    Attributes:
        base_url: Root of the REST API, without a trailing slash.
        character_endpoint: Path of the character collection, relative to
            ``base_url``.
    """

    base_url: str
    character_endpoint: str = "/character"

    @property
    def character_url(self) -> str:
        """URL of the first page of the character collection."""
        return self.base_url.rstrip("/") + self.character_endpoint

    @classmethod
    def from_env(cls, default: "ApiSystem | None" = None) -> Self:
        """Build a system, letting ``RICKANDMORTY_API_URL`` override the base URL."""
        system = default or PROD
        base_url = os.environ.get(BASE_URL_ENV)
        if base_url:
            system = replace(system, base_url=base_url)
        return cls(system.base_url, system.character_endpoint)


PROD = ApiSystem(base_url="https://rickandmortyapi.com/api")
