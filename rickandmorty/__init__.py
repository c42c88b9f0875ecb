"""rickandmorty: a paginated client for the Rick and Morty character API.

Quick Start:
    ```python
    import asyncio

    from rickandmorty import PaginationController

    async def main():
        controller = PaginationController()
        controller.subscribe(lambda state: print(len(state.records), state.error_message))

        await controller.load_first()
        if controller.has_next:
            await controller.load_next()

    asyncio.run(main())
    ```

Main Components:
    - `PaginationController`: observable state machine with `load_first()`,
      `load_next()` and `load_previous()`
    - `FetchGateway`: GETs a page, validates the status and decodes the body
    - `map_record()` / `map_envelope()`: raw payload to display-ready records
    - `formatting`: display-time fallbacks and table rendering
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from .config import PROD, ApiSystem
from .controller import PaginationController
from .errors import BadResponse, DecodingError, HttpError, InvalidRequest, NetworkError
from .gateway import FetchGateway, FirstPage, PageGateway, PageLink
from .mappers import map_envelope, map_record
from .models import ControllerState, PageEnvelope, Record

logger = logging.getLogger(__name__)

__all__ = [
    # controller.py
    "PaginationController",
    # gateway.py
    "FetchGateway",
    "FirstPage",
    "PageGateway",
    "PageLink",
    # mappers.py
    "map_record",
    "map_envelope",
    # models.py
    "Record",
    "PageEnvelope",
    "ControllerState",
    # errors.py
    "NetworkError",
    "InvalidRequest",
    "BadResponse",
    "HttpError",
    "DecodingError",
    # config.py
    "ApiSystem",
    "PROD",
]

try:
    __version__ = version("rickandmorty")
except PackageNotFoundError:
    __version__ = "0.0.0"
