"""Continent Lookup Handler — path parameter → table lookup → wire response.

Invariants:
    - Table is read-only; handle() never mutates handler or table state
    - Hit: 200, application/json;charset=UTF-8, compact {"name","area","population"}
    - Miss: 500, text/plain;charset=UTF-8, "Continent <key> not found"
    - Lookup misses never propagate past handle() — it is their error boundary
    - MalformedPathError does propagate (routing precondition, 400 via global handler)

Design Decisions:
    - Returns a framework-free ContinentResponse; the route adapts it to Starlette
    - Synchronous: pure in-memory work, safe under event loop or threadpool
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from continent_api.core.continent_table import (
    ContinentTable, get_continent_table, lookup_continent,
)
from continent_api.core.errors import ContinentNotFoundError
from continent_api.core.path_params import (
    CONTINENTS_PREFIX, extract_path_parameter,
)
from continent_api.schemas.continent import ContinentOut

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json;charset=UTF-8"
TEXT_CONTENT_TYPE = "text/plain;charset=UTF-8"


@dataclass(frozen=True)
class ContinentResponse:
    """Status, content type and body produced for one request."""
    status_code: int
    content_type: str
    body: str


class ContinentLookupHandler:
    """Serves continent records for paths of the form <prefix><key>."""

    def __init__(
        self, table: ContinentTable, prefix: str = CONTINENTS_PREFIX,
    ):
        self._table = table
        self._prefix = prefix

    @property
    def table(self) -> ContinentTable:
        return self._table

    def handle(self, path: str) -> ContinentResponse:
        key = extract_path_parameter(path, self._prefix)
        try:
            record = lookup_continent(self._table, key)
        except ContinentNotFoundError as exc:
            logger.warning(
                exc.message,
                extra={
                    "continent_key": key, "path": path,
                    "status_code": exc.http_status, "error_code": exc.code,
                },
            )
            return ContinentResponse(
                status_code=exc.http_status,
                content_type=TEXT_CONTENT_TYPE,
                body=exc.message,
            )

        logger.debug(
            f"Continent {key} found",
            extra={"continent_key": key, "path": path, "status_code": 200},
        )
        return ContinentResponse(
            status_code=200,
            content_type=JSON_CONTENT_TYPE,
            body=ContinentOut.from_record(record).model_dump_json(),
        )


@lru_cache
def get_lookup_handler() -> ContinentLookupHandler:
    """Process-wide handler over the cached continent table."""
    return ContinentLookupHandler(get_continent_table())
