"""Continent Table — the fixed, read-only lookup table of continent records.

Invariants:
    - Exactly 7 entries, keyed by ContinentKey value
    - Table is a read-only mapping: no entry is added, removed, or mutated after build
    - Lookup is exact and case-sensitive ("Asia" and "asia2" are misses)
    - get_continent_table() is cached (lru_cache) — built once per process

Design Decisions:
    - MappingProxyType over a plain dict: shared across concurrent requests without locks
    - Frozen dataclass for records: immutable, hashable, no pydantic in core/
"""

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from continent_api.core.domain_types import (
    ContinentKey, Population, SquareKilometers,
)
from continent_api.core.errors import ContinentNotFoundError


@dataclass(frozen=True)
class ContinentRecord:
    """Display name, area in km², and population of one continent."""
    name: str
    area: SquareKilometers
    population: Population


ContinentTable = Mapping[str, ContinentRecord]


# (key, display name, area km², population), in table order
_CONTINENT_DATA: tuple[tuple[ContinentKey, str, int, int], ...] = (
    (ContinentKey.ASIA, "asia", 44_614_000, 4_700_000_000),
    (ContinentKey.AFRICA, "africa", 30_365_000, 1_400_000_000),
    (ContinentKey.NORTH_AMERICA, "north america", 24_230_000, 600_000_000),
    (ContinentKey.SOUTH_AMERICA, "south america", 17_814_000, 430_000_000),
    (ContinentKey.ANTARCTICA, "antarctica", 14_200_000, 0),
    (ContinentKey.EUROPE, "europe", 10_000_000, 750_000_000),
    (ContinentKey.OCEANIA, "australia/oceania", 8_510_900, 44_000_000),
)


def build_continent_table() -> ContinentTable:
    """Build a fresh read-only continent table from the literal data set."""
    return MappingProxyType({
        key.value: ContinentRecord(
            name=name,
            area=SquareKilometers(area),
            population=Population(population),
        )
        for key, name, area, population in _CONTINENT_DATA
    })


@lru_cache
def get_continent_table() -> ContinentTable:
    return build_continent_table()


def lookup_continent(table: ContinentTable, key: str) -> ContinentRecord:
    """Exact-match lookup. Raises ContinentNotFoundError on miss."""
    record = table.get(key)
    if record is None:
        raise ContinentNotFoundError(key)
    return record
