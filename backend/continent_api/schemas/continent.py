"""Continent Schemas — Pydantic models for continent API responses.

Invariants:
    - ContinentOut field order is name, area, population (wire order)
    - model_dump_json() output is compact: no whitespace, no trailing newline
    - Numbers serialize unquoted; population 0 serializes as 0, never null

Design Decisions:
    - Pydantic serialization over hand-built string concatenation: correct
      escaping for free, field order follows declaration order
"""

from pydantic import BaseModel, ConfigDict

from continent_api.core.continent_table import ContinentRecord


class ContinentOut(BaseModel):
    """Public-facing continent record."""
    model_config = ConfigDict(frozen=True)

    name: str
    area: int
    population: int

    @classmethod
    def from_record(cls, record: ContinentRecord) -> "ContinentOut":
        return cls(
            name=record.name, area=record.area, population=record.population,
        )


class ContinentIndex(BaseModel):
    """Lookup keys served by GET /continents, in table order."""
    continents: list[str]
