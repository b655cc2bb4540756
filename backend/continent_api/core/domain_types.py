"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ContinentKey enumerates exactly the 7 lookup keys served by the table
    - Lookup keys use underscores instead of spaces (north_america, not "north america")
    - SquareKilometers and Population are non-negative ints

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: members compare equal to plain request strings
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

SquareKilometers = NewType("SquareKilometers", int)
Population = NewType("Population", int)   # may be 0 (antarctica)


# ─── Enums ───────────────────────────────────────────────────────

class ContinentKey(str, Enum):
    """Lookup keys for the continent table, in table order."""
    ASIA = "asia"
    AFRICA = "africa"
    NORTH_AMERICA = "north_america"
    SOUTH_AMERICA = "south_america"
    ANTARCTICA = "antarctica"
    EUROPE = "europe"
    OCEANIA = "oceania"
