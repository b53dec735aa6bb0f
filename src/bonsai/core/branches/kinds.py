"""
Branch kinds and their growth-direction tables.

Every kind maps to a table of bands over a single uniform draw ``u`` in
[0, 1). The first band whose ``upper`` bound exceeds ``u`` supplies the
``(dx, dy)`` step. The last band of every table ends at 1.0, so each lookup
is total.

Screen coordinates: ``dy = -1`` grows upward, ``dx = +1`` grows right.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Dict, NamedTuple, Tuple


class BranchKind(str, Enum):
    """Variant tag of a growing branch agent."""

    TRUNK = "trunk"
    SHOOT_LEFT = "shoot_left"
    SHOOT_RIGHT = "shoot_right"
    DYING = "dying"
    DEAD = "dead"

    @property
    def is_shoot(self) -> bool:
        return self in (BranchKind.SHOOT_LEFT, BranchKind.SHOOT_RIGHT)


class DirectionBand(NamedTuple):
    upper: float
    dx: int
    dy: int


DirectionTable = Tuple[DirectionBand, ...]

# Trunks start near-vertical before leaning into their rightward bias.
YOUNG_TRUNK_AGE = 4

YOUNG_TRUNK_TABLE: DirectionTable = (
    DirectionBand(0.3, 1, -1),
    DirectionBand(1.0, 0, -1),
)

DIRECTION_TABLES: Dict[BranchKind, DirectionTable] = {
    BranchKind.TRUNK: (
        DirectionBand(0.55, 1, -1),
        DirectionBand(0.85, 0, -1),
        DirectionBand(1.0, -1, -1),
    ),
    BranchKind.SHOOT_LEFT: (
        DirectionBand(0.4, -1, -1),
        DirectionBand(0.85, -1, 0),
        DirectionBand(1.0, 0, 0),
    ),
    BranchKind.SHOOT_RIGHT: (
        DirectionBand(0.4, 1, -1),
        DirectionBand(0.85, 1, 0),
        DirectionBand(1.0, 0, 0),
    ),
    BranchKind.DYING: (
        DirectionBand(0.3, 1, -1),
        DirectionBand(0.45, 1, 0),
        DirectionBand(0.9, -1, 0),
        DirectionBand(1.0, 0, 0),
    ),
    BranchKind.DEAD: (DirectionBand(1.0, 0, 0),),
}


def direction_table(kind: BranchKind, age: int) -> DirectionTable:
    """Return the band table used by ``kind`` at ``age``."""
    if kind is BranchKind.TRUNK and age < YOUNG_TRUNK_AGE:
        return YOUNG_TRUNK_TABLE
    return DIRECTION_TABLES[kind]


def pick_band(table: DirectionTable, u: float) -> Tuple[int, int]:
    for band in table:
        if u < band.upper:
            return band.dx, band.dy
    # u == 1.0 is outside random()'s range but keep the lookup total
    last = table[-1]
    return last.dx, last.dy


def choose_delta(kind: BranchKind, age: int, rng: random.Random) -> Tuple[int, int]:
    """Draw the next ``(dx, dy)`` for an agent of ``kind`` and ``age``."""
    return pick_band(direction_table(kind, age), rng.random())


def band_probabilities(table: DirectionTable) -> Dict[Tuple[int, int], float]:
    """Probability mass of each ``(dx, dy)`` outcome in ``table``."""
    masses: Dict[Tuple[int, int], float] = {}
    lower = 0.0
    for band in table:
        key = (band.dx, band.dy)
        masses[key] = masses.get(key, 0.0) + (band.upper - lower)
        lower = band.upper
    return masses


__all__ = [
    "BranchKind",
    "DirectionBand",
    "DirectionTable",
    "DIRECTION_TABLES",
    "YOUNG_TRUNK_AGE",
    "YOUNG_TRUNK_TABLE",
    "band_probabilities",
    "choose_delta",
    "direction_table",
    "pick_band",
]
