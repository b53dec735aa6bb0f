"""
Tests for branch kinds and direction tables.

Tests cover:
- Table totality
- Marginal probabilities per kind
- Young/mature trunk switch
- Band lookup at boundaries
"""

import random

import pytest

from bonsai.core.branches.kinds import (
    DIRECTION_TABLES,
    YOUNG_TRUNK_AGE,
    YOUNG_TRUNK_TABLE,
    BranchKind,
    band_probabilities,
    choose_delta,
    direction_table,
    pick_band,
)


def _marginal(table, axis: str, value: int) -> float:
    index = 0 if axis == "dx" else 1
    return sum(p for delta, p in band_probabilities(table).items() if delta[index] == value)


class TestTables:
    """Every kind has a total table."""

    @pytest.mark.parametrize("kind", list(BranchKind))
    def test_every_kind_has_table(self, kind):
        table = DIRECTION_TABLES[kind]
        assert table[-1].upper == 1.0

    @pytest.mark.parametrize("kind", list(BranchKind))
    def test_bands_are_increasing(self, kind):
        uppers = [band.upper for band in DIRECTION_TABLES[kind]]
        assert uppers == sorted(uppers)

    @pytest.mark.parametrize("kind", list(BranchKind))
    def test_masses_sum_to_one(self, kind):
        assert sum(band_probabilities(DIRECTION_TABLES[kind]).values()) == pytest.approx(1.0)


class TestMarginals:
    """Direction probabilities of each kind."""

    def test_young_trunk(self):
        masses = band_probabilities(YOUNG_TRUNK_TABLE)
        assert masses[(1, -1)] == pytest.approx(0.3)
        assert masses[(0, -1)] == pytest.approx(0.7)

    def test_mature_trunk(self):
        masses = band_probabilities(DIRECTION_TABLES[BranchKind.TRUNK])
        assert masses[(1, -1)] == pytest.approx(0.55)
        assert masses[(0, -1)] == pytest.approx(0.30)
        assert masses[(-1, -1)] == pytest.approx(0.15)

    def test_trunk_always_grows_up(self):
        for table in (YOUNG_TRUNK_TABLE, DIRECTION_TABLES[BranchKind.TRUNK]):
            assert _marginal(table, "dy", -1) == pytest.approx(1.0)

    def test_shoot_left(self):
        table = DIRECTION_TABLES[BranchKind.SHOOT_LEFT]
        assert _marginal(table, "dy", -1) == pytest.approx(0.4)
        assert _marginal(table, "dx", -1) == pytest.approx(0.85)
        assert _marginal(table, "dx", 1) == 0

    def test_shoot_right_mirrors_left(self):
        left = band_probabilities(DIRECTION_TABLES[BranchKind.SHOOT_LEFT])
        right = band_probabilities(DIRECTION_TABLES[BranchKind.SHOOT_RIGHT])
        mirrored = {(-dx, dy): p for (dx, dy), p in left.items()}
        assert mirrored.keys() == right.keys()
        for key, p in right.items():
            assert mirrored[key] == pytest.approx(p)

    def test_dying(self):
        table = DIRECTION_TABLES[BranchKind.DYING]
        assert _marginal(table, "dy", -1) == pytest.approx(0.3)
        assert _marginal(table, "dx", 1) == pytest.approx(0.45)
        assert _marginal(table, "dx", -1) == pytest.approx(0.45)
        assert _marginal(table, "dx", 0) == pytest.approx(0.10)

    def test_dead_never_moves(self):
        assert band_probabilities(DIRECTION_TABLES[BranchKind.DEAD]) == {(0, 0): 1.0}


class TestLookup:
    """Table selection and band lookup."""

    def test_trunk_table_switches_with_age(self):
        assert direction_table(BranchKind.TRUNK, YOUNG_TRUNK_AGE - 1) is YOUNG_TRUNK_TABLE
        assert direction_table(BranchKind.TRUNK, YOUNG_TRUNK_AGE) is DIRECTION_TABLES[BranchKind.TRUNK]

    def test_age_only_matters_for_trunk(self):
        assert direction_table(BranchKind.SHOOT_LEFT, 0) is DIRECTION_TABLES[BranchKind.SHOOT_LEFT]

    def test_band_boundaries(self):
        table = DIRECTION_TABLES[BranchKind.TRUNK]
        assert pick_band(table, 0.0) == (1, -1)
        assert pick_band(table, 0.549) == (1, -1)
        assert pick_band(table, 0.55) == (0, -1)
        assert pick_band(table, 0.85) == (-1, -1)
        assert pick_band(table, 0.999) == (-1, -1)

    def test_lookup_is_total_at_one(self):
        assert pick_band(DIRECTION_TABLES[BranchKind.DYING], 1.0) == (0, 0)

    def test_choose_delta_uses_rng(self):
        rng = random.Random(3)
        deltas = {choose_delta(BranchKind.SHOOT_RIGHT, 5, rng) for _ in range(200)}
        assert deltas <= {(1, -1), (1, 0), (0, 0)}
        assert len(deltas) == 3

    def test_choose_delta_dead(self):
        rng = random.Random(1)
        assert all(choose_delta(BranchKind.DEAD, age, rng) == (0, 0) for age in range(10))


class TestBranchKind:
    def test_is_shoot(self):
        assert BranchKind.SHOOT_LEFT.is_shoot
        assert BranchKind.SHOOT_RIGHT.is_shoot
        assert not BranchKind.TRUNK.is_shoot
        assert not BranchKind.DEAD.is_shoot

    def test_string_values(self):
        assert BranchKind("dying") is BranchKind.DYING
