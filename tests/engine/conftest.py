"""
Shared fixtures for growth engine tests.
"""

import random
from typing import Iterable, List, Optional

import pytest

from bonsai.core.branches import BranchAgent, BranchKind
from bonsai.core.config import BonsaiConfig
from bonsai.core.grid import Grid


class ScriptedRandom(random.Random):
    """Random source that replays fixed draws.

    ``random()`` pops from ``values`` (then returns ``fallback``), ``randint``
    pops from ``ints`` (then returns the lower bound) and ``choice`` picks the
    first element.
    """

    def __init__(self, values: Iterable[float] = (), ints: Iterable[int] = (), fallback: float = 0.99):
        super().__init__(0)
        self.values: List[float] = list(values)
        self.ints: List[int] = list(ints)
        self.fallback = fallback

    def random(self) -> float:
        if self.values:
            return self.values.pop(0)
        return self.fallback

    def randint(self, a: int, b: int) -> int:
        if self.ints:
            return self.ints.pop(0)
        return a

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def config() -> BonsaiConfig:
    return BonsaiConfig()


@pytest.fixture
def make_agent(config):
    """Factory for agents on a 40x40 grid."""

    def _make(
        kind: BranchKind = BranchKind.TRUNK,
        life: int = 10,
        *,
        age: int = 0,
        x: int = 20,
        y: int = 20,
        rng: Optional[random.Random] = None,
        agent_config: Optional[BonsaiConfig] = None,
        grid: Optional[Grid] = None,
    ) -> BranchAgent:
        agent = BranchAgent(
            grid or Grid(40, 40),
            x,
            y,
            kind,
            life,
            agent_config or config,
            rng or random.Random(0),
        )
        agent.age = age
        return agent

    return _make
