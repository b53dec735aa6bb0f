"""
Branch agent: one growing point of the tree.

Each ``step()`` picks a direction, paints a glyph at the current position,
moves, ages, and then runs the spawn rules registered for the agent's kind.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Tuple

from bonsai.core.branches.kinds import BranchKind, choose_delta
from bonsai.core.branches.spawn_rules import rules_for
from bonsai.core.config import BonsaiConfig
from bonsai.core.grid import Grid, StyleTag

# Agents with fewer ticks left than this paint leaves instead of wood.
LEAF_LIFE_THRESHOLD = 4


@dataclass
class StepResult:
    """Outcome of one agent step."""

    alive: bool
    spawned: List["BranchAgent"] = field(default_factory=list)


class BranchAgent:
    """A single trunk, shoot, dying segment or leaf marker."""

    def __init__(
        self,
        grid: Grid,
        x: int,
        y: int,
        kind: BranchKind,
        life: int,
        config: BonsaiConfig,
        rng: random.Random,
    ):
        self.grid = grid
        self.x = x
        self.y = y
        self.kind = kind
        self.life = life
        self.config = config
        self.rng = rng
        self.age = 0
        self.dx = 0
        self.dy = -1
        self.shoot_cooldown = 0

    def spawn(self, kind: BranchKind, life: int, x: int | None = None, y: int | None = None) -> "BranchAgent":
        """Create an independent child sharing this agent's grid, config and rng."""
        return BranchAgent(
            self.grid,
            self.x if x is None else x,
            self.y if y is None else y,
            kind,
            life,
            self.config,
            self.rng,
        )

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    def choose_char(self) -> Tuple[str, StyleTag]:
        """Pick the glyph for the current direction, or a leaf near the end of life."""
        if self.kind is BranchKind.DEAD or self.life < LEAF_LIFE_THRESHOLD:
            return self.rng.choice(self.config.leaf_chars), StyleTag.LEAF

        if self.dy < 0:
            if self.dx < 0:
                return "\\", StyleTag.BRANCH
            if self.dx > 0:
                return "/", StyleTag.BRANCH
        elif self.dy == 0 and self.dx != 0:
            return "~", StyleTag.BRANCH
        return "|", StyleTag.BRANCH

    def step(self) -> StepResult:
        """Advance one tick. Agents with no life left are not touched."""
        if self.life <= 0:
            return StepResult(alive=False)

        self.dx, self.dy = choose_delta(self.kind, self.age, self.rng)
        symbol, style = self.choose_char()
        self.grid.write(self.y, self.x, symbol, style)

        self.x += self.dx
        self.y += self.dy
        self.life -= 1
        self.age += 1
        if self.shoot_cooldown > 0:
            self.shoot_cooldown -= 1

        spawned: List[BranchAgent] = []
        for rule in rules_for(self.kind):
            spawned.extend(rule(self))

        return StepResult(alive=self.life > 0, spawned=spawned)

    def __repr__(self) -> str:
        return (
            f"BranchAgent(kind={self.kind.value}, x={self.x}, y={self.y}, "
            f"life={self.life}, age={self.age}, cooldown={self.shoot_cooldown})"
        )


__all__ = ["BranchAgent", "LEAF_LIFE_THRESHOLD", "StepResult"]
