"""
Growth engine.

Owns the grid and the set of live branch agents. Each ``advance_step`` moves
every live agent once and builds the next generation from survivors plus
their spawn; the engine is done when that generation is empty.
"""

from __future__ import annotations

import logging
import random
from typing import Any, List, Optional, Tuple

from bonsai.core.branches import BranchAgent, BranchKind
from bonsai.core.config import BonsaiConfig, build_config
from bonsai.core.grid import Grid, StyledCell, StyleTag
from bonsai.core.snapshot import GridSnapshot

logger = logging.getLogger(__name__)

POT_LINES: Tuple[str, ...] = (
    "\\___/",
    " |_| ",
)
POT_HALF_WIDTH = 2


class GrowthEngine:
    """Runs one tree: seed, advance step by step, serialize at any time."""

    def __init__(
        self,
        config: Optional[BonsaiConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        **options: Any,
    ):
        """
        Args:
            config: Base configuration (defaults when omitted)
            rng: Random source threaded through every draw
            seed: Seed for a fresh ``random.Random`` when ``rng`` is not given
            **options: Per-field overrides, validated with ``config``

        Raises:
            ConfigError: If the resulting configuration is invalid
        """
        self.config = build_config(config, **options) if options or config is None else config
        self.rng = rng if rng is not None else random.Random(seed)
        self.grid = Grid(self.config.rows, self.config.cols)
        self._agents: List[BranchAgent] = []
        self.step_count = 0

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def seed(self) -> BranchAgent:
        """Paint the pot and register the initial trunk just above it."""
        col = self.config.anchor_col
        row = self.config.pot_row
        self.draw_pot(row, col)

        trunk = BranchAgent(
            self.grid,
            col,
            row - 1,
            BranchKind.TRUNK,
            self.config.life_start,
            self.config,
            self.rng,
        )
        self._agents.append(trunk)
        logger.info("Seeded trunk at (%d, %d) with life %d", trunk.x, trunk.y, trunk.life)
        return trunk

    def draw_pot(self, row: int, col: int) -> None:
        for i, line in enumerate(POT_LINES):
            for j, char in enumerate(line):
                if char != " ":
                    self.grid.write(row + i, col - POT_HALF_WIDTH + j, char, StyleTag.POT)

    def advance_step(self) -> bool:
        """
        Move every live agent once.

        Returns:
            True while agents remain alive, False once the tree is finished.
            Calling again after False is a no-op that returns False.
        """
        if not self._agents:
            return False

        next_agents: List[BranchAgent] = []
        for agent in self._agents:
            result = agent.step()
            if result.alive:
                next_agents.append(agent)
            next_agents.extend(result.spawned)

        self._agents = next_agents
        self.step_count += 1

        if not next_agents:
            logger.info("Tree finished after %d steps (%d cells painted)", self.step_count, self.grid.painted_count())
        return bool(next_agents)

    def run(self, max_steps: Optional[int] = None) -> int:
        """Advance until finished (or ``max_steps``). Returns the steps taken."""
        taken = 0
        while max_steps is None or taken < max_steps:
            if not self._agents:
                break
            self.advance_step()
            taken += 1
        return taken

    def reset(self) -> None:
        """Drop all agents and start from a blank grid; configuration is kept."""
        self._agents = []
        self.grid = Grid(self.config.rows, self.config.cols)
        self.step_count = 0
        logger.info("Engine reset (%dx%d)", self.config.rows, self.config.cols)

    # =========================================================================
    # Inspection
    # =========================================================================

    @property
    def agents(self) -> Tuple[BranchAgent, ...]:
        return tuple(self._agents)

    @property
    def live_count(self) -> int:
        return len(self._agents)

    @property
    def is_finished(self) -> bool:
        return not self._agents

    def serialize(self) -> List[List[StyledCell]]:
        return self.grid.serialize()

    def to_html(self) -> str:
        return self.grid.to_html()

    def to_text(self) -> str:
        return self.grid.to_text()

    def snapshot(self) -> GridSnapshot:
        return GridSnapshot.from_grid(self.grid)


__all__ = ["GrowthEngine", "POT_LINES"]
