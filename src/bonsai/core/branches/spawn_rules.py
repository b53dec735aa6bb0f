"""
Spawn rules applied after an agent has moved.

A rule takes the agent (already advanced for this tick) and returns the new
agents it produced, possibly none. Rules may also mutate the agent itself
(cooldown, kind). Rules are registered per kind in ``SPAWN_RULES`` and run in
the order listed; none excludes another within the same tick.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable, Dict, List, Tuple

from bonsai.core.branches.kinds import BranchKind

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from bonsai.core.branches.agent import BranchAgent

logger = logging.getLogger(__name__)

SpawnRule = Callable[["BranchAgent"], List["BranchAgent"]]

# Trunk branching
TRUNK_MIN_AGE = 5
TRUNK_MIN_LIFE = 8
TRUNK_BASE_CHANCE = 0.15
TRUNK_MULTIPLIER_SCALE = 5
SHOOT_RIGHT_BIAS = 0.55
SHOOT_LIFE_RANGE = (0.4, 0.7)
SHOOT_COOLDOWN = 3

# Shoot self-branching
SHOOT_MIN_AGE = 3
SHOOT_MIN_LIFE = 6
SHOOT_BRANCH_CHANCE = 0.1
SHOOT_CHILD_LIFE_FACTOR = 0.5

# Leaf clustering
CLUSTER_LIFE_THRESHOLD = 5
CLUSTER_TRIALS = 3
CLUSTER_CHANCE = 0.5

# Trunk -> dying
DYING_LIFE_THRESHOLD = 8
DYING_CHANCE = 0.3


def trunk_shoot_chance(multiplier: float) -> float:
    return TRUNK_BASE_CHANCE * multiplier / TRUNK_MULTIPLIER_SCALE


def trunk_branching(agent: "BranchAgent") -> List["BranchAgent"]:
    """Mature trunks occasionally throw a left or right shoot."""
    if agent.kind is not BranchKind.TRUNK:
        return []
    if agent.age <= TRUNK_MIN_AGE or agent.shoot_cooldown != 0 or agent.life <= TRUNK_MIN_LIFE:
        return []
    rng = agent.rng
    if rng.random() >= trunk_shoot_chance(agent.config.multiplier):
        return []

    kind = BranchKind.SHOOT_RIGHT if rng.random() < SHOOT_RIGHT_BIAS else BranchKind.SHOOT_LEFT
    low, high = SHOOT_LIFE_RANGE
    life = math.floor(agent.life * (low + rng.random() * (high - low)))
    agent.shoot_cooldown = SHOOT_COOLDOWN
    logger.debug("Trunk at %s spawned %s (life=%d)", agent.position, kind.value, life)
    return [agent.spawn(kind, life)]


def shoot_self_branching(agent: "BranchAgent") -> List["BranchAgent"]:
    """Shoots fork into a shorter shoot of the same side."""
    if not agent.kind.is_shoot:
        return []
    if agent.age <= SHOOT_MIN_AGE or agent.life <= SHOOT_MIN_LIFE:
        return []
    if agent.rng.random() >= SHOOT_BRANCH_CHANCE:
        return []
    life = math.floor(agent.life * SHOOT_CHILD_LIFE_FACTOR)
    logger.debug("Shoot at %s forked (%s, life=%d)", agent.position, agent.kind.value, life)
    return [agent.spawn(agent.kind, life)]


def leaf_clustering(agent: "BranchAgent") -> List["BranchAgent"]:
    """Near the end of life, scatter single-tick leaf markers around the tip.

    Only agents that are still alive after this tick cluster; a tip that just
    reached zero leaves nothing behind.
    """
    if agent.kind is BranchKind.DEAD or not 0 < agent.life < CLUSTER_LIFE_THRESHOLD:
        return []
    rng = agent.rng
    leaves: List["BranchAgent"] = []
    for _ in range(CLUSTER_TRIALS):
        if rng.random() < CLUSTER_CHANCE:
            x = agent.x + rng.randint(-1, 1)
            y = agent.y + rng.randint(-1, 0)
            leaves.append(agent.spawn(BranchKind.DEAD, 1, x=x, y=y))
    return leaves


def trunk_to_dying(agent: "BranchAgent") -> List["BranchAgent"]:
    """An ageing trunk may turn into a dying, scattering segment."""
    if agent.kind is BranchKind.TRUNK and agent.life < DYING_LIFE_THRESHOLD:
        if agent.rng.random() < DYING_CHANCE:
            agent.kind = BranchKind.DYING
            logger.debug("Trunk at %s started dying (life=%d)", agent.position, agent.life)
    return []


SPAWN_RULES: Dict[BranchKind, Tuple[SpawnRule, ...]] = {
    BranchKind.TRUNK: (trunk_branching, leaf_clustering, trunk_to_dying),
    BranchKind.SHOOT_LEFT: (shoot_self_branching, leaf_clustering),
    BranchKind.SHOOT_RIGHT: (shoot_self_branching, leaf_clustering),
    BranchKind.DYING: (leaf_clustering,),
    BranchKind.DEAD: (),
}


def rules_for(kind: BranchKind) -> Tuple[SpawnRule, ...]:
    return SPAWN_RULES[kind]


__all__ = [
    "SPAWN_RULES",
    "SpawnRule",
    "leaf_clustering",
    "rules_for",
    "shoot_self_branching",
    "trunk_branching",
    "trunk_shoot_chance",
    "trunk_to_dying",
]
