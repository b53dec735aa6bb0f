"""
Branch agents and their rule tables.

Components:
- BranchKind: variant tag (trunk, shoots, dying, dead)
- DIRECTION_TABLES / choose_delta: per-kind direction distributions
- SPAWN_RULES: per-kind spawn and transition rules
- BranchAgent: one growing point
"""

from bonsai.core.branches.agent import LEAF_LIFE_THRESHOLD, BranchAgent, StepResult
from bonsai.core.branches.kinds import DIRECTION_TABLES, BranchKind, choose_delta
from bonsai.core.branches.spawn_rules import SPAWN_RULES

__all__ = [
    "BranchAgent",
    "BranchKind",
    "DIRECTION_TABLES",
    "LEAF_LIFE_THRESHOLD",
    "SPAWN_RULES",
    "StepResult",
    "choose_delta",
]
