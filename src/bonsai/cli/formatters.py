"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from typing import Union

from rich.table import Table

from bonsai.core.config import BonsaiConfig
from bonsai.core.engine.growth_engine import GrowthEngine
from bonsai.core.snapshot import TreeRecord


def format_leaf_chars(chars) -> str:
    return " ".join(chars)


def build_config_table(config: BonsaiConfig) -> Table:
    table = Table(title="Configuration", show_header=True, header_style="bold blue")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("life_start", str(config.life_start))
    table.add_row("multiplier", f"{config.multiplier:g}")
    table.add_row("grid", f"{config.rows} x {config.cols}")
    table.add_row("leaf_chars", format_leaf_chars(config.leaf_chars))
    table.add_row("anchor", f"row {config.pot_row}, col {config.anchor_col}")
    table.add_row("animation_delay", f"{config.animation_delay} ms")
    return table


def build_summary_table(source: Union[GrowthEngine, TreeRecord]) -> Table:
    table = Table(title="Tree")
    table.add_column("Steps")
    table.add_column("Cells painted")
    table.add_column("Seed")

    if isinstance(source, GrowthEngine):
        table.add_row(str(source.step_count), str(source.grid.painted_count()), "-")
    else:
        seed = "-" if source.seed is None else str(source.seed)
        table.add_row(str(source.steps), str(source.painted_cells), seed)
    return table


__all__ = ["build_config_table", "build_summary_table", "format_leaf_chars"]
