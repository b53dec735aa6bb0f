from __future__ import annotations

"""Shared helpers for building configuration with CLI-friendly errors."""

from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape

from bonsai.core.config import BonsaiConfig, build_config
from bonsai.core.errors import ConfigError
from bonsai.io.loaders import load_config


def config_or_exit(
    config_path: Optional[str],
    *,
    console: Console,
    **overrides: Any,
) -> BonsaiConfig:
    """Load the optional config file, apply CLI overrides, exit(2) on bad input."""
    if config_path and not Path(config_path).exists():
        console.print(f"[red]Path not found:[/red] {config_path}")
        raise typer.Exit(code=1)
    try:
        base = load_config(config_path) if config_path else None
        return build_config(base, **overrides)
    except ConfigError as err:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(err))}")
        raise typer.Exit(code=2)


__all__ = ["config_or_exit"]
