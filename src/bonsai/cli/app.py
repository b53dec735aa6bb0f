"""
Bonsai CLI: grow, render, inspect and export ASCII bonsai trees.

- grow: animate a tree in the terminal, optionally saving it
- render: grow to completion and print the result once
- show: display a saved tree record
- config: print the effective configuration
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.live import Live

from bonsai.cli.formatters import build_config_table, build_summary_table
from bonsai.cli.load_helpers import config_or_exit
from bonsai.cli.paths import find_tree_file, resolve_page_path, resolve_tree_path
from bonsai.core.config import BonsaiConfig
from bonsai.core.engine import GrowthDriver, GrowthEngine
from bonsai.core.snapshot import TreeRecord
from bonsai.io.loaders import load_tree_record, save_tree_record
from bonsai.render import render_rich
from bonsai.utils.logging import configure_logging

app = typer.Typer(help="Bonsai CLI: grow, render, inspect and export ASCII bonsai trees.")
console = Console()


def _load_config(
    config_path: Optional[str],
    life: Optional[int],
    multiplier: Optional[float],
    rows: Optional[int],
    cols: Optional[int],
    leaves: Optional[str],
    delay: Optional[int] = None,
) -> BonsaiConfig:
    return config_or_exit(
        config_path,
        console=console,
        life_start=life,
        multiplier=multiplier,
        rows=rows,
        cols=cols,
        leaf_chars=leaves,
        animation_delay=delay,
    )


def _save_outputs(engine: GrowthEngine, seed: Optional[int], save: Optional[str], html: Optional[str]) -> None:
    if not save and not html:
        return
    from bonsai.visualizer import generate_html

    tree_id = save or f"bonsai_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    record = TreeRecord.from_engine(engine, tree_id=tree_id, seed=seed)
    if save:
        path = resolve_tree_path(save)
        save_tree_record(record, path)
        console.print(f"Saved: {path}")
    if html:
        page = html if Path(html).parent != Path(".") else resolve_page_path(html)
        generate_html(record, page)
        console.print(f"[cyan]Page: {page}[/cyan]")


@app.command()
def grow(
    life: Optional[int] = typer.Option(None, "--life", "-l", help="Initial trunk life"),
    multiplier: Optional[float] = typer.Option(None, "--multiplier", "-m", help="Shoot spawn-rate multiplier"),
    rows: Optional[int] = typer.Option(None, "--rows", help="Grid rows"),
    cols: Optional[int] = typer.Option(None, "--cols", help="Grid columns"),
    leaves: Optional[str] = typer.Option(None, "--leaves", help="Leaf symbols, e.g. '&*@'"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed for a reproducible tree"),
    delay: Optional[int] = typer.Option(None, "--delay", "-d", help="Milliseconds between frames"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
    max_steps: Optional[int] = typer.Option(None, "--max-steps", help="Stop after this many steps"),
    save: Optional[str] = typer.Option(None, "--save", help="Save the finished tree under outputs/trees/<name>.yaml"),
    html: Optional[str] = typer.Option(None, "--html", help="Write an HTML page for the finished tree"),
    force: bool = typer.Option(False, "--force", help="Grow even if the terminal is narrower than the grid"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Animate a growing bonsai in the terminal."""
    configure_logging(verbose)
    config = _load_config(config_path, life, multiplier, rows, cols, leaves, delay)

    if config.cols > console.width and not force:
        console.print(
            f"[red]Terminal too narrow[/red]: {console.width} columns for a {config.cols}-column tree (use --force)"
        )
        raise typer.Exit(code=1)

    engine = GrowthEngine(config, seed=seed)
    driver = GrowthDriver(engine, max_steps=max_steps)

    with Live(render_rich(engine.grid), console=console, auto_refresh=False) as live:

        def _on_frame(frame: GrowthEngine) -> None:
            live.update(render_rich(frame.grid), refresh=True)

        try:
            driver.start(_on_frame)
        except KeyboardInterrupt:
            driver.stop()
            console.print("[yellow]Interrupted[/yellow]")

    console.print(build_summary_table(engine))
    _save_outputs(engine, seed, save, html)


@app.command()
def render(
    life: Optional[int] = typer.Option(None, "--life", "-l", help="Initial trunk life"),
    multiplier: Optional[float] = typer.Option(None, "--multiplier", "-m", help="Shoot spawn-rate multiplier"),
    rows: Optional[int] = typer.Option(None, "--rows", help="Grid rows"),
    cols: Optional[int] = typer.Option(None, "--cols", help="Grid columns"),
    leaves: Optional[str] = typer.Option(None, "--leaves", help="Leaf symbols, e.g. '&*@'"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed for a reproducible tree"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
    plain: bool = typer.Option(False, "--plain", help="Print unstyled text"),
    markup: bool = typer.Option(False, "--html-markup", help="Print escaped HTML span markup"),
    save: Optional[str] = typer.Option(None, "--save", help="Save the finished tree under outputs/trees/<name>.yaml"),
    html: Optional[str] = typer.Option(None, "--html", help="Write an HTML page for the finished tree"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Grow a tree to completion and print it once."""
    configure_logging(verbose)
    config = _load_config(config_path, life, multiplier, rows, cols, leaves)

    engine = GrowthEngine(config, seed=seed)
    engine.seed()
    engine.run()

    if markup:
        typer.echo(engine.to_html(), nl=False)
    elif plain:
        typer.echo(engine.to_text())
    else:
        console.print(render_rich(engine.grid))
    _save_outputs(engine, seed, save, html)


@app.command()
def show(
    name: str = typer.Argument(..., help="Tree name or path (bare names resolve to outputs/trees/<name>.yaml)"),
    plain: bool = typer.Option(False, "--plain", help="Print unstyled text"),
) -> None:
    """Display a saved tree."""
    try:
        resolved_path = find_tree_file(name)
    except FileNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    try:
        record = load_tree_record(resolved_path)
    except ValueError as exc:
        console.print(f"[red]Failed to load tree:[/red] {exc}")
        raise typer.Exit(code=1)

    console.print(f"[bold]Tree:[/bold] {record.tree_id}")
    console.print(f"Date: {record.created_at}")
    grid = record.to_grid()
    if plain:
        typer.echo(grid.to_text())
    else:
        console.print(render_rich(grid))
    console.print(build_summary_table(record))


@app.command("config")
def show_config(
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
    life: Optional[int] = typer.Option(None, "--life", "-l", help="Initial trunk life"),
    multiplier: Optional[float] = typer.Option(None, "--multiplier", "-m", help="Shoot spawn-rate multiplier"),
    rows: Optional[int] = typer.Option(None, "--rows", help="Grid rows"),
    cols: Optional[int] = typer.Option(None, "--cols", help="Grid columns"),
    leaves: Optional[str] = typer.Option(None, "--leaves", help="Leaf symbols, e.g. '&*@'"),
) -> None:
    """Print the effective configuration."""
    config = _load_config(config_path, life, multiplier, rows, cols, leaves)
    console.print(build_config_table(config))


__all__ = ["app"]
