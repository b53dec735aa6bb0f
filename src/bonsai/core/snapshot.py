"""
Grid snapshots and finished-tree records.

- GridSnapshot: immutable copy of every cell, diffable against another
- TreeRecord: serializable summary of a finished run (saved as YAML)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from bonsai.core.grid import Cell, Grid, StyleTag

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from bonsai.core.engine.growth_engine import GrowthEngine

# One character per cell in TreeRecord.styles
STYLE_CODES: Dict[Optional[StyleTag], str] = {
    None: " ",
    StyleTag.BRANCH: "b",
    StyleTag.LEAF: "l",
    StyleTag.POT: "p",
}
CODE_STYLES: Dict[str, Optional[StyleTag]] = {code: style for style, code in STYLE_CODES.items()}


@dataclass(frozen=True)
class GridSnapshot:
    """Immutable copy of a grid's cells for diffs."""

    rows: int
    cols: int
    cells: Tuple[Tuple[Cell, ...], ...]

    @classmethod
    def from_grid(cls, grid: Grid) -> "GridSnapshot":
        return cls(
            rows=grid.rows,
            cols=grid.cols,
            cells=tuple(tuple(row) for row in grid.iter_rows()),
        )

    def diff(self, other: "GridSnapshot") -> List[Tuple[int, int, Cell, Cell]]:
        """Return changed cells as (row, col, other's cell, this cell)."""
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError("cannot diff snapshots of different grid sizes")
        differences: List[Tuple[int, int, Cell, Cell]] = []
        for r, (mine, theirs) in enumerate(zip(self.cells, other.cells)):
            for c, (new, old) in enumerate(zip(mine, theirs)):
                if new != old:
                    differences.append((r, c, old, new))
        return differences


class TreeRecord(BaseModel):
    """A grown tree as stored on disk."""

    tree_id: str
    created_at: str = Field(default_factory=lambda: datetime.now().strftime("%Y-%m-%d %H:%M:%S"))
    seed: Optional[int] = None
    steps: int = 0
    painted_cells: int = 0
    config: Dict[str, Any] = Field(default_factory=dict)
    lines: List[str] = Field(default_factory=list)
    styles: List[str] = Field(default_factory=list)

    @classmethod
    def from_engine(cls, engine: "GrowthEngine", tree_id: str, seed: Optional[int] = None) -> "TreeRecord":
        lines: List[str] = []
        styles: List[str] = []
        for row in engine.grid.iter_rows():
            lines.append("".join(cell.symbol for cell in row))
            styles.append("".join(STYLE_CODES[cell.style] for cell in row))
        config = engine.config.model_dump(mode="json")
        return cls(
            tree_id=tree_id,
            seed=seed,
            steps=engine.step_count,
            painted_cells=engine.grid.painted_count(),
            config=config,
            lines=lines,
            styles=styles,
        )

    def to_grid(self) -> Grid:
        """Rebuild a grid from the stored lines and style codes."""
        rows = len(self.lines)
        cols = max((len(line) for line in self.lines), default=0)
        grid = Grid(max(rows, 1), max(cols, 1))
        for r, (line, codes) in enumerate(zip(self.lines, self.styles)):
            for c, (symbol, code) in enumerate(zip(line, codes)):
                style = CODE_STYLES.get(code)
                if style is not None:
                    grid.write(r, c, symbol, style)
        return grid

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


__all__ = ["CODE_STYLES", "GridSnapshot", "STYLE_CODES", "TreeRecord"]
