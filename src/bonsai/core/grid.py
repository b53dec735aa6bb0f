"""
Character grid the growth engine paints into.

The grid is a fixed R x C buffer of cells. Each painted cell carries a symbol
and a style tag (branch, leaf or pot); blank cells hold a space and no style.
Writes outside the grid are dropped so agents that drift off the visible area
simply stop contributing pixels.
"""

from __future__ import annotations

from enum import Enum
from html import escape
from typing import Iterator, List, NamedTuple, Optional


class StyleTag(str, Enum):
    """Display category of a painted cell."""

    BRANCH = "branch"
    LEAF = "leaf"
    POT = "pot"


BLANK = " "


class Cell(NamedTuple):
    symbol: str
    style: Optional[StyleTag]


class StyledCell(NamedTuple):
    """A display-ready cell: markup-escaped text plus its style (None for blanks)."""

    text: str
    style: Optional[StyleTag]


BLANK_CELL = Cell(BLANK, None)


class Grid:
    """Fixed-size two dimensional buffer of styled symbols."""

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells: List[List[Cell]] = [[BLANK_CELL] * cols for _ in range(rows)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def write(self, row: int, col: int, symbol: str, style: StyleTag = StyleTag.BRANCH) -> bool:
        """Overwrite a cell. Returns False (and changes nothing) when out of bounds."""
        if not self.in_bounds(row, col):
            return False
        self._cells[row][col] = Cell(symbol, StyleTag(style))
        return True

    def get(self, row: int, col: int) -> Optional[Cell]:
        if not self.in_bounds(row, col):
            return None
        return self._cells[row][col]

    def iter_rows(self) -> Iterator[List[Cell]]:
        """Yield copies of each row of raw (unescaped) cells."""
        for row in self._cells:
            yield list(row)

    def painted_count(self) -> int:
        return sum(1 for row in self._cells for cell in row if cell.style is not None)

    def is_blank(self) -> bool:
        return self.painted_count() == 0

    # =========================================================================
    # Serialization
    # =========================================================================

    def serialize(self) -> List[List[StyledCell]]:
        """
        Produce R rows of C display-ready cells.

        Blank cells become a bare space with no style. Painted symbols are
        escaped for markup (``&``, ``<``, ``>``). The grid is not modified.
        """
        serialized: List[List[StyledCell]] = []
        for row in self._cells:
            serialized.append(
                [
                    StyledCell(BLANK, None) if cell.style is None else StyledCell(escape(cell.symbol, quote=False), cell.style)
                    for cell in row
                ]
            )
        return serialized

    def to_html(self) -> str:
        """Serialize as ``<span class="style">`` runs, one line per row."""
        lines = []
        for row in self.serialize():
            parts = []
            for cell in row:
                if cell.style is None:
                    parts.append(cell.text)
                else:
                    parts.append(f'<span class="{cell.style.value}">{cell.text}</span>')
            lines.append("".join(parts) + "\n")
        return "".join(lines)

    def to_text(self) -> str:
        """Plain, unescaped text with one line per row."""
        return "\n".join("".join(cell.symbol for cell in row) for row in self._cells)

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols}, painted={self.painted_count()})"


__all__ = ["BLANK", "BLANK_CELL", "Cell", "Grid", "StyleTag", "StyledCell"]
