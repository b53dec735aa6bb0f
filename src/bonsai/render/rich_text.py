"""Terminal rendering of a grid with Rich styles."""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from rich.text import Text

from bonsai.core.grid import Grid, StyleTag

DEFAULT_PALETTE: Dict[StyleTag, str] = {
    StyleTag.BRANCH: "bold #c8a165",
    StyleTag.LEAF: "green",
    StyleTag.POT: "grey62",
}


def render_rich(grid: Grid, palette: Optional[Mapping[StyleTag, str]] = None) -> Text:
    """Build a Rich ``Text`` with one styled span per painted cell."""
    styles = dict(DEFAULT_PALETTE)
    if palette:
        styles.update(palette)

    text = Text(no_wrap=True, overflow="crop")
    for index, row in enumerate(grid.iter_rows()):
        if index:
            text.append("\n")
        for cell in row:
            if cell.style is None:
                text.append(cell.symbol)
            else:
                text.append(cell.symbol, style=styles.get(cell.style, ""))
    return text
