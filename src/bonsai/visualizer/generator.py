"""
HTML page generator for grown trees.

Builds a standalone page from a saved tree record (or a live engine) that
shows the escaped grid in a ``<pre>`` block, with one CSS class per style
tag (branch, leaf, pot).
"""

from __future__ import annotations

import webbrowser
from html import escape
from pathlib import Path
from typing import Optional, Union

from bonsai.core.engine.growth_engine import GrowthEngine
from bonsai.core.snapshot import TreeRecord
from bonsai.io.loaders.tree_store import load_tree_record


def generate_html(source: Union[TreeRecord, GrowthEngine], output_path: Optional[str] = None, title: Optional[str] = None) -> str:
    """Generate the HTML page for a record or engine; optionally write it."""
    if isinstance(source, GrowthEngine):
        canvas = source.to_html()
        steps = source.step_count
        painted = source.grid.painted_count()
        tree_id = title or "bonsai"
        created_at = ""
    else:
        canvas = source.to_grid().to_html()
        steps = source.steps
        painted = source.painted_cells
        tree_id = title or source.tree_id
        created_at = source.created_at

    page_title = escape(tree_id)

    html = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Bonsai: {page_title}</title>
    <style>
        * {{
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }}

        :root {{
            --bg-dark: #0d1117;
            --bg-card: #161b22;
            --border: #30363d;
            --text: #c9d1d9;
            --text-dim: #8b949e;
            --accent-green: #3fb950;
            --accent-gold: #d29922;
            --wood: #c8a165;
        }}

        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif;
            background: var(--bg-dark);
            color: var(--text);
            min-height: 100vh;
        }}

        header {{
            padding: 16px 24px;
            background: var(--bg-card);
            border-bottom: 1px solid var(--border);
            display: flex;
            align-items: center;
            gap: 24px;
        }}

        .logo {{
            font-size: 1.5em;
            font-weight: 600;
            color: var(--accent-green);
        }}

        .meta {{
            color: var(--text-dim);
            font-size: 0.9em;
            display: flex;
            gap: 20px;
        }}

        .bonsai-canvas {{
            margin: 24px;
            font-family: 'SF Mono', 'Fira Code', 'Consolas', monospace;
            line-height: 1.1;
            color: var(--text-dim);
        }}

        .bonsai-canvas .branch {{
            color: var(--wood);
            font-weight: 600;
        }}

        .bonsai-canvas .leaf {{
            color: var(--accent-green);
        }}

        .bonsai-canvas .pot {{
            color: var(--accent-gold);
        }}
    </style>
</head>
<body>
    <header>
        <div class="logo">{page_title}</div>
        <div class="meta">
            <span>Steps: {steps}</span>
            <span>Cells: {painted}</span>
            <span>{escape(created_at)}</span>
        </div>
    </header>
    <pre class="bonsai-canvas">{canvas}</pre>
</body>
</html>
"""

    if output_path:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(html)

    return html


def generate_visualization(input_path: str, output_path: Optional[str] = None) -> str:
    """
    Generate an HTML page from a saved tree record.

    Args:
        input_path: Path to the tree record YAML file
        output_path: Optional output path for the HTML file (auto-generated if not provided)

    Returns:
        Path to the generated HTML file
    """
    record = load_tree_record(input_path)

    if not output_path:
        input_file = Path(input_path)
        output_path = str(input_file.parent / f"{input_file.stem}.html")

    generate_html(record, output_path)

    return output_path


def open_visualization(html_path: str) -> None:
    """Open the page in the default web browser."""
    webbrowser.open(f"file://{Path(html_path).absolute()}")


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python -m bonsai.visualizer.generator <tree.yaml> [output.html]")
        sys.exit(1)

    input_file = sys.argv[1]
    output_file = sys.argv[2] if len(sys.argv) > 2 else None

    result = generate_visualization(input_file, output_file)
    print(f"Generated: {result}")

    open_visualization(result)
