from __future__ import annotations

"""Utilities for resolving output paths."""

from pathlib import Path


def outputs_dir() -> Path:
    return Path.cwd() / "outputs"


def trees_dir() -> Path:
    return outputs_dir() / "trees"


def pages_dir() -> Path:
    return outputs_dir() / "pages"


def ensure_output_dirs() -> None:
    trees_dir().mkdir(parents=True, exist_ok=True)
    pages_dir().mkdir(parents=True, exist_ok=True)


def resolve_tree_path(name: str) -> str:
    """Resolve a tree record filename under outputs/trees.

    Only the base name is kept. A missing .yaml extension is added.
    """
    ensure_output_dirs()
    base = Path(name).name
    if not base.endswith(".yaml"):
        base = f"{base}.yaml"
    return str(trees_dir() / base)


def resolve_page_path(name: str) -> str:
    """Resolve an HTML page filename under outputs/pages."""
    ensure_output_dirs()
    base = Path(name).name
    if not base.endswith(".html"):
        base = f"{base}.html"
    return str(pages_dir() / base)


def find_tree_file(name_or_path: str) -> str:
    """
    Find a tree record file.

    1. If path exists as-is, use it
    2. If path exists with .yaml extension, use it
    3. Otherwise, look in outputs/trees/

    Raises:
        FileNotFoundError: If file cannot be found
    """
    p = Path(name_or_path)

    if p.exists():
        return str(p)

    if not str(name_or_path).endswith(".yaml"):
        p_with_yaml = Path(f"{name_or_path}.yaml")
        if p_with_yaml.exists():
            return str(p_with_yaml)

    base_name = p.name
    if not base_name.endswith(".yaml"):
        base_name = f"{base_name}.yaml"

    tree_file = trees_dir() / base_name
    if tree_file.exists():
        return str(tree_file)

    raise FileNotFoundError(f"Tree file not found: '{name_or_path}'\nLooked in:\n  - {name_or_path}\n  - {tree_file}")


__all__ = [
    "ensure_output_dirs",
    "find_tree_file",
    "outputs_dir",
    "pages_dir",
    "resolve_page_path",
    "resolve_tree_path",
    "trees_dir",
]
