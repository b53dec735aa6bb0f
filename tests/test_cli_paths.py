from pathlib import Path

import pytest


def test_resolve_tree_path_simple(tmp_path, monkeypatch):
    """Bare names resolve under outputs/trees."""
    monkeypatch.chdir(tmp_path)
    from bonsai.cli.paths import resolve_tree_path, trees_dir

    result = resolve_tree_path("maple")
    assert Path(result) == trees_dir() / "maple.yaml"


def test_resolve_tree_path_with_extension(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    from bonsai.cli.paths import resolve_tree_path, trees_dir

    result = resolve_tree_path("maple.yaml")
    assert Path(result) == trees_dir() / "maple.yaml"


def test_resolve_tree_path_nested(tmp_path, monkeypatch):
    """Only the basename of a nested path is kept."""
    monkeypatch.chdir(tmp_path)
    from bonsai.cli.paths import resolve_tree_path, trees_dir

    result = resolve_tree_path("custom/maple.yaml")
    assert Path(result) == trees_dir() / "maple.yaml"


def test_resolve_page_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    from bonsai.cli.paths import pages_dir, resolve_page_path

    assert Path(resolve_page_path("maple")) == pages_dir() / "maple.html"
    assert pages_dir().exists()


def test_find_tree_file_in_outputs(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    from bonsai.cli.paths import find_tree_file, resolve_tree_path

    target = Path(resolve_tree_path("oak"))
    target.write_text("tree_id: oak\n", encoding="utf-8")

    assert Path(find_tree_file("oak")) == target


def test_find_tree_file_direct_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    from bonsai.cli.paths import find_tree_file

    target = tmp_path / "elm.yaml"
    target.write_text("tree_id: elm\n", encoding="utf-8")

    assert find_tree_file(str(tmp_path / "elm")) == str(target)


def test_find_tree_file_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    from bonsai.cli.paths import find_tree_file

    with pytest.raises(FileNotFoundError):
        find_tree_file("missing")
