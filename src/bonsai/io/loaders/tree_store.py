from __future__ import annotations

"""Save and load finished trees as YAML records."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from bonsai.core.snapshot import TreeRecord
from bonsai.utils.logging import log_calls


@log_calls()
def save_tree_record(record: TreeRecord, file_path: str) -> None:
    """
    Save a tree record to a YAML file.

    Args:
        record: Tree record to save
        file_path: Output file path
    """
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)

    data = record.to_dict()

    with open(file_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, indent=2, sort_keys=False, allow_unicode=True)


@log_calls()
def load_tree_record(file_path: str) -> TreeRecord:
    """Load a tree record; raises ValueError when the file is not a valid record."""
    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    try:
        return TreeRecord.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid tree record ({file_path}): {exc.error_count()} error(s)") from exc
