from __future__ import annotations

"""Load a BonsaiConfig from YAML."""

import os
from typing import Any, Dict

import yaml

from bonsai.core.config import BonsaiConfig, config_from_mapping
from bonsai.core.errors import ConfigError
from bonsai.utils.logging import log_calls


def _read_yaml_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@log_calls()
def load_config(path: str) -> BonsaiConfig:
    """Load configuration from a YAML file.

    Both a flat mapping and one nested under ``bonsai:`` are accepted:

    bonsai:
      life_start: 42
      leaf_chars: ["*", "@"]
    """
    if not os.path.exists(path):
        raise ConfigError("Config file not found", file_path=path)
    try:
        data = _read_yaml_file(path)
    except yaml.YAMLError as exc:
        raise ConfigError("Config file is not valid YAML", file_path=path, cause=exc) from exc
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a mapping", file_path=path)
    if "bonsai" in data:
        data = data["bonsai"] or {}
        if not isinstance(data, dict):
            raise ConfigError("'bonsai' section must be a mapping", file_path=path)
    return config_from_mapping(data, file_path=path)
