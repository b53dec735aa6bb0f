"""
Growth configuration.

A single frozen ``BonsaiConfig`` is shared by reference between the engine and
every branch agent of a run. Defaults reproduce the classic look:

- life_start: 38 ticks of trunk life
- multiplier: 18 (trunk shoot rate scaling)
- rows x cols: 38 x 70 character grid
- leaf_chars: & * @ # % ^
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator

from bonsai.core.errors import ConfigError

DEFAULT_LEAF_CHARS: Tuple[str, ...] = ("&", "*", "@", "#", "%", "^")


class BonsaiConfig(BaseModel):
    """Read-only parameters of one simulation run."""

    life_start: int = Field(default=38, ge=1)
    multiplier: float = Field(default=18, ge=0)
    rows: int = Field(default=38, ge=1)
    cols: int = Field(default=70, ge=1)
    leaf_chars: Tuple[str, ...] = DEFAULT_LEAF_CHARS
    anchor_col: int = 15
    anchor_row: Optional[int] = None  # None -> rows - 3
    animation_delay: int = Field(default=40, ge=0)  # ms, driver only

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("leaf_chars", mode="before")
    @classmethod
    def _split_leaf_string(cls, value: Any) -> Any:
        # "&*@" is accepted as shorthand for ["&", "*", "@"]
        if isinstance(value, str):
            return tuple(value)
        return value

    @field_validator("leaf_chars")
    @classmethod
    def _check_leaf_chars(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("leaf_chars must contain at least one symbol")
        for char in value:
            if len(char) != 1:
                raise ValueError(f"leaf symbol {char!r} must be a single character")
        return value

    @property
    def pot_row(self) -> int:
        """Row of the top line of the pot."""
        if self.anchor_row is None:
            return self.rows - 3
        return self.anchor_row

    @property
    def delay_seconds(self) -> float:
        return self.animation_delay / 1000.0


def build_config(base: Optional[BonsaiConfig] = None, **overrides: Any) -> BonsaiConfig:
    """Merge overrides onto ``base`` (or the defaults) and validate.

    ``None`` overrides are ignored so CLI options left unset fall through.

    Raises:
        ConfigError: If the merged values do not form a valid configuration.
    """
    data: Dict[str, Any] = base.model_dump() if base is not None else {}
    data.update({key: value for key, value in overrides.items() if value is not None})
    return config_from_mapping(data)


def config_from_mapping(data: Mapping[str, Any], *, file_path: Optional[str] = None) -> BonsaiConfig:
    try:
        return BonsaiConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError("Invalid bonsai configuration", file_path=file_path, cause=exc) from exc


__all__ = ["BonsaiConfig", "DEFAULT_LEAF_CHARS", "build_config", "config_from_mapping"]
