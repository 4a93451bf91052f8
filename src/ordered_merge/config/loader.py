from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ordered_merge.config.models import MergeConfig


# ConfigError is raised for invalid configuration (fail fast).
class ConfigError(ValueError):
    pass


def load_yaml(path: Path) -> dict[str, Any]:
    # Raw YAML mapping; structure is validated by the pydantic models.
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw


def parse_config(raw: dict[str, Any]) -> MergeConfig:
    try:
        return MergeConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid merge config: {exc}") from exc


def load_config(path: Path) -> MergeConfig:
    return parse_config(load_yaml(path))
