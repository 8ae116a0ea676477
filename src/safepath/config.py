"""Configuration management for safepath."""

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from safepath.exceptions import ConfigError, RuleParseError, UnsafePathError
from safepath.path import check_path, validate_path
from safepath.rules import Rules
from safepath.segment import check_segment, validate_segment

logger = logging.getLogger(__name__)

ENV_PREFIX = "SAFEPATH_"


@dataclass
class SafePathConfig:
    """Default rules an application applies to the paths it accepts."""

    rules: Rules = Rules.STRICT

    def __post_init__(self) -> None:
        """Accept rule names as well as Rules values."""
        self.rules = _coerce_rules(self.rules, source="arguments")

    def check_segment(self, name: str | bytes) -> UnsafePathError | None:
        """Check a path segment against the configured rules."""
        return check_segment(self.rules, name)

    def check_path(self, path: str | bytes) -> UnsafePathError | None:
        """Check a path against the configured rules."""
        return check_path(self.rules, path)

    def validate_segment(self, name: str | bytes) -> None:
        """Raise UnsafePathError if the segment fails the configured rules."""
        validate_segment(self.rules, name)

    def validate_path(self, path: str | bytes) -> None:
        """Raise UnsafePathError if the path fails the configured rules."""
        validate_path(self.rules, path)

    @classmethod
    def from_env(cls) -> "SafePathConfig":
        """Create config from environment variables."""
        return cls(**_env_values())

    @classmethod
    def from_file(cls, path: Path) -> "SafePathConfig":
        """Load config from YAML or JSON file."""
        return cls(**_file_values(Path(path)))

    @classmethod
    def load(
        cls,
        config_path: Path | None = None,
        **overrides: Any,
    ) -> "SafePathConfig":
        """Load config with hierarchy: defaults < file < env < kwargs."""
        values: dict[str, Any] = {}
        if config_path is not None:
            values.update(_file_values(Path(config_path)))
        values.update(_env_values())
        values.update({k: v for k, v in overrides.items() if v is not None})
        unknown = set(values) - {f.name for f in fields(cls)}
        if unknown:
            raise ConfigError("arguments", f"unknown option(s): {', '.join(sorted(unknown))}")
        return cls(**values)


def _env_values() -> dict[str, Any]:
    values: dict[str, Any] = {}
    raw = os.environ.get(f"{ENV_PREFIX}RULES")
    if raw is not None:
        logger.debug("Using rules from %sRULES: %s", ENV_PREFIX, raw)
        values["rules"] = _coerce_rules(raw, source=f"{ENV_PREFIX}RULES")
    return values


def _file_values(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text()
    except OSError as e:
        raise ConfigError(str(path), str(e)) from e

    try:
        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        elif path.suffix == ".json":
            data = json.loads(text)
        else:
            raise ConfigError(str(path), f"unsupported file type '{path.suffix}'")
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(str(path), str(e)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(str(path), "expected a mapping at the top level")

    unknown = set(data) - {f.name for f in fields(SafePathConfig)}
    if unknown:
        raise ConfigError(str(path), f"unknown option(s): {', '.join(sorted(map(str, unknown)))}")

    logger.debug("Loaded safepath config from %s", path)
    values = dict(data)
    if "rules" in values:
        values["rules"] = _coerce_rules(values["rules"], source=str(path))
    return values


def _coerce_rules(value: Any, source: str) -> Rules:
    """Turn a Rules value, a rule string or a list of rule names into Rules."""
    if isinstance(value, Rules):
        return value
    try:
        if isinstance(value, str):
            return Rules.parse(value)
        if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
            return Rules.from_names(value)
    except RuleParseError as e:
        raise ConfigError(source, str(e)) from e
    if isinstance(value, int) and not isinstance(value, bool):
        return Rules(value & int(Rules.STRICT))
    raise ConfigError(source, f"cannot read rules from {value!r}")
