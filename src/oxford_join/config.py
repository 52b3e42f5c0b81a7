"""
Join configuration, loadable from YAML or JSON.

A configuration document looks like:

    conjunction: and_or        # kind name, canonical text ("&"), custom text,
                               # or a mapping {kind: other, text: plus}
    separator: ", "            # glue for plain (non-Oxford) lazy joins

All keys are optional; missing keys take the JoinConfig defaults.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Sequence, Union

import yaml

from .conjunction import Conjunction
from .exceptions import ConfigError, SerializationError
from .formatting import JoinFmt, OxfordJoinFmt
from .join import join
from .serialization import conjunction_from_dict, conjunction_to_dict


@dataclass
class JoinConfig:
    """
    Preferred join settings for an application.

    Properties:
        conjunction: Glue before the last item of an Oxford join
        separator: Glue between every pair in a plain lazy join
    """

    conjunction: Conjunction = field(default_factory=lambda: Conjunction.AND)
    separator: str = ", "

    def join(self, items: Iterable) -> str:
        """Oxford-join items with the configured conjunction."""
        return join(items, self.conjunction)

    def oxford_fmt(self, sequence: Sequence) -> OxfordJoinFmt:
        """Lazy Oxford join with the configured conjunction."""
        return OxfordJoinFmt(sequence, self.conjunction)

    def join_fmt(self, iterable: Iterable) -> JoinFmt:
        """Lazy plain join with the configured separator."""
        return JoinFmt(iterable, self.separator)


def config_to_dict(cfg: JoinConfig) -> Dict[str, Any]:
    return {"conjunction": conjunction_to_dict(cfg.conjunction), "separator": cfg.separator}


def config_from_dict(d: Any) -> JoinConfig:
    if d is None:
        return JoinConfig()
    if not isinstance(d, dict):
        raise ConfigError(f"Config must be a mapping, got {type(d).__name__}")

    unknown = set(d) - {"conjunction", "separator"}
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(map(str, unknown)))}")

    cfg = JoinConfig()

    raw = d.get("conjunction")
    try:
        if isinstance(raw, dict):
            cfg.conjunction = conjunction_from_dict(raw)
        elif raw is not None:
            cfg.conjunction = Conjunction.parse(raw)
    except (SerializationError, TypeError) as e:
        raise ConfigError(f"Invalid conjunction: {e}") from e

    separator = d.get("separator", cfg.separator)
    if not isinstance(separator, str):
        raise ConfigError(f"Separator must be a string, got {type(separator).__name__}")
    cfg.separator = separator

    return cfg


def config_to_json(cfg: JoinConfig) -> str:
    return json.dumps(config_to_dict(cfg), sort_keys=True)


def config_from_json(s: str) -> JoinConfig:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid config JSON: {e}") from e
    return config_from_dict(d)


def config_to_yaml(cfg: JoinConfig) -> str:
    return yaml.safe_dump(config_to_dict(cfg))


def config_from_yaml(s: str) -> JoinConfig:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config YAML: {e}") from e
    return config_from_dict(d)


def load_config(path: Union[str, Path]) -> JoinConfig:
    """
    Load a JoinConfig from a file.

    Files ending in .json are read as JSON, everything else as YAML.

    Raises:
        ConfigError: If the file is missing or malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if path.suffix.lower() == ".json":
        return config_from_json(text)
    return config_from_yaml(text)


__all__ = [
    "JoinConfig",
    "config_to_dict",
    "config_from_dict",
    "config_to_json",
    "config_from_json",
    "config_to_yaml",
    "config_from_yaml",
    "load_config",
]
