"""
Conjunctions as plain data (dict, JSON, YAML).

A conjunction is stored by kind name, never by rendered text, so "and/or"
and a custom "and/or" stay distinguishable:

    {"kind": "and_or"}                  fixed kinds: name only
    {"kind": "other", "text": "plus"}   custom: trimmed text alongside

A missing "kind" reads as "and". Anything else unexpected raises
SerializationError. JoinConfig (config.py) nests this same mapping under
its "conjunction" key.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from .conjunction import Conjunction, ConjunctionKind
from .exceptions import SerializationError


def conjunction_to_dict(c: Conjunction) -> Dict[str, Any]:
    if c.kind is ConjunctionKind.OTHER:
        return {"kind": c.kind.value, "text": c.custom}
    return {"kind": c.kind.value}


def conjunction_from_dict(d: Any) -> Conjunction:
    if not isinstance(d, dict):
        raise SerializationError(f"Expected a mapping for a conjunction, got {type(d).__name__}")
    try:
        kind = ConjunctionKind(d.get("kind", ConjunctionKind.AND.value))
    except ValueError:
        raise SerializationError(f"Unsupported conjunction kind: {d.get('kind')!r}") from None

    if kind is ConjunctionKind.OTHER:
        text = d.get("text", "")
        if not isinstance(text, str):
            raise SerializationError(f"Conjunction text must be a string, got {type(text).__name__}")
        return Conjunction.from_text(text)
    return Conjunction(kind)


def conjunction_to_json(c: Conjunction) -> str:
    return json.dumps(conjunction_to_dict(c), sort_keys=True)


def conjunction_from_json(s: str) -> Conjunction:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid conjunction JSON: {e}") from e
    return conjunction_from_dict(d)


def conjunction_to_yaml(c: Conjunction) -> str:
    return yaml.safe_dump(conjunction_to_dict(c))


def conjunction_from_yaml(s: str) -> Conjunction:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise SerializationError(f"Invalid conjunction YAML: {e}") from e
    return conjunction_from_dict(d)


__all__ = [
    "conjunction_to_dict",
    "conjunction_from_dict",
    "conjunction_to_json",
    "conjunction_from_json",
    "conjunction_to_yaml",
    "conjunction_from_yaml",
]
