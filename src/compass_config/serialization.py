"""
Serialization helpers for ProjectConfig objects.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from compass_config.model import (
    ALL_OPTIONS,
    OutputStyle,
    PreferredSyntax,
    ProjectConfig,
    Symbol,
    coerce_option,
)


def _enum_value(v: Any) -> Any:
    if isinstance(v, (OutputStyle, PreferredSyntax)):
        return v.value
    return v


def _extra_to_dict(v: Any) -> Any:
    if isinstance(v, Symbol):
        return {"symbol": v.name}
    return v


def _extra_from_dict(name: str, v: Any) -> Any:
    if isinstance(v, dict):
        if set(v) == {"symbol"} and isinstance(v["symbol"], str):
            return Symbol(v["symbol"])
        raise ValueError(f"extra option '{name}' has an unsupported mapping value: {v!r}")
    if v is not None and not isinstance(v, (str, bool)):
        raise ValueError(f"extra option '{name}' must be a string, boolean, symbol or null, got {v!r}")
    return v


def config_to_dict(c: ProjectConfig) -> Dict[str, Any]:
    d = {name: _enum_value(getattr(c, name)) for name in ALL_OPTIONS}
    d["requires"] = list(c.requires)
    d["extra"] = {name: _extra_to_dict(v) for name, v in c.extra.items()}
    return d


def config_from_dict(d: Dict[str, Any]) -> ProjectConfig:
    if not isinstance(d, dict):
        raise ValueError(f"Config must be a mapping, got {type(d).__name__}")

    c = ProjectConfig()
    for name in ALL_OPTIONS:
        value = d.get(name)
        if value is None:
            continue
        setattr(c, name, coerce_option(name, value))

    requires = d.get("requires")
    if requires is None:
        requires = []
    if not isinstance(requires, list) or not all(isinstance(r, str) for r in requires):
        raise ValueError(f"requires must be a list of strings, got {requires!r}")
    c.requires = list(requires)

    extra = d.get("extra")
    if extra is None:
        extra = {}
    if not isinstance(extra, dict):
        raise ValueError(f"extra must be a mapping, got {extra!r}")
    c.extra = {str(name): _extra_from_dict(name, v) for name, v in extra.items()}
    return c


def config_to_json(c: ProjectConfig) -> str:
    return json.dumps(config_to_dict(c), sort_keys=True)


def config_from_json(s: str) -> ProjectConfig:
    d = json.loads(s)
    return config_from_dict(d)


def config_to_yaml(c: ProjectConfig) -> str:
    return yaml.safe_dump(config_to_dict(c))


def config_from_yaml(s: str) -> ProjectConfig:
    d = yaml.safe_load(s)
    if d is None:
        d = {}
    return config_from_dict(d)
