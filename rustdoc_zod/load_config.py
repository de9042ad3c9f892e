"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from rustdoc_zod.deep_merge import deep_merge
from rustdoc_zod.errors import ConfigError
from rustdoc_zod.map_primitive import SCALAR_KINDS

SKIP = "skip"
ERROR = "error"

DEFAULT_CONFIG: dict[str, Any] = {
    "known_types": {
        "serialize_marker": [["serde", "ser", "Serialize"]],
        "string": [["alloc", "string", "String"]],
        "option": [["core", "option", "Option"]],
    },
    "primitives": {
        "u8": "number",
    },
    "on_unsupported": SKIP,
    "output": {
        "export": True,
    },
}


def _require_mapping(config: dict[str, Any], section: str) -> dict[str, Any]:
    value = config.get(section)
    if not isinstance(value, dict):
        msg = f"config section '{section}' must be a mapping, got {value!r}"
        raise ConfigError(msg)
    return value


def validate_config(config: dict[str, Any]) -> None:
    """Raise ConfigError unless every section has the expected shape."""
    for tag, patterns in _require_mapping(config, "known_types").items():
        if not isinstance(patterns, list) or not all(
            isinstance(p, list) and all(isinstance(s, str) for s in p)
            for p in patterns
        ):
            msg = f"known_types.{tag} must be a list of path segment lists"
            raise ConfigError(msg)

    for name, kind in _require_mapping(config, "primitives").items():
        if not isinstance(kind, str) or kind not in SCALAR_KINDS:
            msg = f"primitives.{name} must be one of {sorted(SCALAR_KINDS)}"
            raise ConfigError(msg)

    _require_mapping(config, "output")

    policy = config.get("on_unsupported")
    if not isinstance(policy, str) or policy not in {SKIP, ERROR}:
        msg = f"on_unsupported must be '{SKIP}' or '{ERROR}'"
        raise ConfigError(msg)


def build_config(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Merge overrides over the defaults and validate the result."""
    config = deep_merge(copy.deepcopy(DEFAULT_CONFIG), overrides or {})
    validate_config(config)
    return config


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    user_config: Any = {}
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"config file {p} must contain a mapping"
                raise ConfigError(msg)
    return build_config(user_config)
