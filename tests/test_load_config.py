"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from rustdoc_zod.deep_merge import deep_merge
from rustdoc_zod.errors import ConfigError
from rustdoc_zod.load_config import (
    DEFAULT_CONFIG,
    ERROR,
    SKIP,
    build_config,
    load_config,
)


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    base = {"arr": [1, 2]}
    update = {"arr": [3, 4]}
    merged = deep_merge(base, update)
    assert merged == {"arr": [3, 4]}


def test_deep_merge_known_types_additive() -> None:
    """Verify that known-type pattern lists are merged additively."""
    base = {"known_types": {"string": [["alloc", "string", "String"]]}}
    update = {
        "known_types": {
            "string": [["alloc", "string", "String"], ["smol_str", "SmolStr"]]
        }
    }
    merged = deep_merge(base, update)
    assert merged["known_types"]["string"] == [
        ["alloc", "string", "String"],
        ["smol_str", "SmolStr"],
    ]


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config["on_unsupported"] == SKIP
    assert config["primitives"] == {"u8": "number"}


def test_load_config_does_not_share_defaults() -> None:
    """Verify that mutating a loaded config leaves the defaults intact."""
    config = load_config(None)
    config["primitives"]["u16"] = "number"
    assert "u16" not in DEFAULT_CONFIG["primitives"]


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "on_unsupported": ERROR,
        "known_types": {"serialize_marker": [["my_serde", "Serialize"]]},
        "output": {"export": False},
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["on_unsupported"] == ERROR
    assert loaded["output"]["export"] is False
    markers = loaded["known_types"]["serialize_marker"]
    assert ["serde", "ser", "Serialize"] in markers  # Default
    assert ["my_serde", "Serialize"] in markers  # Added


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "nope.yml")) == DEFAULT_CONFIG


def test_load_config_invalid(tmp_path: Path) -> None:
    """Verify invalid config files are rejected."""
    bad_policy = tmp_path / "policy.yml"
    bad_policy.write_text("on_unsupported: explode\n")
    with pytest.raises(ConfigError):
        load_config(str(bad_policy))

    not_mapping = tmp_path / "list.yml"
    not_mapping.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        load_config(str(not_mapping))


@pytest.mark.parametrize(
    "content",
    [
        "primitives: null\n",
        "output: null\n",
        "known_types: [serde]\n",
        "known_types:\n  string: alloc::string::String\n",
        "primitives:\n  u16: integer\n",
        "on_unsupported: [skip]\n",
    ],
)
def test_load_config_malformed_sections(tmp_path: Path, content: str) -> None:
    """Verify malformed sections raise ConfigError instead of crashing later."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(content)
    with pytest.raises(ConfigError):
        load_config(str(config_file))


def test_build_config_partial() -> None:
    """Verify partial overrides are merged over the defaults."""
    config = build_config({"on_unsupported": ERROR})
    assert config["on_unsupported"] == ERROR
    assert config["primitives"] == {"u8": "number"}
    assert build_config(None) == DEFAULT_CONFIG
    with pytest.raises(ConfigError):
        build_config({"output": None})
