"""Logic for deep merging configuration dictionaries."""

from typing import Any

ADDITIVE_SECTIONS = {"known_types"}


def _merge_patterns(base: list[Any], update: list[Any]) -> list[Any]:
    """Union two pattern lists, keeping first-seen order."""
    merged: list[Any] = []
    for pattern in [*base, *update]:
        if pattern not in merged:
            merged.append(pattern)
    return merged


def deep_merge(
    base: dict[str, Any], update: dict[str, Any], *, additive: bool = False
) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, EXCEPT under 'known_types'.
    - 'known_types' pattern lists are additive.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(
                result[key], value, additive=additive or key in ADDITIVE_SECTIONS
            )
        elif (
            additive and isinstance(value, list) and isinstance(result.get(key), list)
        ):
            result[key] = _merge_patterns(result[key], value)
        else:
            # Default: Replacement (scalars and other arrays)
            result[key] = value
    return result
