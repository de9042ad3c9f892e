"""Semantic tags for foundational types recognized by canonical path."""

from enum import Enum


class KnownType(Enum):
    """Closed set of types the field resolver treats specially."""

    SERIALIZE_MARKER = "serialize_marker"
    STRING = "string"
    OPTION = "option"
