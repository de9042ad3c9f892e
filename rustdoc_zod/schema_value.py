"""Data models for the value kinds an object schema field can take."""

from dataclasses import dataclass
from enum import Enum


class ValueKind(Enum):
    """Schema value kinds understood by the Zod renderer."""

    STRING = "string"
    NUMBER = "number"
    REFERENCE = "reference"


@dataclass(frozen=True)
class SchemaValue:
    """A field's value kind; references carry the referenced schema name."""

    kind: ValueKind
    ref_name: str | None = None

    @classmethod
    def string(cls) -> "SchemaValue":
        return cls(ValueKind.STRING)

    @classmethod
    def number(cls) -> "SchemaValue":
        return cls(ValueKind.NUMBER)

    @classmethod
    def reference(cls, name: str) -> "SchemaValue":
        return cls(ValueKind.REFERENCE, name)
