"""Data models for generated object schemas."""

from dataclasses import dataclass

from rustdoc_zod.schema_value import SchemaValue


@dataclass(frozen=True)
class FieldDescriptor:
    """A resolved struct field."""

    name: str
    value: SchemaValue
    optional: bool = False

    @classmethod
    def required(cls, name: str, value: SchemaValue) -> "FieldDescriptor":
        return cls(name, value, optional=False)

    @classmethod
    def optional_of(cls, name: str, value: SchemaValue) -> "FieldDescriptor":
        return cls(name, value, optional=True)


@dataclass(frozen=True)
class ObjectSchema:
    """Schema for one struct; fields keep declaration order."""

    name: str
    fields: tuple[FieldDescriptor, ...]
