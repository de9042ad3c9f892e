"""Data models for documented items and their kind-specific payloads."""

from dataclasses import dataclass

from rustdoc_zod.rust_type import ResolvedPathType, RustType

# Struct field layouts
UNIT = "unit"
TUPLE = "tuple"
PLAIN = "plain"


@dataclass(frozen=True)
class StructPayload:
    """A struct declaration and the ids of its fields in declaration order."""

    layout: str  # unit/tuple/plain
    field_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class StructFieldPayload:
    """A named struct field and its declared type."""

    type: RustType


@dataclass(frozen=True)
class ImplPayload:
    """An ``impl`` block, optionally implementing a trait."""

    trait: ResolvedPathType | None
    for_type: RustType


@dataclass(frozen=True)
class OtherPayload:
    """Any item kind the generator never inspects (module, enum, trait...)."""

    kind: str


Payload = StructPayload | StructFieldPayload | ImplPayload | OtherPayload


@dataclass(frozen=True)
class Item:
    """Represents a documented item (struct, field, impl, etc.)."""

    id: str
    name: str | None
    payload: Payload
