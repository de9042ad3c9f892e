"""Data models for the declared types found in rustdoc JSON."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PrimitiveType:
    """A built-in scalar such as ``u8`` or ``bool``."""

    name: str


@dataclass(frozen=True)
class NonTypeArg:
    """A generic argument that is not a type (lifetime, const or ``_``)."""

    kind: str


@dataclass(frozen=True)
class AngleBracketedArgs:
    """Generic arguments written as ``Path<A, B>``."""

    args: tuple["RustType | NonTypeArg", ...] = ()


@dataclass(frozen=True)
class ParenthesizedArgs:
    """Generic arguments written as ``Fn(A) -> B``."""


GenericArgs = AngleBracketedArgs | ParenthesizedArgs


@dataclass(frozen=True)
class ResolvedPathType:
    """A reference to another documented item by id."""

    id: str
    name: str
    args: GenericArgs | None = None


@dataclass(frozen=True)
class UnsupportedType:
    """Any other type shape (tuple, slice, array, generic, reference...)."""

    shape: str
    raw: Any = field(default=None, compare=False, hash=False)


RustType = PrimitiveType | ResolvedPathType | UnsupportedType
