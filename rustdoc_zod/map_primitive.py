"""Logic for mapping Rust primitives to schema value kinds."""

from collections.abc import Mapping

from rustdoc_zod.errors import ConfigError, UnsupportedShapeError
from rustdoc_zod.schema_value import SchemaValue, ValueKind

SCALAR_KINDS = {ValueKind.STRING.value, ValueKind.NUMBER.value}


def map_primitive(name: str, primitives: Mapping[str, str]) -> SchemaValue:
    """Map a primitive such as ``u8`` through the configured primitive table."""
    kind = primitives.get(name)
    if kind is None:
        msg = f"primitive {name}"
        raise UnsupportedShapeError(msg)
    if kind not in SCALAR_KINDS:
        msg = f"primitive {name} mapped to unknown schema kind {kind!r}"
        raise ConfigError(msg)
    return SchemaValue(ValueKind(kind))
