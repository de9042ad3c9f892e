"""Logic for classifying a struct field into a schema field descriptor."""

from collections.abc import Mapping

from rustdoc_zod.errors import InconsistentGraphError, UnsupportedShapeError
from rustdoc_zod.is_struct_kind import is_struct_kind
from rustdoc_zod.item import Item, StructFieldPayload
from rustdoc_zod.item_graph import ItemGraph
from rustdoc_zod.known_type import KnownType
from rustdoc_zod.map_primitive import map_primitive
from rustdoc_zod.object_schema import FieldDescriptor
from rustdoc_zod.rust_type import (
    AngleBracketedArgs,
    NonTypeArg,
    PrimitiveType,
    ResolvedPathType,
    UnsupportedType,
)
from rustdoc_zod.schema_value import SchemaValue


def field_name_for_item(item: Item) -> str:
    """Return a struct field's name."""
    if not item.name:
        msg = f"struct field {item.id!r} has no name"
        raise InconsistentGraphError(msg)
    return item.name


def resolve_field(
    item: Item,
    graph: ItemGraph,
    known: Mapping[str, KnownType],
    primitives: Mapping[str, str],
) -> FieldDescriptor | None:
    """Decide the schema value of a struct field.

    Returns None when the field is declined (it is the serialization marker
    itself, or references something the crate does not describe). Raises
    UnsupportedShapeError for primitives and type shapes with no schema
    mapping.
    """
    if not isinstance(item.payload, StructFieldPayload):
        msg = f"field id {item.id!r} points at a non-field item"
        raise InconsistentGraphError(msg)
    name = field_name_for_item(item)
    declared = item.payload.type

    if isinstance(declared, PrimitiveType):
        return FieldDescriptor.required(name, map_primitive(declared.name, primitives))
    if isinstance(declared, ResolvedPathType):
        return _resolve_path_field(name, declared, graph, known, primitives)
    if isinstance(declared, UnsupportedType):
        raise UnsupportedShapeError(declared.shape)
    msg = f"unhandled type model {type(declared).__name__}"
    raise InconsistentGraphError(msg)


def _resolve_path_field(
    name: str,
    rp: ResolvedPathType,
    graph: ItemGraph,
    known: Mapping[str, KnownType],
    primitives: Mapping[str, str],
) -> FieldDescriptor | None:
    tag = known.get(rp.id)
    if tag is KnownType.SERIALIZE_MARKER:
        return None
    if tag is KnownType.STRING:
        return FieldDescriptor.required(name, SchemaValue.string())
    if tag is KnownType.OPTION:
        return _resolve_option(name, rp, primitives)

    # An item outside the known table, most likely a struct of this crate.
    summary = graph.summary_for(rp.id)
    if summary is None:
        return None
    if is_struct_kind(summary.kind):
        return FieldDescriptor.required(name, SchemaValue.reference(summary.short_name))
    msg = f"reference to {summary.kind} {'::'.join(summary.path)}"
    raise UnsupportedShapeError(msg)


def _resolve_option(
    name: str, rp: ResolvedPathType, primitives: Mapping[str, str]
) -> FieldDescriptor | None:
    if rp.args is None:
        msg = f"{rp.name} without generic arguments"
        raise UnsupportedShapeError(msg)
    if not isinstance(rp.args, AngleBracketedArgs):
        return None
    for arg in rp.args.args:
        if isinstance(arg, NonTypeArg):
            continue
        if isinstance(arg, PrimitiveType):
            value = map_primitive(arg.name, primitives)
            return FieldDescriptor.optional_of(name, value)
        shape = arg.shape if isinstance(arg, UnsupportedType) else f"path {arg.name}"
        msg = f"{rp.name}<{shape}>"
        raise UnsupportedShapeError(msg)
    return None
