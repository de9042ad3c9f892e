"""Rendering of object schemas as Zod TypeScript source."""

import json
import logging
import re
from collections.abc import Iterable

from rustdoc_zod.object_schema import FieldDescriptor, ObjectSchema
from rustdoc_zod.schema_value import SchemaValue, ValueKind

logger = logging.getLogger(__name__)

HEADER = "// Generated by rustdoc-to-zod. Do not edit by hand."
IDENT_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def property_key(name: str) -> str:
    """Return an object key, quoted when it is not a plain identifier."""
    if name.startswith("r#"):
        name = name[2:]
    return name if IDENT_RE.match(name) else json.dumps(name)


def render_value(
    value: SchemaValue, defined: set[str], emitted: set[str] | None = None
) -> str:
    """Render a schema value.

    References to schemas declared earlier are direct, references to schemas
    declared later are lazy, and references to names never declared in the
    module fall back to ``z.unknown()``.
    """
    if value.kind is ValueKind.STRING:
        return "z.string()"
    if value.kind is ValueKind.NUMBER:
        return "z.number()"
    ref = value.ref_name or ""
    if ref in defined:
        return ref
    if emitted is not None and ref not in emitted:
        return "z.unknown()"
    return f"z.lazy(() => {ref})"


def render_field(
    field: FieldDescriptor, defined: set[str], emitted: set[str] | None = None
) -> str:
    """Render one ``key: schema`` line."""
    expr = render_value(field.value, defined, emitted)
    if field.optional:
        expr += ".optional()"
    line = f"  {property_key(field.name)}: {expr},"
    if expr.startswith("z.unknown()"):
        line += f" // unresolved: {field.value.ref_name}"
    return line


def render_object(
    schema: ObjectSchema,
    defined: set[str],
    *,
    export: bool = True,
    emitted: set[str] | None = None,
) -> str:
    """Render a single ``z.object`` declaration and its inferred type."""
    prefix = "export " if export else ""
    lines = [f"{prefix}const {schema.name} = z.object({{"]
    lines.extend(render_field(f, defined, emitted) for f in schema.fields)
    lines.append("});")
    lines.append(f"{prefix}type {schema.name} = z.infer<typeof {schema.name}>;")
    return "\n".join(lines)


def render_zod(schemas: Iterable[ObjectSchema], *, export: bool = True) -> str:
    """Render all schemas into one TypeScript module."""
    unique: list[ObjectSchema] = []
    for schema in schemas:
        if any(s.name == schema.name for s in unique):
            logger.warning("Dropping second declaration of %s", schema.name)
            continue
        unique.append(schema)
    emitted = {s.name for s in unique}

    out = [HEADER, 'import { z } from "zod";']
    defined: set[str] = set()
    for schema in unique:
        out.append("")
        out.append(render_object(schema, defined, export=export, emitted=emitted))
        defined.add(schema.name)
    return "\n".join(out) + "\n"
