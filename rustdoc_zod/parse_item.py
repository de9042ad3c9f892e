"""Logic for parsing a single rustdoc JSON item into an Item."""

from typing import Any

from rustdoc_zod.errors import CrateLoadError
from rustdoc_zod.item import (
    PLAIN,
    TUPLE,
    UNIT,
    ImplPayload,
    Item,
    OtherPayload,
    Payload,
    StructFieldPayload,
    StructPayload,
)
from rustdoc_zod.parse_type import parse_path, parse_type, split_variant


def _parse_struct(payload: dict[str, Any]) -> StructPayload:
    tag, layout = split_variant(payload.get("kind"))
    if tag == UNIT:
        return StructPayload(UNIT)
    if tag == TUPLE:
        # Stripped (private) tuple fields are recorded as null.
        ids = tuple(str(x) for x in layout or [] if x is not None)
        return StructPayload(TUPLE, ids)
    if tag == PLAIN:
        ids = tuple(str(x) for x in (layout or {}).get("fields") or [])
        return StructPayload(PLAIN, ids)
    msg = f"unknown struct kind {tag!r}"
    raise CrateLoadError(msg)


def _parse_impl(payload: dict[str, Any]) -> ImplPayload:
    trait = payload.get("trait")
    return ImplPayload(
        trait=parse_path(trait) if trait else None,
        for_type=parse_type(payload.get("for")),
    )


def parse_payload(inner: Any) -> Payload:
    """Parse the ``inner`` value of an item into a typed payload."""
    tag, payload = split_variant(inner)
    if tag == "struct":
        return _parse_struct(payload or {})
    if tag == "struct_field":
        return StructFieldPayload(parse_type(payload))
    if tag == "impl":
        return _parse_impl(payload or {})
    return OtherPayload(tag)


def parse_item(item_id: str, raw: dict[str, Any]) -> Item:
    """Parse one entry of the crate ``index`` table."""
    if not isinstance(raw, dict) or "inner" not in raw:
        msg = f"item {item_id!r} has no inner payload"
        raise CrateLoadError(msg)
    name = raw.get("name")
    return Item(
        id=item_id,
        name=str(name) if name is not None else None,
        payload=parse_payload(raw["inner"]),
    )
