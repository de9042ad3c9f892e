"""Logic for parsing rustdoc JSON type values into typed models."""

from typing import Any

from rustdoc_zod.errors import CrateLoadError
from rustdoc_zod.rust_type import (
    AngleBracketedArgs,
    GenericArgs,
    NonTypeArg,
    ParenthesizedArgs,
    PrimitiveType,
    ResolvedPathType,
    RustType,
    UnsupportedType,
)


def split_variant(raw: Any) -> tuple[str, Any]:
    """Split an externally tagged enum value into (tag, payload)."""
    if isinstance(raw, str):
        # Unit variants serialize as a bare string, e.g. "infer".
        return raw, None
    if isinstance(raw, dict) and len(raw) == 1:
        ((tag, payload),) = raw.items()
        return str(tag), payload
    msg = f"expected a tagged value, got {raw!r}"
    raise CrateLoadError(msg)


def parse_path(raw: dict[str, Any]) -> ResolvedPathType:
    """Parse a rustdoc ``Path`` (used by resolved paths and impl traits)."""
    if "id" not in raw:
        msg = f"path without an id: {raw!r}"
        raise CrateLoadError(msg)
    # Older format versions call the field "name", newer ones "path".
    name = raw.get("path") or raw.get("name") or ""
    args = raw.get("args")
    return ResolvedPathType(
        id=str(raw["id"]),
        name=str(name),
        args=parse_generic_args(args) if args is not None else None,
    )


def parse_generic_args(raw: Any) -> GenericArgs:
    """Parse the generic arguments attached to a path."""
    tag, payload = split_variant(raw)
    if tag != "angle_bracketed":
        return ParenthesizedArgs()
    args = []
    for arg in (payload or {}).get("args") or []:
        arg_tag, arg_payload = split_variant(arg)
        if arg_tag == "type":
            args.append(parse_type(arg_payload))
        else:
            args.append(NonTypeArg(arg_tag))
    return AngleBracketedArgs(tuple(args))


def parse_type(raw: Any) -> RustType:
    """Parse a rustdoc ``Type`` value."""
    tag, payload = split_variant(raw)
    if tag == "primitive":
        return PrimitiveType(str(payload))
    if tag == "resolved_path":
        if not isinstance(payload, dict):
            msg = f"malformed resolved_path: {payload!r}"
            raise CrateLoadError(msg)
        return parse_path(payload)
    return UnsupportedType(tag, payload)
