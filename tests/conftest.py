"""Shared fixtures for building rustdoc JSON crates in tests."""

from typing import Any

import pytest

from rustdoc_zod.build_item_graph import build_item_graph
from rustdoc_zod.item_graph import ItemGraph

SERIALIZE_ID = "1:100"
STRING_ID = "5:200"
OPTION_ID = "2:300"
VEC_ID = "5:400"


def prim(name: str) -> dict[str, Any]:
    """Return a primitive type value."""
    return {"primitive": name}


def path_to(
    item_id: str, name: str, args: list[dict[str, Any]] | None = None
) -> dict[str, Any]:
    """Return a resolved_path type value with angle-bracketed args."""
    return {
        "resolved_path": {
            "name": name,
            "id": item_id,
            "args": {"angle_bracketed": {"args": args or [], "bindings": []}},
        }
    }


def string_t() -> dict[str, Any]:
    """Return the type of an ``alloc::string::String`` field."""
    return path_to(STRING_ID, "String")


def option_of(ty: dict[str, Any]) -> dict[str, Any]:
    """Return the type of an ``Option<ty>`` field."""
    return path_to(OPTION_ID, "Option", [{"type": ty}])


class CrateBuilder:
    """Builds a minimal rustdoc JSON document for a ``docs`` crate."""

    def __init__(self) -> None:
        self.index: dict[str, Any] = {}
        self.paths: dict[str, Any] = {
            SERIALIZE_ID: {
                "crate_id": 1,
                "path": ["serde", "ser", "Serialize"],
                "kind": "trait",
            },
            STRING_ID: {
                "crate_id": 5,
                "path": ["alloc", "string", "String"],
                "kind": "struct",
            },
            OPTION_ID: {
                "crate_id": 2,
                "path": ["core", "option", "Option"],
                "kind": "enum",
            },
            VEC_ID: {"crate_id": 5, "path": ["alloc", "vec", "Vec"], "kind": "struct"},
        }
        self._next = 0

    def _new_id(self) -> str:
        self._next += 1
        return f"0:{self._next}"

    def struct(
        self,
        name: str,
        fields: list[tuple[str, dict[str, Any]]] | None = None,
        *,
        serialize: bool = True,
        kind: Any = None,
        module: tuple[str, ...] = (),
    ) -> str:
        """Add a struct with named fields; returns its id."""
        field_ids = []
        for field_name, ty in fields or []:
            fid = self._new_id()
            self.index[fid] = {
                "id": fid,
                "crate_id": 0,
                "name": field_name,
                "inner": {"struct_field": ty},
            }
            field_ids.append(fid)

        sid = self._new_id()
        if kind is None:
            kind = {"plain": {"fields": field_ids, "fields_stripped": False}}
        self.index[sid] = {
            "id": sid,
            "crate_id": 0,
            "name": name,
            "inner": {
                "struct": {
                    "kind": kind,
                    "generics": {"params": [], "where_predicates": []},
                    "impls": [],
                }
            },
        }
        self.paths[sid] = {
            "crate_id": 0,
            "path": ["docs", *module, name],
            "kind": "struct",
        }
        if serialize:
            self.impl_serialize(path_to(sid, name))
        return sid

    def impl_serialize(self, for_type: dict[str, Any]) -> str:
        """Add ``impl Serialize for <for_type>``."""
        iid = self._new_id()
        self.index[iid] = {
            "id": iid,
            "crate_id": 0,
            "name": None,
            "inner": {
                "impl": {
                    "is_unsafe": False,
                    "trait": {"name": "Serialize", "id": SERIALIZE_ID, "args": None},
                    "for": for_type,
                    "items": [],
                    "negative": False,
                    "synthetic": False,
                    "blanket_impl": None,
                }
            },
        }
        return iid

    def enum(self, name: str, *, serialize: bool = True) -> str:
        """Add an enum item (never mapped)."""
        eid = self._new_id()
        self.index[eid] = {
            "id": eid,
            "crate_id": 0,
            "name": name,
            "inner": {"enum": {"variants": [], "impls": []}},
        }
        self.paths[eid] = {"crate_id": 0, "path": ["docs", name], "kind": "enum"}
        if serialize:
            self.impl_serialize(path_to(eid, name))
        return eid

    def doc(self) -> dict[str, Any]:
        """Return the crate as parsed rustdoc JSON."""
        return {
            "root": "0:0",
            "crate_version": None,
            "format_version": 24,
            "index": self.index,
            "paths": self.paths,
        }

    def graph(self) -> ItemGraph:
        """Return the crate as an ItemGraph."""
        return build_item_graph(self.doc())


@pytest.fixture
def crate() -> CrateBuilder:
    """Provide an empty crate builder."""
    return CrateBuilder()
