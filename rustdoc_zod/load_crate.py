"""Logic for loading a rustdoc JSON artifact from disk."""

import json
from pathlib import Path

from rustdoc_zod.build_item_graph import build_item_graph
from rustdoc_zod.errors import CrateLoadError
from rustdoc_zod.item_graph import ItemGraph


def load_crate(path: Path) -> ItemGraph:
    """Load and index a rustdoc JSON file."""
    try:
        doc = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"could not read rustdoc JSON {path}: {exc}"
        raise CrateLoadError(msg) from exc
    if not isinstance(doc, dict):
        msg = f"rustdoc JSON {path} is not an object"
        raise CrateLoadError(msg)
    return build_item_graph(doc)
