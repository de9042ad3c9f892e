"""Logic for building an ItemGraph from a parsed rustdoc JSON document."""

import logging
from typing import Any

from rustdoc_zod.errors import CrateLoadError
from rustdoc_zod.item import Item
from rustdoc_zod.item_graph import ItemGraph
from rustdoc_zod.item_summary import ItemSummary
from rustdoc_zod.parse_item import parse_item

logger = logging.getLogger(__name__)


def build_item_graph(doc: dict[str, Any]) -> ItemGraph:
    """Index every item and path summary of a rustdoc JSON crate."""
    raw_index = doc.get("index")
    raw_paths = doc.get("paths")
    if not isinstance(raw_index, dict) or not isinstance(raw_paths, dict):
        msg = "rustdoc JSON must contain 'index' and 'paths' tables"
        raise CrateLoadError(msg)

    index: dict[str, Item] = {}
    for raw_id, raw_item in raw_index.items():
        item_id = str(raw_id)
        index[item_id] = parse_item(item_id, raw_item)

    paths: dict[str, ItemSummary] = {}
    for raw_id, raw_summary in raw_paths.items():
        if not isinstance(raw_summary, dict):
            continue
        paths[str(raw_id)] = ItemSummary(
            path=tuple(str(seg) for seg in raw_summary.get("path") or []),
            kind=str(raw_summary.get("kind") or ""),
        )

    format_version = doc.get("format_version")
    logger.info(
        "Indexed %d items and %d paths (format version %s)",
        len(index),
        len(paths),
        format_version,
    )
    return ItemGraph(
        index=index,
        paths=paths,
        format_version=int(format_version) if format_version is not None else None,
    )
