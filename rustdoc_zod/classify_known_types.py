"""Logic for locating foundational types and the serialization marker."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from rustdoc_zod.item_summary import ItemSummary
from rustdoc_zod.known_type import KnownType
from rustdoc_zod.known_type_registry import KnownTypeRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Classification:
    """Known-type table plus the id of the serialization marker, if present."""

    known: Mapping[str, KnownType]
    marker_id: str | None


def classify_known_types(
    paths: Mapping[str, ItemSummary], registry: KnownTypeRegistry
) -> Classification:
    """Match every path summary against the registry in a single pass."""
    known: dict[str, KnownType] = {}
    marker_id: str | None = None
    for item_id, summary in paths.items():
        tag = registry.match(summary.path)
        if tag is None:
            continue
        known[item_id] = tag
        if tag is KnownType.SERIALIZE_MARKER and marker_id is None:
            marker_id = item_id
            logger.info("Found marker %s as %s", "::".join(summary.path), item_id)

    if marker_id is None:
        logger.info("No serialization marker in crate paths; nothing to generate")
    return Classification(known=MappingProxyType(known), marker_id=marker_id)
