"""Logic for finding the types that implement the serialization marker."""

import logging
from collections.abc import Iterator, Mapping

from rustdoc_zod.item import ImplPayload, Item
from rustdoc_zod.item_graph import ItemGraph
from rustdoc_zod.known_type import KnownType
from rustdoc_zod.rust_type import ResolvedPathType

logger = logging.getLogger(__name__)


def scan_impls(
    graph: ItemGraph, known: Mapping[str, KnownType], marker_id: str | None
) -> Iterator[Item]:
    """Yield, in index order, each item with an impl of the marker trait.

    Any id classified as a serialization marker counts, including extra
    marker paths from config.
    """
    if marker_id is None:
        return
    for item in graph.items():
        impl = item.payload
        if not isinstance(impl, ImplPayload) or impl.trait is None:
            continue
        trait_id = impl.trait.id
        is_marker = known.get(trait_id) is KnownType.SERIALIZE_MARKER
        if trait_id != marker_id and not is_marker:
            continue
        if not isinstance(impl.for_type, ResolvedPathType):
            logger.debug("Skipping marker impl %s for a non-path type", item.id)
            continue
        yield graph.get_item(impl.for_type.id)
