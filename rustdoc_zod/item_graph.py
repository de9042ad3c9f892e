"""Identifier-addressed store of documented items and their paths."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from rustdoc_zod.errors import InconsistentGraphError
from rustdoc_zod.item import Item
from rustdoc_zod.item_summary import ItemSummary


@dataclass(frozen=True)
class ItemGraph:
    """Read-only snapshot of a crate's items and path summaries."""

    index: Mapping[str, Item]
    paths: Mapping[str, ItemSummary]
    format_version: int | None = None

    def __post_init__(self) -> None:
        """Freeze the lookup tables."""
        object.__setattr__(self, "index", MappingProxyType(dict(self.index)))
        object.__setattr__(self, "paths", MappingProxyType(dict(self.paths)))

    def get_item(self, item_id: str) -> Item:
        """Return the item for an id that is referenced by another item."""
        item = self.index.get(item_id)
        if item is None:
            msg = f"referenced item {item_id!r} is not in the crate index"
            raise InconsistentGraphError(msg)
        return item

    def summary_for(self, item_id: str) -> ItemSummary | None:
        """Return the path summary for an id, if the crate records one."""
        return self.paths.get(item_id)

    def items(self) -> Iterator[Item]:
        """Iterate items in index order."""
        return iter(self.index.values())
