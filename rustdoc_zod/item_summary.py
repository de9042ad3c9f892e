"""Data model for the canonical path of an item."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemSummary:
    """Canonical module path and coarse kind of an item."""

    path: tuple[str, ...]
    kind: str  # struct/trait/enum/module/etc.

    @property
    def short_name(self) -> str:
        """Return the last path segment."""
        return self.path[-1] if self.path else ""
