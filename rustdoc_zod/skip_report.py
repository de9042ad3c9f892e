"""Collects items that were skipped during schema generation."""

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

# Skip reasons
NO_FIELDS = "no_mappable_fields"
UNSUPPORTED_LAYOUT = "unsupported_layout"
UNSUPPORTED_FIELD = "unsupported_field"
DUPLICATE_NAME = "duplicate_name"
UNRESOLVED_REFERENCE = "unresolved_reference"


@dataclass(frozen=True)
class SkipEntry:
    """One soft skip: a whole struct, or a single field of one."""

    struct_name: str
    reason: str
    field_name: str | None = None
    detail: str = ""


class SkipReport:
    """Accumulates soft skips so they can be printed or written as JSON."""

    def __init__(self) -> None:
        self.entries: list[SkipEntry] = []

    def add(
        self,
        struct_name: str,
        reason: str,
        *,
        field_name: str | None = None,
        detail: str = "",
    ) -> None:
        self.entries.append(SkipEntry(struct_name, reason, field_name, detail))

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> dict[str, Any]:
        """Return the report as plain data."""
        return {
            "total": len(self.entries),
            "stats": self._compute_stats(),
            "skipped": [asdict(e) for e in self.entries],
        }

    def generate_report(self, path: Path) -> None:
        """Write the report as JSON."""
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, int]:
        reason_counts: dict[str, int] = {}
        for e in self.entries:
            reason_counts[e.reason] = reason_counts.get(e.reason, 0) + 1
        return reason_counts
