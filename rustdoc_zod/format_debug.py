"""Debug dump of the in-memory generation output."""

import pprint

from rustdoc_zod.generate_schemas import GenerationResult


def format_debug(result: GenerationResult) -> str:
    """Pretty-print schemas and skips for inspection."""
    return pprint.pformat(
        {
            "marker_id": result.marker_id,
            "schemas": result.schemas,
            "skipped": result.report.entries,
        },
        width=100,
        sort_dicts=False,
    )
