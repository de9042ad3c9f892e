"""Two-pass generation of object schemas from an item graph."""

import logging
from dataclasses import dataclass
from typing import Any

from rustdoc_zod.classify_known_types import classify_known_types
from rustdoc_zod.item import Item
from rustdoc_zod.item_graph import ItemGraph
from rustdoc_zod.known_type_registry import KnownTypeRegistry
from rustdoc_zod.load_config import ERROR, build_config
from rustdoc_zod.map_struct import StructMapper
from rustdoc_zod.object_schema import ObjectSchema
from rustdoc_zod.scan_impls import scan_impls
from rustdoc_zod.schema_value import ValueKind
from rustdoc_zod.skip_report import DUPLICATE_NAME, UNRESOLVED_REFERENCE, SkipReport

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Ordered schemas produced by a run, plus everything that was skipped."""

    schemas: list[ObjectSchema]
    report: SkipReport
    marker_id: str | None = None


def _full_path(graph: ItemGraph, item: Item) -> str:
    summary = graph.summary_for(item.id)
    return "::".join(summary.path) if summary else (item.name or item.id)


def _report_unresolved(schemas: list[ObjectSchema], report: SkipReport) -> None:
    """Record references to names that no emitted schema declares."""
    emitted = {s.name for s in schemas}
    for schema in schemas:
        for field in schema.fields:
            ref = field.value.ref_name
            if field.value.kind is not ValueKind.REFERENCE or ref in emitted:
                continue
            logger.warning(
                "%s.%s references %s, which has no schema", schema.name, field.name, ref
            )
            report.add(
                schema.name,
                UNRESOLVED_REFERENCE,
                field_name=field.name,
                detail=ref or "",
            )


def generate_schemas(
    graph: ItemGraph, config: dict[str, Any] | None = None
) -> GenerationResult:
    """Classify known types, then map every marker implementer to a schema.

    ``config`` may be partial; it is merged over the defaults.
    """
    config = build_config(config)
    registry = KnownTypeRegistry.from_config(config["known_types"])
    classification = classify_known_types(graph.paths, registry)

    report = SkipReport()
    mapper = StructMapper(
        graph,
        classification.known,
        config["primitives"],
        report,
        strict=config["on_unsupported"] == ERROR,
    )

    schemas: list[ObjectSchema] = []
    emitted_from: dict[str, str] = {}
    for item in scan_impls(graph, classification.known, classification.marker_id):
        for schema in mapper.map_item(item):
            path = _full_path(graph, item)
            first = emitted_from.get(schema.name)
            if first is not None:
                # Zod consts share one namespace; the first struct keeps the name.
                logger.warning("Skipping %s: name already used by %s", path, first)
                report.add(schema.name, DUPLICATE_NAME, detail=f"{path} ({first})")
                continue
            emitted_from[schema.name] = path
            schemas.append(schema)

    _report_unresolved(schemas, report)
    logger.info("Generated %d schemas, skipped %d items", len(schemas), len(report))
    return GenerationResult(
        schemas=schemas, report=report, marker_id=classification.marker_id
    )
