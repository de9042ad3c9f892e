"""Logic for mapping a struct item to an object schema."""

import logging
from collections.abc import Mapping

from rustdoc_zod.errors import InconsistentGraphError, UnsupportedShapeError
from rustdoc_zod.item import PLAIN, Item, StructPayload
from rustdoc_zod.item_graph import ItemGraph
from rustdoc_zod.known_type import KnownType
from rustdoc_zod.object_schema import FieldDescriptor, ObjectSchema
from rustdoc_zod.resolve_field import resolve_field
from rustdoc_zod.skip_report import (
    NO_FIELDS,
    UNSUPPORTED_FIELD,
    UNSUPPORTED_LAYOUT,
    SkipReport,
)

logger = logging.getLogger(__name__)


class StructMapper:
    """Turns struct items into object schemas, one struct at a time."""

    def __init__(
        self,
        graph: ItemGraph,
        known: Mapping[str, KnownType],
        primitives: Mapping[str, str],
        report: SkipReport,
        *,
        strict: bool = False,
    ) -> None:
        """Initialize the mapper.

        With ``strict`` set, an unsupported field aborts the run instead of
        being dropped and recorded in the report.
        """
        self.graph = graph
        self.known = known
        self.primitives = primitives
        self.report = report
        self.strict = strict

    def map_item(self, item: Item) -> list[ObjectSchema]:
        """Return zero or one schema for an item implementing the marker."""
        if not isinstance(item.payload, StructPayload):
            logger.debug("Skipping non-struct implementer %s", item.name or item.id)
            return []
        if not item.name:
            msg = f"struct {item.id!r} has no name"
            raise InconsistentGraphError(msg)

        struct = item.payload
        if struct.layout != PLAIN:
            # Unit and tuple structs have no named fields to map.
            logger.debug("Skipping %s struct %s", struct.layout, item.name)
            self.report.add(item.name, UNSUPPORTED_LAYOUT, detail=struct.layout)
            return []

        fields: list[FieldDescriptor] = []
        for field_id in struct.field_ids:
            field_item = self.graph.get_item(field_id)
            resolved = self._resolve(item.name, field_item)
            if resolved is not None:
                fields.append(resolved)

        if not fields:
            logger.warning("No mappable fields, so not adding %s", item.name)
            self.report.add(item.name, NO_FIELDS)
            return []
        return [ObjectSchema(name=item.name, fields=tuple(fields))]

    def _resolve(self, struct_name: str, field_item: Item) -> FieldDescriptor | None:
        try:
            return resolve_field(field_item, self.graph, self.known, self.primitives)
        except UnsupportedShapeError as exc:
            located = exc.located(struct_name, field_item.name or field_item.id)
            if self.strict:
                raise located from exc
            logger.warning("Skipping field: %s", located)
            self.report.add(
                struct_name,
                UNSUPPORTED_FIELD,
                field_name=located.field_name,
                detail=located.shape,
            )
            return None
