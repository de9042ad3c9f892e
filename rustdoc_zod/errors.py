"""Exception types raised while loading metadata and generating schemas."""


class GenerationError(Exception):
    """Base class for every error raised by the schema generator."""


class InconsistentGraphError(GenerationError):
    """The item graph breaks one of its own invariants.

    Raised for ids that do not resolve, structs without a name and field ids
    that point at something other than a struct field. These indicate a broken
    rustdoc artifact or a loader bug, so they are never skipped.
    """


class UnsupportedShapeError(GenerationError):
    """A field uses a primitive or type shape the generator cannot express."""

    def __init__(
        self, shape: str, *, struct_name: str = "", field_name: str = ""
    ) -> None:
        """Store the offending shape and where it was found."""
        self.shape = shape
        self.struct_name = struct_name
        self.field_name = field_name
        super().__init__(self._describe())

    def _describe(self) -> str:
        location = ".".join(p for p in (self.struct_name, self.field_name) if p)
        if location:
            return f"unsupported shape at {location}: {self.shape}"
        return f"unsupported shape: {self.shape}"

    def located(self, struct_name: str, field_name: str) -> "UnsupportedShapeError":
        """Return a copy of this error tagged with its struct and field."""
        return UnsupportedShapeError(
            self.shape, struct_name=struct_name, field_name=field_name
        )


class CrateLoadError(GenerationError):
    """The rustdoc JSON artifact is missing, unreadable or malformed."""


class ConfigError(GenerationError):
    """The generator configuration is invalid."""
