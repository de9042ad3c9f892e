"""Registry mapping canonical item paths to known-type tags."""

from collections.abc import Iterable, Mapping

from rustdoc_zod.errors import ConfigError
from rustdoc_zod.known_type import KnownType


class KnownTypeRegistry:
    """Maps full path segment sequences to the KnownType they denote."""

    def __init__(self) -> None:
        """Create an empty registry."""
        self._patterns: dict[tuple[str, ...], KnownType] = {}

    def register(self, path: Iterable[str], tag: KnownType) -> None:
        """Register a path; a path may only ever denote one tag."""
        key = tuple(path)
        if not key:
            msg = f"empty path registered for {tag.value}"
            raise ConfigError(msg)
        existing = self._patterns.get(key)
        if existing is not None and existing is not tag:
            msg = (
                f"path {'::'.join(key)} registered as both "
                f"{existing.value} and {tag.value}"
            )
            raise ConfigError(msg)
        self._patterns[key] = tag

    def match(self, path: Iterable[str]) -> KnownType | None:
        """Return the tag for an exact path match."""
        return self._patterns.get(tuple(path))

    def __len__(self) -> int:
        return len(self._patterns)

    @classmethod
    def from_config(
        cls, known_types: Mapping[str, list[list[str]]]
    ) -> "KnownTypeRegistry":
        """Build a registry from the ``known_types`` config section."""
        registry = cls()
        for tag_name, patterns in known_types.items():
            try:
                tag = KnownType(tag_name)
            except ValueError as exc:
                msg = f"unknown known_types entry {tag_name!r}"
                raise ConfigError(msg) from exc
            for pattern in patterns or []:
                registry.register([str(seg) for seg in pattern], tag)
        return registry
