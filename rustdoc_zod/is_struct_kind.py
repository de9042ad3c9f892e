"""Predicate for checking if a path summary kind is a struct."""


def is_struct_kind(kind: str) -> bool:
    """Check if the kind represents a struct."""
    return kind.lower() == "struct"
