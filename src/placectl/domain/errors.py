"""Domain exceptions."""

from __future__ import annotations


class PlaceError(Exception):
    """Base class for place hierarchy errors."""


class PlaceTypeUnsetError(PlaceError, ValueError):
    """A place was asked for type-dependent data before its type was set."""

    def __init__(self, name: str, operation: str) -> None:
        self.name = name
        self.operation = operation
        super().__init__(f"Place {name!r} has no type; cannot compute {operation}")
