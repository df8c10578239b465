"""The Location capability and its Place implementation.

A place knows its own name, type, and parent, and nothing else. Every
hierarchy query is answered recursively: a place asks its parent for the
parent's answer and combines it with its own data. The parent is any
object satisfying :class:`Location`, so a place never reads another
place's attributes beyond the public capability, and the capability does
not expose the parent reference at all.

INVARIANT: No cycle detection. A place that is its own ancestor makes
every recursive query run until Python raises ``RecursionError``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from placectl.domain.address import ADDRESS_SEPARATOR, NO_PARENT_NAME, address_component
from placectl.domain.errors import PlaceTypeUnsetError
from placectl.domain.types import PlaceType


@runtime_checkable
class Location(Protocol):
    """Public capability every place-like object exposes."""

    @property
    def name(self) -> str: ...

    @property
    def place_type(self) -> PlaceType | None: ...

    def get_parent_name(self) -> str:
        """Name of the immediate parent, or ``"--"`` without one."""
        ...

    def get_top_location(self) -> Location:
        """Topmost ancestor, or the place itself when it has no parent."""
        ...

    def is_correct(self) -> bool:
        """Whether every type on the path to the root is strictly broader."""
        ...

    def get_address(self) -> str:
        """This place and all of its ancestors joined with ``", "``."""
        ...


@dataclass(eq=False, repr=False)
class Place:
    """A mutable node in an address hierarchy.

    All attributes may be reassigned at any time, including re-parenting.
    The parent is shared, not owned: many places may point at one parent.
    """

    name: str = ""
    place_type: PlaceType | None = None
    parent: Location | None = None

    @classmethod
    def chain(cls, pairs: Iterable[tuple[PlaceType | None, str]]) -> Place:
        """Build a chain from leaf-first ``(type, name)`` pairs; return the leaf."""
        places = [cls(name=name, place_type=place_type) for place_type, name in pairs]
        if not places:
            msg = "Cannot build a place chain from no places"
            raise ValueError(msg)
        for child, parent in zip(places, places[1:]):
            child.parent = parent
        return places[0]

    def get_parent_name(self) -> str:
        if self.parent is None:
            return NO_PARENT_NAME
        return self.parent.name

    def get_top_location(self) -> Location:
        if self.parent is None:
            return self
        return self.parent.get_top_location()

    def is_correct(self) -> bool:
        own_type = self._require_type("correctness")
        if self.parent is None:
            return True
        if not self.parent.is_correct():
            return False
        parent_type = self.parent.place_type
        if parent_type is None:
            raise PlaceTypeUnsetError(self.parent.name, "correctness")
        return own_type > parent_type

    def get_address(self) -> str:
        own = address_component(self.name, self._require_type("address"))
        if self.parent is None:
            return own
        return f"{own}{ADDRESS_SEPARATOR}{self.parent.get_address()}"

    def _require_type(self, operation: str) -> PlaceType:
        if self.place_type is None:
            raise PlaceTypeUnsetError(self.name, operation)
        return self.place_type

    def __str__(self) -> str:
        return f"{self.name} ({self._require_type('display').label})"

    def __repr__(self) -> str:
        parent = "None" if self.parent is None else repr(self.parent.name)
        return f"Place(name={self.name!r}, place_type={self.place_type!r}, parent={parent})"
