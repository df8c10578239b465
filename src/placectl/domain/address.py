"""Address component rules.

A place name that already carries its type marker ("Московская обл.",
"туп. Гранитный", "оф. 321") goes into the address verbatim. Any other
name ("Москва", "25 к. 2") gets the default prefix of its place type.
"""

from __future__ import annotations

from placectl.domain.types import PlaceType

ADDRESS_SEPARATOR = ", "
NO_PARENT_NAME = "--"


def has_type_marker(name: str) -> bool:
    """Check whether *name* ends with a dot or has a dot before its first space."""
    if name.endswith("."):
        return True
    head, _sep, _rest = name.partition(" ")
    return "." in head


def address_component(name: str, place_type: PlaceType) -> str:
    """Return the address piece for one place."""
    if has_type_marker(name):
        return name
    return f"{place_type.address_prefix}{name}"
