"""Place type enumeration.

Types are ordered from broadest (country) to narrowest (apartment).
Declaration order is the rank; comparisons between members compare rank,
never the underlying string value.
"""

from __future__ import annotations

from enum import StrEnum


class PlaceType(StrEnum):
    """Named level of a place in the country-to-apartment chain."""

    COUNTRY = "country"
    REGION = "region"
    CITY = "city"
    DISTRICT = "district"
    STREET = "street"
    BUILDING = "building"
    APARTMENT = "apartment"

    @property
    def rank(self) -> int:
        """Position in the ordering (COUNTRY=0 ... APARTMENT=6)."""
        return _RANKS[self]

    @property
    def address_prefix(self) -> str:
        """Default prefix put in front of a place name in an address."""
        return ADDRESS_PREFIXES[self]

    @property
    def label(self) -> str:
        """Display label: ``"Country"`` for COUNTRY, ``"Region"`` for REGION."""
        return self.name[0] + self.name[1:].lower()

    @classmethod
    def parse(cls, raw: str) -> PlaceType:
        """Parse a type token in any case (``"City"``, ``"CITY"``, ``"city"``)."""
        try:
            return cls(raw.strip().lower())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            msg = f"Unknown place type: {raw!r} (expected one of: {valid})"
            raise ValueError(msg) from None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PlaceType):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PlaceType):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PlaceType):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PlaceType):
            return NotImplemented
        return self.rank >= other.rank


ADDRESS_PREFIXES: dict[PlaceType, str] = {
    PlaceType.COUNTRY: "",
    PlaceType.REGION: "обл. ",
    PlaceType.CITY: "г. ",
    PlaceType.DISTRICT: "р-н ",
    PlaceType.STREET: "ул. ",
    PlaceType.BUILDING: "д. ",
    PlaceType.APARTMENT: "кв. ",
}

_RANKS: dict[PlaceType, int] = {member: i for i, member in enumerate(PlaceType)}
