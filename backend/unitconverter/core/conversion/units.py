"""Supported length units. Internal representation is always metres."""

from __future__ import annotations

from enum import Enum


class Unit(Enum):
    METRE = "Metre"
    MILLIMETRE = "Millimetre"
    MILE = "Mile"
    FOOT = "Foot"

    @property
    def factor(self) -> float:
        """Multiplier converting a value in this unit into metres."""
        return UNIT_TO_M[self]

    @property
    def decimals(self) -> int:
        return UNIT_DECIMALS[self]

    @property
    def symbol(self) -> str:
        return UNIT_SYMBOLS[self]

    @property
    def plural(self) -> str:
        return UNIT_PLURALS[self]

    @classmethod
    def parse(cls, value: Unit | str) -> Unit:
        """Resolve a unit from an enum member, its name or its symbol.

        Raises:
            ValueError: If the value does not name one of the supported units.
        """
        if isinstance(value, Unit):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unknown unit {value!r}. Valid: {', '.join(VALID_UNITS)}")
        key = value.strip().lower()
        unit = _LOOKUP.get(key)
        if unit is None:
            raise ValueError(f"Unknown unit '{value}'. Valid: {', '.join(VALID_UNITS)}")
        return unit


UNIT_TO_M = {
    Unit.METRE: 1.0,
    Unit.MILLIMETRE: 0.001,
    Unit.MILE: 1609.34,
    Unit.FOOT: 0.3048,
}

# Miles get more digits: one metre is only ~0.0006 of a mile.
UNIT_DECIMALS = {
    Unit.METRE: 2,
    Unit.MILLIMETRE: 2,
    Unit.MILE: 6,
    Unit.FOOT: 2,
}

UNIT_SYMBOLS = {
    Unit.METRE: "m",
    Unit.MILLIMETRE: "mm",
    Unit.MILE: "mi",
    Unit.FOOT: "ft",
}

UNIT_PLURALS = {
    Unit.METRE: "Metres",
    Unit.MILLIMETRE: "Millimetres",
    Unit.MILE: "Miles",
    Unit.FOOT: "Feet",
}

VALID_UNITS = [u.value for u in Unit]

_LOOKUP: dict[str, Unit] = {}
for _unit in Unit:
    _LOOKUP[_unit.value.lower()] = _unit
    _LOOKUP[_unit.name.lower()] = _unit
    _LOOKUP[_unit.symbol] = _unit
    _LOOKUP[_unit.plural.lower()] = _unit


def to_m(value: float, unit: Unit) -> float:
    """Convert a value from the given unit to metres."""
    return value * unit.factor


def from_m(value: float, unit: Unit) -> float:
    """Convert a value from metres to the given unit."""
    return value / unit.factor
