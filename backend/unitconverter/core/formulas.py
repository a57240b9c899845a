"""Reference sheet of length conversion formulas, grouped by source unit."""

from __future__ import annotations

from dataclasses import dataclass, field

from unitconverter.core.conversion.units import Unit


@dataclass(frozen=True)
class UnitGroup:
    unit_name: str
    formulas: list[str] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {"unit_name": self.unit_name, "formulas": list(self.formulas)}


# Rounded reference figures as shown to users, not the factors used by convert().
_REFERENCE = {
    Unit.METRE: {
        Unit.MILLIMETRE: "1000",
        Unit.MILE: "0.000621371",
        Unit.FOOT: "3.28084",
    },
    Unit.MILLIMETRE: {
        Unit.METRE: "0.001",
        Unit.MILE: "0.000000621371",
        Unit.FOOT: "0.00328084",
    },
    Unit.MILE: {
        Unit.METRE: "1609.34",
        Unit.MILLIMETRE: "1609340",
        Unit.FOOT: "5280",
    },
    Unit.FOOT: {
        Unit.METRE: "0.3048",
        Unit.MILLIMETRE: "304.8",
        Unit.MILE: "0.000189394",
    },
}


def _formula(source: Unit, target: Unit, figure: str) -> str:
    return f"1 {source.value} = {figure} {target.plural}"


def grouped_formulas() -> list[UnitGroup]:
    """Return one group per unit, each relating 1 of that unit to the other three."""
    return [
        UnitGroup(
            unit_name=source.plural,
            formulas=[_formula(source, target, figure) for target, figure in targets.items()],
        )
        for source, targets in _REFERENCE.items()
    ]
