"""Length conversion: one input value projected into every supported unit."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field

from unitconverter.core.conversion.units import Unit, from_m, to_m

logger = logging.getLogger(__name__)

# Plain ASCII decimal notation with optional exponent. Rejects "1_000", "0x10", "inf".
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


@dataclass
class ConversionError:
    message: str
    kind: str = "conversion"

    @property
    def ok(self) -> bool:
        return False


@dataclass
class ParseError(ConversionError):
    """Input text is not a finite decimal number."""

    kind: str = "parse"


@dataclass
class UnsupportedUnitError(ConversionError):
    """A unit outside the supported set was requested."""

    kind: str = "unsupported_unit"


@dataclass
class ConversionResult:
    values: dict[Unit, str]
    from_unit: Unit
    to_unit: Unit
    base_meters: float = field(repr=False, default=0.0)

    @property
    def ok(self) -> bool:
        return True

    @property
    def selected_output(self) -> str:
        return self.values[self.to_unit]

    def as_dict(self) -> dict:
        return {
            "values": {unit.value: text for unit, text in self.values.items()},
            "selected_output": self.selected_output,
            "from_unit": self.from_unit.value,
            "to_unit": self.to_unit.value,
        }


def parse_value(text: str) -> float | None:
    """Parse a decimal string. Returns None for anything that is not a finite number."""
    if not isinstance(text, str):
        return None
    raw = text.strip()
    if not _NUMBER_RE.fullmatch(raw):
        return None
    value = float(raw)
    if not math.isfinite(value):
        return None
    return value


def format_value(value: float, unit: Unit) -> str:
    """Fixed-point text with the unit's digit count, '.' separator, no grouping."""
    text = f"{value:.{unit.decimals}f}"
    if text.startswith("-") and float(text) == 0:
        text = text[1:]
    return text


def convert(
    input_value: str,
    from_unit: Unit | str,
    to_unit: Unit | str,
) -> ConversionResult | ConversionError:
    """Convert input_value from from_unit into every supported unit.

    Never raises for bad input: returns ParseError or UnsupportedUnitError
    instead of a result.
    """
    try:
        source = Unit.parse(from_unit)
        target = Unit.parse(to_unit)
    except ValueError as exc:
        logger.debug("Rejected conversion: %s", exc)
        return UnsupportedUnitError(str(exc))

    value = parse_value(input_value)
    if value is None:
        logger.debug("Rejected conversion input %r", input_value)
        return ParseError(f"Invalid number: {input_value!r}")

    base_meters = to_m(value, source)
    projected = {unit: from_m(base_meters, unit) for unit in Unit}
    # A finite input can still overflow, e.g. 1e308 miles.
    if not all(math.isfinite(v) for v in projected.values()):
        return ParseError(f"Value out of range: {input_value!r}")

    return ConversionResult(
        values={unit: format_value(v, unit) for unit, v in projected.items()},
        from_unit=source,
        to_unit=target,
        base_meters=base_meters,
    )
