"""Panels that call into the converter and hold what is currently displayed."""

from __future__ import annotations

from typing import Optional

from unitconverter.core.conversion.converter import ConversionError, convert
from unitconverter.core.conversion.units import Unit
from unitconverter.core.formulas import UnitGroup, grouped_formulas

ERROR_PLACEHOLDER = "Error"


class ConversionPanel:
    """Input field, two unit selectors, a result list and an output field.

    Every change recomputes all four values. A failed conversion puts
    ERROR_PLACEHOLDER in the output field and leaves the result list alone.
    """

    def __init__(
        self,
        input_value: str = "1",
        from_unit: Unit | str = Unit.METRE,
        to_unit: Unit | str = Unit.MILE,
    ) -> None:
        self.input_value = input_value
        self.from_unit = Unit.parse(from_unit)
        self.to_unit = Unit.parse(to_unit)
        self.values: dict[Unit, str] = {}
        self.output_value = "1"
        self.error: Optional[str] = None
        self.text_size = 16.0
        self.refresh()

    def apply_display_scale(self, size: float) -> None:
        self.text_size = size

    def update(
        self,
        value: Optional[str] = None,
        from_unit: Optional[str] = None,
        to_unit: Optional[str] = None,
    ) -> None:
        """Apply any of the three inputs and recompute."""
        try:
            source = Unit.parse(from_unit) if from_unit is not None else self.from_unit
            target = Unit.parse(to_unit) if to_unit is not None else self.to_unit
        except ValueError as exc:
            self._show_error(str(exc))
            return

        if value is not None:
            self.input_value = value
        self.from_unit = source
        self.to_unit = target
        self.refresh()

    def refresh(self) -> None:
        result = convert(self.input_value, self.from_unit, self.to_unit)
        if isinstance(result, ConversionError):
            self._show_error(result.message)
            return
        self.values = result.values
        self.output_value = result.selected_output
        self.error = None

    def share_text(self) -> str:
        return f"{self.input_value} {self.from_unit.value} = {self.output_value} {self.to_unit.value}"

    def state(self) -> dict:
        return {
            "input_value": self.input_value,
            "from_unit": self.from_unit.value,
            "to_unit": self.to_unit.value,
            "results": [{"unit": unit.value, "value": text} for unit, text in self.values.items()],
            "output_value": self.output_value,
            "error": self.error,
            "share_text": self.share_text(),
            "text_size": self.text_size,
        }

    def _show_error(self, message: str) -> None:
        self.output_value = ERROR_PLACEHOLDER
        self.error = message


class FormulaPanel:
    def __init__(self) -> None:
        self.groups: list[UnitGroup] = grouped_formulas()
        self.text_size = 16.0

    def apply_display_scale(self, size: float) -> None:
        self.text_size = size

    def state(self) -> dict:
        return {
            "groups": [group.as_dict() for group in self.groups],
            "text_size": self.text_size,
        }
