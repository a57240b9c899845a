"""Tests for the conversion and formula panels."""

from unitconverter.core.conversion.units import Unit
from unitconverter.core.display.panels import ERROR_PLACEHOLDER, ConversionPanel, FormulaPanel


class TestConversionPanel:
    def test_initial_state(self):
        panel = ConversionPanel()
        assert panel.input_value == "1"
        assert panel.from_unit is Unit.METRE
        assert panel.to_unit is Unit.MILE
        assert panel.output_value == "0.000621"
        assert panel.error is None

    def test_update_value(self):
        panel = ConversionPanel()
        panel.update(value="2", to_unit="Millimetre")
        assert panel.output_value == "2000.00"
        assert panel.values[Unit.FOOT] == "6.56"

    def test_bad_input_keeps_previous_results(self):
        panel = ConversionPanel()
        panel.update(value="3")
        previous = dict(panel.values)
        panel.update(value="abc")
        assert panel.output_value == ERROR_PLACEHOLDER
        assert panel.values == previous
        assert panel.error is not None

    def test_recovers_after_error(self):
        panel = ConversionPanel()
        panel.update(value="")
        panel.update(value="1", to_unit="Metre")
        assert panel.output_value == "1.00"
        assert panel.error is None

    def test_unknown_unit_leaves_selection(self):
        panel = ConversionPanel()
        panel.update(value="5", from_unit="cubit")
        assert panel.output_value == ERROR_PLACEHOLDER
        assert panel.from_unit is Unit.METRE
        assert panel.input_value == "1"

    def test_share_text(self):
        panel = ConversionPanel(input_value="1", from_unit="Mile", to_unit="Metre")
        assert panel.share_text() == "1 Mile = 1609.34 Metre"

    def test_state_lists_units_in_order(self):
        state = ConversionPanel().state()
        assert [row["unit"] for row in state["results"]] == ["Metre", "Millimetre", "Mile", "Foot"]

    def test_display_scale(self):
        panel = ConversionPanel()
        panel.apply_display_scale(20.0)
        assert panel.state()["text_size"] == 20.0


class TestFormulaPanel:
    def test_state(self):
        panel = FormulaPanel()
        panel.apply_display_scale(14.0)
        state = panel.state()
        assert len(state["groups"]) == 4
        assert state["text_size"] == 14.0
