"""Pydantic schemas for API request/response validation."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, field_validator

from unitconverter.core.conversion.units import Unit


class ConvertRequest(BaseModel):
    value: str
    from_unit: str = Unit.METRE.value
    to_unit: str = Unit.MILE.value

    @field_validator("value", mode="before")
    @classmethod
    def number_as_text(cls, v):
        # JSON clients may send a bare number.
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return repr(v) if isinstance(v, float) else str(v)
        return v


class ConvertResponse(BaseModel):
    values: dict[str, str]
    selected_output: str
    from_unit: str
    to_unit: str


class UnitInfo(BaseModel):
    name: str
    symbol: str
    plural: str
    factor: float
    decimals: int


class PreferencesUpdate(BaseModel):
    dark_mode: Optional[bool] = None
    font_size: Optional[int] = None


class PanelUpdate(BaseModel):
    value: Optional[str] = None
    from_unit: Optional[str] = None
    to_unit: Optional[str] = None
