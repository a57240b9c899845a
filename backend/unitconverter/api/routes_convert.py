"""Conversion endpoints: one value in, all four units out."""

from fastapi import APIRouter, HTTPException

from unitconverter.models.schemas import ConvertRequest, ConvertResponse, UnitInfo
from unitconverter.core.conversion.converter import ConversionError, convert
from unitconverter.core.conversion.units import Unit

router = APIRouter(tags=["convert"])


@router.get("/units", response_model=list[UnitInfo])
async def list_units():
    """List supported units with their factor to metres and display precision."""
    return [
        UnitInfo(
            name=unit.value,
            symbol=unit.symbol,
            plural=unit.plural,
            factor=unit.factor,
            decimals=unit.decimals,
        )
        for unit in Unit
    ]


@router.post("/convert", response_model=ConvertResponse)
async def convert_length(req: ConvertRequest):
    """Convert a value into every supported unit."""
    result = convert(req.value, req.from_unit, req.to_unit)
    if isinstance(result, ConversionError):
        raise HTTPException(
            status_code=422,
            detail=[{"message": result.message, "kind": result.kind}],
        )
    return result.as_dict()
