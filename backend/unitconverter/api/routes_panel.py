"""Panel endpoints for the conversion screen and the formula screen."""

from fastapi import APIRouter, Request

from unitconverter.models.schemas import PanelUpdate

router = APIRouter(tags=["panel"])


@router.get("/panel/conversion")
async def conversion_panel(request: Request):
    return request.app.state.conversion_panel.state()


@router.post("/panel/conversion")
async def update_conversion_panel(req: PanelUpdate, request: Request):
    """Apply input/unit changes. Bad input shows "Error" in the output field, still 200."""
    panel = request.app.state.conversion_panel
    panel.update(value=req.value, from_unit=req.from_unit, to_unit=req.to_unit)
    return panel.state()


@router.get("/panel/formulas")
async def formula_panel(request: Request):
    return request.app.state.formula_panel.state()
