"""Formula sheet endpoint."""

from fastapi import APIRouter

from unitconverter.core.formulas import grouped_formulas

router = APIRouter(tags=["formulas"])


@router.get("/formulas")
async def list_formulas():
    return {"groups": [group.as_dict() for group in grouped_formulas()]}
