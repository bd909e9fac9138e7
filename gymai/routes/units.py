"""
Unit conversion route for display values.
"""
from fastapi import APIRouter, Depends, Request

from gymai.core.logger import log_request
from gymai.core.auth import verify_internal_secret
from gymai.core.limiter import limiter
from gymai.models.schemas import UnitConversionRequest, UnitConversionResponse
from gymai.services import units

router = APIRouter(dependencies=[Depends(verify_internal_secret)])


@router.post("/units/convert", response_model=UnitConversionResponse)
@limiter.limit("60/minute")
async def convert_units(request: Request, req: UnitConversionRequest):
    """Render stored metric values in the requested unit system."""
    log_request("/units/convert")

    imperial = req.units == units.UnitSystem.IMPERIAL
    response = UnitConversionResponse(units=req.units)

    if req.weight_kg is not None:
        response.weight = units.kg_to_lbs(req.weight_kg) if imperial else req.weight_kg
        response.weight_display = units.format_weight(req.weight_kg, req.units)

    if req.height_cm is not None:
        response.height_ft, response.height_in = units.cm_to_ft_in(req.height_cm)
        response.height_display = units.format_height(req.height_cm, req.units)

    if req.water_ml is not None:
        response.water = units.ml_to_oz(req.water_ml) if imperial else req.water_ml
        response.water_display = units.format_water(req.water_ml, req.units)

    return response
