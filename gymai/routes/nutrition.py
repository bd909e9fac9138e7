"""
Nutrition targets and meal analysis routes.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Request

from gymai.core.config import settings
from gymai.core.logger import log_request
from gymai.core.auth import verify_internal_secret
from gymai.core.limiter import limiter
from gymai.models.nutrition import MealAnalysisRequest, NutritionTargetsRequest, TDEERequest
from gymai.routes.errors import raise_for_failure
from gymai.services import calculations, meal_analysis
from gymai.services.openai_service import CompletionService, get_analysis_completion_service

router = APIRouter(dependencies=[Depends(verify_internal_secret)])


def _multiplier(value: Optional[float]) -> float:
    return value if value is not None else settings.DEFAULT_ACTIVITY_MULTIPLIER


@router.post("/nutrition/targets")
@limiter.limit("60/minute")
async def nutrition_targets(request: Request, req: NutritionTargetsRequest):
    """
    Dashboard targets from a (possibly incomplete) profile.

    TDEE and goal calories come back null when a body metric is missing.
    """
    log_request("/nutrition/targets")

    targets = calculations.daily_targets(
        req.metrics,
        req.goal,
        _multiplier(req.activityMultiplier),
    )
    return {"status": "success", "targets": targets}


@router.post("/nutrition/tdee")
@limiter.limit("60/minute")
async def nutrition_tdee(request: Request, req: TDEERequest):
    """TDEE, macros and water target for a complete set of body metrics."""
    log_request("/nutrition/tdee")

    result = calculations.compute_tdee(
        req.weight_kg,
        req.height_cm,
        req.age,
        req.gender,
        _multiplier(req.activityMultiplier),
    )
    response = {
        "status": "success",
        "tdee": result,
        "water_ml": calculations.water_target_ml(req.weight_kg),
    }
    if req.goal is not None:
        response["target_calories"] = calculations.adjusted_calories(req.goal, result.tdee)
    return response


@router.post("/analyze-meal")
@limiter.limit("10/minute")
async def analyze_meal(
    request: Request,
    req: MealAnalysisRequest,
    completion: Optional[CompletionService] = Depends(get_analysis_completion_service),
):
    """
    Estimate calories and macros for a free-text meal description.
    """
    log_request("/analyze-meal")

    result = await meal_analysis.analyze_meal(req.description, completion)
    raise_for_failure(result)
    return {"status": "success", "analysis": result.data}
