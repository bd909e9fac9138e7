"""
Condition-based workout adaptation route.
"""
import asyncio
from typing import Optional

from fastapi import APIRouter, Depends, Request

from gymai.core.config import settings
from gymai.core.errors import AIErrorKind
from gymai.core.logger import log_request, log_error
from gymai.core.auth import verify_internal_secret
from gymai.core.limiter import limiter
from gymai.models.adaptation import AdaptationRequest
from gymai.models.schemas import AIFailure
from gymai.routes.errors import raise_for_failure
from gymai.services import adaptation
from gymai.services.openai_service import CompletionService, get_completion_service

router = APIRouter(dependencies=[Depends(verify_internal_secret)])


@router.post("/adapt-workout")
@limiter.limit("10/minute")
async def adapt_workout(
    request: Request,
    req: AdaptationRequest,
    completion: Optional[CompletionService] = Depends(get_completion_service),
):
    """
    Adapt the current plan to how the user feels.

    "great" returns the plan unchanged without calling the AI. Other
    conditions are bounded by AI_REQUEST_TIMEOUT.
    """
    log_request("/adapt-workout")

    try:
        result = await asyncio.wait_for(
            adaptation.adapt_workout(
                req.condition,
                req.exercises,
                req.injuryDescription,
                completion,
            ),
            timeout=settings.AI_REQUEST_TIMEOUT,
        )
    except asyncio.TimeoutError as e:
        log_error("Workout adaptation timeout", e)
        result = AIFailure(
            error=adaptation.ERROR_MESSAGES[AIErrorKind.SERVICE],
            kind=AIErrorKind.SERVICE,
        )

    raise_for_failure(result)
    return {"status": "success", "workout": result.data}
