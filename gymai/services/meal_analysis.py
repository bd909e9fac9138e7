"""
Free-text meal analysis via the completion service.
"""
import json
from typing import Optional

from pydantic import ValidationError

from gymai.core.errors import (
    AIErrorKind,
    AIServiceError,
    EmptyAIResponseError,
    InvalidAIResponseError,
)
from gymai.core.logger import log_ai_failure
from gymai.models.nutrition import MealAnalysis, MealAnalysisSuccess
from gymai.models.schemas import AIFailure
from gymai.services.openai_service import CompletionService

MEAL_SYSTEM_PROMPT = """You are an expert nutritionist. Analyze the user's meal description. Return a strict JSON object with these exact fields:
- calories (integer, total estimated calories)
- protein (number, grams of protein)
- carbs (number, grams of carbohydrates)
- fats (number, grams of fat)
- summary (string, short display name for the meal, max 60 chars)

Be conservative with estimates. If the description is vague, estimate based on typical serving sizes. Always return valid JSON, nothing else."""

ERROR_MESSAGES = {
    AIErrorKind.CONFIGURATION: "AI is not configured. Please use manual input.",
    AIErrorKind.INVALID_REQUEST: "Please describe your meal.",
    AIErrorKind.EMPTY_RESPONSE: "AI returned an empty response.",
    AIErrorKind.INVALID_RESPONSE: "AI returned invalid data. Please try again or use manual input.",
    AIErrorKind.SERVICE: "AI analysis failed. Please try again or use manual input.",
}


def parse_meal_analysis(raw: Optional[str]) -> MealAnalysis:
    """Parse and validate a completion response into a MealAnalysis."""
    if raw is None or not raw.strip():
        raise EmptyAIResponseError("Completion returned no content")
    try:
        return MealAnalysis.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as e:
        raise InvalidAIResponseError(str(e)) from e


async def analyze_meal(
    description: str,
    completion: Optional[CompletionService] = None,
) -> MealAnalysisSuccess | AIFailure:
    """
    Estimate calories and macros for a described meal.

    Returns:
        MealAnalysisSuccess, or AIFailure with a user-facing message
    """
    if completion is None:
        kind = AIErrorKind.CONFIGURATION
        return AIFailure(error=ERROR_MESSAGES[kind], kind=kind)

    if not description.strip():
        kind = AIErrorKind.INVALID_REQUEST
        return AIFailure(error=ERROR_MESSAGES[kind], kind=kind)

    try:
        raw = await completion.complete(MEAL_SYSTEM_PROMPT, description.strip())
        analysis = parse_meal_analysis(raw)
    except AIServiceError as e:
        log_ai_failure("meal analysis", e.kind, e)
        return AIFailure(error=ERROR_MESSAGES[e.kind], kind=e.kind)
    except Exception as e:
        log_ai_failure("meal analysis", AIErrorKind.SERVICE, e)
        return AIFailure(error=ERROR_MESSAGES[AIErrorKind.SERVICE], kind=AIErrorKind.SERVICE)

    return MealAnalysisSuccess(data=analysis)
