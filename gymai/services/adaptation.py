"""
Condition-based workout adaptation.

"great" is handled locally by ``standard_workout`` and never reaches the
completion service. The other conditions ask the completion service to
rewrite the plan and only accept a response that passes schema validation.
"""
import json
from typing import Optional, Sequence

from pydantic import ValidationError

from gymai.core.errors import (
    AIConfigurationError,
    AIErrorKind,
    AIServiceError,
    EmptyAIResponseError,
    InvalidAIResponseError,
)
from gymai.core.logger import logger, log_ai_failure
from gymai.models.adaptation import (
    AdaptationSuccess,
    AdaptedExercise,
    AdaptedWorkout,
    UserCondition,
    WorkoutExercise,
)
from gymai.models.schemas import AIFailure
from gymai.services.openai_service import CompletionService

STANDARD_MESSAGE = "Standard workout — let's go! 💪"

ERROR_MESSAGES = {
    AIErrorKind.CONFIGURATION: "AI is not configured.",
    AIErrorKind.EMPTY_RESPONSE: "AI returned an empty response.",
    AIErrorKind.INVALID_RESPONSE: "AI returned invalid workout data.",
    AIErrorKind.SERVICE: "Workout adaptation failed. Using standard plan.",
}


# --- Offline path ---

def standard_workout(exercises: Sequence[WorkoutExercise]) -> AdaptedWorkout:
    """The plan exactly as given, for a user who feels great."""
    return AdaptedWorkout(
        exercises=[
            AdaptedExercise(
                name=ex.name,
                muscle_group=ex.muscle_group,
                equipment=ex.equipment,
                sets=ex.sets,
                reps=ex.reps,
                rest_seconds=ex.rest_seconds,
            )
            for ex in exercises
        ],
        message=STANDARD_MESSAGE,
    )


# --- Prompts ---

TIRED_INSTRUCTIONS = """The user is feeling TIRED today. Modify the workout:
- Reduce the number of sets by 1-2 per exercise (minimum 2 sets)
- Keep the same weight/intensity (don't reduce reps)
- Keep rest periods the same or slightly increase them
- Keep all the same exercises"""

SHORT_ON_TIME_INSTRUCTIONS = """The user is SHORT ON TIME and wants to finish in ~30 minutes. Modify the workout:
- Create superset pairings where possible (pair opposing muscle groups)
- Reduce rest periods to 45-60 seconds
- Keep 3 sets per exercise
- Use the "is_superset_with" field to indicate superset partners (use the exercise name)
- Keep all the same exercises but reorganize for efficiency"""

INJURED_INSTRUCTIONS = """The user has reported an INJURY: "{injury}".
CRITICAL SAFETY RULES:
- Remove any exercise that could aggravate the injured area
- Replace removed exercises with safe alternatives for the same or nearby muscle group
- Use the "note" field to explain why an exercise was replaced
- If the injury involves shoulders: remove overhead presses, lateral raises, and upright rows
- If the injury involves back: remove deadlifts, bent-over rows
- If the injury involves knees: remove squats, lunges, leg press
- Prefer machine or cable alternatives which are generally safer
- Reduce intensity slightly (1 fewer set per exercise)"""

ADAPTATION_SYSTEM_PROMPT = """You are an expert personal trainer and exercise physiologist. You will receive a workout plan and a condition modifier. Adapt the workout accordingly.

{instructions}

Return a JSON object with:
- exercises: array of objects with {{ name, muscle_group, equipment, sets, reps, rest_seconds, is_superset_with (string|null), note (string|null) }}
- message: a short motivational message about the adapted workout (max 100 chars)

sets, reps and rest_seconds must be positive integers.
Always return valid JSON, nothing else."""


def condition_instructions(condition: UserCondition, injury_description: Optional[str] = None) -> str:
    """Plan-modification rules for an AI-handled condition."""
    if condition == UserCondition.TIRED:
        return TIRED_INSTRUCTIONS
    if condition == UserCondition.SHORT_ON_TIME:
        return SHORT_ON_TIME_INSTRUCTIONS
    if condition == UserCondition.INJURED:
        injury = (injury_description or "").strip() or "unspecified"
        return INJURED_INSTRUCTIONS.format(injury=injury)
    raise ValueError(f"Condition '{condition.value}' is not adapted by AI")


def build_prompts(
    condition: UserCondition,
    exercises: Sequence[WorkoutExercise],
    injury_description: Optional[str] = None,
) -> tuple[str, str]:
    """System and user prompt for one adaptation request."""
    system_prompt = ADAPTATION_SYSTEM_PROMPT.format(
        instructions=condition_instructions(condition, injury_description)
    )
    plan = [ex.model_dump(exclude_none=True) for ex in exercises]
    user_prompt = f"Current workout plan:\n{json.dumps(plan, indent=2)}"
    return system_prompt, user_prompt


# --- Validation ---

def parse_adapted_workout(raw: Optional[str]) -> AdaptedWorkout:
    """
    Parse and validate a completion response.

    Raises:
        EmptyAIResponseError: If there is no content
        InvalidAIResponseError: If it is not JSON or fails schema validation
    """
    if raw is None or not raw.strip():
        raise EmptyAIResponseError("Completion returned no content")

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidAIResponseError(f"Response is not valid JSON: {e}") from e

    try:
        return AdaptedWorkout.model_validate(parsed)
    except ValidationError as e:
        raise InvalidAIResponseError(
            f"Response failed schema validation ({e.error_count()} errors)"
        ) from e


# --- Entry point ---

async def adapt_workout(
    condition: UserCondition | str,
    exercises: Sequence[WorkoutExercise],
    injury_description: Optional[str] = None,
    completion: Optional[CompletionService] = None,
) -> AdaptationSuccess | AIFailure:
    """
    Adapt a workout to how the user feels.

    Never raises for service problems: every failure comes back as an
    ``AIFailure`` so the caller can fall back to the standard plan.

    Args:
        condition: great, tired, short_on_time or injured
        exercises: Current plan
        injury_description: Free text, used for "injured"
        completion: Completion service; None means AI is not configured

    Returns:
        AdaptationSuccess with the validated plan, or AIFailure
    """
    condition = UserCondition(condition)

    if condition == UserCondition.GREAT:
        return AdaptationSuccess(data=standard_workout(exercises))

    try:
        if completion is None:
            raise AIConfigurationError("No completion service configured")

        system_prompt, user_prompt = build_prompts(condition, exercises, injury_description)
        raw = await completion.complete(system_prompt, user_prompt)
        workout = parse_adapted_workout(raw)
    except AIServiceError as e:
        log_ai_failure(f"workout adaptation ({condition.value})", e.kind, e)
        return AIFailure(error=ERROR_MESSAGES[e.kind], kind=e.kind)
    except Exception as e:
        log_ai_failure(f"workout adaptation ({condition.value})", AIErrorKind.SERVICE, e)
        return AIFailure(error=ERROR_MESSAGES[AIErrorKind.SERVICE], kind=AIErrorKind.SERVICE)

    logger.info(f"Workout adapted for condition '{condition.value}' ({len(workout.exercises)} exercises)")
    return AdaptationSuccess(data=workout)
