"""
Workout generation, substitution and split routes.
"""
from fastapi import APIRouter, Depends, Request

from gymai.data.exercise_catalog import DEFAULT_CATALOG
from gymai.models.exercise import SplitType
from gymai.models.workout import (
    SubstituteRequest,
    SubstituteResponse,
    WorkoutRequest,
    WorkoutResponse,
)
from gymai.services import workout_generator
from gymai.services.splits import day_muscle_groups, split_day_names
from gymai.core.logger import logger, log_request
from gymai.core.auth import verify_internal_secret
from gymai.core.limiter import limiter

router = APIRouter(dependencies=[Depends(verify_internal_secret)])


@router.post("/generate-workout", response_model=WorkoutResponse)
@limiter.limit("30/minute")
async def generate_workout(request: Request, req: WorkoutRequest):
    """
    Generate a rule-based workout plan.

    Trains the explicit muscle groups when given, otherwise the groups of
    the requested split day. An empty plan is returned as-is.
    """
    log_request("/generate-workout")

    catalog = req.exercises if req.exercises is not None else DEFAULT_CATALOG
    if req.muscleGroups is not None:
        name = workout_generator.workout_name(req.muscleGroups)
        muscle_groups = req.muscleGroups
        entries = workout_generator.generate_workout(
            catalog,
            req.equipment,
            req.goal,
            muscle_groups,
            req.exercisesPerGroup,
        )
    else:
        day = workout_generator.generate_day_workout(
            catalog,
            req.equipment,
            req.goal,
            req.splitType,
            req.dayIndex,
            req.exercisesPerGroup,
        )
        name, muscle_groups, entries = day.name, day.muscle_groups, day.entries

    if not entries:
        logger.warning(f"No exercises matched {muscle_groups} with equipment {req.equipment}")

    return WorkoutResponse(
        name=name,
        goal=req.goal,
        muscleGroups=muscle_groups,
        entries=entries,
    )


@router.post("/substitute-exercise", response_model=SubstituteResponse)
@limiter.limit("60/minute")
async def substitute_exercise(request: Request, req: SubstituteRequest):
    """
    Swap an exercise for another of the same muscle group.

    ``substitute`` is null when no alternative is left.
    """
    log_request("/substitute-exercise")

    catalog = req.exercises if req.exercises is not None else DEFAULT_CATALOG
    substitute = workout_generator.get_substitute(
        req.current,
        catalog,
        req.equipment,
        req.usedExerciseIds,
    )
    return SubstituteResponse(substitute=substitute)


@router.get("/splits/{split_type}/days/{day_index}")
@limiter.limit("60/minute")
async def split_day(request: Request, split_type: SplitType, day_index: int):
    """Muscle groups trained on a day of a split; the index wraps."""
    log_request(f"/splits/{split_type.value}/days/{day_index}", method="GET")

    days = split_day_names(split_type)
    return {
        "splitType": split_type,
        "day": days[day_index % len(days)],
        "muscleGroups": day_muscle_groups(split_type, day_index),
    }
