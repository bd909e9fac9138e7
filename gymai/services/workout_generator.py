"""
Rule-based workout generation and exercise substitution.

Selection is deterministic: for each muscle group the first compound and the
first isolation exercise in catalog order are picked, then the group is
backfilled in catalog order. Catalog order is therefore part of the result.
"""
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from gymai.models.exercise import (
    DayWorkout,
    Exercise,
    ExerciseType,
    Goal,
    GoalParameters,
    PlanEntry,
    SplitType,
)
from gymai.services.equipment import EQUIPMENT_MAP, filter_by_equipment
from gymai.services.splits import SPLITS, SplitTable, day_muscle_groups

GOAL_PARAMS: Mapping[Goal, GoalParameters] = MappingProxyType({
    Goal.HYPERTROPHY: GoalParameters(sets=4, reps=10, rest=90),
    Goal.STRENGTH: GoalParameters(sets=5, reps=5, rest=180),
    Goal.WEIGHT_LOSS: GoalParameters(sets=3, reps=15, rest=60),
})


def goal_parameters(
    goal: Goal | str,
    goal_params: Mapping[Goal, GoalParameters] = GOAL_PARAMS,
) -> GoalParameters:
    """Sets/reps/rest for a goal. Raises ValueError for an unknown goal."""
    goal = Goal(goal)
    if goal not in goal_params:
        raise ValueError(f"No training parameters defined for goal '{goal.value}'")
    return goal_params[goal]


def _select_for_group(group_exercises: list[Exercise], limit: int) -> list[Exercise]:
    compounds = [ex for ex in group_exercises if ex.exercise_type == ExerciseType.COMPOUND]
    isolations = [ex for ex in group_exercises if ex.exercise_type == ExerciseType.ISOLATION]

    selected = (compounds[:1] + isolations[:1])[:limit]

    if len(selected) < limit:
        remaining = [
            ex for ex in group_exercises
            if not any(ex is chosen for chosen in selected)
        ]
        selected.extend(remaining[:limit - len(selected)])

    return selected


def generate_workout(
    exercises: Iterable[Exercise],
    user_equipment: Iterable[str],
    goal: Goal | str,
    muscle_groups: Sequence[str],
    exercises_per_group: int = 2,
    goal_params: Mapping[Goal, GoalParameters] = GOAL_PARAMS,
    equipment_map: Mapping[str, Iterable[str]] = EQUIPMENT_MAP,
) -> list[PlanEntry]:
    """
    Pick exercises for each muscle group and attach the goal's parameters.

    Muscle groups are processed in the given order, repeats included. A group
    with no usable exercise contributes nothing; an empty plan is a valid
    result for the caller to handle.

    Args:
        exercises: Exercise catalog
        user_equipment: Equipment names the user owns
        goal: Training goal
        muscle_groups: Ordered muscle group tags
        exercises_per_group: Maximum exercises per group

    Returns:
        Plan entries in muscle-group order
    """
    available = filter_by_equipment(exercises, user_equipment, equipment_map)
    params = goal_parameters(goal, goal_params)
    limit = max(exercises_per_group, 0)

    workout: list[PlanEntry] = []
    for group in muscle_groups:
        target = group.lower()
        group_exercises = [ex for ex in available if ex.muscle_group.lower() == target]

        for exercise in _select_for_group(group_exercises, limit):
            workout.append(PlanEntry(
                exercise=exercise,
                sets=params.sets,
                reps=params.reps,
                rest=params.rest,
            ))

    return workout


def workout_name(muscle_groups: Sequence[str]) -> str:
    """Display name for a generated plan, e.g. "chest / shoulders Day"."""
    return f"{' / '.join(muscle_groups)} Day"


def generate_day_workout(
    exercises: Iterable[Exercise],
    user_equipment: Iterable[str],
    goal: Goal | str,
    split_type: SplitType | str,
    day_index: int,
    exercises_per_group: int = 2,
    goal_params: Mapping[Goal, GoalParameters] = GOAL_PARAMS,
    splits: SplitTable = SPLITS,
) -> DayWorkout:
    """Generate the workout for one day of a weekly split."""
    muscle_groups = day_muscle_groups(split_type, day_index, splits)
    entries = generate_workout(
        exercises,
        user_equipment,
        goal,
        muscle_groups,
        exercises_per_group,
        goal_params,
    )
    return DayWorkout(
        name=workout_name(muscle_groups),
        split_type=SplitType(split_type),
        day_index=day_index,
        muscle_groups=muscle_groups,
        entries=entries,
    )


def get_substitute(
    current_exercise: Exercise,
    all_exercises: Iterable[Exercise],
    user_equipment: Iterable[str],
    used_exercise_ids: Iterable[str] = (),
    equipment_map: Mapping[str, Iterable[str]] = EQUIPMENT_MAP,
) -> Optional[Exercise]:
    """
    First usable exercise for the same muscle group, in catalog order.

    Muscle groups match case-insensitively, as in ``generate_workout``, so a
    "Chest" exercise can be swapped for a "chest" one. The current exercise
    and anything already in the session are skipped.
    Returns None when nothing is left.
    """
    excluded = set(used_exercise_ids)
    excluded.add(current_exercise.id)
    target = current_exercise.muscle_group.lower()

    for candidate in filter_by_equipment(all_exercises, user_equipment, equipment_map):
        if candidate.muscle_group.lower() == target and candidate.id not in excluded:
            return candidate
    return None
