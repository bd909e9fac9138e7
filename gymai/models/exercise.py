"""
Exercise catalog and training-plan models.
"""
from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field


class Goal(str, Enum):
    """Training goal. Drives set/rep/rest parameters and calorie adjustment."""

    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"
    WEIGHT_LOSS = "weight_loss"


class ExerciseType(str, Enum):
    COMPOUND = "compound"
    ISOLATION = "isolation"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class SplitType(str, Enum):
    """Weekly split patterns with a static day table."""

    PUSH_PULL_LEGS = "push_pull_legs"
    UPPER_LOWER = "upper_lower"
    FULL_BODY = "full_body"


class GoalParameters(NamedTuple):
    """Sets, reps and rest (seconds) shared by every exercise of a goal."""

    sets: int
    reps: int
    rest: int


class Exercise(BaseModel):
    """Catalog entry. Reference data, never mutated by the engine."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    muscle_group: str = Field(..., description="Primary muscle group tag, e.g. 'chest'")
    secondary_muscles: tuple[str, ...] = ()
    equipment_required: str = Field(..., description="Single canonical equipment tag")
    difficulty: Difficulty = Difficulty.BEGINNER
    exercise_type: ExerciseType
    instructions: Optional[str] = None


class PlanEntry(BaseModel):
    """One generated exercise slot of a workout."""

    exercise: Exercise
    sets: int
    reps: int
    rest: int = Field(..., description="Rest between sets in seconds")


class DayWorkout(BaseModel):
    """A generated workout for one day of a split."""

    name: str
    split_type: SplitType
    day_index: int
    muscle_groups: list[str]
    entries: list[PlanEntry]
