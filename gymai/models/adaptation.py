"""
Pydantic models for condition-based workout adaptation.

``AdaptedWorkout`` doubles as the schema every completion response is
validated against before it is handed back to a caller.
"""
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from gymai.models.exercise import PlanEntry


class UserCondition(str, Enum):
    """How the user reports feeling before a session."""

    GREAT = "great"
    TIRED = "tired"
    SHORT_ON_TIME = "short_on_time"
    INJURED = "injured"


class WorkoutExercise(BaseModel):
    """An exercise of the current plan, as sent for adaptation."""

    exercise_id: Optional[str] = None
    name: str
    muscle_group: str
    equipment: str
    sets: int = Field(..., gt=0)
    reps: int = Field(..., gt=0)
    rest_seconds: int = Field(..., gt=0)

    @classmethod
    def from_plan_entry(cls, entry: PlanEntry) -> "WorkoutExercise":
        """Build from a generated plan entry."""
        return cls(
            exercise_id=entry.exercise.id,
            name=entry.exercise.name,
            muscle_group=entry.exercise.muscle_group,
            equipment=entry.exercise.equipment_required,
            sets=entry.sets,
            reps=entry.reps,
            rest_seconds=entry.rest,
        )


class AdaptedExercise(BaseModel):
    """Single exercise of an adapted workout."""

    name: str = Field(..., min_length=1)
    muscle_group: str
    equipment: str
    sets: int = Field(..., gt=0, strict=True)
    reps: int = Field(..., gt=0, strict=True)
    rest_seconds: int = Field(..., gt=0, strict=True)
    is_superset_with: Optional[str] = None
    note: Optional[str] = None


class AdaptedWorkout(BaseModel):
    """Adapted plan plus a short motivational message."""

    exercises: list[AdaptedExercise]
    message: str


class AdaptationRequest(BaseModel):
    """Request model for workout adaptation."""

    condition: UserCondition
    exercises: list[WorkoutExercise]
    injuryDescription: Optional[str] = Field(None, max_length=500)

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "condition": "tired",
            "exercises": [
                {
                    "name": "Barbell Bench Press",
                    "muscle_group": "chest",
                    "equipment": "barbell",
                    "sets": 4,
                    "reps": 10,
                    "rest_seconds": 90,
                }
            ],
        }
    })


# --- Results ---

class AdaptationSuccess(BaseModel):
    success: Literal[True] = True
    data: AdaptedWorkout
