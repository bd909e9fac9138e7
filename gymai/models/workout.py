"""
Pydantic models for workout generation and substitution requests.
Provides runtime validation and auto-documentation.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from gymai.models.exercise import Exercise, Goal, PlanEntry, SplitType


class WorkoutRequest(BaseModel):
    """
    Request model for workout generation.

    Either ``muscleGroups`` or ``splitType`` selects what is trained. When the
    catalog is omitted the built-in exercise catalog is used.
    """

    exercises: Optional[list[Exercise]] = Field(None, description="Exercise catalog")
    equipment: list[str] = Field(default=["bodyweight"], description="Available equipment names")
    goal: Goal = Goal.HYPERTROPHY
    muscleGroups: Optional[list[str]] = Field(None, description="Ordered muscle groups to train")
    splitType: Optional[SplitType] = None
    dayIndex: int = Field(0, ge=0, description="Day of the week, 0 = Sunday")
    exercisesPerGroup: int = Field(2, ge=1, le=6)

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "equipment": ["dumbbells", "bands"],
            "goal": "strength",
            "splitType": "push_pull_legs",
            "dayIndex": 1,
        }
    })

    @model_validator(mode="after")
    def check_target(self) -> "WorkoutRequest":
        if self.muscleGroups is None and self.splitType is None:
            raise ValueError("Either muscleGroups or splitType is required")
        return self


class WorkoutResponse(BaseModel):
    """Generated workout plan."""

    name: str
    goal: Goal
    muscleGroups: list[str]
    entries: list[PlanEntry]


class SubstituteRequest(BaseModel):
    """Request model for swapping an exercise mid-session."""

    current: Exercise
    exercises: Optional[list[Exercise]] = None
    equipment: list[str] = Field(default=["bodyweight"])
    usedExerciseIds: list[str] = Field(default=[])


class SubstituteResponse(BaseModel):
    status: str = "success"
    substitute: Optional[Exercise] = None
