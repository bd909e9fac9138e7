"""
Pydantic models for body metrics, nutrition targets and meal analysis.
"""
from enum import Enum
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from gymai.models.exercise import Goal


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class BodyMetrics(BaseModel):
    """Body metrics as stored on a profile. Any field may still be missing."""

    weight_kg: Optional[float] = Field(None, gt=0, le=500)
    height_cm: Optional[float] = Field(None, gt=0, le=300)
    age: Optional[int] = Field(None, gt=0, le=120)
    gender: Optional[Gender] = None

    def is_complete(self) -> bool:
        """True when every metric needed for a TDEE estimate is present."""
        return None not in (self.weight_kg, self.height_cm, self.age, self.gender)


class TDEEResult(BaseModel):
    """Energy expenditure and macro targets, in kcal and grams."""

    bmr: int
    tdee: int
    protein_g: int
    carbs_g: int
    fat_g: int


class DailyTargets(BaseModel):
    """
    Targets shown on the dashboard.

    ``tdee`` and ``target_calories`` are None when they cannot be computed;
    callers must not read that as zero.
    """

    tdee: Optional[TDEEResult] = None
    target_calories: Optional[int] = None
    water_ml: Optional[int] = None


class NutritionTargetsRequest(BaseModel):
    """Request model for dashboard targets."""

    metrics: BodyMetrics
    goal: Optional[Goal] = None
    activityMultiplier: Optional[float] = Field(None, ge=1.0, le=2.5)

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "metrics": {"weight_kg": 70, "height_cm": 175, "age": 25, "gender": "male"},
            "goal": "hypertrophy",
        }
    })


class TDEERequest(BaseModel):
    """Request model for a direct TDEE calculation; every metric is required."""

    weight_kg: float = Field(..., gt=0, le=500)
    height_cm: float = Field(..., gt=0, le=300)
    age: int = Field(..., gt=0, le=120)
    gender: Gender
    goal: Optional[Goal] = None
    activityMultiplier: Optional[float] = Field(None, ge=1.0, le=2.5)


# --- Meal Analysis ---

class MealAnalysisRequest(BaseModel):
    """Free-text meal description to estimate."""

    description: str = Field(..., max_length=1000)


class MealAnalysis(BaseModel):
    """Validated nutrition estimate returned by the completion service."""

    calories: int = Field(..., ge=0, strict=True)
    protein: float = Field(..., ge=0)
    carbs: float = Field(..., ge=0)
    fats: float = Field(..., ge=0)
    summary: str = Field(..., min_length=1, max_length=80)


class MealAnalysisSuccess(BaseModel):
    success: Literal[True] = True
    data: MealAnalysis
