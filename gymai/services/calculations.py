"""
Energy expenditure, macro and hydration targets.

- BMR: Mifflin–St Jeor. The "other" gender bucket uses the female constant.
- TDEE = rounded BMR * activity multiplier (default 1.55, moderate exercise).
- Protein 1 g per lb of body weight; carbs 40% and fat 25% of TDEE.
- Goal adjustment: +10% hypertrophy, +5% strength, -20% weight loss.

All results are integers rounded half-up. ``compute_tdee`` does not check its
inputs: only call it once every body metric is known (see ``daily_targets``).
"""
from types import MappingProxyType
from typing import Mapping, Optional

from gymai.core.config import settings
from gymai.models.exercise import Goal
from gymai.models.nutrition import BodyMetrics, DailyTargets, Gender, TDEEResult
from gymai.services.units import round_half_up

ML_WATER_PER_KG = 30

CALORIE_ADJUSTMENTS: Mapping[Goal, float] = MappingProxyType({
    Goal.HYPERTROPHY: 1.10,  # +10% surplus
    Goal.STRENGTH: 1.05,     # +5% surplus
    Goal.WEIGHT_LOSS: 0.80,  # -20% deficit
})


def _round(value: float) -> int:
    return int(round_half_up(value))


def compute_tdee(
    weight_kg: float,
    height_cm: float,
    age: int,
    gender: Gender | str,
    activity_multiplier: float = settings.DEFAULT_ACTIVITY_MULTIPLIER,
) -> TDEEResult:
    """
    Estimate daily energy expenditure and macro targets.

    Args:
        weight_kg: Body weight in kg
        height_cm: Height in cm
        age: Age in years
        gender: "male", "female" or "other"
        activity_multiplier: Activity factor applied to BMR

    Returns:
        TDEEResult with kcal and gram targets
    """
    raw_bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age
    raw_bmr += 5 if Gender(gender) == Gender.MALE else -161

    bmr = _round(raw_bmr)
    tdee = _round(bmr * activity_multiplier)

    return TDEEResult(
        bmr=bmr,
        tdee=tdee,
        protein_g=_round(weight_kg * 2.2),
        carbs_g=_round(tdee * 0.4 / 4),
        fat_g=_round(tdee * 0.25 / 9),
    )


def water_target_ml(weight_kg: float) -> int:
    """Daily water intake target in ml."""
    return _round(weight_kg * ML_WATER_PER_KG)


def adjusted_calories(
    goal: Goal | str,
    tdee: int,
    adjustments: Mapping[Goal, float] = CALORIE_ADJUSTMENTS,
) -> int:
    """
    Apply the goal's calorie surplus or deficit to a TDEE.

    Raises:
        ValueError: If the goal is unknown or has no adjustment entry
    """
    goal = Goal(goal)
    if goal not in adjustments:
        raise ValueError(f"No calorie adjustment defined for goal '{goal.value}'")
    return _round(tdee * adjustments[goal])


def daily_targets(
    metrics: BodyMetrics,
    goal: Optional[Goal] = None,
    activity_multiplier: float = settings.DEFAULT_ACTIVITY_MULTIPLIER,
) -> DailyTargets:
    """
    Build dashboard targets from whatever metrics the profile holds.

    TDEE and the goal calorie target stay None unless all metrics are present;
    the water target only needs body weight.
    """
    targets = DailyTargets()

    if metrics.weight_kg is not None:
        targets.water_ml = water_target_ml(metrics.weight_kg)

    if not metrics.is_complete():
        return targets

    targets.tdee = compute_tdee(
        metrics.weight_kg,
        metrics.height_cm,
        metrics.age,
        metrics.gender,
        activity_multiplier,
    )
    if goal is not None:
        targets.target_calories = adjusted_calories(goal, targets.tdee.tdee)

    return targets
