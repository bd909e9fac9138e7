"""
Metric/imperial conversions and display formatting.

Values are stored metric; these helpers only convert for display and for
reading user input back. Rounding is half-up to match the app clients.
"""
import math
from enum import Enum

KG_PER_LB = 2.20462
CM_PER_INCH = 2.54
ML_PER_FL_OZ = 29.5735


class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, unlike the built-in banker's ``round``."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


# --- Weight ---

def kg_to_lbs(kg: float) -> float:
    return round_half_up(kg * KG_PER_LB, 1)


def lbs_to_kg(lbs: float) -> float:
    return round_half_up(lbs / KG_PER_LB, 1)


# --- Height ---

def cm_to_ft_in(cm: float) -> tuple[int, int]:
    """
    Split a height into whole feet and rounded inches.

    Inches that round up to 12 are carried into feet, so 182 cm is 6'0".
    """
    total_inches = cm / CM_PER_INCH
    feet = math.floor(total_inches / 12)
    inches = int(round_half_up(total_inches - feet * 12))
    if inches >= 12:
        feet += 1
        inches -= 12
    return feet, inches


def ft_in_to_cm(feet: int, inches: float) -> int:
    return int(round_half_up((feet * 12 + inches) * CM_PER_INCH))


# --- Water ---

def ml_to_oz(ml: float) -> float:
    return round_half_up(ml / ML_PER_FL_OZ, 1)


def oz_to_ml(oz: float) -> int:
    return int(round_half_up(oz * ML_PER_FL_OZ))


# --- Formatted display ---

def _number(value: float) -> str:
    # 70.0 -> "70", 70.5 -> "70.5"
    return str(int(value)) if float(value).is_integer() else str(value)


def format_weight(kg: float, units: UnitSystem) -> str:
    if units == UnitSystem.IMPERIAL:
        return f"{_number(kg_to_lbs(kg))} lbs"
    return f"{_number(kg)} kg"


def format_height(cm: float, units: UnitSystem) -> str:
    if units == UnitSystem.IMPERIAL:
        feet, inches = cm_to_ft_in(cm)
        return f"{feet}'{inches}\""
    return f"{_number(cm)} cm"


def format_water(ml: float, units: UnitSystem) -> str:
    if units == UnitSystem.IMPERIAL:
        return f"{_number(ml_to_oz(ml))} oz"
    return f"{_number(ml)} ml"


def weight_unit_label(units: UnitSystem) -> str:
    return "lbs" if units == UnitSystem.IMPERIAL else "kg"


def height_unit_label(units: UnitSystem) -> str:
    return "ft/in" if units == UnitSystem.IMPERIAL else "cm"


def water_unit_label(units: UnitSystem) -> str:
    return "oz" if units == UnitSystem.IMPERIAL else "ml"


def display_weight_to_kg(value: float, units: UnitSystem) -> float:
    """Convert a weight typed in the user's units back to kg for storage."""
    return lbs_to_kg(value) if units == UnitSystem.IMPERIAL else value


def display_water_to_ml(value: float, units: UnitSystem) -> float:
    """Convert a water amount typed in the user's units back to ml."""
    return oz_to_ml(value) if units == UnitSystem.IMPERIAL else value
