"""
Pydantic models shared across routes.
"""
from typing import Literal, Optional
from pydantic import BaseModel, Field

from gymai.core.errors import AIErrorKind
from gymai.services.units import UnitSystem


# --- Unit Conversion Models ---

class UnitConversionRequest(BaseModel):
    """Metric values to render in the user's unit system."""
    units: UnitSystem = UnitSystem.METRIC
    weight_kg: Optional[float] = Field(None, ge=0)
    height_cm: Optional[float] = Field(None, ge=0)
    water_ml: Optional[float] = Field(None, ge=0)


class UnitConversionResponse(BaseModel):
    """Converted values and display strings; absent inputs stay None."""
    units: UnitSystem
    weight: Optional[float] = None
    weight_display: Optional[str] = None
    height_ft: Optional[int] = None
    height_in: Optional[int] = None
    height_display: Optional[str] = None
    water: Optional[float] = None
    water_display: Optional[str] = None


# --- Generic Response Models ---

class AIFailure(BaseModel):
    """Failed AI-assisted operation. ``kind`` lets callers choose a message."""
    success: Literal[False] = False
    error: str
    kind: AIErrorKind


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
