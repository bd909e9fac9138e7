"""
Tests for free-text meal analysis.
"""
import asyncio
import json

import pytest

from gymai.core.errors import AIErrorKind
from gymai.models.nutrition import MealAnalysisSuccess
from gymai.services.meal_analysis import MEAL_SYSTEM_PROMPT, analyze_meal

from conftest import FakeCompletion


VALID_ANALYSIS = {
    "calories": 520,
    "protein": 42.5,
    "carbs": 48,
    "fats": 14.2,
    "summary": "Chicken rice bowl",
}


class TestAnalyzeMeal:
    """Tests for analyze_meal."""

    def test_success(self):
        fake = FakeCompletion(response=json.dumps(VALID_ANALYSIS))
        result = asyncio.run(analyze_meal("  grilled chicken with rice  ", fake))

        assert isinstance(result, MealAnalysisSuccess)
        assert result.data.calories == 520
        assert result.data.summary == "Chicken rice bowl"
        assert fake.calls == [(MEAL_SYSTEM_PROMPT, "grilled chicken with rice")]

    def test_not_configured(self):
        result = asyncio.run(analyze_meal("oatmeal", None))

        assert result.kind == AIErrorKind.CONFIGURATION

    def test_blank_description_skips_service(self):
        fake = FakeCompletion(response=json.dumps(VALID_ANALYSIS))
        result = asyncio.run(analyze_meal("   ", fake))

        assert result.kind == AIErrorKind.INVALID_REQUEST
        assert result.error == "Please describe your meal."
        assert fake.calls == []

    def test_empty_response(self):
        result = asyncio.run(analyze_meal("oatmeal", FakeCompletion(response="")))

        assert result.kind == AIErrorKind.EMPTY_RESPONSE

    @pytest.mark.parametrize("overrides", [
        {"calories": -10},
        {"calories": 510.5},
        {"protein": -1},
        {"summary": ""},
        {"summary": "x" * 81},
    ])
    def test_invalid_fields(self, overrides):
        raw = json.dumps({**VALID_ANALYSIS, **overrides})
        result = asyncio.run(analyze_meal("oatmeal", FakeCompletion(response=raw)))

        assert result.kind == AIErrorKind.INVALID_RESPONSE

    def test_service_error(self):
        fake = FakeCompletion(error=RuntimeError("boom"))
        result = asyncio.run(analyze_meal("oatmeal", fake))

        assert result.kind == AIErrorKind.SERVICE
        assert result.success is False
