"""
Pytest fixtures for the GymAI Microservice tests.
"""
import json
import pytest
from fastapi.testclient import TestClient

# Mock environment variables before importing app
import os
os.environ.setdefault("OPENAI_API_KEY", "test-api-key")
INTERNAL_SECRET = os.environ.setdefault("INTERNAL_API_SECRET", "test-internal-secret")
os.environ["RATE_LIMIT_ENABLED"] = "false"

from gymai.main import app
from gymai.models.adaptation import WorkoutExercise
from gymai.models.exercise import Exercise
from gymai.services.openai_service import get_analysis_completion_service, get_completion_service

COMPLETION_DEPENDENCIES = (get_completion_service, get_analysis_completion_service)


class FakeCompletion:
    """Completion service returning a canned response and recording prompts."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def client():
    """Create a test client for the FastAPI app with the internal secret set."""
    return TestClient(app, headers={"X-Internal-Secret": INTERNAL_SECRET})


@pytest.fixture
def override_completion():
    """Install a completion service for the routes; None simulates no API key."""
    def install(service):
        for dependency in COMPLETION_DEPENDENCIES:
            app.dependency_overrides[dependency] = lambda: service
        return service

    yield install
    for dependency in COMPLETION_DEPENDENCIES:
        app.dependency_overrides.pop(dependency, None)


@pytest.fixture
def make_exercise():
    """Factory for catalog entries with sensible defaults."""
    def factory(id, muscle_group="chest", equipment="bodyweight", exercise_type="compound", name=None):
        return Exercise(
            id=id,
            name=name or id.replace("-", " ").title(),
            muscle_group=muscle_group,
            equipment_required=equipment,
            exercise_type=exercise_type,
        )

    return factory


@pytest.fixture
def sample_catalog(make_exercise):
    """Small catalog covering two muscle groups and several equipment tags."""
    return [
        make_exercise("bb-bench", "chest", "barbell", "compound"),
        make_exercise("db-fly", "chest", "dumbbells", "isolation"),
        make_exercise("push-up", "chest", "bodyweight", "compound"),
        make_exercise("cable-fly", "chest", "cables", "isolation"),
        make_exercise("diamond-push-up", "chest", "bodyweight", "isolation"),
        make_exercise("db-row", "back", "dumbbells", "compound"),
        make_exercise("pull-up", "back", "bodyweight", "compound"),
        make_exercise("chin-up", "back", "bodyweight", "compound"),
    ]


@pytest.fixture
def sample_plan():
    """Current plan as sent for adaptation."""
    return [
        WorkoutExercise(
            exercise_id="bb-bench",
            name="Barbell Bench Press",
            muscle_group="chest",
            equipment="barbell",
            sets=4,
            reps=10,
            rest_seconds=90,
        ),
        WorkoutExercise(
            exercise_id="db-row",
            name="One-Arm Dumbbell Row",
            muscle_group="back",
            equipment="dumbbells",
            sets=4,
            reps=10,
            rest_seconds=90,
        ),
    ]


@pytest.fixture
def adapted_response():
    """Valid adapted workout as the completion service would return it."""
    return json.dumps({
        "exercises": [
            {
                "name": "Barbell Bench Press",
                "muscle_group": "chest",
                "equipment": "barbell",
                "sets": 3,
                "reps": 10,
                "rest_seconds": 60,
                "is_superset_with": "One-Arm Dumbbell Row",
                "note": None,
            },
            {
                "name": "One-Arm Dumbbell Row",
                "muscle_group": "back",
                "equipment": "dumbbells",
                "sets": 3,
                "reps": 10,
                "rest_seconds": 60,
                "is_superset_with": "Barbell Bench Press",
            },
        ],
        "message": "Supersets today, in and out in 30!",
    })
