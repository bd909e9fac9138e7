"""
Tests for the FastAPI application endpoints.
"""
import asyncio
import json

from fastapi.testclient import TestClient

from gymai.core.config import settings
from gymai.main import app
from gymai.services import workout_generator
from conftest import FakeCompletion


class SlowCompletion:
    """Completion service that never answers in time."""

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        await asyncio.sleep(5)
        return "{}"


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_root_endpoint(self, client):
        """Test the root endpoint returns expected message."""
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "GymAI Microservice running"}

    def test_health_endpoint(self, client):
        """Test the health endpoint returns healthy status."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "gymai-microservice"
        assert "version" in data


class TestAuth:
    """Tests for the internal secret header."""

    def test_missing_secret_rejected(self):
        response = TestClient(app).post("/generate-workout", json={"muscleGroups": ["chest"]})
        assert response.status_code == 403

    def test_wrong_secret_rejected(self):
        client = TestClient(app, headers={"X-Internal-Secret": "wrong"})
        response = client.get("/splits/full_body/days/0")
        assert response.status_code == 403

    def test_health_routes_open_without_secret(self):
        client = TestClient(app)
        assert client.get("/").status_code == 200
        assert client.get("/health").status_code == 200

    def test_unconfigured_secret_blocks_routes(self, client, monkeypatch):
        monkeypatch.setattr("gymai.core.auth.SECRET", "")
        response = client.get("/splits/full_body/days/0")
        assert response.status_code == 503


class TestWorkoutEndpoint:
    """Tests for workout generation endpoint."""

    def test_workout_endpoint_requires_body(self, client):
        """FastAPI returns 422 for a missing body."""
        response = client.post("/generate-workout")
        assert response.status_code == 422

    def test_requires_muscle_groups_or_split(self, client):
        response = client.post("/generate-workout", json={"goal": "strength"})
        assert response.status_code == 422

    def test_unknown_goal_rejected(self, client):
        response = client.post("/generate-workout", json={"goal": "bulk", "muscleGroups": ["chest"]})
        assert response.status_code == 422

    def test_split_day_with_default_catalog(self, client):
        response = client.post("/generate-workout", json={
            "equipment": ["dumbbells"],
            "goal": "strength",
            "splitType": "push_pull_legs",
            "dayIndex": 4,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "back / biceps Day"
        assert [e["exercise"]["id"] for e in data["entries"]] == [
            "back-db-row", "back-superman", "biceps-chin-up", "biceps-db-curl",
        ]
        assert data["entries"][0]["sets"] == 5
        assert data["entries"][0]["rest"] == 180

    def test_split_day_uses_day_generator(self, client, monkeypatch):
        calls = []
        original = workout_generator.generate_day_workout

        def spy(*args, **kwargs):
            day = original(*args, **kwargs)
            calls.append(day)
            return day

        monkeypatch.setattr(workout_generator, "generate_day_workout", spy)
        response = client.post("/generate-workout", json={"splitType": "upper_lower", "dayIndex": 1})

        assert response.status_code == 200
        assert len(calls) == 1
        data = response.json()
        assert data["name"] == calls[0].name == "legs / core Day"
        assert data["muscleGroups"] == ["legs", "core"]
        assert len(data["entries"]) == len(calls[0].entries)

    def test_explicit_catalog_and_groups(self, client, sample_catalog):
        response = client.post("/generate-workout", json={
            "exercises": [ex.model_dump(mode="json") for ex in sample_catalog],
            "equipment": [],
            "muscleGroups": ["chest"],
            "exercisesPerGroup": 1,
        })

        assert response.status_code == 200
        entries = response.json()["entries"]
        assert [e["exercise"]["id"] for e in entries] == ["push-up"]
        assert entries[0]["reps"] == 10

    def test_empty_plan_is_not_an_error(self, client):
        response = client.post("/generate-workout", json={"muscleGroups": ["forearms"]})

        assert response.status_code == 200
        assert response.json()["entries"] == []


class TestSubstituteEndpoint:
    """Tests for exercise substitution."""

    def test_returns_substitute(self, client, sample_catalog):
        response = client.post("/substitute-exercise", json={
            "current": sample_catalog[0].model_dump(mode="json"),
            "exercises": [ex.model_dump(mode="json") for ex in sample_catalog],
            "equipment": ["dumbbells"],
            "usedExerciseIds": ["db-fly"],
        })

        assert response.status_code == 200
        assert response.json()["substitute"]["id"] == "push-up"

    def test_null_when_nothing_left(self, client, make_exercise):
        current = make_exercise("exotic", "neck", "bodyweight")
        response = client.post("/substitute-exercise", json={"current": current.model_dump(mode="json")})

        assert response.status_code == 200
        assert response.json()["substitute"] is None


class TestSplitEndpoint:
    """Tests for the split scheduler endpoint."""

    def test_wraps_day_index(self, client):
        response = client.get("/splits/push_pull_legs/days/3")

        assert response.status_code == 200
        data = response.json()
        assert data["day"] == "push"
        assert data["muscleGroups"] == ["chest", "shoulders", "triceps"]

    def test_unknown_split(self, client):
        response = client.get("/splits/bro_split/days/0")
        assert response.status_code == 422


class TestNutritionEndpoints:
    """Tests for nutrition target endpoints."""

    def test_targets_with_complete_profile(self, client):
        response = client.post("/nutrition/targets", json={
            "metrics": {"weight_kg": 70, "height_cm": 175, "age": 25, "gender": "male"},
            "goal": "hypertrophy",
        })

        assert response.status_code == 200
        targets = response.json()["targets"]
        assert targets["tdee"]["tdee"] == 2595
        assert targets["target_calories"] == 2855
        assert targets["water_ml"] == 2100

    def test_targets_with_missing_age(self, client):
        response = client.post("/nutrition/targets", json={
            "metrics": {"weight_kg": 80, "height_cm": 180, "gender": "female"},
            "goal": "strength",
        })

        targets = response.json()["targets"]
        assert targets["tdee"] is None
        assert targets["target_calories"] is None
        assert targets["water_ml"] == 2400

    def test_tdee_requires_all_metrics(self, client):
        response = client.post("/nutrition/tdee", json={"weight_kg": 70, "height_cm": 175})
        assert response.status_code == 422

    def test_tdee(self, client):
        response = client.post("/nutrition/tdee", json={
            "weight_kg": 70, "height_cm": 175, "age": 25, "gender": "male", "goal": "weight_loss",
        })

        data = response.json()
        assert data["tdee"]["bmr"] == 1674
        assert data["tdee"]["carbs_g"] == 260
        assert data["target_calories"] == 2076
        assert data["water_ml"] == 2100


class TestUnitsEndpoint:
    """Tests for unit conversion."""

    def test_imperial(self, client):
        response = client.post("/units/convert", json={
            "units": "imperial", "weight_kg": 70, "height_cm": 182, "water_ml": 2400,
        })

        data = response.json()
        assert data["weight"] == 154.3
        assert data["weight_display"] == "154.3 lbs"
        assert (data["height_ft"], data["height_in"]) == (6, 0)
        assert data["height_display"] == "6'0\""
        assert data["water_display"] == "81.2 oz"

    def test_metric_partial(self, client):
        response = client.post("/units/convert", json={"weight_kg": 70})

        data = response.json()
        assert data["weight_display"] == "70 kg"
        assert data["height_display"] is None


class TestAdaptEndpoint:
    """Tests for workout adaptation endpoint."""

    def plan(self):
        return [{
            "name": "Barbell Bench Press",
            "muscle_group": "chest",
            "equipment": "barbell",
            "sets": 4,
            "reps": 10,
            "rest_seconds": 90,
        }]

    def test_great_works_without_ai(self, client, override_completion):
        override_completion(None)
        response = client.post("/adapt-workout", json={"condition": "great", "exercises": self.plan()})

        assert response.status_code == 200
        assert response.json()["workout"]["exercises"][0]["sets"] == 4

    def test_not_configured(self, client, override_completion):
        override_completion(None)
        response = client.post("/adapt-workout", json={"condition": "tired", "exercises": self.plan()})

        assert response.status_code == 503
        assert response.json()["detail"]["kind"] == "configuration"

    def test_adapted(self, client, override_completion, adapted_response):
        fake = override_completion(FakeCompletion(response=adapted_response))
        response = client.post("/adapt-workout", json={"condition": "short_on_time", "exercises": self.plan()})

        assert response.status_code == 200
        assert response.json()["workout"]["message"] == "Supersets today, in and out in 30!"
        assert len(fake.calls) == 1

    def test_invalid_ai_data(self, client, override_completion):
        payload = json.dumps({"exercises": [{"name": "Squat", "sets": 3}], "message": "x"})
        override_completion(FakeCompletion(response=payload))
        response = client.post("/adapt-workout", json={"condition": "injured", "exercises": self.plan()})

        assert response.status_code == 502
        assert response.json()["detail"]["kind"] == "invalid_response"

    def test_slow_adaptation_times_out(self, client, override_completion, monkeypatch):
        monkeypatch.setattr(settings, "AI_REQUEST_TIMEOUT", 0.1)
        override_completion(SlowCompletion())
        response = client.post("/adapt-workout", json={"condition": "tired", "exercises": self.plan()})

        assert response.status_code == 502
        assert response.json()["detail"] == {
            "error": "Workout adaptation failed. Using standard plan.",
            "kind": "service",
        }

    def test_unknown_condition(self, client):
        response = client.post("/adapt-workout", json={"condition": "sore", "exercises": self.plan()})
        assert response.status_code == 422


class TestAnalyzeMealEndpoint:
    """Tests for meal analysis endpoint."""

    def test_analysis(self, client, override_completion):
        override_completion(FakeCompletion(response=json.dumps({
            "calories": 350, "protein": 12, "carbs": 60, "fats": 6, "summary": "Oatmeal",
        })))
        response = client.post("/analyze-meal", json={"description": "bowl of oatmeal"})

        assert response.status_code == 200
        assert response.json()["analysis"]["calories"] == 350

    def test_blank_description(self, client, override_completion):
        override_completion(FakeCompletion(response="{}"))
        response = client.post("/analyze-meal", json={"description": " "})

        assert response.status_code == 400
