"""
Integration tests for the module-level app with every repository faked.

Walks the whole flow through one shared store: author a split, log two
workouts of the same day, then compare them.
"""
import pytest
from fastapi.testclient import TestClient

from backend.main import app
from tests.fakes.conftest import app_with_fake_repos  # noqa: F401


@pytest.fixture
def client(app_with_fake_repos):  # noqa: F811
    return TestClient(app)


@pytest.mark.integration
class TestEndToEndFlow:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_split_to_comparison(self, client, app_with_fake_repos):  # noqa: F811
        store = app_with_fake_repos["store"]
        created = client.post("/splits", json={
            "splitName": "Full Body",
            "days": [{
                "workoutName": "Day A",
                "exercises": [{
                    "name": "Squat",
                    "sets": 2,
                    "setsData": [{"reps": 5, "weight": 200}, {"reps": 5, "weight": 200}],
                }],
            }],
        })
        assert created.status_code == 201
        day = created.json()["split"]["days"][0]
        squat_id = day["exercises"][0]["id"]

        prefilled = client.get(f"/workouts/split-days/{day['id']}/prefilled").json()
        assert [s["weight"] for s in prefilled["exercises"][0]["sets"]] == [200, 200]

        session = client.post("/workouts/sessions", json={"split_day_id": day["id"]}).json()["session"]
        logged = client.put(
            f"/workouts/sessions/{session['id']}/exercises/{squat_id}/sets",
            json={"sets": [
                {"setNumber": 1, "reps": 5, "weight": 210},
                {"setNumber": 2, "reps": 5, "weight": 210},
            ]},
        )
        assert logged.status_code == 200

        body = client.get(f"/workout-history/{session['id']}/comparison").json()
        assert body["success"] is True
        progress = body["data"]["progressData"]
        # Compared against the undated baseline created with the split
        assert body["data"]["previousWorkout"]["date"] is None
        assert progress["overallProgress"]["totalWeightChange"] == 100
        assert progress["overallProgress"]["totalWeightChangePercent"] == pytest.approx(5.0)

        recent = client.get("/workout-history/recent").json()["data"]
        assert [w["id"] for w in recent["workouts"]] == [session["id"]]
        assert recent["summary"]["totalWorkouts"] == 1
        assert recent["summary"]["muscleGroupCounts"] == {"NA": 2}
        assert len(store.tables["sessions"]) == 2

    def test_account_deletion_clears_history(self, client, app_with_fake_repos):  # noqa: F811
        store = app_with_fake_repos["store"]
        store.seed_session(
            user_id="user-1",
            split_day_id=store.seed_split_day(exercises=[{"id": "row", "name": "Row"}])["split_day"]["id"],
            sets=[{"exercise_id": "row", "set_number": 1, "reps": 10, "weight": 100}],
        )

        deleted = client.delete("/account").json()["deleted"]

        assert deleted["sessions"] == 1
        assert client.get("/workout-history/recent").json()["data"]["workouts"] == []
