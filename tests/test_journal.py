from datetime import date

import pytest

from boostme.constants import DEFAULT_MISSIONS, INITIAL_MISSION_COUNT
from boostme.data import repositories
from boostme.data.store import MemoryStore
from boostme.exceptions import StoreError, ValidationError
from boostme.services import journal

TODAY = date(2024, 5, 1)


class FakeCoach:
    def __init__(self):
        self.reflections = 0

    def reflect(self, score, mood, note):
        self.reflections += 1
        return f"Reflection for {mood}"

    def suggest_activities(self):
        return [{"id": 99, "text": "Call a friend", "completed": False}]


class FakeEngine:
    def __init__(self):
        self.restarts = 0

    def restart(self):
        self.restarts += 1


class FakeNotifier:
    def __init__(self):
        self.requests = 0

    def request_permission(self):
        self.requests += 1
        return "granted"


@pytest.fixture
def store():
    return MemoryStore()


def test_submit_check_in_saves_record(store):
    coach = FakeCoach()
    record = journal.submit_check_in(store, coach, 7, "tired", "  long day ", today=TODAY)
    assert record["date"] == "2024-05-01"
    assert record["score"] == 7
    assert record["note"] == "long day"
    assert record["aiResponse"] == "Reflection for tired"
    assert record["id"].isdigit()
    assert repositories.list_checkins(store) == [record]


def test_second_check_in_same_day_returns_existing(store):
    coach = FakeCoach()
    first = journal.submit_check_in(store, coach, 7, "tired", today=TODAY)
    second = journal.submit_check_in(store, coach, 2, "sad", today=TODAY)
    assert second == first
    assert coach.reflections == 1
    assert len(repositories.list_checkins(store)) == 1


@pytest.mark.parametrize("score, mood", [(7, ""), (7, "grumpy"), (0, "sad"), (11, "sad"), ("x", "sad")])
def test_submit_check_in_validation(store, score, mood):
    coach = FakeCoach()
    with pytest.raises(ValidationError):
        journal.submit_check_in(store, coach, score, mood, today=TODAY)
    assert coach.reflections == 0
    assert repositories.list_checkins(store) == []


def test_load_today_missions_seeds_defaults(store):
    missions = journal.load_today_missions(store, TODAY)
    assert missions == DEFAULT_MISSIONS[:INITIAL_MISSION_COUNT]
    assert repositories.get_missions(store, TODAY) == missions


def test_toggle_mission_adjusts_counter(store):
    journal.toggle_mission(store, 2, TODAY)
    assert repositories.get_total_missions(store) == 1
    assert [m["completed"] for m in repositories.get_missions(store, TODAY)] == [False, True, False]

    journal.toggle_mission(store, 2, TODAY)
    assert repositories.get_total_missions(store) == 0
    journal.toggle_mission(store, 404, TODAY)
    assert repositories.get_total_missions(store) == 0


def test_regenerate_missions_replaces_list(store):
    journal.load_today_missions(store, TODAY)
    missions = journal.regenerate_missions(store, FakeCoach(), TODAY)
    assert repositories.get_missions(store, TODAY) == missions
    assert missions[0]["text"] == "Call a friend"


def test_save_profile_reports_image_failure(store):
    class NoImageStore(MemoryStore):
        def set(self, key, value):
            if key == "boostme_profile_image":
                raise StoreError("quota exceeded")
            super().set(key, value)

    broken = NoImageStore()
    saved, warning = journal.save_profile(broken, {"name": "Dina", "avatar": "data:image/png;base64,AAA"})
    assert warning
    assert repositories.get_profile_data(broken)["name"] == "Dina"

    saved, warning = journal.save_profile(store, {"name": "Dina", "avatar": "data:image/png;base64,AAA"})
    assert warning is None
    assert saved["avatar"] == "data:image/png;base64,AAA"


def test_save_reminder_settings(store):
    engine = FakeEngine()
    notifier = FakeNotifier()
    status = journal.save_reminder_settings(store, engine, notifier, {"enabled": True, "time": "07:30", "type": "boost"})
    assert status == "Daily reminder set for 07:30."
    assert notifier.requests == 1
    assert engine.restarts == 1

    status = journal.save_reminder_settings(store, engine, notifier, {"enabled": False, "time": "07:30", "type": "boost"})
    assert status == "Daily reminder turned off."
    assert notifier.requests == 1
    assert repositories.get_reminder_settings(store)["enabled"] is False


def test_reset_all(store):
    journal.submit_check_in(store, FakeCoach(), 7, "tired", today=TODAY)
    engine = FakeEngine()
    journal.reset_all(store, engine)
    assert store.keys() == []
    assert engine.restarts == 1
