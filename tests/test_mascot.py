import pytest

from boostme import mascot
from boostme.constants import CHAT_MASCOT_INTRO, MASCOT_MESSAGES


@pytest.mark.parametrize(
    "score, expected",
    [(None, "neutral"), (10, "proud"), (8, "proud"), (7, "happy"), (6, "happy"), (5, "worried"), (4, "worried"), (3, "low"), (1, "low")],
)
def test_map_mood_thresholds(score, expected):
    assert mascot.map_mood(score) == expected


def test_mascot_for_checkin_without_record_is_neutral():
    assert mascot.mascot_for_checkin(None) == ("neutral", MASCOT_MESSAGES["neutral"])


def test_mascot_for_checkin_uses_score():
    mood, message = mascot.mascot_for_checkin({"score": 9, "mood": "sad"})
    assert mood == "proud"
    assert message == MASCOT_MESSAGES["proud"]


def test_mascot_for_checkin_bad_score_is_neutral():
    assert mascot.mascot_for_checkin({"score": "high"})[0] == "neutral"


def test_mood_from_text_prefers_stress_words():
    assert mascot.mood_from_text("I'm so happy but also nervous")[0] == "worried"
    assert mascot.mood_from_text("I feel PROUD today")[0] == "happy"
    assert mascot.mood_from_text("hello")[0] == "neutral"
    assert mascot.mood_from_text(None)[0] == "neutral"


def test_chat_intro():
    assert mascot.chat_intro() == ("neutral", CHAT_MASCOT_INTRO)
