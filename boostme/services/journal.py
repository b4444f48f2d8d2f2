from __future__ import annotations

import logging
import time
from datetime import date

from boostme.constants import (
    CHECKIN_MOOD_LABELS,
    DEFAULT_MISSIONS,
    INITIAL_MISSION_COUNT,
    MAX_SCORE,
    MIN_SCORE,
)
from boostme.data import repositories
from boostme.exceptions import StoreError, ValidationError

logger = logging.getLogger(__name__)


def submit_check_in(store, coach, score, mood, note="", today=None):
    """Record today's check-in with a coaching reflection.

    Returns the authoritative record for today; an existing one is returned
    untouched and no request is made.
    """
    today = today or date.today()
    if not mood or mood not in CHECKIN_MOOD_LABELS:
        raise ValidationError("Pick a mood before saving your check-in.")
    try:
        score = int(score)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Confidence score must be a whole number.") from exc
    if not (MIN_SCORE <= score <= MAX_SCORE):
        raise ValidationError(f"Confidence score must be between {MIN_SCORE} and {MAX_SCORE}.")

    existing = repositories.get_checkin_for_date(store, today)
    if existing:
        return existing

    note = (note or "").strip()
    ai_response = coach.reflect(score, mood, note)
    record = {
        "id": str(int(time.time() * 1000)),
        "date": today.isoformat(),
        "score": score,
        "mood": mood,
        "note": note,
        "aiResponse": ai_response,
    }
    repositories.add_checkin(store, record)
    logger.info("Check-in saved for %s (score %s)", record["date"], score)
    return record


def load_today_missions(store, today=None):
    today = today or date.today()
    missions = repositories.get_missions(store, today)
    if missions is not None:
        return missions
    initial = [dict(item) for item in DEFAULT_MISSIONS[:INITIAL_MISSION_COUNT]]
    repositories.save_missions(store, today, initial)
    return initial


def toggle_mission(store, mission_id, today=None):
    today = today or date.today()
    missions = load_today_missions(store, today)
    updated = []
    for mission in missions:
        if mission.get("id") == mission_id:
            completed = bool(mission.get("completed"))
            repositories.adjust_total_missions(store, -1 if completed else 1)
            mission = {**mission, "completed": not completed}
        updated.append(mission)
    repositories.save_missions(store, today, updated)
    return updated


def regenerate_missions(store, coach, today=None):
    today = today or date.today()
    missions = coach.suggest_activities()
    repositories.save_missions(store, today, missions)
    return missions


def save_profile(store, profile):
    """Persist profile text and avatar; returns (saved_profile, warning)."""
    saved = repositories.save_profile_data(store, profile)
    warning = None
    avatar = profile.get("avatar")
    if avatar:
        try:
            repositories.save_profile_image(store, avatar)
        except StoreError:
            logger.exception("Cannot save profile image")
            warning = "Couldn't save the picture (the file may be too large)."
    saved["avatar"] = avatar or repositories.get_profile_image(store) or ""
    return saved, warning


def save_reminder_settings(store, engine, notifier, settings):
    """Persist reminder settings, restart the engine and return a status line."""
    if settings.get("enabled") and notifier is not None:
        notifier.request_permission()
    saved = repositories.save_reminder_settings(store, settings)
    if engine is not None:
        engine.restart()
    if saved["enabled"]:
        return f"Daily reminder set for {saved['time'] or '--:--'}."
    return "Daily reminder turned off."


def reset_all(store, engine=None):
    repositories.reset_all(store)
    if engine is not None:
        engine.restart()
    logger.info("All local data cleared")


def restore_notification_permission(store, notifier):
    """Ask for OS notification permission again when stored reminders are enabled.

    Permission lives in the notifier's process memory, so a restarted app has
    to re-establish it before the first reminder fires.
    """
    if notifier is None or not repositories.get_reminder_settings(store)["enabled"]:
        return None
    return notifier.request_permission()
