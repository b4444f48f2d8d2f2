from __future__ import annotations

import json
import logging

from boostme.constants import (
    DEFAULT_REMINDER_SETTINGS,
    LOGS_KEY,
    MISSIONS_KEY_PREFIX,
    PROFILE_DATA_KEY,
    PROFILE_FIELDS,
    PROFILE_IMAGE_KEY,
    REMINDER_LAST_TRIGGER_KEY,
    REMINDER_SETTINGS_KEY,
    REMINDER_TYPES,
    TOTAL_MISSIONS_KEY,
)

logger = logging.getLogger(__name__)


def _day_iso(day):
    if isinstance(day, str):
        return day
    return day.isoformat()


def _load_json(store, key, default=None):
    raw = store.get(key)
    if raw is None or raw == "":
        return default
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring malformed JSON under %s", key)
        return default


def _save_json(store, key, value):
    store.set(key, json.dumps(value, ensure_ascii=False))


def missions_key(day):
    return f"{MISSIONS_KEY_PREFIX}{_day_iso(day)}"


# --- Profile ---------------------------------------------------------------


def get_profile_data(store):
    """Stored text profile fields, or None before the first save."""
    payload = _load_json(store, PROFILE_DATA_KEY)
    if not isinstance(payload, dict):
        return None
    return {field: str(payload.get(field) or "") for field in PROFILE_FIELDS}


def save_profile_data(store, profile):
    clean = {field: str(profile.get(field) or "").strip() for field in PROFILE_FIELDS}
    _save_json(store, PROFILE_DATA_KEY, clean)
    return clean


def get_profile_image(store):
    return store.get(PROFILE_IMAGE_KEY) or None


def save_profile_image(store, data_uri):
    store.set(PROFILE_IMAGE_KEY, data_uri)


def get_profile(store):
    """Profile merged with the avatar; empty fields on first run."""
    profile = {field: "" for field in PROFILE_FIELDS}
    profile.update(get_profile_data(store) or {})
    profile["avatar"] = get_profile_image(store) or ""
    return profile


# --- Check-ins ---------------------------------------------------------------


def list_checkins(store):
    payload = _load_json(store, LOGS_KEY, default=[])
    if not isinstance(payload, list):
        return []
    return [item for item in payload if isinstance(item, dict)]


def get_checkin_for_date(store, day):
    day_iso = _day_iso(day)
    for record in list_checkins(store):
        if record.get("date") == day_iso:
            return record
    return None


def add_checkin(store, record):
    logs = list_checkins(store)
    _save_json(store, LOGS_KEY, [record, *logs])
    return record


# --- Missions ----------------------------------------------------------------


def get_missions(store, day):
    payload = _load_json(store, missions_key(day))
    if not isinstance(payload, list):
        return None
    return [item for item in payload if isinstance(item, dict)]


def save_missions(store, day, missions):
    _save_json(store, missions_key(day), list(missions))


def get_total_missions(store):
    raw = store.get(TOTAL_MISSIONS_KEY)
    try:
        return max(0, int(raw or 0))
    except (TypeError, ValueError):
        return 0


def adjust_total_missions(store, delta):
    total = max(0, get_total_missions(store) + int(delta))
    store.set(TOTAL_MISSIONS_KEY, str(total))
    return total


# --- Reminders ---------------------------------------------------------------


def get_reminder_settings(store):
    """Settings for the profile form: stored values over the defaults."""
    settings = dict(DEFAULT_REMINDER_SETTINGS)
    payload = _load_json(store, REMINDER_SETTINGS_KEY)
    if isinstance(payload, dict):
        settings.update({k: v for k, v in payload.items() if k in settings})
    settings["enabled"] = bool(settings.get("enabled"))
    if settings.get("type") not in REMINDER_TYPES:
        settings["type"] = DEFAULT_REMINDER_SETTINGS["type"]
    return settings


def load_stored_reminder_settings(store):
    """Raw stored settings for the reminder engine; None when absent or malformed."""
    payload = _load_json(store, REMINDER_SETTINGS_KEY)
    if not isinstance(payload, dict):
        return None
    return payload


def save_reminder_settings(store, settings):
    clean = {
        "enabled": bool(settings.get("enabled")),
        "time": str(settings.get("time") or "").strip(),
        "type": settings.get("type") if settings.get("type") in REMINDER_TYPES else "both",
    }
    _save_json(store, REMINDER_SETTINGS_KEY, clean)
    return clean


def get_last_trigger(store):
    raw = store.get(REMINDER_LAST_TRIGGER_KEY)
    if not raw:
        return None
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError):
        # Older builds stored the bare ISO date.
        return {"date": raw, "time": None}
    if isinstance(payload, dict):
        return payload
    if isinstance(payload, str):
        return {"date": payload, "time": None}
    return None


def set_last_trigger(store, day, time_value):
    _save_json(store, REMINDER_LAST_TRIGGER_KEY, {"date": _day_iso(day), "time": time_value})


# --- Reset -------------------------------------------------------------------


def reset_all(store):
    store.clear()
