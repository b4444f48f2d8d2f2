from __future__ import annotations

import logging
import threading
from datetime import datetime

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from boostme.constants import REMINDER_INTERVAL_SECONDS, REMINDER_MESSAGES, REMINDER_TITLE
from boostme.data import repositories

logger = logging.getLogger(__name__)

JOB_ID = "boostme-daily-reminder"


def reminder_message(reminder_type):
    return REMINDER_MESSAGES.get(reminder_type, REMINDER_MESSAGES["both"])


def parse_reminder_time(value):
    """(hour, minute) for an "HH:MM" string, or None."""
    if not isinstance(value, str):
        return None
    parts = value.strip().split(":")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        return None
    try:
        hour = int(parts[0])
        minute = int(parts[1])
    except ValueError:
        return None
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return None
    return hour, minute


class ReminderEngine:
    """Polls the stored reminder settings and fires at most once per day per time.

    Only an exact hour:minute match fires; a tick that lands after the target
    minute does not catch up.
    """

    def __init__(self, store, notifier, scheduler=None, clock=None, interval_seconds=REMINDER_INTERVAL_SECONDS):
        self.store = store
        self.notifier = notifier
        self.scheduler = scheduler or BackgroundScheduler(job_defaults={"misfire_grace_time": 30, "coalesce": True})
        self.interval_seconds = interval_seconds
        self._clock = clock or datetime.now
        self._handle = None
        self._check_lock = threading.Lock()

    @property
    def handle(self):
        return self._handle

    def check_and_trigger(self):
        try:
            with self._check_lock:
                return self._check_and_trigger()
        except Exception:
            logger.exception("Reminder check failed")
            return False

    def _check_and_trigger(self):
        settings = repositories.load_stored_reminder_settings(self.store)
        if not settings or not settings.get("enabled") or not settings.get("time"):
            return False

        configured_time = settings["time"]
        target = parse_reminder_time(configured_time)
        if target is None:
            logger.warning("Ignoring malformed reminder time %r", configured_time)
            return False

        now = self._clock()
        if (now.hour, now.minute) != target:
            return False

        today = now.date().isoformat()
        marker = repositories.get_last_trigger(self.store)
        if marker and marker.get("date") == today and marker.get("time") in (configured_time, None):
            return False

        reminder_type = settings.get("type")
        self.notifier.deliver(REMINDER_TITLE, reminder_message(reminder_type))
        repositories.set_last_trigger(self.store, today, configured_time)
        logger.info("Reminder fired for %s at %s (%s)", today, configured_time, reminder_type)
        return True

    def start(self):
        self.stop()
        self.check_and_trigger()
        self._handle = self.scheduler.add_job(
            self.check_and_trigger,
            trigger=IntervalTrigger(seconds=self.interval_seconds),
            id=JOB_ID,
            replace_existing=True,
        )
        return self._handle

    def stop(self, handle=None):
        handle = handle or self._handle
        if handle is None:
            return
        try:
            handle.remove()
        except JobLookupError:
            logger.debug("Reminder job already removed")
        if handle is self._handle:
            self._handle = None

    def restart(self):
        return self.start()

    def run(self):
        """Start the scheduler thread (if needed) and the polling job."""
        if not self.scheduler.running:
            self.scheduler.start()
        return self.start()

    def shutdown(self):
        self.stop()
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
