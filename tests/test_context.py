from datetime import datetime

from apscheduler.schedulers.background import BackgroundScheduler

from boostme.constants import REMINDER_TITLE
from boostme.context import build_context
from boostme.data import repositories
from boostme.data.store import MemoryStore
from boostme.services.notifications import Notifier
from boostme.services.reminders import ReminderEngine
from boostme.settings import AppSettings


def _enabled_store():
    store = MemoryStore()
    repositories.save_reminder_settings(store, {"enabled": True, "time": "09:00", "type": "checkin"})
    return store


def test_fresh_context_restores_permission_for_enabled_reminders():
    store = _enabled_store()
    sent = []
    notifier = Notifier(os_sender=lambda title, body: sent.append((title, body)))

    ctx = build_context(AppSettings(), store=store, notifier=notifier)
    assert ctx.notifier.permission == "granted"

    engine = ReminderEngine(
        store,
        ctx.notifier,
        scheduler=BackgroundScheduler(),
        clock=lambda: datetime(2024, 5, 1, 9, 0),
    )
    assert engine.check_and_trigger() is True
    assert [title for title, _ in sent] == [REMINDER_TITLE]


def test_fresh_context_leaves_permission_alone_when_reminders_off():
    requests = []
    notifier = Notifier(os_sender=lambda title, body: None, permission_requester=lambda: requests.append(1) or "granted")

    ctx = build_context(AppSettings(), store=MemoryStore(), notifier=notifier)
    assert ctx.notifier.permission == "default"
    assert requests == []
