from dataclasses import dataclass, field
from typing import Any, Dict

from boostme.data import repositories
from boostme.data.store import KeyValueStore, SqlStore
from boostme.services import journal
from boostme.services.coach import CoachClient, build_coach
from boostme.services.notifications import Notifier
from boostme.services.reminders import ReminderEngine


@dataclass
class BoostMeContext:
    store: KeyValueStore
    coach: CoachClient
    notifier: Notifier
    reminders: ReminderEngine
    settings: Any = None
    extras: Dict[str, Any] = field(default_factory=dict)

    def get(self, key, default=None):
        return self.extras.get(key, default)


def build_context(settings, store=None, notifier=None):
    store = store or SqlStore.from_url(settings.database_url)
    notifier = notifier or Notifier()
    journal.restore_notification_permission(store, notifier)
    coach = build_coach(settings, profile_getter=lambda: repositories.get_profile_data(store))
    reminders = ReminderEngine(store, notifier, interval_seconds=settings.reminder_interval_seconds)
    return BoostMeContext(store=store, coach=coach, notifier=notifier, reminders=reminders, settings=settings)
