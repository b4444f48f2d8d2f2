from __future__ import annotations

import logging
import threading
from collections import deque
from datetime import datetime

logger = logging.getLogger(__name__)


class Notifier:
    """Delivery channels for reminders.

    In-app alerts are queued for the UI to drain on its next render. OS-level
    notifications go through ``os_sender`` and only once permission is
    ``granted``; without a sender there is nothing to grant.
    """

    def __init__(self, os_sender=None, permission_requester=None, permission="default"):
        self._os_sender = os_sender
        self._permission_requester = permission_requester
        self.permission = permission
        self._alerts = deque(maxlen=20)
        self._lock = threading.Lock()

    @property
    def supported(self):
        return self._os_sender is not None

    def request_permission(self):
        if not self.supported:
            return "denied"
        if self.permission != "default":
            return self.permission
        if self._permission_requester is None:
            self.permission = "granted"
        else:
            result = self._permission_requester()
            self.permission = result if result in ("granted", "denied") else "default"
        logger.info("Notification permission: %s", self.permission)
        return self.permission

    def alert(self, message):
        with self._lock:
            self._alerts.append({"message": message, "at": datetime.now()})

    def drain_alerts(self):
        with self._lock:
            items = list(self._alerts)
            self._alerts.clear()
        return items

    def notify_os(self, title, body):
        if not self.supported or self.permission != "granted":
            return False
        self._os_sender(title, body)
        return True

    def deliver(self, title, message):
        try:
            self.alert(message)
        except Exception:
            logger.exception("Error showing in-app reminder")
        try:
            return self.notify_os(title, message)
        except Exception:
            logger.exception("Error sending OS notification")
            return False


class BrowserNotificationBridge:
    """Queues OS notifications for the page to hand to the browser's Notification API.

    The browser enforces its own permission; a notification queued after the
    user declined is dropped there.
    """

    def __init__(self):
        self._pending = deque(maxlen=20)
        self._lock = threading.Lock()

    def send(self, title, body):
        with self._lock:
            self._pending.append({"kind": "notify", "title": title, "body": body})

    def request_permission(self):
        with self._lock:
            self._pending.append({"kind": "request"})
        return "granted"

    def drain(self):
        with self._lock:
            items = list(self._pending)
            self._pending.clear()
        return items
