import logging

import streamlit as st

from boostme.context import build_context
from boostme.header import render_global_header, render_pending_alerts
from boostme.logging_config import configure_logging
from boostme.router import render_router
from boostme.services.notifications import BrowserNotificationBridge, Notifier
from boostme.settings import get_settings
from boostme.theme import inject_theme_css

configure_logging()
logger = logging.getLogger("boostme")

st.set_page_config(page_title="BoostMe", page_icon="⚡", layout="centered")


@st.cache_resource
def get_context():
    settings = get_settings()
    bridge = BrowserNotificationBridge()
    notifier = Notifier(os_sender=bridge.send, permission_requester=bridge.request_permission)
    ctx = build_context(settings, notifier=notifier)
    ctx.extras["browser_bridge"] = bridge
    ctx.reminders.run()
    logger.info("BoostMe started (relay=%s)", settings.use_backend)
    return ctx


inject_theme_css()
context = get_context()
render_global_header(context)
render_pending_alerts(context)
render_router(context)
