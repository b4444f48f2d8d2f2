import html
import json

import streamlit as st
import streamlit.components.v1 as components

from boostme.constants import APP_NAME, DEFAULT_DISPLAY_NAME
from boostme.data import repositories
from boostme.theme import ensure_theme_state, theme_toggle_label, toggle_theme


def render_global_header(ctx):
    profile = repositories.get_profile(ctx.store)
    name = profile.get("name") or DEFAULT_DISPLAY_NAME
    avatar = profile.get("avatar")
    toggle_icon, toggle_help = theme_toggle_label(ensure_theme_state())

    cols = st.columns([5, 1, 1])
    with cols[0]:
        st.markdown(f"<div class='app-brand'>⚡ {APP_NAME}</div>", unsafe_allow_html=True)
    with cols[1]:
        st.button(toggle_icon, key="toggle_theme_mode", help=toggle_help, on_click=toggle_theme, type="tertiary")
    with cols[2]:
        if avatar:
            st.markdown(f"<img class='avatar' src='{html.escape(avatar, quote=True)}' alt='Profile'/>", unsafe_allow_html=True)
        else:
            st.markdown("<div style='font-size:28px;text-align:right;'>👤</div>", unsafe_allow_html=True)

    st.markdown(
        f"<p class='app-greeting'>Hi {html.escape(name)} <span>Let's build some confidence together today.</span></p>",
        unsafe_allow_html=True,
    )


def _browser_script(items):
    lines = []
    for item in items:
        if item["kind"] == "request":
            lines.append("if ('Notification' in window && Notification.permission === 'default') { Notification.requestPermission(); }")
        else:
            title = json.dumps(item["title"])
            body = json.dumps(item["body"])
            lines.append(
                "if ('Notification' in window && Notification.permission === 'granted') "
                f"{{ new Notification({title}, {{ body: {body} }}); }}"
            )
    return "<script>" + "\n".join(lines) + "</script>"


@st.fragment(run_every=60)
def render_pending_alerts(ctx):
    for alert in ctx.notifier.drain_alerts():
        st.toast(alert["message"], icon="🔔")
    bridge = ctx.get("browser_bridge")
    if bridge is None:
        return
    items = bridge.drain()
    if items:
        components.html(_browser_script(items), height=0)
