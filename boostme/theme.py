import base64
import html

import streamlit as st

THEME_PRESETS = {
    "light": {
        "bg_main": "#f8f7fc",
        "bg_card": "#ffffff",
        "border": "#ece9f5",
        "text_main": "#1e1e2a",
        "text_soft": "#6b6b80",
        "primary": "#7c5cff",
        "accent": "#ffb547",
        "plot_grid": "#ece9f5",
        "plot_marker_line": "#ffffff",
        "bubble_bg": "#f3efff",
    },
    "dark": {
        "bg_main": "#121017",
        "bg_card": "#1e1a27",
        "border": "#3d3550",
        "text_main": "#f3edf9",
        "text_soft": "#c8bbd8",
        "primary": "#a48bff",
        "accent": "#ffc46b",
        "plot_grid": "#3d3550",
        "plot_marker_line": "#ddd1ea",
        "bubble_bg": "#2a2335",
    },
}

MASCOT_COLORS = {
    "neutral": "#c9c3e6",
    "happy": "#ffd36e",
    "proud": "#ffb547",
    "worried": "#a9c0e8",
    "low": "#b8b8c8",
}


def ensure_theme_state():
    if st.session_state.get("ui_theme") not in THEME_PRESETS:
        st.session_state["ui_theme"] = "light"
    return st.session_state["ui_theme"]


def get_active_theme():
    name = ensure_theme_state()
    return name, THEME_PRESETS[name]


def toggle_theme():
    current = ensure_theme_state()
    st.session_state["ui_theme"] = "light" if current == "dark" else "dark"


def theme_toggle_label(name):
    if name == "dark":
        return "☀️", "Switch to light mode"
    return "🌙", "Switch to dark mode"


def bytes_to_data_uri(payload, mime_type=None):
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{mime_type or 'image/jpeg'};base64,{encoded}"


def inject_theme_css():
    _, theme = get_active_theme()
    st.markdown(
        f"""
<style>
:root {{
    --bg-main: {theme['bg_main']};
    --bg-card: {theme['bg_card']};
    --border: {theme['border']};
    --text-main: {theme['text_main']};
    --text-soft: {theme['text_soft']};
    --primary: {theme['primary']};
    --accent: {theme['accent']};
    --bubble-bg: {theme['bubble_bg']};
}}
.stApp {{ background: var(--bg-main); color: var(--text-main); }}
.block-container {{ max-width: 720px; }}
.app-brand {{ font-size: 1.5rem; font-weight: 700; color: var(--primary); }}
.app-greeting {{ font-size: 1.15rem; font-weight: 600; margin: 4px 0 12px; }}
.app-greeting span {{ display: block; font-size: 0.9rem; font-weight: 400; color: var(--text-soft); }}
.section-title {{ font-size: 1.2rem; font-weight: 700; margin: 8px 0 10px; }}
.small-label {{ font-size: 0.8rem; color: var(--text-soft); text-transform: uppercase; letter-spacing: .04em; }}
.mascot-wrapper {{ display: flex; align-items: center; gap: 16px; padding: 16px;
    background: var(--bg-card); border: 1px solid var(--border); border-radius: 18px; margin-bottom: 16px; }}
.mascot {{ width: 64px; height: 64px; border-radius: 50%; display: flex; align-items: center;
    justify-content: center; font-size: 34px; flex-shrink: 0; }}
.mascot-bubble {{ background: var(--bubble-bg); border-radius: 14px; padding: 10px 14px; }}
.stat-card {{ background: var(--bg-card); border: 1px solid var(--border); border-radius: 16px; padding: 14px; }}
.avatar {{ width: 40px; height: 40px; border-radius: 50%; object-fit: cover; }}
</style>
""",
        unsafe_allow_html=True,
    )


def mascot_html(mood, text, emoji):
    color = MASCOT_COLORS.get(mood, MASCOT_COLORS["neutral"])
    return (
        "<div class='mascot-wrapper'>"
        f"<div class='mascot mascot-{mood}' style='background:{color};'>{emoji}</div>"
        f"<div class='mascot-bubble'><p style='margin:0;'>{html.escape(text)}</p></div>"
        "</div>"
    )
