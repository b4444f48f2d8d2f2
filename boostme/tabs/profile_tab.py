from datetime import datetime, time

import streamlit as st

from boostme.constants import REMINDER_TYPES, REMINDER_TYPE_LABELS
from boostme.data import repositories
from boostme.exceptions import StoreError
from boostme.services import journal
from boostme.theme import bytes_to_data_uri


def _parse_time(value):
    try:
        return datetime.strptime(value, "%H:%M").time()
    except (TypeError, ValueError):
        return time(9, 0)


def _render_profile_form(ctx, profile):
    with st.form("profile.form"):
        name = st.text_input("Name", value=profile.get("name", ""))
        role = st.text_input("Role", value=profile.get("role", ""), placeholder="Student, designer, new manager...")
        goal = st.text_input("Confidence goal", value=profile.get("goal", ""))
        note = st.text_area("Anything your coach should know", value=profile.get("note", ""), height=80)
        upload = st.file_uploader("Profile picture", type=["png", "jpg", "jpeg", "webp"])
        cols = st.columns(2)
        submitted = cols[0].form_submit_button("Save profile", type="primary")
        cancelled = cols[1].form_submit_button("Cancel")

    if cancelled:
        st.session_state["profile.editing"] = False
        st.rerun()
    if not submitted:
        return

    avatar = profile.get("avatar", "")
    if upload is not None:
        avatar = bytes_to_data_uri(upload.getvalue(), upload.type)
    try:
        _, warning = journal.save_profile(
            ctx.store,
            {"name": name, "role": role, "goal": goal, "note": note, "avatar": avatar},
        )
    except StoreError:
        st.error("Something went wrong while saving your profile.")
        return
    if warning:
        st.warning(warning)
    st.session_state["profile.editing"] = False
    st.session_state["profile.status"] = "Profile saved 😊"
    st.rerun(scope="app")


def _render_profile_card(profile):
    cols = st.columns([1, 4])
    with cols[0]:
        if profile.get("avatar"):
            st.image(profile["avatar"], width=72)
        else:
            st.markdown("<div style='font-size:48px;'>👤</div>", unsafe_allow_html=True)
    with cols[1]:
        st.markdown(f"**{profile.get('name') or 'Your name'}**")
        st.caption(profile.get("role") or "Tell us what you do")
    st.markdown(f"**Confidence goal:** {profile.get('goal') or '-'}")
    if profile.get("note"):
        st.caption(profile["note"])
    if st.button("✏️ Edit profile", key="profile.edit"):
        st.session_state["profile.editing"] = True
        st.rerun()


def _render_reminders(ctx):
    settings = repositories.get_reminder_settings(ctx.store)
    st.markdown("**🔔 Daily reminder**")
    enabled = st.toggle("Remind me every day", value=settings["enabled"], key="profile.reminder_enabled")
    cols = st.columns(2)
    with cols[0]:
        picked = st.time_input("Time", value=_parse_time(settings["time"]), step=60, key="profile.reminder_time")
    with cols[1]:
        reminder_type = st.selectbox(
            "Remind me about",
            REMINDER_TYPES,
            index=REMINDER_TYPES.index(settings["type"]),
            format_func=lambda key: REMINDER_TYPE_LABELS[key],
            key="profile.reminder_type",
        )
    if st.button("Save reminder", key="profile.reminder_save"):
        try:
            status = journal.save_reminder_settings(
                ctx.store,
                ctx.reminders,
                ctx.notifier,
                {"enabled": enabled, "time": picked.strftime("%H:%M"), "type": reminder_type},
            )
        except StoreError:
            status = "Something went wrong while saving the reminder."
        st.session_state["profile.reminder_status"] = status
    status = st.session_state.get("profile.reminder_status")
    if status:
        st.caption(status)


def _render_reset(ctx):
    st.markdown("**Start over**")
    confirmed = st.checkbox("I want to delete all my data and start fresh", key="profile.reset_confirm")
    if st.button("Reset all data", key="profile.reset", disabled=not confirmed):
        journal.reset_all(ctx.store, ctx.reminders)
        for key in list(st.session_state.keys()):
            del st.session_state[key]
        st.rerun()


def render_profile_tab(ctx):
    st.markdown("<div class='section-title'>Profile</div>", unsafe_allow_html=True)
    status = st.session_state.pop("profile.status", None)
    if status:
        st.success(status)

    profile = repositories.get_profile(ctx.store)
    with st.container(border=True):
        if st.session_state.get("profile.editing"):
            _render_profile_form(ctx, profile)
        else:
            _render_profile_card(profile)

    with st.container(border=True):
        _render_reminders(ctx)

    with st.container(border=True):
        _render_reset(ctx)
