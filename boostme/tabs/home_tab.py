from datetime import date

import streamlit as st

from boostme.constants import CHECKIN_MOODS, CHECKIN_MOOD_LABELS, MASCOT_EMOJI, MAX_SCORE, MIN_SCORE
from boostme.data import repositories
from boostme.exceptions import ValidationError
from boostme.mascot import mascot_for_checkin
from boostme.services import journal
from boostme.theme import mascot_html


def _go_to(tab):
    st.session_state["ui.active_tab"] = tab


def _render_checkin_done(record):
    mood_label = CHECKIN_MOOD_LABELS.get(record.get("mood"), record.get("mood") or "-")
    with st.container(border=True):
        st.markdown("**Today's check-in is done 🎉**")
        st.write(record.get("aiResponse") or "")
        st.caption(f"Confidence: {record.get('score')}/10 • Mood: {mood_label}")


def _render_checkin_form(ctx, today):
    with st.form("checkin.form", border=True):
        st.markdown("**Daily Check-in**")
        score = st.slider(
            "Today's confidence level",
            min_value=MIN_SCORE,
            max_value=MAX_SCORE,
            value=5,
            step=1,
            key="checkin.score",
            help="Slide from 1 (not confident at all) to 10 (very confident).",
        )
        mood = st.pills(
            "How do you feel?",
            [key for key, _ in CHECKIN_MOODS],
            format_func=lambda key: CHECKIN_MOOD_LABELS[key],
            key="checkin.mood",
        )
        note = st.text_area("What happened today?", key="checkin.note", height=90, placeholder="Tell BoostMe about it")
        submitted = st.form_submit_button("Save today's check-in", type="primary")

    if not submitted:
        return
    try:
        with st.spinner("Processing..."):
            journal.submit_check_in(ctx.store, ctx.coach, score, mood, note, today=today)
    except ValidationError as exc:
        st.warning(str(exc))
        return
    st.rerun()


def render_home_tab(ctx):
    today = date.today()
    record = repositories.get_checkin_for_date(ctx.store, today)

    mood, text = mascot_for_checkin(record)
    st.markdown(mascot_html(mood, text, MASCOT_EMOJI[mood]), unsafe_allow_html=True)

    if record:
        _render_checkin_done(record)
    else:
        _render_checkin_form(ctx, today)

    cols = st.columns(2)
    with cols[0]:
        with st.container(border=True):
            st.markdown("**Talk to your coach**")
            st.caption("Vent, or ask for advice.")
            if st.button("Open coach", key="home.go_coach", on_click=_go_to, args=("Coach",)):
                st.rerun()
    with cols[1]:
        with st.container(border=True):
            st.markdown("**Today's missions**")
            st.caption("Small things that build positive energy.")
            if st.button("Open missions", key="home.go_missions", on_click=_go_to, args=("Missions",)):
                st.rerun()

    with st.container(border=True):
        st.markdown("**Your journey**")
        st.caption("See your confidence stats so far.")
        if st.button("Open journey", key="home.go_journey", on_click=_go_to, args=("Journey",)):
            st.rerun()
