from datetime import date

import streamlit as st

from boostme.metrics import mission_progress
from boostme.services import journal


def _toggle(ctx, mission_id, today):
    journal.toggle_mission(ctx.store, mission_id, today=today)


def render_boost_tab(ctx):
    today = date.today()
    missions = journal.load_today_missions(ctx.store, today)
    completed, total, percent = mission_progress(missions)

    title_cols = st.columns([4, 1])
    with title_cols[0]:
        st.markdown("<div class='section-title'>Boost Missions</div>", unsafe_allow_html=True)
    with title_cols[1]:
        st.caption(f"Done {completed}/{total}")
    st.progress(int(percent))

    if st.button("✨ Suggest missions for my profile", key="boost.suggest", use_container_width=True):
        with st.spinner("Thinking up missions..."):
            journal.regenerate_missions(ctx.store, ctx.coach, today=today)
        st.rerun()

    if not missions:
        st.caption("No missions yet. Tap the button above to get started!")
        return

    for mission in missions:
        mission_id = mission.get("id")
        st.checkbox(
            mission.get("text") or "",
            value=bool(mission.get("completed")),
            key=f"boost.mission.{today.isoformat()}.{mission_id}",
            on_change=_toggle,
            args=(ctx, mission_id, today),
        )
