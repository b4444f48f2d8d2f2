import streamlit as st

from boostme.constants import MOTIVATION_MOODS
from boostme.exceptions import CoachError


def _fetch_motivation(ctx, mood=None):
    mood = mood or st.session_state.get("tools.motivation_mood") or MOTIVATION_MOODS[0]
    st.session_state["tools.motivation"] = ctx.coach.motivation(mood)


def _render_motivation(ctx):
    st.markdown("**Daily boost**")
    mood = st.segmented_control(
        "I'm feeling",
        MOTIVATION_MOODS,
        format_func=str.capitalize,
        key="tools.motivation_mood",
        default=MOTIVATION_MOODS[0],
        on_change=_fetch_motivation,
        args=(ctx,),
    )
    if "tools.motivation" not in st.session_state or st.button("Get new boost", key="tools.motivation_refresh"):
        with st.spinner("Finding the right words..."):
            _fetch_motivation(ctx, mood)
    st.markdown(f"> {st.session_state.get('tools.motivation', '')}")


def _render_task_breaker(ctx):
    st.markdown("**Task breaker**")
    with st.form("tools.task_form"):
        task = st.text_input(
            "What do you need to get done?",
            key="tools.task",
            placeholder="e.g., Plan a marketing campaign, Clean the garage...",
        )
        submitted = st.form_submit_button("Break it down")

    if submitted and task.strip():
        try:
            with st.spinner("Breaking it down..."):
                st.session_state["tools.steps"] = ctx.coach.break_down_task(task.strip())
        except CoachError:
            st.session_state["tools.steps"] = []
            st.error("Failed to break down the task. Try being more specific.")

    steps = st.session_state.get("tools.steps") or []
    if not steps:
        return
    st.caption(f"{len(steps)} steps")
    for index, step in enumerate(steps, start=1):
        with st.container(border=True):
            st.markdown(f"**{index}. {step['title']}** · {step['duration']}")
            st.caption(step["description"])
    if st.button("Start over", key="tools.reset_steps"):
        st.session_state["tools.steps"] = []
        st.rerun()


def render_tools_tab(ctx):
    st.markdown("<div class='section-title'>Tools</div>", unsafe_allow_html=True)
    with st.container(border=True):
        _render_motivation(ctx)
    with st.container(border=True):
        _render_task_breaker(ctx)
