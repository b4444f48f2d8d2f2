import streamlit as st

from boostme.tabs.boost_tab import render_boost_tab
from boostme.tabs.coach_tab import render_coach_tab
from boostme.tabs.home_tab import render_home_tab
from boostme.tabs.journey_tab import render_journey_tab
from boostme.tabs.profile_tab import render_profile_tab
from boostme.tabs.tools_tab import render_tools_tab


TAB_OPTIONS = [
    "Home",
    "Coach",
    "Missions",
    "Journey",
    "Tools",
    "Profile",
]


def render_router(ctx):
    if st.session_state.get("ui.active_tab") not in TAB_OPTIONS:
        st.session_state["ui.active_tab"] = TAB_OPTIONS[0]
    active = st.segmented_control(
        "Navigate",
        TAB_OPTIONS,
        key="ui.active_tab",
        label_visibility="collapsed",
    )

    if active == "Coach":
        return _render_coach(ctx)

    if active == "Missions":
        return _render_boost(ctx)

    if active == "Journey":
        return _render_journey(ctx)

    if active == "Tools":
        return _render_tools(ctx)

    if active == "Profile":
        return _render_profile(ctx)

    return _render_home(ctx)


@st.fragment
def _render_home(ctx):
    render_home_tab(ctx)


@st.fragment
def _render_coach(ctx):
    render_coach_tab(ctx)


@st.fragment
def _render_boost(ctx):
    render_boost_tab(ctx)


@st.fragment
def _render_journey(ctx):
    render_journey_tab(ctx)


@st.fragment
def _render_tools(ctx):
    render_tools_tab(ctx)


def _render_profile(ctx):
    render_profile_tab(ctx)
