import streamlit as st

from boostme.constants import CHAT_MASCOT_CLEARED, MASCOT_EMOJI
from boostme.exceptions import ChatBusyError
from boostme.mascot import chat_intro, mood_from_text
from boostme.theme import mascot_html


def _get_session(ctx):
    if "coach.session" not in st.session_state:
        st.session_state["coach.session"] = ctx.coach.new_chat_session()
        st.session_state["coach.mascot"] = chat_intro()
    return st.session_state["coach.session"]


def _clear_chat(ctx):
    session = _get_session(ctx)
    try:
        session.clear()
    except ChatBusyError:
        return
    st.session_state["coach.mascot"] = ("neutral", CHAT_MASCOT_CLEARED)


def _avatar(role):
    return "🤖" if role == "model" else "🙂"


def render_coach_tab(ctx):
    session = _get_session(ctx)

    header_cols = st.columns([5, 1])
    with header_cols[0]:
        st.markdown("<div class='section-title'>Coach</div>", unsafe_allow_html=True)
    with header_cols[1]:
        st.button("🗑️", key="coach.clear", help="Clear chat", on_click=_clear_chat, args=(ctx,), type="tertiary")

    mood, text = st.session_state.get("coach.mascot") or chat_intro()
    st.markdown(mascot_html(mood, text, MASCOT_EMOJI[mood]), unsafe_allow_html=True)

    for message in session.messages:
        with st.chat_message(message["role"], avatar=_avatar(message["role"])):
            st.markdown(message["text"])

    prompt = st.chat_input("Type a message...", disabled=session.is_typing)
    if not prompt or not prompt.strip():
        return

    st.session_state["coach.mascot"] = mood_from_text(prompt)
    with st.chat_message("user", avatar=_avatar("user")):
        st.markdown(prompt.strip())
    with st.chat_message("model", avatar=_avatar("model")):
        placeholder = st.empty()
        placeholder.markdown("…")
        try:
            reply = session.send(prompt, on_update=placeholder.markdown)
        except ChatBusyError:
            st.info("Hold on, BoostMe is still replying.")
            return
        if reply is not None:
            placeholder.markdown(reply["text"])
    st.rerun()
