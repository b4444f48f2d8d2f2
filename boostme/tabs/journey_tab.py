import streamlit as st

from boostme.data import repositories
from boostme.metrics import compute_stats, confidence_frame
from boostme.visualizations import confidence_chart


def render_journey_tab(ctx):
    logs = repositories.list_checkins(ctx.store)
    stats = compute_stats(logs, repositories.get_total_missions(ctx.store))

    st.markdown("<div class='section-title'>Your Journey</div>", unsafe_allow_html=True)

    cols = st.columns(3)
    cols[0].metric("Check-ins", f"{stats['totalCheckIns']} days")
    cols[1].metric("Avg confidence", f"{stats['avgConfidence']} / 10")
    cols[2].metric("Missions done", stats["totalMissionsCompleted"])

    frame = confidence_frame(logs)
    if frame.empty:
        st.caption("No check-ins yet. Your chart will appear after the first one.")
    else:
        st.plotly_chart(confidence_chart(frame), use_container_width=True)

    st.markdown("<div class='small-label' style='margin-top:8px;'>Recent check-ins</div>", unsafe_allow_html=True)
    for record in logs[:14]:
        st.markdown(f"**{record.get('date')}** • {record.get('score')}/10 • {record.get('mood') or '-'}")
        if record.get("note"):
            st.caption(record["note"])
        st.divider()

    st.caption("Thanks for taking the first step in caring for yourself. Keep going!")
