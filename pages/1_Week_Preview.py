# FILE: pages/1_Week_Preview.py
import streamlit as st
from rota_core.clock import day_index
from rota_core.fairness import check_evenness, group_sizes, pairing_matrix, preview_rotation, slot_history
from rota_core.roster import filter_available, parse_participants

st.title("Week Preview")
st.write("See how the rotation moves people between groups over the coming days.")

text = st.session_state.get("employees_text", "")
if not parse_participants(text):
    st.warning("No participants entered yet. Add them on the main page first.")
    st.stop()

available = filter_available(parse_participants(text), st.session_state.get("unavailable", []))
num_groups = st.session_state.get("num_groups", 3)
days = st.slider("Days to preview", min_value=1, max_value=28, value=7)
policy = st.radio("Policy", ["shift", "shuffle"], horizontal=True)

schedules = preview_rotation(available, num_groups, day_index(), days=days, policy=policy)

st.subheader("Group per day")
st.dataframe(slot_history(schedules))

uneven = [d for d, groups in schedules.items() if not check_evenness(group_sizes(groups))]
if uneven:
    st.error(f"Unbalanced group sizes on {len(uneven)} day(s).")
else:
    st.success("Group sizes differ by at most one on every day.")

st.subheader("Shared-group counts")
st.caption("How many days each pair shares a group in this window (diagonal = days scheduled).")
st.dataframe(pairing_matrix(schedules))
