# app.py
from datetime import datetime, timezone

import streamlit as st

from rota_core.clock import date_for_day_index, day_index
from rota_core.config import MAX_GROUPS, configure_logging, load_config, slots_for, ui_css
from rota_core.errors import InvalidConfiguration
from rota_core.export_pdf import render_pdf
from rota_core.export_xlsx import export_filename, export_to_xlsx_bytes
from rota_core.io import load_participants_csv, participants_to_csv_bytes, schedule_to_dataframe
from rota_core.roster import parse_participants, unknown_exclusions
from rota_core.scheduler import generate_schedule, move_participant
from rota_core.ui_helpers import chips, group_card
from rota_core.validation import validate_num_groups, validate_time_slots


# ---------- Page & Theme ----------
st.set_page_config(page_title="Daily Rota", layout="wide")
st.markdown(ui_css(), unsafe_allow_html=True)


# ---------- Session State ----------
def _init_state():
    ss = st.session_state
    if "config" not in ss:
        ss.config = load_config("rota.yaml")
        configure_logging(ss.config.log_level)
    ss.setdefault("employees_text", "")
    ss.setdefault("num_groups", ss.config.num_groups)
    ss.setdefault("time_slots", slots_for(ss.config, ss.config.num_groups))
    ss.setdefault("unavailable", [])
    ss.setdefault("schedule", None)       # list[Group] currently shown (after manual moves)
    ss.setdefault("schedule_day", None)

_init_state()
ss = st.session_state


def _resize_slots(n: int):
    slots = ss.time_slots[:n]
    while len(slots) < n:
        slots.append({"start": "00:00", "end": "00:00"})
    ss.time_slots = slots


# ---------- Sidebar ----------
with st.sidebar:
    st.header("⚙️ Configuration")
    uploaded = st.file_uploader("Import participants (CSV)", type=["csv"])
    if uploaded is not None and st.button("Use uploaded list", use_container_width=True):
        try:
            names = load_participants_csv(uploaded)
            ss.employees_text = "\n".join(names)
            st.success(f"Imported {len(names)} participants.")
        except (ValueError, UnicodeDecodeError) as e:
            st.error(f"Error loading CSV: {e}")

    ss.employees_text = st.text_area(
        "Employee Names/IDs",
        value=ss.employees_text,
        height=200,
        placeholder="Enter each employee on a new line...",
    )
    all_employees = parse_participants(ss.employees_text)
    if all_employees:
        st.download_button("Download participant list", data=participants_to_csv_bytes(all_employees),
                           file_name="participants.csv", use_container_width=True)

    num_groups = st.selectbox(
        "Number of Groups",
        options=list(range(1, MAX_GROUPS + 1)),
        index=min(max(ss.num_groups, 1), MAX_GROUPS) - 1,
    )
    if num_groups != ss.num_groups:
        ss.num_groups = num_groups
        _resize_slots(num_groups)

    ss.unavailable = st.multiselect(
        "Unavailable Employees",
        options=all_employees,
        default=[e for e in ss.unavailable if e in all_employees],
        placeholder="Select unavailable...",
    )

    policy = st.radio(
        "Rotation policy",
        options=["shift", "shuffle"],
        index=0 if ss.config.policy == "shift" else 1,
        horizontal=True,
        help="shift: everyone moves one group forward each day. shuffle: seeded daily shuffle.",
    )

    st.subheader("🕒 Group Time Slots")
    for i in range(ss.num_groups):
        c1, c2 = st.columns(2)
        with c1:
            ss.time_slots[i]["start"] = st.text_input(f"Group {i + 1} start", value=ss.time_slots[i]["start"], key=f"start_{i}")
        with c2:
            ss.time_slots[i]["end"] = st.text_input(f"Group {i + 1} end", value=ss.time_slots[i]["end"], key=f"end_{i}")
    slot_problems = validate_time_slots(ss.time_slots, ss.num_groups)
    for msg in slot_problems:
        st.warning(msg)

    generate = st.button("Generate Daily Rotation", type="primary", use_container_width=True)


# ---------- Generate ----------
if generate:
    if not all_employees:
        st.error("Please enter at least one employee.")
    elif slot_problems:
        st.error("Please fix the group time slots: " + " ".join(slot_problems))
    else:
        try:
            n = validate_num_groups(ss.num_groups)
            today = day_index(datetime.now(timezone.utc))
            result = generate_schedule(all_employees, n, ss.unavailable, day_index=today, policy=policy)
            ss.schedule = result.groups
            ss.schedule_day = result.day_index
            st.success(f"Successfully scheduled {result.scheduled_count} employees into {n} groups.")
            missing = unknown_exclusions(all_employees, ss.unavailable)
            if missing:
                st.warning(f"Not in the roster: {', '.join(missing)}")
        except InvalidConfiguration as e:
            st.error(f"Generation failed: {e}")


# ---------- Schedule board ----------
st.markdown("<h3>🗓️ Generated Schedule</h3>", unsafe_allow_html=True)
if not ss.schedule:
    st.info("Your schedule will appear here. Fill in the configuration on the left and click 'Generate Daily Rotation'.")
else:
    day = date_for_day_index(ss.schedule_day)
    st.caption(f"Rotation for {day.isoformat()} (day {ss.schedule_day}). You can manually move employees if needed.")

    d1, d2, d3 = st.columns(3)
    with d1:
        st.download_button(
            "Export to Excel",
            data=export_to_xlsx_bytes(ss.schedule, ss.time_slots),
            file_name=export_filename(ss.config.export_prefix, day),
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            use_container_width=True,
        )
    with d2:
        st.download_button(
            "Download printable PDF",
            data=render_pdf(ss.schedule, ss.time_slots, title=f"Daily Rotation {day.isoformat()}"),
            file_name=f"{ss.config.export_prefix}_{day.isoformat()}.pdf",
            mime="application/pdf",
            use_container_width=True,
        )
    with d3:
        st.download_button(
            "Download CSV",
            data=schedule_to_dataframe(ss.schedule, ss.time_slots).to_csv(index=False),
            file_name=f"{ss.config.export_prefix}_{day.isoformat()}.csv",
            mime="text/csv",
            use_container_width=True,
        )

    group_ids = [g.id for g in ss.schedule]
    cols = st.columns(min(3, len(ss.schedule)))
    for idx, group in enumerate(ss.schedule):
        slot = ss.time_slots[group.id - 1] if group.id - 1 < len(ss.time_slots) else {"start": "N/A", "end": "N/A"}
        with cols[idx % len(cols)]:
            st.markdown(group_card(group.id, slot), unsafe_allow_html=True)
            if not group.employees:
                st.caption("No employees assigned.")
            for emp in sorted(group.employees):
                target = st.selectbox(
                    emp,
                    options=group_ids,
                    index=group_ids.index(group.id),
                    format_func=lambda gid: f"Group {gid}",
                    key=f"move_{group.id}_{emp}",
                )
                if target != group.id:
                    ss.schedule = move_participant(ss.schedule, emp, group.id, target)
                    st.toast(f"{emp} moved from Group {group.id} to Group {target}.")
                    st.rerun()


# ---------- Unavailable ----------
st.markdown("<h3>🚫 Unavailable Employees</h3>", unsafe_allow_html=True)
if ss.unavailable:
    st.caption("These employees are excluded from the current rotation.")
    st.markdown(chips(ss.unavailable), unsafe_allow_html=True)
else:
    st.caption("No employees are marked as unavailable.")
