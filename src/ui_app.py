import asyncio
import logging

import streamlit as st
from dotenv import load_dotenv

from shared.form_controller import LeaveFormController, LeaveFormFields
from shared.form_views import (
    EMPTY_HISTORY_MESSAGE,
    EMPTY_HISTORY_TITLE,
    HEADER_TITLE,
    HISTORY_TITLE,
    NAV_FORM_LABEL,
    NAV_HISTORY_LABEL,
    StatusView,
    describe_status,
    history_card,
)
from shared.history_store import SessionHistory
from shared.model_schema import LeaveType, SubmissionStatus
from shared.settings import settings
from shared.sheets_client import SheetsClient
from shared.view_router import View, ViewRouter

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

st.set_page_config(page_title=HEADER_TITLE, page_icon="🗓️", layout="centered")
st.title(HEADER_TITLE)

FIELD_KEYS = ("employee_name", "employee_id", "leave_type", "start_date", "end_date", "reason")
LEAVE_TYPES = list(LeaveType)

# ---------------------------
# Session init
# ---------------------------
if "history" not in st.session_state:
    st.session_state.history = SessionHistory()

if "router" not in st.session_state:
    st.session_state.router = ViewRouter()

if "controller" not in st.session_state:
    st.session_state.controller = LeaveFormController(
        client=SheetsClient.from_settings(settings),
        history=st.session_state.history,
        router=st.session_state.router,
        success_delay=settings.success_redirect_seconds,
    )

controller: LeaveFormController = st.session_state.controller
router: ViewRouter = st.session_state.router
history: SessionHistory = st.session_state.history


# ---------------------------
# Status views (no input widgets)
# ---------------------------
def render_status(view: StatusView) -> None:
    if view.status is SubmissionStatus.SUBMITTING:
        st.button(view.submit_label, disabled=True, use_container_width=True, key="submit_in_flight")
        st.progress(0.5, text=view.submit_label)
    elif view.status is SubmissionStatus.SUCCESS:
        st.success(f"**{view.title}**\n\n{view.message}", icon="✅")
    elif view.status is SubmissionStatus.ERROR:
        st.error(f"**{view.title}**\n\n{view.message}", icon="⚠️")


def redraw_into(slot):
    def _redraw(ctrl: LeaveFormController) -> None:
        view = describe_status(ctrl.status, ctrl.error)
        # idle and error are drawn by the rerun that follows submit()
        if view.status in (SubmissionStatus.SUBMITTING, SubmissionStatus.SUCCESS):
            with slot.container():
                render_status(view)
    return _redraw


def clear_form_widgets() -> None:
    for key in FIELD_KEYS:
        st.session_state.pop(key, None)


# ---------------------------
# Form view
# ---------------------------
def render_fields(ctrl: LeaveFormController, view: StatusView) -> bool:
    fields = ctrl.fields

    employee_name = st.text_input("Employee Name", value=fields.employee_name, placeholder="John Doe", key="employee_name")
    employee_id = st.text_input("Employee ID", value=fields.employee_id, placeholder="EMP12345", key="employee_id")
    leave_type = st.selectbox(
        "Leave Type",
        LEAVE_TYPES,
        index=LEAVE_TYPES.index(fields.leave_type),
        format_func=lambda t: t.value,
        key="leave_type",
    )

    # the error view drops the date widgets' state; restore from the controller
    min_start = ctrl.min_start_date()
    if fields.start_date is not None and fields.start_date < min_start:
        min_start = fields.start_date
    kept_end = fields.end_date

    col1, col2 = st.columns(2)
    with col1:
        start_date = st.date_input(
            "Start Date",
            value=fields.start_date,
            min_value=min_start,
            key="start_date",
        )
    fields.start_date = start_date
    min_end = ctrl.min_end_date()
    ends = [d for d in (st.session_state.get("end_date"), kept_end) if d is not None]
    if min_end is not None and any(d < min_end for d in ends):
        # leave it to the date-order check at submit time
        min_end = None
    with col2:
        end_date = st.date_input(
            "End Date",
            value=kept_end,
            min_value=min_end,
            disabled=not ctrl.end_date_enabled,
            key="end_date",
        )

    reason = st.text_area("Reason for Leave", value=fields.reason, placeholder="e.g., Family vacation", height=120, key="reason")

    ctrl.fields = LeaveFormFields(
        employee_name=employee_name,
        employee_id=employee_id,
        leave_type=leave_type,
        start_date=start_date,
        end_date=end_date,
        reason=reason,
    )

    if ctrl.form_error:
        st.error(ctrl.form_error)

    return st.button(
        view.submit_label,
        type="primary",
        disabled=view.submit_disabled,
        use_container_width=True,
        key="submit",
    )


def render_form_view(ctrl: LeaveFormController) -> None:
    view = describe_status(ctrl.status, ctrl.error)

    if view.status is SubmissionStatus.ERROR:
        render_status(view)
        if st.button(view.retry_label, type="primary", use_container_width=True):
            ctrl.reset()
            st.rerun()
        return

    if not view.show_fields or view.show_progress:
        # a previous run was interrupted mid-submission
        render_status(view)
        return

    body = st.empty()
    with body.container():
        submitted = render_fields(ctrl, view)

    if not submitted:
        return

    redraw = redraw_into(body)
    ctrl.subscribe(redraw)
    try:
        # Streamlit runs sync; one event loop per submission
        ok = asyncio.run(ctrl.submit())
    finally:
        ctrl.unsubscribe(redraw)

    if ok:
        clear_form_widgets()
    st.rerun()


# ---------------------------
# History view
# ---------------------------
def render_history(entries: SessionHistory) -> None:
    if entries.is_empty():
        st.subheader(EMPTY_HISTORY_TITLE)
        st.caption(EMPTY_HISTORY_MESSAGE)
        return

    st.header(HISTORY_TITLE)
    for req in entries:
        card = history_card(req)
        with st.container(border=True):
            left, right = st.columns([4, 1])
            with left:
                st.markdown(f"**{card.leave_type}**")
                st.caption(card.employee)
            with right:
                st.markdown(f":green[{card.badge}]")
            st.markdown(f"**Dates:** {card.dates}")
            st.markdown(f"**Reason:** {card.reason}")
            st.caption(card.submitted_on)


# ---------------------------
# Page
# ---------------------------
if router.current is View.FORM:
    render_form_view(controller)
else:
    render_history(history)

st.divider()
nav_form, nav_history = st.columns(2)
with nav_form:
    if st.button(
        NAV_FORM_LABEL,
        type="primary" if router.current is View.FORM else "secondary",
        use_container_width=True,
        disabled=controller.is_submitting,
    ):
        router.show_form()
        st.rerun()
with nav_history:
    if st.button(
        NAV_HISTORY_LABEL,
        type="primary" if router.current is View.HISTORY else "secondary",
        use_container_width=True,
        disabled=controller.is_submitting,
    ):
        router.show_history()
        st.rerun()
