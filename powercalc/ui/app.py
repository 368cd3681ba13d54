"""
Power Needs Calculator - Streamlit UI
=====================================

Single page calculator:
1. Quick add common appliances
2. Add custom appliance
3. Added appliances (with removal)
4. System parameters
5. Calculate and store the recommendation
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd
import plotly.express as px
import streamlit as st

# Allow `streamlit run powercalc/ui/app.py` from a source checkout
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from powercalc.config import Settings
from powercalc.errors import PersistenceError
from powercalc.notify import GENERIC_FAILURE, Notification
from powercalc.session import CalculatorSession
from powercalc.sizing.catalog import COMMON_APPLIANCES
from powercalc.sizing.summary import appliance_rows, describe_appliance
from powercalc.storage.store import StatsStore

SESSION_KEY = "powercalc_session"
NOTICES_KEY = "powercalc_notices"

FORM_DEFAULTS = {"new_name": "", "new_watts": 0.0, "new_hours": 1.0}
PARAM_DEFAULTS = {"sun_hours": 5.0, "backup_days": 1.0, "efficiency": 0.85}


st.set_page_config(
    page_title="Power Needs Calculator",
    page_icon="⚡",
    layout="centered",
)


class StreamlitNotifier:
    """Queues notifications in session state until the page renders them."""

    def _queue(self) -> List[Notification]:
        return st.session_state.setdefault(NOTICES_KEY, [])

    def success(self, title: str, details: Sequence[str]) -> None:
        self._queue().append(Notification("success", title, tuple(details)))

    def error(self, message: str) -> None:
        self._queue().append(Notification("error", message))

    def validation_error(self, message: str, field: Optional[str] = None) -> None:
        self._queue().append(Notification("validation", message, field=field))


@st.cache_resource
def get_store(database_url: str, echo: bool) -> StatsStore:
    return StatsStore.from_url(database_url, echo=echo)


def get_session() -> CalculatorSession:
    if SESSION_KEY not in st.session_state:
        settings = Settings.from_env()
        logging.basicConfig(level=settings.log_level)
        try:
            store = get_store(settings.database_url, settings.echo_sql)
        except PersistenceError:
            logging.getLogger(__name__).exception("Could not open calculation history")
            st.error(GENERIC_FAILURE)
            st.stop()
        st.session_state[SESSION_KEY] = CalculatorSession(store, StreamlitNotifier())
    return st.session_state[SESSION_KEY]


def render_notices():
    notices: List[Notification] = st.session_state.get(NOTICES_KEY, [])
    for n in notices:
        if n.kind == "success":
            st.toast(n.message, icon="⚡")
            st.success("\n".join([f"**{n.message}**", *(f"- {d}" for d in n.details[1:])]))
        elif n.kind == "validation":
            st.warning(n.message)
        else:
            st.error(n.message)
    st.session_state[NOTICES_KEY] = []


# --- callbacks (run before the page renders) ---

def _quick_add(index: int):
    get_session().quick_add(COMMON_APPLIANCES[index])


def _remove(index: int):
    get_session().remove_appliance(index)


def _submit_custom():
    ok = get_session().add_appliance(
        st.session_state.get("new_name", ""),
        st.session_state.get("new_watts", 0.0),
        st.session_state.get("new_hours", 1.0),
    )
    if ok:
        st.session_state.update(FORM_DEFAULTS)


def _calculate():
    session = get_session()
    if session.set_parameters(*(st.session_state.get(k) for k in PARAM_DEFAULTS)):
        session.calculate_and_save()


def _start_over():
    get_session().reset()
    st.session_state.update(FORM_DEFAULTS)
    st.session_state.update(PARAM_DEFAULTS)


# --- sections ---

def section_quick_add():
    st.subheader("⚡ Quick Add Common Appliances")
    cols = st.columns(4)
    for i, entry in enumerate(COMMON_APPLIANCES):
        with cols[i % 4]:
            st.button(
                f"{entry.name}\n\n{entry.watts:g}W",
                key=f"quick_{i}",
                on_click=_quick_add,
                args=(i,),
                use_container_width=True,
            )


def section_custom_form():
    st.subheader("⚡ Add Custom Appliance")
    for key, value in FORM_DEFAULTS.items():
        st.session_state.setdefault(key, value)
    with st.form("custom_appliance", clear_on_submit=False):
        col1, col2, col3 = st.columns(3)
        with col1:
            st.text_input("Appliance name", key="new_name", placeholder="Appliance name")
        with col2:
            st.number_input("Power (watts)", min_value=0.0, step=1.0, key="new_watts")
        with col3:
            st.number_input("Hours per day", min_value=0.0, max_value=24.0, step=0.5, key="new_hours")
        st.form_submit_button("Add Appliance", on_click=_submit_custom, use_container_width=True)


def section_appliances(session: CalculatorSession):
    appliances = session.ledger.list()
    if not appliances:
        return

    st.subheader("Added Appliances")
    for i, app in enumerate(appliances):
        col1, col2 = st.columns([6, 1])
        with col1:
            st.markdown(describe_appliance(app))
        with col2:
            st.button("✕", key=f"remove_{i}", on_click=_remove, args=(i,))

    df = pd.DataFrame(appliance_rows(appliances))
    st.dataframe(df, hide_index=True, use_container_width=True)

    fig = px.bar(df, x="Appliance", y="Wh/day", title="Daily Energy by Appliance")
    fig.update_layout(height=320, margin=dict(l=10, r=10, t=40, b=10))
    st.plotly_chart(fig, use_container_width=True)


def section_parameters():
    st.subheader("☀️ System Parameters")
    for key, value in PARAM_DEFAULTS.items():
        st.session_state.setdefault(key, value)
    col1, col2, col3 = st.columns(3)
    with col1:
        st.number_input("Sun Hours per Day", min_value=0.0, step=0.5, key="sun_hours")
    with col2:
        st.number_input("Backup Days", min_value=0.0, step=0.5, key="backup_days")
    with col3:
        st.number_input(
            "System Efficiency", min_value=0.0, max_value=1.0, step=0.01, key="efficiency"
        )


def section_result(session: CalculatorSession):
    result = session.last_result
    if result is None:
        return

    st.subheader("📊 Recommended System Specifications")
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Solar Panels", f"{result.solar_size_kw:.2f} kW")
    with col2:
        st.metric("Battery Bank", f"{result.battery_size_kwh:.2f} kWh")
    with col3:
        st.metric("Inverter", f"{result.inverter_size_kw:.2f} kW")
    caption = f"Daily usage {result.daily_usage_wh:,.0f} Wh"
    if session.last_saved is not None:
        caption += f" · saved as record #{session.last_saved.id}"
    st.caption(caption)


def main():
    session = get_session()

    st.title("🧮 Power Needs Calculator")
    render_notices()

    section_quick_add()
    section_custom_form()
    section_appliances(session)
    section_parameters()

    st.divider()
    col1, col2 = st.columns([3, 1])
    with col1:
        st.button(
            "Calculating..." if session.busy else "Calculate Power Needs",
            key="calculate",
            type="primary",
            on_click=_calculate,
            disabled=not session.can_calculate,
            use_container_width=True,
        )
    with col2:
        st.button("Start over", key="start_over", on_click=_start_over, use_container_width=True)

    section_result(session)


main()
