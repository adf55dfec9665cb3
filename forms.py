from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import streamlit as st

from constants import UNKNOWN_RISK_COLOR
from icing import (
    RiskCategory,
    Unit,
    classify_icing_risk,
    delta_to_display,
    dew_point_depression,
    from_celsius,
    to_celsius,
)
from utils.humidity import relative_humidity
from utils.numbers import format_number, parse_float

logger = logging.getLogger(__name__)

# Session keys
TEMP_C = "temperature_c"
DEW_C = "dew_point_c"
TEMP_TEXT = "temperature_text"
DEW_TEXT = "dew_point_text"
UNIT = "unit"


def clamp_dew_point(temperature_c: Optional[float], dew_point_c: Optional[float]) -> Optional[float]:
    if temperature_c is None or dew_point_c is None:
        return dew_point_c
    return min(dew_point_c, temperature_c)


@dataclass
class CalculatorState:
    """Inputs held by the page, always in °C. Everything else is derived."""

    temperature_c: Optional[float] = None
    dew_point_c: Optional[float] = None
    unit: Unit = Unit.CELSIUS

    @property
    def effective_dew_point_c(self) -> Optional[float]:
        return clamp_dew_point(self.temperature_c, self.dew_point_c)

    @property
    def dew_point_clamped(self) -> bool:
        return self.effective_dew_point_c != self.dew_point_c

    @property
    def risk(self) -> Optional[RiskCategory]:
        return classify_icing_risk(self.temperature_c, self.effective_dew_point_c)

    @property
    def depression_c(self) -> Optional[float]:
        if self.temperature_c is None or self.effective_dew_point_c is None:
            return None
        return dew_point_depression(self.temperature_c, self.effective_dew_point_c)

    @property
    def relative_humidity(self) -> Optional[float]:
        if self.temperature_c is None or self.effective_dew_point_c is None:
            return None
        return relative_humidity(self.temperature_c, self.effective_dew_point_c)

    def display(self, value_c: Optional[float]) -> Optional[float]:
        return None if value_c is None else from_celsius(value_c, self.unit)


def apply_text_input(previous_c: Optional[float], text: str, unit: Unit) -> Optional[float]:
    """
    New canonical °C value after the user edits a field. Clearing the field
    clears the value; text that does not parse leaves the previous value.
    """
    if not text or not text.strip():
        return None
    value = parse_float(text)
    if value is None:
        logger.info("Ignoring unparseable input %r", text)
        return previous_c
    return to_celsius(value, unit)


def _on_temperature_change() -> None:
    st.session_state[TEMP_C] = apply_text_input(
        st.session_state.get(TEMP_C), st.session_state[TEMP_TEXT], st.session_state[UNIT]
    )


def _on_dew_point_change() -> None:
    st.session_state[DEW_C] = apply_text_input(
        st.session_state.get(DEW_C), st.session_state[DEW_TEXT], st.session_state[UNIT]
    )


def _on_unit_change() -> None:
    unit = st.session_state[UNIT]
    for value_key, text_key in ((TEMP_C, TEMP_TEXT), (DEW_C, DEW_TEXT)):
        value_c = st.session_state.get(value_key)
        if value_c is not None:
            st.session_state[text_key] = format_number(from_celsius(value_c, unit))


def _init_session() -> None:
    st.session_state.setdefault(TEMP_C, None)
    st.session_state.setdefault(DEW_C, None)
    st.session_state.setdefault(TEMP_TEXT, "")
    st.session_state.setdefault(DEW_TEXT, "")
    st.session_state.setdefault(UNIT, Unit.CELSIUS)


def render_inputs() -> CalculatorState:
    _init_session()
    unit: Unit = st.session_state[UNIT]
    col1, col2 = st.columns(2)
    with col1:
        st.text_input(
            f"Temperature ({unit.symbol})",
            key=TEMP_TEXT,
            placeholder=f"Enter temperature in {unit.display_name}",
            on_change=_on_temperature_change,
        )
        st.selectbox(
            "Temperature Unit",
            options=list(Unit),
            format_func=lambda u: f"{u.display_name} ({u.symbol})",
            key=UNIT,
            on_change=_on_unit_change,
        )
    with col2:
        st.text_input(
            f"Dew Point ({unit.symbol})",
            key=DEW_TEXT,
            placeholder=f"Enter dew point in {unit.display_name}",
            on_change=_on_dew_point_change,
        )
    state = CalculatorState(
        temperature_c=st.session_state[TEMP_C],
        dew_point_c=st.session_state[DEW_C],
        unit=st.session_state[UNIT],
    )
    if state.dew_point_clamped:
        logger.info("Dew point %.2f clamped to temperature %.2f", state.dew_point_c, state.temperature_c)
    return state


def render_risk_badge(state: CalculatorState) -> None:
    risk = state.risk
    label = risk.label if risk is not None else "Enter temperature and dew point"
    color = risk.color if risk is not None else UNKNOWN_RISK_COLOR
    st.markdown(
        f"**Icing Risk:** <span style='background-color:{color};color:white;"
        f"padding:0.25rem 0.75rem;border-radius:0.375rem'>{label}</span>",
        unsafe_allow_html=True,
    )
    if state.dew_point_clamped:
        st.warning("Dew point cannot exceed temperature; it was capped at the temperature for the risk estimate.")
    depression = state.depression_c
    rh = state.relative_humidity
    if depression is not None and rh is not None:
        c1, c2 = st.columns(2)
        c1.metric("Dew point depression", f"{delta_to_display(depression, state.unit):.1f}{state.unit.symbol}")
        c2.metric("Relative humidity", f"{rh:.0f}%")
