from __future__ import annotations

import logging
import os

import streamlit as st

from charts import build_depression_figure, build_humidity_figure
from constants import DEPRESSION_REGION_STYLES, HUMIDITY_REGION_STYLES
from forms import CalculatorState, render_inputs, render_risk_badge
from icing import RiskCategory, risk_table

LOG_LEVEL_ENV = "CARB_ICING_LOG_LEVEL"


def configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _render_legend(styles: dict) -> None:
    st.markdown("**Chart Legend:**")
    for label, fill, outline in styles.values():
        st.markdown(
            f"<span style='display:inline-block;width:1rem;height:1rem;background:{fill};"
            f"border:1px solid {outline};border-radius:0.2rem;margin-right:0.5rem'></span>{label}",
            unsafe_allow_html=True,
        )


def _render_charts(state: CalculatorState) -> None:
    col_left, col_right = st.columns(2)
    with col_left:
        st.subheader("CASA Chart (Dew Point Depression)")
        fig = build_depression_figure(state.temperature_c, state.dew_point_c, state.unit)
        st.plotly_chart(fig, width="stretch")
        _render_legend(DEPRESSION_REGION_STYLES)
    with col_right:
        st.subheader("Carb Ice Potential (Relative Humidity)")
        fig = build_humidity_figure(state.temperature_c, state.dew_point_c, state.unit)
        st.plotly_chart(fig, width="stretch")
        _render_legend(HUMIDITY_REGION_STYLES)


def main() -> None:
    configure_logging()
    st.set_page_config(page_title="Carburetor Icing Calculator", page_icon="✈️", layout="wide")
    st.title("Carburetor Icing Probability Chart")
    st.caption(
        "Based on Australian Government CASA chart. Enter temperature and dew point to calculate icing risk."
    )

    state = render_inputs()
    render_risk_badge(state)

    with st.expander("Risk thresholds"):
        st.dataframe(risk_table(state.unit), width="stretch", hide_index=True)
        st.caption(
            "Rules are checked top to bottom; the first match wins. "
            f"Anything outside them is '{RiskCategory.NO_ICING.label}'."
        )

    st.divider()
    _render_charts(state)


if __name__ == "__main__":
    main()
