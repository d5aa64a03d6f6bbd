"""State Housing Permits — per-state permit chart."""

from __future__ import annotations

import streamlit as st

from api import plots, queries

st.set_page_config(
    page_title="State Housing Permits",
    page_icon="🏗️",
    layout="wide",
)

CHART_WIDTH = 1000  # viewport px handed to the spec builder


# ── Helpers ──────────────────────────────────────────────────


@st.cache_data(ttl=3600)
def _state_options() -> list[str]:
    return queries.get_state_options()


@st.cache_data(ttl=3600)
def _state_rows(state_name: str) -> list[dict]:
    return queries.get_state_rows(state_name)


# ── Controls ─────────────────────────────────────────────────

all_states = _state_options()

col_state, col_title, col_metric = st.columns(3)

with col_state:
    state_name = st.selectbox(
        "State",
        options=all_states,
        index=0 if all_states else None,
        placeholder="Change state...",
    )

with col_metric:
    metric = st.selectbox(
        "Metric",
        options=list(plots.METRIC_OPTIONS),
        index=list(plots.METRIC_OPTIONS).index(plots.DEFAULT_METRIC),
        format_func=plots.METRIC_OPTIONS.get,
    )

with col_title:
    st.title(state_name or "")

# ── Chart ────────────────────────────────────────────────────

if state_name:
    rows = _state_rows(state_name)
    spec = plots.state_chart_spec(metric, CHART_WIDTH)
    st.vega_lite_chart(
        spec={**spec, "datasets": plots.chart_data(rows)},
    )
else:
    st.info("No states found in the dataset.")

st.caption("Source: U.S. Census Bureau, Building Permits Survey")
