"""FastAPI app — thin wrappers around the shared plots and query layers."""

from __future__ import annotations

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from api import plots, queries
from api.models import ChartPayload, MetricOption, SeriesPoint

app = FastAPI(
    title="State Housing Permits API",
    description=(
        "Annual residential building permits by U.S. state: buildings, units, and "
        "property value for 1-unit, 2-unit, 3-4 unit, and 5+ unit structures. "
        "Chart endpoints return Vega-Lite specs ready for any renderer."
    ),
    version="0.1.0",
)
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


@app.get("/health")
def health():
    """Debug endpoint — shows data path and file availability."""
    from pathlib import Path

    data = Path(queries._DATA)
    return {"data_path": str(data), "exists": data.exists()}


@app.get("/")
def root():
    return {
        "message": "State Housing Permits API",
        "docs": "/docs",
        "endpoints": [
            "/states",
            "/metrics",
            "/fields",
            "/chart-spec",
            "/states/{state_name}/chart",
            "/states/{state_name}/series",
        ],
    }


@app.get("/states", response_model=list[str])
def states():
    """State names available in the dataset."""
    return queries.get_state_options()


@app.get("/metrics", response_model=list[MetricOption])
def metrics():
    """Selectable chart metrics."""
    return [{"value": v, "name": n} for v, n in plots.METRIC_OPTIONS.items()]


@app.get("/fields", response_model=list[str])
def fields(
    metric: list[str] | None = Query(None, description="Metrics to include (default: all)"),
    suffix: list[str] | None = Query(None, description="Name variants, e.g. '_reported' or ''"),
):
    """Composite field names, size category outermost."""
    return list(plots.fields_generator(metric or plots.METRICS, suffix or plots.SUFFIXES))


@app.get("/chart-spec")
def chart_spec(
    metric: str = Query(plots.DEFAULT_METRIC, description="units, bldgs, or value"),
    width: float = Query(1000, ge=0, description="Viewport width in px"),
    height: float | None = Query(None, ge=0, description="Viewport height (ignored)"),
):
    """Vega-Lite bar chart spec; rows are bound by the caller under `table`."""
    return plots.state_chart_spec(metric, width, height)


@app.get("/states/{state_name}/chart", response_model=ChartPayload)
def state_chart(
    state_name: str,
    metric: str = Query(plots.DEFAULT_METRIC),
    width: float = Query(1000, ge=0),
    height: float | None = Query(None, ge=0),
):
    """Spec plus the state's rows, ready to hand to a Vega-Lite renderer."""
    rows = queries.get_state_rows(state_name)
    return {
        "spec": plots.state_chart_spec(metric, width, height),
        "data": plots.chart_data(rows),
    }


@app.get("/states/{state_name}/series", response_model=list[SeriesPoint])
def state_series(
    state_name: str,
    metric: str = Query(plots.DEFAULT_METRIC),
):
    """Long-format (year, key, label, value) points for one state and metric."""
    rows = queries.get_state_rows(state_name)
    return plots.fold_rows(rows, plots.ALL_FIELDS, plots.filter_fields_for(metric))
