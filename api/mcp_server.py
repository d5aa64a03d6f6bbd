"""MCP server for state housing permits data.

Exposes 5 tools for per-state permit series and Vega-Lite chart specs.
Uses FastMCP (v2) with stdio transport.
"""

from __future__ import annotations

import sys

from fastmcp import FastMCP

from api import plots, queries

mcp = FastMCP(
    "State Housing Permits",
    instructions=(
        "Annual residential building permits by U.S. state. Each year has buildings "
        "(bldgs), units, and property value (USD) for 1-unit, 2-unit, 3-4 unit, and "
        "5+ unit structures. Call get_state_options first to see valid state names."
    ),
)


@mcp.tool()
def get_state_options() -> list[str]:
    """Get the state names available in the dataset."""
    return queries.get_state_options()


@mcp.tool()
def get_metric_options() -> dict:
    """Get selectable metrics: units, bldgs, value, mapped to display names."""
    return dict(plots.METRIC_OPTIONS)


@mcp.tool()
def get_state_rows(state_name: str) -> list[dict]:
    """Get the wide-format yearly rows for one state.

    Each row has year plus one column per field, e.g. 1_unit_units,
    5_plus_units_value_reported, and total_units.
    """
    return queries.get_state_rows(state_name)


@mcp.tool()
def get_state_series(state_name: str, metric: str = plots.DEFAULT_METRIC) -> list[dict]:
    """Get long-format permit series for one state and metric.

    Returns year, key, key_pretty_printed, value. An unknown metric returns [].
    """
    rows = queries.get_state_rows(state_name)
    return plots.fold_rows(rows, plots.ALL_FIELDS, plots.filter_fields_for(metric))


@mcp.tool()
def get_bar_chart_spec(metric: str = plots.DEFAULT_METRIC, width: float = 1000) -> dict:
    """Get a Vega-Lite bar chart spec for a metric.

    Bind state rows under the dataset name "table" to render it.
    """
    return plots.state_chart_spec(metric, width)


def main():
    print(f"Serving MCP tools over stdio (data: {queries._DATA})", file=sys.stderr)
    mcp.run()


if __name__ == "__main__":
    main()
