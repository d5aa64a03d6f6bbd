"""Vega-Lite bar chart spec for per-state permit time series.

Shared by the FastAPI app, the MCP server and the Streamlit page.
Everything here is pure: no I/O, no shared mutable state.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

SIZE_CATEGORIES: tuple[str, ...] = ("1_unit", "2_units", "3_to_4_units", "5_plus_units")
METRICS: tuple[str, ...] = ("bldgs", "units", "value")
SUFFIXES: tuple[str, ...] = ("_reported", "")

SIZE_LABELS: dict[str, str] = {
    "1_unit": "1 unit",
    "2_units": "2 units",
    "3_to_4_units": "3-4 units",
    "5_plus_units": "5+ units",
}

METRIC_OPTIONS: dict[str, str] = {
    "units": "Units",
    "bldgs": "Buildings",
    "value": "Property value",
}
DEFAULT_METRIC = "units"

LABEL_FALLBACK = "Error"
DATA_NAME = "table"
MAX_PLOT_WIDTH = 936


# ── Field names ──


def fields_generator(
    metrics: Iterable[str] = METRICS,
    suffixes: Iterable[str] = SUFFIXES,
) -> Iterator[str]:
    """Yield `<size>_<metric><suffix>` for every combination, size outermost."""
    metrics = tuple(metrics)
    suffixes = tuple(suffixes)
    for size in SIZE_CATEGORIES:
        for metric in metrics:
            for suffix in suffixes:
                yield f"{size}_{metric}{suffix}"


ALL_FIELDS: tuple[str, ...] = tuple(fields_generator())

KEY_MAPPING: Mapping[str, str] = MappingProxyType({
    f"{size}_{metric}": label
    for metric in ("units", "bldgs", "value")
    for size, label in SIZE_LABELS.items()
})

UNITS_FIELDS: tuple[str, ...] = tuple(fields_generator(["units"], [""]))


def label_for(key: str) -> str:
    """Display label for a canonical field name, "Error" when unmapped."""
    return KEY_MAPPING.get(key, LABEL_FALLBACK)


def filter_fields_for(metric: str) -> list[str]:
    """Canonical field names for one metric. Unknown metrics select nothing."""
    if metric not in METRICS:
        return []
    return list(fields_generator([metric], [""]))


# ── Chart spec ──


def make_bar_chart_spec(
    fields: Iterable[str],
    filter_fields: Iterable[str],
    width: float,
    height: float | None = None,
) -> dict:
    """Build a stacked-bar Vega-Lite spec over folded permit fields.

    The chart is sized from `width` alone: capped at 936px, with a 4:3
    aspect ratio. `height` is accepted for symmetry with the renderer's
    container dimensions and is ignored.

    Rows are supplied by the renderer under the `table` dataset name. They
    are folded over `fields`, filtered down to `filter_fields`, and each
    folded key is labelled through KEY_MAPPING (falling back to "Error").
    """
    plot_width = min(width * 0.95, MAX_PLOT_WIDTH)
    continuous_band_size = plot_width * 10 / MAX_PLOT_WIDTH

    label_rows = [{"key": key, "label": label} for key, label in KEY_MAPPING.items()]

    return {
        "width": plot_width,
        "height": 0.75 * plot_width,
        "autosize": {
            "type": "fit",
            "contains": "padding",
        },
        "encoding": {
            "x": {"field": "year", "type": "temporal", "axis": {"title": "Year"}},
            "y": {"field": "value", "type": "quantitative", "axis": {"title": "Units permitted"}},
            "color": {"field": "key", "type": "nominal", "axis": {"title": "Unit count"}},
        },
        "scales": [
            {
                "name": "legend_labels",
                "type": "nominal",
                "domain": list(UNITS_FIELDS),
                "range": [KEY_MAPPING[f] for f in UNITS_FIELDS],
            }
        ],
        "transform": [
            {"fold": list(fields)},
            {
                "filter": {
                    "field": "key",
                    "oneOf": list(filter_fields),
                }
            },
            {
                "lookup": "key",
                "from": {
                    "data": {"values": label_rows},
                    "key": "key",
                    "fields": ["label"],
                },
                "as": ["key_pretty_printed"],
                "default": LABEL_FALLBACK,
            },
        ],
        # named dataset: the renderer binds rows to it at draw time
        "data": {"name": DATA_NAME},
        "usermeta": {"embedOptions": {"renderer": "svg"}},
        "layer": [
            {
                "mark": {
                    "type": "bar",
                    "tooltip": {"content": "data"},
                },
                "encoding": {
                    "x": {"field": "year"},
                    "y": {"field": "value"},
                    "color": {
                        "field": "key_pretty_printed",
                        "scale": {"scheme": "tableau10"},
                    },
                    "tooltip": [
                        {
                            "field": "year",
                            "type": "temporal",
                            "scale": {"type": "utc"},
                            "timeUnit": "utcyear",
                            "title": "Year",
                        },
                        *(
                            {"field": f, "title": KEY_MAPPING[f], "format": ","}
                            for f in UNITS_FIELDS
                        ),
                        {"field": "total_units", "title": "Total units", "format": ","},
                    ],
                },
            }
        ],
        "config": {
            "bar": {"continuousBandSize": continuous_band_size},
        },
    }


def state_chart_spec(metric: str, width: float, height: float | None = None) -> dict:
    """Spec for a state page: all fields folded, one metric displayed."""
    return make_bar_chart_spec(ALL_FIELDS, filter_fields_for(metric), width, height)


# ── Data side ──


def chart_data(rows: Iterable[Mapping]) -> dict[str, list[dict]]:
    """Wrap rows under the spec's dataset name.

    Years go out as strings; a bare integer would be read as an epoch
    timestamp by the temporal axis.
    """
    table = []
    for row in rows:
        row = dict(row)
        if row.get("year") is not None:
            row["year"] = str(row["year"])
        table.append(row)
    return {DATA_NAME: table}


def fold_rows(
    rows: Iterable[Mapping],
    fields: Iterable[str],
    filter_fields: Iterable[str],
) -> list[dict]:
    """Run fold → filter → label locally, returning long-format points."""
    fields = list(fields)
    keep = set(filter_fields)
    points = []
    for row in rows:
        for key in fields:
            if key not in keep:
                continue
            points.append({
                "year": row.get("year"),
                "key": key,
                "key_pretty_printed": label_for(key),
                "value": row.get(key),
            })
    return points


def main() -> None:
    metric = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_METRIC
    width = float(sys.argv[2]) if len(sys.argv) > 2 else 1000
    print(json.dumps(state_chart_spec(metric, width), indent=2))


if __name__ == "__main__":
    main()
