"""Shared fixtures: a small wide-format dataset on disk."""

from __future__ import annotations

import csv

import pytest

from api import plots, queries


def _row(state_name: str, type_: str, year: int, base: int) -> dict:
    row = {"state_name": state_name, "type": type_, "year": year}
    for i, field in enumerate(plots.ALL_FIELDS):
        row[field] = base + i
    row["total_units"] = sum(row[f] for f in plots.UNITS_FIELDS)
    return row


@pytest.fixture
def dataset_rows() -> list[dict]:
    return [
        _row("Texas", "state", 2020, 100),
        _row("Ohio", "state", 2019, 10),
        _row("Ohio", "state", 2018, 0),
        _row("Alabama", "state", 2020, 1000),
        _row("Mountain", "division", 2020, 5),
    ]


@pytest.fixture
def dataset(tmp_path, monkeypatch, dataset_rows) -> str:
    """Write the rows to CSV and point the query layer at it."""
    path = tmp_path / "housing_data.csv"
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(dataset_rows[0]))
        writer.writeheader()
        writer.writerows(dataset_rows)
    monkeypatch.setattr(queries, "_DATA", str(path))
    return str(path)
