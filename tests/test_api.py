"""FastAPI endpoint tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api import plots
from api.main import app

client = TestClient(app)


def test_root_lists_endpoints() -> None:
    body = client.get("/").json()
    assert "/chart-spec" in body["endpoints"]


def test_health_reports_data_file(dataset: str) -> None:
    body = client.get("/health").json()
    assert body == {"data_path": dataset, "exists": True}


def test_states(dataset: str) -> None:
    assert client.get("/states").json() == ["Alabama", "Ohio", "Texas"]


def test_metrics() -> None:
    assert client.get("/metrics").json() == [
        {"value": "units", "name": "Units"},
        {"value": "bldgs", "name": "Buildings"},
        {"value": "value", "name": "Property value"},
    ]


def test_fields_default_and_filtered() -> None:
    assert len(client.get("/fields").json()) == 24
    resp = client.get("/fields", params={"metric": "units", "suffix": ""})
    assert resp.json() == list(plots.fields_generator(["units"], [""]))


def test_chart_spec() -> None:
    spec = client.get("/chart-spec", params={"metric": "units", "width": 2000}).json()
    assert spec["width"] == 936
    assert spec["transform"][1]["filter"]["oneOf"] == list(plots.UNITS_FIELDS)


def test_chart_spec_rejects_negative_width() -> None:
    assert client.get("/chart-spec", params={"width": -1}).status_code == 422


def test_chart_spec_unknown_metric_is_empty() -> None:
    spec = client.get("/chart-spec", params={"metric": "acres"}).json()
    assert spec["transform"][1]["filter"]["oneOf"] == []


def test_state_chart_payload(dataset: str) -> None:
    body = client.get("/states/Ohio/chart", params={"metric": "value", "width": 500}).json()
    assert body["spec"]["width"] == pytest.approx(475)
    assert [r["year"] for r in body["data"]["table"]] == ["2018", "2019"]


def test_state_series(dataset: str) -> None:
    points = client.get("/states/Texas/series", params={"metric": "bldgs"}).json()
    assert len(points) == 4
    assert points[0]["key"] == "1_unit_bldgs"
    assert points[0]["key_pretty_printed"] == "1 unit"
    assert points[0]["year"] == 2020


def test_state_series_unknown_state(dataset: str) -> None:
    assert client.get("/states/Atlantis/series").json() == []
