"""Pydantic response models for FastAPI's auto-generated OpenAPI docs."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class MetricOption(BaseModel):
    value: str
    name: str


class SeriesPoint(BaseModel):
    year: int | None
    key: str
    key_pretty_printed: str
    value: float | None


class ChartPayload(BaseModel):
    """A Vega-Lite spec plus the named dataset it reads from."""

    spec: dict[str, Any]
    data: dict[str, list[dict[str, Any]]]
