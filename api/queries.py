"""Shared query layer — all SQL lives here.

Used by the Streamlit page, FastAPI app, and MCP server.
Each function creates a fresh DuckDB connection, reads the dataset file, returns list[dict].
"""

from __future__ import annotations

import os
from pathlib import Path

import duckdb

_ROOT = Path(__file__).resolve().parent.parent
_DATA = os.environ.get("HOUSING_DATA_PATH", str(_ROOT / "data" / "housing_data.parquet"))


def _q(sql: str, params: list | None = None) -> list[dict]:
    """Execute SQL and return list of row dicts, nulls as None."""
    con = duckdb.connect()
    df = con.execute(sql, params or []).fetchdf()
    con.close()
    df = df.astype(object).where(df.notna(), None)
    return df.to_dict(orient="records")


# ── 1. State options ──


def get_state_options() -> list[str]:
    """Distinct state names, alphabetical. Only rows of type 'state' count."""
    rows = _q(f"""
        SELECT DISTINCT state_name
        FROM '{_DATA}'
        WHERE "type" = 'state' AND state_name IS NOT NULL
        ORDER BY state_name
    """)
    return [r["state_name"] for r in rows]


# ── 2. State rows ──


def get_state_rows(state_name: str) -> list[dict]:
    """All wide-format rows for one state, ordered by year."""
    return _q(
        f"""
        SELECT * FROM '{_DATA}'
        WHERE state_name = ?
        ORDER BY year
        """,
        [state_name],
    )
