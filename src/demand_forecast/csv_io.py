# src/demand_forecast/csv_io.py
"""
CSV boundary of the demo.

- read_sales_csv   : user upload with `date` + `value` (or `sales`) columns
- export_csv       : combined history + forecast as date,actual,forecast
- write_sample_csv : downloadable template in the upload format
"""
import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
import pandas as pd

from demand_forecast.generate import generate_sample_data
from demand_forecast.types import DataPoint, Series
from demand_forecast.utils import to_timestamp

logger = logging.getLogger(__name__)

VALUE_COLUMNS = ("value", "sales")
EXPORT_COLUMNS = ["date", "actual", "forecast"]


def _format_number(v) -> str:
    if v is None:
        return ""
    try:
        if pd.isna(v):
            return ""
    except (TypeError, ValueError):
        pass
    f = float(v)
    if f.is_integer():
        return str(int(f))
    return repr(f)


def _format_date(value) -> str:
    ts = to_timestamp(value)
    return ts.strftime("%Y-%m-%d") if ts is not None else ""


def _write_text(text: str, path: Union[str, Path]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info("Wrote %s", path)


def read_sales_csv(source) -> Series:
    """
    Parse a sales CSV (path, buffer or text stream) into history points.

    Rows with an unparseable date or a non-numeric value are dropped.
    Raises ValueError when the required columns are missing.
    """
    df = pd.read_csv(source, dtype=str, skipinitialspace=True)
    df.columns = [str(c).strip().lower() for c in df.columns]

    value_col = next((c for c in VALUE_COLUMNS if c in df.columns), None)
    if "date" not in df.columns or value_col is None:
        raise ValueError(
            "CSV must have a 'date' column and a 'value' or 'sales' column; "
            f"found {list(df.columns)}"
        )

    values = pd.to_numeric(df[value_col].str.strip(), errors="coerce")
    points: Series = []
    dropped = 0
    for raw_date, value in zip(df["date"], values):
        ts = to_timestamp(raw_date.strip()) if isinstance(raw_date, str) else None
        if ts is None or pd.isna(value):
            dropped += 1
            continue
        value = float(value)
        points.append(DataPoint(date=ts, actual=int(value) if value.is_integer() else value, forecast=None))

    if dropped:
        logger.warning("Dropped %d malformed row(s) from CSV import", dropped)
    logger.info("Imported %d row(s) using value column %r", len(points), value_col)
    return points


def export_csv(history: Series, forecast: Series, path: Optional[Union[str, Path]] = None) -> str:
    """Combined history + forecast CSV, sorted by date. Writes `path` if given."""
    rows = [(to_timestamp(p.date), p.actual, None) for p in history]
    rows += [(to_timestamp(p.date), None, p.forecast) for p in forecast]
    df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
    df = df.sort_values("date", kind="stable", na_position="last")

    out = pd.DataFrame({
        "date": df["date"].map(_format_date),
        "actual": df["actual"].map(_format_number),
        "forecast": df["forecast"].map(_format_number),
    })
    text = out.to_csv(index=False, lineterminator="\n")
    if path is not None:
        _write_text(text, path)
    return text


def write_sample_csv(
    path: Optional[Union[str, Path]] = None,
    rng: Optional[np.random.Generator] = None,
) -> str:
    """Sample upload file (date,value) built from the fixed demo dataset."""
    sample = generate_sample_data(rng=rng)
    df = pd.DataFrame({
        "date": [_format_date(p.date) for p in sample],
        "value": [_format_number(p.actual) for p in sample],
    })
    text = df.to_csv(index=False, lineterminator="\n")
    if path is not None:
        _write_text(text, path)
    return text
