"""
FARS Monthly Summary (Functional Core)

Pure functions only. No file I/O, no side effects.
Input: per-year ``[MONTH, year]`` projections (``None`` for years that
failed to load).  Output: a month-by-year count table.

Package Location: src/fars/analysis/summary.py

Table shape:
    One row per distinct MONTH (ascending), one column per distinct year
    in the order the years first appear in the input.  Cells are nullable
    ``Int64`` counts; a (month, year) pair with no accidents is ``<NA>``,
    not 0.
"""

from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd


def count_by_month(frames: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Concatenate yearly projections and pivot accident counts by month.

    ``None`` entries contribute zero rows.  When nothing is left to count
    the result is an empty table with only the ``MONTH`` column.

    Args:
        frames: Iterable of DataFrames with columns ``MONTH`` and ``year``,
            or ``None`` absence markers.

    Returns:
        DataFrame with columns ``[MONTH, <year>, <year>, ...]``.
    """
    present = [df for df in frames if df is not None]
    if not present:
        return _empty_summary()

    combined = pd.concat(present, ignore_index=True)
    combined = combined.dropna(subset=["MONTH"])
    # a null MONTH in any file leaves the column float; restore integers
    combined = combined.assign(MONTH=combined["MONTH"].astype("Int64"))
    if combined.empty:
        return _empty_summary()

    year_order = list(pd.unique(combined["year"]))

    counts = (
        combined.groupby(["year", "MONTH"])
        .size()
        .rename("n")
        .reset_index()
    )
    table = (
        counts.pivot(index="MONTH", columns="year", values="n")
        .reindex(columns=year_order)
        .sort_index()
        .astype("Int64")
        .reset_index()
    )
    table.columns.name = None
    return table


def _empty_summary() -> pd.DataFrame:
    return pd.DataFrame(columns=["MONTH"])
