"""
FARS State Selection & Coordinates (Functional Core)

Pure functions only. No file I/O, no side effects.

Package Location: src/fars/analysis/states.py

Coordinate Sentinel Rule:
    FARS encodes an unknown position with out-of-range values rather than
    blanks: ``LONGITUD > 900`` and ``LATITUDE > 90`` (typically 999.9999
    and 99.9999).  ``mask_unknown_coordinates`` turns these into NaN so
    that every downstream min/max and every plotted point sees them as
    missing.  The two axes are masked independently.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import pandas as pd

from ..utils.convert import coerce_int, format_int

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

LONGITUDE_SENTINEL: float = 900
LATITUDE_SENTINEL: float = 90


class InvalidStateError(ValueError):
    """Raised when a state number has no rows in the loaded year."""

    def __init__(self, state: Optional[int]) -> None:
        self.state = state
        super().__init__(f"invalid STATE number: {format_int(state)}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def select_state(data: pd.DataFrame, state_num: Any) -> pd.DataFrame:
    """
    Keep only the rows for one state.

    Args:
        data: Full accident records for a year; must have a ``STATE``
            column.
        state_num: State code; coerced to int (numeric strings allowed).

    Returns:
        Copy of the matching rows.

    Raises:
        InvalidStateError: If the coerced state is not among the distinct
            ``STATE`` values of *data*.
    """
    _validate_columns(data, required=["STATE"])

    state = coerce_int(state_num)
    states = pd.to_numeric(data["STATE"], errors="coerce")
    if state is None or state not in set(states.dropna().unique()):
        raise InvalidStateError(state)

    return data[states == state].copy()


def mask_unknown_coordinates(data: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with NaN.

    Args:
        data: Records with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        New DataFrame; *data* is left untouched.
    """
    _validate_columns(data, required=["LONGITUD", "LATITUDE"])

    df = data.copy()
    lon = pd.to_numeric(df["LONGITUD"], errors="coerce")
    lat = pd.to_numeric(df["LATITUDE"], errors="coerce")
    df["LONGITUD"] = np.where(lon > LONGITUDE_SENTINEL, np.nan, lon)
    df["LATITUDE"] = np.where(lat > LATITUDE_SENTINEL, np.nan, lat)
    return df


def coordinate_bounds(
    data: pd.DataFrame,
) -> Optional[Dict[str, Tuple[float, float]]]:
    """
    Compute the longitude and latitude ranges, ignoring missing values.

    Sentinels are not masked here; pass the output of
    ``mask_unknown_coordinates``.

    Args:
        data: Records with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        ``{'lon': (min, max), 'lat': (min, max)}``, or ``None`` when either
        axis has no known value.
    """
    lon = data["LONGITUD"].dropna()
    lat = data["LATITUDE"].dropna()
    if lon.empty or lat.empty:
        return None
    return {
        "lon": (float(lon.min()), float(lon.max())),
        "lat": (float(lat.min()), float(lat.max())),
    }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _validate_columns(df: pd.DataFrame, required: list) -> None:
    """Raise ValueError if any *required* column is absent from *df*."""
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise ValueError(
            f"DataFrame is missing required columns: {missing}. "
            f"Got: {df.columns.tolist()}"
        )
