"""Centralized value-coercion helpers."""

from typing import Any, Optional

import pandas as pd

# Text used wherever an undefined integer is rendered (file names, messages).
MISSING_TEXT: str = "NA"

# Largest magnitude that still counts as a defined integer (32-bit).
_INT_MAX: int = 2**31 - 1


def coerce_int(value: Any) -> Optional[int]:
    """Convert *value* to an int, returning None if it is not numeric.

    Numeric strings are accepted and fractional values are truncated
    toward zero (``"2014.7"`` -> 2014).  Missing, infinite, non-numeric
    and out-of-32-bit-range values all map to None.

    Args:
        value: Any scalar (int, float, str, numpy scalar, None...).

    Returns:
        The truncated integer, or None.
    """
    if isinstance(value, bool):
        return int(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if pd.isna(number) or abs(number) > _INT_MAX:
        return None
    return int(number)


def format_int(value: Optional[int]) -> str:
    """Render a coerced integer, using ``NA`` for None."""
    return MISSING_TEXT if value is None else str(value)
