"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return new DataFrames.

Modules:
- summary: Month-by-year accident count pivot
- states:  State selection and coordinate sentinel masking
"""

from .summary import count_by_month

from .states import (
    InvalidStateError,
    LATITUDE_SENTINEL,
    LONGITUDE_SENTINEL,
    select_state,
    mask_unknown_coordinates,
    coordinate_bounds,
)

__all__ = [
    # Summary
    'count_by_month',
    # States
    'InvalidStateError',
    'LATITUDE_SENTINEL',
    'LONGITUDE_SENTINEL',
    'select_state',
    'mask_unknown_coordinates',
    'coordinate_bounds',
]
