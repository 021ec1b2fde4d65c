"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS toolkit.

Modules:
- reader: Year-to-filename resolution, single-file and multi-year loading
"""

from .reader import (
    FILENAME_TEMPLATE,
    MISSING_YEAR,
    MissingFileError,
    YearResult,
    resolve_filename,
    load_records,
    load_year,
    load_year_results,
    load_years,
)

__all__ = [
    'FILENAME_TEMPLATE',
    'MISSING_YEAR',
    'MissingFileError',
    'YearResult',
    'resolve_filename',
    'load_records',
    'load_year',
    'load_year_results',
    'load_years',
]
