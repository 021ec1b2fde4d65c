"""
FARS - Fatality Analysis Reporting System toolkit

Loads yearly FARS accident files, tabulates accidents by month and year,
and maps accidents for a state, using the Functional Core, Imperative
Shell architecture.

Structure:
- data/     : Imperative Shell (file naming and loading)
- analysis/ : Functional Core (pure DataFrame transformations)
- plotting/ : (plotting functions)
- reports/  : Pipeline entry points (summarize_years, map_state)
"""

from .data.reader import (
    MissingFileError,
    load_records,
    load_years,
    resolve_filename,
)
from .analysis.states import InvalidStateError
from .reports.generators import map_state, summarize_years

__version__ = "0.1.0"

__all__ = [
    'MissingFileError',
    'InvalidStateError',
    'resolve_filename',
    'load_records',
    'load_years',
    'summarize_years',
    'map_state',
]
