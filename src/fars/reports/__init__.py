"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, summarizing, and map rendering.
No analysis logic lives here; this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: summarize_years() and map_state().
"""

from .generators import (
    summarize_years,
    map_state,
)

__all__ = [
    'summarize_years',
    'map_state',
]
