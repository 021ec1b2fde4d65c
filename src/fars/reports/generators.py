"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: resolves years to files, calls data/reader.py
to load them, calls the functional core to summarize or select, and
calls plotting to render.

Package Location: src/fars/reports/generators.py

Usage::

    from fars.reports.generators import summarize_years, map_state

    table = summarize_years([2013, 2014, 2015], data_dir="data")
    map_state(30, 2013, data_dir="data")                      # opens a viewer
    map_state(30, 2013, data_dir="data", output_path="mt.html")  # writes HTML
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import pandas as pd

from ..analysis.states import select_state
from ..analysis.summary import count_by_month
from ..data.reader import load_records, load_years, resolve_filename
from ..plotting.state_map import plot_state_map
from ..utils.convert import coerce_int

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def summarize_years(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years whose file cannot be loaded are logged and skipped; if none
    loads, an empty table is returned.

    Args:
        years: Year values (ints or numeric strings).
        data_dir: Directory holding the ``accident_<year>.csv.bz2`` files.
            Defaults to the current working directory.

    Returns:
        DataFrame with a ``MONTH`` column and one count column per year.
    """
    frames = load_years(years, data_dir=data_dir)
    table = count_by_month(frames)
    logger.debug(
        "Summarized %d/%d years",
        sum(f is not None for f in frames),
        len(frames),
        extra={"months": len(table)},
    )
    return table


def map_state(
    state_num: Any,
    year: Any,
    data_dir: Optional[PathLike] = None,
    output_path: Optional[PathLike] = None,
) -> None:
    """
    Plot every accident in one state for one year.

    The figure is shown in the default plotly renderer, or written as a
    standalone HTML file when *output_path* is given.  When the state has
    no accidents an informational message is logged and nothing is
    rendered.

    Args:
        state_num: State code (int or numeric string).
        year: Year (int or numeric string).
        data_dir: Directory holding the accident files.
        output_path: Optional ``.html`` destination.

    Raises:
        MissingFileError: If the year's file does not exist.
        InvalidStateError: If the state does not appear in that year.
    """
    filename = resolve_filename(year)
    data = load_records(filename, data_dir=data_dir)
    subset = select_state(data, state_num)

    if subset.empty:
        logger.info(
            "no accidents to plot",
            extra={"state": coerce_int(state_num), "year": year},
        )
        return

    fig = plot_state_map(subset, state=coerce_int(state_num), year=year)

    if output_path is None:
        fig.show()
        return

    out_path = Path(output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(out_path))
    logger.info("Map saved to %s", out_path, extra={"path": str(out_path)})
