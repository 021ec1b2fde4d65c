"""
FARS Data Reader (Imperative Shell)

Resolves yearly accident file names and loads them into DataFrames.

Package Location: src/fars/data/reader.py

File convention:
    One bz2-compressed CSV per year, named ``accident_<year>.csv.bz2``.
    Files are looked up relative to ``data_dir`` when given, otherwise
    relative to the current working directory at call time.

Per-year isolation:
    ``load_year`` never raises for a load failure.  The failure is logged
    as a warning and captured in the returned ``YearResult`` so that one
    bad year cannot abort a multi-year load.  ``load_records`` on the
    other hand raises ``MissingFileError`` and lets every other error
    propagate to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable as IterableABC
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

from ..utils.convert import MISSING_TEXT, coerce_int, format_int

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

FILENAME_TEMPLATE: str = "accident_{year}.csv.bz2"

# Text used in place of a year that cannot be coerced to an integer.
MISSING_YEAR: str = MISSING_TEXT

# Columns kept by the multi-year projection.
_PROJECTION_COLUMNS: List[str] = ["MONTH", "year"]

PathLike = Union[str, Path]


class MissingFileError(FileNotFoundError):
    """Raised when a yearly accident file is not present on disk."""

    def __init__(self, filename: PathLike) -> None:
        super().__init__(f"file '{filename}' does not exist")
        self.filename = str(filename)


@dataclass(frozen=True)
class YearResult:
    """Outcome of loading one year.

    Exactly one of ``data`` / ``error`` is set.
    """
    year: Any
    filename: str
    data: Optional[pd.DataFrame] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.data is not None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def resolve_filename(year: Any) -> str:
    """
    Build the accident file name for *year*.

    No existence check is made.  A year that cannot be coerced to an
    integer does not raise; it yields ``accident_NA.csv.bz2``.

    Args:
        year: Integer, numeric string, or any other value.

    Returns:
        File name such as ``'accident_2014.csv.bz2'``.
    """
    return FILENAME_TEMPLATE.format(year=format_int(coerce_int(year)))


def load_records(
    filename: PathLike,
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Read one accident file into a DataFrame.

    The content is not interpreted: whatever columns the file carries are
    returned as-is, with dtypes inferred per column by pandas.

    Args:
        filename: File name (or path) of the CSV to read.
        data_dir: Directory that *filename* is relative to.  Defaults to
            the current working directory.

    Returns:
        DataFrame with one row per data row in the file.

    Raises:
        MissingFileError: If the file does not exist.
    """
    path = _resolve_path(filename, data_dir)
    if not path.exists():
        raise MissingFileError(filename)

    # low_memory=False reads the file in one pass so mixed-type columns
    # are inferred once instead of emitting a DtypeWarning per chunk.
    df = pd.read_csv(path, low_memory=False)
    logger.debug(
        "Loaded %d rows from %s", len(df), path.name,
        extra={"data_file": str(path), "rows": len(df)},
    )
    return df


def load_year(year: Any, data_dir: Optional[PathLike] = None) -> YearResult:
    """
    Load one year and project it down to ``MONTH`` and ``year``.

    The ``year`` column holds *year* exactly as passed in, not the coerced
    integer used to build the file name.

    Args:
        year: Year value as supplied by the caller.
        data_dir: Directory holding the accident files.

    Returns:
        ``YearResult`` carrying either the projection or the error text.
    """
    filename = resolve_filename(year)
    try:
        df = load_records(filename, data_dir=data_dir)
        projected = df.assign(year=year)[_PROJECTION_COLUMNS]
    except Exception as exc:
        logger.warning(
            "invalid year: %s", year,
            extra={"year": year, "data_file": filename, "error": str(exc)},
        )
        return YearResult(year=year, filename=filename, error=str(exc))

    return YearResult(year=year, filename=filename, data=projected)


def load_year_results(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
) -> List[YearResult]:
    """Load every year in *years*, one ``YearResult`` per input, in order.

    A single year (int or string) is treated as a one-element sequence.
    """
    return [load_year(year, data_dir=data_dir) for year in _as_years(years)]


def load_years(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Load several years, isolating failures per year.

    Args:
        years: Sequence of year values, or a single year.
        data_dir: Directory holding the accident files.

    Returns:
        List aligned with *years*: a ``[MONTH, year]`` DataFrame for each
        year that loaded, ``None`` for each year that did not.
    """
    return [result.data for result in load_year_results(years, data_dir)]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _as_years(years: Any) -> List[Any]:
    if isinstance(years, (str, bytes)) or not isinstance(years, IterableABC):
        return [years]
    return list(years)


def _resolve_path(filename: PathLike, data_dir: Optional[PathLike]) -> Path:
    if data_dir is None:
        return Path(filename)
    return Path(data_dir) / filename
