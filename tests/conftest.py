"""Shared fixtures: small FARS-shaped accident files written to tmp_path."""

import logging

import pandas as pd
import pytest

# 2013: state 1 has a latitude sentinel, state 30 has a longitude sentinel.
ACCIDENTS_2013 = pd.DataFrame({
    "STATE":    [1, 1, 30, 30, 30],
    "ST_CASE":  [10001, 10002, 300001, 300002, 300003],
    "MONTH":    [1, 1, 2, 3, 3],
    "LATITUDE": [32.5, 99.9999, 45.0, 46.0, 47.5],
    "LONGITUD": [-86.6, -87.0, 999.9999, -110.0, -111.5],
})

ACCIDENTS_2014 = pd.DataFrame({
    "STATE":    [1, 1, 2],
    "ST_CASE":  [10001, 10002, 20001],
    "MONTH":    [1, 2, 2],
    "LATITUDE": [33.0, 34.0, 61.2],
    "LONGITUD": [-86.0, -85.5, -149.9],
})


@pytest.fixture
def data_dir(tmp_path):
    """Directory holding accident_2013.csv.bz2 and accident_2014.csv.bz2."""
    ACCIDENTS_2013.to_csv(tmp_path / "accident_2013.csv.bz2", index=False)
    ACCIDENTS_2014.to_csv(tmp_path / "accident_2014.csv.bz2", index=False)
    return tmp_path


@pytest.fixture
def reset_fars_logger():
    """Drop handlers the CLI attaches to the ``fars`` logger."""
    yield
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
