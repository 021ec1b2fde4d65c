import pandas as pd

from fars.analysis.summary import count_by_month
from fars.reports.generators import summarize_years


def _projection(months, year):
    return pd.DataFrame({"MONTH": months, "year": year})


def test_count_by_month_pivots_years_into_columns():
    table = count_by_month([
        _projection([1, 1, 2], 2013),
        _projection([2, 3, 3, 3], 2014),
    ])

    assert table.columns.tolist() == ["MONTH", 2013, 2014]
    assert table["MONTH"].tolist() == [1, 2, 3]
    assert table[2014].tolist()[1:] == [1, 3]
    assert table.loc[table["MONTH"] == 1, 2013].item() == 2


def test_count_by_month_missing_combination_is_null_not_zero():
    table = count_by_month([_projection([1], 2013), _projection([2], 2014)])

    row = table.set_index("MONTH")
    assert pd.isna(row.loc[2, 2013])
    assert pd.isna(row.loc[1, 2014])
    assert str(table[2013].dtype) == "Int64"


def test_count_by_month_skips_absence_markers():
    table = count_by_month([None, _projection([5, 5], 2015), None])

    assert table.columns.tolist() == ["MONTH", 2015]
    assert table[2015].tolist() == [2]


def test_count_by_month_year_columns_follow_input_order():
    table = count_by_month([_projection([1], 2015), _projection([1], 2013)])

    assert table.columns.tolist() == ["MONTH", 2015, 2013]


def test_count_by_month_nothing_loaded_is_empty():
    assert count_by_month([]).empty
    table = count_by_month([None, None])
    assert len(table) == 0
    assert table.columns.tolist() == ["MONTH"]


def test_summarize_years_counts_fixture_files(data_dir):
    table = summarize_years([2013, 2014], data_dir=data_dir).set_index("MONTH")

    assert table.columns.tolist() == [2013, 2014]
    assert table.index.tolist() == [1, 2, 3]
    assert table.loc[1, 2013] == 2
    assert table.loc[2, 2013] == 1
    assert table.loc[3, 2013] == 2
    assert table.loc[1, 2014] == 1
    assert table.loc[2, 2014] == 2
    assert pd.isna(table.loc[3, 2014])


def test_summarize_years_skips_missing_year(data_dir):
    table = summarize_years([2013, 1999], data_dir=data_dir)

    assert table.columns.tolist() == ["MONTH", 2013]
    assert int(table[2013].sum()) == 5


def test_summarize_years_all_missing_returns_empty_table(tmp_path):
    table = summarize_years([1999], data_dir=tmp_path)

    assert table.empty
    assert len(table) == 0
    assert table.columns.tolist() == ["MONTH"]


def test_count_by_month_null_month_keeps_integer_months():
    table = count_by_month([_projection([1.0, None, 2.0, 2.0], 2013)])

    assert str(table["MONTH"].dtype) == "Int64"
    assert table["MONTH"].tolist() == [1, 2]
    assert table[2013].tolist() == [1, 2]
