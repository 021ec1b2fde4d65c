import pandas as pd
import plotly.graph_objects as go
import pytest

from fars.cli import main


@pytest.fixture(autouse=True)
def _clean_logger(reset_fars_logger):
    yield


def test_filename_command(capsys):
    main(["filename", "--year", "2014"])

    assert capsys.readouterr().out.strip() == "accident_2014.csv.bz2"


def test_summarize_command_prints_table(data_dir, capsys):
    main(["summarize", "--years", "2013", "2014", "--data-dir", str(data_dir)])

    out = capsys.readouterr().out
    assert "MONTH" in out
    assert "2013" in out and "2014" in out


def test_summarize_command_writes_csv(data_dir, tmp_path):
    out = tmp_path / "summary.csv"

    main([
        "summarize", "--years", "2013", "1999",
        "--data-dir", str(data_dir), "--output", str(out),
    ])

    table = pd.read_csv(out)
    assert table.columns.tolist() == ["MONTH", "2013"]
    assert table["2013"].tolist() == [2, 1, 2]


def test_summarize_command_missing_data_dir(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["summarize", "--years", "2013", "--data-dir", str(tmp_path / "nope")])

    assert excinfo.value.code == 1


def test_map_command_invalid_state_exits(data_dir, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["map", "--state", "70", "--year", "2013", "--data-dir", str(data_dir)])

    assert excinfo.value.code == 1
    assert "invalid STATE number: 70" in capsys.readouterr().err


def test_map_command_writes_html(data_dir, tmp_path, monkeypatch):
    monkeypatch.setattr(go.Figure, "show", lambda self, *a, **kw: None)
    out = tmp_path / "map.html"

    main([
        "--json-logs", "map", "--state", "30", "--year", "2013",
        "--data-dir", str(data_dir), "--output", str(out),
    ])

    assert out.exists()
