"""Tests for the eda-tlbx command line interface."""

from pathlib import Path

import pandas as pd
import pytest

from eda_tlbx.cli import main


@pytest.fixture
def csv_path(tmp_path: Path, abcd_df: pd.DataFrame) -> Path:
    """abcd fixture written to CSV."""
    path = tmp_path / "grades.csv"
    abcd_df.to_csv(path, index=False)
    return path


def test_bars_writes_pages(tmp_path: Path, csv_path: Path) -> None:
    """The bars mode saves one PNG per page."""
    out_dir = tmp_path / "pages"
    assert main(["bars", str(csv_path), "--out-dir", str(out_dir)]) == 0
    assert sorted(p.name for p in out_dir.iterdir()) == ["bar_discrete_page_1.png"]


def test_bars_without_discrete_columns_fails(tmp_path: Path) -> None:
    """Numeric-only data exits with status 1."""
    path = tmp_path / "numbers.csv"
    pd.DataFrame({"x": [1, 2, 3]}).to_csv(path, index=False)
    assert main(["bars", str(path), "--out-dir", str(tmp_path)]) == 1


def test_collapse_prints_table(csv_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """The collapse mode prints the collapsed labels."""
    assert main(["collapse", str(csv_path), "grade", "0.2"]) == 0
    out = capsys.readouterr().out
    assert "tail_pct" in out
    assert out.split()[5] == "D"


def test_collapse_update_writes_csv(tmp_path: Path, csv_path: Path) -> None:
    """--update writes the relabeled data to --output."""
    output = tmp_path / "collapsed.csv"
    code = main(["collapse", str(csv_path), "grade", "0.21", "--update", "--output", str(output)])

    assert code == 0
    counts = pd.read_csv(output)["grade"].value_counts().to_dict()
    assert counts == {"A": 50, "B": 30, "OTHER": 20}


def test_collapse_update_requires_output(csv_path: Path) -> None:
    """--update without --output is rejected."""
    assert main(["collapse", str(csv_path), "grade", "0.2", "--update"]) == 2


def test_collapse_bad_threshold(csv_path: Path) -> None:
    """Library errors are reported with exit code 1."""
    assert main(["collapse", str(csv_path), "grade", "2"]) == 1
