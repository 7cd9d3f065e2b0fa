from __future__ import annotations

import csv
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cli.app import app
from settings import get_settings


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def test_stats_prints_summary_and_table(runner: CliRunner, collection_path: Path) -> None:
    result = runner.invoke(app, ["--file", str(collection_path), "stats"])

    assert result.exit_code == 0
    assert "Total value........... 100069.99 EUR" in result.stdout
    assert "Rolling stocks/sets... 3" in result.stdout
    assert "Locomotives (EUR)" in result.stdout

    lines = result.stdout.splitlines()
    year_lines = [line for line in lines if line.startswith("| 2005") or line.startswith("| 2006")]
    total_line = next(line for line in lines if line.startswith("| TOTAL"))
    assert [line.split("|")[1].strip() for line in year_lines] == ["2005", "2006"]
    assert lines.index(total_line) > lines.index(year_lines[-1])
    assert "100049.99" in total_line
    assert "100069.99" in total_line



def test_verbose_flag_only_changes_logging(runner: CliRunner, collection_path: Path) -> None:
    result = runner.invoke(app, ["--verbose", "--file", str(collection_path), "stats"])

    assert result.exit_code == 0
    assert "Rolling stocks/sets... 3" in result.stdout

def test_depot_lists_locomotives(runner: CliRunner, collection_path: Path) -> None:
    result = runner.invoke(app, ["-f", str(collection_path), "depot"])

    assert result.exit_code == 0
    assert "2 locomotive(s)" in result.stdout
    assert "E 656 077" in result.stdout
    assert "NEXT_18" in result.stdout
    assert result.stdout.index("E 656") < result.stdout.index("D 445")


def test_list_sorts_by_brand_and_item_number(runner: CliRunner, collection_path: Path) -> None:
    result = runner.invoke(app, ["-f", str(collection_path), "list"])

    assert result.exit_code == 0
    assert result.stdout.index("60131") < result.stdout.index("69013") < result.stdout.index("45012")
    assert "Locomotiva elettrica E 656 077 nella livrea d'o..." in result.stdout
    assert "2005-03-12" in result.stdout


def test_csv_export(runner: CliRunner, collection_path: Path, tmp_path: Path) -> None:
    output = tmp_path / "out" / "collection.csv"

    result = runner.invoke(app, ["-f", str(collection_path), "csv", "--output", str(output)])

    assert result.exit_code == 0
    assert "Exported 3 element(s)" in result.stdout
    with output.open(newline="", encoding="utf-8") as handle:
        rows = list(csv.DictReader(handle))
    assert [row["ItemNumber"] for row in rows] == ["60131", "45012", "69013"]
    assert rows[0]["Category"] == "LOCOMOTIVE"
    assert rows[0]["Price"] == "50.00 EUR"
    assert rows[2]["Count"] == "2"


def test_missing_file_exits_with_error(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(app, ["-f", str(tmp_path / "nope.yaml"), "stats"])

    assert result.exit_code == 1
    assert "Unable to load collection" in result.output


def test_skipped_elements_are_reported(runner: CliRunner, tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text(
        "version: 1\n"
        "description: broken\n"
        "elements:\n"
        "  - brand: ACME\n"
        "    itemNumber: '1'\n"
        "    rollingStocks: []\n"
        "    purchaseInfo: {price: '1.00'}\n",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["-f", str(path), "stats"])

    assert result.exit_code == 0
    assert "Skipped element #1" in result.output
    assert "Rolling stocks/sets... 0" in result.stdout


def test_collection_file_from_environment(
    monkeypatch, runner: CliRunner, collection_path: Path
) -> None:
    monkeypatch.setenv("RAILISTS_COLLECTION_FILE", str(collection_path))
    get_settings.cache_clear()
    try:
        result = runner.invoke(app, ["depot"])
    finally:
        get_settings.cache_clear()

    assert result.exit_code == 0
    assert "2 locomotive(s)" in result.stdout
