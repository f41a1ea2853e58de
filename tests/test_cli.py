import csv
import logging

import pytest
from openpyxl import load_workbook

from tradereport.cmd.cli import build_argparser, main
from tradereport.errors import InvalidDateError
from tradereport.model.loader import INSTRUCTION_COLS


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def _write_csv(path, rows):
    with open(path, "w", newline="", encoding="utf-8") as fp:
        writer = csv.writer(fp)
        writer.writerow(INSTRUCTION_COLS)
        writer.writerows(rows)
    return path


def test_argparser_defaults():
    args = build_argparser().parse_args([])
    assert args.input == []
    assert args.output is None
    assert args.verbose == 0


def test_main_prints_sample_report(capsys):
    main([])
    out = capsys.readouterr().out
    assert "### Outgoing USD Settlements for dates ###" in out
    assert "04 Jan 2016 - $(45225.00)" in out
    assert "1) doo $(16555.00)" in out


def test_main_reads_csv_inputs_and_writes_workbook(tmp_path, capsys):
    first = _write_csv(
        tmp_path / "a.csv",
        [["foo", "B", "0.50", "SGP", "01 Jan 2016", "02 Jan 2016", "200", "100.5"]],
    )
    second = _write_csv(
        tmp_path / "b.csv",
        [["bar", "S", "0.22", "AED", "05 Jan 2016", "08 Jan 2016", "100", "150.5"]],
    )
    out_path = tmp_path / "report.xlsx"

    main(["-v", "--output", str(out_path), str(first), str(second)])

    out = capsys.readouterr().out
    assert "04 Jan 2016 - $(10050.00)" in out
    assert "10 Jan 2016 - $(3311.00)" in out
    assert "1) bar $(3311.00)" in out

    wb = load_workbook(out_path)
    assert wb["Outgoing Ranking"].cell(row=2, column=2).value == "foo"


def test_main_propagates_bad_input(tmp_path):
    bad = _write_csv(
        tmp_path / "bad.csv",
        [["foo", "B", "0.50", "SGP", "01 Jan 2016", "2016-01-02", "200", "100.5"]],
    )
    with pytest.raises(InvalidDateError):
        main([str(bad)])
