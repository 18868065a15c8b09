import re

import pandas as pd
from click.testing import CliRunner
from bmicalc.__main__ import main


def test_batch_writes_results_and_reports_rejections(measurement_workbook, tmp_path):
    runner = CliRunner()
    out = tmp_path / "out" / "results.csv"
    result = runner.invoke(main, ["batch", measurement_workbook, "-o", str(out)])
    assert result.exit_code == 0, result.output

    m = re.search(r"Computed (\d+) BMI results", result.output)
    assert m and int(m.group(1)) == 3, result.output
    assert "Rejected 1 rows" in result.output
    assert "Errors found in measurements:" in result.output
    assert "Invalid Weight" in result.output

    written = pd.read_csv(out)
    assert list(written["bmi"]) == [22.9, 17.6, 41.5]


def test_batch_default_output_dir(measurement_csv, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    runner = CliRunner()
    result = runner.invoke(main, ["batch", measurement_csv])
    assert result.exit_code == 0, result.output
    written = list((tmp_path / "bmi_results").glob("*/results.csv"))
    assert len(written) == 1


def test_batch_writes_log_file(measurement_csv, tmp_path):
    runner = CliRunner()
    log = tmp_path / "batch.log"
    result = runner.invoke(
        main,
        ["batch", measurement_csv, "-o", str(tmp_path / "r.csv"), "--log-file-path", str(log)],
    )
    assert result.exit_code == 0, result.output
    assert log.exists()


def test_batch_unsupported_file_exits_1(tmp_path):
    path = tmp_path / "measurements.txt"
    path.write_text("weight,height\n")
    runner = CliRunner()
    result = runner.invoke(main, ["batch", str(path)])
    assert result.exit_code == 1
    assert "cannot read" in result.output


def test_batch_duplicate_columns_reported_not_fatal(tmp_path):
    path = tmp_path / "dupes.csv"
    path.write_text("id,weight,height,unit,height_unit\nA,70,175,cm,cm\nB,45,160,cm,cm\n")
    runner = CliRunner()
    result = runner.invoke(main, ["batch", str(path), "-o", str(tmp_path / "r.csv")])
    assert result.exit_code == 0, result.output
    assert "duplicate columns after renaming: ['height_unit']" in result.output
    assert "Computed 0 BMI results" in result.output
    assert "Rejected 2 rows" in result.output
