import csv

import pytest

from vecquant.cli import benchmark_opq, benchmark_rvq, benchmark_tsvq, main
from vecquant.evaluate import CSV_HEADER


def _check_result(result, n_samples, n_dims):
    assert result.n_samples == n_samples
    assert result.n_dims == n_dims
    assert result.training_time_ms >= 0.0
    assert result.quantization_time_ms >= 0.0
    assert result.reconstruction_error >= 0.0
    assert 0.0 <= result.recall <= 1.0


def test_benchmark_tsvq_small():
    result = benchmark_tsvq(20, 4, 2)
    _check_result(result, 20, 4)


def test_benchmark_rvq_small():
    result = benchmark_rvq(30, 4, stages=2, k=4, max_iters=5, epsilon=0.01)
    _check_result(result, 30, 4)


def test_benchmark_opq_small():
    result = benchmark_opq(30, 4, m=2, k=4, max_iters=5)
    _check_result(result, 30, 4)


def test_benchmark_opq_rejects_indivisible_dimension():
    with pytest.raises(ValueError):
        benchmark_opq(30, 5, m=2, k=4, max_iters=5)


def test_main_unknown_evaluation(capsys):
    assert main(["--eval", "xyz"]) == 1
    assert "Unknown evaluation: xyz" in capsys.readouterr().err


def test_main_requires_eval():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2


def test_main_bq_writes_csv(tmp_path):
    out = tmp_path / "bq.csv"
    assert main(["--eval", "bq", "--samples", "12", "20", "--dims", "4", "--output", str(out)]) == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == CSV_HEADER
    rows = list(csv.reader(lines[1:]))
    assert [row[0] for row in rows] == ["12", "20"]
    assert all(row[1] == "4" for row in rows)


def test_main_tsvq_writes_one_row_per_sample_size(tmp_path):
    out = tmp_path / "tsvq.csv"
    assert main(["-e", "tsvq", "--samples", "15", "--dims", "3", "--output", str(out)]) == 0
    rows = list(csv.reader(out.read_text(encoding="utf-8").splitlines()[1:]))
    assert len(rows) == 1
    assert rows[0][0] == "15"
    assert 0.0 <= float(rows[0][5]) <= 1.0