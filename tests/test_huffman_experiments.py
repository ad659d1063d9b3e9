import csv

import pytest

import huffman_experiments as exp
from huffman_tree import ALPHABET_SIZE


@pytest.mark.parametrize("name", sorted(exp.GENERATOR_REGISTRY))
def test_generators_stay_in_alphabet(name):
    data = exp.generate_dataset(name, 2048, seed=7)
    assert len(data) == 2048
    assert max(data) < ALPHABET_SIZE


def test_generators_are_seeded():
    assert exp.generate_dataset("zipf128", 512, 1) == exp.generate_dataset("zipf128", 512, 1)


def test_unknown_generator():
    with pytest.raises(ValueError):
        exp.generate_dataset("uniform256", 16, 0)


def test_run_one():
    data = exp.generate_dataset("repetitive99", 4096, 3)
    row = exp.run_one(data, "exp1_distribution", "repetitive99", 1)
    assert row.correctness_ok == 1
    assert row.file_size_bytes == 4096
    assert row.bits_per_symbol < 8
    assert row.code_book_bytes > 0
    assert row.dataset_name == "repetitive99"
    assert row.build_ms >= 0
    assert row.total_ms == row.build_ms + row.encode_ms + row.decode_ms
    assert row.avg_code_length < row.bits_per_symbol


def test_run_one_code_length_excludes_framing():
    row = exp.run_one(b"abb")
    assert row.avg_code_length == 1.0
    assert row.bits_per_symbol == 8 / 3
    assert row.compressed_bytes == 1


def test_mean_stdev():
    assert exp.mean_stdev([2.0]) == (2.0, 0.0)
    assert exp.mean_stdev([1.0, 3.0])[0] == 2.0


def test_main_writes_csv_and_charts(tmp_path, capsys):
    rc = exp.main([
        "--outdir", str(tmp_path), "--runs", "1",
        "--exp1_size_kb", "1", "--exp1_generators", "zipf64,english_like",
        "--exp2_min_kb", "1", "--exp2_max_kb", "2", "--exp2_generators", "repetitive99",
    ])
    assert rc == 0

    with (tmp_path / "metrics.csv").open(encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 4
    assert all(r["correctness_ok"] == "1" for r in rows)

    with (tmp_path / "summary.csv").open(encoding="utf-8") as f:
        summary = list(csv.DictReader(f))
    assert len(summary) == 4
    assert all(float(r["correctness_ok_rate"]) == 1.0 for r in summary)

    for name in ("exp1_bits_per_symbol.png", "exp1_time.png",
                 "exp2_time_repetitive99.png", "exp2_compression_ratio_repetitive99.png"):
        assert (tmp_path / name).exists()
    assert "Correctness rate across all runs: 1.000" in capsys.readouterr().out
