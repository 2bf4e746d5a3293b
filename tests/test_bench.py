"""Tests for bench — single vs parallel timing."""

from __future__ import annotations

import pytest

import bench
from monte_carlo import DEFAULT_NUMBER_OF_SAMPLES, InvalidArgument


@pytest.fixture()
def recorded_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(bench, "estimate", lambda samples: calls.append(("single", samples)))
    monkeypatch.setattr(
        bench,
        "parallel_estimate",
        lambda samples, workers, backend: calls.append((backend, samples, workers)),
    )
    return calls


class TestRunBenchmark:
    def test_times_every_case(self):
        timings = bench.run_benchmark(2_000, 2, rounds=1)
        assert list(timings) == ["single", "thread", "process"]
        assert all(elapsed >= 0.0 for elapsed in timings.values())

    def test_runs_each_case_per_round(self, recorded_calls):
        bench.run_benchmark(500, 3, rounds=2)
        assert recorded_calls == [
            ("single", 500),
            ("single", 500),
            ("thread", 500, 3),
            ("thread", 500, 3),
            ("process", 500, 3),
            ("process", 500, 3),
        ]

    def test_zero_rounds_rejected(self):
        with pytest.raises(InvalidArgument):
            bench.run_benchmark(100, 2, rounds=0)


class TestMain:
    def test_prints_timings_and_speedup(self, monkeypatch, capsys):
        calls = []

        def fake(samples, workers, rounds):
            calls.append((samples, workers, rounds))
            return {"single": 0.4, "thread": 0.2, "process": 0.1}

        monkeypatch.setattr(bench, "run_benchmark", fake)
        monkeypatch.setattr(bench.os, "cpu_count", lambda: 4)
        assert bench.main(["bench.py"]) == 0
        assert calls == [(DEFAULT_NUMBER_OF_SAMPLES, 4, bench.DEFAULT_ROUNDS)]
        out = capsys.readouterr().out.splitlines()
        assert out == [
            f"Benchmarking {DEFAULT_NUMBER_OF_SAMPLES} samples, best of 5, 4 workers",
            "Single took 400.00ms",
            "Thread took 200.00ms",
            "Process took 100.00ms",
            "Thread speedup: 2.00x",
            "Process speedup: 4.00x",
        ]

    def test_custom_arguments(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            bench,
            "run_benchmark",
            lambda samples, workers, rounds: calls.append((samples, rounds))
            or {"single": 0.0, "thread": 0.0, "process": 0.0},
        )
        assert bench.main(["bench.py", "1000", "2"]) == 0
        assert calls == [(1000, 2)]

    def test_non_integer_argument(self, capsys):
        assert bench.main(["bench.py", "many"]) == 1
        assert "Usage:" in capsys.readouterr().err

    def test_zero_rounds_reported(self, capsys):
        assert bench.main(["bench.py", "1000", "0"]) == 1
        assert "rounds must be at least 1" in capsys.readouterr().err

    def test_too_many_arguments(self, capsys):
        assert bench.main(["bench.py", "1", "2", "3"]) == 1
        assert "Usage:" in capsys.readouterr().err
