"""
Test suite for the headless benchmark and the export helpers.
"""

import csv
import json

import numpy as np
import pytest

from predprey.analysis.export import (
    calculate_aggregate_stats,
    export_benchmark_report,
    export_results_to_csv,
    export_timeseries_to_csv,
)
from predprey.core.config import SwarmConfig
from predprey.simulation.benchmark import BenchmarkSimulation, flock_cohesion


def small_config():
    return SwarmConfig(preyRows=3, preyCols=3, predCount=2)


@pytest.fixture
def result():
    sim = BenchmarkSimulation(small_config(), seed=5)
    return sim.run_benchmark(30, verbose=False)


class TestFlockCohesion:

    def test_empty(self):
        assert flock_cohesion(np.zeros((0, 3))) == 0.0

    def test_symmetric_pair(self):
        positions = np.array([[0.0, 0.0, 0.0], [2.0, 0.0, 0.0]])
        assert flock_cohesion(positions) == pytest.approx(1.0)


class TestBenchmarkSimulation:

    def test_result_fields(self, result):
        assert result["frames"] == 30
        assert result["prey_count"] == 9
        assert result["predator_count"] == 2
        assert len(result["cohesion_over_time"]) == 3
        assert len(result["fear_over_time"]) == 3
        assert len(result["kills_over_time"]) == 3
        assert result["avg_cohesion"] > 0
        assert result["total_kills"] >= 0

    def test_same_seed_same_run(self):
        a = BenchmarkSimulation(small_config(), seed=11).run_benchmark(20, verbose=False)
        b = BenchmarkSimulation(small_config(), seed=11).run_benchmark(20, verbose=False)
        assert a["avg_cohesion"] == b["avg_cohesion"]
        assert a["total_kills"] == b["total_kills"]

    def test_result_is_json_serialisable(self, result):
        json.dumps(result)

    def test_no_predators(self):
        config = small_config()
        config.predCount = 0
        result = BenchmarkSimulation(config, seed=1).run_benchmark(10, verbose=False)
        assert result["avg_fear"] == 0
        assert result["avg_predator_speed"] == 0
        assert result["first_kill_frame"] is None


class TestExport:

    def test_results_csv(self, tmp_path, result):
        result["trial"] = 1
        path = export_results_to_csv([result, dict(result, trial=2)], str(tmp_path / "out.csv"))

        with open(path, newline='') as f:
            rows = list(csv.DictReader(f))
        assert [r["trial"] for r in rows] == ["1", "2"]
        assert rows[0]["prey_count"] == "9"

    def test_timeseries_csv(self, tmp_path, result):
        path = export_timeseries_to_csv(result, str(tmp_path / "ts.csv"))

        with open(path, newline='') as f:
            rows = list(csv.DictReader(f))
        assert [int(r["frame"]) for r in rows] == [10, 20, 30]

    def test_report_json(self, tmp_path):
        path = export_benchmark_report({"a": 1}, str(tmp_path / "r.json"))
        with open(path) as f:
            assert json.load(f) == {"a": 1}

    def test_aggregate_stats(self):
        trials = [
            {"total_kills": 2, "first_kill_frame": None},
            {"total_kills": 4, "first_kill_frame": 10},
        ]
        agg = calculate_aggregate_stats(trials)
        assert agg["total_kills_mean"] == pytest.approx(3.0)
        assert agg["total_kills_std"] == pytest.approx(np.sqrt(2.0))
        assert agg["first_kill_frame_mean"] == pytest.approx(10.0)
        assert agg["first_kill_frame_std"] == 0.0

    def test_aggregate_stats_empty(self):
        assert calculate_aggregate_stats([]) == {}
