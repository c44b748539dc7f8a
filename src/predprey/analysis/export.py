"""
Export functions for saving benchmark results to CSV and JSON.
"""

import csv
import json
from typing import Any, Dict, List, Optional

import numpy as np


SUMMARY_FIELDS = [
    'trial', 'total_kills', 'first_kill_frame', 'avg_prey_speed',
    'avg_predator_speed', 'avg_fear', 'max_fear', 'avg_cohesion', 'prey_count',
]


def export_results_to_csv(results: List[Dict], filename: str = "benchmark_results.csv") -> str:
    """
    Export per-trial benchmark results to CSV format.

    Args:
        results: Result dictionaries, one per trial
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=SUMMARY_FIELDS)
        writer.writeheader()

        for index, result in enumerate(results, start=1):
            row = {name: result.get(name, '') for name in SUMMARY_FIELDS}
            row['trial'] = result.get('trial', index)
            if row['first_kill_frame'] is None:
                row['first_kill_frame'] = ''
            writer.writerow(row)

    print(f"\nCSV results saved to: {filename}")
    return filename


def export_timeseries_to_csv(result: Dict, filename: Optional[str] = None) -> str:
    """
    Export the sampled fear, cohesion and kill series of one run to CSV.

    Args:
        result: Result dictionary from a benchmark run
        filename: Output filename (auto-generated if None)

    Returns:
        Path to saved CSV file
    """
    if filename is None:
        filename = f"timeseries_trial{result.get('trial', 1)}.csv"

    cohesion = {e["frame"]: e for e in result["cohesion_over_time"]}
    fear = {e["frame"]: e["avg_fear"] for e in result["fear_over_time"]}
    kills = {e["frame"]: e["kills"] for e in result["kills_over_time"]}

    all_frames = sorted(set(cohesion) | set(fear) | set(kills))

    with open(filename, 'w', newline='') as csvfile:
        fieldnames = ['frame', 'cohesion', 'avg_fear', 'kills', 'prey_count']
        writer = csv.DictWriter(csvfile, fieldnames=fieldnames)
        writer.writeheader()

        for frame in all_frames:
            writer.writerow({
                'frame': frame,
                'cohesion': f"{cohesion[frame]['cohesion']:.2f}" if frame in cohesion else '',
                'avg_fear': f"{fear[frame]:.4f}" if frame in fear else '',
                'kills': kills.get(frame, ''),
                'prey_count': cohesion[frame]['prey_count'] if frame in cohesion else '',
            })

    print(f"  Time series saved to: {filename}")
    return filename


def export_benchmark_report(results: Dict[str, Any], filename: str = "swarm_benchmark_results.json") -> str:
    """
    Export full benchmark report to JSON.

    Args:
        results: Complete benchmark results dictionary
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    with open(filename, 'w') as f:
        json.dump(results, f, indent=2)

    print(f"\nBenchmark report saved to: {filename}")
    return filename


def calculate_aggregate_stats(trial_results: List[Dict]) -> Dict[str, float]:
    """
    Calculate mean and standard deviation across trials.

    Args:
        trial_results: List of result dictionaries from multiple trials

    Returns:
        Dictionary with mean and std for each metric
    """
    if not trial_results:
        return {}

    metrics = [
        "total_kills", "kills_per_frame", "first_kill_frame",
        "total_distance_traveled", "avg_prey_speed", "avg_predator_speed",
        "avg_fear", "max_fear", "avg_cohesion", "elapsed_time_seconds",
    ]

    aggregates = {}

    for metric in metrics:
        values = [r[metric] for r in trial_results if r.get(metric) is not None]
        if values:
            arr = np.asarray(values, dtype=float)
            aggregates[f"{metric}_mean"] = float(arr.mean())
            # Sample standard deviation; a single trial has none
            aggregates[f"{metric}_std"] = float(arr.std(ddof=1)) if len(arr) > 1 else 0.0

    return aggregates
