"""
Main entry point for the predator-prey swarm.

Run with:
    python -m predprey.main              # Interactive viewer
    python -m predprey.main --benchmark  # Headless benchmark
"""

import os

from .core.config import SwarmConfig, BENCHMARK_CONFIG, DEFAULT_CONFIG


def set_headless():
    """Enable headless mode for benchmarking."""
    os.environ["SDL_VIDEODRIVER"] = "dummy"


def apply_overrides(config: SwarmConfig, args) -> SwarmConfig:
    """Copy grid and predator overrides from the command line into config."""
    if args.rows is not None:
        config.preyRows = args.rows
    if args.cols is not None:
        config.preyCols = args.cols
    if args.predators is not None:
        config.predCount = args.predators
    return config


def run_interactive(config: SwarmConfig):
    """Run the interactive viewer."""
    from .simulation.interactive import Simulation

    print("=" * 60)
    print("Predator-Prey Swarm")
    print("=" * 60)
    print("\nControls:")
    print("  ESC          - Quit")
    print("  R / Shift+R  - Add / remove prey row")
    print("  C / Shift+C  - Add / remove prey column")
    print("  P / Shift+P  - Add / remove predator")
    print("  [ / ]        - Shrink / grow fear radius")
    print("  Arrows       - Orbit camera")
    print("  W / S        - Zoom in / out")
    print("  SPACE        - Save stats to JSON")
    print("\nStarting simulation...")

    sim = Simulation(config)
    sim.run()


def run_benchmark(config: SwarmConfig, num_trials: int = 3, duration: int = 3000,
                  seed: int = 42, show_plots: bool = True):
    """
    Run several headless trials and export their statistics.

    Args:
        config: Base swarm configuration, copied for every trial
        num_trials: Number of trials
        duration: Duration in frames per trial
        seed: Seed of the first trial; trial n uses seed + n - 1
        show_plots: Open plot windows after saving them
    """
    set_headless()

    from .simulation.benchmark import BenchmarkSimulation
    from .analysis.export import (
        export_results_to_csv, export_timeseries_to_csv,
        export_benchmark_report, calculate_aggregate_stats,
    )
    from .analysis.plotting import plot_fear_and_cohesion, plot_cumulative_kills

    print("=" * 60)
    print("SWARM BENCHMARK")
    print("=" * 60)
    print(f"Grid: {config.preyRows}x{config.preyCols} prey, {config.predCount} predators")
    print(f"Duration per trial: {duration} frames")
    print(f"Trials: {num_trials}")
    print()

    base_config = config.to_dict()
    results = []
    for trial in range(num_trials):
        print(f"\nTrial {trial + 1}/{num_trials}")
        sim = BenchmarkSimulation(SwarmConfig.from_dict(base_config), seed=seed + trial)
        result = sim.run_benchmark(duration)
        result["trial"] = trial + 1
        results.append(result)

    aggregates = calculate_aggregate_stats(results)
    report = {
        "benchmark_config": {"duration_frames": duration, "trials": num_trials, "seed": seed},
        "config": base_config,
        "trial_results": results,
        "aggregates": aggregates,
    }

    export_benchmark_report(report)
    export_results_to_csv(results)
    for result in results:
        export_timeseries_to_csv(result)

    print("\n" + "=" * 60)
    print("BENCHMARK RESULTS SUMMARY")
    print("=" * 60)
    print(f"   Kills: {aggregates.get('total_kills_mean', 0):.2f} ± {aggregates.get('total_kills_std', 0):.2f}")
    print(f"   Avg Fear: {aggregates.get('avg_fear_mean', 0):.4f}")
    print(f"   Cohesion: {aggregates.get('avg_cohesion_mean', 0):.2f}")
    print(f"   Prey Speed: {aggregates.get('avg_prey_speed_mean', 0):.2f}")

    print("\nGenerating plots...")
    plot_fear_and_cohesion(results, show=show_plots)
    plot_cumulative_kills(results, show=show_plots)

    return report


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Predator-Prey Swarm Simulation")
    parser.add_argument("--benchmark", action="store_true", help="Run headless benchmark")
    parser.add_argument("--trials", type=int, default=3, help="Number of benchmark trials")
    parser.add_argument("--duration", type=int, default=3000, help="Benchmark duration in frames")
    parser.add_argument("--seed", type=int, default=42, help="Seed of the first benchmark trial")
    parser.add_argument("--rows", type=int, default=None, help="Prey grid rows")
    parser.add_argument("--cols", type=int, default=None, help="Prey grid columns")
    parser.add_argument("--predators", type=int, default=None, help="Number of predators")
    parser.add_argument("--no-show", action="store_true", help="Save plots without opening them")

    args = parser.parse_args()

    if args.benchmark:
        config = apply_overrides(SwarmConfig.from_dict(BENCHMARK_CONFIG.to_dict()), args)
        run_benchmark(
            config,
            num_trials=args.trials,
            duration=args.duration,
            seed=args.seed,
            show_plots=not args.no_show,
        )
    else:
        run_interactive(apply_overrides(SwarmConfig.from_dict(DEFAULT_CONFIG.to_dict()), args))


if __name__ == "__main__":
    main()
