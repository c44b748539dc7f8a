"""
Headless benchmark simulation for data collection.
"""

import random
import time
from typing import Any, Dict, Optional

import numpy as np

from ..core.config import SwarmConfig
from ..core.swarm import Swarm


# Frames between time-series samples
STATS_TRACKING_INTERVAL = 10


def prey_positions(swarm: Swarm) -> np.ndarray:
    """Positions of all prey as an (n, 3) array, row-major."""
    return np.array([tuple(p.position) for p in swarm.iter_prey()], dtype=float).reshape(-1, 3)


def prey_velocities(swarm: Swarm) -> np.ndarray:
    """Velocities of all prey as an (n, 3) array, row-major."""
    return np.array([tuple(p.velocity) for p in swarm.iter_prey()], dtype=float).reshape(-1, 3)


def flock_cohesion(positions: np.ndarray) -> float:
    """Mean distance of the prey to their centroid (0 for an empty grid)."""
    if len(positions) == 0:
        return 0.0
    centroid = positions.mean(axis=0)
    return float(np.linalg.norm(positions - centroid, axis=1).mean())


class BenchmarkSimulation:
    """
    Runs a swarm for a fixed number of frames without any display.

    Steps with a constant frame delta and collects statistics about the
    flock and the predators as it goes.
    """

    def __init__(self, config: SwarmConfig, seed: Optional[int] = None):
        """
        Initialize benchmark simulation.

        Args:
            config: Swarm configuration
            seed: Seed for the swarm's random number source
        """
        self.config = config
        self.swarm = Swarm(config, random.Random(seed))
        self.start_time = time.time()

        self.stats = {
            "avg_prey_speed": 0.0,
            "avg_fear": 0.0,
            "max_fear": 0.0,
            "avg_cohesion": 0.0,
            "avg_predator_speed": 0.0,
            "predator_speed_samples": 0,
            "first_kill_frame": None,
            "kills_over_time": [],
            "fear_over_time": [],
            "cohesion_over_time": [],
        }

    @property
    def frame_count(self) -> int:
        return self.swarm.frame_count

    def update(self) -> None:
        """Advance the swarm one frame and record statistics."""
        self.swarm.step(self.config.frameDelta)
        self._update_statistics()

    def _update_statistics(self) -> None:
        """Update tracking statistics."""
        kills = self.swarm.total_kills()
        if kills > 0 and self.stats["first_kill_frame"] is None:
            self.stats["first_kill_frame"] = self.frame_count

        if self.swarm.predators:
            total_speed = sum(pred.velocity.length() for pred in self.swarm.predators)
            self.stats["avg_predator_speed"] += total_speed / len(self.swarm.predators)
            self.stats["predator_speed_samples"] += 1

        if self.swarm.prey_count() == 0:
            return

        positions = prey_positions(self.swarm)
        speeds = np.linalg.norm(prey_velocities(self.swarm), axis=1)
        fear = np.array([p.fear_magnitude for p in self.swarm.iter_prey()], dtype=float)

        cohesion = flock_cohesion(positions)
        self.stats["avg_prey_speed"] = float(speeds.mean())
        self.stats["avg_fear"] = float(fear.mean())
        self.stats["max_fear"] = max(self.stats["max_fear"], float(fear.max()))
        self.stats["avg_cohesion"] = cohesion

        if self.frame_count % STATS_TRACKING_INTERVAL == 0:
            self.stats["cohesion_over_time"].append({
                "frame": self.frame_count,
                "cohesion": cohesion,
                "prey_count": self.swarm.prey_count(),
            })
            self.stats["fear_over_time"].append({
                "frame": self.frame_count,
                "avg_fear": self.stats["avg_fear"],
            })
            self.stats["kills_over_time"].append({
                "frame": self.frame_count,
                "kills": kills,
            })

    def run_benchmark(self, max_frames: int, verbose: bool = True) -> Dict[str, Any]:
        """
        Run benchmark for specified number of frames.

        Args:
            max_frames: Number of frames to simulate
            verbose: Print progress every 1000 frames

        Returns:
            Results dictionary with all statistics
        """
        if verbose:
            print(f"Running benchmark for {max_frames} frames...")

        while self.frame_count < max_frames:
            self.update()

            if verbose and self.frame_count % 1000 == 0:
                elapsed = time.time() - self.start_time
                progress = (self.frame_count / max_frames) * 100
                print(f"  Progress: {progress:.1f}% ({self.frame_count}/{max_frames} frames, "
                      f"{elapsed:.1f}s elapsed, {self.swarm.total_kills()} kills)")

        return self.get_results()

    def get_results(self) -> Dict[str, Any]:
        """
        Get benchmark results.

        Returns:
            Dictionary containing all statistics and derived metrics
        """
        elapsed = time.time() - self.start_time

        avg_pred_speed = 0.0
        if self.stats["predator_speed_samples"] > 0:
            avg_pred_speed = self.stats["avg_predator_speed"] / self.stats["predator_speed_samples"]

        total_kills = self.swarm.total_kills()
        kills_per_frame = total_kills / self.frame_count if self.frame_count > 0 else 0.0
        distance = sum(pred.distance_traveled for pred in self.swarm.predators)

        return {
            "frames": self.frame_count,
            "elapsed_time_seconds": elapsed,
            "prey_count": self.swarm.prey_count(),
            "predator_count": len(self.swarm.predators),
            "total_kills": total_kills,
            "kills_per_frame": kills_per_frame,
            "first_kill_frame": self.stats["first_kill_frame"],
            "total_distance_traveled": distance,
            "avg_prey_speed": self.stats["avg_prey_speed"],
            "avg_predator_speed": avg_pred_speed,
            "avg_fear": self.stats["avg_fear"],
            "max_fear": self.stats["max_fear"],
            "avg_cohesion": self.stats["avg_cohesion"],
            "kills_over_time": self.stats["kills_over_time"],
            "fear_over_time": self.stats["fear_over_time"],
            "cohesion_over_time": self.stats["cohesion_over_time"],
        }
