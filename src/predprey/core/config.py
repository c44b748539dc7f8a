"""
Configuration classes and defaults for the predator-prey swarm.
"""

from dataclasses import dataclass, field, fields
from typing import List


@dataclass
class SwarmConfig:
    """
    Shared, mutable configuration for the swarm.

    The engine reads these values on every call, so the viewer (or any
    other caller) may change them between steps.
    """

    # Prey grid
    preyRows: int = 100
    preyCols: int = 100
    preySpacing: float = 8.0
    preyAcceleration: float = 0.75
    preyMaxSpeed: float = 70.0
    preySize: float = 1.5

    # Predators
    predCount: int = 2
    predAcceleration: float = 3.0
    predMaxSpeed: float = 300.0
    predSize: float = 3.0

    # Swarm behavior
    attractForce: float = 60.0
    repelForce: float = -80.0
    fearForce: float = -500000.0
    fearRadius: float = 80.0
    killRadius: float = 10.0

    # Boundary cube
    boundarySize: float = 1000.0
    boundaryForce: float = 100.0

    # Visualization
    screenWidth: int = 1200
    screenHeight: int = 800
    fpsTarget: int = 60
    backgroundColor: List[int] = field(default_factory=lambda: [0, 0, 0])
    predatorColor: List[int] = field(default_factory=lambda: [255, 68, 68])

    # Benchmark
    frameDelta: float = 1.0 / 60.0
    statsOutputFile: str = "swarm_stats.json"

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = list(value) if isinstance(value, list) else value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "SwarmConfig":
        """Create config from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


# Default configuration for the interactive viewer
DEFAULT_CONFIG = SwarmConfig()

# Smaller grid so headless runs finish in reasonable time
BENCHMARK_CONFIG = SwarmConfig(
    preyRows=30,
    preyCols=30,
    predCount=3,
)


# Distance from each wall of the boundary cube where containment kicks in
BOUNDARY_MARGIN = 50
