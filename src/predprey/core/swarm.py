"""
Swarm orchestration: one simulation step plus structural edits.
"""

import random
from typing import Iterator, List, Optional

import pygame

from .agents.predator import Predator
from .agents.prey import Prey
from .config import SwarmConfig
from .prey_grid import PreyGrid


class Swarm:
    """
    Owns the prey grid and the predator roster.

    The configuration is shared with whoever created the swarm and is read
    fresh on every call. Entities are updated in place: prey in row-major
    order, then predators in roster order. A prey therefore sees the
    already-updated state of neighbors earlier in the traversal and the
    previous frame's state of later ones.
    """

    def __init__(self, config: Optional[SwarmConfig] = None, rng: Optional[random.Random] = None):
        """
        Initialize the swarm from configuration.

        Args:
            config: Shared swarm configuration (defaults if None)
            rng: Random number source (a fresh one if None)
        """
        self.config = config if config is not None else SwarmConfig()
        self.rng = rng if rng is not None else random.Random()
        self.prey_grid = PreyGrid()
        self.predators: List[Predator] = []
        self.frame_count = 0
        self.reset()

    def reset(self) -> None:
        """Rebuild prey grid and predators from the current configuration."""
        self.prey_grid = PreyGrid.build(
            int(self.config.preyRows),
            int(self.config.preyCols),
            self.config.preySpacing,
            self.config.boundarySize,
            self.rng,
        )
        self.predators = [self._spawn_predator() for _ in range(int(self.config.predCount))]
        self.frame_count = 0

    def _spawn_predator(self) -> Predator:
        bounds = self.config.boundarySize
        return Predator(pygame.Vector3(
            self.rng.random() * bounds,
            self.rng.random() * bounds,
            self.rng.random() * bounds,
        ))

    def step(self, dt: float) -> None:
        """
        Advance the whole swarm by dt seconds.

        Args:
            dt: Elapsed time in seconds
        """
        for prey in self.prey_grid:
            prey.update(self.config, self.predators, dt)

        for predator in self.predators:
            predator.update(self.config, self.prey_grid, dt, self.rng)

        self.frame_count += 1

    def _forget_prey(self, removed: List[Prey]) -> None:
        """Clear predator targets that point at removed prey."""
        if not removed:
            return
        gone = {id(prey) for prey in removed}
        for predator in self.predators:
            if predator.target is not None and id(predator.target) in gone:
                predator.target = None

    def add_prey_row(self) -> None:
        self.prey_grid.grow_row(int(self.config.preyCols))
        self.config.preyRows = self.prey_grid.rows
        self.config.preyCols = self.prey_grid.cols

    def remove_prey_row(self) -> None:
        self._forget_prey(self.prey_grid.shrink_row())
        self.config.preyRows = self.prey_grid.rows

    def add_prey_column(self) -> None:
        self.prey_grid.grow_column()
        # An empty grid keeps the configured width for its first row
        if self.prey_grid.rows > 0:
            self.config.preyCols = self.prey_grid.cols

    def remove_prey_column(self) -> None:
        self._forget_prey(self.prey_grid.shrink_column())
        self.config.preyCols = self.prey_grid.cols

    def add_predator(self) -> None:
        """Add a predator at a random point in the boundary cube."""
        self.predators.append(self._spawn_predator())
        self.config.predCount = len(self.predators)

    def remove_predator(self) -> None:
        """Remove the last predator, if any."""
        if self.predators:
            self.predators.pop()
            self.config.predCount = len(self.predators)

    def prey_count(self) -> int:
        """Number of prey in the live grid."""
        return self.prey_grid.rows * self.prey_grid.cols

    def iter_prey(self) -> Iterator[Prey]:
        """Iterate over prey in row-major order."""
        return iter(self.prey_grid)

    def prey(self) -> List[Prey]:
        return list(self.prey_grid)

    def total_kills(self) -> int:
        return sum(predator.kills for predator in self.predators)
