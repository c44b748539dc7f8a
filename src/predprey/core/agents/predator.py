"""
Predator agent class implementing target pursuit.
"""

import random
from typing import Optional

import pygame

from .base import Entity


class Predator(Entity):
    """
    A predator that chases one randomly chosen prey at a time.

    Once it gets within the kill radius of its target it picks a new random
    target. The caught prey stays in the grid; a "kill" only resets the
    chase.
    """

    def __init__(self, position: Optional[pygame.Vector3] = None):
        """
        Initialize a predator.

        Args:
            position: Initial position
        """
        super().__init__(position)
        self.target = None
        self.attack_vector = pygame.Vector3(0, 0, 0)

        # For benchmark tracking
        self.kills = 0
        self.distance_traveled = 0.0

    def needs_target(self, config) -> bool:
        """Whether the predator has no target or has just caught it."""
        if self.target is None:
            return True
        return self.attack_vector.length_squared() < config.killRadius * config.killRadius

    def acquire_target(self, prey_grid, rng=random) -> None:
        """
        Pick a uniformly random prey from the grid.

        Keeps the current target when the grid is empty.

        Args:
            prey_grid: PreyGrid to choose from
            rng: Random number source
        """
        prey = prey_grid.random_cell(rng)
        if prey is None:
            return
        if self.target is not None:
            self.kills += 1
        self.target = prey

    def pursuit(self) -> pygame.Vector3:
        """
        Calculate the force toward the current target.

        Caches it as attack_vector so the next update can tell whether the
        target was reached.

        Returns:
            Pursuit force (zero without a target)
        """
        if self.target is None:
            return pygame.Vector3(0, 0, 0)
        self.attack_vector = self.target.position - self.position
        return pygame.Vector3(self.attack_vector)

    def update(self, config, prey_grid, dt: float, rng=random) -> None:
        """
        Advance the predator by one step.

        Args:
            config: Swarm configuration
            prey_grid: PreyGrid holding every prey
            dt: Elapsed time in seconds
            rng: Random number source used for re-targeting
        """
        if self.needs_target(config):
            self.acquire_target(prey_grid, rng)

        force = self.pursuit()
        force += self.boundary_containment(config)

        # Prey acceleration scales predators too
        self.velocity += force * (config.predAcceleration * config.preyAcceleration * dt)
        self.clamp_speed(config.predMaxSpeed)
        self.advance(dt)

        self.distance_traveled += self.velocity.length() * dt
