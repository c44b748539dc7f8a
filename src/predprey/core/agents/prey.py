"""
Prey agent class implementing grid flocking and predator fear.
"""

import math
from typing import List, Optional

import pygame

from .base import Entity

# Squared separation below which a predator is ignored to avoid dividing by ~0
MIN_FEAR_DISTANCE_SQ = 0.001


class Prey(Entity):
    """
    A prey boid tied to its grid neighbors.

    Neighbors further apart than the rest spacing attract each other, closer
    ones repel. Predators within the fear radius push the prey away and
    raise its fear magnitude for this step.
    """

    def __init__(self, position: Optional[pygame.Vector3] = None):
        super().__init__(position)
        self.neighbors: List["Prey"] = []
        self.fear_magnitude = 0.0

    def neighbor_forces(self, config) -> pygame.Vector3:
        """
        Calculate attraction/repulsion toward grid neighbors.

        Args:
            config: Swarm configuration

        Returns:
            Combined neighbor force
        """
        force = pygame.Vector3(0, 0, 0)
        spacing_sq = config.preySpacing * config.preySpacing

        for neighbor in self.neighbors:
            diff = neighbor.position - self.position
            if diff.length_squared() >= spacing_sq:
                force += diff * config.attractForce
            else:
                force += diff * config.repelForce
        return force

    def fear_forces(self, config, predators: list) -> pygame.Vector3:
        """
        Calculate the push away from nearby predators.

        Also writes fear_magnitude, which is reset every call.

        Args:
            config: Swarm configuration
            predators: All predators in the swarm

        Returns:
            Combined fear force
        """
        force = pygame.Vector3(0, 0, 0)
        fear_radius_sq = config.fearRadius * config.fearRadius
        total_fear = 0.0

        for predator in predators:
            diff = predator.position - self.position
            dist_sq = diff.length_squared()
            if MIN_FEAR_DISTANCE_SQ < dist_sq < fear_radius_sq:
                force += diff.normalize() * config.fearForce
                total_fear += abs(config.fearForce) / math.sqrt(dist_sq)

        self.fear_magnitude = total_fear
        return force

    def update(self, config, predators: list, dt: float) -> None:
        """
        Advance the prey by one step.

        Args:
            config: Swarm configuration
            predators: All predators in the swarm
            dt: Elapsed time in seconds
        """
        force = self.neighbor_forces(config)
        force += self.fear_forces(config, predators)
        force += self.boundary_containment(config)

        self.velocity += force * (config.preyAcceleration * dt)
        self.clamp_speed(config.preyMaxSpeed)
        self.advance(dt)
