"""
Base Entity class for all swarm members.
"""

from typing import Optional

import pygame

from ..config import BOUNDARY_MARGIN


class Entity:
    """
    Base class for prey and predators.

    Owns a position and a velocity. Subclasses compute their own forces;
    this class only provides the pieces both of them share.
    """

    def __init__(self, position: Optional[pygame.Vector3] = None):
        """
        Initialize an entity.

        Args:
            position: Initial position (copied), origin if None
        """
        self.position = pygame.Vector3(position) if position is not None else pygame.Vector3(0, 0, 0)
        self.velocity = pygame.Vector3(0, 0, 0)

    def boundary_containment(self, config) -> pygame.Vector3:
        """
        Calculate the force pushing the entity back inside the boundary cube.

        Each axis is handled on its own, so corners get pushed on several
        axes at once.

        Args:
            config: Swarm configuration

        Returns:
            Containment force vector
        """
        force = pygame.Vector3(0, 0, 0)
        bounds = config.boundarySize
        for axis in range(3):
            coord = self.position[axis]
            if coord < BOUNDARY_MARGIN:
                force[axis] = (BOUNDARY_MARGIN - coord) * config.boundaryForce
            elif coord > bounds - BOUNDARY_MARGIN:
                force[axis] = -(coord - (bounds - BOUNDARY_MARGIN)) * config.boundaryForce
        return force

    def clamp_speed(self, max_speed: float) -> None:
        """
        Rescale velocity to max_speed if it is faster.

        Args:
            max_speed: Speed limit
        """
        speed = self.velocity.length()
        # pygame cannot rescale a zero vector
        if speed > max_speed and speed > 0:
            self.velocity.scale_to_length(max_speed)

    def advance(self, dt: float) -> None:
        """Move the entity along its velocity for dt seconds."""
        self.position += self.velocity * dt
