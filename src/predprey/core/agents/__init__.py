"""
Agent classes for the swarm simulation.
"""

from .base import Entity
from .prey import Prey
from .predator import Predator

__all__ = ['Entity', 'Prey', 'Predator']
