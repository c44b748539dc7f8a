"""
Predator-prey swarm simulation.
"""

from .core import Swarm, SwarmConfig

__all__ = ['Swarm', 'SwarmConfig']
