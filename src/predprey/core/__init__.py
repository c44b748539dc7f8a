"""
Core module containing configuration, the prey grid, agents and the swarm.
"""

from .config import SwarmConfig, DEFAULT_CONFIG, BENCHMARK_CONFIG, BOUNDARY_MARGIN
from .prey_grid import PreyGrid
from .swarm import Swarm

__all__ = ['SwarmConfig', 'DEFAULT_CONFIG', 'BENCHMARK_CONFIG', 'BOUNDARY_MARGIN', 'PreyGrid', 'Swarm']
