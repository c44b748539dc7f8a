"""
Simulation module containing the interactive viewer and the benchmark runner.
"""

from .interactive import Simulation
from .benchmark import BenchmarkSimulation

__all__ = ['Simulation', 'BenchmarkSimulation']
