"""
Simulation package initialization.
"""

from lsm_pricer.simulation.paths import PathSimulator

__all__ = ["PathSimulator"]
