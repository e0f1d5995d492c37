"""
Pricers package initialization.
"""

from lsm_pricer.pricers.lsm import (
    ExercisePolicy,
    LSMPricer,
    SimulationResult,
    exercise_flags,
)

__all__ = [
    "ExercisePolicy",
    "LSMPricer",
    "SimulationResult",
    "exercise_flags",
]
