"""
Analysis package initialization.
"""

from lsm_pricer.analysis.convergence import (
    DEFAULT_BASIS_SIZE,
    ConvergenceAnalyzer,
    ConvergenceRow,
    OutOfSampleTrial,
)

__all__ = [
    "DEFAULT_BASIS_SIZE",
    "ConvergenceAnalyzer",
    "ConvergenceRow",
    "OutOfSampleTrial",
]
