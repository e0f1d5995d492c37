"""
Models package initialization.
"""

from lsm_pricer.models.base import Shocks, StochasticProcess
from lsm_pricer.models.gbm import GeometricBrownianMotion
from lsm_pricer.models.jump_diffusion import JumpDiffusionProcess

__all__ = [
    "GeometricBrownianMotion",
    "JumpDiffusionProcess",
    "Shocks",
    "StochasticProcess",
]
