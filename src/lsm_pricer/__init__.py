"""
Longstaff-Schwartz Monte Carlo Pricer

Least-squares Monte Carlo valuation of American options under diffusion
and jump-diffusion dynamics, with convergence diagnostics.
"""

from lsm_pricer._version import __version__

# Core components
from lsm_pricer.analysis.convergence import (
    ConvergenceAnalyzer,
    ConvergenceRow,
    OutOfSampleTrial,
)
from lsm_pricer.basis import (
    ConstantBasis,
    HermiteBasis,
    LaguerreBasis,
    MonomialBasis,
    make_basis_set,
    make_hermite_set,
    make_laguerre_set,
    make_monomial_set,
)
from lsm_pricer.config import LSMConfig
from lsm_pricer.models.gbm import GeometricBrownianMotion
from lsm_pricer.models.jump_diffusion import JumpDiffusionProcess
from lsm_pricer.payoffs.plain_vanilla import CallPayoff, PutPayoff, make_payoff
from lsm_pricer.pricers.lsm import ExercisePolicy, LSMPricer, SimulationResult
from lsm_pricer.simulation.paths import PathSimulator

# Analytics
from lsm_pricer.analytics.black_scholes import bs_price

__all__ = [
    # Version
    "__version__",
    # Configuration
    "LSMConfig",
    # Models
    "GeometricBrownianMotion",
    "JumpDiffusionProcess",
    # Payoffs
    "CallPayoff",
    "PutPayoff",
    "make_payoff",
    # Basis
    "ConstantBasis",
    "HermiteBasis",
    "LaguerreBasis",
    "MonomialBasis",
    "make_basis_set",
    "make_hermite_set",
    "make_laguerre_set",
    "make_monomial_set",
    # Simulation and pricing
    "PathSimulator",
    "LSMPricer",
    "SimulationResult",
    "ExercisePolicy",
    # Analysis
    "ConvergenceAnalyzer",
    "ConvergenceRow",
    "OutOfSampleTrial",
    # Analytics
    "bs_price",
]
