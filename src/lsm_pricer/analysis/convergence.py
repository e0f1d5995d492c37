"""
Convergence and stability diagnostics for the LSM pricer.

Each procedure rebuilds the pricer while varying a single axis (basis size,
path count, or the path set the policy is evaluated on) and records the
resulting value and standard error.
"""

import logging
from dataclasses import replace
from typing import NamedTuple

import numpy as np

from lsm_pricer.basis.sets import make_basis_set
from lsm_pricer.config import LSMConfig
from lsm_pricer.models.gbm import GeometricBrownianMotion
from lsm_pricer.models.jump_diffusion import JumpDiffusionProcess
from lsm_pricer.payoffs.plain_vanilla import make_payoff
from lsm_pricer.pricers.lsm import LSMPricer, SimulationResult

LOGGER = logging.getLogger(__name__)

DEFAULT_BASIS_SIZE = 3


class ConvergenceRow(NamedTuple):
    """One point of a convergence series."""
    parameter: int
    value: float
    standard_error: float


class OutOfSampleTrial(NamedTuple):
    """In-sample fit and out-of-sample re-pricing of the same policy."""
    in_sample: SimulationResult
    out_of_sample: SimulationResult

    @property
    def difference(self) -> float:
        return self.out_of_sample.option_value - self.in_sample.option_value


class ConvergenceAnalyzer:
    """
    Runs the LSM pricer repeatedly to characterise estimator behaviour.

    Parameters
    ----------
    option_type : str, optional
        'put' or 'call' (default: 'put')
    basis_family : str, optional
        'laguerre', 'hermite' or 'monomial' (default: 'laguerre')
    basis_size : int, optional
        Basis size used when the basis is not the axis being varied
    process : str, optional
        'gbm' or 'jump' (default: 'gbm')
    jump_intensity : float, optional
        Jump intensity for the 'jump' process (default: 0.0)
    jump_mean : float, optional
        Mean log jump size for the 'jump' process (default: -0.1)
    jump_std : float, optional
        Std of log jump size for the 'jump' process (default: 0.15)
    """

    def __init__(
        self,
        option_type: str = "put",
        basis_family: str = "laguerre",
        basis_size: int = DEFAULT_BASIS_SIZE,
        process: str = "gbm",
        jump_intensity: float = 0.0,
        jump_mean: float = -0.1,
        jump_std: float = 0.15
    ):
        if option_type not in ["call", "put"]:
            raise ValueError("option_type must be 'call' or 'put'")
        if process not in ["gbm", "jump"]:
            raise ValueError("process must be 'gbm' or 'jump'")
        # Fail fast on an unknown family or unsupported size
        make_basis_set(basis_family, basis_size)

        self.option_type = option_type
        self.basis_family = basis_family
        self.basis_size = basis_size
        self.process = process
        self.jump_intensity = jump_intensity
        self.jump_mean = jump_mean
        self.jump_std = jump_std

    def _make_pricer(
        self,
        config: LSMConfig,
        strike: float,
        volatility: float,
        basis_size: int | None = None
    ) -> LSMPricer:
        if self.process == "jump":
            process = JumpDiffusionProcess(
                r=config.risk_free_rate,
                sigma=volatility,
                jump_intensity=self.jump_intensity,
                jump_mean=self.jump_mean,
                jump_std=self.jump_std,
            )
        else:
            process = GeometricBrownianMotion(r=config.risk_free_rate, sigma=volatility)

        size = self.basis_size if basis_size is None else basis_size
        return LSMPricer(
            config=config,
            process=process,
            payoff=make_payoff(self.option_type, strike),
            basis=make_basis_set(self.basis_family, size),
        )

    def analyze_by_basis_functions(
        self,
        config: LSMConfig,
        spot: float,
        strike: float,
        volatility: float,
        max_basis_size: int
    ) -> list[ConvergenceRow]:
        """
        Value and standard error for basis sizes M = 1..max_basis_size.

        Paths and seed are held fixed, so differences between rows come from
        the regression alone. The value typically rises then plateaus in M.
        """
        if max_basis_size < 1:
            raise ValueError("max_basis_size must be at least 1")

        rows = []
        for m in range(1, max_basis_size + 1):
            result = self._make_pricer(config, strike, volatility, basis_size=m).price(spot)
            rows.append(ConvergenceRow(m, result.option_value, result.standard_error))
            LOGGER.info("M=%d value=%.6f se=%.6f", m, result.option_value, result.standard_error)
        return rows

    def analyze_by_path_count(
        self,
        config: LSMConfig,
        spot: float,
        strike: float,
        volatility: float,
        path_counts: list[int]
    ) -> list[ConvergenceRow]:
        """
        Value and standard error for each path count, seed held fixed.

        The standard error is expected to shrink like 1/sqrt(N).
        """
        rows = []
        for n_paths in path_counts:
            cfg = replace(config, n_paths=n_paths)
            result = self._make_pricer(cfg, strike, volatility).price(spot)
            rows.append(ConvergenceRow(n_paths, result.option_value, result.standard_error))
            LOGGER.info(
                "N=%d value=%.6f se=%.6f", n_paths, result.option_value, result.standard_error
            )
        return rows

    def out_of_sample_test(
        self,
        config: LSMConfig,
        spot: float,
        strike: float,
        volatility: float,
        trials: int
    ) -> list[OutOfSampleTrial]:
        """
        Fit the exercise policy on one path set and re-price it on another.

        Each trial draws two independent seeds spawned from ``config.rng_seed``.
        The in-sample result comes from the usual backward induction; the
        out-of-sample result applies the fitted coefficients, without
        re-fitting, to paths simulated from the second seed.
        """
        if trials < 1:
            raise ValueError("trials must be at least 1")

        children = np.random.SeedSequence(config.rng_seed).spawn(2 * trials)
        seeds = [int(child.generate_state(1)[0]) for child in children]

        results = []
        for k in range(trials):
            in_seed, out_seed = seeds[2 * k], seeds[2 * k + 1]
            pricer = self._make_pricer(replace(config, rng_seed=in_seed), strike, volatility)
            in_sample, policy = pricer.fit(spot)
            out_of_sample = pricer.price_with_policy(spot, policy, seed=out_seed)
            trial = OutOfSampleTrial(in_sample, out_of_sample)
            results.append(trial)
            LOGGER.info(
                "Trial %d in=%.6f out=%.6f diff=%.6f",
                k + 1, in_sample.option_value, out_of_sample.option_value, trial.difference,
            )
        return results
