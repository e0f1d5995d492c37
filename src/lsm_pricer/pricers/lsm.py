"""
Longstaff-Schwartz (LSM) algorithm for American option pricing.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from lsm_pricer.basis.functions import BasisFunction
from lsm_pricer.basis.sets import basis_names, design_matrix
from lsm_pricer.config import LSMConfig
from lsm_pricer.models.base import StochasticProcess
from lsm_pricer.payoffs.plain_vanilla import CallPayoff, PutPayoff
from lsm_pricer.simulation.paths import PathSimulator

LOGGER = logging.getLogger(__name__)

Z_95 = 1.96


@dataclass(frozen=True)
class SimulationResult:
    """
    Container for American option pricing results using LSM.

    Attributes
    ----------
    option_value : float
        Estimated American option value (biased low by construction)
    european_value : float
        Value of exercising only at maturity, on the same paths
    early_exercise_premium : float
        option_value - european_value
    standard_error : float
        Monte Carlo standard error of option_value
    european_standard_error : float
        Monte Carlo standard error of european_value
    n_paths : int
        Number of simulation paths used
    n_exercise_dates : int
        Number of exercise dates used
    """
    option_value: float
    european_value: float
    early_exercise_premium: float
    standard_error: float
    european_standard_error: float = 0.0
    n_paths: int = 0
    n_exercise_dates: int = 0

    @property
    def ci_lower(self) -> float:
        """Lower bound of the 95% confidence interval of option_value."""
        return self.option_value - Z_95 * self.standard_error

    @property
    def ci_upper(self) -> float:
        """Upper bound of the 95% confidence interval of option_value."""
        return self.option_value + Z_95 * self.standard_error

    def __repr__(self) -> str:
        return (
            f"SimulationResult(\n"
            f"  option_value={self.option_value:.6f},\n"
            f"  european_value={self.european_value:.6f},\n"
            f"  early_exercise_premium={self.early_exercise_premium:.6f},\n"
            f"  standard_error={self.standard_error:.6f},\n"
            f"  CI95=[{self.ci_lower:.6f}, {self.ci_upper:.6f}],\n"
            f"  n_paths={self.n_paths},\n"
            f"  n_exercise_dates={self.n_exercise_dates}\n"
            f")"
        )


@dataclass(frozen=True, eq=False)
class ExercisePolicy:
    """
    Fitted continuation-value regressions, one per exercise date.

    Attributes
    ----------
    coefficients : tuple
        Entry t holds the regression coefficients for date t, or None when
        no fit was made (dates 0 and N, no in-the-money paths, degenerate fit)
    strike : float
        Strike used to normalise the regression state S/K
    basis : tuple[str, ...]
        Names of the basis terms, in design-matrix column order
    """
    coefficients: tuple
    strike: float
    basis: tuple

    @property
    def n_exercise_dates(self) -> int:
        return len(self.coefficients) - 1

    @property
    def fitted_dates(self) -> list[int]:
        """Dates at which a regression was actually fitted."""
        return [t for t, beta in enumerate(self.coefficients) if beta is not None]


def _standard_error(samples: np.ndarray) -> float:
    if samples.size < 2:
        return 0.0
    return float(np.std(samples, ddof=1) / np.sqrt(samples.size))


def exercise_flags(
    exercise_date: np.ndarray,
    cash_flow: np.ndarray,
    n_exercise_dates: int
) -> np.ndarray:
    """
    Expand per-path exercise dates into a boolean exercise matrix.

    Returns
    -------
    np.ndarray
        Shape (n_paths, n_exercise_dates + 1); True where the path exercises.
        Paths whose recorded cash flow is zero never exercise.
    """
    flags = np.zeros((exercise_date.size, n_exercise_dates + 1), dtype=bool)
    paying = cash_flow > 0
    flags[np.flatnonzero(paying), exercise_date[paying]] = True
    return flags


class LSMPricer:
    """
    American option pricer based on Longstaff & Schwartz (2001).

    The pricer is built once per configuration and can be called for any
    number of spots; every call re-simulates its paths from the configured
    seed, so results are reproducible.
    """

    def __init__(
        self,
        config: LSMConfig,
        process: StochasticProcess,
        payoff: CallPayoff | PutPayoff,
        basis: Sequence[BasisFunction]
    ):
        """
        Initialize the pricer.

        Parameters
        ----------
        config : LSMConfig
            Simulation settings (paths, dates, maturity, rate, seed)
        process : StochasticProcess
            Underlying asset dynamics
        payoff : CallPayoff | PutPayoff
            Exercise payoff; its strike normalises the regression state
        basis : Sequence[BasisFunction]
            Regression basis set, constant term first
        """
        if len(basis) == 0:
            raise ValueError("Basis set must contain at least one term")

        self.config = config
        self.process = process
        self.payoff = payoff
        self.basis = tuple(basis)
        self._simulator = PathSimulator(process)

    def simulate_paths(self, spot: float, seed: int | None = None) -> np.ndarray:
        """Simulate the path matrix for ``spot`` (``seed`` overrides the config)."""
        cfg = self.config
        return self._simulator.simulate(
            spot=spot,
            maturity=cfg.maturity,
            n_exercise_dates=cfg.n_exercise_dates,
            n_paths=cfg.n_paths,
            antithetic=cfg.use_antithetic,
            seed=cfg.rng_seed if seed is None else seed,
        )

    def price(self, spot: float) -> SimulationResult:
        """
        Price the option at ``spot``.

        Parameters
        ----------
        spot : float
            Current asset price (must be > 0)

        Returns
        -------
        SimulationResult
            American and European values, premium and standard error
        """
        result, _ = self.fit(spot)
        return result

    def fit(self, spot: float) -> tuple[SimulationResult, ExercisePolicy]:
        """
        Price in-sample and return the fitted exercise policy alongside.
        """
        paths = self.simulate_paths(spot)
        exercise_date, cash_flow, policy = self._backward_induction(paths)
        return self._summarize(paths, exercise_date, cash_flow), policy

    def price_with_policy(
        self,
        spot: float,
        policy: ExercisePolicy,
        seed: int | None = None
    ) -> SimulationResult:
        """
        Price on freshly simulated paths using an already fitted policy.

        No regression is run: each path exercises at the first date where it
        is in the money and the exercise value beats the policy's
        continuation estimate. Used for out-of-sample checks.

        Parameters
        ----------
        spot : float
            Current asset price
        policy : ExercisePolicy
            Policy returned by ``fit``
        seed : int, optional
            Seed for the new paths (default: config seed)
        """
        if policy.n_exercise_dates != self.config.n_exercise_dates:
            raise ValueError(
                f"Policy has {policy.n_exercise_dates} exercise dates, "
                f"pricer expects {self.config.n_exercise_dates}"
            )
        if tuple(policy.basis) != tuple(basis_names(self.basis)):
            raise ValueError("Policy was fitted with a different basis set")

        paths = self.simulate_paths(spot, seed)
        exercise_date, cash_flow = self._apply_policy(paths, policy)
        return self._summarize(paths, exercise_date, cash_flow)

    def exercise_decisions(self, spot: float) -> np.ndarray:
        """Boolean exercise matrix of the in-sample policy at ``spot``."""
        paths = self.simulate_paths(spot)
        exercise_date, cash_flow, _ = self._backward_induction(paths)
        return exercise_flags(exercise_date, cash_flow, self.config.n_exercise_dates)

    def _state(self, prices: np.ndarray, strike: float | None = None) -> np.ndarray:
        return prices / (self.payoff.strike if strike is None else strike)

    def _fit_continuation(self, X: np.ndarray, targets: np.ndarray, t: int) -> np.ndarray | None:
        """
        Least-squares fit of targets on X; None when the fit is degenerate.

        A fit is degenerate when fewer paths than basis terms are in the money,
        when the solve fails, or when ``lstsq`` reports a rank below the number
        of terms. The rank uses numpy's default cutoff, so designs that are only
        numerically near-singular are skipped too: large Laguerre sets on a
        narrow moneyness range lose the early dates this way. Every in-the-money
        path continues at a skipped date, which lowers the estimate. A dip at the
        largest basis sizes of a convergence sweep comes from these skips, not
        from the regression converging.
        """
        n_obs, n_terms = X.shape
        if n_obs < n_terms:
            LOGGER.debug(
                "Date %d: %d in-the-money paths < %d basis terms, continuing", t, n_obs, n_terms
            )
            return None

        try:
            # SVD-based solve; tolerant of highly correlated columns
            beta, _, rank, _ = np.linalg.lstsq(X, targets, rcond=None)
        except np.linalg.LinAlgError:
            LOGGER.debug("Date %d: least-squares solve failed, continuing", t)
            return None

        if rank < n_terms:
            LOGGER.debug("Date %d: design matrix rank %d < %d, continuing", t, rank, n_terms)
            return None

        return beta

    def _backward_induction(
        self,
        paths: np.ndarray
    ) -> tuple[np.ndarray, np.ndarray, ExercisePolicy]:
        n_paths = paths.shape[0]
        n_dates = self.config.n_exercise_dates
        dt = self.config.dt
        r = self.config.risk_free_rate

        # Each path carries one recorded exercise: its date and its cash flow
        cash_flow = self.payoff.exercise_value(paths[:, n_dates])
        exercise_date = np.full(n_paths, n_dates)
        coefficients: list[np.ndarray | None] = [None] * (n_dates + 1)

        # Date 0 is the valuation date, never an exercise decision
        for t in range(n_dates - 1, 0, -1):
            exercise_now = self.payoff.exercise_value(paths[:, t])
            itm = np.flatnonzero(exercise_now > 0)
            if itm.size == 0:
                continue

            # Realized future cash flow discounted back to date t
            targets = cash_flow[itm] * np.exp(-r * dt * (exercise_date[itm] - t))
            X = design_matrix(self.basis, self._state(paths[itm, t]))

            beta = self._fit_continuation(X, targets, t)
            if beta is None:
                continue
            coefficients[t] = beta

            continuation = X @ beta
            exercised = itm[exercise_now[itm] > continuation]
            cash_flow[exercised] = exercise_now[exercised]
            exercise_date[exercised] = t

        policy = ExercisePolicy(
            coefficients=tuple(coefficients),
            strike=self.payoff.strike,
            basis=tuple(basis_names(self.basis)),
        )
        return exercise_date, cash_flow, policy

    def _apply_policy(
        self,
        paths: np.ndarray,
        policy: ExercisePolicy
    ) -> tuple[np.ndarray, np.ndarray]:
        n_paths = paths.shape[0]
        n_dates = self.config.n_exercise_dates

        cash_flow = self.payoff.exercise_value(paths[:, n_dates])
        exercise_date = np.full(n_paths, n_dates)
        alive = np.ones(n_paths, dtype=bool)

        for t in range(1, n_dates):
            beta = policy.coefficients[t]
            if beta is None:
                continue

            exercise_now = self.payoff.exercise_value(paths[:, t])
            candidates = np.flatnonzero(alive & (exercise_now > 0))
            if candidates.size == 0:
                continue

            X = design_matrix(self.basis, self._state(paths[candidates, t], policy.strike))
            exercised = candidates[exercise_now[candidates] > X @ beta]
            cash_flow[exercised] = exercise_now[exercised]
            exercise_date[exercised] = t
            alive[exercised] = False

        return exercise_date, cash_flow

    def _summarize(
        self,
        paths: np.ndarray,
        exercise_date: np.ndarray,
        cash_flow: np.ndarray
    ) -> SimulationResult:
        cfg = self.config
        r = cfg.risk_free_rate

        american = cash_flow * np.exp(-r * cfg.dt * exercise_date)
        european = self.payoff.exercise_value(paths[:, -1]) * np.exp(-r * cfg.maturity)

        option_value = float(np.mean(american))
        european_value = float(np.mean(european))

        result = SimulationResult(
            option_value=option_value,
            european_value=european_value,
            early_exercise_premium=option_value - european_value,
            standard_error=_standard_error(american),
            european_standard_error=_standard_error(european),
            n_paths=paths.shape[0],
            n_exercise_dates=cfg.n_exercise_dates,
        )
        LOGGER.debug(
            "LSM value %.6f (European %.6f, SE %.6f)",
            result.option_value, result.european_value, result.standard_error,
        )
        return result

    def __repr__(self) -> str:
        return (
            f"LSMPricer(config={self.config!r}, process={self.process!r}, "
            f"payoff={self.payoff!r}, basis={basis_names(self.basis)})"
        )
