"""
Path simulation over a grid of exercise dates.
"""

import logging

import numpy as np

from lsm_pricer.models.base import StochasticProcess

LOGGER = logging.getLogger(__name__)


class PathSimulator:
    """
    Drives a stochastic process across uniformly spaced exercise dates.

    All randomness comes from ``np.random.default_rng(seed)``, so a given
    seed always reproduces the same path matrix bit for bit.
    """

    def __init__(self, process: StochasticProcess):
        self.process = process

    def simulate(
        self,
        spot: float,
        maturity: float,
        n_exercise_dates: int,
        n_paths: int,
        antithetic: bool = False,
        seed: int | None = None
    ) -> np.ndarray:
        """
        Simulate asset price paths.

        Parameters
        ----------
        spot : float
            Price at time 0 (must be > 0)
        maturity : float
            Time to maturity in years (must be > 0)
        n_exercise_dates : int
            Number of dates after time 0 (must be >= 1)
        n_paths : int
            Number of paths (must be > 0, even when antithetic)
        antithetic : bool, optional
            If True, the second half of the paths mirrors the first half
            with sign-negated normal shocks
        seed : int, optional
            Seed for the random stream

        Returns
        -------
        np.ndarray
            Array of shape (n_paths, n_exercise_dates + 1); column 0 is spot.
            With antithetic pairing, path i and path i + n_paths/2 are mirrors.
        """
        if spot <= 0:
            raise ValueError("Spot price must be positive")
        if maturity <= 0:
            raise ValueError("Maturity must be positive")
        if n_exercise_dates < 1:
            raise ValueError("n_exercise_dates must be at least 1")
        if n_paths <= 0:
            raise ValueError("n_paths must be positive")
        if antithetic and n_paths % 2 != 0:
            raise ValueError("n_paths must be even for antithetic pairing")

        dt = maturity / n_exercise_dates
        rng = np.random.default_rng(seed)

        n_draws = n_paths // 2 if antithetic else n_paths
        shocks = self.process.draw_shocks(rng, n_draws, n_exercise_dates, dt)
        if antithetic:
            shocks = shocks.stack(shocks.mirrored())

        paths = np.empty((n_paths, n_exercise_dates + 1))
        paths[:, 0] = spot
        for k in range(n_exercise_dates):
            paths[:, k + 1] = self.process.step(paths[:, k], dt, shocks, k)

        LOGGER.debug(
            "Simulated %d paths x %d dates (antithetic=%s, seed=%s)",
            n_paths, n_exercise_dates, antithetic, seed,
        )
        return paths
