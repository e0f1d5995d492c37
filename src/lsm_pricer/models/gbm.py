"""
Geometric Brownian Motion (GBM) model for asset price simulation.
"""

import numpy as np

from lsm_pricer.models.base import Shocks


class GeometricBrownianMotion:
    """
    Geometric Brownian Motion under the risk-neutral measure.

    The model follows:
        dS_t = r * S_t * dt + σ * S_t * dW_t

    and is stepped exactly on the lognormal transition:
        S_{t+Δt} = S_t * exp((r - σ²/2) * Δt + σ * √Δt * Z)

    where:
        S_t: asset price at time t
        r: drift (risk-free rate)
        σ: volatility
        Z: standard normal draw
    """

    def __init__(self, r: float, sigma: float):
        """
        Initialize GBM model parameters.

        Parameters
        ----------
        r : float
            Risk-free interest rate (annualized, continuously compounded)
        sigma : float
            Volatility (annualized, must be >= 0)
        """
        if sigma < 0:
            raise ValueError("Volatility sigma must be non-negative")

        self.r = r
        self.sigma = sigma

    def draw_shocks(
        self,
        rng: np.random.Generator,
        n_draws: int,
        n_steps: int,
        dt: float
    ) -> Shocks:
        """
        Draw one standard normal per path and step.

        Parameters
        ----------
        rng : np.random.Generator
            Random stream owned by the caller
        n_draws : int
            Number of independent shock sets (paths before antithetic mirroring)
        n_steps : int
            Number of transitions per path
        dt : float
            Step size in years (unused: the normal draws do not depend on it)

        Returns
        -------
        Shocks
            Block with normals of shape (n_draws, n_steps)
        """
        return Shocks(normals=rng.standard_normal((n_draws, n_steps)))

    def step(
        self,
        prices: np.ndarray,
        dt: float,
        shocks: Shocks,
        index: int
    ) -> np.ndarray:
        """
        Advance prices by one step of size dt using shock column ``index``.
        """
        drift = (self.r - 0.5 * self.sigma**2) * dt
        diffusion = self.sigma * np.sqrt(dt)
        return prices * np.exp(drift + diffusion * shocks.normals[:, index])

    def __repr__(self) -> str:
        return f"GeometricBrownianMotion(r={self.r}, sigma={self.sigma})"
