"""
Merton jump-diffusion model: GBM with compound-Poisson lognormal jumps.
"""

import numpy as np

from lsm_pricer.models.base import Shocks


class JumpDiffusionProcess:
    """
    Merton (1976) jump-diffusion under the risk-neutral measure.

    Over a step of size Δt the log-price moves by

        (r - λκ - σ²/2) Δt + σ √Δt Z + Σ_{j=1}^{N} Y_j

    with N ~ Poisson(λΔt), Y_j ~ Normal(μ_J, δ_J²) and κ = E[e^Y] - 1.
    The λκ term compensates the jumps so that e^{-rt} S_t stays a martingale.

    The sum of N normal log-jumps is sampled in one draw as
    N μ_J + √N δ_J Z_J.
    """

    def __init__(
        self,
        r: float,
        sigma: float,
        jump_intensity: float,
        jump_mean: float = -0.1,
        jump_std: float = 0.15
    ):
        """
        Initialize jump-diffusion parameters.

        Parameters
        ----------
        r : float
            Risk-free interest rate (annualized)
        sigma : float
            Diffusion volatility (must be >= 0)
        jump_intensity : float
            Expected number of jumps per year λ (must be >= 0)
        jump_mean : float, optional
            Mean of the log jump size μ_J (default: -0.1)
        jump_std : float, optional
            Standard deviation of the log jump size δ_J (default: 0.15, must be >= 0)
        """
        if sigma < 0:
            raise ValueError("Volatility sigma must be non-negative")
        if jump_intensity < 0:
            raise ValueError("Jump intensity must be non-negative")
        if jump_std < 0:
            raise ValueError("Jump size std must be non-negative")

        self.r = r
        self.sigma = sigma
        self.jump_intensity = jump_intensity
        self.jump_mean = jump_mean
        self.jump_std = jump_std

    @property
    def kappa(self) -> float:
        """Expected relative jump size E[e^Y] - 1."""
        return float(np.exp(self.jump_mean + 0.5 * self.jump_std**2) - 1.0)

    def draw_shocks(
        self,
        rng: np.random.Generator,
        n_draws: int,
        n_steps: int,
        dt: float
    ) -> Shocks:
        """
        Draw diffusion normals, Poisson jump counts and jump-size normals.

        Diffusion normals come first so that, for a given seed, the diffusion
        part coincides with GeometricBrownianMotion.draw_shocks.
        """
        normals = rng.standard_normal((n_draws, n_steps))
        jump_counts = rng.poisson(self.jump_intensity * dt, size=(n_draws, n_steps))
        jump_normals = rng.standard_normal((n_draws, n_steps))
        return Shocks(normals=normals, jump_counts=jump_counts, jump_normals=jump_normals)

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
        drift = (self.r - self.jump_intensity * self.kappa - 0.5 * self.sigma**2) * dt
        log_return = drift + self.sigma * np.sqrt(dt) * shocks.normals[:, index]

        if shocks.jump_counts is not None:
            counts = shocks.jump_counts[:, index]
            log_return = log_return + (
                counts * self.jump_mean
                + np.sqrt(counts) * self.jump_std * shocks.jump_normals[:, index]
            )

        return prices * np.exp(log_return)

    def __repr__(self) -> str:
        return (
            f"JumpDiffusionProcess(r={self.r}, sigma={self.sigma}, "
            f"jump_intensity={self.jump_intensity}, jump_mean={self.jump_mean}, "
            f"jump_std={self.jump_std})"
        )
