"""
Pricing configuration for the Longstaff-Schwartz engine.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LSMConfig:
    """
    Simulation and discretization settings shared by every pricing call.

    Attributes
    ----------
    n_paths : int
        Number of Monte Carlo paths (must be > 0, even when antithetic)
    use_antithetic : bool
        Pair each path with its negated-shock mirror
    n_exercise_dates : int
        Number of exercise dates, uniformly spaced over maturity (must be >= 1)
    maturity : float
        Time to maturity in years (must be > 0)
    risk_free_rate : float
        Continuously compounded risk-free rate
    rng_seed : int
        Seed of the random stream; identical seeds give identical paths
    """
    n_paths: int = 10000
    use_antithetic: bool = False
    n_exercise_dates: int = 50
    maturity: float = 1.0
    risk_free_rate: float = 0.06
    rng_seed: int = 42

    def __post_init__(self):
        if self.n_paths <= 0:
            raise ValueError("n_paths must be positive")
        if self.n_exercise_dates < 1:
            raise ValueError("n_exercise_dates must be at least 1")
        if self.maturity <= 0:
            raise ValueError("Maturity must be positive")
        if self.use_antithetic and self.n_paths % 2 != 0:
            raise ValueError("n_paths must be even when use_antithetic is set")

    @property
    def dt(self) -> float:
        """Spacing between consecutive exercise dates in years."""
        return self.maturity / self.n_exercise_dates

