"""
Common interface for one-factor asset price processes.
"""

from dataclasses import dataclass
from typing import Protocol

import numpy as np


@dataclass(frozen=True)
class Shocks:
    """
    Random variates driving a block of simulated paths.

    Attributes
    ----------
    normals : np.ndarray
        Diffusion shocks, shape (n_draws, n_steps)
    jump_counts : np.ndarray | None
        Number of jumps per step, shape (n_draws, n_steps)
    jump_normals : np.ndarray | None
        Standard normals driving the aggregate jump size, shape (n_draws, n_steps)
    """
    normals: np.ndarray
    jump_counts: np.ndarray | None = None
    jump_normals: np.ndarray | None = None

    @property
    def n_draws(self) -> int:
        return self.normals.shape[0]

    def mirrored(self) -> "Shocks":
        """Return the antithetic block: normal components negated, counts kept."""
        return Shocks(
            normals=-self.normals,
            jump_counts=self.jump_counts,
            jump_normals=None if self.jump_normals is None else -self.jump_normals,
        )

    def stack(self, other: "Shocks") -> "Shocks":
        """Concatenate two blocks along the path axis."""
        def _cat(a, b):
            if a is None:
                return None
            return np.vstack([a, b])

        return Shocks(
            normals=np.vstack([self.normals, other.normals]),
            jump_counts=_cat(self.jump_counts, other.jump_counts),
            jump_normals=_cat(self.jump_normals, other.jump_normals),
        )


class StochasticProcess(Protocol):
    """Protocol for processes that can be stepped across exercise dates."""

    r: float
    sigma: float

    def draw_shocks(
        self, rng: np.random.Generator, n_draws: int, n_steps: int, dt: float
    ) -> Shocks:
        ...

    def step(
        self, prices: np.ndarray, dt: float, shocks: Shocks, index: int
    ) -> np.ndarray:
        ...
