"""
Regression basis functions for continuation-value estimation.

Every basis maps a scalar (or array of) state values to feature values.
Evaluation is vectorised: arrays return arrays, scalars return floats.
"""

import numpy as np

MAX_POLYNOMIAL_ORDER = 5


def _laguerre(n: int, x: np.ndarray) -> np.ndarray:
    # Closed forms of L_n(x), n = 0..5
    if n == 0:
        return np.ones_like(x)
    if n == 1:
        return 1.0 - x
    if n == 2:
        return (x**2 - 4.0 * x + 2.0) / 2.0
    if n == 3:
        return (-x**3 + 9.0 * x**2 - 18.0 * x + 6.0) / 6.0
    if n == 4:
        return (x**4 - 16.0 * x**3 + 72.0 * x**2 - 96.0 * x + 24.0) / 24.0
    return (-x**5 + 25.0 * x**4 - 200.0 * x**3 + 600.0 * x**2 - 600.0 * x + 120.0) / 120.0


def _hermite(n: int, x: np.ndarray) -> np.ndarray:
    # Probabilists' He_n(x), n = 0..5
    if n == 0:
        return np.ones_like(x)
    if n == 1:
        return x.copy()
    if n == 2:
        return x**2 - 1.0
    if n == 3:
        return x**3 - 3.0 * x
    if n == 4:
        return x**4 - 6.0 * x**2 + 3.0
    return x**5 - 10.0 * x**3 + 15.0 * x


class BasisFunction:
    """
    Base class for regression basis terms.

    Subclasses implement ``_evaluate`` on a float array and ``name``.
    """

    def evaluate(self, state):
        """
        Evaluate the basis term.

        Parameters
        ----------
        state : float or np.ndarray
            State value(s), typically moneyness S/K

        Returns
        -------
        float or np.ndarray
            Feature value(s), same shape as ``state``
        """
        x = np.asarray(state, dtype=float)
        values = self._evaluate(x)
        if values.ndim == 0:
            return float(values)
        return values

    def __call__(self, state):
        return self.evaluate(state)

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def name(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name()!r})"


class ConstantBasis(BasisFunction):
    """Intercept term; evaluates to 1.0 everywhere."""

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        return np.ones_like(x)

    def name(self) -> str:
        return "Const"


class MonomialBasis(BasisFunction):
    """Power term x^p for p >= 0."""

    def __init__(self, power: int):
        if power < 0:
            raise ValueError("Monomial power must be >= 0")
        self.power = power

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        return x**self.power

    def name(self) -> str:
        return f"x^{self.power}"


class LaguerreBasis(BasisFunction):
    """
    Weighted Laguerre polynomial exp(-x/2) * L_n(x) for n = 0..5.

    Negative states are clamped to zero before evaluation.
    """

    def __init__(self, order: int):
        if not 0 <= order <= MAX_POLYNOMIAL_ORDER:
            raise ValueError(
                f"Laguerre order must be between 0 and {MAX_POLYNOMIAL_ORDER}, got {order}"
            )
        self.order = order

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        x = np.maximum(x, 0.0)
        return np.exp(-0.5 * x) * _laguerre(self.order, x)

    def name(self) -> str:
        return f"L{self.order}"


class HermiteBasis(BasisFunction):
    """Probabilists' Hermite polynomial He_n(x) for n = 0..5."""

    def __init__(self, order: int):
        if not 0 <= order <= MAX_POLYNOMIAL_ORDER:
            raise ValueError(
                f"Hermite order must be between 0 and {MAX_POLYNOMIAL_ORDER}, got {order}"
            )
        self.order = order

    def _evaluate(self, x: np.ndarray) -> np.ndarray:
        return _hermite(self.order, x)

    def name(self) -> str:
        return f"He{self.order}"
