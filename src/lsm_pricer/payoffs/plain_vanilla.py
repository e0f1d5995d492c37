"""
Plain vanilla exercise payoffs (put and call).
"""

import numpy as np


class CallPayoff:
    """
    Call exercise value: max(S - K, 0)
    """

    option_type = "call"

    def __init__(self, strike: float):
        """
        Initialize call payoff.

        Parameters
        ----------
        strike : float
            Strike price K (must be > 0)
        """
        if strike <= 0:
            raise ValueError("Strike price must be positive")
        self.strike = strike

    def exercise_value(self, prices: np.ndarray) -> np.ndarray:
        """
        Compute the value of exercising at the given prices.

        Parameters
        ----------
        prices : np.ndarray
            Asset prices at the exercise date

        Returns
        -------
        np.ndarray
            Payoffs max(S - K, 0)
        """
        return np.maximum(prices - self.strike, 0.0)

    def __call__(self, prices: np.ndarray) -> np.ndarray:
        return self.exercise_value(prices)

    def __repr__(self) -> str:
        return f"CallPayoff(strike={self.strike})"


class PutPayoff:
    """
    Put exercise value: max(K - S, 0)
    """

    option_type = "put"

    def __init__(self, strike: float):
        """
        Initialize put payoff.

        Parameters
        ----------
        strike : float
            Strike price K (must be > 0)
        """
        if strike <= 0:
            raise ValueError("Strike price must be positive")
        self.strike = strike

    def exercise_value(self, prices: np.ndarray) -> np.ndarray:
        """
        Compute the value of exercising at the given prices.

        Parameters
        ----------
        prices : np.ndarray
            Asset prices at the exercise date

        Returns
        -------
        np.ndarray
            Payoffs max(K - S, 0)
        """
        return np.maximum(self.strike - prices, 0.0)

    def __call__(self, prices: np.ndarray) -> np.ndarray:
        return self.exercise_value(prices)

    def __repr__(self) -> str:
        return f"PutPayoff(strike={self.strike})"


def make_payoff(option_type: str, strike: float) -> CallPayoff | PutPayoff:
    """Build the payoff for ``option_type`` ('call' or 'put')."""
    if option_type == "call":
        return CallPayoff(strike)
    if option_type == "put":
        return PutPayoff(strike)
    raise ValueError("option_type must be 'call' or 'put'")
