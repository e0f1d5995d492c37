"""
Black-Scholes closed form for the European leg of an LSM run.

Used as a reference for the European value computed on simulated paths.
"""

import math


def norm_cdf(x: float) -> float:
    """Standard normal CDF via math.erf."""
    return 0.5 * (1.0 + math.erf(x / math.sqrt(2.0)))


def bs_price(S0: float, K: float, r: float, T: float, sigma: float, option_type: str) -> float:
    """
    European option price under Black-Scholes with no dividends.

    Parameters
    ----------
    S0 : float
        Spot price (must be > 0)
    K : float
        Strike price (must be > 0)
    r : float
        Risk-free interest rate (annualized)
    T : float
        Time to maturity in years (must be >= 0)
    sigma : float
        Volatility (annualized, must be >= 0)
    option_type : str
        'call' or 'put'

    Returns
    -------
    float
        Option price; intrinsic value at T = 0, discounted forward
        intrinsic value at sigma = 0
    """
    if S0 <= 0:
        raise ValueError("Spot price S0 must be positive")
    if K <= 0:
        raise ValueError("Strike K must be positive")
    if T < 0:
        raise ValueError("Time to maturity T must be non-negative")
    if sigma < 0:
        raise ValueError("Volatility sigma must be non-negative")
    if option_type not in ["call", "put"]:
        raise ValueError("option_type must be 'call' or 'put'")

    sign = 1.0 if option_type == "call" else -1.0

    if T == 0:
        return max(sign * (S0 - K), 0.0)

    discount = math.exp(-r * T)
    if sigma == 0:
        return max(sign * (S0 / discount - K), 0.0) * discount

    vol_sqrt_t = sigma * math.sqrt(T)
    d1 = (math.log(S0 / K) + (r + 0.5 * sigma**2) * T) / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    return sign * (S0 * norm_cdf(sign * d1) - K * discount * norm_cdf(sign * d2))
