"""
Analytics module: closed-form European reference prices.
"""

from lsm_pricer.analytics.black_scholes import bs_price, norm_cdf

__all__ = [
    "bs_price",
    "norm_cdf",
]
