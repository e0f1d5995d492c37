"""
Payoffs package initialization.
"""

from lsm_pricer.payoffs.plain_vanilla import CallPayoff, PutPayoff, make_payoff

__all__ = [
    "CallPayoff",
    "PutPayoff",
    "make_payoff",
]
