"""
Ordered basis sets and design-matrix construction.

A basis set always starts with the constant (intercept) term; the size
argument of each factory counts the terms that follow it.
"""

from collections.abc import Sequence

import numpy as np

from lsm_pricer.basis.functions import (
    MAX_POLYNOMIAL_ORDER,
    BasisFunction,
    ConstantBasis,
    HermiteBasis,
    LaguerreBasis,
    MonomialBasis,
)

BASIS_FAMILIES = ("laguerre", "hermite", "monomial")


def _check_size(size: int, upper: int | None, family: str) -> None:
    if size < 0:
        raise ValueError("Basis size must be non-negative")
    if upper is not None and size > upper:
        raise ValueError(f"{family} basis supports at most {upper} terms, got {size}")


def make_monomial_set(size: int) -> tuple[BasisFunction, ...]:
    """[1, x, x^2, ..., x^size]"""
    _check_size(size, None, "Monomial")
    return (ConstantBasis(),) + tuple(MonomialBasis(p) for p in range(1, size + 1))


def make_laguerre_set(size: int) -> tuple[BasisFunction, ...]:
    """[1, L0, L1, ..., L(size-1)] with weighted Laguerre terms."""
    _check_size(size, MAX_POLYNOMIAL_ORDER + 1, "Laguerre")
    return (ConstantBasis(),) + tuple(LaguerreBasis(n) for n in range(size))


def make_hermite_set(size: int) -> tuple[BasisFunction, ...]:
    """[1, He1, ..., He(size)]; He0 duplicates the intercept and is skipped."""
    _check_size(size, MAX_POLYNOMIAL_ORDER, "Hermite")
    return (ConstantBasis(),) + tuple(HermiteBasis(n) for n in range(1, size + 1))


def make_basis_set(family: str, size: int) -> tuple[BasisFunction, ...]:
    """
    Build a basis set by family name.

    Parameters
    ----------
    family : str
        'laguerre', 'hermite' or 'monomial'
    size : int
        Number of non-constant terms

    Returns
    -------
    tuple[BasisFunction, ...]
        Constant term followed by ``size`` family terms
    """
    if family == "laguerre":
        return make_laguerre_set(size)
    if family == "hermite":
        return make_hermite_set(size)
    if family == "monomial":
        return make_monomial_set(size)
    raise ValueError(f"Unknown basis family: {family}. Use one of {BASIS_FAMILIES}.")


def design_matrix(basis: Sequence[BasisFunction], states: np.ndarray) -> np.ndarray:
    """
    Evaluate every basis term on ``states``.

    Returns
    -------
    np.ndarray
        Shape (len(states), len(basis)); column j holds basis[j](states)
    """
    states = np.asarray(states, dtype=float)
    return np.column_stack([np.broadcast_to(b.evaluate(states), states.shape) for b in basis])


def basis_names(basis: Sequence[BasisFunction]) -> list[str]:
    return [b.name() for b in basis]
