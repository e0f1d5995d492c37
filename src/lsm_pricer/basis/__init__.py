"""
Basis package initialization.
"""

from lsm_pricer.basis.functions import (
    BasisFunction,
    ConstantBasis,
    HermiteBasis,
    LaguerreBasis,
    MonomialBasis,
)
from lsm_pricer.basis.sets import (
    BASIS_FAMILIES,
    basis_names,
    design_matrix,
    make_basis_set,
    make_hermite_set,
    make_laguerre_set,
    make_monomial_set,
)

__all__ = [
    "BASIS_FAMILIES",
    "BasisFunction",
    "ConstantBasis",
    "HermiteBasis",
    "LaguerreBasis",
    "MonomialBasis",
    "basis_names",
    "design_matrix",
    "make_basis_set",
    "make_hermite_set",
    "make_laguerre_set",
    "make_monomial_set",
]
