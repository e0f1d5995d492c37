"""
Tests for regression basis functions and basis sets.
"""

import numpy as np
import pytest

from lsm_pricer.basis import (
    ConstantBasis,
    HermiteBasis,
    LaguerreBasis,
    MonomialBasis,
    basis_names,
    design_matrix,
    make_basis_set,
    make_hermite_set,
    make_laguerre_set,
    make_monomial_set,
)


class TestBasisFunctions:
    """Test individual basis terms at known points."""

    def test_constant(self):
        """Test constant term is 1 everywhere."""
        basis = ConstantBasis()
        assert basis(123.4) == 1.0
        assert np.array_equal(basis(np.array([0.5, 2.0])), [1.0, 1.0])
        assert basis.name() == "Const"

    def test_monomial_values(self):
        """Test x^p at known points."""
        assert MonomialBasis(3)(2.0) == 8.0
        assert MonomialBasis(0)(5.0) == 1.0
        assert MonomialBasis(2).name() == "x^2"

    def test_laguerre_values(self):
        """Test weighted Laguerre terms at known points."""
        assert LaguerreBasis(0)(0.0) == pytest.approx(1.0)
        assert LaguerreBasis(1)(0.0) == pytest.approx(1.0)
        assert LaguerreBasis(1)(1.0) == pytest.approx(0.0)
        assert LaguerreBasis(2)(0.0) == pytest.approx(1.0)
        # exp(-1) * (4 - 8 + 2) / 2
        assert LaguerreBasis(2)(2.0) == pytest.approx(-np.exp(-1.0))
        assert LaguerreBasis(3).name() == "L3"

    def test_laguerre_clamps_negative_state(self):
        """Test negative inputs evaluate as zero."""
        assert LaguerreBasis(1)(-3.0) == pytest.approx(LaguerreBasis(1)(0.0))

    def test_hermite_values(self):
        """Test probabilists' Hermite terms at known points."""
        assert HermiteBasis(0)(3.0) == pytest.approx(1.0)
        assert HermiteBasis(1)(1.5) == pytest.approx(1.5)
        assert HermiteBasis(2)(0.0) == pytest.approx(-1.0)
        assert HermiteBasis(3)(2.0) == pytest.approx(2.0)
        assert HermiteBasis(4)(1.0) == pytest.approx(-2.0)
        assert HermiteBasis(5)(1.0) == pytest.approx(6.0)
        assert HermiteBasis(2).name() == "He2"

    def test_array_evaluation(self):
        """Test vectorised evaluation preserves shape."""
        x = np.linspace(0.5, 1.5, 7)
        for basis in (ConstantBasis(), MonomialBasis(2), LaguerreBasis(4), HermiteBasis(5)):
            values = basis(x)
            assert isinstance(values, np.ndarray)
            assert values.shape == (7,)

    def test_scalar_returns_float(self):
        """Test scalar input returns a Python float."""
        assert isinstance(LaguerreBasis(2)(0.8), float)

    def test_invalid_orders(self):
        """Test order validation."""
        with pytest.raises(ValueError, match="Laguerre order must be between 0 and 5"):
            LaguerreBasis(6)
        with pytest.raises(ValueError, match="Hermite order must be between 0 and 5"):
            HermiteBasis(-1)
        with pytest.raises(ValueError, match="Monomial power must be >= 0"):
            MonomialBasis(-1)


class TestBasisSets:
    """Test basis set factories and the design matrix."""

    def test_laguerre_set(self):
        """Test Laguerre set is constant plus L0..L(m-1)."""
        assert basis_names(make_laguerre_set(3)) == ["Const", "L0", "L1", "L2"]

    def test_hermite_set(self):
        """Test Hermite set skips He0."""
        assert basis_names(make_hermite_set(2)) == ["Const", "He1", "He2"]

    def test_monomial_set(self):
        """Test monomial set is constant plus x^1..x^m."""
        assert basis_names(make_monomial_set(2)) == ["Const", "x^1", "x^2"]

    def test_size_zero_is_constant_only(self):
        """Test size 0 gives just the intercept."""
        for family in ("laguerre", "hermite", "monomial"):
            assert basis_names(make_basis_set(family, 0)) == ["Const"]

    def test_size_limits(self):
        """Test families with bounded order reject large sizes."""
        assert len(make_laguerre_set(6)) == 7
        assert len(make_hermite_set(5)) == 6
        with pytest.raises(ValueError, match="at most 6 terms"):
            make_laguerre_set(7)
        with pytest.raises(ValueError, match="at most 5 terms"):
            make_hermite_set(6)
        with pytest.raises(ValueError, match="Basis size must be non-negative"):
            make_monomial_set(-1)

    def test_unknown_family(self):
        """Test unknown family name raises ValueError."""
        with pytest.raises(ValueError, match="Unknown basis family"):
            make_basis_set("chebyshev", 3)

    def test_design_matrix(self):
        """Test design matrix shape and columns."""
        states = np.array([0.8, 0.9, 1.0, 1.1])
        basis = make_monomial_set(2)
        X = design_matrix(basis, states)

        assert X.shape == (4, 3)
        assert np.allclose(X[:, 0], 1.0)
        assert np.allclose(X[:, 1], states)
        assert np.allclose(X[:, 2], states**2)
