"""
Unit tests for the GBM and Merton jump-diffusion models.
"""

import numpy as np
import pytest

from lsm_pricer.models.base import Shocks
from lsm_pricer.models.gbm import GeometricBrownianMotion
from lsm_pricer.models.jump_diffusion import JumpDiffusionProcess
from lsm_pricer.simulation.paths import PathSimulator


class TestGeometricBrownianMotion:
    """Test suite for GBM model."""

    def test_initialization(self):
        """Test GBM initialization with valid parameters."""
        gbm = GeometricBrownianMotion(r=0.06, sigma=0.2)
        assert gbm.r == 0.06
        assert gbm.sigma == 0.2

    def test_invalid_sigma(self):
        """Test that negative sigma raises ValueError."""
        with pytest.raises(ValueError, match="Volatility sigma must be non-negative"):
            GeometricBrownianMotion(r=0.06, sigma=-0.2)

    def test_draw_shocks_shape(self):
        """Test that GBM draws one normal per path and step."""
        gbm = GeometricBrownianMotion(r=0.06, sigma=0.2)
        shocks = gbm.draw_shocks(np.random.default_rng(0), 100, 10, 0.1)
        assert shocks.normals.shape == (100, 10)
        assert shocks.jump_counts is None
        assert shocks.jump_normals is None

    def test_step_is_exact_lognormal(self):
        """Test one step against the closed-form lognormal transition."""
        gbm = GeometricBrownianMotion(r=0.06, sigma=0.2)
        shocks = Shocks(normals=np.array([[0.0], [1.0], [-1.0]]))
        dt = 0.5
        prices = np.array([40.0, 40.0, 40.0])

        stepped = gbm.step(prices, dt, shocks, 0)

        drift = (0.06 - 0.5 * 0.2**2) * dt
        vol = 0.2 * np.sqrt(dt)
        expected = 40.0 * np.exp(drift + vol * np.array([0.0, 1.0, -1.0]))
        assert np.allclose(stepped, expected)

    def test_zero_volatility_is_deterministic(self):
        """Test that sigma=0 grows every path at the risk-free rate."""
        gbm = GeometricBrownianMotion(r=0.05, sigma=0.0)
        paths = PathSimulator(gbm).simulate(100.0, 1.0, 4, 10, seed=1)
        assert np.allclose(paths[:, -1], 100.0 * np.exp(0.05))

    def test_discounted_terminal_mean(self):
        """Test martingale property of the discounted price."""
        gbm = GeometricBrownianMotion(r=0.06, sigma=0.2)
        paths = PathSimulator(gbm).simulate(40.0, 1.0, 10, 50000, seed=42)
        discounted = paths[:, -1] * np.exp(-0.06)
        stderr = np.std(discounted, ddof=1) / np.sqrt(discounted.size)
        assert abs(discounted.mean() - 40.0) < 4 * stderr


class TestJumpDiffusionProcess:
    """Test suite for Merton jump-diffusion."""

    def test_initialization(self):
        """Test defaults for jump size parameters."""
        process = JumpDiffusionProcess(r=0.06, sigma=0.2, jump_intensity=0.1)
        assert process.jump_intensity == 0.1
        assert process.jump_mean == -0.1
        assert process.jump_std == 0.15

    def test_invalid_parameters(self):
        """Test validation of volatility, intensity and jump std."""
        with pytest.raises(ValueError, match="Volatility sigma must be non-negative"):
            JumpDiffusionProcess(r=0.06, sigma=-0.1, jump_intensity=0.1)
        with pytest.raises(ValueError, match="Jump intensity must be non-negative"):
            JumpDiffusionProcess(r=0.06, sigma=0.2, jump_intensity=-1.0)
        with pytest.raises(ValueError, match="Jump size std must be non-negative"):
            JumpDiffusionProcess(r=0.06, sigma=0.2, jump_intensity=0.1, jump_std=-0.1)

    def test_kappa(self):
        """Test expected relative jump size."""
        process = JumpDiffusionProcess(
            r=0.06, sigma=0.2, jump_intensity=0.1, jump_mean=-0.1, jump_std=0.15
        )
        assert process.kappa == pytest.approx(np.exp(-0.1 + 0.5 * 0.15**2) - 1.0)

    def test_zero_intensity_matches_gbm(self):
        """Test that lambda=0 reproduces GBM paths for the same seed."""
        jump = JumpDiffusionProcess(r=0.06, sigma=0.3, jump_intensity=0.0)
        gbm = GeometricBrownianMotion(r=0.06, sigma=0.3)

        jump_paths = PathSimulator(jump).simulate(40.0, 1.0, 50, 1000, seed=7)
        gbm_paths = PathSimulator(gbm).simulate(40.0, 1.0, 50, 1000, seed=7)

        assert np.allclose(jump_paths, gbm_paths)

    def test_jump_counts_shape_and_sign(self):
        """Test Poisson counts are non-negative integers of the right shape."""
        process = JumpDiffusionProcess(r=0.06, sigma=0.2, jump_intensity=2.0)
        shocks = process.draw_shocks(np.random.default_rng(3), 200, 20, 0.05)
        assert shocks.jump_counts.shape == (200, 20)
        assert shocks.jump_normals.shape == (200, 20)
        assert np.all(shocks.jump_counts >= 0)
        assert shocks.jump_counts.sum() > 0

    def test_mirrored_shocks_share_jump_counts(self):
        """Test antithetic mirroring negates normals but keeps counts."""
        process = JumpDiffusionProcess(r=0.06, sigma=0.2, jump_intensity=1.0)
        shocks = process.draw_shocks(np.random.default_rng(5), 10, 5, 0.2)
        mirror = shocks.mirrored()

        assert np.array_equal(mirror.normals, -shocks.normals)
        assert np.array_equal(mirror.jump_normals, -shocks.jump_normals)
        assert np.array_equal(mirror.jump_counts, shocks.jump_counts)

    def test_compensated_drift_martingale(self):
        """Test that the jump compensator keeps the discounted price a martingale."""
        process = JumpDiffusionProcess(r=0.06, sigma=0.2, jump_intensity=1.0)
        paths = PathSimulator(process).simulate(40.0, 1.0, 10, 50000, seed=11)
        discounted = paths[:, -1] * np.exp(-0.06)
        stderr = np.std(discounted, ddof=1) / np.sqrt(discounted.size)
        assert abs(discounted.mean() - 40.0) < 4 * stderr

    def test_paths_positive(self):
        """Test all simulated prices stay positive."""
        process = JumpDiffusionProcess(r=0.06, sigma=0.2, jump_intensity=0.5)
        paths = PathSimulator(process).simulate(40.0, 1.0, 50, 2000, seed=2)
        assert np.all(paths > 0)
