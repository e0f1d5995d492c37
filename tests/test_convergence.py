"""
Tests for LSM convergence and stability diagnostics.
"""

import pytest

from lsm_pricer.analysis.convergence import (
    ConvergenceAnalyzer,
    ConvergenceRow,
    OutOfSampleTrial,
)
from lsm_pricer.config import LSMConfig


@pytest.fixture
def config():
    return LSMConfig(n_paths=2000, n_exercise_dates=25, maturity=1.0, risk_free_rate=0.06)


class TestAnalyzerSetup:
    """Test analyzer argument validation."""

    def test_invalid_option_type(self):
        with pytest.raises(ValueError, match="option_type must be"):
            ConvergenceAnalyzer(option_type="digital")

    def test_invalid_process(self):
        with pytest.raises(ValueError, match="process must be"):
            ConvergenceAnalyzer(process="heston")

    def test_invalid_basis(self):
        with pytest.raises(ValueError, match="Unknown basis family"):
            ConvergenceAnalyzer(basis_family="legendre")
        with pytest.raises(ValueError, match="at most 5 terms"):
            ConvergenceAnalyzer(basis_family="hermite", basis_size=6)


class TestBasisConvergence:
    """Test value against basis size."""

    def test_rows(self, config):
        """Test one row per basis size 1..M."""
        rows = ConvergenceAnalyzer().analyze_by_basis_functions(config, 36.0, 40.0, 0.2, 4)

        assert len(rows) == 4
        assert [row.parameter for row in rows] == [1, 2, 3, 4]
        assert all(isinstance(row, ConvergenceRow) for row in rows)
        assert all(row.value > 0 and row.standard_error > 0 for row in rows)

    def test_values_stable_in_basis_size(self, config):
        """Test larger bases move the value only slightly."""
        rows = ConvergenceAnalyzer().analyze_by_basis_functions(config, 36.0, 40.0, 0.2, 5)
        values = [row.value for row in rows]
        assert max(values) - min(values) < 0.2

    def test_invalid_max(self, config):
        with pytest.raises(ValueError, match="max_basis_size must be at least 1"):
            ConvergenceAnalyzer().analyze_by_basis_functions(config, 36.0, 40.0, 0.2, 0)


class TestPathConvergence:
    """Test value and standard error against path count."""

    def test_rows(self, config):
        """Test one row per path count, in order."""
        counts = [500, 1000, 2000]
        rows = ConvergenceAnalyzer().analyze_by_path_count(config, 40.0, 40.0, 0.2, counts)
        assert [row.parameter for row in rows] == counts

    def test_standard_error_scaling(self, config):
        """Test quadrupling the paths roughly halves the standard error."""
        rows = ConvergenceAnalyzer().analyze_by_path_count(
            config, 40.0, 40.0, 0.2, [2000, 8000]
        )
        ratio = rows[0].standard_error / rows[1].standard_error
        assert 1.6 < ratio < 2.4

    def test_jump_process(self, config):
        """Test the analysis also runs under jump-diffusion."""
        analyzer = ConvergenceAnalyzer(process="jump", jump_intensity=0.1)
        rows = analyzer.analyze_by_path_count(config, 40.0, 40.0, 0.2, [1000])
        assert rows[0].value > 0


class TestOutOfSample:
    """Test in-sample versus out-of-sample stability."""

    def test_trials(self, config):
        """Test each trial re-prices the fitted policy on independent paths."""
        trials = ConvergenceAnalyzer().out_of_sample_test(config, 36.0, 40.0, 0.2, 3)

        assert len(trials) == 3
        assert all(isinstance(trial, OutOfSampleTrial) for trial in trials)
        for trial in trials:
            assert trial.difference == pytest.approx(
                trial.out_of_sample.option_value - trial.in_sample.option_value
            )
            combined = (
                trial.in_sample.standard_error**2 + trial.out_of_sample.standard_error**2
            ) ** 0.5
            assert abs(trial.difference) < 5 * combined

    def test_trials_use_distinct_seeds(self, config):
        """Test different trials draw different path sets."""
        trials = ConvergenceAnalyzer().out_of_sample_test(config, 36.0, 40.0, 0.2, 2)
        assert trials[0].in_sample.option_value != trials[1].in_sample.option_value
        assert trials[0].in_sample.option_value != trials[0].out_of_sample.option_value

    def test_reproducible(self, config):
        """Test the same base seed reproduces every trial."""
        first = ConvergenceAnalyzer().out_of_sample_test(config, 36.0, 40.0, 0.2, 2)
        second = ConvergenceAnalyzer().out_of_sample_test(config, 36.0, 40.0, 0.2, 2)
        assert [t.out_of_sample.option_value for t in first] == \
            [t.out_of_sample.option_value for t in second]

    def test_invalid_trials(self, config):
        with pytest.raises(ValueError, match="trials must be at least 1"):
            ConvergenceAnalyzer().out_of_sample_test(config, 36.0, 40.0, 0.2, 0)
