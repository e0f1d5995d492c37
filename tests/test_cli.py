"""
Tests for the lsm-price command-line interface.
"""

import json

import pytest

from lsm_pricer.cli import main, parse_args

BASE_ARGS = [
    "--S0", "36", "--K", "40", "--r", "0.06", "--sigma", "0.2", "--T", "1.0",
    "--n_paths", "1000", "--n_dates", "10",
]


class TestParseArgs:
    """Test argument parsing defaults."""

    def test_defaults(self):
        parsed = parse_args(BASE_ARGS)
        assert parsed.option_type == "put"
        assert parsed.process == "gbm"
        assert parsed.seed == 42
        assert parsed.basis == "laguerre"
        assert parsed.basis_size == 3
        assert parsed.analysis == "none"
        assert parsed.path_counts == [500, 1000, 2000, 5000, 10000, 20000]

    def test_missing_required(self):
        with pytest.raises(SystemExit):
            parse_args(["--S0", "36"])


class TestMain:
    """Test CLI runs end to end."""

    def test_price(self, capsys):
        """Test a basic pricing run prints results."""
        assert main(BASE_ARGS) == 0
        out = capsys.readouterr().out
        assert "American Value" in out
        assert "Early Exercise Premium" in out

    def test_black_scholes_reference(self, capsys):
        assert main(BASE_ARGS + ["--bs"]) == 0
        assert "Black-Scholes European Reference" in capsys.readouterr().out

    def test_black_scholes_skipped_for_jumps(self, capsys):
        args = BASE_ARGS + ["--bs", "--process", "jump", "--jump_intensity", "0.1"]
        assert main(args) == 0
        assert "only available for the GBM process" in capsys.readouterr().out

    def test_invalid_inputs(self, capsys):
        """Test invalid settings return exit code 1."""
        args = BASE_ARGS[:-4] + ["--n_paths", "101", "--n_dates", "10", "--antithetic"]
        assert main(args) == 1
        assert "Error:" in capsys.readouterr().out

        assert main(BASE_ARGS + ["--basis", "hermite", "--basis_size", "9"]) == 1

    @pytest.mark.parametrize("analysis,header", [
        ("basis", "Convergence vs. Basis Functions"),
        ("paths", "Convergence vs. Path Count"),
        ("oos", "Out-of-Sample Stability Test"),
    ])
    def test_analysis(self, analysis, header, capsys):
        """Test every convergence analysis runs."""
        args = BASE_ARGS + [
            "--analysis", analysis, "--max_basis", "2",
            "--path_counts", "200", "400", "--trials", "2",
        ]
        assert main(args) == 0
        assert header in capsys.readouterr().out

    def test_output_artifact(self, tmp_path):
        """Test --output writes a JSON artifact."""
        output = tmp_path / "run.json"
        assert main(BASE_ARGS + ["--analysis", "basis", "--max_basis", "2",
                                 "--output", str(output)]) == 0

        with open(output) as f:
            artifact = json.load(f)
        data = artifact["data"]
        assert data["basis"] == ["Const", "L0", "L1", "L2"]
        assert data["config"]["n_paths"] == 1000
        assert data["result"]["option_value"] > 0
        assert len(data["analysis"]) == 2
        assert "metadata" in artifact
