#!/usr/bin/env python
"""
Convergence demonstration for the LSM pricer.

Runs the three diagnostics: value against basis size, value and standard
error against path count, and in-sample against out-of-sample stability.
"""

import math
import sys
from pathlib import Path

# Add parent directory to path to allow imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lsm_pricer.analysis.convergence import ConvergenceAnalyzer
from lsm_pricer.config import LSMConfig


def main():
    """Run convergence analysis for an at-the-money American put."""
    S0 = 40.0
    K = 40.0
    r = 0.06
    sigma = 0.2
    T = 1.0
    seed = 42

    analyzer = ConvergenceAnalyzer(option_type="put", basis_family="laguerre")

    print("=" * 72)
    print("LSM Convergence Analysis")
    print("=" * 72)
    print(f"\nParameters: S0={S0}, K={K}, r={r}, sigma={sigma}, T={T}, seed={seed}")

    # Basis size
    config = LSMConfig(n_paths=10000, n_exercise_dates=50, maturity=T,
                       risk_free_rate=r, rng_seed=seed)
    print("\n[1] Value vs. basis functions M  (N=10,000)")
    print("-" * 72)
    print(f"{'M':>6} {'Value':>12} {'Std Error':>12}")
    print("-" * 72)
    for row in analyzer.analyze_by_basis_functions(config, S0, K, sigma, 5):
        print(f"{row.parameter:>6} {row.value:>12.4f} {row.standard_error:>12.4f}")

    # Path count
    print("\n[2] Value vs. path count N  (M=3 Laguerre)")
    print("-" * 72)
    print(f"{'N':>10} {'Value':>12} {'Std Error':>12} {'SE * √N':>12}")
    print("-" * 72)
    path_counts = [500, 1000, 2000, 5000, 10000, 20000]
    for row in analyzer.analyze_by_path_count(config, S0, K, sigma, path_counts):
        scaled = row.standard_error * math.sqrt(row.parameter)
        print(f"{row.parameter:>10,} {row.value:>12.4f} {row.standard_error:>12.4f} "
              f"{scaled:>12.4f}")

    # Out-of-sample
    oos_config = LSMConfig(n_paths=5000, n_exercise_dates=50, maturity=T,
                           risk_free_rate=r, rng_seed=seed)
    print("\n[3] Out-of-sample stability  (N=5,000, 5 trials)")
    print("-" * 72)
    print(f"{'Trial':>8} {'In-Sample':>14} {'Out-of-Sample':>14} {'Difference':>12}")
    print("-" * 72)
    for k, trial in enumerate(analyzer.out_of_sample_test(oos_config, S0, K, sigma, 5), start=1):
        print(f"{k:>8} {trial.in_sample.option_value:>14.4f} "
              f"{trial.out_of_sample.option_value:>14.4f} {trial.difference:>12.4f}")

    print("-" * 72)
    print("\nObservations:")
    print("  • Value rises then plateaus as the basis grows")
    print("  • SE * √N is roughly constant (O(1/√N) convergence)")
    print("  • Out-of-sample values stay close to in-sample: no overfitting")
    print("=" * 72)


if __name__ == "__main__":
    main()
