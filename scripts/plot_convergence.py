#!/usr/bin/env python
"""
Convergence analysis visualization.

Plots the LSM standard error, averaged over seeds, against the number of
paths on log-log axes with an O(1/√n) reference line.
"""

import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

# Add parent directory to path to allow imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lsm_pricer.analysis.convergence import ConvergenceAnalyzer
from lsm_pricer.config import LSMConfig


def main():
    """Generate convergence plot for the American put."""
    S0 = 40.0
    K = 40.0
    r = 0.06
    sigma = 0.2
    T = 1.0

    n_paths_grid = [1000, 2000, 5000, 10000, 20000, 50000]
    seeds = range(5)

    analyzer = ConvergenceAnalyzer(option_type="put", basis_family="laguerre")

    print("=" * 80)
    print("LSM Convergence Analysis")
    print("=" * 80)
    print(f"\nParameters: S0={S0}, K={K}, r={r}, sigma={sigma}, T={T}")
    print(f"Seeds: {min(seeds)} to {max(seeds)}")
    print(f"n_paths grid: {n_paths_grid}\n")
    print("Running simulations...")

    stderrs = np.zeros((len(seeds), len(n_paths_grid)))
    for i, seed in enumerate(seeds):
        config = LSMConfig(n_paths=n_paths_grid[0], n_exercise_dates=50, maturity=T,
                           risk_free_rate=r, rng_seed=seed)
        rows = analyzer.analyze_by_path_count(config, S0, K, sigma, n_paths_grid)
        stderrs[i] = [row.standard_error for row in rows]
    mean_stderr = stderrs.mean(axis=0)

    for n_paths, stderr in zip(n_paths_grid, mean_stderr):
        print(f"  n_paths={n_paths:>6,}  mean stderr={stderr:.6f}")

    print("\nGenerating plot...")

    plt.figure(figsize=(10, 7))
    plt.loglog(n_paths_grid, mean_stderr, "o-", label="LSM American put",
               linewidth=2, markersize=8)

    n_ref = np.array([n_paths_grid[0], n_paths_grid[-1]])
    stderr_ref = mean_stderr[0] * np.sqrt(n_paths_grid[0] / n_ref)
    plt.loglog(n_ref, stderr_ref, "k--", alpha=0.5, linewidth=1.5, label="O(1/√n) reference")

    plt.xlabel("Number of Paths", fontsize=12)
    plt.ylabel("Standard Error", fontsize=12)
    plt.title("LSM American Put: Standard Error vs Paths", fontsize=14, fontweight="bold")
    plt.legend(fontsize=10, loc="upper right")
    plt.grid(True, alpha=0.3, which="both", linestyle=":")
    plt.tight_layout()

    plots_dir = Path(__file__).parent.parent / "plots"
    plots_dir.mkdir(exist_ok=True)
    output_path = plots_dir / "lsm_convergence_stderr.png"
    plt.savefig(output_path, dpi=150, bbox_inches="tight")
    print(f"\nPlot saved to: {output_path}")

    plt.show()


if __name__ == "__main__":
    main()
