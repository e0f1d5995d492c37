#!/usr/bin/env python
"""
Reproducible experiment runner.

Usage:
    python scripts/runner.py --experiment put_spot_grid
    python scripts/runner.py --experiment jump_put
    python scripts/runner.py --experiment all
"""

import argparse
import logging
import sys
from dataclasses import replace
from datetime import datetime
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lsm_pricer.experiments import ExperimentConfig, run_experiment, save_results


def get_put_spot_grid() -> ExperimentConfig:
    """
    American put across spot prices.

    K=40, r=6%, sigma=20%, one year, 50 exercise dates, three seeds.
    """
    return ExperimentConfig(
        name="american_put_spot_grid",
        option_type="put",
        K=40.0,
        r=0.06,
        T=1.0,
        sigma=0.2,
        spots=[36.0, 38.0, 40.0, 42.0, 44.0],
        n_paths_list=[10000],
        seeds=[42, 123, 456],
    )


def get_jump_put() -> ExperimentConfig:
    """
    American put under Merton jump-diffusion at the money.
    """
    return ExperimentConfig(
        name="american_put_jump_diffusion",
        option_type="put",
        K=40.0,
        r=0.06,
        T=1.0,
        sigma=0.2,
        spots=[40.0],
        process="jump",
        jump_intensity=0.1,
        n_paths_list=[10000],
        seeds=[42, 123, 456],
    )


def run_put_spot_grid(results_dir: Path) -> None:
    """Run put spot grid, plain and antithetic."""
    print("\n" + "=" * 80)
    print("BENCHMARK: American Put Spot Grid")
    print("=" * 80)

    base_config = get_put_spot_grid()
    all_results = []

    print("\n1. Plain LSM...")
    all_results.extend(run_experiment(base_config))

    print("2. Antithetic pairing...")
    all_results.extend(run_experiment(replace(base_config, antithetic=True)))

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = results_dir / "put_spot_grid" / timestamp
    json_path, summary_path = save_results(all_results, out_dir, "American Put Spot Grid")
    print(f"\nSaved {json_path} and {summary_path}")


def run_jump_put(results_dir: Path) -> None:
    """Run jump-diffusion put across jump intensities."""
    print("\n" + "=" * 80)
    print("BENCHMARK: Jump-Diffusion American Put")
    print("=" * 80)

    base_config = get_jump_put()
    all_results = []

    for lam in [0.0, 0.05, 0.1]:
        print(f"  lambda={lam:.2f}")
        results = run_experiment(replace(base_config, jump_intensity=lam))
        for r in results:
            r.notes = f"{r.notes} lambda={lam:.2f}"
        all_results.extend(results)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = results_dir / "jump_put" / timestamp
    json_path, summary_path = save_results(all_results, out_dir, "Jump-Diffusion American Put")
    print(f"\nSaved {json_path} and {summary_path}")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Run reproducible experiments",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--experiment",
        type=str,
        required=True,
        choices=["put_spot_grid", "jump_put", "all"],
        help="Experiment to run",
    )

    parser.add_argument(
        "--results_dir", type=Path, default=Path("results"), help="Directory for results output"
    )

    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    args.results_dir.mkdir(exist_ok=True)

    print("\n" + "=" * 80)
    print("REPRODUCIBLE EXPERIMENT RUNNER")
    print("=" * 80)
    print(f"Results directory: {args.results_dir.absolute()}")

    if args.experiment in ("put_spot_grid", "all"):
        run_put_spot_grid(args.results_dir)

    if args.experiment in ("jump_put", "all"):
        run_jump_put(args.results_dir)

    print("\n" + "=" * 80)
    print("✓ All experiments complete")
    print("=" * 80)


if __name__ == "__main__":
    main()
