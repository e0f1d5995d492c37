#!/usr/bin/env python
"""
Command-line interface for LSM American option pricing.

This module provides the main CLI entrypoint for the lsm-price command.

Example usage:
    lsm-price --S0 36 --K 40 --r 0.06 --sigma 0.2 --T 1.0 --n_paths 10000 --seed 42
    lsm-price --S0 40 --K 40 --r 0.06 --sigma 0.2 --T 1.0 --analysis paths --bs
    lsm-price --S0 40 --K 40 --r 0.06 --sigma 0.2 --T 1.0 --process jump --jump_intensity 0.1
"""

import argparse
import logging
import math
import sys
from dataclasses import asdict

from lsm_pricer.analysis.convergence import ConvergenceAnalyzer
from lsm_pricer.analytics.black_scholes import bs_price
from lsm_pricer.basis.sets import BASIS_FAMILIES, basis_names, make_basis_set
from lsm_pricer.config import LSMConfig
from lsm_pricer.experiments.artifacts import save_artifact
from lsm_pricer.models.gbm import GeometricBrownianMotion
from lsm_pricer.models.jump_diffusion import JumpDiffusionProcess
from lsm_pricer.payoffs.plain_vanilla import make_payoff
from lsm_pricer.pricers.lsm import LSMPricer

LOGGER = logging.getLogger(__name__)

RULE = "=" * 70


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Longstaff-Schwartz American option pricer",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Market parameters
    parser.add_argument("--S0", type=float, required=True, help="Initial spot price")
    parser.add_argument("--K", type=float, required=True, help="Strike price")
    parser.add_argument("--r", type=float, required=True, help="Risk-free rate")
    parser.add_argument("--sigma", type=float, required=True, help="Diffusion volatility")
    parser.add_argument("--T", type=float, required=True, help="Time to maturity (years)")
    parser.add_argument(
        "--option_type",
        type=str,
        choices=["call", "put"],
        default="put",
        help="Option type: call or put",
    )

    # Process selection
    parser.add_argument(
        "--process",
        type=str,
        choices=["gbm", "jump"],
        default="gbm",
        help="Asset dynamics: gbm or jump (Merton jump-diffusion)",
    )
    parser.add_argument("--jump_intensity", type=float, default=0.0, help="Jumps per year")
    parser.add_argument("--jump_mean", type=float, default=-0.1, help="Mean log jump size")
    parser.add_argument("--jump_std", type=float, default=0.15, help="Std of log jump size")

    # Simulation parameters
    parser.add_argument("--n_paths", type=int, default=10000, help="Number of Monte Carlo paths")
    parser.add_argument("--n_dates", type=int, default=50, help="Number of exercise dates")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument(
        "--antithetic",
        action="store_true",
        help="Use antithetic path pairing (n_paths must be even)",
    )

    # Regression basis
    parser.add_argument(
        "--basis",
        type=str,
        choices=list(BASIS_FAMILIES),
        default="laguerre",
        help="Basis family for the continuation-value regression",
    )
    parser.add_argument(
        "--basis_size",
        type=int,
        default=3,
        help="Number of basis terms after the constant",
    )

    # Diagnostics
    parser.add_argument(
        "--analysis",
        type=str,
        choices=["none", "basis", "paths", "oos"],
        default="none",
        help="Convergence analysis: basis size, path count, or out-of-sample",
    )
    parser.add_argument("--max_basis", type=int, default=5, help="Largest basis size (basis)")
    parser.add_argument(
        "--path_counts",
        type=int,
        nargs="+",
        default=[500, 1000, 2000, 5000, 10000, 20000],
        help="Path counts (paths)",
    )
    parser.add_argument("--trials", type=int, default=5, help="Number of trials (oos)")

    # Output
    parser.add_argument(
        "--bs",
        action="store_true",
        help="Display the Black-Scholes European reference (GBM only)",
    )
    parser.add_argument("--output", type=str, default=None, help="Write a JSON artifact here")
    parser.add_argument(
        "--log_level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level",
    )

    return parser.parse_args(args)


def _build_process(parsed: argparse.Namespace):
    if parsed.process == "jump":
        return JumpDiffusionProcess(
            r=parsed.r,
            sigma=parsed.sigma,
            jump_intensity=parsed.jump_intensity,
            jump_mean=parsed.jump_mean,
            jump_std=parsed.jump_std,
        )
    return GeometricBrownianMotion(r=parsed.r, sigma=parsed.sigma)


def _print_inputs(parsed: argparse.Namespace) -> None:
    print(RULE)
    print("Longstaff-Schwartz American Option Pricer")
    print(RULE)
    print("\nInput Parameters:")
    print(f"  Spot Price (S0):        {parsed.S0:,.2f}")
    print(f"  Strike Price (K):       {parsed.K:,.2f}")
    print(f"  Risk-free Rate (r):     {parsed.r:.4f}")
    print(f"  Volatility (σ):         {parsed.sigma:.4f}")
    print(f"  Time to Maturity (T):   {parsed.T:.4f} years")
    print(f"  Option Type:            {parsed.option_type.upper()}")
    print(f"  Process:                {parsed.process.upper()}")
    if parsed.process == "jump":
        print(f"  Jump Intensity (λ):     {parsed.jump_intensity:.4f}")
        print(f"  Jump Mean / Std:        {parsed.jump_mean:.4f} / {parsed.jump_std:.4f}")
    print("\nSimulation Parameters:")
    print(f"  Number of Paths:        {parsed.n_paths:,}")
    print(f"  Exercise Dates:         {parsed.n_dates}")
    print(f"  Antithetic Pairing:     {parsed.antithetic}")
    print(f"  Random Seed:            {parsed.seed}")
    print(f"  Basis:                  {parsed.basis} ({parsed.basis_size} terms + constant)")


def main(args: list[str] | None = None) -> int:
    """Main entry point for CLI.

    Parameters
    ----------
    args : list[str] | None
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    int
        Exit code (0 for success, non-zero for errors).
    """
    parsed = parse_args(args)
    logging.basicConfig(
        level=getattr(logging, parsed.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = LSMConfig(
            n_paths=parsed.n_paths,
            use_antithetic=parsed.antithetic,
            n_exercise_dates=parsed.n_dates,
            maturity=parsed.T,
            risk_free_rate=parsed.r,
            rng_seed=parsed.seed,
        )
        basis = make_basis_set(parsed.basis, parsed.basis_size)
        pricer = LSMPricer(
            config=config,
            process=_build_process(parsed),
            payoff=make_payoff(parsed.option_type, parsed.K),
            basis=basis,
        )
        if parsed.S0 <= 0:
            raise ValueError("Spot price must be positive")
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    _print_inputs(parsed)

    print("\n" + RULE)
    print("Pricing...")
    print(RULE)

    result = pricer.price(parsed.S0)

    print("\nResults (LSM American):")
    print(f"  American Value:         {result.option_value:.6f}")
    print(f"  European Value:         {result.european_value:.6f}")
    print(f"  Early Exercise Premium: {result.early_exercise_premium:.6f}")
    print(f"  Standard Error:         {result.standard_error:.6f}")
    print(f"  95% Confidence Interval: [{result.ci_lower:.6f}, {result.ci_upper:.6f}]")
    if result.standard_error > 0:
        print(f"  Premium / SE:           {result.early_exercise_premium / result.standard_error:.2f}")

    artifact = {
        "inputs": vars(parsed),
        "config": asdict(config),
        "basis": basis_names(basis),
        "result": asdict(result),
    }

    if parsed.bs:
        if parsed.process != "gbm":
            print("\nNote: Black-Scholes reference is only available for the GBM process")
        else:
            reference = bs_price(parsed.S0, parsed.K, parsed.r, parsed.T, parsed.sigma,
                                 parsed.option_type)
            diff = result.european_value - reference
            print("\nBlack-Scholes European Reference:")
            print(f"  BS Price:               {reference:.6f}")
            print(f"  MC European - BS:       {diff:.6f}")
            if result.european_standard_error > 0:
                print(f"  Std Errors:             {abs(diff) / result.european_standard_error:.2f}σ")
            artifact["black_scholes"] = reference

    if parsed.analysis != "none":
        try:
            analyzer = ConvergenceAnalyzer(
                option_type=parsed.option_type,
                basis_family=parsed.basis,
                basis_size=parsed.basis_size,
                process=parsed.process,
                jump_intensity=parsed.jump_intensity,
                jump_mean=parsed.jump_mean,
                jump_std=parsed.jump_std,
            )
            artifact["analysis"] = _run_analysis(parsed, analyzer, config)
        except ValueError as e:
            print(f"Error: {e}")
            return 1

    if parsed.output:
        path = save_artifact(artifact, parsed.output)
        print(f"\n✓ Artifact saved to {path}")

    print("\n" + RULE)
    return 0


def _run_analysis(
    parsed: argparse.Namespace,
    analyzer: ConvergenceAnalyzer,
    config: LSMConfig
) -> list[dict]:
    print("\n" + RULE)

    if parsed.analysis == "basis":
        print("Convergence vs. Basis Functions M")
        print("  (LSM value is a lower bound; should rise then stabilise with M)")
        print(RULE)
        rows = analyzer.analyze_by_basis_functions(
            config, parsed.S0, parsed.K, parsed.sigma, parsed.max_basis
        )
        print(f"{'M':>6} {'Value':>12} {'Std Error':>12}")
        print("-" * 70)
        for row in rows:
            print(f"{row.parameter:>6} {row.value:>12.4f} {row.standard_error:>12.4f}")
        return [row._asdict() for row in rows]

    if parsed.analysis == "paths":
        print("Convergence vs. Path Count N")
        print("  (Standard error should fall proportionally to 1/√N)")
        print(RULE)
        rows = analyzer.analyze_by_path_count(
            config, parsed.S0, parsed.K, parsed.sigma, parsed.path_counts
        )
        print(f"{'N':>10} {'Value':>12} {'Std Error':>12} {'SE * √N':>12}")
        print("-" * 70)
        for row in rows:
            scaled = row.standard_error * math.sqrt(row.parameter)
            print(f"{row.parameter:>10,} {row.value:>12.4f} {row.standard_error:>12.4f} "
                  f"{scaled:>12.4f}")
        return [row._asdict() for row in rows]

    print("Out-of-Sample Stability Test")
    print("  (In-sample and out-of-sample values should be close)")
    print(RULE)
    trials = analyzer.out_of_sample_test(config, parsed.S0, parsed.K, parsed.sigma, parsed.trials)
    print(f"{'Trial':>8} {'In-Sample':>14} {'Out-of-Sample':>14} {'Difference':>12}")
    print("-" * 70)
    for k, trial in enumerate(trials, start=1):
        print(f"{k:>8} {trial.in_sample.option_value:>14.4f} "
              f"{trial.out_of_sample.option_value:>14.4f} {trial.difference:>12.4f}")
    return [
        {
            "in_sample": asdict(trial.in_sample),
            "out_of_sample": asdict(trial.out_of_sample),
        }
        for trial in trials
    ]


if __name__ == "__main__":
    sys.exit(main())
