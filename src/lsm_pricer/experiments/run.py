"""
Experiment execution engine for reproducible LSM runs.
"""

import logging
import platform
import sys
import time
from datetime import datetime

import numpy as np

from lsm_pricer.basis.sets import make_basis_set
from lsm_pricer.config import LSMConfig
from lsm_pricer.experiments.artifacts import get_git_info
from lsm_pricer.experiments.types import (
    ExperimentConfig,
    ExperimentMetadata,
    ExperimentResult,
)
from lsm_pricer.models.gbm import GeometricBrownianMotion
from lsm_pricer.models.jump_diffusion import JumpDiffusionProcess
from lsm_pricer.payoffs.plain_vanilla import make_payoff
from lsm_pricer.pricers.lsm import LSMPricer

LOGGER = logging.getLogger(__name__)


def create_metadata(
    config: ExperimentConfig,
    seed: int,
    n_paths: int,
    git_commit: str | None
) -> ExperimentMetadata:
    """Create metadata for reproducibility."""
    return ExperimentMetadata(
        timestamp=datetime.now().isoformat(),
        python_version=f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}",
        numpy_version=np.__version__,
        os_platform=platform.platform(),
        git_commit=git_commit,
        seed=seed,
        process=config.process,
        option_type=config.option_type,
        n_paths=n_paths,
        n_exercise_dates=config.n_exercise_dates,
        antithetic=config.antithetic,
        basis=f"{config.basis_family}{config.basis_size}",
    )


def _make_process(config: ExperimentConfig):
    if config.process == "gbm":
        return GeometricBrownianMotion(r=config.r, sigma=config.sigma)
    if config.process == "jump":
        return JumpDiffusionProcess(
            r=config.r,
            sigma=config.sigma,
            jump_intensity=config.jump_intensity,
            jump_mean=config.jump_mean,
            jump_std=config.jump_std,
        )
    raise ValueError(f"Unknown process: {config.process}. Use 'gbm' or 'jump'.")


def run_experiment(config: ExperimentConfig) -> list[ExperimentResult]:
    """
    Run experiment with given configuration.

    Prices every (n_paths, seed, spot) combination with a fresh pricer,
    timing each call and capturing metadata for reproducibility.

    Parameters
    ----------
    config : ExperimentConfig
        Experiment configuration

    Returns
    -------
    list[ExperimentResult]
        One result per combination, in n_paths, seed, spot order

    Raises
    ------
    ValueError
        If any part of the configuration is invalid
    """
    # Build everything that can fail before the first pricing call
    process = _make_process(config)
    payoff = make_payoff(config.option_type, config.K)
    basis = make_basis_set(config.basis_family, config.basis_size)

    git_commit, _, _ = get_git_info()

    notes_parts = [config.process.upper(), f"LSM_{config.basis_family}{config.basis_size}"]
    if config.antithetic:
        notes_parts.append("antithetic")
    notes = "+".join(notes_parts)

    results = []
    for n_paths in config.n_paths_list:
        for seed in config.seeds:
            lsm_config = LSMConfig(
                n_paths=n_paths,
                use_antithetic=config.antithetic,
                n_exercise_dates=config.n_exercise_dates,
                maturity=config.T,
                risk_free_rate=config.r,
                rng_seed=seed,
            )
            pricer = LSMPricer(lsm_config, process, payoff, basis)
            metadata = create_metadata(config, seed, n_paths, git_commit)

            for spot in config.spots:
                start_time = time.perf_counter()
                result = pricer.price(spot)
                runtime = time.perf_counter() - start_time

                results.append(ExperimentResult(
                    config_name=config.name,
                    spot=spot,
                    option_value=result.option_value,
                    european_value=result.european_value,
                    early_exercise_premium=result.early_exercise_premium,
                    standard_error=result.standard_error,
                    ci_lower=result.ci_lower,
                    ci_upper=result.ci_upper,
                    n_paths=n_paths,
                    runtime_seconds=runtime,
                    metadata=metadata,
                    notes=notes,
                ))
                LOGGER.info(
                    "%s S=%.2f N=%d seed=%d value=%.6f (%.3fs)",
                    config.name, spot, n_paths, seed, result.option_value, runtime,
                )

    return results
