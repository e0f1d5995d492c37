"""
Experiments package for reproducible research.
"""

from lsm_pricer.experiments.artifacts import (
    ArtifactMetadata,
    format_summary_table,
    save_artifact,
)
from lsm_pricer.experiments.io import load_results, save_results
from lsm_pricer.experiments.run import run_experiment
from lsm_pricer.experiments.types import (
    ExperimentConfig,
    ExperimentMetadata,
    ExperimentResult,
)

__all__ = [
    "ArtifactMetadata",
    "ExperimentConfig",
    "ExperimentMetadata",
    "ExperimentResult",
    "format_summary_table",
    "load_results",
    "run_experiment",
    "save_artifact",
    "save_results",
]
