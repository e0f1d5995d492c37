"""
Types and dataclasses for reproducible LSM experiments.
"""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class ExperimentConfig:
    """
    Configuration of a grid of LSM pricing runs.

    Every combination of spot, path count and seed is priced once.

    Attributes
    ----------
    name : str
        Experiment identifier
    option_type : str
        'call' or 'put'
    K : float
        Strike price
    r : float
        Risk-free rate
    T : float
        Time to maturity
    sigma : float
        Diffusion volatility
    spots : list[float]
        Spot prices to price at
    process : str
        'gbm' or 'jump'
    jump_intensity : float
        Jump intensity λ (jump process only)
    jump_mean : float
        Mean log jump size (jump process only)
    jump_std : float
        Std of log jump size (jump process only)
    n_paths_list : list[int]
        Path counts to run
    n_exercise_dates : int
        Number of exercise dates
    seeds : list[int]
        Random seeds
    antithetic : bool
        Use antithetic pairing
    basis_family : str
        'laguerre', 'hermite' or 'monomial'
    basis_size : int
        Number of non-constant basis terms
    """

    name: str
    option_type: str
    K: float
    r: float
    T: float
    sigma: float
    spots: list[float] = field(default_factory=lambda: [40.0])
    process: str = "gbm"
    jump_intensity: float = 0.0
    jump_mean: float = -0.1
    jump_std: float = 0.15
    n_paths_list: list[int] = field(default_factory=lambda: [10000])
    n_exercise_dates: int = 50
    seeds: list[int] = field(default_factory=lambda: [42])
    antithetic: bool = False
    basis_family: str = "laguerre"
    basis_size: int = 3


@dataclass
class ExperimentMetadata:
    """
    Environment and run settings captured alongside each result.
    """

    timestamp: str
    python_version: str
    numpy_version: str
    os_platform: str
    git_commit: str | None
    seed: int
    process: str
    option_type: str
    n_paths: int
    n_exercise_dates: int
    antithetic: bool
    basis: str


@dataclass
class ExperimentResult:
    """
    Results from a single (spot, n_paths, seed) run.

    Attributes
    ----------
    config_name : str
        Name of the experiment configuration
    spot : float
        Spot price priced at
    option_value : float
        American (LSM) value
    european_value : float
        European value on the same paths
    early_exercise_premium : float
        option_value - european_value
    standard_error : float
        Standard error of option_value
    ci_lower : float
        Lower bound of 95% confidence interval
    ci_upper : float
        Upper bound of 95% confidence interval
    n_paths : int
        Number of simulation paths used
    runtime_seconds : float
        Wall-clock time of the pricing call
    metadata : ExperimentMetadata
        Full metadata for reproducibility
    notes : str
        Method label used to group rows in summaries
    """

    config_name: str
    spot: float
    option_value: float
    european_value: float
    early_exercise_premium: float
    standard_error: float
    ci_lower: float
    ci_upper: float
    n_paths: int
    runtime_seconds: float
    metadata: ExperimentMetadata
    notes: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary for JSON serialization."""
        return asdict(self)
