"""
I/O utilities for saving and loading experiment results.
"""

import json
import logging
from pathlib import Path

from lsm_pricer.experiments.types import ExperimentResult

LOGGER = logging.getLogger(__name__)

RULE_WIDTH = 110


def save_results(
    results: list[ExperimentResult],
    out_dir: Path,
    experiment_name: str
) -> tuple[Path, Path]:
    """
    Save experiment results to JSON and summary text files.

    Creates:
    - results.json: Full machine-readable results
    - summary.txt: Human-readable table summary

    Parameters
    ----------
    results : list[ExperimentResult]
        Experiment results to save
    out_dir : Path
        Output directory
    experiment_name : str
        Name of experiment for headers

    Returns
    -------
    tuple[Path, Path]
        Paths of results.json and summary.txt
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    json_path = out_dir / "results.json"
    json_data = {
        "experiment_name": experiment_name,
        "n_results": len(results),
        "results": [r.to_dict() for r in results]
    }
    with open(json_path, "w") as f:
        json.dump(json_data, f, indent=2)

    summary_path = out_dir / "summary.txt"
    with open(summary_path, "w") as f:
        f.write("=" * RULE_WIDTH + "\n")
        f.write(f"Experiment: {experiment_name}\n")
        f.write("=" * RULE_WIDTH + "\n")
        f.write(f"\nTotal runs: {len(results)}\n")

        if results:
            meta = results[0].metadata
            f.write("\nMetadata:\n")
            f.write(f"  Timestamp:      {meta.timestamp}\n")
            f.write(f"  Python:         {meta.python_version}\n")
            f.write(f"  NumPy:          {meta.numpy_version}\n")
            f.write(f"  Platform:       {meta.os_platform}\n")
            f.write(f"  Git commit:     {meta.git_commit or 'N/A'}\n")
            f.write(f"  Process:        {meta.process}\n")
            f.write(f"  Option:         American {meta.option_type}\n")
            f.write(f"  Dates:          {meta.n_exercise_dates}\n")

        f.write("\n" + "-" * RULE_WIDTH + "\n")
        f.write(f"{'Method':<28} {'Spot':>8} {'n_paths':>9} {'American':>11} "
                f"{'European':>11} {'EEP':>10} {'Stderr':>10} {'Runtime (s)':>12}\n")
        f.write("-" * RULE_WIDTH + "\n")

        for r in results:
            f.write(f"{r.notes:<28} {r.spot:>8.2f} {r.n_paths:>9} {r.option_value:>11.6f} "
                    f"{r.european_value:>11.6f} {r.early_exercise_premium:>10.6f} "
                    f"{r.standard_error:>10.6f} {r.runtime_seconds:>12.3f}\n")

        f.write("-" * RULE_WIDTH + "\n")

        # Seeds averaged per (spot, n_paths)
        groups: dict[tuple[float, int], list[ExperimentResult]] = {}
        for r in results:
            groups.setdefault((r.spot, r.n_paths), []).append(r)

        if any(len(group) > 1 for group in groups.values()):
            f.write("\nMean over seeds:\n")
            f.write("-" * RULE_WIDTH + "\n")
            f.write(f"{'Spot':>8} {'n_paths':>9} {'Count':>6} {'Mean Value':>12} "
                    f"{'Mean EEP':>10} {'Mean Stderr':>12}\n")
            f.write("-" * RULE_WIDTH + "\n")
            for (spot, n_paths), group in sorted(groups.items()):
                count = len(group)
                mean_value = sum(r.option_value for r in group) / count
                mean_eep = sum(r.early_exercise_premium for r in group) / count
                mean_stderr = sum(r.standard_error for r in group) / count
                f.write(f"{spot:>8.2f} {n_paths:>9} {count:>6} {mean_value:>12.6f} "
                        f"{mean_eep:>10.6f} {mean_stderr:>12.6f}\n")
            f.write("-" * RULE_WIDTH + "\n")

    LOGGER.info("Results saved to %s (%s, %s)", out_dir, json_path.name, summary_path.name)
    return json_path, summary_path


def load_results(results_dir: Path) -> dict:
    """
    Load experiment results from JSON file.

    Parameters
    ----------
    results_dir : Path
        Directory containing results.json

    Returns
    -------
    dict
        Loaded experiment data
    """
    json_path = Path(results_dir) / "results.json"
    with open(json_path) as f:
        return json.load(f)
