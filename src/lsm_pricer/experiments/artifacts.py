"""Artifact generation for reproducible pricing experiments.

Results are saved as JSON together with git and environment metadata, so a
table can be traced back to the exact code and seed that produced it.
"""

import json
import logging
import platform
import subprocess
import sys
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

import numpy as np

LOGGER = logging.getLogger(__name__)


@dataclass
class ArtifactMetadata:
    """Metadata for reproducible experiment artifacts.

    Attributes
    ----------
    timestamp : str
        ISO 8601 timestamp of experiment run.
    git_commit : str | None
        Git commit SHA if available.
    git_branch : str | None
        Git branch name if available.
    git_dirty : bool
        Whether working directory has uncommitted changes.
    python_version : str
        Python version string.
    numpy_version : str
        NumPy version string.
    platform : str
        Platform description.
    """

    timestamp: str
    git_commit: str | None
    git_branch: str | None
    git_dirty: bool
    python_version: str
    numpy_version: str
    platform: str


def _git(*args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        capture_output=True,
        text=True,
        check=True,
        timeout=2,
    )
    return result.stdout.strip()


def get_git_info() -> tuple[str | None, str | None, bool]:
    """Get git commit, branch, and dirty status.

    Returns
    -------
    tuple
        (commit_sha, branch_name, is_dirty); (None, None, False) outside a repo
    """
    try:
        commit = _git("rev-parse", "HEAD")
        branch = _git("rev-parse", "--abbrev-ref", "HEAD")
        is_dirty = bool(_git("status", "--porcelain"))
    except (subprocess.CalledProcessError, FileNotFoundError, subprocess.TimeoutExpired):
        LOGGER.debug("git metadata unavailable")
        return None, None, False
    return commit, branch, is_dirty


def collect_metadata() -> ArtifactMetadata:
    """Collect environment metadata for the current process."""
    commit, branch, dirty = get_git_info()

    return ArtifactMetadata(
        timestamp=datetime.now().isoformat(),
        git_commit=commit,
        git_branch=branch,
        git_dirty=dirty,
        python_version=sys.version.split()[0],
        numpy_version=np.__version__,
        platform=platform.platform(),
    )


def save_artifact(
    data: dict[str, Any],
    output_path: str | Path,
    include_metadata: bool = True,
) -> Path:
    """Save experiment artifact as JSON with metadata.

    Parameters
    ----------
    data : dict
        Experiment data to save (results, config, etc.).
    output_path : str or Path
        Output file path; parent directories are created.
    include_metadata : bool
        Whether to include environment metadata.

    Returns
    -------
    Path
        The written file.
    """
    artifact: dict[str, Any] = {"data": data}
    if include_metadata:
        artifact["metadata"] = asdict(collect_metadata())

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(artifact, f, indent=2)

    LOGGER.info("Artifact written to %s", output_path)
    return output_path


def format_summary_table(
    headers: list[str],
    rows: list[list[Any]],
    title: str | None = None,
) -> str:
    """Format rows as a markdown table.

    Floats are rendered with 4 decimals.
    """
    def _cell(value: Any) -> str:
        if isinstance(value, float):
            return f"{value:.4f}"
        return str(value)

    lines = []
    if title:
        lines.append(f"\n### {title}\n")

    lines.append("| " + " | ".join(str(h) for h in headers) + " |")
    lines.append("| " + " | ".join("---" for _ in headers) + " |")
    for row in rows:
        lines.append("| " + " | ".join(_cell(cell) for cell in row) + " |")

    return "\n".join(lines)
