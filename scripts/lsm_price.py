#!/usr/bin/env python
"""
Command-line interface for LSM American option pricing.

Thin wrapper around lsm_pricer.cli for running without installation.
Prefer the installed 'lsm-price' command or 'python -m lsm_pricer.cli'.

Example usage:
    lsm-price --S0 36 --K 40 --r 0.06 --sigma 0.2 --T 1.0 --n_paths 10000
    python scripts/lsm_price.py --S0 40 --K 40 --r 0.06 --sigma 0.2 --T 1.0 \
        --process jump --jump_intensity 0.1 --analysis oos
"""

import sys
from pathlib import Path

# Add parent directory to path to allow running without installation
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lsm_pricer.cli import main

if __name__ == "__main__":
    sys.exit(main())
