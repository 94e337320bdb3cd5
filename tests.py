"""
Run the riskcards test suite: installs `.[dev]` if pytest, numpy or riskcards
is missing, then runs `python -m pytest` from the project root.
"""
from __future__ import annotations

import subprocess
import sys
from pathlib import Path


ROOT = Path(__file__).resolve().parent


def ensure_test_dependencies() -> None:
    """Install the package with its dev extra unless pytest and numpy already import."""
    try:
        import pytest  # noqa: F401
        import numpy  # noqa: F401
        import riskcards  # noqa: F401
        return
    except ImportError:
        pass

    print("Installing package and test dependencies (.[dev]) ...")
    subprocess.check_call(
        [sys.executable, "-m", "pip", "install", "-e", ".[dev]"],
        cwd=str(ROOT),
    )


def main() -> None:
    ensure_test_dependencies()
    print("Running test suite with pytest ...")
    subprocess.check_call(
        [sys.executable, "-m", "pytest"],
        cwd=str(ROOT),
    )


if __name__ == "__main__":
    main()
