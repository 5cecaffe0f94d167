#!/usr/bin/env python3
# Copyright 2026 Shank IDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the local CI checks for shank-idl.

Usage: ``tools/ci.py [STEP ...]`` where STEP is one of the keys in
:data:`STEPS` (``format``, ``lint``, ``types``, ``tests``, ``docs``,
``build``). With no arguments every step runs.
"""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, tuple[str, list[str]]] = {
    "format": ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    "lint": ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    "types": ("Type check", ["uv", "run", "ty", "check", "src/"]),
    "tests": ("Tests", ["uv", "run", "pytest", "--cov=shank_idl", "--cov-report=term-missing"]),
    "docs": ("Docs", ["uv", "run", "sphinx-build", "-q", "-b", "html", "docs/sphinx", "build/docs"]),
    "build": ("Build", ["uv", "build"]),
}


def main(argv: list[str]) -> int:
    """Run the selected CI steps and print a pass/fail summary."""
    selected = argv or list(STEPS)
    unknown = [key for key in selected if key not in STEPS]
    if unknown:
        print(chalk.red(f"Unknown step(s): {', '.join(unknown)}; choose from {', '.join(STEPS)}"))
        return 2

    results = [_run_step(*STEPS[key]) for key in selected]
    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_REPO_ROOT = Path(__file__).resolve().parent.parent
_SEP = "=" * 60


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    print(f"\n{chalk.blue(_SEP)}\n{chalk.blue(name)}\n{chalk.blue(_SEP)}")
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_REPO_ROOT)
    return name, proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[str, bool, float]]) -> None:
    print(f"\n{chalk.blue(_SEP)}\n{chalk.blue('  Summary')}\n{chalk.blue(_SEP)}")
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
