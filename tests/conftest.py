# tests/conftest.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Tarski tests.

The configuration handles:
- Python path setup for module imports
- Sample variables shared across suites
- Fake solver executables built from small shell scripts, so solver
  invocation can be tested without a real SMT solver installed
"""

import stat
import sys
from pathlib import Path

import pytest

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from formula import Constant, Indexed, Named  # noqa: E402
from smt.solver import SmtSolver  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable before any test runs."""
    try:
        import formula
        import smt
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def x():
    return Named("x")


@pytest.fixture
def y():
    return Named("y")


@pytest.fixture
def z():
    return Named("z")


@pytest.fixture
def v00():
    """Indexed variable at level 0, index 0, without id."""
    return Indexed(0, 0)


@pytest.fixture
def v01():
    """Indexed variable at level 0, index 1, without id."""
    return Indexed(0, 1)


@pytest.fixture
def zero():
    return Constant("0")


@pytest.fixture
def fake_solver(tmp_path):
    """Build an SmtSolver running a shell script instead of a real solver.

    Usage:
        solver = fake_solver(stdout="unsat", exit_code=0)

    The script drains its standard input into ``input.smt2`` next to itself,
    prints ``stdout`` and ``stderr``, and exits with ``exit_code``.

    Returns:
        Factory returning (SmtSolver, Path of the captured input)
    """
    counter = {"n": 0}

    def factory(stdout: str = "", stderr: str = "", exit_code: int = 0):
        counter["n"] += 1
        directory = tmp_path / f"solver{counter['n']}"
        directory.mkdir()
        captured = directory / "input.smt2"
        output_file = directory / "stdout.txt"
        error_file = directory / "stderr.txt"
        output_file.write_text(stdout)
        error_file.write_text(stderr)

        script = directory / "fake-solver"
        script.write_text(
            "#!/bin/sh\n"
            f"cat > '{captured}'\n"
            f"cat '{output_file}'\n"
            f"cat '{error_file}' >&2\n"
            f"exit {exit_code}\n"
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

        solver = SmtSolver(
            command=str(script),
            options=("-smt2", "-in"),
            smt_options=("(set-option :pp.max-depth 1000000)",),
        )
        return solver, captured

    return factory


@pytest.fixture
def missing_solver():
    """Solver whose command cannot be resolved; any invocation fails."""
    return SmtSolver(command="tarski-no-such-solver")
