# smt/solver.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# One-shot invocation of an external SMT solver process

"""External solver invocation.

Every request starts a fresh solver process, writes the configuration
preamble followed by the script to its standard input, waits for it to exit,
and returns its standard output. There is no session reuse, batching, retry,
or timeout; concurrent callers each get their own process.
"""

import functools
import shutil
import subprocess
from dataclasses import dataclass
from typing import Tuple

from utils.logger import get_logger
from .exceptions import SolverNotFoundError, SolverProcessError


@functools.lru_cache(maxsize=None)
def find_executable(command: str) -> str:
    """Resolve ``command`` on the executable search path, once per command.

    Raises:
        SolverNotFoundError: The command is not installed or not on ``PATH``
    """
    path = shutil.which(command)
    if path is None:
        raise SolverNotFoundError(command)
    get_logger().debug(f"Resolved SMT solver {command!r} to {path}")
    return path


@dataclass(frozen=True)
class SmtSolver:
    """Command line and configuration preamble of an SMT solver.

    Attributes:
        command: Executable name or path, resolved through ``PATH``
        options: Command-line flags selecting script input and batch mode
        smt_options: ``set-option`` directives sent before every script
    """

    command: str
    options: Tuple[str, ...] = ()
    smt_options: Tuple[str, ...] = ()

    @property
    def executable(self) -> str:
        return find_executable(self.command)

    def preamble(self) -> str:
        return "".join(f"{option}\n" for option in self.smt_options)

    def run(self, script: str) -> str:
        """Run the solver once on ``script`` and return its standard output.

        Args:
            script: SMT-LIB commands to send after the preamble

        Returns:
            Captured standard output of a successful run

        Raises:
            SolverNotFoundError: The executable cannot be resolved
            SolverProcessError: The process exits with a nonzero status
        """
        logger = get_logger()
        executable = self.executable
        solver_input = self.preamble() + script

        logger.debug(f"Running {executable} {' '.join(self.options)}")
        completed = subprocess.run(
            [executable, *self.options],
            input=solver_input,
            capture_output=True,
            text=True,
            check=False,
        )
        logger.debug(f"SMT solver exited with code {completed.returncode}")

        if completed.returncode != 0:
            raise SolverProcessError(
                executable,
                completed.returncode,
                solver_input,
                completed.stdout,
                completed.stderr,
            )

        return completed.stdout


Z3 = SmtSolver(
    command="z3",
    options=("-smt2", "-in", "-nw"),
    smt_options=(
        "(set-option :smt.auto-config false)",
        "(set-option :smt.mbqi false)",
        "(set-option :pp.min-alias-size 1000000)",
        "(set-option :pp.max-depth 1000000)",
    ),
)
