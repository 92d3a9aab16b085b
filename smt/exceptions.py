# smt/exceptions.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Exceptions raised while talking to an external SMT solver

"""Failure modes of the SMT bridge.

Every failure is fatal for the solving operation that raised it: there is no
partial result and no retry. Callers should read any of these exceptions as
"solving is currently unavailable", never as an answer about the formula.
"""

from typing import Sequence


class SmtError(RuntimeError):
    """Base class of all SMT bridge failures."""

    pass


class SolverNotFoundError(SmtError):
    """The solver executable could not be located on the search path."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(
            f'SMT Solver "{command}" is not installed or is not added to PATH.'
        )


class SolverProcessError(SmtError):
    """The solver process exited with a nonzero status.

    Attributes:
        executable: Resolved path of the solver that was run
        exit_code: Process exit status
        input: Exact text written to the solver's standard input
        stdout: Captured standard output
        stderr: Captured standard error
    """

    def __init__(self, executable: str, exit_code: int, input: str, stdout: str, stderr: str):
        self.executable = executable
        self.exit_code = exit_code
        self.input = input
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            "\n".join(
                [
                    f"SMT Solver {executable!r} exits with code: {exit_code}",
                    f"input: {input!r}",
                    f"output: {stdout!r}",
                    f"error: {stderr!r}",
                ]
            )
        )


class ParseError(SmtError):
    """Solver output does not match the expected grammar.

    Attributes:
        reason: Human-readable description of the failure
        remainder: Output text that was not consumed
        context: Grammar symbols on the parser stack when parsing failed
    """

    def __init__(self, reason: str, remainder: str = "", context: Sequence[str] = ()):
        self.reason = reason
        self.remainder = remainder
        self.context = list(context)
        super().__init__(
            "\n".join(
                [
                    "Fail to parse SMT Solver output:",
                    f"- not parsed output: {remainder!r}",
                    f"- list of contexts in which the error occurred: {self.context}",
                    f"- error message: {reason}",
                ]
            )
        )
