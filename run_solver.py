#!/usr/bin/env python3
# run_solver.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Command-line interface for checking and simplifying constraint formulas

import sys
import argparse
from pathlib import Path

from formula.ast_nodes import Formula, Not
from smt import (
    LIA,
    LRA,
    Z3,
    ParseError,
    SmtSolver,
    SolverNotFoundError,
    SolverProcessError,
    check_sat_script,
    is_false,
    is_true,
    parse_formula,
    simplify,
    simplify_script,
)
from smt.script import CHECK_SAT, smt_script
from utils.logger import configure_logging, get_logger

LOGICS = {"lia": LIA, "lra": LRA}


def read_formula_file(filepath: Path) -> str:
    """Read formula text from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text in s-expression syntax

    Raises:
        FileNotFoundError: If formula file doesn't exist
        ValueError: If formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not content:
        raise ValueError("Formula file is empty")

    return content


def configure_logging_for_solver(debug: bool = False) -> None:
    """Configure logging levels for the command line front end.

    Results are reported at INFO level, so INFO is the floor even without
    ``--verbose``.

    Args:
        debug: Enable DEBUG level logging
    """
    configure_logging(verbose=True, debug=debug)


def solver_from_args(command: str) -> SmtSolver:
    """Return the z3 configuration, running ``command`` instead of ``z3``."""
    if command == Z3.command:
        return Z3
    return SmtSolver(command=command, options=Z3.options, smt_options=Z3.smt_options)


def print_scripts(formula: Formula, logic, check: str) -> None:
    """Print the scripts of the selected checks, ignoring shortcuts."""
    if check in ("true", "all"):
        print(smt_script(CHECK_SAT, logic, Not(formula)))
    if check in ("false", "all"):
        print(check_sat_script(logic, formula))
    if check in ("simplify", "all"):
        print(simplify_script(logic, formula))


def run_checks(formula: Formula, logic, solver: SmtSolver, check: str) -> None:
    """Run the selected solving operations and report their answers."""
    logger = get_logger()

    if check in ("true", "all"):
        logger.info(f"is true:  {is_true(logic, formula, solver=solver)}")
    if check in ("false", "all"):
        logger.info(f"is false: {is_false(logic, formula, solver=solver)}")
    if check in ("simplify", "all"):
        logger.info(f"simplified: {simplify(logic, formula, solver=solver)}")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tarski SMT bridge for constraint formulas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_solver.py -f formula.smt
  python run_solver.py -f formula.smt -l lra -c simplify
  python run_solver.py -f formula.smt --print-script
  python run_solver.py -f formula.smt --solver /opt/z3/bin/z3 --debug

Formula file format:
  Formulas in SMT-LIB s-expression syntax; several formulas denote their
  conjunction, e.g.:

  formula.smt:
    (or (< x y) (= x y))
    (not (= y v0_1_))
        """,
    )

    parser.add_argument(
        "-f", "--formula", required=True, type=Path, help="Path to formula file"
    )

    parser.add_argument(
        "-l",
        "--logic",
        choices=sorted(LOGICS),
        default="lia",
        help="Arithmetic theory of the variables (default: lia)",
    )

    parser.add_argument(
        "-c",
        "--check",
        choices=["true", "false", "simplify", "all"],
        default="all",
        help="Operation to run (default: all)",
    )

    parser.add_argument(
        "--solver", default=Z3.command, help="Solver command (default: z3)"
    )

    parser.add_argument(
        "--print-script",
        action="store_true",
        help="Print the generated scripts without running the solver",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Report the parsed formula before the results"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the command line front end.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging_for_solver(debug=args.debug)
    logger = get_logger()

    try:
        logic = LOGICS[args.logic]
        formula = parse_formula(read_formula_file(args.formula), logic)
        logger.validation_result(True, f"Formula parsed: {formula}")
        if args.verbose:
            logger.info(f"Formula loaded: {formula}")

        if args.print_script:
            print_scripts(formula, logic, args.check)
            return 0

        run_checks(formula, logic, solver_from_args(args.solver), args.check)
        return 0

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return 1

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return 2

    except SolverNotFoundError as e:
        logger.error(f"Solver configuration error: {e}")
        return 3

    except SolverProcessError as e:
        logger.error(f"Solver failure: {e}")
        return 4

    except KeyboardInterrupt:
        logger.error("Solving interrupted by user")
        return 5

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 6


if __name__ == "__main__":
    sys.exit(main())
