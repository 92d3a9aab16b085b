# smt/solving.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Public solving operations: validity, unsatisfiability, simplification

"""Solving operations backed by an external SMT solver.

Each operation first tries to decide the formula from its shape:

- ``TrueLit`` and ``FalseLit`` are answered directly,
- a normalized formula that is not a literal is neither valid nor
  unsatisfiable, so validity and unsatisfiability checks answer ``False`` and
  simplification returns it unchanged.

Only the remaining formulas are sent to the solver, one fresh process per
call.
"""

from typing import Optional

from formula import ast_nodes as ast
from formula.constructors import false, true
from utils.logger import get_logger
from .grammar import parse_simplified_formula
from .logic import SmtLogic
from .script import check_sat_script, simplify_script
from .solver import Z3, SmtSolver


def is_not_satisfiable(output: str) -> bool:
    """Interpret ``check-sat`` output; only ``unsat`` proves unsatisfiability."""
    return "".join(output.split()) == "unsat"


def _check_unsat(logic: SmtLogic, formula: ast.Formula, solver: SmtSolver) -> bool:
    logger = get_logger()
    script = check_sat_script(logic, formula)
    logger.solver_call("check-sat", str(logic), script)
    output = solver.run(script)
    logger.solver_result("check-sat", output)
    return is_not_satisfiable(output)


def is_true(logic: SmtLogic, formula: ast.Formula, solver: Optional[SmtSolver] = None) -> bool:
    """Decide whether ``formula`` holds for every assignment.

    Args:
        logic: Arithmetic theory of the variables
        formula: Formula to check
        solver: Solver to ask when the shape does not decide (default: z3)

    Returns:
        True only when the solver proves the negation unsatisfiable
    """
    logger = get_logger()
    if isinstance(formula, ast.TrueLit):
        logger.short_circuit("is_true", "formula is true")
        return True
    if isinstance(formula, ast.FalseLit):
        logger.short_circuit("is_true", "formula is false")
        return False
    if formula.normalized:
        logger.short_circuit("is_true", "normalized formula is not a tautology")
        return False
    return _check_unsat(logic, ast.Not(formula), solver or Z3)


def is_false(logic: SmtLogic, formula: ast.Formula, solver: Optional[SmtSolver] = None) -> bool:
    """Decide whether ``formula`` has no satisfying assignment.

    Args:
        logic: Arithmetic theory of the variables
        formula: Formula to check
        solver: Solver to ask when the shape does not decide (default: z3)

    Returns:
        True only when the solver proves the formula unsatisfiable
    """
    logger = get_logger()
    if isinstance(formula, ast.TrueLit):
        logger.short_circuit("is_false", "formula is true")
        return False
    if isinstance(formula, ast.FalseLit):
        logger.short_circuit("is_false", "formula is false")
        return True
    if formula.normalized:
        logger.short_circuit("is_false", "normalized formula is satisfiable")
        return False
    return _check_unsat(logic, formula, solver or Z3)


def simplify(logic: SmtLogic, formula: ast.Formula, solver: Optional[SmtSolver] = None) -> ast.Formula:
    """Return a simpler formula logically equivalent to ``formula``.

    Args:
        logic: Arithmetic theory of the variables
        formula: Formula to simplify
        solver: Solver to ask when the shape does not decide (default: z3)

    Returns:
        Formula rebuilt from the solver's simplified goal, or the input's
        canonical form when no solver call is needed

    Raises:
        ParseError: The solver answered with output outside the goal grammar
    """
    logger = get_logger()
    if isinstance(formula, ast.TrueLit):
        logger.short_circuit("simplify", "formula is true")
        return true()
    if isinstance(formula, ast.FalseLit):
        logger.short_circuit("simplify", "formula is false")
        return false()
    if formula.normalized:
        logger.short_circuit("simplify", "formula is already normalized")
        return formula

    script = simplify_script(logic, formula)
    logger.solver_call("simplify", str(logic), script)
    output = (solver or Z3).run(script)
    logger.solver_result("simplify", output)
    return parse_simplified_formula(output, logic)
