# smt/__init__.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Bridge between constraint formulas and an external SMT solver

"""SMT solving for quantifier-free constraint formulas.

This package answers three questions about a formula by talking to an
external SMT solver (z3 by default) through SMT-LIB scripts: is it valid, is
it unsatisfiable, and what is a simpler equivalent formula. Callers hand in
formula trees and get booleans or formula trees back; they never see solver
text.

Core Functions:
    is_true: Validity check
    is_false: Unsatisfiability check
    simplify: Solver-driven simplification
    parse_formula: Read a formula written in s-expression syntax

Supported Logics:
    LIA: Linear integer arithmetic
    LRA: Linear rational arithmetic

Example:
    >>> from formula import Named, less_than, and_
    >>> from smt import LIA, is_false
    >>> x, y = Named("x"), Named("y")
    >>> is_false(LIA, and_([less_than(x, y), less_than(y, x)]))
    True
"""

from .exceptions import ParseError, SmtError, SolverNotFoundError, SolverProcessError
from .grammar import parse_formula, parse_simplified_formula
from .logic import LIA, LRA, SmtLogic
from .script import check_sat_script, simplify_script
from .solver import Z3, SmtSolver
from .solving import is_false, is_not_satisfiable, is_true, simplify

__all__ = [
    "is_true",
    "is_false",
    "simplify",
    "is_not_satisfiable",
    "parse_formula",
    "parse_simplified_formula",
    "check_sat_script",
    "simplify_script",
    "SmtLogic",
    "LIA",
    "LRA",
    "SmtSolver",
    "Z3",
    "SmtError",
    "ParseError",
    "SolverNotFoundError",
    "SolverProcessError",
]

__version__ = "1.0.0"
__description__ = "SMT bridge for quantifier-free constraint formulas"
