# formula/free_variables.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Collection of the free variables of a formula

"""Free-variable analysis for constraint formulas."""

from __future__ import annotations
from typing import FrozenSet, Set

from . import ast_nodes as ast
from .variables import Variable


class FreeVariableCollector(ast.Visitor):
    """Accumulates every non-constant variable met while visiting a formula."""

    def __init__(self):
        self.found: Set[Variable] = set()

    def visit_true(self, n: ast.TrueLit) -> None:
        pass

    def visit_false(self, n: ast.FalseLit) -> None:
        pass

    def visit_constraint(self, n: ast.Constraint) -> None:
        for operand in (n.lhs, n.rhs):
            if not operand.is_constant:
                self.found.add(operand)

    def visit_not(self, n: ast.Not) -> None:
        n.operand.accept(self)

    def visit_and(self, n: ast.And) -> None:
        for child in n.children:
            child.accept(self)

    def visit_or(self, n: ast.Or) -> None:
        for child in n.children:
            child.accept(self)


def free_variables(formula: ast.Formula) -> FrozenSet[Variable]:
    """Return the set of free (non-constant) variables of ``formula``."""
    collector = FreeVariableCollector()
    formula.accept(collector)
    return frozenset(collector.found)
