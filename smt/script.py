# smt/script.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Rendering of formulas into SMT-LIB scripts

"""SMT-LIB script generation for constraint formulas.

Both script kinds share one shape::

    (set-logic <LOGIC>)
    (declare-const <token> <sort>)     ; one per free variable
    (assert <formula>)
    <suffix>

where the suffix is ``(check-sat)`` for satisfiability queries and
``(apply ctx-solver-simplify)`` for simplification queries. Declarations are
sorted by token and connective children by their rendered text, so a given
formula always produces the same script.
"""

from __future__ import annotations
from typing import Iterable, List

from formula import ast_nodes as ast
from formula.free_variables import free_variables
from formula.relations import Relation
from formula.variables import Variable
from utils.logger import get_logger
from .codec import encode_relation, encode_variable
from .logic import SmtLogic

CHECK_SAT = "(check-sat)"
SIMPLIFY = "(apply ctx-solver-simplify)"


class AssertionRenderer(ast.Visitor):
    """Renders a formula as the body of an ``assert`` command.

    Attributes:
        logic: Profile used to write constants
    """

    def __init__(self, logic: SmtLogic):
        self.logic = logic

    def render(self, formula: ast.Formula) -> str:
        return formula.accept(self)

    def operand(self, variable: Variable) -> str:
        if variable.is_constant:
            return self.logic.constant_to_smt(variable.constant_value)
        return encode_variable(variable)

    def visit_true(self, n: ast.TrueLit) -> str:
        return " true "

    def visit_false(self, n: ast.FalseLit) -> str:
        return " false "

    def visit_constraint(self, n: ast.Constraint) -> str:
        lhs = self.operand(n.lhs)
        rhs = self.operand(n.rhs)
        if n.relation is Relation.NOT_EQUALS:
            return f"(not (= {lhs} {rhs}))"
        return f"({encode_relation(n.relation)} {lhs} {rhs})"

    def visit_not(self, n: ast.Not) -> str:
        return f"(not {self.render(n.operand)})"

    def visit_and(self, n: ast.And) -> str:
        return self._connective("and", n.children)

    def visit_or(self, n: ast.Or) -> str:
        return self._connective("or", n.children)

    def _connective(self, op: str, children: Iterable[ast.Formula]) -> str:
        rendered = sorted(self.render(child) for child in children)
        return f"({op} {' '.join(rendered)})"


def declarations(logic: SmtLogic, formula: ast.Formula) -> List[str]:
    """Return one ``declare-const`` command per free variable of ``formula``."""
    tokens = sorted(encode_variable(v) for v in free_variables(formula))
    return [f"(declare-const {token} {logic.sort})" for token in tokens]


def smt_script(check: str, logic: SmtLogic, formula: ast.Formula) -> str:
    """Build a complete script asserting ``formula`` and ending with ``check``.

    Args:
        check: Final command of the script
        logic: Theory profile providing logic, sort, and constant syntax
        formula: Formula to assert

    Returns:
        Script text, one command per line
    """
    lines = [f"(set-logic {logic.logic})"]
    lines.extend(declarations(logic, formula))
    lines.append(f"(assert {AssertionRenderer(logic).render(formula)})")
    lines.append(check)

    script = "\n".join(lines) + "\n"
    get_logger().debug(f"Generated {logic} script with {len(lines) - 3} declarations")
    return script


def check_sat_script(logic: SmtLogic, formula: ast.Formula) -> str:
    return smt_script(CHECK_SAT, logic, formula)


def simplify_script(logic: SmtLogic, formula: ast.Formula) -> str:
    return smt_script(SIMPLIFY, logic, formula)
