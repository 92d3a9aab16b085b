# formula/constructors.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Smart constructors keeping formulas in a reduced shape

"""Smart constructors for constraint formulas.

The constructors below are the only sanctioned way to build formulas outside
of tests. They fold trivial constraints, flatten nested connectives, and
collapse neutral and dominating literals, so that:

- a conjunction or disjunction always has at least two children,
- ``TrueLit``/``FalseLit`` never occur below a connective,
- the ``normalized`` flag is set exactly where the shape guarantees that the
  formula is neither a tautology nor a contradiction.
"""

from __future__ import annotations
from fractions import Fraction
from typing import Iterable, Set, Type

from .ast_nodes import And, Constraint, FalseLit, Formula, Not, Or, TrueLit
from .relations import REFLEXIVE_RELATIONS, Relation
from .variables import Variable

_TRUE = TrueLit()
_FALSE = FalseLit()


def true() -> Formula:
    return _TRUE


def false() -> Formula:
    return _FALSE


def from_bool(value: bool) -> Formula:
    return _TRUE if value else _FALSE


def constraint(relation: Relation, lhs: Variable, rhs: Variable) -> Formula:
    """Build a constraint, folding it to a literal when it is decided.

    A relation between a variable and itself, or between two constants, is
    evaluated immediately. Every other constraint mentions a free variable
    over an unbounded domain, so it is flagged normalized.

    Args:
        relation: Comparison operator
        lhs: Left operand
        rhs: Right operand

    Returns:
        ``TrueLit``, ``FalseLit`` or a normalized ``Constraint``
    """
    if lhs == rhs:
        return from_bool(relation in REFLEXIVE_RELATIONS)

    if lhs.is_constant and rhs.is_constant:
        left = Fraction(lhs.constant_value)
        right = Fraction(rhs.constant_value)
        return from_bool(relation.holds((left > right) - (left < right)))

    return Constraint(relation, lhs, rhs, normalized=True)


def equals(lhs: Variable, rhs: Variable) -> Formula:
    return constraint(Relation.EQUALS, lhs, rhs)


def not_equals(lhs: Variable, rhs: Variable) -> Formula:
    return constraint(Relation.NOT_EQUALS, lhs, rhs)


def less_than(lhs: Variable, rhs: Variable) -> Formula:
    return constraint(Relation.LESS_THAN, lhs, rhs)


def less_equals(lhs: Variable, rhs: Variable) -> Formula:
    return constraint(Relation.LESS_EQUALS, lhs, rhs)


def greater_than(lhs: Variable, rhs: Variable) -> Formula:
    return constraint(Relation.GREATER_THAN, lhs, rhs)


def greater_equals(lhs: Variable, rhs: Variable) -> Formula:
    return constraint(Relation.GREATER_EQUALS, lhs, rhs)


def not_(formula: Formula) -> Formula:
    """Negate a formula.

    Literals flip and double negations cancel. A negated normalized constraint
    stays normalized since negation preserves "neither valid nor unsatisfiable".
    """
    if isinstance(formula, TrueLit):
        return _FALSE
    if isinstance(formula, FalseLit):
        return _TRUE
    if isinstance(formula, Not):
        return formula.operand
    return Not(formula, normalized=formula.normalized)


def and_(formulas: Iterable[Formula]) -> Formula:
    """Conjunction of the given formulas (``true`` when empty)."""
    return _connective(And, formulas, neutral=TrueLit, dominant=FalseLit)


def or_(formulas: Iterable[Formula]) -> Formula:
    """Disjunction of the given formulas (``false`` when empty)."""
    return _connective(Or, formulas, neutral=FalseLit, dominant=TrueLit)


def simplified_and(formulas: Iterable[Formula]) -> Formula:
    """Conjunction of formulas already known to be in simplest form.

    Used for solver-simplified output: a resulting ``And`` is flagged
    normalized, so later checks on it are answered without the solver.
    """
    return _flag_simplified(and_(formulas))


def simplified_or(formulas: Iterable[Formula]) -> Formula:
    """Disjunction counterpart of :func:`simplified_and`."""
    return _flag_simplified(or_(formulas))


def _flag_simplified(formula: Formula) -> Formula:
    if isinstance(formula, (And, Or)) and not formula.normalized:
        return type(formula)(formula.children, normalized=True)
    return formula


def _connective(
    node: Type[Formula],
    formulas: Iterable[Formula],
    neutral: Type[Formula],
    dominant: Type[Formula],
) -> Formula:
    children: Set[Formula] = set()

    for formula in formulas:
        if isinstance(formula, dominant):
            return formula
        if isinstance(formula, neutral):
            continue
        if isinstance(formula, node):
            children.update(formula.children)
        else:
            children.add(formula)

    if not children:
        return neutral()

    if len(children) == 1:
        return next(iter(children))

    return node(frozenset(children))
