# formula/ast_nodes.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Immutable node classes for quantifier-free constraint formulas

"""Node classes for quantifier-free formulas over relational constraints.

Formulas are immutable, hashable trees. Conjunctions and disjunctions hold
their children as frozen sets: child order carries no meaning and duplicates
collapse.

Every node carries a ``normalized`` flag. A normalized formula is known not to
be a tautology unless it is literally ``TrueLit``, and not to be a
contradiction unless it is literally ``FalseLit``. The flag is a hint for the
solving layer only; it does not take part in equality or hashing.

Node Types:
    TrueLit, FalseLit: Boolean constants
    Constraint: Relation applied to two variables
    Not, And, Or: Boolean connectives

All nodes support the visitor design pattern for traversal.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Protocol

from .relations import Relation
from .variables import Variable


class Visitor(Protocol):
    """Interface for formula visitors implementing the visitor design pattern."""

    def visit_true(self, n: TrueLit): ...

    def visit_false(self, n: FalseLit): ...

    def visit_constraint(self, n: Constraint): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...


@dataclass(frozen=True, slots=True)
class Formula:
    """Base class for all formula nodes.

    Concrete node types implement ``accept`` for visitor dispatch and
    ``__str__`` for a human-readable rendering.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class TrueLit(Formula):
    """The formula that always holds."""

    normalized = True

    def accept(self, v: Visitor):
        return v.visit_true(self)

    def __str__(self) -> str:
        return "true"


@dataclass(frozen=True, slots=True)
class FalseLit(Formula):
    """The formula that never holds."""

    normalized = True

    def accept(self, v: Visitor):
        return v.visit_false(self)

    def __str__(self) -> str:
        return "false"


@dataclass(frozen=True, slots=True)
class Constraint(Formula):
    """Relation applied to two variables.

    Attributes:
        relation: Comparison operator
        lhs: Left operand
        rhs: Right operand
        normalized: Known not to be a tautology or contradiction
    """

    relation: Relation
    lhs: Variable
    rhs: Variable
    normalized: bool = field(default=False, compare=False, repr=False)

    def accept(self, v: Visitor):
        return v.visit_constraint(self)

    def __str__(self) -> str:
        return f"{self.lhs} {self.relation} {self.rhs}"


@dataclass(frozen=True, slots=True)
class Not(Formula):
    """Logical negation.

    Attributes:
        operand: The formula being negated
        normalized: Known not to be a tautology or contradiction
    """

    operand: Formula
    normalized: bool = field(default=False, compare=False, repr=False)

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"¬({self.operand})"


@dataclass(frozen=True, slots=True)
class And(Formula):
    """Conjunction of a set of formulas.

    Attributes:
        children: Conjuncts, at least two after smart construction
        normalized: Known not to be a tautology or contradiction
    """

    children: FrozenSet[Formula]
    normalized: bool = field(default=False, compare=False, repr=False)

    def accept(self, v: Visitor):
        return v.visit_and(self)

    def __str__(self) -> str:
        return "(" + " ∧ ".join(sorted(str(c) for c in self.children)) + ")"


@dataclass(frozen=True, slots=True)
class Or(Formula):
    """Disjunction of a set of formulas.

    Attributes:
        children: Disjuncts, at least two after smart construction
        normalized: Known not to be a tautology or contradiction
    """

    children: FrozenSet[Formula]
    normalized: bool = field(default=False, compare=False, repr=False)

    def accept(self, v: Visitor):
        return v.visit_or(self)

    def __str__(self) -> str:
        return "(" + " ∨ ".join(sorted(str(c) for c in self.children)) + ")"
