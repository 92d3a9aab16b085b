# formula/relations.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Closed vocabulary of comparison relations between variables

"""Comparison relations usable inside constraint formulas.

The relation set is closed: every constraint in a formula carries exactly one
of the members below. Each member owns a fixed ASCII symbol used for display
and for the solver encoding (where ``NOT_EQUALS`` has no native symbol and is
rewritten as a negated equality by the script builder).
"""

from enum import Enum


class Relation(Enum):
    """Binary comparison between two variables."""

    EQUALS = "="
    NOT_EQUALS = "/="
    LESS_THAN = "<"
    LESS_EQUALS = "<="
    GREATER_THAN = ">"
    GREATER_EQUALS = ">="

    @property
    def ascii(self) -> str:
        return self.value

    def holds(self, comparison: int) -> bool:
        """Decide the relation from a three-way comparison result (-1, 0, 1)."""
        if self is Relation.EQUALS:
            return comparison == 0
        if self is Relation.NOT_EQUALS:
            return comparison != 0
        if self is Relation.LESS_THAN:
            return comparison < 0
        if self is Relation.LESS_EQUALS:
            return comparison <= 0
        if self is Relation.GREATER_THAN:
            return comparison > 0
        return comparison >= 0

    def __str__(self) -> str:
        return self.value


# Relations that hold when both operands are the same variable
REFLEXIVE_RELATIONS = frozenset(
    {Relation.EQUALS, Relation.LESS_EQUALS, Relation.GREATER_EQUALS}
)
