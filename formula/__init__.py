# formula/__init__.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Formula algebra consumed by the SMT bridge

"""Quantifier-free formulas over relational constraints.

This package provides the formula algebra the SMT bridge reads and builds:
immutable formula trees, the variable identities they mention, the closed
relation vocabulary, and smart constructors keeping formulas reduced.

Core Components:
    Formula nodes: TrueLit, FalseLit, Constraint, Not, And, Or
    Variables: Named, Indexed, Constant
    Relation: closed enumeration of comparison operators
    Constructors: true, false, constraint, not_, and_, or_
    free_variables: non-constant variables of a formula

Example:
    >>> from formula import Named, less_than, and_
    >>> f = and_([less_than(Named("x"), Named("y")), less_than(Named("y"), Named("z"))])
"""

from .ast_nodes import And, Constraint, FalseLit, Formula, Not, Or, TrueLit, Visitor
from .constructors import (
    and_,
    constraint,
    equals,
    false,
    from_bool,
    greater_equals,
    greater_than,
    less_equals,
    less_than,
    not_,
    not_equals,
    or_,
    simplified_and,
    simplified_or,
    true,
)
from .free_variables import free_variables
from .relations import Relation
from .variables import Constant, Indexed, Named, Variable

__all__ = [
    "Formula",
    "TrueLit",
    "FalseLit",
    "Constraint",
    "Not",
    "And",
    "Or",
    "Visitor",
    "Relation",
    "Variable",
    "Named",
    "Indexed",
    "Constant",
    "true",
    "false",
    "from_bool",
    "constraint",
    "equals",
    "not_equals",
    "less_than",
    "less_equals",
    "greater_than",
    "greater_equals",
    "not_",
    "and_",
    "or_",
    "simplified_and",
    "simplified_or",
    "free_variables",
]
