# formula/variables.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Variable identities occurring in constraint formulas

"""Variable identities for constraint formulas.

A variable is either a plain name, a structured (level, index, id) reference
used for bound and iteration variables, or a constant carrying a literal
value in the textual form of its theory (``"3"``, ``"-1/2"``).

Constants behave as variables everywhere in the formula algebra, but they are
never free: ``is_constant`` is the only way callers distinguish them.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Variable:
    """Base class of all variable identities."""

    @property
    def is_constant(self) -> bool:
        return False

    @property
    def constant_value(self) -> str:
        raise ValueError(f"{self} is not a constant")


@dataclass(frozen=True, slots=True)
class Named(Variable):
    """Variable identified by an alphabetic name.

    Attributes:
        name: ASCII letters only
    """

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Indexed(Variable):
    """Structured variable reference used for bound/iteration variables.

    Attributes:
        level: Nesting level of the binder
        index: Position of the variable at that level
        id: Optional disambiguating identifier
    """

    level: int
    index: int
    id: Optional[int] = None

    def __str__(self) -> str:
        suffix = "" if self.id is None else f"#{self.id}"
        return f"v{self.level}.{self.index}{suffix}"


@dataclass(frozen=True, slots=True)
class Constant(Variable):
    """Constant of the active theory.

    Attributes:
        value: Literal text, either an integer (``"-4"``) or a
            ``numerator/denominator`` pair (``"3/4"``)
    """

    value: str

    @property
    def is_constant(self) -> bool:
        return True

    @property
    def constant_value(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value
