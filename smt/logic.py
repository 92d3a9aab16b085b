# smt/logic.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Theory profiles for integer and rational arithmetic

"""Logic profiles describing the supported arithmetic theories.

A profile tells the script builder which sort and logic to declare and how
to write constants, and tells the output parser how the solver writes them
back. The two directions are deliberately asymmetric for rationals: scripts
carry ``3`` or ``(/ 3 4)`` while the solver answers with ``3.0`` or
``(/ 3.0 4.0)``. Both sides map to the same internal text, ``"3"`` or
``"3/4"``.

Negative constants are wrapped in unary minus in both directions:
``(- 3)`` and ``(- (/ 3 4))`` on input, ``(- 3.0)`` and ``(- (/ 3.0 4.0))``
on output.
"""

import re
from dataclasses import dataclass
from typing import Callable, Tuple

from .exceptions import ParseError

_NEGATED_RE = re.compile(r"\(- (?P<inner>.+)\)")
_INTEGER_RE = re.compile(r"[0-9]+")
_DECIMAL_RE = re.compile(r"(?P<num>[0-9]+)\.0")
_RATIO_RE = re.compile(r"\(/ (?P<num>[0-9]+)\.0 (?P<den>[0-9]+)\.0\)")


@dataclass(frozen=True)
class SmtLogic:
    """Static description of one arithmetic theory.

    Attributes:
        sort: Solver sort of every declared variable
        logic: Identifier passed to ``set-logic``
        constant_to_smt: Renders an internal constant value as script text
        parse_constant: Turns the solver's rendering of a constant back into
            an internal constant value, raising ``ParseError`` when the text
            is not a constant of this theory
    """

    sort: str
    logic: str
    constant_to_smt: Callable[[str], str]
    parse_constant: Callable[[str], str]

    def __str__(self) -> str:
        return self.logic


def _split_sign(text: str) -> Tuple[str, str]:
    if text.startswith("-"):
        return "-", text[1:]
    return "", text


def _negate_smt(sign: str, body: str) -> str:
    return f"(- {body})" if sign else body


def _strip_negation(output: str) -> Tuple[str, str]:
    match = _NEGATED_RE.fullmatch(output)
    if match:
        return "-", match["inner"]
    return "", output


def int_to_smt(value: str) -> str:
    sign, magnitude = _split_sign(value)
    return _negate_smt(sign, magnitude)


def parse_int(output: str) -> str:
    """Parse a solver integer such as ``7`` or ``(- 7)``."""
    sign, body = _strip_negation(output)
    if not _INTEGER_RE.fullmatch(body):
        raise ParseError(f"not an integer constant: {output!r}", remainder=output)
    return f"{sign}{int(body)}"


def ratio_to_smt(value: str) -> str:
    sign, magnitude = _split_sign(value)
    parts = magnitude.split("/")
    if len(parts) == 1:
        return _negate_smt(sign, magnitude)
    return _negate_smt(sign, f"(/ {parts[0]} {parts[1]})")


def parse_ratio(output: str) -> str:
    """Parse a solver real such as ``2.0``, ``(/ 1.0 3.0)`` or ``(- 2.0)``."""
    sign, body = _strip_negation(output)

    match = _DECIMAL_RE.fullmatch(body)
    if match:
        return f"{sign}{int(match['num'])}"

    match = _RATIO_RE.fullmatch(body)
    if match:
        return f"{sign}{int(match['num'])}/{int(match['den'])}"

    raise ParseError(f"not a rational constant: {output!r}", remainder=output)


LIA = SmtLogic(sort="Int", logic="LIA", constant_to_smt=int_to_smt, parse_constant=parse_int)
LRA = SmtLogic(sort="Real", logic="LRA", constant_to_smt=ratio_to_smt, parse_constant=parse_ratio)
