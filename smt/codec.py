# smt/codec.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Token grammar shared by the script builder and the output parser

"""Textual tokens for variables and relations in solver scripts.

The patterns below are the single definition of the token grammar. The
script builder encodes with the functions of this module and the output
lexer tokenizes with the same patterns, so both directions agree on:

- indexed variables: ``v<level>_<index>_<id?>`` (``v0_1_`` or ``v0_1_7``)
- named variables: one or more ASCII letters, written verbatim
- relation symbols: characters from ``{=, <, >}`` looked up in a closed table

Indexed tokens must be tried before named ones at every variable position,
since a named pattern would also accept the leading ``v`` of an indexed token.
"""

import re

from formula.relations import Relation
from formula.variables import Indexed, Named, Variable
from .exceptions import ParseError

INDEXED_VARIABLE_PATTERN = r"v[0-9]+_[0-9]+_[0-9]*"
NAMED_VARIABLE_PATTERN = r"[a-zA-Z]+"
RELATION_PATTERN = r"[=<>]+"

_INDEXED_RE = re.compile(r"v(?P<level>[0-9]+)_(?P<index>[0-9]+)_(?P<id>[0-9]*)")
_NAMED_RE = re.compile(NAMED_VARIABLE_PATTERN)

# NOT_EQUALS has no solver symbol; it is written as a negated equality
_RELATION_SYMBOLS = {
    relation.ascii: relation
    for relation in Relation
    if relation is not Relation.NOT_EQUALS
}


def encode_variable(variable: Variable) -> str:
    """Render a free variable as a solver token.

    Raises:
        ValueError: ``variable`` is a constant or an unsupported identity
    """
    if isinstance(variable, Indexed):
        suffix = "" if variable.id is None else str(variable.id)
        return f"v{variable.level}_{variable.index}_{suffix}"
    if isinstance(variable, Named):
        return variable.name
    raise ValueError(f"Cannot encode {variable!r} as a solver variable")


def decode_variable(token: str) -> Variable:
    """Rebuild a variable from its solver token.

    Raises:
        ParseError: ``token`` is neither an indexed nor a named variable
    """
    match = _INDEXED_RE.fullmatch(token)
    if match:
        return Indexed(
            int(match["level"]),
            int(match["index"]),
            int(match["id"]) if match["id"] else None,
        )
    if _NAMED_RE.fullmatch(token):
        return Named(token)
    raise ParseError(f"unknown variable: {token!r}", remainder=token)


def encode_relation(relation: Relation) -> str:
    """Return the solver symbol of ``relation``.

    Raises:
        ValueError: ``relation`` is NOT_EQUALS, which has no native symbol
    """
    if relation is Relation.NOT_EQUALS:
        raise ValueError("NOT_EQUALS has no solver symbol; encode it as (not (= x y))")
    return relation.ascii


def decode_relation(symbol: str) -> Relation:
    """Look up the relation written as ``symbol``.

    Raises:
        ParseError: ``symbol`` is not a known relation symbol
    """
    try:
        return _RELATION_SYMBOLS[symbol]
    except KeyError:
        raise ParseError(f"unknown relation: {symbol!r}", remainder=symbol) from None
