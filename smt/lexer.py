# smt/lexer.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Lexical analyzer for SMT solver output using SLY

"""Lexical analyzer for the s-expression subset emitted by the solver.

Supported Tokens:
- Punctuation: (, ), /, -
- Keywords: goals, goal, not, and, or, true, false
- Relation symbols: runs of =, <, > resolved through the relation codec
- Variables: indexed (v0_1_ / v0_1_2) before named (letters only)
- Numbers: decimals (3.0) before integers (3)
- Goal options: :precision, :depth and any other :keyword
- Whitespace: ignored during tokenization
"""

from sly import Lexer

from utils.logger import get_logger
from . import codec
from .exceptions import ParseError


class SmtOutputLexer(Lexer):
    """SLY-based lexer for solver goal output.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        NAME: Named-variable pattern with keyword mapping
    """

    tokens = {
        "LPAREN",
        "RPAREN",
        "SLASH",
        "MINUS",
        "GOALS",
        "GOAL",
        "NOT",
        "AND",
        "OR",
        "TRUE",
        "FALSE",
        "RELATION",
        "INDEXED",
        "NAME",
        "DECIMAL",
        "INTEGER",
        "KEYWORD",
    }

    ignore = " \t\r\n"

    LPAREN = r"\("
    RPAREN = r"\)"
    SLASH = r"/"
    MINUS = r"-"
    KEYWORD = r":[a-zA-Z][a-zA-Z0-9.\-]*"

    # Indexed variables must be tried before names
    INDEXED = codec.INDEXED_VARIABLE_PATTERN
    NAME = codec.NAMED_VARIABLE_PATTERN

    NAME["goals"] = "GOALS"
    NAME["goal"] = "GOAL"
    NAME["not"] = "NOT"
    NAME["and"] = "AND"
    NAME["or"] = "OR"
    NAME["true"] = "TRUE"
    NAME["false"] = "FALSE"

    DECIMAL = r"[0-9]+\.[0-9]+"
    INTEGER = r"[0-9]+"

    @_(codec.RELATION_PATTERN)
    def RELATION(self, t):
        try:
            t.value = codec.decode_relation(t.value)
        except ParseError as exc:
            raise ParseError(exc.reason, remainder=self.text[t.index:]) from None
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ParseError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        raise ParseError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}",
            remainder=self.text[error_pos:],
        )
