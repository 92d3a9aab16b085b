# smt/grammar.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# LALR(1) grammar for simplified goals emitted by the solver, using SLY

"""Grammar of the solver's ``apply ctx-solver-simplify`` output.

The parser rebuilds a formula from output shaped like::

    (goals
    (goal
      (< v0_0_ v0_1_)
      (not (= x y))
      :precision precise :depth 1)
    )

Grammar:
    goals      : "(" GOALS goal ")"
    goal       : "(" GOAL formula* option* ")"
    option     : ":precision" "precise" | ":depth" INTEGER
    formula    : TRUE | FALSE | constraint
               | "(" NOT formula ")" | "(" AND formula+ ")" | "(" OR formula+ ")"
    constraint : "(" RELATION operand operand ")"
    operand    : INDEXED | NAME | constant

A goal without formulas means ``true``; a goal with several formulas means
their conjunction. Options are solver metadata and never change the result.
Constants are validated by the active logic profile.
"""

from sly import Parser

from formula import ast_nodes as ast
from formula.constructors import (
    constraint,
    false,
    not_,
    simplified_and,
    simplified_or,
    true,
)
from formula.variables import Constant
from utils.logger import get_logger
from .codec import decode_variable
from .exceptions import ParseError
from .lexer import SmtOutputLexer
from .logic import SmtLogic


class _SimplifiedGoalParser(Parser):
    """SLY-based LALR(1) parser for simplified goals.

    Attributes:
        tokens: Token types from SmtOutputLexer
        logic: Profile used to read constants
    """

    tokens = SmtOutputLexer.tokens

    def __init__(self, logic: SmtLogic):
        self.logic = logic
        self.text = ""

    @_("goals")
    def start(self, p) -> ast.Formula:
        """Start rule: the whole output is a single goal list."""
        return p.goals

    @_("LPAREN GOALS goal RPAREN")
    def goals(self, p) -> ast.Formula:
        return p.goal

    @_("LPAREN GOAL formulas options RPAREN")
    def goal(self, p) -> ast.Formula:
        formulas = p.formulas
        if not formulas:
            return true()
        if len(formulas) == 1:
            return formulas[0]
        return simplified_and(formulas)

    @_("formulas formula")
    def formulas(self, p):
        return p.formulas + [p.formula]

    @_("empty")
    def formulas(self, p):
        return []

    @_("options option")
    def options(self, p):
        return None

    @_("empty")
    def options(self, p):
        return None

    @_("KEYWORD NAME")
    def option(self, p):
        if p.KEYWORD != ":precision" or p.NAME != "precise":
            self._fail(f"unexpected goal option {p.KEYWORD} {p.NAME}", p.index)
        return None

    @_("KEYWORD INTEGER")
    def option(self, p):
        if p.KEYWORD != ":depth":
            self._fail(f"unexpected goal option {p.KEYWORD} {p.INTEGER}", p.index)
        return None

    @_("")
    def empty(self, p):
        pass

    # Formula grammar rules
    @_("TRUE")
    def formula(self, p) -> ast.Formula:
        return true()

    @_("FALSE")
    def formula(self, p) -> ast.Formula:
        return false()

    @_("LPAREN RELATION operand operand RPAREN")
    def formula(self, p) -> ast.Formula:
        """Relation applied to two operands."""
        lhs = self._resolve(p.operand0, p.index)
        rhs = self._resolve(p.operand1, p.index)
        return constraint(p.RELATION, lhs, rhs)

    @_("LPAREN NOT formula RPAREN")
    def formula(self, p) -> ast.Formula:
        return not_(p.formula)

    @_("LPAREN AND formula_list RPAREN")
    def formula(self, p) -> ast.Formula:
        return simplified_and(p.formula_list)

    @_("LPAREN OR formula_list RPAREN")
    def formula(self, p) -> ast.Formula:
        return simplified_or(p.formula_list)

    @_("formula_list formula")
    def formula_list(self, p):
        return p.formula_list + [p.formula]

    @_("formula")
    def formula_list(self, p):
        return [p.formula]

    # Operand grammar rules
    @_("INDEXED", "NAME")
    def operand(self, p):
        return decode_variable(p[0])

    @_("constant")
    def operand(self, p):
        # Constant text is checked against the logic once the constraint is complete
        return p.constant

    @_("number")
    def constant(self, p) -> str:
        return p.number

    @_("LPAREN SLASH number number RPAREN")
    def constant(self, p) -> str:
        return f"(/ {p.number0} {p.number1})"

    @_("LPAREN MINUS constant RPAREN")
    def constant(self, p) -> str:
        return f"(- {p.constant})"

    @_("INTEGER", "DECIMAL")
    def number(self, p) -> str:
        return p[0]

    def parse(self, text: str) -> ast.Formula:
        """Parse solver output into a formula.

        Args:
            text: Complete standard output of a simplification request

        Returns:
            Reconstructed formula

        Raises:
            ParseError: Output does not follow the goal grammar
        """
        logger = get_logger()
        logger.debug(f"Parsing solver output: {text.strip()}")

        self.text = text
        try:
            result = super().parse(SmtOutputLexer().tokenize(text))
        except ParseError as exc:
            if exc.context:
                raise
            # Lexical errors surface while the parser pulls tokens
            raise ParseError(exc.reason, remainder=exc.remainder, context=self._context()) from None

        if result is None:
            self._fail("Failed to parse solver output", len(text))

        logger.debug(f"Successfully parsed solver output into {type(result).__name__}")
        return result

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None at end of output

        Raises:
            ParseError: Always raised with the unconsumed output and stack context
        """
        if token:
            self._fail(
                f"Syntax error near '{token.value}' (type: {token.type}) "
                f"at line {token.lineno}, position {token.index}",
                token.index,
            )
        self._fail("Syntax error: Unexpected end of solver output", len(self.text))

    def _resolve(self, operand, index: int):
        if not isinstance(operand, str):
            return operand
        try:
            return Constant(self.logic.parse_constant(operand))
        except ParseError as exc:
            self._fail(exc.reason, index)

    def _context(self):
        return [symbol.type for symbol in getattr(self, "symstack", [])]

    def _fail(self, reason: str, index: int):
        raise ParseError(reason, remainder=self.text[index:], context=self._context())


def parse_simplified_formula(output: str, logic: SmtLogic) -> ast.Formula:
    """Rebuild the formula described by the solver's simplified goal.

    Uses a fresh parser instance per call, so concurrent callers never share
    parser state.

    Args:
        output: Standard output of an ``(apply ctx-solver-simplify)`` request
        logic: Profile used to read constants

    Returns:
        Formula equivalent to the simplified goal

    Raises:
        ParseError: Output is malformed
    """
    return _SimplifiedGoalParser(logic).parse(output)


def parse_formula(source: str, logic: SmtLogic) -> ast.Formula:
    """Parse formulas written in the solver's own s-expression syntax.

    The text is read as the body of a goal, so several formulas in a row
    denote their conjunction and an empty text denotes ``true``.

    Raises:
        ParseError: Text is not a sequence of well-formed formulas
    """
    return parse_simplified_formula(f"(goals (goal {source}))", logic)
