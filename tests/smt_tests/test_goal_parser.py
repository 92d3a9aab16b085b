# tests/smt_tests/test_goal_parser.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Test suite for rebuilding formulas from simplified goals

"""Test suite for the simplified-goal parser.

Covers goal shapes (empty, single, several formulas), goal options, operand
precedence, theory constants, and agreement with the script renderer.
"""

import pytest
from formula import (
    And,
    Constant,
    Constraint,
    Indexed,
    Named,
    Not,
    Relation,
    and_,
    equals,
    false,
    greater_equals,
    less_than,
    not_,
    or_,
    true,
)
from smt.grammar import parse_formula, parse_simplified_formula
from smt.logic import LIA, LRA
from smt.script import AssertionRenderer
from utils.logger import get_logger


def goal(body: str) -> str:
    """Wrap formulas the way the solver prints a simplified goal."""
    return f"(goals\n(goal\n  {body}\n  :precision precise :depth 1)\n)\n"


class TestGoalShapes:
    """Test cases for goal-level structure."""

    def setup_method(self):
        self.logger = get_logger()

    def test_empty_goal_is_true(self):
        assert parse_simplified_formula("(goals (goal) )", LIA) == true()

    def test_empty_goal_with_options_is_true(self):
        assert parse_simplified_formula(goal(""), LIA) == true()

    def test_single_formula_unwrapped(self):
        result = parse_simplified_formula(goal("(< v0_0_ v1_0_)"), LIA)
        assert result == Constraint(Relation.LESS_THAN, Indexed(0, 0), Indexed(1, 0))

    def test_several_formulas_are_conjoined(self, x, y, z):
        result = parse_simplified_formula(goal("(< x y)\n  (< y z)"), LIA)
        assert result == And(frozenset({less_than(x, y), less_than(y, z)}))

    def test_duplicate_formulas_collapse(self, x, y):
        result = parse_simplified_formula(goal("(< x y) (< x y)"), LIA)
        assert result == less_than(x, y)

    def test_false_goal(self):
        assert parse_simplified_formula(goal("false"), LIA) == false()

    @pytest.mark.parametrize(
        "options",
        ["", ":precision precise", ":depth 3", ":precision precise :depth 12", ":depth 1 :depth 2"],
    )
    def test_options_do_not_change_result(self, options, x, y):
        output = f"(goals (goal (< x y) {options}))"
        assert parse_simplified_formula(output, LIA) == less_than(x, y)

    def test_options_without_formulas(self):
        assert parse_simplified_formula("(goals (goal :precision precise))", LIA) == true()


class TestFormulas:
    """Test cases for formula reconstruction."""

    def test_negated_equality_is_not_equals_shape(self, x, y):
        result = parse_simplified_formula(goal("(not (= x y))"), LIA)
        assert result == Not(Constraint(Relation.EQUALS, x, y))

    def test_connectives(self, x, y, z):
        output = goal("(or (< x y) (and (= y z) (not (<= x z))))")
        expected = or_([less_than(x, y), and_([equals(y, z), not_(Constraint(Relation.LESS_EQUALS, x, z))])])
        assert parse_simplified_formula(output, LIA) == expected

    def test_indexed_with_id(self, x):
        result = parse_simplified_formula(goal("(>= v3_4_5 x)"), LIA)
        assert result == greater_equals(Indexed(3, 4, 5), x)

    def test_integer_constants(self, x):
        assert parse_simplified_formula(goal("(< x 10)"), LIA) == less_than(x, Constant("10"))
        assert parse_simplified_formula(goal("(< x (- 10))"), LIA) == less_than(x, Constant("-10"))

    # (solver rendering, internal constant text)
    RATIONAL_CASES = [
        ("2.0", "2"),
        ("(/ 1.0 3.0)", "1/3"),
        ("(- 2.0)", "-2"),
        ("(- (/ 1.0 2.0))", "-1/2"),
    ]

    @pytest.mark.parametrize("rendering, value", RATIONAL_CASES)
    def test_rational_constants(self, rendering, value, x):
        result = parse_simplified_formula(goal(f"(<= x {rendering})"), LRA)
        assert result == Constraint(Relation.LESS_EQUALS, x, Constant(value))

    def test_constraints_are_normalized(self, x, y):
        result = parse_simplified_formula(goal("(< x y)"), LIA)
        assert result.normalized

    def test_decided_constraints_fold(self, x):
        assert parse_simplified_formula(goal("(= x x)"), LIA) == true()
        assert parse_simplified_formula(goal("(< 3 2)"), LIA) == false()

    def test_connectives_are_normalized(self, x, y, z):
        assert parse_simplified_formula(goal("(or (< x y) (= y z))"), LIA).normalized
        assert parse_simplified_formula(goal("(and (< x y) (= y z))"), LIA).normalized
        assert parse_simplified_formula(goal("(< x y) (= y z)"), LIA).normalized


class TestRendererAgreement:
    """Formulas rendered for the solver must parse back to the same formula."""

    def setup_method(self):
        self.logger = get_logger()

    FORMULAS = [
        lambda: less_than(Named("x"), Named("y")),
        lambda: equals(Indexed(0, 0), Indexed(0, 1, 2)),
        lambda: Constraint(Relation.GREATER_THAN, Named("a"), Indexed(2, 0)),
        lambda: not_(equals(Named("x"), Indexed(1, 1))),
        lambda: or_([less_than(Named("x"), Named("y")), and_([equals(Named("y"), Named("z")), less_than(Named("z"), Indexed(0, 0))])]),
        lambda: not_(or_([less_than(Named("p"), Named("q")), equals(Named("q"), Named("r"))])),
    ]

    @pytest.mark.parametrize("build", FORMULAS)
    def test_round_trip(self, build):
        original = build()
        rendered = AssertionRenderer(LIA).render(original)
        self.logger.debug(f"Rendered {original} as {rendered}")
        assert parse_simplified_formula(goal(rendered), LIA) == original

    def test_not_equals_comes_back_as_negated_equality(self, x, y):
        rendered = AssertionRenderer(LIA).render(Constraint(Relation.NOT_EQUALS, x, y))
        assert parse_simplified_formula(goal(rendered), LIA) == Not(Constraint(Relation.EQUALS, x, y))

    def test_padded_literals_are_tolerated(self, x, y):
        rendered = AssertionRenderer(LIA).render(Not(true()))
        assert parse_simplified_formula(goal(rendered), LIA) == false()

    @pytest.mark.parametrize("value", ["3", "-3", "3/4", "-1/2"])
    def test_rational_constants_through_solver_rendering(self, value, x):
        # The solver answers with decimal renderings of the constants it was sent
        solver_rendering = {
            "3": "3.0",
            "-3": "(- 3.0)",
            "3/4": "(/ 3.0 4.0)",
            "-1/2": "(- (/ 1.0 2.0))",
        }[value]
        result = parse_simplified_formula(goal(f"(< x {solver_rendering})"), LRA)
        assert result == less_than(x, Constant(value))


class TestParseFormula:
    """Test cases for reading formulas written in s-expression syntax."""

    def test_single_formula(self, x, y):
        assert parse_formula("(< x y)", LIA) == less_than(x, y)

    def test_several_formulas_conjoined(self, x, y, z):
        assert parse_formula("(< x y)\n(< y z)", LIA) == and_([less_than(x, y), less_than(y, z)])

    def test_empty_text_is_true(self):
        assert parse_formula("", LIA) == true()
