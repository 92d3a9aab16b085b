# tests/smt_tests/test_logic_profiles.py
# This file is part of Tarski - An SMT bridge for constraint formulas
#
# Test suite for integer and rational logic profiles

"""Test suite for the LIA and LRA logic profiles.

Scripts carry plain constants while the solver answers with decimal-point
renderings; both must map to the same internal constant text.
"""

import pytest
from smt.exceptions import ParseError
from smt.logic import LIA, LRA


class TestIntegerProfile:
    """Test cases for linear integer arithmetic."""

    def test_identity(self):
        assert LIA.sort == "Int"
        assert LIA.logic == "LIA"

    @pytest.mark.parametrize("value, smt", [("0", "0"), ("42", "42"), ("-7", "(- 7)")])
    def test_constant_to_smt(self, value, smt):
        assert LIA.constant_to_smt(value) == smt

    @pytest.mark.parametrize(
        "output, value", [("0", "0"), ("42", "42"), ("007", "7"), ("(- 7)", "-7")]
    )
    def test_parse_constant(self, output, value):
        assert LIA.parse_constant(output) == value

    @pytest.mark.parametrize("output", ["3.0", "(/ 1 2)", "x", "(- x)"])
    def test_parse_rejects_non_integers(self, output):
        with pytest.raises(ParseError):
            LIA.parse_constant(output)


class TestRationalProfile:
    """Test cases for linear rational arithmetic."""

    def test_identity(self):
        assert LRA.sort == "Real"
        assert LRA.logic == "LRA"

    @pytest.mark.parametrize(
        "value, smt",
        [
            ("3", "3"),
            ("3/4", "(/ 3 4)"),
            ("-3", "(- 3)"),
            ("-3/4", "(- (/ 3 4))"),
        ],
    )
    def test_constant_to_smt(self, value, smt):
        assert LRA.constant_to_smt(value) == smt

    @pytest.mark.parametrize(
        "output, value",
        [
            ("3.0", "3"),
            ("(/ 3.0 4.0)", "3/4"),
            ("(- 3.0)", "-3"),
            ("(- (/ 1.0 2.0))", "-1/2"),
        ],
    )
    def test_parse_constant(self, output, value):
        assert LRA.parse_constant(output) == value

    @pytest.mark.parametrize("output", ["3", "(/ 3 4)", "3.5", "(/ 3.0 4)"])
    def test_parse_only_accepts_solver_rendering(self, output):
        with pytest.raises(ParseError):
            LRA.parse_constant(output)

    def test_script_form_differs_from_solver_form(self):
        assert LRA.constant_to_smt("1/2") == "(/ 1 2)"
        assert LRA.parse_constant("(/ 1.0 2.0)") == "1/2"
