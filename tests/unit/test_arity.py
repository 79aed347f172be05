"""
Unit tests for mathfn arity constraints.
"""

import pytest

from mathfn.runtime.arity import AtLeast, Between, Exact, OneOf
from mathfn.utils.errors import ArityError, TypeError as MathFnTypeError


class TestExact:
    """Tests for exact arity."""

    def test_accepts(self):
        assert Exact(2).accepts(2)
        assert not Exact(2).accepts(1)
        assert not Exact(2).accepts(3)

    def test_message_singular(self):
        with pytest.raises(ArityError) as exc_info:
            Exact(1).validate("abs", [])
        assert str(exc_info.value) == "abs: expected 1 argument"

    def test_message_plural(self):
        with pytest.raises(ArityError, match="pow: expected 2 arguments"):
            Exact(2).validate("pow", [1])

    def test_zero(self):
        with pytest.raises(ArityError, match="pi: expected 0 arguments"):
            Exact(0).validate("pi", [1])

    def test_valid_call_passes(self):
        Exact(1).validate("abs", [1])


class TestAtLeast:
    """Tests for minimum arity."""

    def test_accepts(self):
        assert AtLeast(2).accepts(2)
        assert AtLeast(2).accepts(10)
        assert not AtLeast(2).accepts(1)

    def test_zero_accepts_everything(self):
        assert AtLeast(0).accepts(0)

    def test_message(self):
        with pytest.raises(ArityError, match="gcd: expected at least 2 arguments"):
            AtLeast(2).validate("gcd", [12])

    def test_message_singular(self):
        with pytest.raises(ArityError, match="max: expected at least 1 argument"):
            AtLeast(1).validate("max", [])


class TestBetween:
    """Tests for ranged arity."""

    def test_accepts(self):
        constraint = Between(1, 2)
        assert not constraint.accepts(0)
        assert constraint.accepts(1)
        assert constraint.accepts(2)
        assert not constraint.accepts(3)

    def test_message(self):
        with pytest.raises(ArityError, match="round: expected between 1 and 2 arguments"):
            Between(1, 2).validate("round", [1, 2, 3])


class TestOneOf:
    """Tests for set-based arity."""

    def test_accepts(self):
        constraint = OneOf(frozenset({0, 2}))
        assert constraint.accepts(0)
        assert not constraint.accepts(1)
        assert constraint.accepts(2)

    def test_message_lists_sorted_counts(self):
        with pytest.raises(ArityError) as exc_info:
            OneOf(frozenset({2, 0, 1})).validate("random", [1, 2, 3])
        assert str(exc_info.value) == "random: expected one of {0, 1, 2} arguments"


class TestValidationOrder:
    """Tests that arity is checked before arguments are coerced."""

    def test_arity_before_coercion(self, call):
        with pytest.raises(ArityError):
            call("abs", "not a number", "another")

    def test_arity_error_is_not_coercion_error(self, call):
        with pytest.raises(ArityError) as exc_info:
            call("pow", [])
        assert not isinstance(exc_info.value, MathFnTypeError)
