"""
Unit tests for the mathfn registry.
"""

import pytest

from mathfn import MATH_FUNCTIONS, REGISTRY, export
from mathfn.registry import ALIASES, PUBLISHED_NAMES, MathRegistry, build_registry
from mathfn.runtime.arity import Between, Exact
from mathfn.runtime.operation import Operation, declared_operations

EXPECTED_NAMES = {
    "abs", "sign", "max", "min", "clamp", "ceil", "floor", "round", "trunc",
    "pow", "sqrt", "cbrt", "exp", "exp2", "log", "log10", "log2",
    "sin", "cos", "tan", "asin", "acos", "atan", "atan2",
    "sinh", "cosh", "tanh", "radians", "degrees",
    "sum", "mean", "median", "mode", "variance", "stddev",
    "random", "randomSeed", "randomFloat",
    "isNan", "isInf", "isFinite", "gcd", "lcm", "factorial",
    "pi", "e", "phi",
}


class TestPublishedMapping:
    """Tests for the exported mapping."""

    def test_exact_names(self):
        assert set(MATH_FUNCTIONS) == EXPECTED_NAMES

    def test_count(self):
        assert len(MATH_FUNCTIONS) == len(EXPECTED_NAMES) == 47
        assert len(PUBLISHED_NAMES) == len(set(PUBLISHED_NAMES))

    def test_snake_case_names_not_published(self):
        for name in ("random_seed", "random_float", "is_nan", "is_inf", "is_finite", "avg"):
            assert name not in MATH_FUNCTIONS

    def test_read_only(self):
        with pytest.raises(TypeError):
            MATH_FUNCTIONS["abs"] = None

    def test_export(self):
        assert export() is MATH_FUNCTIONS

    def test_values_are_callables(self):
        assert all(callable(func) for func in MATH_FUNCTIONS.values())

    def test_every_declared_operation_is_published(self):
        assert {op.published for op in declared_operations()} == EXPECTED_NAMES


class TestMathRegistry:
    """Tests for registry lookups."""

    def test_get_function(self):
        assert REGISTRY.get_function("abs") is MATH_FUNCTIONS["abs"]

    def test_internal_names_resolve(self):
        assert REGISTRY.get_function("is_nan") is MATH_FUNCTIONS["isNan"]
        assert REGISTRY.get_function("random_seed") is MATH_FUNCTIONS["randomSeed"]

    def test_alias_resolves(self):
        assert ALIASES["avg"] == "mean"
        assert REGISTRY.get_function("avg") is MATH_FUNCTIONS["mean"]

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            REGISTRY.get_function("nope")
        assert not REGISTRY.has_function("nope")

    def test_has_function(self):
        assert REGISTRY.has_function("isFinite")
        assert REGISTRY.has_function("is_finite")

    def test_contains_only_published(self):
        assert "isFinite" in REGISTRY
        assert "is_finite" not in REGISTRY

    def test_list_functions_sorted(self):
        names = REGISTRY.list_functions()
        assert names == sorted(EXPECTED_NAMES)
        assert len(REGISTRY) == 47

    def test_describe(self):
        operation = REGISTRY.describe("round")
        assert operation.name == "round"
        assert operation.arity == Between(1, 2)
        assert operation.summary

    def test_describe_published_alias(self):
        operation = REGISTRY.describe("isNan")
        assert operation.name == "is_nan"
        assert operation.published == "isNan"
        assert operation.arity == Exact(1)

    def test_call(self):
        assert REGISTRY.call("pow", 2, 3) == 8.0
        assert REGISTRY.call("sum") == 0.0

    def test_build_registry_is_equivalent(self):
        registry = build_registry()
        assert registry.list_functions() == REGISTRY.list_functions()

    def test_duplicate_published_name(self):
        func = MATH_FUNCTIONS["abs"]
        ops = [
            Operation("abs", "abs", func, Exact(1)),
            Operation("abs2", "abs", func, Exact(1)),
        ]
        with pytest.raises(ValueError, match="Duplicate published name 'abs'"):
            MathRegistry(ops)
