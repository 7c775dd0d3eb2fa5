"""Application feature flags – condition evaluation.

Conditions form a flat AND-list.  Comparison is strict: no coercion between
types, so ``"1"`` never equals ``1`` and ``True`` never equals ``1``.  An
attribute missing from the context equals nothing, not even ``None``.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from mp_flags.application.feature_flags.feature_flag import Condition, ConditionOperator

_MISSING = object()


def _kind(value: Any) -> type | str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return type(value)


def strict_equals(actual: Any, expected: Any) -> bool:
    """Equality without type coercion between booleans, numbers and strings."""
    if actual is _MISSING or expected is _MISSING:
        return False
    if _kind(actual) != _kind(expected):
        return False
    return actual == expected


def _contains(sequence: Iterable[Any], actual: Any) -> bool:
    return any(strict_equals(actual, item) for item in sequence)


def evaluate_condition(condition: Condition, context: Mapping[str, Any]) -> bool:
    actual = context.get(condition.attribute, _MISSING)
    expected = condition.value
    op = condition.operator

    if op == ConditionOperator.EQ:
        return strict_equals(actual, expected)
    if op == ConditionOperator.NEQ:
        return not strict_equals(actual, expected)
    if op == ConditionOperator.IN:
        return isinstance(expected, (list, tuple)) and _contains(expected, actual)
    if op == ConditionOperator.NOT_IN:
        # A non-sequence value cannot contain anything.
        return not (isinstance(expected, (list, tuple)) and _contains(expected, actual))
    # Unknown operator: fail closed.
    return False


def evaluate_conditions(conditions: Iterable[Condition], context: Mapping[str, Any]) -> bool:
    """Return ``True`` iff every condition passes; empty input passes."""
    return all(evaluate_condition(condition, context) for condition in conditions)


__all__ = ["evaluate_condition", "evaluate_conditions", "strict_equals"]
