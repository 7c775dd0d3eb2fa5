"""Testing generators – Hypothesis strategies for flags and contexts.

Requires the ``hypothesis`` package:

    pip install "mp-flags[test]"
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from mp_flags.application.feature_flags.feature_flag import (
    Condition,
    ConditionOperator,
    FlagDefinition,
    RolloutConfig,
    VariantConfig,
)

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

DEFAULT_ATTRIBUTES: tuple[str, ...] = ("userId", "plan", "country", "beta")


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


def _scalars() -> SearchStrategy[Any]:
    st = _require_hypothesis()
    return st.one_of(
        st.none(),
        st.booleans(),
        st.integers(min_value=-1000, max_value=1000),
        st.text(max_size=12),
    )


def identifier_strategy() -> SearchStrategy[str]:
    """Subject identifiers (user ids, account ids) as plain strings."""
    st = _require_hypothesis()
    return st.text(min_size=1, max_size=32)


def context_strategy(attributes: Sequence[str] = DEFAULT_ATTRIBUTES) -> SearchStrategy[dict[str, Any]]:
    """Contexts drawing a random subset of *attributes* with scalar values."""
    st = _require_hypothesis()
    return st.dictionaries(st.sampled_from(list(attributes)), _scalars(), max_size=len(attributes))


def condition_strategy(attributes: Sequence[str] = DEFAULT_ATTRIBUTES) -> SearchStrategy[Condition]:
    """Conditions over *attributes* using the four supported operators."""
    st = _require_hypothesis()
    return st.builds(
        Condition,
        attribute=st.sampled_from(list(attributes)),
        operator=st.sampled_from([op.value for op in ConditionOperator]),
        value=st.one_of(_scalars(), st.lists(_scalars(), max_size=4)),
    )


def flag_definition_strategy(
    attributes: Sequence[str] = DEFAULT_ATTRIBUTES,
    *,
    max_conditions: int = 3,
    max_variants: int = 4,
) -> SearchStrategy[FlagDefinition]:
    """Flag definitions spanning every optional field, including
    gate-less rollouts, out-of-range percentages and negative weights."""
    st = _require_hypothesis()
    rollout_st = st.builds(
        RolloutConfig,
        percentage=st.one_of(st.none(), st.integers(min_value=-20, max_value=120)),
        attribute=st.one_of(st.none(), st.sampled_from(list(attributes))),
    )
    variants_st = st.dictionaries(
        st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=8),
        st.builds(VariantConfig, weight=st.integers(min_value=-5, max_value=100)),
        max_size=max_variants,
    )
    return st.builds(
        FlagDefinition,
        enabled=st.booleans(),
        description=st.one_of(st.none(), st.text(max_size=20)),
        conditions=st.lists(condition_strategy(attributes), max_size=max_conditions).map(tuple),
        rollout=st.one_of(st.none(), rollout_st),
        variants=st.one_of(st.none(), variants_st),
    )


__all__ = [
    "condition_strategy",
    "context_strategy",
    "flag_definition_strategy",
    "identifier_strategy",
]
