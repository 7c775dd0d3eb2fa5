"""Unit tests for weighted variant selection."""

from __future__ import annotations

import hashlib
from collections import Counter

import pytest
from hypothesis import given

from mp_flags.application.feature_flags import (
    FlagDefinition,
    RolloutConfig,
    VariantConfig,
    select_variant,
)
from mp_flags.kernel.hashing import stable_hash
from mp_flags.testing.generators import identifier_strategy

SEED = "test-seed"


def _flag(weights: dict[str, float], rollout: RolloutConfig | None = None) -> FlagDefinition:
    return FlagDefinition(
        enabled=True,
        rollout=rollout,
        variants={name: VariantConfig(weight=w) for name, w in weights.items()},
    )


class TestPreconditions:
    def test_no_variants(self) -> None:
        assert select_variant(SEED, "flag", FlagDefinition(enabled=True), {"userId": "u"}) is None

    def test_empty_variants(self) -> None:
        assert select_variant(SEED, "flag", _flag({}), {"userId": "u"}) is None

    @pytest.mark.parametrize("weights", [{"a": 0}, {"a": 0, "b": 0}, {"a": -5, "b": -1}])
    def test_zero_total_weight(self, weights: dict[str, float]) -> None:
        assert select_variant(SEED, "flag", _flag(weights), {"userId": "u"}) is None


class TestSelection:
    def test_single_positive_variant_always_wins(self) -> None:
        flag = _flag({"off": 0, "on": 10, "neg": -3})
        for i in range(100):
            assert select_variant(SEED, "flag", flag, {"userId": f"u-{i}"}) == "on"

    def test_negative_weight_never_selected(self) -> None:
        flag = _flag({"a": 1, "b": -100, "c": 1})
        picked = {select_variant(SEED, "flag", flag, {"userId": f"u-{i}"}) for i in range(300)}
        assert picked == {"a", "c"}

    def test_cumulative_walk_matches_bucket(self) -> None:
        flag = _flag({"control": 50, "variantA": 25, "variantB": 25})
        for i in range(300):
            bucket = stable_hash(f"{SEED}:variant:flag:u-{i}", 100)
            expected = "control" if bucket < 50 else "variantA" if bucket < 75 else "variantB"
            assert select_variant(SEED, "flag", flag, {"userId": f"u-{i}"}) == expected

    def test_fractional_weights(self) -> None:
        flag = _flag({"a": 0.5, "b": 1.5})
        for i in range(200):
            bucket = stable_hash(f"{SEED}:variant:flag:u-{i}", 2.0)
            expected = "a" if bucket < 0.5 else "b"
            assert select_variant(SEED, "flag", flag, {"userId": f"u-{i}"}) == expected

    def test_declaration_order_matters(self) -> None:
        forward = _flag({"a": 50, "b": 50})
        backward = _flag({"b": 50, "a": 50})
        ids = [f"user-{i}" for i in range(200)]
        fwd = [select_variant(SEED, "flag", forward, {"userId": i}) for i in ids]
        bwd = [select_variant(SEED, "flag", backward, {"userId": i}) for i in ids]
        assert fwd != bwd

    @pytest.mark.parametrize("percentage", [100, None])
    def test_uses_rollout_attribute(self, percentage: float | None) -> None:
        flag = _flag({"a": 50, "b": 50}, rollout=RolloutConfig(percentage, attribute="accountId"))
        for i in range(100):
            bucket = stable_hash(f"{SEED}:variant:flag:acct-{i}", 100)
            expected = "a" if bucket < 50 else "b"
            ctx = {"userId": "constant", "accountId": f"acct-{i}"}
            assert select_variant(SEED, "flag", flag, ctx) == expected

    def test_uses_default_attribute_without_rollout(self) -> None:
        flag = _flag({"a": 50, "b": 50})
        for i in range(100):
            bucket = stable_hash(f"{SEED}:variant:flag:t-{i}", 100)
            expected = "a" if bucket < 50 else "b"
            assert select_variant(SEED, "flag", flag, {"tenant": f"t-{i}"}, default_attribute="tenant") == expected

    def test_variant_hash_independent_of_rollout_hash(self) -> None:
        flag = _flag({"a": 50, "b": 50})
        ids = [f"user-{i}" for i in range(300)]
        variant_buckets = [stable_hash(f"{SEED}:variant:flag:{i}", 100) for i in ids]
        rollout_buckets = [stable_hash(f"{SEED}:flag:{i}", 100) for i in ids]
        assert variant_buckets != rollout_buckets
        assert {select_variant(SEED, "flag", flag, {"userId": i}) for i in ids} == {"a", "b"}


class TestDistribution:
    def test_weighted_distribution_approximates_weights(self) -> None:
        flag = _flag({"control": 50, "variantA": 25, "variantB": 25})
        n = 40_000
        counts = Counter(
            select_variant(SEED, "flag", flag, {"userId": hashlib.sha1(str(i).encode()).hexdigest()})
            for i in range(n)
        )
        assert abs(counts["control"] / n - 0.50) < 0.02
        assert abs(counts["variantA"] / n - 0.25) < 0.02
        assert abs(counts["variantB"] / n - 0.25) < 0.02


class TestDeterminism:
    @given(identifier=identifier_strategy())
    def test_same_identifier_same_variant(self, identifier: str) -> None:
        flag = _flag({"control": 50, "variantA": 25, "variantB": 25})
        first = select_variant(SEED, "flag", flag, {"userId": identifier})
        assert first in {"control", "variantA", "variantB"}
        for _ in range(3):
            assert select_variant(SEED, "flag", flag, {"userId": identifier}) == first
