"""Application feature flags – weighted variant assignment."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mp_flags.application.feature_flags.feature_flag import FlagDefinition
from mp_flags.application.feature_flags.rollout import (
    DEFAULT_ROLLOUT_ATTRIBUTE,
    bucketing_identifier,
)
from mp_flags.kernel.hashing import stable_hash


def select_variant(
    seed: str,
    flag_key: str,
    flag: FlagDefinition,
    context: Mapping[str, Any],
    default_attribute: str = DEFAULT_ROLLOUT_ATTRIBUTE,
) -> str | None:
    """Deterministically pick one of *flag*'s variants for the subject in *context*.

    The subject is identified by the rollout attribute whether or not a
    rollout gate applies.  Variants are walked in declaration order and the
    first whose cumulative weight exceeds the hash bucket wins.
    """
    variants = flag.variants
    if not isinstance(variants, Mapping) or not variants:
        return None

    entries = list(variants.items())
    total_weight = sum(cfg.effective_weight for _, cfg in entries)
    if total_weight <= 0:
        return None

    attribute = (flag.rollout.attribute if flag.rollout else None) or default_attribute
    identifier = bucketing_identifier(context, attribute)
    bucket = stable_hash(f"{seed}:variant:{flag_key}:{identifier}", total_weight)

    cumulative: float = 0
    for name, cfg in entries:
        cumulative += cfg.effective_weight
        if bucket < cumulative:
            return name

    # Only reachable through float rounding in the cumulative sum.
    return entries[-1][0]


__all__ = ["select_variant"]
