"""Application feature flags – percentage rollout bucketing.

A subject is bucketed by hashing ``"{seed}:{flag_key}:{identifier}"`` into
``[0, 100)`` and is in the rollout iff ``bucket < percentage``.  The
comparison makes rollouts monotonic: raising the percentage never removes a
subject that was already included.  A missing rollout, or one without a
percentage, admits everyone.

Identifiers are rendered the way JavaScript's ``String()`` renders them
(``True`` → ``"true"``, ``1.0`` → ``"1"``) so that services written in other
languages, sharing the same seed, put a subject in the same bucket.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from mp_flags.application.feature_flags.feature_flag import RolloutConfig
from mp_flags.kernel.hashing import stable_hash

DEFAULT_ROLLOUT_ATTRIBUTE = "userId"
ROLLOUT_BUCKETS = 100


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(item) for item in value)
    return str(value)


def bucketing_identifier(context: Mapping[str, Any], attribute: str) -> str:
    """Return the string identifier used for bucketing; missing → ``""``."""
    return _stringify(context.get(attribute))


def rollout_bucket(seed: str, flag_key: str, identifier: str) -> int:
    return stable_hash(f"{seed}:{flag_key}:{identifier}", ROLLOUT_BUCKETS)


def is_in_rollout(
    seed: str,
    flag_key: str,
    rollout: RolloutConfig | None,
    context: Mapping[str, Any],
    default_attribute: str = DEFAULT_ROLLOUT_ATTRIBUTE,
) -> bool:
    percentage = rollout.clamped_percentage if rollout is not None else None
    if percentage is None:
        return True
    if percentage == 0:
        return False
    if percentage >= 100:
        return True
    attribute = rollout.attribute or default_attribute
    identifier = bucketing_identifier(context, attribute)
    return rollout_bucket(seed, flag_key, identifier) < percentage


__all__ = [
    "DEFAULT_ROLLOUT_ATTRIBUTE",
    "ROLLOUT_BUCKETS",
    "bucketing_identifier",
    "is_in_rollout",
    "rollout_bucket",
]
