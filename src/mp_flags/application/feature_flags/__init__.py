"""Application feature flags – definitions, stores and the evaluation client."""
from mp_flags.application.feature_flags.feature_flag import (
    Condition,
    ConditionOperator,
    FlagDefinition,
    RolloutConfig,
    VariantConfig,
)
from mp_flags.application.feature_flags.result import EvaluationReason, EvaluationResult
from mp_flags.application.feature_flags.store import FlagStore
from mp_flags.application.feature_flags.in_memory import InMemoryFlagStore
from mp_flags.application.feature_flags.serialized import SerializedFlagStore
from mp_flags.application.feature_flags.conditions import evaluate_condition, evaluate_conditions
from mp_flags.application.feature_flags.rollout import (
    DEFAULT_ROLLOUT_ATTRIBUTE,
    bucketing_identifier,
    is_in_rollout,
    rollout_bucket,
)
from mp_flags.application.feature_flags.variants import select_variant
from mp_flags.application.feature_flags.client import DEFAULT_SEED, FeatureFlagClient
from mp_flags.application.feature_flags.settings import FeatureFlagSettings, build_store

__all__ = [
    "Condition",
    "ConditionOperator",
    "DEFAULT_ROLLOUT_ATTRIBUTE",
    "DEFAULT_SEED",
    "EvaluationReason",
    "EvaluationResult",
    "FeatureFlagClient",
    "FeatureFlagSettings",
    "FlagDefinition",
    "FlagStore",
    "InMemoryFlagStore",
    "RolloutConfig",
    "SerializedFlagStore",
    "VariantConfig",
    "bucketing_identifier",
    "build_store",
    "evaluate_condition",
    "evaluate_conditions",
    "is_in_rollout",
    "rollout_bucket",
    "select_variant",
]
