"""Application – flag evaluation building blocks (framework-agnostic)."""

from mp_flags.application.feature_flags import (
    EvaluationResult,
    FeatureFlagClient,
    FlagDefinition,
    FlagStore,
    InMemoryFlagStore,
)

__all__ = [
    "EvaluationResult",
    "FeatureFlagClient",
    "FlagDefinition",
    "FlagStore",
    "InMemoryFlagStore",
]
