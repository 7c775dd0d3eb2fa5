"""Application feature flags – FeatureFlagClient.

The client composes the evaluation pipeline over a :class:`FlagStore`::

    store lookup → enabled switch → conditions → rollout → variant

and stops at the first step that disables the flag.  Evaluation is total: a
flag definition that cannot be parsed yields a disabled result instead of an
exception, so a bad flag can never take the calling application down.

Usage::

    client = FeatureFlagClient(seed="checkout-service")
    client.store.upsert_flag("new_checkout", {
        "enabled": True,
        "rollout": {"percentage": 20},
        "variants": {"control": {"weight": 50}, "treatment": {"weight": 50}},
    })

    if client.is_enabled("new_checkout", {"userId": "u-42"}):
        variant = client.get_variant("new_checkout", {"userId": "u-42"})
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from mp_flags.application.feature_flags.conditions import evaluate_conditions
from mp_flags.application.feature_flags.feature_flag import FlagDefinition
from mp_flags.application.feature_flags.in_memory import InMemoryFlagStore
from mp_flags.application.feature_flags.result import EvaluationReason, EvaluationResult
from mp_flags.application.feature_flags.rollout import DEFAULT_ROLLOUT_ATTRIBUTE, is_in_rollout
from mp_flags.application.feature_flags.store import FlagStore
from mp_flags.application.feature_flags.variants import select_variant
from mp_flags.kernel.errors import ValidationError
from mp_flags.observability.logging import get_logger

if TYPE_CHECKING:
    from mp_flags.application.feature_flags.settings import FeatureFlagSettings

DEFAULT_SEED = "feature-flags-default-seed"

logger = get_logger(__name__)


class FeatureFlagClient:
    """Evaluate flags from *store* for caller-supplied contexts.

    Args:
        store: Flag source; defaults to a fresh :class:`InMemoryFlagStore`.
        seed: Mixed into every hash so independent deployments bucket
            differently.  Services sharing a seed bucket identically.
        default_rollout_attribute: Context attribute identifying the subject
            when a flag's rollout does not name one.
    """

    def __init__(
        self,
        store: FlagStore | None = None,
        *,
        seed: str | None = None,
        default_rollout_attribute: str | None = None,
    ) -> None:
        self.store: FlagStore = store if store is not None else InMemoryFlagStore()
        self.seed = seed or DEFAULT_SEED
        self.default_rollout_attribute = default_rollout_attribute or DEFAULT_ROLLOUT_ATTRIBUTE

    @classmethod
    def from_settings(
        cls, settings: FeatureFlagSettings, store: FlagStore | None = None
    ) -> FeatureFlagClient:
        """Build a client (and, unless given, its store) from *settings*."""
        from mp_flags.application.feature_flags.settings import build_store

        return cls(
            store if store is not None else build_store(settings),
            seed=settings.seed,
            default_rollout_attribute=settings.default_rollout_attribute,
        )

    # ------------------------------------------------------------------
    # Query surface
    # ------------------------------------------------------------------

    def evaluate(self, key: str, context: Mapping[str, Any] | None = None) -> EvaluationResult:
        result = self._evaluate(key, self.store.get_flag(key), context or {})
        logger.debug(
            "flag_evaluated",
            flag_key=key,
            enabled=result.enabled,
            variant=result.variant,
            reason=result.reason.value,
        )
        return result

    def is_enabled(self, key: str, context: Mapping[str, Any] | None = None) -> bool:
        return self.evaluate(key, context).enabled

    def get_variant(self, key: str, context: Mapping[str, Any] | None = None) -> str | None:
        return self.evaluate(key, context).variant

    def evaluate_all(self, context: Mapping[str, Any] | None = None) -> dict[str, EvaluationResult]:
        """Evaluate every flag in the store for *context*, in store order."""
        ctx = context or {}
        return {key: self._evaluate(key, flag, ctx) for key, flag in self.store.get_all_flags().items()}

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _evaluate(self, key: str, stored: Any, context: Mapping[str, Any]) -> EvaluationResult:
        if stored is None:
            return EvaluationResult(enabled=False, reason=EvaluationReason.FLAG_NOT_FOUND)

        try:
            flag = FlagDefinition.coerce(stored)
        except ValidationError as exc:
            logger.warning("flag_malformed", flag_key=key, errors=exc.errors)
            return self._disabled(FlagDefinition.salvage(stored), EvaluationReason.MALFORMED_FLAG)

        if not flag.enabled:
            return self._disabled(flag, EvaluationReason.FLAG_DISABLED)

        if flag.conditions and not evaluate_conditions(flag.conditions, context):
            return self._disabled(flag, EvaluationReason.CONDITIONS_FAILED)

        if not is_in_rollout(self.seed, key, flag.rollout, context, self.default_rollout_attribute):
            return self._disabled(flag, EvaluationReason.ROLLOUT_EXCLUDED)

        variant = select_variant(self.seed, key, flag, context, self.default_rollout_attribute)
        return EvaluationResult(
            enabled=True, variant=variant, flag=flag, reason=EvaluationReason.ENABLED
        )

    @staticmethod
    def _disabled(flag: FlagDefinition, reason: EvaluationReason) -> EvaluationResult:
        return EvaluationResult(enabled=False, variant=None, flag=flag, reason=reason)


__all__ = ["DEFAULT_SEED", "FeatureFlagClient"]
