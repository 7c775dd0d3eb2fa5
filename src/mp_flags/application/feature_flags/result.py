"""Application feature flags – EvaluationResult, EvaluationReason."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from mp_flags.application.feature_flags.feature_flag import FlagDefinition


class EvaluationReason(str, Enum):
    FLAG_NOT_FOUND = "FLAG_NOT_FOUND"
    FLAG_DISABLED = "FLAG_DISABLED"
    MALFORMED_FLAG = "MALFORMED_FLAG"
    CONDITIONS_FAILED = "CONDITIONS_FAILED"
    ROLLOUT_EXCLUDED = "ROLLOUT_EXCLUDED"
    ENABLED = "ENABLED"


@dataclasses.dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating one flag for one context.

    ``flag`` is ``None`` only when the key is absent from the store.
    """
    enabled: bool
    variant: str | None = None
    flag: FlagDefinition | None = None
    reason: EvaluationReason = EvaluationReason.FLAG_NOT_FOUND

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "enabled": self.enabled,
            "variant": self.variant,
            "reason": self.reason.value,
        }
        if self.flag is not None:
            data["flag"] = self.flag.to_dict()
        return data


__all__ = ["EvaluationReason", "EvaluationResult"]
