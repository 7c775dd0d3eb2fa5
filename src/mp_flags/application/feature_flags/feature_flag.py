"""Application feature flags – flag definition value objects.

A :class:`FlagDefinition` is the snapshot a store hands to the evaluator.  The
JSON-compatible shape accepted by :meth:`FlagDefinition.from_dict` is::

    {
        "enabled": true,
        "description": "New checkout flow",
        "conditions": [{"attribute": "plan", "operator": "in", "value": ["pro"]}],
        "rollout": {"percentage": 25, "attribute": "accountId"},
        "variants": {"control": {"weight": 50}, "treatment": {"weight": 50}}
    }

Structural problems raise :class:`~mp_flags.kernel.errors.ValidationError`,
both from :meth:`FlagDefinition.from_dict` and when the value objects are
constructed directly, so a store never holds a definition the evaluator
cannot walk.  Range problems (negative weights, percentages outside
``[0, 100]``) are kept as stored and neutralised at evaluation time.  A
rollout without a numeric percentage applies no gate; its ``attribute`` still
selects the subject for variant assignment.
"""
from __future__ import annotations

import dataclasses
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any

from mp_flags.kernel.errors import ValidationError


class ConditionOperator(str, Enum):
    EQ = "eq"
    NEQ = "neq"
    IN = "in"
    NOT_IN = "not_in"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _error(field: str, message: str) -> dict[str, Any]:
    return {"field": field, "message": message}


def _is_valid_number(value: Any) -> bool:
    return _is_number(value) and not math.isnan(value)


def _raise_if(errors: list[dict[str, Any]], message: str) -> None:
    if errors:
        raise ValidationError(message, errors=errors)


@dataclasses.dataclass(frozen=True)
class Condition:
    """One attribute comparison; a flag's conditions are AND-ed together.

    ``operator`` is kept as a plain string so that unknown operators survive
    storage and fail closed when evaluated.
    """
    attribute: str
    operator: str
    value: Any = None

    def __post_init__(self) -> None:
        errors: list[dict[str, Any]] = []
        if not isinstance(self.attribute, str) or not self.attribute:
            errors.append(_error("attribute", "must be a non-empty string"))
        if not isinstance(self.operator, str):
            errors.append(_error("operator", "must be a string"))
        _raise_if(errors, "Invalid condition")

    @classmethod
    def from_dict(cls, data: Any, *, path: str = "condition") -> Condition:
        errors: list[dict[str, Any]] = []
        condition = _parse_condition(data, path, errors)
        if condition is None:
            raise ValidationError("Invalid condition", errors=errors)
        return condition

    def to_dict(self) -> dict[str, Any]:
        op = self.operator.value if isinstance(self.operator, ConditionOperator) else self.operator
        return {"attribute": self.attribute, "operator": op, "value": self.value}


@dataclasses.dataclass(frozen=True)
class RolloutConfig:
    """Percentage-based gradual enablement.

    ``percentage=None`` means no gate: every subject passes, and the config
    only names the attribute used to assign variants.
    """
    percentage: float | None = None
    attribute: str | None = None

    def __post_init__(self) -> None:
        errors: list[dict[str, Any]] = []
        if self.percentage is not None and not _is_valid_number(self.percentage):
            errors.append(_error("percentage", "must be a number or None"))
        if self.attribute is not None and not isinstance(self.attribute, str):
            errors.append(_error("attribute", "must be a string"))
        _raise_if(errors, "Invalid rollout")

    @property
    def clamped_percentage(self) -> float | None:
        if self.percentage is None:
            return None
        return max(0, min(100, self.percentage))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.percentage is not None:
            data["percentage"] = self.percentage
        if self.attribute is not None:
            data["attribute"] = self.attribute
        return data


@dataclasses.dataclass(frozen=True)
class VariantConfig:
    weight: float = 0

    def __post_init__(self) -> None:
        if not _is_valid_number(self.weight):
            _raise_if([_error("weight", "must be a number")], "Invalid variant")

    @property
    def effective_weight(self) -> float:
        """Weight used for assignment; negative weights count as zero."""
        return max(0, self.weight)

    def to_dict(self) -> dict[str, Any]:
        return {"weight": self.weight}


@dataclasses.dataclass(frozen=True)
class FlagDefinition:
    """A named feature toggle's configuration.

    ``variants`` preserves declaration order; assignment walks it in that
    order, so two mappings with the same entries in a different order bucket
    subjects differently.
    """
    enabled: bool = False
    description: str | None = None
    conditions: tuple[Condition, ...] = ()
    rollout: RolloutConfig | None = None
    variants: dict[str, VariantConfig] | None = None

    def __post_init__(self) -> None:
        errors: list[dict[str, Any]] = []
        if not isinstance(self.enabled, bool):
            errors.append(_error("enabled", "must be a boolean"))
        if self.description is not None and not isinstance(self.description, str):
            errors.append(_error("description", "must be a string"))

        if isinstance(self.conditions, list):
            object.__setattr__(self, "conditions", tuple(self.conditions))
        if not isinstance(self.conditions, tuple):
            errors.append(_error("conditions", "must be a tuple of Condition"))
        else:
            for index, condition in enumerate(self.conditions):
                if not isinstance(condition, Condition):
                    errors.append(_error(f"conditions[{index}]", "must be a Condition"))

        if self.rollout is not None and not isinstance(self.rollout, RolloutConfig):
            errors.append(_error("rollout", "must be a RolloutConfig"))

        if self.variants is not None:
            if not isinstance(self.variants, Mapping):
                errors.append(_error("variants", "must be a mapping"))
            else:
                for name, cfg in self.variants.items():
                    if not isinstance(name, str):
                        errors.append(_error("variants", f"variant name {name!r} must be a string"))
                    elif not isinstance(cfg, VariantConfig):
                        errors.append(_error(f"variants.{name}", "must be a VariantConfig"))
        _raise_if(errors, "Invalid flag definition")

    @classmethod
    def from_dict(cls, data: Any) -> FlagDefinition:
        """Parse the JSON-compatible shape, collecting every field error."""
        if not isinstance(data, Mapping):
            raise ValidationError(
                "Flag definition must be a mapping",
                errors=[_error("", f"expected mapping, got {type(data).__name__}")],
            )
        errors: list[dict[str, Any]] = []

        enabled = data.get("enabled", False)
        if not isinstance(enabled, bool):
            errors.append(_error("enabled", "must be a boolean"))

        description = data.get("description")
        if description is not None and not isinstance(description, str):
            errors.append(_error("description", "must be a string"))

        conditions = _parse_conditions(data.get("conditions"), errors)
        rollout = _parse_rollout(data.get("rollout"), errors)
        variants = _parse_variants(data.get("variants"), errors)

        if errors:
            raise ValidationError("Invalid flag definition", errors=errors)
        return cls(
            enabled=enabled,
            description=description,
            conditions=conditions,
            rollout=rollout,
            variants=variants,
        )

    @classmethod
    def coerce(cls, value: FlagDefinition | Mapping[str, Any]) -> FlagDefinition:
        """Return *value* unchanged if already a definition, else parse it."""
        if isinstance(value, FlagDefinition):
            return value
        return cls.from_dict(value)

    @classmethod
    def salvage(cls, data: Any) -> FlagDefinition:
        """Disabled stand-in for *data* that failed to parse.

        Keeps the description when it is a string; everything else is dropped.
        """
        description = data.get("description") if isinstance(data, Mapping) else None
        return cls(enabled=False, description=description if isinstance(description, str) else None)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"enabled": self.enabled}
        if self.description is not None:
            data["description"] = self.description
        if self.conditions:
            data["conditions"] = [c.to_dict() for c in self.conditions]
        if self.rollout is not None:
            data["rollout"] = self.rollout.to_dict()
        if self.variants is not None:
            data["variants"] = {name: cfg.to_dict() for name, cfg in self.variants.items()}
        return data


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


def _parse_condition(data: Any, path: str, errors: list[dict[str, Any]]) -> Condition | None:
    if not isinstance(data, Mapping):
        errors.append(_error(path, "must be a mapping"))
        return None
    before = len(errors)
    attribute = data.get("attribute")
    if not isinstance(attribute, str) or not attribute:
        errors.append(_error(f"{path}.attribute", "must be a non-empty string"))
    operator = data.get("operator")
    if isinstance(operator, ConditionOperator):
        operator = operator.value
    if not isinstance(operator, str):
        errors.append(_error(f"{path}.operator", "must be a string"))
    if len(errors) > before:
        return None
    return Condition(attribute=attribute, operator=operator, value=data.get("value"))


def _parse_conditions(data: Any, errors: list[dict[str, Any]]) -> tuple[Condition, ...]:
    if data is None:
        return ()
    if not isinstance(data, (list, tuple)):
        errors.append(_error("conditions", "must be a list"))
        return ()
    parsed: list[Condition] = []
    for index, item in enumerate(data):
        if isinstance(item, Condition):
            parsed.append(item)
            continue
        condition = _parse_condition(item, f"conditions[{index}]", errors)
        if condition is not None:
            parsed.append(condition)
    return tuple(parsed)


def _parse_rollout(data: Any, errors: list[dict[str, Any]]) -> RolloutConfig | None:
    if data is None or isinstance(data, RolloutConfig):
        return data
    if not isinstance(data, Mapping):
        errors.append(_error("rollout", "must be a mapping"))
        return None
    percentage = data.get("percentage")
    attribute = data.get("attribute")
    if attribute is not None and not isinstance(attribute, str):
        errors.append(_error("rollout.attribute", "must be a string"))
        return None
    if not _is_number(percentage):
        # No gate; the rollout only names the bucketing attribute.
        percentage = None
    elif math.isnan(percentage):
        # NaN admits nobody.
        percentage = 0
    # An empty attribute name means "use the client default".
    return RolloutConfig(percentage=percentage, attribute=attribute or None)


def _parse_variants(data: Any, errors: list[dict[str, Any]]) -> dict[str, VariantConfig] | None:
    if data is None:
        return None
    if not isinstance(data, Mapping):
        errors.append(_error("variants", "must be a mapping"))
        return None
    parsed: dict[str, VariantConfig] = {}
    for name, cfg in data.items():
        if not isinstance(name, str):
            errors.append(_error("variants", f"variant name {name!r} must be a string"))
            continue
        if isinstance(cfg, VariantConfig):
            parsed[name] = cfg
            continue
        if not isinstance(cfg, Mapping):
            errors.append(_error(f"variants.{name}", "must be a mapping"))
            continue
        weight = cfg.get("weight", 0)
        if not _is_number(weight) or math.isnan(weight):
            weight = 0
        parsed[name] = VariantConfig(weight=weight)
    return parsed


__all__ = [
    "Condition",
    "ConditionOperator",
    "FlagDefinition",
    "RolloutConfig",
    "VariantConfig",
]
