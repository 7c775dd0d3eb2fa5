"""Testing generators – property-based strategies."""
from mp_flags.testing.generators.strategies import (
    condition_strategy,
    context_strategy,
    flag_definition_strategy,
    identifier_strategy,
)

__all__ = [
    "condition_strategy",
    "context_strategy",
    "flag_definition_strategy",
    "identifier_strategy",
]
