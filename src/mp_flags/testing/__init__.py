"""Testing support – fakes and property-based generators."""

from mp_flags.testing.fakes import FakeFeatureFlagClient
from mp_flags.testing.generators import (
    condition_strategy,
    context_strategy,
    flag_definition_strategy,
    identifier_strategy,
)

__all__ = [
    "FakeFeatureFlagClient",
    "condition_strategy",
    "context_strategy",
    "flag_definition_strategy",
    "identifier_strategy",
]
