"""Testing fakes – in-memory doubles for the flag client."""
from mp_flags.testing.fakes.feature_flags import FakeFeatureFlagClient

__all__ = ["FakeFeatureFlagClient"]
