"""
mp_flags – Deterministic feature-flag evaluation.

Import path convention::

    from mp_flags.application.feature_flags import FeatureFlagClient, InMemoryFlagStore
    from mp_flags.adapters.file import JsonFileFlagStore
    from mp_flags.kernel.errors import StoreUnavailableError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
