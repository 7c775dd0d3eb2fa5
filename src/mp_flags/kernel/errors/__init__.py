"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError             (domain.py)
    │   ├── ValidationError
    │   └── InvalidArgumentError
    ├── ApplicationError        (application.py)
    └── InfrastructureError     (infrastructure.py)
        └── StoreUnavailableError

Evaluation itself never raises: malformed flag data degrades to a disabled
result.  These errors surface only at the store boundary (``upsert_flag``),
at store construction, and for invalid hash arguments.
"""

from mp_flags.kernel.errors.application import ApplicationError
from mp_flags.kernel.errors.base import BaseError
from mp_flags.kernel.errors.domain import (
    DomainError,
    InvalidArgumentError,
    ValidationError,
)
from mp_flags.kernel.errors.infrastructure import (
    InfrastructureError,
    StoreUnavailableError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidArgumentError",
    "StoreUnavailableError",
    "ValidationError",
]
