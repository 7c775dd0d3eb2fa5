"""Kernel – framework-agnostic building blocks (errors, stable hashing)."""

from mp_flags.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    InvalidArgumentError,
    StoreUnavailableError,
    ValidationError,
)
from mp_flags.kernel.hashing import fnv1a_32, stable_hash

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidArgumentError",
    "StoreUnavailableError",
    "ValidationError",
    "fnv1a_32",
    "stable_hash",
]
