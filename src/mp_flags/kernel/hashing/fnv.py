"""Kernel hashing – 32-bit FNV-1a over UTF-16 code units.

Every service that buckets subjects with the same seed must produce the same
integers, so the input is walked as UTF-16 code units (what JavaScript's
``String.prototype.charCodeAt`` yields), not as UTF-8 bytes or code points.
A character outside the BMP therefore contributes two surrogate units.
"""
from __future__ import annotations

import math

from mp_flags.kernel.errors import InvalidArgumentError

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
_MASK_32 = 0xFFFFFFFF


def _code_units(value: str) -> list[int]:
    data = value.encode("utf-16-le", "surrogatepass")
    return [data[i] | (data[i + 1] << 8) for i in range(0, len(data), 2)]


def fnv1a_32(value: str) -> int:
    """Return the unsigned 32-bit FNV-1a hash of *value*."""
    h = FNV_OFFSET_BASIS
    for unit in _code_units(value):
        h ^= unit
        h = (h * FNV_PRIME) & _MASK_32
    return h


def stable_hash(value: str, modulus: int | float) -> int | float:
    """Map *value* to a deterministic bucket in ``[0, modulus)``.

    *modulus* is normally an integer (``100`` for rollout buckets).  Variant
    weights may be fractional, so a positive float is accepted as well; the
    remainder is then a float, exactly as ``%`` behaves for a non-negative
    left operand in other languages.

    Raises
    ------
    InvalidArgumentError
        When *modulus* is not a positive number (``bool`` and NaN included).
    """
    if isinstance(modulus, bool) or not isinstance(modulus, (int, float)):
        raise InvalidArgumentError("modulus", modulus, "must be a number")
    if math.isnan(modulus) or modulus <= 0:
        raise InvalidArgumentError("modulus", modulus, "must be positive")
    return fnv1a_32(value) % modulus


__all__ = ["FNV_OFFSET_BASIS", "FNV_PRIME", "fnv1a_32", "stable_hash"]
