"""Kernel hashing – stable, cross-language string bucketing."""
from mp_flags.kernel.hashing.fnv import FNV_OFFSET_BASIS, FNV_PRIME, fnv1a_32, stable_hash

__all__ = ["FNV_OFFSET_BASIS", "FNV_PRIME", "fnv1a_32", "stable_hash"]
