"""Unit tests for the stable FNV-1a hash."""

from __future__ import annotations

import pytest

from mp_flags.kernel.errors import InvalidArgumentError
from mp_flags.kernel.hashing import FNV_OFFSET_BASIS, FNV_PRIME, fnv1a_32, stable_hash


def _fold(units: list[int]) -> int:
    h = FNV_OFFSET_BASIS
    for unit in units:
        h = ((h ^ unit) * FNV_PRIME) % 2**32
    return h


class TestFnv1a32:
    def test_empty_string_is_offset_basis(self) -> None:
        assert fnv1a_32("") == 2166136261

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("a", 0xE40C292C), ("foobar", 0xBF9CF968)],
    )
    def test_reference_vectors(self, value: str, expected: int) -> None:
        assert fnv1a_32(value) == expected

    def test_result_is_unsigned_32_bit(self) -> None:
        for value in ("seed:flag:user-1", "x" * 500, "ünïcödé"):
            h = fnv1a_32(value)
            assert 0 <= h < 2**32

    def test_bmp_characters_hash_by_code_unit(self) -> None:
        assert fnv1a_32("é") == _fold([0xE9])

    def test_astral_characters_hash_as_surrogate_pair(self) -> None:
        assert fnv1a_32("\U0001F600") == _fold([0xD83D, 0xDE00])

    def test_deterministic(self) -> None:
        assert fnv1a_32("seed:variant:flag:u-42") == fnv1a_32("seed:variant:flag:u-42")


class TestStableHash:
    def test_reduces_modulo(self) -> None:
        assert stable_hash("foobar", 100) == 0xBF9CF968 % 100

    def test_range(self) -> None:
        for i in range(500):
            assert 0 <= stable_hash(f"key-{i}", 7) < 7

    def test_float_modulus(self) -> None:
        bucket = stable_hash("foobar", 2.5)
        assert 0 <= bucket < 2.5
        assert bucket == 0xBF9CF968 % 2.5

    @pytest.mark.parametrize("modulus", [0, -1, -0.5, float("nan")])
    def test_non_positive_modulus_raises(self, modulus: float) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            stable_hash("x", modulus)
        assert exc_info.value.argument == "modulus"

    @pytest.mark.parametrize("modulus", [True, "100", None])
    def test_non_numeric_modulus_raises(self, modulus: object) -> None:
        with pytest.raises(InvalidArgumentError):
            stable_hash("x", modulus)  # type: ignore[arg-type]
