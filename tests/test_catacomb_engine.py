"""Tests for catacomb_engine: extensions, primality and numerals."""

from __future__ import annotations

import pytest

import catacomb_engine as ce
from catacomb_engine import CatacombNumber
from catacomb_errors import ConfigurationError, FormatError


def trial_division(n: int) -> bool:
    if n < 2:
        return False
    d = 2
    while d * d <= n:
        if n % d == 0:
            return False
        d += 1
    return True


class TestIsPrime:
    def test_small_numbers_match_trial_division(self) -> None:
        for n in range(0, 5000):
            assert ce.is_prime(n) == trial_division(n), n

    def test_known_values(self) -> None:
        assert not ce.is_prime(0)
        assert not ce.is_prime(1)
        assert ce.is_prime(2)
        assert ce.is_prime(127)
        assert not ce.is_prime(561)  # Carmichael

    @pytest.mark.parametrize(
        "n,expected",
        [
            (999_983, True),
            (1_000_003, True),
            (1_000_001, False),  # 101 * 9901
            (1_000_000_007, True),
            (1_000_000_009, True),
            (999_999_999_989, True),  # largest prime below 10^12
            (1_000_000_000_039, True),
            (1_000_000_000_001, False),  # 73 * 137 * 99990001
            (999_999_000_001, True),
            (3_215_031_751, False),  # strong pseudoprime to 2, 3, 5, 7
            (2**61 - 1, True),
            (2**67 - 1, False),
            (2**89 - 1, True),
            ((2**61 - 1) * (2**31 - 1), False),
        ],
    )
    def test_large_values(self, n: int, expected: bool) -> None:
        assert ce.is_prime(n) is expected

    def test_threshold_boundary_agrees(self) -> None:
        for n in range(999_900, 1_000_100):
            assert ce.naive_is_prime(n) == ce.miller_rabin_is_prime(n), n


class TestComputeExtensions:
    @pytest.mark.parametrize("base", [2, 3, 7, 10, 16, 36])
    def test_one_entry_per_digit_ascending(self, base: int) -> None:
        result = ce.compute_extensions("13", base)
        assert len(result) == base
        assert [int(c.value) for c in result] == [13 * base + d for d in range(base)]

    def test_classification_matches_trial_division(self) -> None:
        for c in ce.compute_extensions("1234", 10):
            assert c.is_prime == trial_division(int(c.value))

    def test_base_two_from_two(self) -> None:
        result = ce.compute_extensions("2", 2)
        assert result == [CatacombNumber("4", False), CatacombNumber("5", True)]

    def test_zero_keeps_leading_zero_candidate(self) -> None:
        result = ce.compute_extensions("0", 10)
        assert result[0] == CatacombNumber("0", False)
        assert [c.value for c in result] == [str(d) for d in range(10)]

    def test_arbitrary_precision(self) -> None:
        big = str(2**127 - 1)
        result = ce.compute_extensions(big, 2)
        assert result[0].value == str((2**127 - 1) * 2)
        assert result[1].value == str((2**127 - 1) * 2 + 1)
        assert result[0].is_prime is False

    @pytest.mark.parametrize("base", [0, 1, 37, 100, -2])
    def test_invalid_base(self, base: int) -> None:
        with pytest.raises(ConfigurationError):
            ce.compute_extensions("2", base)

    def test_non_integer_base(self) -> None:
        with pytest.raises(ConfigurationError):
            ce.compute_extensions("2", 2.0)

    @pytest.mark.parametrize("numeral", ["", "12a", "-3", "1.5", "two"])
    def test_invalid_numeral(self, numeral: str) -> None:
        with pytest.raises(FormatError):
            ce.compute_extensions(numeral, 2)

    def test_prime_extensions(self) -> None:
        assert [c.value for c in ce.prime_extensions("2", 2)] == ["5"]


class TestNumerals:
    def test_parse_decimal(self) -> None:
        assert ce.parse_numeral("  42 ") == 42

    def test_parse_other_bases(self) -> None:
        assert ce.parse_numeral("101", 2) == 5
        assert ce.parse_numeral("ff", 16) == 255
        assert ce.parse_numeral("Z", 36) == 35

    def test_parse_rejects_digit_outside_base(self) -> None:
        with pytest.raises(FormatError):
            ce.parse_numeral("102", 2)

    def test_to_base_string(self) -> None:
        assert ce.to_base_string(0, 2) == "0"
        assert ce.to_base_string(5, 2) == "101"
        assert ce.to_base_string(255, 16) == "FF"
        assert ce.to_base_string(35, 36) == "Z"

    def test_round_trip_selected_values(self) -> None:
        for base in (2, 8, 10, 36):
            for value in (1, 97, 2**70 + 3):
                assert ce.parse_numeral(ce.to_base_string(value, base), base) == value

    def test_display_uses_room_base(self) -> None:
        assert CatacombNumber("5", True).display(2) == "101"
        assert CatacombNumber("5", True).as_int == 5
