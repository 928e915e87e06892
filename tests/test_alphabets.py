"""Unit tests for the built-in alphabets."""

import pytest

from numsys.alphabets import (
    ALPHABETS,
    D_UAZ_LEN,
    DIGITS,
    DIGITS_UPPER_AZ,
    UPPER_AZ,
    canonical_prefix,
    get_alphabet,
)


class TestCanonicalAlphabet:

    def test_digits_then_upper_letters(self):
        assert DIGITS == "0123456789"
        assert UPPER_AZ == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        assert DIGITS_UPPER_AZ == DIGITS + UPPER_AZ

    def test_length(self):
        assert D_UAZ_LEN == 36

    def test_symbols_unique(self):
        assert len(set(DIGITS_UPPER_AZ)) == D_UAZ_LEN

    def test_prefix(self):
        assert canonical_prefix(2) == "01"
        assert canonical_prefix(16) == "0123456789ABCDEF"


class TestNamedAlphabets:

    @pytest.mark.parametrize(
        ("name", "size"),
        [("binary", 2), ("octal", 8), ("decimal", 10), ("hex", 16), ("base36", 36), ("base62", 62)],
    )
    def test_sizes(self, name, size):
        assert len(get_alphabet(name)) == size

    def test_all_unique(self):
        for name, alphabet in ALPHABETS.items():
            assert len(set(alphabet)) == len(alphabet), name

    def test_case_insensitive(self):
        assert get_alphabet("HEX") == ALPHABETS["hex"]

    def test_unknown_name(self):
        with pytest.raises(KeyError) as exc_info:
            get_alphabet("base99")
        assert "base62" in str(exc_info.value)
