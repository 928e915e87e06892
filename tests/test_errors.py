"""Unit tests for the error taxonomy.

WHY: Callers branch on the error class and read its fields; tests and
logs compare errors by value. The classes must keep kind and payload
separate from the rendered message.

HOW: Constructs each error directly and checks kind, fields, message,
equality and the shared NumsysError/ValueError ancestry.
"""

import pytest

from numsys.errors import (
    BaseTooBig,
    BaseTooSmall,
    DictEmpty,
    MissingChar,
    MultipleChar,
    NumberOverflow,
    NumsysError,
)


class TestHierarchy:

    @pytest.mark.parametrize(
        "error",
        [
            BaseTooSmall(1),
            BaseTooBig(37, 36),
            DictEmpty(),
            MultipleChar("A", ["A", "A"]),
            MissingChar("2", ["0"]),
            NumberOverflow(256, 8),
        ],
    )
    def test_all_errors_are_value_errors(self, error):
        assert isinstance(error, NumsysError)
        assert isinstance(error, ValueError)
        assert error.kind == type(error).__name__

    def test_catchable_as_value_error(self):
        with pytest.raises(ValueError):
            raise DictEmpty()


class TestPayloads:

    def test_base_too_small(self):
        err = BaseTooSmall(0)
        assert (err.minimum, err.given) == (2, 0)
        assert err.text == "Base MUST be 2 or higher, given 0"

    def test_base_too_big(self):
        err = BaseTooBig(40, 36)
        assert (err.maximum, err.given) == (36, 40)
        assert err.text == "Base MUST be at most 36, given 40"

    def test_dict_empty_message(self):
        assert str(DictEmpty()) == "DictEmpty"

    def test_alphabet_string_is_listed(self):
        err = MissingChar("x", "01")
        assert err.alphabet == ["0", "1"]
        assert err.text == "Char 'x' not found in: ['0', '1']"

    def test_non_ascii_in_message(self):
        err = MultipleChar("★", "★★")
        assert err.text == "Chars MUST be unique, duplicated: '★' in ['★', '★']"

    def test_overflow_message(self):
        err = NumberOverflow(256, 8)
        assert err.text == "Value MUST fit in 8 unsigned bits [0, 255], given 256"


class TestEquality:

    def test_same_kind_and_payload_are_equal(self):
        assert BaseTooSmall(1) == BaseTooSmall(1)
        assert DictEmpty() == DictEmpty()
        assert MissingChar("2", "0") == MissingChar("2", ["0"])

    def test_different_payload_not_equal(self):
        assert BaseTooSmall(1) != BaseTooSmall(0)
        assert MultipleChar("A", "AA") != MultipleChar("B", "BB")

    def test_base_error_compares_text(self):
        assert NumsysError("a") == NumsysError("a")
        assert NumsysError("a") != NumsysError("b")

    def test_different_kind_not_equal(self):
        assert MissingChar("A", "AA") != MultipleChar("A", "AA")

    def test_hashable(self):
        assert len({DictEmpty(), DictEmpty(), BaseTooBig(37, 36)}) == 2
