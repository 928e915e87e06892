"""Error taxonomy for radix conversion.

WHY: Callers must tell apart a bad base, an empty alphabet, a duplicated
symbol, an unknown symbol and a value that does not fit the configured
integer width. Matching on message text is brittle, so each failure is its
own exception class carrying the values that describe it.

HOW: NumsysError is the common base (a ValueError, like the configuration
errors elsewhere in the package). Every subclass stores its discriminating
fields as attributes and renders the human-readable message from them.

RULES:
- The set of subclasses is closed: BaseTooSmall, BaseTooBig, DictEmpty,
  MultipleChar, MissingChar, NumberOverflow
- err.kind is the class name; err.text is the rendered message
- Two errors are equal when kind and payload are equal
- Messages never change the payload; tests assert on fields first
"""

from __future__ import annotations

from typing import Any, Sequence, Tuple


class NumsysError(ValueError):
    """Base class for every conversion failure."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    @property
    def kind(self) -> str:
        return type(self).__name__

    def _payload(self) -> Tuple[Any, ...]:
        return (self.text,)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._payload() == other._payload()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((self.kind, self._payload()))

    def __repr__(self) -> str:
        return "{}({!r})".format(self.kind, self.text)


class BaseTooSmall(NumsysError):
    """Raised when the requested base is below the minimum of 2."""

    def __init__(self, given: int, minimum: int = 2) -> None:
        self.given = given
        self.minimum = minimum
        super().__init__(
            "Base MUST be {} or higher, given {}".format(minimum, given)
        )

    def _payload(self) -> Tuple[Any, ...]:
        return (self.minimum, self.given)


class BaseTooBig(NumsysError):
    """Raised when the requested base exceeds the canonical alphabet."""

    def __init__(self, given: int, maximum: int) -> None:
        self.given = given
        self.maximum = maximum
        super().__init__(
            "Base MUST be at most {}, given {}".format(maximum, given)
        )

    def _payload(self) -> Tuple[Any, ...]:
        return (self.maximum, self.given)


class DictEmpty(NumsysError):
    """Raised when an alphabet has no symbols (base 0 is undefined)."""

    def __init__(self) -> None:
        super().__init__("DictEmpty")


class MultipleChar(NumsysError):
    """Raised when a decoding alphabet repeats a symbol.

    The message mirrors the alphabet as a list so the duplicate can be
    spotted in context, e.g. ``Chars MUST be unique, duplicated: 'A' in
    ['A', 'A']``.
    """

    def __init__(self, char: str, alphabet: Sequence[str]) -> None:
        self.char = char
        self.alphabet = list(alphabet)
        super().__init__(
            "Chars MUST be unique, duplicated: {!r} in {!r}".format(
                char, self.alphabet
            )
        )

    def _payload(self) -> Tuple[Any, ...]:
        return (self.char, tuple(self.alphabet))


class MissingChar(NumsysError):
    """Raised when a sequence holds a symbol the alphabet does not define."""

    def __init__(self, char: str, alphabet: Sequence[str]) -> None:
        self.char = char
        self.alphabet = list(alphabet)
        super().__init__(
            "Char {!r} not found in: {!r}".format(char, self.alphabet)
        )

    def _payload(self) -> Tuple[Any, ...]:
        return (self.char, tuple(self.alphabet))


class NumberOverflow(NumsysError):
    """Raised when a value falls outside ``[0, 2**width - 1]``.

    Covers both inputs handed to the encoders and totals accumulated while
    decoding under the ``error`` overflow policy.
    """

    def __init__(self, value: int, width: int) -> None:
        self.value = value
        self.width = width
        super().__init__(
            "Value MUST fit in {} unsigned bits [0, {}], given {}".format(
                width, (1 << width) - 1, value
            )
        )

    def _payload(self) -> Tuple[Any, ...]:
        return (self.value, self.width)
