"""Radix conversion between integers and symbol sequences.

WHY: Numbers need to be rendered in, and read back from, positional
numeral systems whose symbols the caller chooses (binary with 'A'/'B',
stars, base62 ids, ...). This module is the whole conversion engine; the
rest of the package only supplies alphabets, settings and error types.

HOW: dec2seq peels digits off with divmod and prepends the matching
symbol. seq2dec builds a symbol -> value map and accumulates
value * base**position from the right. switch_dec_base validates the base
against the canonical alphabet and uses format() for the bases Python
formats natively, falling back to dec2seq for the rest.

RULES:
- A one-symbol alphabet is unary: dec2seq repeats the symbol, seq2dec
  counts it. seq2dec's unary shortcut only checks that the sequence uses a
  single distinct symbol, not that the symbol belongs to the alphabet
- Duplicate alphabet symbols are rejected before the sequence is decoded
  (except on the unary shortcut, which never builds the map)
- switch_dec_base(0, base) is "0"; dec2seq(0, alphabet) is ""
- Values live in [0, 2**width - 1]; width defaults to the configured one
- All functions are pure and thread-safe
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Union

from numsys.alphabets import D_UAZ_LEN, LOWER_AZ, UPPER_AZ, canonical_prefix
from numsys.config import OverflowPolicy, get_settings, validate_width
from numsys.errors import (
    BaseTooBig,
    BaseTooSmall,
    DictEmpty,
    MissingChar,
    MultipleChar,
    NumberOverflow,
)

logger = logging.getLogger(__name__)

Alphabet = Union[str, Sequence[str]]
SymbolSequence = Union[str, Iterable[str]]

MIN_BASE = 2

# Bases whose canonical-alphabet rendering format() already produces
_NATIVE_FORMATS: Dict[int, str] = {2: "b", 8: "o", 10: "d", 16: "X"}

# ASCII-only case folding; str.upper() would turn "ß" into "SS"
_ASCII_UPPER = str.maketrans(LOWER_AZ, UPPER_AZ)


def _check_decimal(decimal: int, width: int) -> None:
    if isinstance(decimal, bool) or not isinstance(decimal, int):
        raise TypeError(
            "decimal must be an int, got {}".format(type(decimal).__name__)
        )
    if decimal < 0 or decimal > (1 << width) - 1:
        raise NumberOverflow(decimal, width)


def _resolve_width(width: Optional[int]) -> int:
    if width is None:
        return get_settings().int_width
    return validate_width(width)


def _resolve_overflow(overflow: Optional[str]) -> OverflowPolicy:
    if overflow is None:
        return get_settings().overflow
    return OverflowPolicy(overflow)


def _build_char2val(alphabet: Sequence[str]) -> Dict[str, int]:
    char2val: Dict[str, int] = {}
    for idx, char in enumerate(alphabet):
        if char in char2val:
            raise MultipleChar(char, alphabet)
        char2val[char] = idx
    return char2val


def dec2seq(decimal: int, alphabet: Alphabet, *, width: Optional[int] = None) -> str:
    """Convert ``decimal`` to a sequence over ``alphabet``.

    Args:
        decimal: Non-negative integer that fits in ``width`` bits.
        alphabet: Ordered symbols; position is digit value, length is base.
        width: Unsigned width override (defaults to NUMSYS_INT_WIDTH).

    Returns:
        The big-endian representation without leading zero symbols.
        Zero gives ``""``; a one-symbol alphabet gives unary output.

    Raises:
        DictEmpty: ``alphabet`` is empty.
        NumberOverflow: ``decimal`` is outside the width's range.

    Examples::

        >>> dec2seq(10, "01")
        '1010'
        >>> dec2seq(10, "AB")
        'BABA'
        >>> dec2seq(3, "a")
        'aaa'
    """
    base = len(alphabet)
    if base == 0:
        raise DictEmpty()
    _check_decimal(decimal, _resolve_width(width))
    if base == 1:
        return alphabet[0] * decimal

    symbols: List[str] = []
    while decimal != 0:
        decimal, digit = divmod(decimal, base)
        symbols.append(alphabet[digit])
    symbols.reverse()
    return "".join(symbols)


def seq2dec(
    sequence: SymbolSequence,
    alphabet: Alphabet,
    *,
    width: Optional[int] = None,
    overflow: Optional[str] = None,
) -> int:
    """Convert ``sequence`` to an integer using ``alphabet`` as digit values.

    Args:
        sequence: Symbols, most significant first. A str is read one
            character at a time; any other iterable one item at a time.
        alphabet: Ordered, duplicate-free symbols.
        width: Unsigned width override (defaults to NUMSYS_INT_WIDTH).
        overflow: "error" or "wrap" (defaults to NUMSYS_OVERFLOW).

    Raises:
        DictEmpty: ``alphabet`` is empty.
        MultipleChar: ``alphabet`` repeats a symbol.
        MissingChar: ``sequence`` holds a symbol not in ``alphabet``.
        NumberOverflow: the total exceeds the width under "error".

    Examples::

        >>> seq2dec("BABA", "AB")
        10
        >>> seq2dec("☆★☆★", "★☆")
        10
    """
    base = len(alphabet)
    if base == 0:
        raise DictEmpty()
    symbols = list(sequence)
    width = _resolve_width(width)
    policy = _resolve_overflow(overflow)

    if base == 1 and len(set(symbols)) == 1:
        total = len(symbols)
        if total > (1 << width) - 1:
            if policy is OverflowPolicy.error:
                raise NumberOverflow(total, width)
            logger.warning("seq2dec wrapped unary length %d to %d bits", total, width)
            total &= (1 << width) - 1
        return total

    char2val = _build_char2val(alphabet)
    limit = (1 << width) - 1
    wrapped = False
    # Once weight passes limit it is clamped (error) or reduced (wrap) so
    # long inputs decode in linear time.
    weight_past_limit = False
    total = 0
    weight = 1
    for char in reversed(symbols):
        try:
            value = char2val[char]
        except KeyError:
            raise MissingChar(char, alphabet) from None
        if value:
            if weight_past_limit and policy is OverflowPolicy.wrap:
                wrapped = True
            total += value * weight
            if total > limit:
                if policy is OverflowPolicy.error:
                    raise NumberOverflow(total, width)
                total &= limit
                wrapped = True
        weight *= base
        if weight > limit:
            weight_past_limit = True
            if policy is OverflowPolicy.error:
                weight = limit + 1
            else:
                weight &= limit
    if wrapped:
        logger.warning("seq2dec wrapped %r to %d bits", "".join(symbols), width)
    return total


def switch_dec_base(decimal: int, base: int, *, width: Optional[int] = None) -> str:
    """Render ``decimal`` in ``base`` using the canonical 0-9A-Z alphabet.

    The inverse is dec_from_base.

    Examples::

        >>> switch_dec_base(10, 16)
        'A'
        >>> switch_dec_base(10, 3)
        '101'

    Raises:
        BaseTooSmall: ``base`` < 2.
        BaseTooBig: ``base`` > 36.
        NumberOverflow: ``decimal`` is outside the width's range.
    """
    _check_base(base)
    _check_decimal(decimal, _resolve_width(width))
    if decimal == 0:
        return "0"
    spec = _NATIVE_FORMATS.get(base)
    if spec is not None:
        return format(decimal, spec)
    return dec2seq(decimal, canonical_prefix(base), width=width)


def dec_from_base(
    sequence: str,
    base: int,
    *,
    width: Optional[int] = None,
    overflow: Optional[str] = None,
) -> int:
    """Parse a canonical-alphabet ``sequence`` written in ``base``.

    Lower-case ASCII letters are accepted. Base validation matches
    switch_dec_base, so ``dec_from_base(switch_dec_base(d, b), b) == d``.
    """
    _check_base(base)
    return seq2dec(
        sequence.translate(_ASCII_UPPER),
        canonical_prefix(base),
        width=width,
        overflow=overflow,
    )


def _check_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int):
        raise TypeError("base must be an int, got {}".format(type(base).__name__))
    if base < MIN_BASE:
        raise BaseTooSmall(base, MIN_BASE)
    if base > D_UAZ_LEN:
        raise BaseTooBig(base, D_UAZ_LEN)
