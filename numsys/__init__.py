"""numsys: convert numbers between positional numeral systems.

WHY: Rendering an integer in base 3, or reading back "BABA" written with
the alphabet "AB", needs a small, predictable converter whose symbols are
chosen by the caller and whose failures are typed.

HOW: Three operations live in numsys.core. dec2seq and seq2dec work with
any caller-supplied alphabet; switch_dec_base (and its inverse
dec_from_base) use the canonical 0-9A-Z alphabet for bases 2-36. Failures
are NumsysError subclasses from numsys.errors.

RULES:
- Everything a caller needs is importable from the package root
- Values are non-negative and bounded by the configured unsigned width
- No function keeps state between calls
"""

from numsys.alphabets import (
    ALPHABETS,
    D_UAZ_LEN,
    DIGITS,
    DIGITS_UPPER_AZ,
    UPPER_AZ,
    get_alphabet,
)
from numsys.config import NumsysSettings, OverflowPolicy, get_settings
from numsys.core import dec2seq, dec_from_base, seq2dec, switch_dec_base
from numsys.errors import (
    BaseTooBig,
    BaseTooSmall,
    DictEmpty,
    MissingChar,
    MultipleChar,
    NumberOverflow,
    NumsysError,
)

__version__ = "0.1.0"

__all__ = [
    "ALPHABETS",
    "D_UAZ_LEN",
    "DIGITS",
    "DIGITS_UPPER_AZ",
    "UPPER_AZ",
    "get_alphabet",
    "NumsysSettings",
    "OverflowPolicy",
    "get_settings",
    "dec2seq",
    "dec_from_base",
    "seq2dec",
    "switch_dec_base",
    "BaseTooBig",
    "BaseTooSmall",
    "DictEmpty",
    "MissingChar",
    "MultipleChar",
    "NumberOverflow",
    "NumsysError",
]
