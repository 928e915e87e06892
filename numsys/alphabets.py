"""Built-in alphabets for radix conversion.

WHY: switch_dec_base needs a fixed, well-known symbol set for bases 2-36,
and callers frequently want the usual alphabets (binary, hex, base62, ...)
without spelling them out by hand.

HOW: Alphabets are plain module-level strings, computed once when the
module is imported. The import lock guarantees a single initialisation even
under concurrent first import, and str is immutable, so no further
synchronisation is needed. ALPHABETS maps short names to these strings.

RULES:
- DIGITS_UPPER_AZ is the canonical alphabet: '0'-'9' then 'A'-'Z'
- D_UAZ_LEN (36) is the largest base switch_dec_base accepts
- Never build alphabets lazily or mutate them at runtime
- Names in ALPHABETS are lowercase identifiers
"""

from __future__ import annotations

import string
from typing import Dict

DIGITS: str = string.digits
"""Digits '0' to '9' (included)."""

UPPER_AZ: str = string.ascii_uppercase
"""Upper-case ASCII letters 'A' to 'Z'."""

LOWER_AZ: str = string.ascii_lowercase
"""Lower-case ASCII letters 'a' to 'z'."""

DIGITS_UPPER_AZ: str = DIGITS + UPPER_AZ
"""Canonical alphabet used by switch_dec_base."""

D_UAZ_LEN: int = len(DIGITS_UPPER_AZ)

# ---------------------------------------------------------------------------
# Named alphabets
# ---------------------------------------------------------------------------

ALPHABETS: Dict[str, str] = {
    "binary": DIGITS_UPPER_AZ[:2],
    "octal": DIGITS_UPPER_AZ[:8],
    "decimal": DIGITS,
    "hex": DIGITS_UPPER_AZ[:16],
    "base36": DIGITS_UPPER_AZ,
    # URL-shortener flavour: digits, upper, then lower case
    "base62": DIGITS_UPPER_AZ + LOWER_AZ,
}


def get_alphabet(name: str) -> str:
    """Return the named alphabet.

    Lookup is case-insensitive. Unknown names raise KeyError listing the
    available ones, so a typo is easy to fix.
    """
    try:
        return ALPHABETS[name.lower()]
    except KeyError:
        raise KeyError(
            "Unknown alphabet '{}'. Available: {}".format(
                name, ", ".join(sorted(ALPHABETS))
            )
        ) from None


def canonical_prefix(base: int) -> str:
    """The first ``base`` symbols of the canonical alphabet."""
    return DIGITS_UPPER_AZ[:base]
