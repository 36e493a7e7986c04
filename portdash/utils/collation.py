"""Case-insensitive, accent-aware string collation.

Names are compared the way a person reading the list expects: case never
matters, accented letters sort next to their base letter, but "Café" and
"Cafe" are still different names.
"""

import unicodedata
from typing import Tuple


def fold(value: str) -> str:
    """Canonical case-folded form used for equality checks."""
    return unicodedata.normalize("NFC", value).casefold()


def collation_key(value: str) -> Tuple[str, str]:
    """Sort key: base letters first, then accents. Case is ignored."""
    decomposed = unicodedata.normalize("NFKD", value).casefold()
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base, decomposed)


def names_equal(a: str, b: str) -> bool:
    """True when two names differ only by case."""
    return fold(a) == fold(b)
