"""src/httpcanon/utils/percent.py

Percent-encoding normalization.
"""

import re
import string

__all__ = ["UNRESERVED", "normalize_percent_encoding"]

UNRESERVED = frozenset(string.ascii_letters + string.digits + "-._~")

_TRIPLET = re.compile(r"%([0-9a-f]{2})", re.IGNORECASE)


def _normalize_triplet(match: "re.Match[str]") -> str:
    char = chr(int(match.group(1), 16))
    if char in UNRESERVED:
        return char
    return match.group(0).upper()


def normalize_percent_encoding(text: str) -> str:
    """
    Normalize every ``%XX`` triplet in ``text``.

    Triplets encoding an unreserved character (``A-Z a-z 0-9 - . _ ~``) are
    decoded; all others keep their encoding with upper-case hex digits.

    Example::

        >>> normalize_percent_encoding("%41%5b%7e")
        'A%5B~'
    """
    return _TRIPLET.sub(_normalize_triplet, text)
