"""src/httpcanon/normalize.py

One-shot canonicalization helpers.

The value classes raise on the first malformed input. The helpers here wrap
them for callers that only want canonical text, or that process many
candidates and need failures isolated per item.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from httpcanon.exceptions import HttpCanonError
from httpcanon.http.url import URL
from httpcanon.net.address import Address

__all__ = ["normalize_url", "normalize_address", "normalize_urls", "NormalizeResult"]

logger = logging.getLogger(__name__)

NormalizeResult = Tuple[str, Optional[str], Optional[HttpCanonError]]


def normalize_url(url: str) -> str:
    """Canonical text of ``url``; raises like :class:`URL`."""
    return str(URL(url))


def normalize_address(address: str) -> str:
    """Canonical text of ``address``; raises like :class:`Address`."""
    return str(Address(address))


def normalize_urls(urls: Iterable[str]) -> List[NormalizeResult]:
    """
    Canonicalize a batch of URLs without stopping at the first bad one.

    Args:
        urls: Candidate URL strings.

    Returns:
        One ``(input, canonical, error)`` tuple per input, in input order.
        Exactly one of ``canonical`` and ``error`` is None.
    """
    results: List[NormalizeResult] = []
    for url in urls:
        try:
            results.append((url, normalize_url(url), None))
        except HttpCanonError as exc:
            logger.debug("Skipping %r: %s", url, exc)
            results.append((url, None, exc))
    return results
