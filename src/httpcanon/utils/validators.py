"""utils/validators.py

Validation utilities for httpcanon.
"""

from httpcanon.exceptions import HttpCanonError
from httpcanon.http.url import URL
from httpcanon.net.address import Address

__all__ = ["validate_url", "validate_address"]


def validate_url(url: str) -> bool:
    """Whether ``url`` parses as an HTTP or HTTPS URL."""
    try:
        URL(url)
    except HttpCanonError:
        return False
    return True


def validate_address(address: str) -> bool:
    """Whether ``address`` parses as IPv6 or dotted-decimal IPv4 text."""
    try:
        Address(address)
    except HttpCanonError:
        return False
    return True
