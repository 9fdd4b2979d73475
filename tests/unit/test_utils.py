"""tests/unit/test_utils.py"""

import pytest

from httpcanon.utils.validators import validate_address, validate_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("http://example.com", True),
        ("https://example.com", True),
        ("example.com/a/b?c=d#e", True),
        ("http://[::1]:8080/", True),
        ("ftp://example.com", False),
        ("example.com/../a", False),
        ("example.com:70000", False),
        ("http://10.0.0.256", False),
        ("", False),
    ],
)
def test_validate_url(url, expected):
    """Test URL validation utility."""
    assert validate_url(url) is expected


@pytest.mark.parametrize(
    "address, expected",
    [
        ("::1", True),
        ("10.0.0.1", True),
        ("::ffff:10.0.0.1", True),
        ("a::b::c", False),
        ("10.0.0", False),
        ("example.com", False),
    ],
)
def test_validate_address(address, expected):
    """Test address validation utility."""
    assert validate_address(address) is expected
