"""tests/unit/test_exceptions.py"""

import pytest

from httpcanon.exceptions import (
    AddressError,
    AmbiguousQueryValue,
    ErrorKind,
    HttpCanonError,
    InvalidAddress,
    InvalidIPv4Component,
    InvalidIPv6Component,
    InvalidPath,
    InvalidPort,
    InvalidUrl,
    MissingInput,
    NotIPv4,
    OutOfRange,
    TooManyElisions,
    URLError,
)
from httpcanon.net.address import Address


def test_exception_hierarchy():
    """Verify the inheritance structure of httpcanon exceptions."""
    assert issubclass(AddressError, HttpCanonError)
    assert issubclass(URLError, HttpCanonError)
    assert issubclass(AddressError, ValueError)
    assert issubclass(URLError, ValueError)
    assert issubclass(MissingInput, AddressError)
    assert issubclass(MissingInput, TypeError)
    assert issubclass(OutOfRange, AddressError)
    assert issubclass(InvalidIPv4Component, InvalidAddress)
    assert issubclass(InvalidIPv6Component, InvalidAddress)
    assert issubclass(TooManyElisions, InvalidAddress)
    assert issubclass(NotIPv4, AddressError)
    assert issubclass(InvalidUrl, URLError)
    assert issubclass(InvalidPort, URLError)
    assert issubclass(InvalidPath, URLError)
    assert issubclass(AmbiguousQueryValue, URLError)


@pytest.mark.parametrize(
    "exc, kind",
    [
        (MissingInput(), ErrorKind.MISSING_INPUT),
        (OutOfRange(-1), ErrorKind.OUT_OF_RANGE),
        (InvalidAddress("a"), ErrorKind.INVALID_ADDRESS),
        (InvalidIPv4Component("1.2"), ErrorKind.INVALID_IPV4_COMPONENT),
        (InvalidIPv6Component("zz"), ErrorKind.INVALID_IPV6_COMPONENT),
        (TooManyElisions("a::b::1"), ErrorKind.TOO_MANY_ELISIONS),
        (NotIPv4(Address(1)), ErrorKind.NOT_IPV4),
        (InvalidUrl("ftp://a"), ErrorKind.INVALID_URL),
        (InvalidPort(70000), ErrorKind.INVALID_PORT),
        (InvalidPath("../a"), ErrorKind.INVALID_PATH),
        (AmbiguousQueryValue("a=b", "c"), ErrorKind.AMBIGUOUS_QUERY_VALUE),
    ],
)
def test_exception_kinds(exc, kind):
    """Verify that every exception reports its error kind."""
    assert exc.kind is kind


def test_missing_input_default_message():
    """Verify that MissingInput has a default message."""
    assert "missing parameter" in str(MissingInput())


def test_out_of_range_messages():
    """Verify that OutOfRange distinguishes negative from oversized values."""
    assert "negative" in str(OutOfRange(-1))
    assert "128 bits" in str(OutOfRange(2**128))
    assert OutOfRange(-1).value == -1


def test_invalid_address_carries_text():
    """Verify that InvalidAddress keeps the offending text and kind label."""
    exc = InvalidIPv4Component("10.0.a.b", "bad octet 'a'")
    assert exc.text == "10.0.a.b"
    assert "Invalid IPv4 address" in str(exc)
    assert "bad octet" in str(exc)


def test_not_ipv4_includes_ipv6_form():
    """Verify that NotIPv4 names the address in canonical IPv6 form."""
    address = Address("2001:db8::1")
    exc = NotIPv4(address)
    assert exc.address is address
    assert "2001:db8::1" in str(exc)


def test_url_errors_carry_context():
    """Verify that URL errors keep their structured context."""
    assert InvalidPort(-1).port == -1
    assert InvalidPath("a/../..").path == "a/../.."
    assert InvalidUrl("ftp://a").text == "ftp://a"
    exc = AmbiguousQueryValue("a=b", "c")
    assert (exc.name, exc.value) == ("a=b", "c")


@pytest.mark.parametrize(
    "exception_class",
    [HttpCanonError, AddressError, URLError],
)
def test_generic_exceptions_accept_message(exception_class):
    """Verify that generic exceptions can be raised with a message."""
    message = f"Testing {exception_class.__name__}"
    with pytest.raises(exception_class) as exc_info:
        raise exception_class(message)
    assert message in str(exc_info.value)


def test_catchable_as_value_error():
    """Verify that parse failures can be handled as plain ValueError."""
    with pytest.raises(ValueError):
        Address("not an address")
