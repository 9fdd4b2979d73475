"""src/httpcanon/net/address.py

128-bit IPv6 address model with IPv4-mapped support.

An :class:`Address` holds a single unsigned integer. Every textual form is
parsed into it or rendered from it:

    >>> str(Address("::FFFF:10.0.0.1"))
    '10.0.0.1'
    >>> Address("2001:0db8:0:0:0:0:0:1").to_ipv6_string()
    '2001:db8::1'
    >>> Address("10.0.0.1").to_ipv6_string(dot_decimal=False)
    '::ffff:a00:1'
"""

import logging
import re
from typing import List, Optional, Union

from httpcanon.exceptions import (
    AddressError,
    InvalidAddress,
    InvalidIPv4Component,
    InvalidIPv6Component,
    MissingInput,
    NotIPv4,
    OutOfRange,
    TooManyElisions,
)

__all__ = [
    "Address",
    "AddressLike",
    "MAX_VALUE",
    "IPV4PREFIX",
    "IPV4MASK",
    "is_ipv4",
    "to_ipv6_string",
    "to_ipv4_string",
    "compare",
    "equals",
]

logger = logging.getLogger(__name__)

MAX_VALUE = (1 << 128) - 1
IPV4PREFIX = 0xFFFF_0000_0000
IPV4MASK = MAX_VALUE ^ 0xFFFF_FFFF

_ELISION = "::"
_HEX_GROUP = re.compile(r"[0-9a-f]{1,4}", re.IGNORECASE)
_DEC_OCTET = re.compile(r"[0-9]+")

AddressLike = Union["Address", int, str]


class Address:
    """
    Immutable IPv6 address.

    Accepts another :class:`Address`, a non-negative integer below ``2**128``
    or a string in IPv6, IPv4-mapped IPv6 or plain dotted-decimal IPv4
    notation. Equality, hashing and ordering follow the numeric value.
    """

    __slots__ = ("_value", "_is_ipv4", "_text")

    def __init__(self, source: AddressLike) -> None:
        """
        Initialize an address.

        Args:
            source: Address to copy, integer value or address text.

        Raises:
            MissingInput: ``source`` is None.
            OutOfRange: Integer outside ``[0, 2**128 - 1]``.
            InvalidAddress: Text that cannot be parsed (or a subclass
                naming the failing component).
            TypeError: Any other type.
        """
        self._value: int = _to_int(source)
        self._is_ipv4: Optional[bool] = None
        self._text: Optional[str] = None

    @classmethod
    def from_int(cls, value: int) -> "Address":
        """Create an address from its numeric value."""
        return cls(value)

    @classmethod
    def from_text(cls, text: str) -> "Address":
        """Create an address from IPv6 or dotted-decimal IPv4 text."""
        return cls(text)

    @classmethod
    def from_address(cls, address: "Address") -> "Address":
        """Copy an existing address."""
        return cls(address)

    @classmethod
    def coerce(cls, source: AddressLike) -> "Address":
        """Return ``source`` itself if it is already an Address, else build one."""
        if isinstance(source, Address):
            return source
        return cls(source)

    @property
    def value(self) -> int:
        """The 128-bit unsigned integer value."""
        return self._value

    def is_ipv4(self) -> bool:
        """
        Whether this address is in the IPv4-mapped space (``::ffff:0:0/96``).

        The answer is memoized on first call.
        """
        if self._is_ipv4 is None:
            self._is_ipv4 = (self._value & IPV4MASK) == IPV4PREFIX
        return self._is_ipv4

    def to_ipv6_string(self, dot_decimal: bool = True) -> str:
        """
        Render the canonical IPv6 text.

        Lowercase hex, no leading zeros, the longest run of two or more zero
        groups (leftmost on ties) collapsed to ``::``.

        Args:
            dot_decimal: For IPv4-mapped addresses, render the low 32 bits as
                ``d.d.d.d`` (``::ffff:10.0.0.1``) instead of two hex groups
                (``::ffff:a00:1``).
        """
        if dot_decimal and self.is_ipv4():
            return "::ffff:" + self.to_ipv4_string()
        return _compress(_groups(self._value))

    def to_ipv4_string(self) -> str:
        """
        Render the low 32 bits as dotted-decimal.

        Raises:
            NotIPv4: The address is not IPv4-mapped.
        """
        if not self.is_ipv4():
            raise NotIPv4(self)
        return ".".join(str(b) for b in (self._value & 0xFFFF_FFFF).to_bytes(4, "big"))

    def compare(self, other: AddressLike) -> int:
        """Compare to ``other`` by numeric value, returning -1, 0 or 1."""
        return compare(self, other)

    def equals(self, other: Optional[AddressLike]) -> bool:
        """Whether ``other`` denotes the same address; malformed input is unequal."""
        return equals(self, other)

    def __str__(self) -> str:
        if self._text is None:
            if self.is_ipv4():
                self._text = self.to_ipv4_string()
            else:
                self._text = self.to_ipv6_string()
        return self._text

    def __repr__(self) -> str:
        return f"Address({str(self)!r})"

    def __int__(self) -> int:
        return self._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: "Address") -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: "Address") -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: "Address") -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: "Address") -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        return self._value >= other._value


def _to_int(source: AddressLike) -> int:
    """Reduce any accepted source to a range-checked integer."""
    if source is None:
        raise MissingInput()
    if isinstance(source, Address):
        return source.value
    if isinstance(source, str):
        return _parse(source)
    if isinstance(source, int) and not isinstance(source, bool):
        if source < 0 or source > MAX_VALUE:
            logger.debug("Rejected address integer %d: out of range", source)
            raise OutOfRange(source)
        return source
    raise TypeError(f"Cannot build an Address from {type(source).__name__}")


def _parse(text: str) -> int:
    """Parse IPv6, IPv4-mapped IPv6 or dotted-decimal IPv4 text."""
    value = text.strip()
    has_ipv4 = value.rfind(".") > 0

    if ":" not in value:
        if not has_ipv4:
            logger.debug("Rejected address %r: neither IPv6 nor IPv4", text)
            raise InvalidAddress(text)
        value = "::ffff:" + value

    elisions = value.count(_ELISION)
    if elisions > 1:
        logger.debug("Rejected address %r: %d elisions", text, elisions)
        raise TooManyElisions(text)
    if elisions == 1:
        missing = (7 if has_ipv4 else 8) - value.count(":")
        value = value.replace(_ELISION, ":" + "0:" * missing)

    if value.startswith(":"):
        value = "0" + value
    if value.endswith(":"):
        value += "0"

    parts = value.split(":")
    tail: List[int] = []
    if has_ipv4:
        tail = _parse_ipv4(parts.pop(), text)

    if len(parts) + len(tail) // 2 != 8:
        logger.debug("Rejected address %r: wrong group count", text)
        raise InvalidAddress(text, "expected 8 groups")

    result = 0
    for part in parts:
        if not _HEX_GROUP.fullmatch(part):
            logger.debug("Rejected address %r: bad group %r", text, part)
            raise InvalidIPv6Component(part)
        result = (result << 16) | int(part, 16)
    for octet in tail:
        result = (result << 8) | octet
    return result


def _parse_ipv4(quad: str, text: str) -> List[int]:
    """Parse a dotted-decimal quad into four octets."""
    octets = quad.split(".")
    if len(octets) != 4:
        logger.debug("Rejected address %r: %d octets", text, len(octets))
        raise InvalidIPv4Component(quad, "expected 4 octets")

    result = []
    for octet in octets:
        if not _DEC_OCTET.fullmatch(octet) or int(octet) > 255:
            logger.debug("Rejected address %r: bad octet %r", text, octet)
            raise InvalidIPv4Component(quad, f"bad octet {octet!r}")
        result.append(int(octet))
    return result


def _groups(value: int) -> List[int]:
    """Split a 128-bit value into eight big-endian 16-bit groups."""
    return [(value >> shift) & 0xFFFF for shift in range(112, -16, -16)]


def _compress(groups: List[int]) -> str:
    """Join hex groups, collapsing the longest (leftmost) zero run to ``::``."""
    best_start, best_len = -1, 0
    start, run = -1, 0
    for i, group in enumerate(groups):
        if group == 0:
            if run == 0:
                start = i
            run += 1
            if run > best_len:
                best_start, best_len = start, run
        else:
            run = 0

    hexes = [format(g, "x") for g in groups]
    if best_len < 2:
        return ":".join(hexes)

    head = ":".join(hexes[:best_start])
    tail = ":".join(hexes[best_start + best_len :])
    return head + _ELISION + tail


def is_ipv4(source: AddressLike) -> bool:
    """Whether ``source`` denotes an IPv4-mapped address."""
    return Address.coerce(source).is_ipv4()


def to_ipv6_string(source: AddressLike, dot_decimal: bool = True) -> str:
    """Canonical IPv6 text of ``source``; see :meth:`Address.to_ipv6_string`."""
    return Address.coerce(source).to_ipv6_string(dot_decimal)


def to_ipv4_string(source: AddressLike) -> str:
    """Dotted-decimal text of ``source``; see :meth:`Address.to_ipv4_string`."""
    return Address.coerce(source).to_ipv4_string()


def compare(first: AddressLike, second: AddressLike) -> int:
    """
    Compare two addresses by numeric value.

    Args:
        first: Address, integer or address text.
        second: Address, integer or address text.

    Returns:
        -1, 0 or 1 as ``first`` is less than, equal to or greater than ``second``.

    Raises:
        AddressError: Either argument cannot be parsed.
    """
    a = _to_int(first)
    b = _to_int(second)
    return (a > b) - (a < b)


def equals(first: Optional[AddressLike], second: Optional[AddressLike]) -> bool:
    """
    Whether two values denote the same address.

    Two ``None`` values are equal, ``None`` never equals an address, and any
    value that cannot be parsed compares unequal instead of raising.
    """
    if first is None or second is None:
        return first is None and second is None
    try:
        return compare(first, second) == 0
    except (AddressError, TypeError):
        return False
