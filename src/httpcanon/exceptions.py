"""src/httpcanon/exceptions.py

httpcanon Exceptions hierarchy.

Every error carries a :class:`ErrorKind` so callers can branch on the cause
without matching message text.
"""

import enum
from typing import Any, Optional


class ErrorKind(enum.Enum):
    """Closed set of failure causes."""

    MISSING_INPUT = "missing input"
    OUT_OF_RANGE = "out of range"
    INVALID_ADDRESS = "invalid address"
    INVALID_IPV4_COMPONENT = "invalid IPv4 address"
    INVALID_IPV6_COMPONENT = "invalid IPv6 address"
    TOO_MANY_ELISIONS = "too many elisions"
    NOT_IPV4 = "not an IPv4 address"
    INVALID_URL = "invalid URL"
    INVALID_PORT = "invalid port"
    INVALID_PATH = "invalid path"
    AMBIGUOUS_QUERY_VALUE = "ambiguous value"


class HttpCanonError(Exception):
    """Base exception for all httpcanon errors."""

    kind: Optional[ErrorKind] = None


class AddressError(HttpCanonError, ValueError):
    """Base exception for IPv6/IPv4 address errors."""


class MissingInput(AddressError, TypeError):
    """An address was constructed from ``None``."""

    kind = ErrorKind.MISSING_INPUT

    def __init__(self, message: str = "missing parameter"):
        super().__init__(message)


class OutOfRange(AddressError):
    """
    Integer source outside ``[0, 2**128 - 1]``.

    Attributes:
        value: The rejected integer.
    """

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, value: int):
        self.value = value
        if value < 0:
            message = "value is negative"
        else:
            message = "value has more than 128 bits"
        super().__init__(message)


class InvalidAddress(AddressError):
    """
    Address text that does not resolve to exactly eight groups.

    Attributes:
        text: The offending text (the whole address or one component).
    """

    kind: ErrorKind = ErrorKind.INVALID_ADDRESS

    def __init__(self, text: str, detail: Optional[str] = None):
        self.text = text
        label = self.kind.value
        message = f"{label[0].upper()}{label[1:]}: {text!r}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class InvalidIPv4Component(InvalidAddress):
    """Dotted-decimal part with a bad octet count, value or character."""

    kind = ErrorKind.INVALID_IPV4_COMPONENT


class InvalidIPv6Component(InvalidAddress):
    """A ``:`` group that is not 1-4 hexadecimal digits."""

    kind = ErrorKind.INVALID_IPV6_COMPONENT


class TooManyElisions(InvalidAddress):
    """More than one ``::`` in an IPv6 string."""

    kind = ErrorKind.TOO_MANY_ELISIONS

    def __init__(self, text: str):
        super().__init__(text, 'too many "::" in the IPv6 string')


class NotIPv4(AddressError):
    """
    Dotted-decimal rendering requested for an address outside the IPv4-mapped space.

    Attributes:
        address: The address the rendering was requested for.
    """

    kind = ErrorKind.NOT_IPV4

    def __init__(self, address: Any):
        self.address = address
        super().__init__(f'Not an IPv4 address: "{address.to_ipv6_string()}"')


class URLError(HttpCanonError, ValueError):
    """Base exception for HTTP URL errors."""


class InvalidUrl(URLError):
    """
    Text does not match the HTTP URL grammar.

    Attributes:
        text: The rejected input after percent normalization.
    """

    kind = ErrorKind.INVALID_URL

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid URL: {text!r}")


class InvalidPort(URLError):
    """
    Port outside ``[0, 65535]``.

    Attributes:
        port: The parsed (possibly negative) port number.
    """

    kind = ErrorKind.INVALID_PORT

    def __init__(self, port: int):
        self.port = port
        super().__init__(f"Invalid port: {port}")


class InvalidPath(URLError):
    """
    A ``..`` segment climbs above the root.

    Attributes:
        path: The raw path text that was being resolved.
    """

    kind = ErrorKind.INVALID_PATH

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Invalid path: {path!r}")


class AmbiguousQueryValue(URLError):
    """
    QueryParam given a value both inside the name and as an argument.

    Attributes:
        name: The name argument, containing ``=``.
        value: The separate value argument.
    """

    kind = ErrorKind.AMBIGUOUS_QUERY_VALUE

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value
        super().__init__(
            f"Value specified within name and value parameters: {name!r}, {value!r}"
        )
