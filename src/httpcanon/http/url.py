"""src/httpcanon/http/url.py

HTTP/HTTPS URL parser and canonicalizer.

Parsing runs in three passes: percent-encoding normalization of the whole
input, one anchored regular expression for the grammar, then per-field
normalization (scheme and port defaults, IP-literal hosts, path resolution,
query sorting).

Example::

    >>> str(URL("Foo.org/a/./c/../B//%64/CR%9a?b=c;a=;C=%64#"))
    'http://foo.org:80/a/B/d/CR%9A?C=d&a&b=c'
"""

import logging
import re
from typing import Dict, List, Optional, Tuple, Union

from httpcanon.exceptions import InvalidPath, InvalidPort, InvalidUrl
from httpcanon.http.query import QueryParam, parse_query
from httpcanon.net.address import Address
from httpcanon.utils.percent import normalize_percent_encoding

__all__ = ["URL", "URLLike", "DEFAULT_PORTS", "compare"]

logger = logging.getLogger(__name__)

DEFAULT_PORTS: Dict[str, int] = {"http": 80, "https": 443}

MAX_PORT = 65535

_PCT = r"%[0-9a-f]{2}"

_GRAMMAR = re.compile(
    r"^\s*"
    r"(?:(http|https)://)?"  # 1 scheme
    r"(?:((?:\d{1,3}\.){3}\d{1,3})"  # 2 ipv4
    r"|\[([:.0-9a-f]+)\]"  # 3 ipv6 literal
    r"|((?:\w\.|\w[\w-]*\w\.)*(?:\w|\w[\w-]*\w)))"  # 4 hostname
    r"(?::(-?\d{1,10}))?"  # 5 port
    r"(?:/((?:" + _PCT + r"|[-\w.!~*'():&=+$,/])*))?"  # 6 path
    r"(?:\?((?:" + _PCT + r"|[-\w.!~*'();&=+$,/?:@\[\]])*))?"  # 7 query
    r"(?:#((?:" + _PCT + r"|[-\w.!~*'();&=+$,/?:@\[\]])*))?"  # 8 fragment
    r"\s*$",
    re.IGNORECASE | re.ASCII,
)

URLLike = Union["URL", str]


class URL:
    """
    Canonical HTTP or HTTPS URL.

    All fields are read-only. Two URLs are equal, hash alike and sort by
    their canonical string (``str(url)``).

    Attributes:
        scheme: ``"http"`` or ``"https"``.
        host: Lowercase hostname, or the canonical text of an IP literal.
        ip_address: The :class:`Address` for IP-literal hosts, else None.
        port: Explicit port, or 80/443 from the scheme.
        path: Resolved, non-empty path segments.
        is_dir: True when the path is empty or its raw text ended in ``/``.
        query: Parameters sorted by name then value.
        fragment: Text after ``#``, or None.
    """

    # pylint: disable=too-many-instance-attributes
    __slots__ = (
        "_scheme",
        "_host",
        "_ip_address",
        "_port",
        "_path",
        "_is_dir",
        "_query",
        "_fragment",
        "_text",
    )

    def __init__(self, url: URLLike) -> None:
        """
        Parse and canonicalize a URL.

        Args:
            url: URL text, or an existing URL to copy.

        Raises:
            InvalidUrl: Text does not match the URL grammar.
            InvalidPort: Port outside ``[0, 65535]``.
            InvalidPath: A ``..`` segment climbs above the root.
            AddressError: Malformed IPv4 or bracketed IPv6 host.
        """
        self._text: Optional[str] = None
        if isinstance(url, URL):
            self._scheme: str = url._scheme
            self._host: str = url._host
            self._ip_address: Optional[Address] = url._ip_address
            self._port: int = url._port
            self._path: Tuple[str, ...] = url._path
            self._is_dir: bool = url._is_dir
            self._query: Tuple[QueryParam, ...] = url._query
            self._fragment: Optional[str] = url._fragment
            return

        text = normalize_percent_encoding(str(url))
        parts = _GRAMMAR.match(text)
        if parts is None:
            logger.debug("Rejected URL %r: does not match grammar", text)
            raise InvalidUrl(text)

        scheme, ipv4, ipv6, hostname, port, path, query, fragment = parts.groups()

        self._scheme = scheme.lower() if scheme else "http"

        literal = ipv4 or ipv6
        if literal:
            self._ip_address = Address(literal)
            self._host = str(self._ip_address)
        else:
            self._ip_address = None
            self._host = hostname.lower()

        if port:
            self._port = int(port)
            if self._port < 0 or self._port > MAX_PORT:
                logger.debug("Rejected URL %r: port %d", text, self._port)
                raise InvalidPort(self._port)
        else:
            self._port = DEFAULT_PORTS[self._scheme]

        raw_path = path or ""
        self._path = _resolve_path(raw_path)
        self._is_dir = not self._path or raw_path.endswith("/")

        self._query = parse_query(query) if query else ()
        self._fragment = fragment or None

    @classmethod
    def coerce(cls, url: URLLike) -> "URL":
        """Return ``url`` itself if it is already a URL, else parse it."""
        if isinstance(url, URL):
            return url
        return cls(url)

    @property
    def scheme(self) -> str:
        return self._scheme

    @property
    def host(self) -> str:
        return self._host

    @property
    def ip_address(self) -> Optional[Address]:
        return self._ip_address

    @property
    def port(self) -> int:
        return self._port

    @property
    def is_default_port(self) -> bool:
        """Whether the port is the scheme's default."""
        return self._port == DEFAULT_PORTS[self._scheme]

    @property
    def path(self) -> Tuple[str, ...]:
        return self._path

    @property
    def is_dir(self) -> bool:
        return self._is_dir

    @property
    def path_string(self) -> str:
        """Canonical path text: ``/a/b``, ``/a/b/`` or ``/``."""
        text = ""
        if self._path:
            text = "/" + "/".join(self._path)
        if self._is_dir:
            text += "/"
        return text

    @property
    def query(self) -> Tuple[QueryParam, ...]:
        return self._query

    @property
    def fragment(self) -> Optional[str]:
        return self._fragment

    def compare(self, other: URLLike) -> int:
        """Compare canonical strings with ``other``, returning -1, 0 or 1."""
        return compare(self, other)

    def __str__(self) -> str:
        if self._text is None:
            host = self._host
            if self._ip_address is not None and not self._ip_address.is_ipv4():
                host = f"[{host}]"
            parts: List[str] = [f"{self._scheme}://{host}:{self._port}", self.path_string]
            if self._query:
                parts.append("?" + "&".join(str(param) for param in self._query))
            if self._fragment:
                parts.append("#" + self._fragment)
            self._text = "".join(parts)
        return self._text

    def __repr__(self) -> str:
        return f"URL({str(self)!r})"

    def __hash__(self) -> int:
        return hash(str(self))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URL):
            return NotImplemented
        return str(self) == str(other)

    def __lt__(self, other: "URL") -> bool:
        if not isinstance(other, URL):
            return NotImplemented
        return str(self) < str(other)

    def __le__(self, other: "URL") -> bool:
        if not isinstance(other, URL):
            return NotImplemented
        return str(self) <= str(other)

    def __gt__(self, other: "URL") -> bool:
        if not isinstance(other, URL):
            return NotImplemented
        return str(self) > str(other)

    def __ge__(self, other: "URL") -> bool:
        if not isinstance(other, URL):
            return NotImplemented
        return str(self) >= str(other)


def _resolve_path(raw: str) -> Tuple[str, ...]:
    """
    Resolve ``.``, ``..`` and empty segments.

    Raises:
        InvalidPath: A ``..`` has nothing left to remove.
    """
    stack: List[str] = []
    for segment in raw.split("/"):
        if not segment or segment == ".":
            continue
        if segment == "..":
            if not stack:
                logger.debug("Rejected path %r: climbs above root", raw)
                raise InvalidPath(raw)
            stack.pop()
        else:
            stack.append(segment)
    return tuple(stack)


def compare(first: URLLike, second: URLLike) -> int:
    """
    Compare two URLs by canonical string.

    Strings are parsed first; parse errors propagate.

    Returns:
        -1, 0 or 1.
    """
    a = str(URL.coerce(first))
    b = str(URL.coerce(second))
    return (a > b) - (a < b)
