"""src/httpcanon/__init__.py

httpcanon - canonical forms for IPv6/IPv4 addresses and HTTP(S) URLs.

httpcanon turns loosely formatted, human-entered addresses and URLs into one
canonical string suitable for comparison, deduplication, cache keys and
storage, and rejects malformed input with a typed error. It is built entirely
on Python's standard library.

Key Features:
    - 128-bit address model with IPv4-mapped detection
    - RFC 5952 style zero-run compression (``2001:db8::1``)
    - Percent-encoding normalization, path resolution and query sorting
    - Scheme and port defaulting for ``http`` and ``https``
    - Immutable, hashable, totally ordered value objects
    - Typed error hierarchy with a closed ``ErrorKind`` enumeration

Example:
    Addresses::

        from httpcanon import Address

        Address("::FFFF:10.0.0.1").to_ipv6_string()   # '::ffff:10.0.0.1'
        str(Address("fe80:0:0:0:202:b3ff:fe1e:8329"))  # 'fe80::202:b3ff:fe1e:8329'

    URLs::

        from httpcanon import URL

        url = URL("Foo.org/a/./c/../B//%64?b=c;a=")
        str(url)   # 'http://foo.org:80/a/B/d?a&b=c'
        url.port   # 80

    Batches::

        from httpcanon import normalize_urls

        for text, canonical, error in normalize_urls(["a.com", "a.com/.."]):
            ...
"""

import logging

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
from httpcanon.http.query import QueryParam
from httpcanon.http.url import URL
from httpcanon.net.address import Address
from httpcanon.normalize import normalize_address, normalize_url, normalize_urls
from httpcanon.utils.percent import normalize_percent_encoding
from httpcanon.utils.validators import validate_address, validate_url
from httpcanon.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Address",
    "URL",
    "QueryParam",
    "normalize_address",
    "normalize_url",
    "normalize_urls",
    "normalize_percent_encoding",
    "validate_address",
    "validate_url",
    "ErrorKind",
    "HttpCanonError",
    "AddressError",
    "MissingInput",
    "OutOfRange",
    "InvalidAddress",
    "InvalidIPv4Component",
    "InvalidIPv6Component",
    "TooManyElisions",
    "NotIPv4",
    "URLError",
    "InvalidUrl",
    "InvalidPort",
    "InvalidPath",
    "AmbiguousQueryValue",
    "__version__",
]
