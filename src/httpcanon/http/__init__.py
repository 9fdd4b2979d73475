"""src/httpcanon/http/__init__.py

HTTP URL grammar and query parameters.
"""

from .query import QueryParam, parse_query
from .url import DEFAULT_PORTS, URL

__all__ = ["URL", "QueryParam", "parse_query", "DEFAULT_PORTS"]
