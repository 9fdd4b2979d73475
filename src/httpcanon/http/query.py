"""src/httpcanon/http/query.py

Query string parameters.
"""

import re
from typing import List, Optional, Tuple, Union

from httpcanon.exceptions import AmbiguousQueryValue

__all__ = ["QueryParam", "parse_query"]

_SEPARATED = re.compile(r"[^&;]+")


class QueryParam:
    """
    A single ``name`` or ``name=value`` query parameter.

    Attributes:
        name: Text before the first ``=``.
        value: Text after the first ``=``, or None when there was no ``=``.
    """

    __slots__ = ("_name", "_value")

    def __init__(self, name: str, value: Optional[str] = None) -> None:
        """
        Initialize a query parameter.

        Args:
            name: Parameter name, or a whole ``name=value`` token.
            value: Parameter value, only when ``name`` holds no ``=``.

        Raises:
            AmbiguousQueryValue: ``name`` contains ``=`` and ``value`` is given.
        """
        if "=" in name:
            if value is not None:
                raise AmbiguousQueryValue(name, value)
            name, value = name.split("=", 1)
        self._name = name
        self._value = value

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> Optional[str]:
        return self._value

    def sort_key(self) -> Tuple[str, str]:
        """Canonical ordering key: name, then value (missing value as ``""``)."""
        return (self._name, self._value or "")

    @staticmethod
    def compare(first: Union["QueryParam", str], second: Union["QueryParam", str]) -> int:
        """
        Compare two parameters by name, then by value.

        Strings are parsed as ``name[=value]`` tokens first.

        Returns:
            -1, 0 or 1.
        """
        if not isinstance(first, QueryParam):
            first = QueryParam(str(first))
        if not isinstance(second, QueryParam):
            second = QueryParam(str(second))
        a = first.sort_key()
        b = second.sort_key()
        return (a > b) - (a < b)

    def __str__(self) -> str:
        if self._value:
            return f"{self._name}={self._value}"
        return self._name

    def __repr__(self) -> str:
        return f"QueryParam({self._name!r}, {self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParam):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def __lt__(self, other: "QueryParam") -> bool:
        if not isinstance(other, QueryParam):
            return NotImplemented
        return self.sort_key() < other.sort_key()


def parse_query(query: str) -> Tuple[QueryParam, ...]:
    """
    Split a query string on ``&`` or ``;`` and sort the parameters.

    Empty tokens are dropped. The sort is stable, so equal parameters keep
    their input order.
    """
    params: List[QueryParam] = [QueryParam(token) for token in _SEPARATED.findall(query)]
    params.sort(key=QueryParam.sort_key)
    return tuple(params)
