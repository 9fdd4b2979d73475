"""src/httpcanon/utils/__init__.py"""

from .percent import UNRESERVED, normalize_percent_encoding

__all__ = ["UNRESERVED", "normalize_percent_encoding"]
