"""src/httpcanon/net/__init__.py

IP address model.
"""

from .address import Address, compare, equals, is_ipv4, to_ipv4_string, to_ipv6_string

__all__ = ["Address", "compare", "equals", "is_ipv4", "to_ipv4_string", "to_ipv6_string"]
