import pytest

from httpcanon.net.address import Address


@pytest.fixture
def loopback():
    """Fixture providing the IPv6 loopback address ``::1``."""
    return Address(1)


@pytest.fixture
def sample_addresses():
    """Fixture providing address texts in assorted notations."""
    return [
        "::1",
        "192.168.0.1",
        "2001:0db8:85a3:0000:0000:8a2e:0370:7334",
        "fe80:0:0:0:202:b3ff:fe1e:8329",
        "fe80::202:b3ff:fe1e:8329",
        "::FFFF:10.0.0.1",
        "::FFFF:a00:1",
        "0::FFFF:10.0.0.1",
        "0000::0:FFFF:a00:1",
        "fe80:0:0:0:202:0:0:8329",
        "fe80:0:0:202:0:0:0:8329",
        "fe80:0:0:1:202:0:0:8329",
    ]
