"""tests/unit/test_version.py"""

import httpcanon


def test_version():
    """Verify that the version string is present and valid."""
    assert isinstance(httpcanon.__version__, str)
    assert len(httpcanon.__version__) > 0
    # Basic semver-ish check
    assert httpcanon.__version__.count(".") >= 1
