"""tests/unit/test_version.py"""

import servaddr


def test_version():
    """Verify that the version string is present and valid."""
    assert isinstance(servaddr.__version__, str)
    assert len(servaddr.__version__) > 0
    # Basic semver-ish check
    assert servaddr.__version__.count(".") >= 1
