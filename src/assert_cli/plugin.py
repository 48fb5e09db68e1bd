"""pytest plugin — exposes Assert as the ``assert_cli`` fixture."""

import pytest

from assert_cli.command import Assert


@pytest.fixture
def assert_cli() -> type[Assert]:
    """Return the Assert builder class.

        def test_version(assert_cli):
            assert_cli.command(["mytool", "--version"]).stdout().contains("1.0").unwrap()
    """
    return Assert
