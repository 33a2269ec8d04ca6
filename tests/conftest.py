"""Global pytest configuration for all tests."""

import pytest

from tests.helpers import FakeRenderer


@pytest.fixture
def output_dir(tmp_path):
    """Category directory a page job writes into."""
    path = tmp_path / "markdown" / "site" / "guides"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def renderer():
    """Empty fake renderer; tests register pages on it."""
    return FakeRenderer()
