from unittest.mock import MagicMock

import pytest

from tests.fakes import FakeElement


@pytest.fixture
def root_element():
    return FakeElement("#root")


@pytest.fixture
def mock_factory():
    factory = MagicMock()
    factory.create.return_value = MagicMock(name="render_block")
    return factory


@pytest.fixture
def mock_page():
    """Playwright Page z zamockowanymi lokatorami."""
    return MagicMock(name="page")
