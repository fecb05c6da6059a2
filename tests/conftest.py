"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from chompbot.config import BOARD_COLS, BOARD_ROWS
from chompbot.engine import get_position_table, skyline_to_board, Skyline


@pytest.fixture(scope="session")
def table():
    """Process-wide classification table."""
    return get_position_table()


@pytest.fixture
def full_board():
    return np.ones((BOARD_ROWS, BOARD_COLS), dtype=np.int8)


@pytest.fixture
def glass_only_board():
    return skyline_to_board(Skyline.glass_only())


@pytest.fixture
def empty_board():
    return np.zeros((BOARD_ROWS, BOARD_COLS), dtype=np.int8)


@pytest.fixture
def last_column_board():
    """Only the rightmost column left (wire masks 0xfe in every row)."""
    return skyline_to_board(Skyline((1, 1, 1, 1, 1)))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit test")
    config.addinivalue_line("markers", "integration: Integration test")
    config.addinivalue_line("markers", "slow: Slow test")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add automatic markers."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)

        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
