# tests/conftest.py

import pytest

import bscal


@pytest.fixture
def restore_engine():
    """Put the packaged snapshot back after a test swaps tables."""
    eng = bscal.get_engine()
    yield eng
    bscal.set_engine(eng)


@pytest.fixture
def table():
    return bscal.get_engine().table
