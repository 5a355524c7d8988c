"""
Pytest configuration for ESC/POS buffer tests.

Provides builder fixtures with and without default settings.
"""

import pytest

from escpos_buffer import BufferBuilder


@pytest.fixture
def builder():
    """Builder that emits only explicitly requested commands."""
    return BufferBuilder(default_settings=False)


@pytest.fixture
def default_builder():
    """Builder bracketed with reset/initialize commands."""
    return BufferBuilder()
