"""
Shared fixtures for engine and CLI tests.
"""

import pytest

from mansion.core.map import Room, build_map, default_map_spec


@pytest.fixture
def mansion_root() -> Room:
    """A freshly built default mansion."""
    return build_map(default_map_spec())
