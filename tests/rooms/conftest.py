"""
Shared fixtures for map tests.
"""

import pytest


@pytest.fixture
def map_yaml(tmp_path):
    """Write a YAML map file and return its path."""

    def _write(text: str) -> str:
        path = tmp_path / "map.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write
