"""Pytest fixtures for tests."""

import json
from unittest.mock import Mock

import pytest

from gridsurface.definitions import DefinitionRegistry
from gridsurface.definitions.registry import DEFAULT_DEFINITIONS_PATH


@pytest.fixture
def registry():
    """Create a DefinitionRegistry from the bundled definitions."""
    return DefinitionRegistry()


@pytest.fixture
def launchpad_x(registry):
    """Launchpad X definition."""
    return registry.get("Launchpad X")


@pytest.fixture
def launchpad_mini(registry):
    """Launchpad Mini MK3 definition."""
    return registry.get("Launchpad Mini MK3")


@pytest.fixture
def mock_output():
    """Create mock MIDI output."""
    mock = Mock()
    mock.send = Mock(return_value=True)
    return mock


@pytest.fixture
def bundled_definitions():
    """Parsed copy of the bundled definitions file, safe to modify."""
    return json.loads(DEFAULT_DEFINITIONS_PATH.read_text())


@pytest.fixture
def write_definitions(tmp_path):
    """Write a definitions dict (or raw text) to a temporary file and return its path."""

    def _write(content, name="definitions.json"):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content)
        else:
            path.write_text(json.dumps(content))
        return path

    return _write
