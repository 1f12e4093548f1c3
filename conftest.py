"""Shared pytest fixtures."""
import logging

import pytest

from orbit_core.pkgs.geometry import OrbitConfiguration


@pytest.fixture
def make_orbit():
    """Factory for orbit configurations with keyword geometry."""
    def _make(**fields):
        return OrbitConfiguration(**fields)
    return _make


@pytest.fixture
def square_orbit(make_orbit):
    """Unit circle sampled at the four cardinal points, clockwise."""
    return make_orbit(major_width=1, minor_width=1, step_count=4, clockwise=True)


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
