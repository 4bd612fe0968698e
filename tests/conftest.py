"""Pytest configuration and shared fixtures."""

import json
import math
import pytest

from eadrone.core.energy import EnergyCoefficients
from eadrone.core.waypoints import Waypoint


@pytest.fixture
def reference_waypoints():
    """Four-waypoint reference route."""
    return [
        Waypoint(0, 0, 100),
        Waypoint(100, 100, 150),
        Waypoint(200, 50, 120),
        Waypoint(300, 200, 150),
    ]


@pytest.fixture
def reference_coefficients():
    """Reference energy coefficients."""
    return EnergyCoefficients(a=0.1, b=0.05, c=10.0)


@pytest.fixture
def reference_distance():
    """Reference route length computed from the segment formula."""
    return (
        math.sqrt(100**2 + 100**2 + 50**2)
        + math.sqrt(100**2 + 50**2 + 30**2)
        + math.sqrt(100**2 + 150**2 + 30**2)
    )


@pytest.fixture
def sample_mission_data():
    """Mission configuration as stored in a JSON file."""
    return {
        'name': 'survey',
        'description': 'Short survey loop',
        'waypoints': [
            [0, 0, 50],
            {'x': 30, 'y': 40, 'z': 50},
            [30, 40, 62],
        ],
        'coefficients': {'a': 0.2, 'b': 0.1, 'c': 5},
    }


@pytest.fixture
def sample_mission_file(tmp_path, sample_mission_data):
    """Create a temporary JSON mission file."""
    file_path = tmp_path / "survey.json"
    file_path.write_text(json.dumps(sample_mission_data))
    return file_path


@pytest.fixture
def sample_route_csv(tmp_path):
    """Create a temporary CSV waypoint file."""
    file_path = tmp_path / "route.csv"
    file_path.write_text("x,y,z\n0,0,0\n3,4,0\n3,4,12\n")
    return file_path
