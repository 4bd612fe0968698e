"""Tests for data validation."""

import pytest

from eadrone.data.validators import validate_coefficients, validate_mission_data, validate_waypoint


class TestValidateWaypoint:
    """Test waypoint validation."""

    @pytest.mark.parametrize("waypoint", [
        [0, 0, 100],
        (1.5, -2, 3),
        {'x': 1, 'y': 2, 'z': 3},
        ['1', '2', '3'],
    ])
    def test_valid(self, waypoint):
        is_valid, errors = validate_waypoint(waypoint)
        assert is_valid
        assert errors == []

    def test_wrong_length(self):
        is_valid, errors = validate_waypoint([1, 2])
        assert not is_valid
        assert "3 coordinates" in errors[0]

    def test_missing_field(self):
        is_valid, errors = validate_waypoint({'x': 1, 'y': 2})
        assert not is_valid
        assert "Missing coordinate field: z" in errors

    def test_non_numeric(self):
        is_valid, errors = validate_waypoint([1, 'north', 3])
        assert not is_valid
        assert "Coordinate y must be numeric" in errors[0]

    def test_non_finite(self):
        is_valid, errors = validate_waypoint([1, 2, float('inf')])
        assert not is_valid
        assert "finite" in errors[0]

    def test_boolean_rejected(self):
        is_valid, _ = validate_waypoint([True, 2, 3])
        assert not is_valid

    def test_wrong_type(self):
        is_valid, errors = validate_waypoint("0,0,0")
        assert not is_valid


class TestValidateCoefficients:
    """Test coefficient validation."""

    def test_valid_any_sign(self):
        assert validate_coefficients({'a': -0.1, 'b': 0.05, 'c': 0}) == (True, [])

    def test_missing(self):
        is_valid, errors = validate_coefficients({'a': 0.1})
        assert not is_valid
        assert "Missing coefficient: b" in errors
        assert "Missing coefficient: c" in errors

    def test_not_a_dict(self):
        is_valid, errors = validate_coefficients([0.1, 0.05, 10])
        assert not is_valid


class TestValidateMissionData:
    """Test full mission validation."""

    def test_valid(self, sample_mission_data):
        assert validate_mission_data(sample_mission_data) == (True, [])

    def test_empty_waypoint_list_is_valid(self):
        is_valid, _ = validate_mission_data({'waypoints': [], 'coefficients': {'a': 1, 'b': 1, 'c': 1}})
        assert is_valid

    def test_reports_waypoint_index(self, sample_mission_data):
        sample_mission_data['waypoints'].append([1, 2])
        is_valid, errors = validate_mission_data(sample_mission_data)
        assert not is_valid
        assert errors[0].startswith("Waypoint 3:")

    def test_missing_sections(self):
        is_valid, errors = validate_mission_data({'name': 'x'})
        assert not is_valid
        assert "Missing waypoints" in errors
        assert "Missing coefficients" in errors

    def test_blank_name(self, sample_mission_data):
        sample_mission_data['name'] = '  '
        is_valid, errors = validate_mission_data(sample_mission_data)
        assert not is_valid
