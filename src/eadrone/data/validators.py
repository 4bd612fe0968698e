"""Data validation utilities."""

import math
from typing import Any, Dict, List, Tuple


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    try:
        float(value)
    except (ValueError, TypeError):
        return False
    return True


def validate_waypoint(waypoint: Any) -> Tuple[bool, List[str]]:
    """Validate a waypoint given as [x, y, z] list or {'x', 'y', 'z'} dict.

    Args:
        waypoint: Raw waypoint data

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    if isinstance(waypoint, dict):
        values = []
        for field in ['x', 'y', 'z']:
            if field not in waypoint:
                errors.append(f"Missing coordinate field: {field}")
            else:
                values.append((field, waypoint[field]))
    elif isinstance(waypoint, (list, tuple)):
        if len(waypoint) != 3:
            errors.append(f"Waypoint must have 3 coordinates, got {len(waypoint)}")
            return False, errors
        values = list(zip(['x', 'y', 'z'], waypoint))
    else:
        errors.append("Waypoint must be a list [x, y, z] or a dictionary with x, y, z")
        return False, errors

    for field, value in values:
        if not _is_number(value):
            errors.append(f"Coordinate {field} must be numeric, got: {value}")
        elif not math.isfinite(float(value)):
            errors.append(f"Coordinate {field} must be finite, got: {value}")

    return len(errors) == 0, errors


def validate_coefficients(coefficients: Any) -> Tuple[bool, List[str]]:
    """Validate energy model coefficients {'a', 'b', 'c'}.

    Only structure is checked; sign and range are left to the model.

    Args:
        coefficients: Raw coefficient data

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    if not isinstance(coefficients, dict):
        errors.append("Coefficients must be a dictionary")
        return False, errors

    for field in ['a', 'b', 'c']:
        if field not in coefficients:
            errors.append(f"Missing coefficient: {field}")
        elif not _is_number(coefficients[field]):
            errors.append(f"Coefficient {field} must be numeric, got: {coefficients[field]}")

    return len(errors) == 0, errors


def validate_mission_data(mission: Dict[str, Any]) -> Tuple[bool, List[str]]:
    """Validate complete mission configuration data.

    Args:
        mission: Mission data dictionary

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    if not isinstance(mission, dict):
        return False, ["Mission data must be a dictionary"]

    if 'name' in mission and (not isinstance(mission['name'], str) or not mission['name'].strip()):
        errors.append("Mission name must be a non-empty string")

    if 'waypoints' not in mission:
        errors.append("Missing waypoints")
    elif not isinstance(mission['waypoints'], list):
        errors.append("Waypoints must be a list")
    else:
        for i, waypoint in enumerate(mission['waypoints']):
            waypoint_valid, waypoint_errors = validate_waypoint(waypoint)
            if not waypoint_valid:
                errors.extend([f"Waypoint {i}: {error}" for error in waypoint_errors])

    if 'coefficients' not in mission:
        errors.append("Missing coefficients")
    else:
        coeff_valid, coeff_errors = validate_coefficients(mission['coefficients'])
        errors.extend(coeff_errors)

    return len(errors) == 0, errors
