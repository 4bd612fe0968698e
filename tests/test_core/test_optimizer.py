"""Tests for the speed optimizer."""

import math
import pytest

from eadrone.core.optimizer import (
    DEFAULT_ALTITUDE, InvalidModelParameters, OptimizationResult,
    find_optimal_speed_and_altitude
)


class TestFindOptimalSpeed:
    """Test the analytic operating point."""

    def test_reference_coefficients(self):
        result = find_optimal_speed_and_altitude(0.1, 0.05)
        assert result.optimal_velocity == pytest.approx(0.5)
        assert result.optimal_altitude == 100.0

    @pytest.mark.parametrize("a, b", [(0.1, 0.05), (2.0, 8.0), (0.5, 0.0), (1e-3, 3.7)])
    def test_closed_form(self, a, b):
        result = find_optimal_speed_and_altitude(a, b)
        assert result.optimal_velocity == pytest.approx(math.sqrt(b / (2 * a)))

    @pytest.mark.parametrize("b", [0.05, 0.0, -3.0, 1e6])
    def test_zero_velocity_coefficient(self, b):
        result = find_optimal_speed_and_altitude(0, b)
        assert result.optimal_velocity == 0.0
        assert result.optimal_altitude == DEFAULT_ALTITUDE

    @pytest.mark.parametrize("a, b", [(0.1, -0.0), (-0.1, 0.0)])
    def test_negative_zero_ratio_gives_positive_zero(self, a, b):
        result = find_optimal_speed_and_altitude(a, b)
        assert result.optimal_velocity == 0.0
        assert math.copysign(1.0, result.optimal_velocity) == 1.0

    def test_both_negative_is_valid(self):
        result = find_optimal_speed_and_altitude(-0.1, -0.05)
        assert result.optimal_velocity == pytest.approx(0.5)

    def test_opposite_signs_raise(self):
        with pytest.raises(InvalidModelParameters) as exc_info:
            find_optimal_speed_and_altitude(-0.1, 0.05)

        assert exc_info.value.a == -0.1
        assert exc_info.value.b == 0.05
        assert "negative" in str(exc_info.value)

    def test_invalid_parameters_is_value_error(self):
        with pytest.raises(ValueError):
            find_optimal_speed_and_altitude(0.1, -0.05)

    def test_result_unpacks(self):
        velocity, altitude = find_optimal_speed_and_altitude(0.1, 0.05)
        assert (velocity, altitude) == (pytest.approx(0.5), 100.0)
        assert isinstance(find_optimal_speed_and_altitude(1, 1), OptimizationResult)
