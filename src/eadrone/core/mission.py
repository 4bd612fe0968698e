"""End-to-end energy estimate for a waypoint mission."""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .energy import EnergyCoefficients, energy_consumption
from .optimizer import find_optimal_speed_and_altitude
from .routing import segment_distances
from .waypoints import Waypoint
from ..utils.math_utils import calculate_route_distance

logger = logging.getLogger(__name__)

REFERENCE_WAYPOINTS: Tuple[Waypoint, ...] = (
    Waypoint(0.0, 0.0, 100.0),
    Waypoint(100.0, 100.0, 150.0),
    Waypoint(200.0, 50.0, 120.0),
    Waypoint(300.0, 200.0, 150.0),
)


@dataclass(frozen=True)
class MissionReport:
    """Results of a mission energy evaluation."""
    total_distance: float
    optimal_velocity: float
    optimal_altitude: float
    energy_per_unit: float
    total_energy: float
    segment_distances: Tuple[float, ...] = field(default=())

    def segment_energies(self) -> List[float]:
        """Energy spent on each segment at the optimal operating point."""
        return [self.energy_per_unit * d for d in self.segment_distances]


def evaluate_mission(waypoints: Sequence[Waypoint], coefficients: EnergyCoefficients) -> MissionReport:
    """Estimate distance and energy for flying through the waypoints in order.

    Args:
        waypoints: Ordered waypoints; fewer than two give zero distance
        coefficients: Energy model coefficients

    Returns:
        MissionReport with total distance, operating point and total energy

    Raises:
        InvalidModelParameters: If the coefficients admit no real optimal velocity
    """
    waypoints = tuple(waypoints)
    total_distance = calculate_route_distance(waypoints)
    logger.debug(f"Route through {len(waypoints)} waypoints: {total_distance:.3f} m")

    optimal_velocity, optimal_altitude = find_optimal_speed_and_altitude(coefficients.a, coefficients.b)
    logger.debug(f"Operating point: v={optimal_velocity} m/s, h={optimal_altitude} m")

    energy_per_unit = energy_consumption(optimal_velocity, optimal_altitude, coefficients)
    total_energy = energy_per_unit * total_distance

    return MissionReport(
        total_distance=total_distance,
        optimal_velocity=optimal_velocity,
        optimal_altitude=optimal_altitude,
        energy_per_unit=energy_per_unit,
        total_energy=total_energy,
        segment_distances=tuple(float(d) for d in segment_distances(waypoints)),
    )


def format_value(value: float) -> str:
    """Format a result with six significant digits."""
    return f"{value:g}"


def format_report(report: MissionReport) -> List[str]:
    """Render the four result lines of a mission report."""
    return [
        f"Total Distance: {format_value(report.total_distance)} meters",
        f"Optimal Velocity: {format_value(report.optimal_velocity)} m/s",
        f"Optimal Altitude: {format_value(report.optimal_altitude)} meters",
        f"Estimated Total Energy: {format_value(report.total_energy)} units",
    ]


def format_breakdown(report: MissionReport) -> List[str]:
    """Render one line per route segment with its distance and energy."""
    lines = []
    for i, (distance, energy) in enumerate(zip(report.segment_distances, report.segment_energies()), 1):
        lines.append(f"Segment {i}: {format_value(distance)} meters, {format_value(energy)} units")
    return lines
