#!/usr/bin/env python3
"""
Basic mission example for eadrone.

This example demonstrates how to:
1. Load a route from a waypoint file
2. Evaluate distance and energy
3. Inspect per-segment metrics
"""

from pathlib import Path

from eadrone.core.energy import EnergyCoefficients
from eadrone.core.mission import evaluate_mission, format_report, format_breakdown
from eadrone.core.routing import calculate_route_metrics
from eadrone.data.loaders import load_waypoints


def main():
    # Example waypoint file (CSV with x, y, z columns)
    input_file = Path("sample_route.csv")

    if not input_file.exists():
        print(f"Input file {input_file} not found")
        print("Please create a CSV file with columns: x, y, z")
        return

    waypoints = load_waypoints(input_file)
    coefficients = EnergyCoefficients(a=0.1, b=0.05, c=10.0)

    report = evaluate_mission(waypoints, coefficients)
    for line in format_report(report) + format_breakdown(report):
        print(line)

    metrics = calculate_route_metrics(waypoints)
    print(f"\nRoute efficiency: {metrics['route_efficiency']:.2f}")
    print(f"Average segment: {metrics['avg_segment_length']:.1f} m")


if __name__ == "__main__":
    main()
