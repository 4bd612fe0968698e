"""Analytic operating point for the energy model."""

import logging
import math
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)

# Representative operating altitude; the model does not optimize altitude.
DEFAULT_ALTITUDE = 100.0


class InvalidModelParameters(ValueError):
    """Raised when a and b have opposite signs, so b / (2a) is negative."""

    def __init__(self, a: float, b: float):
        self.a = a
        self.b = b
        super().__init__(
            f"Invalid model parameters a={a}, b={b}: b / (2a) = {b / (2 * a)} is negative, "
            f"no real optimal velocity exists"
        )


@dataclass(frozen=True)
class OptimizationResult:
    """Operating point returned by the optimizer."""
    optimal_velocity: float
    optimal_altitude: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.optimal_velocity, self.optimal_altitude))


def find_optimal_speed_and_altitude(a: float, b: float) -> OptimizationResult:
    """Find the velocity that balances the quadratic speed term against b.

    Solves ``d/dv (a * v^2) = 2 * a * v = b`` as ``v = sqrt(b / (2a))``.
    The stationarity condition mixes the velocity derivative with the
    altitude coefficient; the formula is kept as-is for compatibility
    with existing energy estimates. Altitude is fixed at
    ``DEFAULT_ALTITUDE``.

    Args:
        a: Velocity coefficient of the energy model
        b: Altitude coefficient of the energy model

    Returns:
        OptimizationResult with velocity 0.0 when ``a == 0``

    Raises:
        InvalidModelParameters: If ``b / (2a)`` is negative
    """
    optimal_velocity = 0.0

    if a != 0:
        ratio = b / (2 * a)
        if ratio < 0:
            raise InvalidModelParameters(a, b)
        # +0.0 folds a -0.0 ratio to 0.0
        optimal_velocity = math.sqrt(ratio) + 0.0
    else:
        logger.debug("Velocity coefficient is zero, using zero optimal velocity")

    return OptimizationResult(optimal_velocity, DEFAULT_ALTITUDE)
