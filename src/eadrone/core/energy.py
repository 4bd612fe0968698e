"""Closed-form energy model.

Energy per unit distance is modeled as::

    E = a * v^2 + b * h + c

where ``v`` is velocity, ``h`` altitude and ``a``, ``b``, ``c`` are free
model coefficients (not physical constants).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnergyCoefficients:
    """Coefficients of the energy model.

    Attributes:
        a: Scales the square of velocity
        b: Scales altitude
        c: Constant baseline cost, independent of motion
    """
    a: float
    b: float
    c: float

    @classmethod
    def from_dict(cls, data: dict) -> 'EnergyCoefficients':
        return cls(a=float(data['a']), b=float(data['b']), c=float(data['c']))

    def to_dict(self) -> dict:
        return {'a': self.a, 'b': self.b, 'c': self.c}


REFERENCE_COEFFICIENTS = EnergyCoefficients(a=0.1, b=0.05, c=10.0)


def energy_consumption(velocity: float, altitude: float, coefficients: EnergyCoefficients) -> float:
    """Evaluate energy per unit distance at a velocity and altitude.

    Negative velocity or altitude is accepted and evaluated with the
    same formula.

    Args:
        velocity: Speed in m/s
        altitude: Altitude in meters
        coefficients: Model coefficients (a, b, c)

    Returns:
        ``a * velocity**2 + b * altitude + c``
    """
    return coefficients.a * velocity ** 2 + coefficients.b * altitude + coefficients.c
