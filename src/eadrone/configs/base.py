"""Mission scenario configuration."""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from ..core.energy import EnergyCoefficients, REFERENCE_COEFFICIENTS
from ..core.mission import REFERENCE_WAYPOINTS
from ..core.waypoints import Waypoint
from ..data.loaders import waypoint_from_raw
from ..data.validators import validate_mission_data


@dataclass
class MissionConfig:
    """A named waypoint route together with its energy coefficients."""
    name: str
    description: str
    waypoints: Tuple[Waypoint, ...] = field(default_factory=tuple)
    coefficients: EnergyCoefficients = REFERENCE_COEFFICIENTS

    def get_description(self) -> str:
        return self.description

    def with_coefficients(self, a: float = None, b: float = None, c: float = None) -> 'MissionConfig':
        """Return a copy with any given coefficient replaced."""
        coefficients = EnergyCoefficients(
            a=self.coefficients.a if a is None else a,
            b=self.coefficients.b if b is None else b,
            c=self.coefficients.c if c is None else c,
        )
        return MissionConfig(self.name, self.description, self.waypoints, coefficients)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], default_name: str = 'custom') -> 'MissionConfig':
        """Build a configuration from parsed JSON data.

        Raises:
            ValueError: If the data does not describe a valid mission
        """
        is_valid, errors = validate_mission_data(data)
        if not is_valid:
            raise ValueError("Invalid mission configuration:\n  " + "\n  ".join(errors))

        return cls(
            name=data.get('name', default_name),
            description=data.get('description', ''),
            waypoints=tuple(waypoint_from_raw(wp) for wp in data['waypoints']),
            coefficients=EnergyCoefficients.from_dict(data['coefficients']),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'description': self.description,
            'waypoints': [[wp.x, wp.y, wp.z] for wp in self.waypoints],
            'coefficients': self.coefficients.to_dict(),
        }


def reference_config() -> MissionConfig:
    """Four-waypoint reference route with a=0.1, b=0.05, c=10."""
    return MissionConfig(
        name='reference',
        description='Four-waypoint reference route with a=0.1, b=0.05, c=10',
        waypoints=REFERENCE_WAYPOINTS,
        coefficients=REFERENCE_COEFFICIENTS,
    )
