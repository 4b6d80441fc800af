__all__ = ["Body", "Orbit", "PhysicalProperties", "SolarSystem"]

from .body import Body
from .orbit import Orbit
from .properties import PhysicalProperties
from .system import SolarSystem
