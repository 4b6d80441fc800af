__all__ = [
    "Body",
    "Orbit",
    "PhysicalProperties",
    "SolarSystem",
    "Simulation",
    "InvalidTimestep",
    "NumericalDivergence",
    "ConfigurationError",
    "OrreryError",
]

from .base import Body, Orbit, PhysicalProperties, SolarSystem
from .errors import (
    ConfigurationError,
    InvalidTimestep,
    NumericalDivergence,
    OrreryError,
)
from .simulation import Simulation
