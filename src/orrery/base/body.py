from enum import Enum


class Body(Enum):
    """
    The celestial bodies modeled by the engine. The set is closed, every
    per-body table is keyed by all of its members.
    """

    SUN = "Sun"
    MERCURY = "Mercury"
    VENUS = "Venus"
    EARTH = "Earth"
    MOON = "Moon"
    MARS = "Mars"
    JUPITER = "Jupiter"
    SATURN = "Saturn"
    URANUS = "Uranus"
    NEPTUNE = "Neptune"

    def __repr__(self):
        return f"{type(self).__name__}.{self.name}"

    @property
    def is_star(self):
        return self is Body.SUN

    @classmethod
    def from_name(cls, name):
        """
        Look a body up by its catalog name, case insensitive
        """
        return cls[name.strip().upper()]
