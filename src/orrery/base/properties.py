import astropy.units as u
import pandas as pd

from orrery.base.body import Body


class PhysicalProperties:
    """
    Static physical attributes of a body. Read-only once built.
    """

    def __init__(self, body, mass, radius, luminosity, apsis) -> None:
        assert luminosity >= 0 * u.W, f"{body.value} has negative luminosity"
        assert (luminosity > 0 * u.W) == body.is_star, (
            f"Only the star may be luminous, {body.value} has luminosity "
            f"{luminosity}"
        )
        self._body = body
        self._mass = mass.to(u.kg)
        self._radius = radius.to(u.m)
        self._luminosity = luminosity.to(u.W)
        self._apsis = apsis.to(u.m)

    def __repr__(self):
        p_df = pd.DataFrame(
            {
                "mass": [self._mass.value],
                "radius": [self._radius.value],
                "luminosity": [self._luminosity.value],
                "apsis": [self._apsis.value],
            },
            index=[self._body.value],
        )
        return f"{type(self).__name__} object\n{p_df}"

    @property
    def body(self):
        return self._body

    @property
    def mass(self):
        return self._mass

    @property
    def radius(self):
        return self._radius

    @property
    def luminosity(self):
        return self._luminosity

    @property
    def apsis(self):
        """
        Largest distance from the body's own focus, a(1+e). Zero for the
        star, which has no focus.
        """
        return self._apsis


def build_properties(physical, orbits):
    """
    Build the property table for every body
    Args:
        physical (dict):
            Body -> dict with "mass", "radius" and "luminosity" Quantities
        orbits (dict):
            Body -> Orbit for every non-stellar body
    Returns:
        properties (dict):
            Body -> PhysicalProperties, covering every Body
    """
    assert set(physical) == set(Body), (
        f"Physical catalog is missing {set(Body) - set(physical)}"
    )
    properties = {}
    for body in Body:
        if body.is_star:
            apsis = 0 * u.m
        else:
            apsis = orbits[body].apsis
        properties[body] = PhysicalProperties(
            body,
            physical[body]["mass"],
            physical[body]["radius"],
            physical[body]["luminosity"],
            apsis,
        )
    return properties
