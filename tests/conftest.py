import astropy.units as u
import numpy as np
import pytest
from astropy.time import Time

from orrery import Body, SolarSystem
from orrery.base.orbit import Orbit

# 2023-01-01T00:00:00 UTC
EPOCH_JD = 2_459_945.5

HELIOCENTRIC = [
    Body.MERCURY,
    Body.VENUS,
    Body.EARTH,
    Body.MARS,
    Body.JUPITER,
    Body.SATURN,
    Body.URANUS,
    Body.NEPTUNE,
]


@pytest.fixture
def epoch():
    return Time(EPOCH_JD, format="jd")


@pytest.fixture
def solar_system(epoch):
    return SolarSystem(epoch)


def make_orbit(e=0.0, a=1 * u.AU, inc=0 * u.deg, W=0 * u.deg, w=0 * u.deg, M0=0 * u.deg):
    orbit_dict = {
        "focus": Body.SUN,
        "t0": Time(EPOCH_JD, format="jd"),
        "a": a,
        "e": e,
        "inc": inc,
        "W": W,
        "w": w,
        "M0": M0,
    }
    return Orbit(orbit_dict, 5.9722e24 * u.kg, 1.988409870698051e30 * u.kg)


@pytest.fixture
def orbit_factory():
    return make_orbit


def norm(vec):
    return np.linalg.norm(vec.value) * vec.unit
