from importlib.resources import files

import astropy.units as u
import numpy as np
import pandas as pd
from astropy.time import Time

from orrery.base.body import Body


def orbit_dict_from_row(row):
    """
    Convert one row of the element table into the attributes of an Orbit.

    The table lists the longitude of perihelion (varpi = W + w) and the mean
    longitude (L = varpi + M) at t0, which are converted to the argument of
    periapsis and the mean anomaly at t0.
    """
    W = row["W_deg"] * u.deg
    varpi = row["varpi_deg"] * u.deg
    L = row["L_deg"] * u.deg
    return {
        "focus": Body.from_name(row["focus"]),
        "t0": Time(row["t0_jd"], format="jd", scale="tt"),
        "a": row["a"] * u.Unit(row["a_unit"]),
        "e": float(row["e"]),
        "inc": row["inc_deg"] * u.deg,
        "W": W,
        "w": (varpi - W) % (2 * np.pi * u.rad),
        "M0": (L - varpi) % (2 * np.pi * u.rad),
    }


def load_elements():
    """
    Load the orbital element table shipped with the package

    The Earth row holds the mean elements of the Earth-Moon barycenter, and
    the Moon is placed relative to that point. Earth's centre sits about
    4,700 km from the barycenter, which is not modeled.

    Returns:
        elements (dict):
            Body -> orbit attribute dict, for every non-stellar body
    """
    el_df = pd.read_csv(files("orrery") / "data" / "elements.csv")
    elements = {}
    for _, row in el_df.iterrows():
        elements[Body.from_name(row["body"])] = orbit_dict_from_row(row)
    return elements


def load_physical():
    """
    Load the physical property table shipped with the package
    Returns:
        physical (dict):
            Body -> dict of mass, radius and luminosity Quantities
    """
    ph_df = pd.read_csv(files("orrery") / "data" / "physical.csv")
    physical = {}
    for _, row in ph_df.iterrows():
        physical[Body.from_name(row["body"])] = {
            "mass": row["mass_kg"] * u.kg,
            "radius": row["radius_km"] * u.km,
            "luminosity": row["luminosity_W"] * u.W,
        }
    return physical


def load_catalog():
    """
    Load both catalog tables into the form SolarSystem expects
    """
    return {"elements": load_elements(), "physical": load_physical()}
