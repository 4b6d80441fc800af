import astropy.constants as const
import astropy.units as u
import numpy as np
import pandas as pd
from astropy.time import Time

import orrery.util.misc as misc
from orrery.util.kepler import eccanom


class Orbit:
    """
    Fixed two-body Keplerian orbit of a body around its focus
    """

    def __init__(
        self, orbit_dict, mass, focus_mass, kepler_tol=1e-8, kepler_maxiter=100
    ) -> None:
        for att, value in orbit_dict.items():
            setattr(self, att, value)
        self.mass = mass
        self.focus_mass = focus_mass
        self.kepler_tol = kepler_tol
        self.kepler_maxiter = kepler_maxiter
        self.solve_dependent_params()

    def __repr__(self):
        """
        Make dataframe with orbit attributes
        """
        params = self.dump_params()
        res = {}
        for key, val in params.items():
            if type(val) == u.Quantity:
                res[key] = val.value
            elif type(val) == Time:
                res[key] = val.jd
            else:
                res[key] = val

        # Create dataframe from res dictionary
        o_df = pd.DataFrame(res, index=[0])

        return f"{type(self).__name__} object\n{o_df}"

    def dump_params(self):
        params = {
            "t0": self.t0,
            "focus": self.focus.value,
            "a": self.a,
            "e": self.e,
            "inc": self.inc,
            "W": self.W,
            "w": self.w,
            "M0": self.M0,
            "T": self.T,
        }
        return params

    def solve_dependent_params(self):
        assert 0 <= self.e < 1, f"Eccentricity must be in [0, 1), got {self.e}"
        assert self.a > 0 * u.m, f"Semi-major axis must be positive, got {self.a}"
        self.mu = (const.G * (self.mass + self.focus_mass)).decompose()

        # Mean angular motion
        self.n = (np.sqrt(self.mu / self.a**3)).decompose() * u.rad
        self.T = (2 * np.pi * u.rad / self.n).to(u.d)

        # Extreme distances from the focus
        self.apsis = (self.a * (1 + self.e)).to(u.m)
        self.periapsis = (self.a * (1 - self.e)).to(u.m)

    @property
    def period(self):
        return self.T

    def mean_anom(self, dt):
        """
        Calculate the mean anomaly after the given time since the element
        epoch
        Args:
            dt (astropy Quantity):
                Time elapsed since t0

        Returns:
            M (astropy Quantity):
                Mean anomaly at t0 + dt, reduced to [0, 2pi) radians
        """
        M = ((self.n * dt).to(u.rad) + self.M0.to(u.rad)) % (2 * np.pi * u.rad)
        return M

    def true_anom(self, E):
        """
        True anomaly from the eccentric anomaly (radians)
        """
        e = self.e
        nu = 2 * np.arctan2(
            np.sqrt(1 + e) * np.sin(E / 2), np.sqrt(1 - e) * np.cos(E / 2)
        )
        return nu * u.rad

    def radius_at(self, E):
        """
        Distance from the focus at eccentric anomaly E (radians)
        """
        return self.a * (1 - self.e * np.cos(E))

    def calc_vectors(self, dt, return_r=True, return_v=False):
        """
        Given a time since the element epoch, calculate the position and/or
        velocity vectors of the body relative to its focus, in the focus's
        ecliptic axes
        Args:
            dt (astropy Quantity):
                Time elapsed since t0
            return_r (bool):
                Whether to return the position vector
            return_v (bool):
                Whether to return the velocity vector
        Returns:
            r (astropy Quantity array):
                3 element position vector in meters
            v (astropy Quantity array):
                3 element velocity vector in m/s
        """
        M = self.mean_anom(dt)
        E = eccanom(M, self.e, tol=self.kepler_tol, maxiter=self.kepler_maxiter)
        a = self.a.to_value(u.m)
        e = self.e
        n = self.n.to_value(u.rad / u.s)

        if return_r:
            nu = self.true_anom(E).to_value(u.rad)
            r_mag = self.radius_at(E).to_value(u.m)
            r_pf = np.array([r_mag * np.cos(nu), r_mag * np.sin(nu), 0.0])
            r = misc.perifocal_to_focal(r_pf, self.inc, self.W, self.w) * u.m

        if return_v:
            # Time derivative of the perifocal position, dE/dt = n/(1 - e cosE)
            v_scale = n * a / (1 - e * np.cos(E))
            v_pf = v_scale * np.array(
                [-np.sin(E), np.sqrt(1 - e**2) * np.cos(E), 0.0]
            )
            v = misc.perifocal_to_focal(v_pf, self.inc, self.W, self.w) * u.m / u.s

        if return_r and return_v:
            return r, v
        if return_r:
            return r
        if return_v:
            return v
