import logging

import astropy.units as u
import numpy as np
import pandas as pd
import xarray as xr
from astropy.time import Time
from tqdm import tqdm

import orrery.base.frame as frame
from orrery.base.body import Body
from orrery.base.orbit import Orbit
from orrery.base.properties import build_properties
from orrery.catalog import load_catalog
from orrery.config import load_config
from orrery.errors import InvalidTimestep
from orrery.util.units import as_time

logger = logging.getLogger(__name__)


class SolarSystem:
    """
    The Sun and the nine bodies that orbit it, driven by a forward-only
    simulation clock.

    Every state query is recomputed from the fixed orbital elements and the
    absolute simulation time, nothing is integrated between ticks.
    """

    def __init__(self, epoch, catalog=None, config=None) -> None:
        """
        Args:
            epoch (astropy Time or Quantity):
                Start of the simulation, a Time or a Julian Date Quantity
            catalog (dict):
                {"elements": ..., "physical": ...} as produced by
                orrery.catalog.load_catalog, defaults to the packaged tables
            config (None, dict, str or Path):
                Engine configuration overrides, see orrery.config
        """
        self.config = load_config(config)
        if catalog is None:
            catalog = load_catalog()
        self.epoch = as_time(epoch)
        self._elapsed = 0 * u.s

        elements = catalog["elements"]
        physical = catalog["physical"]
        self.check_catalog(elements, physical)

        self._orbits = {}
        for body, orbit_dict in elements.items():
            self._orbits[body] = Orbit(
                orbit_dict,
                physical[body]["mass"],
                physical[orbit_dict["focus"]]["mass"],
                kepler_tol=self.config["kepler_tol"],
                kepler_maxiter=self.config["kepler_maxiter"],
            )
        self._properties = build_properties(physical, self._orbits)

        # Offset between the simulation epoch and each element epoch, fixed
        # for the life of the instance
        self._epoch_offsets = {
            body: (self.epoch - orbit.t0).to(u.s)
            for body, orbit in self._orbits.items()
        }
        logger.info(
            f"Built solar system of {len(self._properties)} bodies at epoch "
            f"JD {self.epoch.jd}"
        )

    def __repr__(self):
        return f"Solar system at JD {self.t.jd}\n\n{self.get_state_df()}"

    @staticmethod
    def check_catalog(elements, physical):
        """
        Assert that every body has a physical entry, every non-stellar body
        has exactly one orbit, and the focus graph is at most two levels deep
        """
        assert set(physical) == set(Body), (
            f"Physical catalog is missing {set(Body) - set(physical)}"
        )
        orbiting = set(Body) - {Body.SUN}
        assert set(elements) == orbiting, (
            f"Element catalog must cover exactly {sorted(b.value for b in orbiting)}"
        )
        for body, orbit_dict in elements.items():
            focus = orbit_dict["focus"]
            assert isinstance(focus, Body), f"{body.value} has focus {focus!r}"
            assert focus is not body, f"{body.value} cannot orbit itself"
            if focus is not Body.SUN:
                assert elements[focus]["focus"] is Body.SUN, (
                    f"{body.value} orbits {focus.value}, which does not orbit "
                    "the Sun"
                )

    @property
    def t(self):
        """
        Current absolute simulation time
        """
        return self.epoch + self._elapsed

    @property
    def elapsed(self):
        """
        Simulated time since the epoch
        """
        return self._elapsed

    @u.quantity_input(dt=u.s)
    def advance_time(self, dt):
        """
        Move the clock forward
        Args:
            dt (astropy Quantity):
                Non-negative duration
        Raises:
            InvalidTimestep:
                If dt is negative or not finite, the clock is left unchanged
        """
        if not (np.isfinite(dt) and dt >= 0 * u.s):
            logger.warning(f"Rejected timestep of {dt}, clock left at {self._elapsed}")
            raise InvalidTimestep(
                f"Timestep must be finite and non-negative, got {dt}"
            )
        self._elapsed = self._elapsed + dt.to(u.s)
        logger.debug(f"Advanced clock by {dt} to {self._elapsed} since epoch")

    def bodies(self):
        """
        All of the modeled bodies
        """
        return frozenset(self._properties)

    def properties_of(self, body):
        return self._properties[body]

    def orbit_of(self, body):
        """
        Orbital elements of a body, None for the Sun
        """
        return self._orbits.get(body)

    def orbital_period(self, body):
        """
        Orbital period of a body, None for the Sun
        """
        orbit = self._orbits.get(body)
        if orbit is None:
            return None
        return orbit.period

    def focus_state_of(self, body, since_epoch=None):
        """
        State of a body relative to its own focus
        Args:
            body (Body):
                Body to propagate
            since_epoch (astropy Quantity):
                Time since the simulation epoch, defaults to the clock
        Returns:
            r, v (astropy Quantity arrays):
                Position (m) and velocity (m/s) in the focus's frame
        """
        if since_epoch is None:
            since_epoch = self._elapsed
        if body is Body.SUN:
            return frame.fixed_origin()
        dt = self._epoch_offsets[body] + since_epoch
        return self._orbits[body].calc_vectors(dt, return_v=True)

    def state_of(self, body, since_epoch=None):
        """
        State of a body in the Sun-centered frame
        Args:
            body (Body):
                Body to propagate
            since_epoch (astropy Quantity):
                Time since the simulation epoch, defaults to the clock
        Returns:
            r, v (astropy Quantity arrays):
                Position (m) and velocity (m/s)
        """
        local_state = self.focus_state_of(body, since_epoch)
        if body is Body.SUN:
            return local_state
        focus = self._orbits[body].focus
        if focus is Body.SUN:
            return local_state
        # Foci always orbit the Sun, so this recursion is a single step
        return frame.compose(self.state_of(focus, since_epoch), local_state)

    def position_of(self, body):
        return self.state_of(body)[0]

    def velocity_of(self, body):
        return self.state_of(body)[1]

    def get_state_df(self):
        """
        Current global state of every body, SI units
        """
        rows = {}
        for body in Body:
            r, v = self.state_of(body)
            r = r.to_value(u.m)
            v = v.to_value(u.m / u.s)
            rows[body.value] = {
                "x": r[0],
                "y": r[1],
                "z": r[2],
                "vx": v[0],
                "vy": v[1],
                "vz": v[2],
            }
        return pd.DataFrame.from_dict(rows, orient="index")

    def create_dataset(self, times):
        """
        Create an xarray Dataset for the system's motion
        """
        timesd64 = times.datetime64
        state_vars = ["x", "y", "z", "vx", "vy", "vz"]
        coords = {
            "time": timesd64,
            "body": [body.value for body in Body],
            "ref_frame": ["global", "focus"],
        }

        data_vars = {
            var: (
                ["time", "body", "ref_frame"],
                np.nan * np.ones((len(timesd64), len(Body), 2)),
            )
            for var in state_vars
        }

        ds = xr.Dataset(data_vars, coords=coords)

        # Add units information
        for var in state_vars:
            ds[var].attrs["unit"] = u.m if var in ["x", "y", "z"] else u.m / u.s
        return ds

    def propagate(self, times, ds=None):
        """
        Evaluate every body's state at the given absolute times without
        touching the simulation clock
        Args:
            times (astropy Time):
                Scalar or array of times
            ds (xarray.Dataset):
                Dataset to fill, created if not given
        Returns:
            ds (xarray.Dataset):
                x, y, z, vx, vy, vz over (time, body, ref_frame) where
                ref_frame is "global" (Sun-centered) or "focus"
        """
        scalar_time = times.isscalar
        if scalar_time:
            times = Time([times])

        if ds is None:
            ds = self.create_dataset(times)

        since_epoch = (times - self.epoch).to(u.s)
        for time64, dt in tqdm(
            zip(times.datetime64, since_epoch),
            total=len(times),
            desc="Propagating solar system",
            delay=0.5,
        ):
            for body in Body:
                states = {
                    "global": self.state_of(body, dt),
                    "focus": self.focus_state_of(body, dt),
                }
                for ref_frame, (r, v) in states.items():
                    r = r.to_value(u.m)
                    v = v.to_value(u.m / u.s)
                    for j, coord in enumerate(["x", "y", "z"]):
                        ds[coord].loc[time64, body.value, ref_frame] = r[j]
                    for j, coord in enumerate(["vx", "vy", "vz"]):
                        ds[coord].loc[time64, body.value, ref_frame] = v[j]
        logger.debug(f"Propagated {len(times)} epochs")

        if scalar_time:
            ds = ds.isel(time=0)
        return ds
