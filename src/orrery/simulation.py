import logging

import astropy.units as u
import numpy as np
import pandas as pd

from orrery.base.body import Body
from orrery.base.system import SolarSystem
from orrery.config import epoch_from_config, load_config, timestep_from_config
from orrery.util.units import to_au, to_au_per_day

logger = logging.getLogger(__name__)


class Simulation:
    """
    Interface between the solar system model and a display. Drives the clock
    with a fixed tick and hands out plain float32 arrays in AU and AU/day, so
    the display never handles units or orbital mechanics.
    """

    def __init__(self, config=None) -> None:
        self.config = load_config(config)
        self.dt = timestep_from_config(self.config)
        self.solar_system = SolarSystem(
            epoch_from_config(self.config), config=self.config
        )
        self.ticks = 0

    def __repr__(self):
        return f"{type(self).__name__} after {self.ticks} ticks of {self.dt}"

    def advance(self):
        """
        Advance the model by one tick
        """
        self.solar_system.advance_time(self.dt)
        self.ticks += 1

    def bodies(self):
        return self.solar_system.bodies()

    def name_of(self, body):
        return body.value

    def position_of(self, body):
        return to_au(self.solar_system.position_of(body)).astype(np.float32)

    def velocity_of(self, body):
        return to_au_per_day(self.solar_system.velocity_of(body)).astype(np.float32)

    def radius_of(self, body):
        return np.float32(to_au(self.solar_system.properties_of(body).radius))

    def apsis_of(self, body):
        return np.float32(to_au(self.solar_system.properties_of(body).apsis))

    def luminosity_of(self, body):
        return np.float32(
            self.solar_system.properties_of(body).luminosity.to_value(u.W)
        )

    def max_sun_distance(self, body):
        """
        Largest distance from the Sun the body can reach, in AU. For a body
        orbiting a planet this adds the planet's own apsis.
        """
        orbit = self.solar_system.orbit_of(body)
        if orbit is None or orbit.focus is Body.SUN:
            return self.apsis_of(body)
        return self.apsis_of(body) + self.apsis_of(orbit.focus)

    def snapshot(self):
        """
        Everything a display needs for the current tick, one row per body
        """
        rows = {}
        for body in Body:
            r = self.position_of(body)
            v = self.velocity_of(body)
            rows[self.name_of(body)] = {
                "x": r[0],
                "y": r[1],
                "z": r[2],
                "vx": v[0],
                "vy": v[1],
                "vz": v[2],
                "radius": self.radius_of(body),
                "luminosity": self.luminosity_of(body),
            }
        logger.debug(f"Snapshot taken at tick {self.ticks}")
        return pd.DataFrame.from_dict(rows, orient="index")
