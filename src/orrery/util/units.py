import astropy.units as u
import numpy as np
from astropy.time import Time

# Conversion factor from meters per second to astronomical units per day
MPS_TO_AUPD = (1 * u.m / u.s).to_value(u.AU / u.d)


def as_time(epoch):
    """
    Coerce an epoch into an astropy Time

    Args:
        epoch (astropy Time or Quantity):
            Either a Time, or a time Quantity holding a Julian Date

    Returns:
        epoch (astropy Time):
            The epoch as a Julian Date Time object
    """
    if isinstance(epoch, Time):
        return epoch
    if isinstance(epoch, u.Quantity):
        return Time(epoch.to_value(u.d), format="jd")
    raise TypeError(
        f"Epoch must be an astropy Time or a time Quantity, got {type(epoch)}"
    )


def to_au(length):
    """
    Strip a length Quantity (scalar or vector) down to plain values in AU
    """
    return np.asarray(length.to_value(u.AU))


def to_au_per_day(velocity):
    """
    Strip a velocity Quantity (scalar or vector) down to plain values in AU/d
    """
    return np.asarray(velocity.to_value(u.m / u.s)) * MPS_TO_AUPD
