import astropy.units as u
import numpy as np


def fixed_origin():
    """
    State of the Sun, which sits at the origin of the global frame and does
    not move
    Returns:
        r (astropy Quantity array):
            Zero position vector in meters
        v (astropy Quantity array):
            Zero velocity vector in m/s
    """
    return np.zeros(3) * u.m, np.zeros(3) * u.m / u.s


def compose(parent_state, local_state):
    """
    Express a focus-relative state in the frame of the focus's parent.

    The focus frame is not rotating and only translates with the focus, so
    both position and velocity are plain vector sums.
    Args:
        parent_state (tuple):
            (r, v) of the focus in the global frame
        local_state (tuple):
            (r, v) of the body relative to its focus
    Returns:
        r, v (astropy Quantity arrays):
            The body's state in the global frame
    """
    parent_r, parent_v = parent_state
    local_r, local_v = local_state
    return (parent_r + local_r).to(u.m), (parent_v + local_v).to(u.m / u.s)
