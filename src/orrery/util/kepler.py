import logging

import astropy.units as u
import numpy as np

from orrery.errors import NumericalDivergence

logger = logging.getLogger(__name__)

TWO_PI = 2 * np.pi


def kepler_residual(E, M, e):
    """
    Residual of Kepler's equation, E - e*sin(E) - M, with M reduced to a
    single turn
    """
    return E - e * np.sin(E) - np.mod(M, TWO_PI)


def eccanom(M, e, tol=1e-8, maxiter=100):
    """
    Solve Kepler's equation M = E - e*sin(E) for the eccentric anomaly with
    Newton-Raphson iteration.

    The starting guess is Danby's E0 = M + 0.85*e*sign(sin(M)) rather than
    E0 = M. Started from M, Newton can stall near M = 0 at high eccentricity,
    while Danby's guess converges for every e up to 0.99 and is still exactly
    M for a circular orbit. The residual is checked before every
    update, so e = 0 returns E = M without iterating.

    Args:
        M (float or astropy Quantity):
            Mean anomaly, radians if unitless. Any real value, it is reduced
            modulo a full turn.
        e (float):
            Eccentricity, 0 <= e < 1
        tol (float):
            Absolute tolerance on the residual in radians
        maxiter (int):
            Maximum number of Newton steps

    Returns:
        E (float):
            Eccentric anomaly in radians

    Raises:
        NumericalDivergence:
            If the tolerance is not met within maxiter steps
    """
    if isinstance(M, u.Quantity):
        M = M.to_value(u.rad)
    M = float(np.mod(M, TWO_PI))
    e = float(e)

    E = M + 0.85 * e * np.sign(np.sin(M))
    for _ in range(maxiter):
        f = E - e * np.sin(E) - M
        if abs(f) < tol:
            return E
        E = E - f / (1 - e * np.cos(E))

    # The last step may have landed inside the tolerance
    if abs(E - e * np.sin(E) - M) < tol:
        return E

    logger.error(
        f"Kepler's equation did not converge after {maxiter} iterations "
        f"(M={M}, e={e})"
    )
    raise NumericalDivergence(
        f"Kepler's equation did not converge for M={M} rad, e={e} "
        f"within {maxiter} iterations"
    )
