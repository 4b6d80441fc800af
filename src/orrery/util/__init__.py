__all__ = [
    "eccanom",
    "kepler_residual",
    "rotate_vectors",
    "perifocal_to_focal",
    "add_units",
    "as_time",
    "to_au",
    "to_au_per_day",
    "MPS_TO_AUPD",
]

from .kepler import eccanom, kepler_residual
from .misc import add_units, perifocal_to_focal, rotate_vectors
from .units import MPS_TO_AUPD, as_time, to_au, to_au_per_day
