import json
import logging
from pathlib import Path

import astropy.units as u
from astropy.time import Time

from orrery.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Reference driver settings, 2023-01-01T00:00:00 UTC and half hour ticks
DEFAULTS = {
    "epoch_jd": 2_459_945.5,
    "timestep_minutes": 30.0,
    "kepler_tol": 1e-8,
    "kepler_maxiter": 100,
}


def load_config(source=None):
    """
    Build an engine configuration on top of DEFAULTS
    Args:
        source (None, dict, str or Path):
            Overrides, either as a dict or a path to a JSON file
    Returns:
        config (dict):
            Complete, validated configuration
    Raises:
        ConfigurationError:
            If a key is unknown or a value is out of range
    """
    if source is None:
        overrides = {}
    elif isinstance(source, dict):
        overrides = source
    else:
        path = Path(source)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")
        with open(path) as f:
            overrides = json.load(f)
        logger.info(f"Loaded config overrides from {path}")

    unknown = set(overrides) - set(DEFAULTS)
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {sorted(unknown)}")

    config = {key: overrides.get(key, default) for key, default in DEFAULTS.items()}
    validate_config(config)
    return config


def validate_config(config):
    try:
        epoch_jd = float(config["epoch_jd"])
        timestep = float(config["timestep_minutes"])
        tol = float(config["kepler_tol"])
        maxiter = config["kepler_maxiter"]
    except (KeyError, TypeError, ValueError) as err:
        raise ConfigurationError(f"Malformed config: {err}") from err

    if not epoch_jd > 0:
        raise ConfigurationError(f"epoch_jd must be positive, got {epoch_jd}")
    if not timestep >= 0:
        raise ConfigurationError(
            f"timestep_minutes must be non-negative, got {timestep}"
        )
    if not 0 < tol < 1:
        raise ConfigurationError(f"kepler_tol must be in (0, 1), got {tol}")
    if not isinstance(maxiter, int) or isinstance(maxiter, bool) or maxiter < 1:
        raise ConfigurationError(
            f"kepler_maxiter must be a positive integer, got {maxiter}"
        )

    config["epoch_jd"] = epoch_jd
    config["timestep_minutes"] = timestep
    config["kepler_tol"] = tol


def epoch_from_config(config):
    return Time(config["epoch_jd"], format="jd")


def timestep_from_config(config):
    return config["timestep_minutes"] * u.min
