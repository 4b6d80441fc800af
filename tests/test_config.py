import json

import astropy.units as u
import pytest

from orrery import ConfigurationError
from orrery.config import (
    DEFAULTS,
    epoch_from_config,
    load_config,
    timestep_from_config,
)


def test_defaults():
    config = load_config()
    assert config == DEFAULTS
    assert epoch_from_config(config).jd == pytest.approx(2459945.5)
    assert timestep_from_config(config) == 30 * u.min


def test_dict_overrides():
    config = load_config({"timestep_minutes": 5.0})
    assert config["timestep_minutes"] == 5.0
    assert config["kepler_maxiter"] == DEFAULTS["kepler_maxiter"]


def test_json_file(tmp_path):
    path = tmp_path / "orrery.json"
    with open(path, "w") as f:
        json.dump({"epoch_jd": 2451545.0, "kepler_tol": 1e-10}, f)
    config = load_config(path)
    assert config["epoch_jd"] == 2451545.0
    assert config["kepler_tol"] == 1e-10


@pytest.mark.parametrize(
    "key, raw, expected",
    [
        ("epoch_jd", "2451545.0", 2451545.0),
        ("timestep_minutes", "30", 30.0),
        ("timestep_minutes", 15, 15.0),
        ("kepler_tol", "1e-9", 1e-9),
    ],
)
def test_numeric_strings_are_converted(key, raw, expected):
    config = load_config({key: raw})
    assert isinstance(config[key], float)
    assert config[key] == expected


def test_timestep_from_string_is_a_quantity():
    dt = timestep_from_config(load_config({"timestep_minutes": "30"}))
    assert isinstance(dt, u.Quantity)
    assert dt == 30 * u.min


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "overrides",
    [
        {"not_a_key": 1},
        {"epoch_jd": -5},
        {"timestep_minutes": -1.0},
        {"kepler_tol": 0},
        {"kepler_tol": "tight"},
        {"kepler_maxiter": 0},
        {"kepler_maxiter": 2.5},
        {"kepler_maxiter": True},
    ],
)
def test_invalid_values(overrides):
    with pytest.raises(ConfigurationError):
        load_config(overrides)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        load_config({"timestep_minutes": "soon"})
