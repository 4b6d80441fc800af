import astropy.units as u
import numpy as np
from scipy.spatial.transform import Rotation as R


def rotate_vectors(vectors, axis, angle):
    """
    Rotates a set of Nx3 vectors around a single axis by a single angle
    Args:
        vectors (np.array):
            Nx3 array of vectors
        axis (list):
            3-element array specifying rotation axis (e.g. [0,0,1]
            for z-axis)
        angle (u.Quantity):
            Angle to rotate vectors by
    """
    rot = R.from_rotvec(np.array(axis) * angle.to(u.rad).value)
    return rot.apply(vectors)


def perifocal_to_focal(vectors, inc, W, w):
    """
    Rotate from the perifocal frame (x towards periapsis, z along the orbital
    angular momentum) into the focus's ecliptic frame with the 3-1-3 sequence
    w, inc, W

    Args:
        vectors (np.array):
            Nx3 (or 3) array of perifocal vectors
        inc (astropy Quantity):
            Inclination
        W (astropy Quantity):
            Longitude of the ascending node
        w (astropy Quantity):
            Argument of periapsis

    Returns:
        vectors (np.array):
            Vectors expressed in the focus frame
    """
    # Argument of periapsis within the orbital plane
    vectors = rotate_vectors(vectors, [0, 0, 1], w)
    # Tilt the orbital plane about the line of nodes
    vectors = rotate_vectors(vectors, [1, 0, 0], inc)
    # Swing the line of nodes into place
    vectors = rotate_vectors(vectors, [0, 0, 1], W)
    return vectors


def add_units(ds, new_unit, vars=["x", "y", "z"]):
    """
    Add units to a dataset by adding a new data variable with the
    desired unit conversion. This is the only place dataset values leave
    SI units.

    Args:
        ds (xarray.Dataset):
            The original dataset.
        new_unit (astropy.units.Unit):
            The target unit for conversion, a length or a speed
        vars (list of str):
            List of variable names to convert.
    """
    for var in vars:
        # Ensure the variable is in the dataset
        assert var in ds, f"Variable {var} not found in dataset."
        var_data = ds[var].copy()
        base_unit = u.Unit(var_data.attrs["unit"])
        base_data = var_data.data * base_unit
        # to() raises UnitConversionError on a dimension mismatch
        converted_data = base_data.to(new_unit)

        # Update the dataset with the converted data
        new_name = f"{var}({new_unit})"
        var_data.data = converted_data.value
        var_data.attrs["unit"] = str(new_unit)

        ds[new_name] = var_data

    return ds
