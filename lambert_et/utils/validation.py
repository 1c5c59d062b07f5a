"""
Validation utilities for lambert_et.

Provides input coercion, shape checks, value range checks and the
guards that stop the estimator before a division by zero or a Lambert W
argument with no real solution.
"""

from typing import Any, Dict, Tuple
import numpy as np
import pandas as pd
import xarray as xr

from lambert_et.core.constants import Q_SAT_VALID_RANGE_C
from lambert_et.utils.exceptions import (
    DataInputError,
    InputShapeMismatchError,
    DomainInputError,
    DegenerateConductanceError,
)
from lambert_et.utils.logger import Logger

# Branch point of the principal Lambert W branch
LAMBERTW_BRANCH_POINT = -np.exp(-1.0)


def to_numpy(value: Any, name: str = None) -> np.ndarray:
    """
    Convert scalar, sequence, pandas or xarray input to a float64 array.

    Args:
        value: Input value
        name: Argument name used in error messages

    Returns:
        numpy array (0-d for scalars)
    """
    if isinstance(value, (xr.DataArray, pd.Series, pd.Index)):
        value = value.values
    try:
        return np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise DataInputError(
            f"Input '{name}' is not numeric: {e}",
            input_name=name
        ) from e


def broadcast_inputs(**inputs: Any) -> Dict[str, np.ndarray]:
    """
    Coerce named inputs to arrays and check that batch shapes agree.

    Scalars combine with any batch. Every non-scalar input must have
    exactly the same shape; no other broadcasting is allowed.

    Args:
        **inputs: Named scalar or batch inputs

    Returns:
        Dictionary of arrays, all with the common shape
    """
    arrays = {name: to_numpy(value, name) for name, value in inputs.items()}

    shapes = {name: arr.shape for name, arr in arrays.items() if arr.ndim > 0}
    distinct = set(shapes.values())

    if len(distinct) > 1:
        Logger.warning(f"Input shape mismatch: {shapes}")
        raise InputShapeMismatchError(
            "Batch inputs must all have the same shape",
            shapes=shapes
        )

    shape = distinct.pop() if distinct else ()

    return {
        name: np.broadcast_to(arr, shape) if arr.shape != shape else arr
        for name, arr in arrays.items()
    }


def restore_type(result: np.ndarray, *templates: Any):
    """
    Return result in the container type of the first labelled input.

    xarray DataArrays keep their dims and coords, pandas Series keep
    their index, 0-d results become Python floats.

    Args:
        result: Computed array
        *templates: Original inputs, in argument order

    Returns:
        DataArray, Series, float or numpy array
    """
    for template in templates:
        if isinstance(template, xr.DataArray) and template.shape == result.shape:
            return xr.DataArray(result, coords=template.coords, dims=template.dims)
        if isinstance(template, pd.Series) and template.shape == result.shape:
            return pd.Series(result, index=template.index)

    if result.ndim == 0:
        return float(result)
    return result


def check_temperature_range(
    T_celsius: np.ndarray,
    valid_range: Tuple[float, float] = Q_SAT_VALID_RANGE_C
) -> Tuple[bool, str]:
    """
    Check air temperatures lie in the saturation humidity calibration range.

    Values outside the range are allowed; the approximation only loses
    accuracy there.

    Args:
        T_celsius: Air temperature (°C)
        valid_range: (min, max) calibration range (°C)

    Returns:
        Tuple of (is_valid, message)
    """
    T_celsius = np.asarray(T_celsius)
    min_temp, max_temp = valid_range

    finite = np.isfinite(T_celsius)
    outside = finite & ((T_celsius < min_temp) | (T_celsius > max_temp))

    if np.any(outside):
        count = int(np.sum(outside))
        return False, (
            f"Temperature outside calibration range [{min_temp}, {max_temp}] °C: "
            f"{count} of {T_celsius.size} values"
        )

    return True, "Temperature values are within the calibration range"


def validate_temperature(Ta: np.ndarray) -> None:
    """
    Reject zero air temperature (K), which divides by zero.

    Args:
        Ta: Air temperature (K)
    """
    zero = np.asarray(Ta) == 0
    if np.any(zero):
        count = int(np.sum(zero))
        Logger.warning(f"Zero air temperature in {count} element(s)")
        raise DomainInputError(
            "Air temperature must be non-zero (K)",
            count=count,
            min_value=0.0
        )


def validate_conductances(gs: np.ndarray, ga: np.ndarray, gt: np.ndarray) -> None:
    """
    Reject conductance combinations that divide by zero.

    Args:
        gs: Surface conductance (m/s)
        ga: Aerodynamic conductance (m/s)
        gt: Total conductance ga + gg + gr (m/s)
    """
    for term, total in (("gs+ga", gs + ga), ("ga+gg+gr", gt)):
        zero = total == 0
        if np.any(zero):
            count = int(np.sum(zero))
            Logger.warning(f"Degenerate conductance {term} = 0 in {count} element(s)")
            raise DegenerateConductanceError(
                f"Conductance sum {term} must be non-zero",
                term=term,
                count=count
            )


def validate_lambertw_argument(z: np.ndarray) -> None:
    """
    Reject Lambert W arguments below the branch point -1/e.

    NaN arguments pass through so missing data propagates.

    Args:
        z: Lambert W argument
    """
    z = np.asarray(z)
    below = z < LAMBERTW_BRANCH_POINT
    if np.any(below):
        count = int(np.sum(below))
        min_z = float(np.min(z[below]))
        Logger.warning(f"Lambert W argument below -1/e in {count} element(s), min z = {min_z:.4g}")
        raise DomainInputError(
            "Lambert W argument below -1/e has no real principal-branch solution",
            count=count,
            min_value=min_z
        )
