"""
Saturation specific humidity for the Lambert-W ET model.

Uses the August-Roche-Magnus approximation to the Clausius-Clapeyron
relation:

    e_sat = 611.2 * exp(17.67 * T_c / (T_c + 243.5))    [Pa]
    q*    = (0.62198 / P) * e_sat                         [-]

The approximation is calibrated for -30°C <= T_c <= 35°C. Outside that
range values are still returned, with reduced accuracy.
"""

import numpy as np

from lambert_et.core.constants import (
    FREEZING_POINT,
    MOLECULAR_WEIGHT_RATIO,
    MAGNUS_REFERENCE_PRESSURE,
    MAGNUS_A,
    MAGNUS_B,
    Q_SAT_MIN_TEMPERATURE,
)
from lambert_et.utils.logger import Logger
from lambert_et.utils.validation import (
    broadcast_inputs,
    check_temperature_range,
    restore_type,
)


def saturation_vapor_pressure(T_celsius: np.ndarray) -> np.ndarray:
    """Saturation vapor pressure (Pa) from air temperature (°C)."""
    return MAGNUS_REFERENCE_PRESSURE * np.exp(MAGNUS_A * T_celsius / (T_celsius + MAGNUS_B))


def calc_q_sat(T, P):
    """
    Calculate saturation specific humidity.

    Elements with T below 50 K are set to exactly 0. Non-positive
    pressures are not trapped and give non-finite values.

    Args:
        T: Air temperature (K), scalar or batch
        P: Air pressure (Pa), scalar or batch

    Returns:
        Saturation specific humidity (-), same shape as the inputs
    """
    arrays = broadcast_inputs(T=T, P=P)
    T_k, P_pa = arrays["T"], arrays["P"]

    T_celsius = T_k - FREEZING_POINT

    in_range, message = check_temperature_range(T_celsius)
    if not in_range:
        Logger.debug(message)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        q_sat = (MOLECULAR_WEIGHT_RATIO / P_pa) * saturation_vapor_pressure(T_celsius)

    q_sat = np.where(T_k < Q_SAT_MIN_TEMPERATURE, 0.0, q_sat)

    return restore_type(q_sat, T, P)
