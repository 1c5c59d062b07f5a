"""
lambert_et - analytical evapotranspiration estimation.

Estimates latent heat flux from near-surface meteorology and surface
conductances with the closed-form alternative to the Penman-Monteith
equation derived in McColl (2020). The surface energy balance is solved
exactly with the principal branch of the Lambert W function.

This package provides tools for:
- Saturation specific humidity (Clausius-Clapeyron approximation)
- Latent heat flux for scalar, time-series and gridded inputs
- Surface temperature consistent with the flux estimate

Please cite:
McColl, K.A. (2020). Practical and theoretical benefits of an alternative
to the Penman-Monteith evapotranspiration equation. Water Resources
Research, 56. https://doi.org/10.1029/2020WR027106
"""

__version__ = "0.1.0"
__author__ = "lambert_et Developers"

# Core modules
from lambert_et.core import (
    PhysicalConstants,
    PHYSICAL_CONSTANTS,
    calc_q_sat,
    constants
)

# ET estimation
from lambert_et.et import (
    LambertET,
    LambertETConfig,
    create_lambert_et,
    estimate_ET,
    estimate_ET_and_Ts,
    principal_lambertw
)

# Exceptions
from lambert_et.utils.exceptions import (
    LambertETError,
    InputShapeMismatchError,
    DomainInputError,
    DegenerateConductanceError
)

__all__ = [
    # Version
    '__version__',
    '__author__',

    # Core
    'PhysicalConstants',
    'PHYSICAL_CONSTANTS',
    'calc_q_sat',
    'constants',

    # ET
    'LambertET',
    'LambertETConfig',
    'create_lambert_et',
    'estimate_ET',
    'estimate_ET_and_Ts',
    'principal_lambertw',

    # Exceptions
    'LambertETError',
    'InputShapeMismatchError',
    'DomainInputError',
    'DegenerateConductanceError',
]
