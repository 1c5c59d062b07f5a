"""Core module for the Lambert-W ET model."""

from .constants import (
    PhysicalConstants,
    PHYSICAL_CONSTANTS,
    LATENT_HEAT_VAPORIZATION,
    AIR_DENSITY,
    AIR_SPECIFIC_HEAT,
    GAS_CONSTANT_WATER_VAPOR,
    GAS_CONSTANT_DRY_AIR,
    FREEZING_POINT,
)
from .humidity import calc_q_sat, saturation_vapor_pressure

__all__ = [
    'PhysicalConstants',
    'PHYSICAL_CONSTANTS',
    'LATENT_HEAT_VAPORIZATION',
    'AIR_DENSITY',
    'AIR_SPECIFIC_HEAT',
    'GAS_CONSTANT_WATER_VAPOR',
    'GAS_CONSTANT_DRY_AIR',
    'FREEZING_POINT',
    'calc_q_sat',
    'saturation_vapor_pressure',
]
