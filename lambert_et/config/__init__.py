"""Configuration module for lambert_et."""

from .settings import (
    DEFAULT_LOG_LEVEL,
    VERBOSE_LOG_LEVEL,
    DEFAULT_PRESSURE,
    DEFAULT_STORAGE_CONDUCTANCE,
    DEFAULT_RADIATIVE_CONDUCTANCE,
    OUTPUT_PRECISION,
)

__all__ = [
    'DEFAULT_LOG_LEVEL',
    'VERBOSE_LOG_LEVEL',
    'DEFAULT_PRESSURE',
    'DEFAULT_STORAGE_CONDUCTANCE',
    'DEFAULT_RADIATIVE_CONDUCTANCE',
    'OUTPUT_PRECISION',
]
