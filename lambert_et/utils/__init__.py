"""
Utility modules for lambert_et.

Provides logging, validation, and exception handling utilities.
"""

from .logger import Logger
from .exceptions import (
    LambertETError,
    DataInputError,
    InputShapeMismatchError,
    ComputationError,
    DomainInputError,
    DegenerateConductanceError,
    create_error_context
)
from .validation import (
    LAMBERTW_BRANCH_POINT,
    to_numpy,
    broadcast_inputs,
    restore_type,
    check_temperature_range,
    validate_temperature,
    validate_conductances,
    validate_lambertw_argument
)

__all__ = [
    # Logger
    "Logger",

    # Exceptions
    "LambertETError",
    "DataInputError",
    "InputShapeMismatchError",
    "ComputationError",
    "DomainInputError",
    "DegenerateConductanceError",
    "create_error_context",

    # Validation
    "LAMBERTW_BRANCH_POINT",
    "to_numpy",
    "broadcast_inputs",
    "restore_type",
    "check_temperature_range",
    "validate_temperature",
    "validate_conductances",
    "validate_lambertw_argument",
]
