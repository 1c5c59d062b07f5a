"""Configuration settings for lambert_et."""

# ============================================================================
# LOGGING
# ============================================================================

DEFAULT_LOG_LEVEL = "WARNING"
VERBOSE_LOG_LEVEL = "DEBUG"

# ============================================================================
# PHYSICAL CONSTANTS (from core/constants.py)
# ============================================================================

from ..core.constants import (
    PHYSICAL_CONSTANTS,
    LATENT_HEAT_VAPORIZATION,
    AIR_DENSITY,
    AIR_SPECIFIC_HEAT,
    Q_SAT_VALID_RANGE_C,
)

# ============================================================================
# COMMAND LINE DEFAULTS
# ============================================================================

# Standard sea-level pressure (Pa)
DEFAULT_PRESSURE = 101325.0

# Radiatively uncoupled equation unless conductances are given (m/s)
DEFAULT_STORAGE_CONDUCTANCE = 0.0
DEFAULT_RADIATIVE_CONDUCTANCE = 0.0

# Significant digits printed by the CLI
OUTPUT_PRECISION = 6
