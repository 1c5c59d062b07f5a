"""Physical constants for the Lambert-W ET model."""

from dataclasses import dataclass

# ============================================================================
# FUNDAMENTAL CONSTANTS
# ============================================================================

# Boltzmann constant (J/K)
BOLTZMANN = 1.380658e-23

# Avogadro constant (1/mol)
AVOGADRO = 0.602214199e24

# Molar mass of dry air (kg/mol)
MOLAR_MASS_DRY_AIR = 28.9644e-3

# Molar mass of water vapor (kg/mol)
MOLAR_MASS_WATER = 18.0153e-3

# ============================================================================
# ATMOSPHERIC CONSTANTS
# ============================================================================

# Latent heat of vaporization (J/kg)
LATENT_HEAT_VAPORIZATION = 2.5008e6

# Air density (kg/m³)
AIR_DENSITY = 1.2

# ============================================================================
# TEMPERATURE CONSTANTS
# ============================================================================

FREEZING_POINT = 273.15

# ============================================================================
# CLAUSIUS-CLAPEYRON (AUGUST-ROCHE-MAGNUS) COEFFICIENTS
# ============================================================================

# Ratio of the molecular weights of water and dry air
MOLECULAR_WEIGHT_RATIO = 0.62198

# Saturation vapor pressure at 0°C (Pa)
MAGNUS_REFERENCE_PRESSURE = 611.2
MAGNUS_A = 17.67
MAGNUS_B = 243.5  # °C

# Below this temperature (K) saturation humidity is reported as 0
Q_SAT_MIN_TEMPERATURE = 50.0

# Calibration range of the approximation (°C)
Q_SAT_VALID_RANGE_C = (-30.0, 35.0)


@dataclass(frozen=True)
class PhysicalConstants:
    """
    Immutable set of constants used by the ET estimator.

    The gas constants and specific heat are derived from the fundamental
    constants, so a single instance is internally consistent.

    Attributes:
        boltzmann: Boltzmann constant (J/K)
        avogadro: Avogadro constant (1/mol)
        molar_mass_dry_air: Molar mass of dry air (kg/mol)
        molar_mass_water: Molar mass of water vapor (kg/mol)
        latent_heat: Latent heat of vaporization λ (J/kg)
        air_density: Air density ρ (kg/m³)
    """

    boltzmann: float = BOLTZMANN
    avogadro: float = AVOGADRO
    molar_mass_dry_air: float = MOLAR_MASS_DRY_AIR
    molar_mass_water: float = MOLAR_MASS_WATER
    latent_heat: float = LATENT_HEAT_VAPORIZATION
    air_density: float = AIR_DENSITY

    @property
    def r_v(self) -> float:
        """Gas constant for water vapor (J/(kg·K))."""
        return self.avogadro * self.boltzmann / self.molar_mass_water

    @property
    def r_d(self) -> float:
        """Gas constant for dry air (J/(kg·K))."""
        return self.avogadro * self.boltzmann / self.molar_mass_dry_air

    @property
    def cp(self) -> float:
        """Specific heat of air at constant pressure (J/(kg·K)), diatomic gas."""
        return 7.0 / 2.0 * self.r_d


PHYSICAL_CONSTANTS = PhysicalConstants()

GAS_CONSTANT_WATER_VAPOR = PHYSICAL_CONSTANTS.r_v
GAS_CONSTANT_DRY_AIR = PHYSICAL_CONSTANTS.r_d
AIR_SPECIFIC_HEAT = PHYSICAL_CONSTANTS.cp

__all__ = [
    'BOLTZMANN', 'AVOGADRO', 'MOLAR_MASS_DRY_AIR', 'MOLAR_MASS_WATER',
    'LATENT_HEAT_VAPORIZATION', 'AIR_DENSITY', 'FREEZING_POINT',
    'MOLECULAR_WEIGHT_RATIO', 'MAGNUS_REFERENCE_PRESSURE', 'MAGNUS_A',
    'MAGNUS_B', 'Q_SAT_MIN_TEMPERATURE', 'Q_SAT_VALID_RANGE_C',
    'PhysicalConstants', 'PHYSICAL_CONSTANTS', 'GAS_CONSTANT_WATER_VAPOR',
    'GAS_CONSTANT_DRY_AIR', 'AIR_SPECIFIC_HEAT'
]
