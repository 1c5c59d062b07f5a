"""
Evapotranspiration (ET) Estimation Module.

Estimates latent heat flux with the closed-form Lambert W alternative
to the Penman-Monteith equation (McColl, 2020).

Classes:
    - LambertET: Latent heat flux and surface temperature estimator
    - LambertETConfig: Estimator configuration

Formulas:
    1. gt = ga + gg + gr,  gc = gs * ga / (gs + ga)
    2. LE = [cp * gt * ρ * r_v * Ta² / λ] * W0(z) - gc * ρ * λ * qa
    3. Ts = Ta + (Rn - G - LE) / (ρ * cp * gt)
"""

from .lambertw import principal_lambertw, LambertWSolver
from .analytical_et import (
    LambertET,
    LambertETConfig,
    create_lambert_et,
    estimate_ET,
    estimate_ET_and_Ts
)

__all__ = [
    'principal_lambertw',
    'LambertWSolver',
    'LambertET',
    'LambertETConfig',
    'create_lambert_et',
    'estimate_ET',
    'estimate_ET_and_Ts'
]
