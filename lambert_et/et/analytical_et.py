"""
Analytical Latent Heat Flux (LE) Estimation.

This module implements the closed-form alternative to the Penman-Monteith
equation derived in McColl (2020). It uses exactly the same inputs as
Penman-Monteith, but instead of linearizing the saturation vapor pressure
curve it solves the surface energy balance exactly with the principal
branch of the Lambert W function.

Formulas (equation B5 of McColl, 2020):
    gt = ga + gg + gr
    gc = gs * ga / (gs + ga)

    z  = [gc * λ² * q*(Ta) / (cp * r_v * Ta² * gt)]
         * exp[(λ / (cp * ρ * r_v * Ta² * gt)) * ((Rn - G) + gc * λ * ρ * qa)]

    LE = [cp * gt * ρ * r_v * Ta² / λ] * W0(z) - gc * ρ * λ * qa

Operating Modes:
    - gg = gr = 0: "radiatively uncoupled" equation, Rn and G taken as observed
    - gg, gr > 0:  "radiatively coupled" equation. Rn must then be Rn* and
      G must be G*, as defined in Appendix B of McColl (2020). The estimator
      does not transform or check them.

Surface Temperature:
    The same solution closes the energy balance Rn - G = LE + H with
    H = ρ * cp * gt * (Ts - Ta), so
    Ts = Ta + (Rn - G - LE) / (ρ * cp * gt)

References:
    McColl, K.A. (2020). Practical and theoretical benefits of an alternative
    to the Penman-Monteith evapotranspiration equation. Water Resources
    Research, 56. https://doi.org/10.1029/2020WR027106

    Raupach, M.R. (2001). Combination theory and equilibrium evaporation.
    Quarterly Journal of the Royal Meteorological Society 127, 1149-1181.
"""

import numpy as np
from scipy.special import wrightomega
from typing import Dict, Optional, Tuple
from dataclasses import dataclass, field

from lambert_et.core.constants import PhysicalConstants, PHYSICAL_CONSTANTS
from lambert_et.core.humidity import calc_q_sat
from lambert_et.et.lambertw import LambertWSolver, principal_lambertw
from lambert_et.utils.logger import Logger
from lambert_et.utils.validation import (
    broadcast_inputs,
    restore_type,
    validate_conductances,
    validate_lambertw_argument,
    validate_temperature,
)


@dataclass
class LambertETConfig:
    """Configuration for the analytical ET estimator."""

    # Physical constants (λ, ρ, r_v, cp)
    constants: PhysicalConstants = PHYSICAL_CONSTANTS

    # Principal-branch Lambert W solver, z -> W0(z)
    lambertw: LambertWSolver = field(default=principal_lambertw)


class LambertET:
    """
    Estimate latent heat flux with the Lambert W solution of the energy balance.

    All inputs may be scalars or batches (time series, grids). Batch inputs
    must share one shape; scalars are combined with every element. The
    computation is element-wise, with no interaction between elements.

    Attributes:
        config: Configuration parameters for the estimator
        constants: Physical constants in use

    Example:
        >>> et = LambertET()
        >>> le = et.calculate(293.15, 0.008, 0.005, 0.02, 200.0, 20.0,
        ...                   101325.0, 0.0, 0.0)
    """

    def __init__(self, config: Optional[LambertETConfig] = None):
        """
        Initialize LambertET estimator.

        Args:
            config: Optional configuration parameters. Uses defaults if not provided.
        """
        self.config = config or LambertETConfig()
        self.constants = self.config.constants

    def _prepare(self, Ta, qa, gs, ga, Rn, G, P, gg, gr) -> Dict[str, np.ndarray]:
        arrays = broadcast_inputs(
            Ta=Ta, qa=qa, gs=gs, ga=ga, Rn=Rn, G=G, P=P, gg=gg, gr=gr
        )
        validate_temperature(arrays["Ta"])
        return arrays

    def conductances(
        self,
        gs: np.ndarray,
        ga: np.ndarray,
        gg: np.ndarray,
        gr: np.ndarray
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Calculate total and coupled conductances.

        gt = ga + gg + gr
        gc = gs * ga / (gs + ga)

        Args:
            gs: Surface conductance (m/s)
            ga: Aerodynamic conductance (m/s)
            gg: Storage conductance (m/s)
            gr: Radiative conductance (m/s)

        Returns:
            Tuple of (gt, gc) in m/s
        """
        gs, ga, gg, gr = (np.asarray(g, dtype=np.float64) for g in (gs, ga, gg, gr))
        gt = ga + gg + gr
        validate_conductances(gs, ga, gt)
        gc = (gs * ga) / (gs + ga)
        return gt, gc

    def _lambertw_terms(self, Ta, qa, Rn, G, q_sat, gt, gc) -> Tuple[np.ndarray, np.ndarray]:
        """Return (scale, exponent) with z = scale * exp(exponent)."""
        c = self.constants
        lam, rho = c.latent_heat, c.air_density
        cp, r_v = c.cp, c.r_v

        scale = gc * lam ** 2 * q_sat / (cp * r_v * Ta ** 2 * gt)
        exponent = (lam / (cp * rho * r_v * Ta ** 2 * gt)) * ((Rn - G) + gc * lam * rho * qa)
        return scale, exponent

    @staticmethod
    def _compose_argument(scale: np.ndarray, exponent: np.ndarray) -> np.ndarray:
        # scale = 0 (closed surface, or the 50 K guard) gives z = 0 even if exp overflows
        with np.errstate(over="ignore", invalid="ignore"):
            z = scale * np.exp(exponent)
        return np.where(scale == 0, 0.0, z)

    def _lambertw_argument(self, Ta, qa, Rn, G, q_sat, gt, gc) -> np.ndarray:
        scale, exponent = self._lambertw_terms(Ta, qa, Rn, G, q_sat, gt, gc)
        return self._compose_argument(scale, exponent)

    def lambertw_argument(self, Ta, qa, gs, ga, Rn, G, P, gg, gr):
        """
        Calculate the Lambert W argument z for each element.

        Args:
            Ta, qa, gs, ga, Rn, G, P, gg, gr: See calculate()

        Returns:
            Lambert W argument z (-), same shape as the inputs
        """
        a = self._prepare(Ta, qa, gs, ga, Rn, G, P, gg, gr)
        gt, gc = self.conductances(a["gs"], a["ga"], a["gg"], a["gr"])
        q_sat = np.asarray(calc_q_sat(a["Ta"], a["P"]))
        z = self._lambertw_argument(a["Ta"], a["qa"], a["Rn"], a["G"], q_sat, gt, gc)
        return restore_type(z, Ta, qa, gs, ga, Rn, G, P, gg, gr)

    def _solve(self, a: Dict[str, np.ndarray]) -> Tuple[np.ndarray, np.ndarray]:
        """Return (LE, gt) for prepared inputs."""
        c = self.constants
        lam, rho = c.latent_heat, c.air_density
        cp, r_v = c.cp, c.r_v

        Ta, qa = a["Ta"], a["qa"]

        # Step 1: saturation humidity at air temperature
        q_sat = np.asarray(calc_q_sat(Ta, a["P"]))

        # Step 2: conductances
        gt, gc = self.conductances(a["gs"], a["ga"], a["gg"], a["gr"])

        # Step 3: Lambert W argument
        scale, exponent = self._lambertw_terms(Ta, qa, a["Rn"], a["G"], q_sat, gt, gc)
        z = self._compose_argument(scale, exponent)
        validate_lambertw_argument(z)

        # Step 4: principal branch; W0(scale * e^x) = omega(ln(scale) + x) where exp overflows
        overflow = np.isposinf(z)
        w = np.asarray(self.config.lambertw(np.where(overflow, 0.0, z)), dtype=np.float64)
        if np.any(overflow):
            count = int(np.count_nonzero(overflow))
            Logger.debug(f"Lambert W argument overflows for {count} element(s), solving in log space")
            log_z = np.log(np.where(overflow, scale, 1.0)) + exponent
            w = np.where(overflow, np.real(wrightomega(log_z)), w)

        # Step 5: latent heat flux
        le = (cp * gt * rho * r_v * Ta ** 2 / lam) * w - gc * rho * lam * qa

        return le, gt

    def _log_mode(self, a: Dict[str, np.ndarray]) -> None:
        coupled = bool(np.any(a["gg"] != 0) or np.any(a["gr"] != 0))
        mode = "radiatively coupled (Rn*, G*)" if coupled else "radiatively uncoupled"
        Logger.debug(f"Estimating LE for {a['Ta'].size} element(s), {mode}")

    def calculate(self, Ta, qa, gs, ga, Rn, G, P, gg, gr):
        """
        Estimate latent heat flux.

        If gr > 0, Rn must be Rn*; if gg > 0, G must be G* (Appendix B of
        McColl, 2020). Setting gg = gr = 0 gives the radiatively uncoupled
        equation.

        Args:
            Ta: Near-surface air temperature (K)
            qa: Near-surface specific humidity (-)
            gs: Surface conductance (m/s)
            ga: Aerodynamic conductance (m/s)
            Rn: Net radiation (W/m²)
            G: Ground heat flux (W/m²)
            P: Near-surface air pressure (Pa)
            gg: Storage conductance (m/s)
            gr: Radiative conductance (m/s)

        Returns:
            Estimated latent heat flux (W/m²), same shape as the inputs

        Raises:
            InputShapeMismatchError: Batch inputs differ in shape
            DegenerateConductanceError: gs + ga = 0 or ga + gg + gr = 0
            DomainInputError: Ta = 0 or Lambert W argument below -1/e
        """
        a = self._prepare(Ta, qa, gs, ga, Rn, G, P, gg, gr)
        self._log_mode(a)

        le, _ = self._solve(a)

        return restore_type(le, Ta, qa, gs, ga, Rn, G, P, gg, gr)

    def estimate_surface_temperature(self, Ta, qa, gs, ga, Rn, G, P, gg, gr):
        """
        Estimate surface temperature consistent with the LE solution.

        Ts = Ta + (Rn - G - LE) / (ρ * cp * gt)

        Args:
            Ta, qa, gs, ga, Rn, G, P, gg, gr: See calculate()

        Returns:
            Estimated surface temperature (K)
        """
        _, ts = self.calculate_with_surface_temperature(Ta, qa, gs, ga, Rn, G, P, gg, gr)
        return ts

    def calculate_with_surface_temperature(self, Ta, qa, gs, ga, Rn, G, P, gg, gr):
        """
        Estimate latent heat flux and surface temperature together.

        Args:
            Ta, qa, gs, ga, Rn, G, P, gg, gr: See calculate()

        Returns:
            Tuple of (LE in W/m², Ts in K)
        """
        a = self._prepare(Ta, qa, gs, ga, Rn, G, P, gg, gr)
        self._log_mode(a)

        le, gt = self._solve(a)

        c = self.constants
        sensible = a["Rn"] - a["G"] - le
        ts = a["Ta"] + sensible / (c.air_density * c.cp * gt)

        templates = (Ta, qa, gs, ga, Rn, G, P, gg, gr)
        return restore_type(le, *templates), restore_type(ts, *templates)


_default_estimator = LambertET()


def create_lambert_et(
    lambertw: Optional[LambertWSolver] = None,
    constants: Optional[PhysicalConstants] = None
) -> LambertET:
    """
    Factory function to create LambertET instance.

    Args:
        lambertw: Principal-branch Lambert W solver (default: scipy)
        constants: Physical constants (default: PHYSICAL_CONSTANTS)

    Returns:
        Configured LambertET instance
    """
    config = LambertETConfig(
        constants=constants or PHYSICAL_CONSTANTS,
        lambertw=lambertw or principal_lambertw
    )
    return LambertET(config)


def estimate_ET(Ta, qa, gs, ga, Rn, G, P, gg, gr, lambertw: Optional[LambertWSolver] = None):
    """
    Estimate latent heat flux (W/m²) with the McColl (2020) equation.

    Set gg = gr = 0 for the radiatively uncoupled equation. With gr > 0
    or gg > 0, pass Rn* and G* instead of Rn and G.

    Args:
        Ta: Near-surface air temperature (K)
        qa: Near-surface specific humidity (-)
        gs: Surface conductance (m/s)
        ga: Aerodynamic conductance (m/s)
        Rn: Net radiation (W/m²)
        G: Ground heat flux (W/m²)
        P: Near-surface air pressure (Pa)
        gg: Storage conductance (m/s)
        gr: Radiative conductance (m/s)
        lambertw: Optional principal-branch Lambert W solver

    Returns:
        Estimated latent heat flux (W/m²)
    """
    estimator = _default_estimator if lambertw is None else create_lambert_et(lambertw=lambertw)
    return estimator.calculate(Ta, qa, gs, ga, Rn, G, P, gg, gr)


def estimate_ET_and_Ts(Ta, qa, gs, ga, Rn, G, P, gg, gr, lambertw: Optional[LambertWSolver] = None):
    """
    Estimate latent heat flux (W/m²) and surface temperature (K).

    Args:
        Ta, qa, gs, ga, Rn, G, P, gg, gr: See estimate_ET()
        lambertw: Optional principal-branch Lambert W solver

    Returns:
        Tuple of (LE_est, Ts_est)
    """
    estimator = _default_estimator if lambertw is None else create_lambert_et(lambertw=lambertw)
    return estimator.calculate_with_surface_temperature(Ta, qa, gs, ga, Rn, G, P, gg, gr)
