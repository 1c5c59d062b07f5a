"""
Principal branch of the Lambert W function.

W0(z) is the real solution w of w * exp(w) = z for z >= -1/e. The ET
estimator takes the solver as a plain callable so a different numerical
routine can be swapped in without touching the ET formula.
"""

from typing import Callable
import numpy as np
from scipy.special import lambertw

from lambert_et.utils.validation import LAMBERTW_BRANCH_POINT, validate_lambertw_argument

LambertWSolver = Callable[[np.ndarray], np.ndarray]


def principal_lambertw(z, tol: float = 1e-8) -> np.ndarray:
    """
    Evaluate the real principal branch W0(z).

    Args:
        z: Argument, scalar or array, z >= -1/e
        tol: Halley iteration tolerance passed to scipy

    Returns:
        Real-valued W0(z), same shape as z
    """
    z = np.asarray(z, dtype=np.float64)
    validate_lambertw_argument(z)
    w = np.real(lambertw(z, k=0, tol=tol))
    # scipy returns NaN at the branch point itself, where W0 = -1
    return np.where(z <= LAMBERTW_BRANCH_POINT, -1.0, w)
