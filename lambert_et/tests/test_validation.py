"""
Unit tests for validation utilities of lambert_et.

Tests input coercion, shape checks and numerical guards.
"""

import pytest
import numpy as np
import pandas as pd
import xarray as xr
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


class TestInputCoercion:
    """Test to_numpy and restore_type."""

    def test_scalar_to_0d(self):
        """Test scalars become 0-d float arrays."""
        from lambert_et.utils.validation import to_numpy

        arr = to_numpy(293.15)
        assert arr.ndim == 0
        assert arr.dtype == np.float64

    def test_labelled_inputs(self):
        """Test pandas and xarray inputs are unwrapped."""
        from lambert_et.utils.validation import to_numpy

        series = pd.Series([1.0, 2.0, 3.0])
        grid = xr.DataArray(np.ones((2, 2)), dims=["y", "x"])

        assert isinstance(to_numpy(series), np.ndarray)
        assert to_numpy(grid).shape == (2, 2)

    def test_non_numeric_input(self):
        """Test non-numeric input raises DataInputError."""
        from lambert_et.utils.validation import to_numpy
        from lambert_et.utils.exceptions import DataInputError

        with pytest.raises(DataInputError) as exc_info:
            to_numpy("warm", name="Ta")

        assert exc_info.value.details["input"] == "Ta"

    def test_restore_scalar(self):
        """Test 0-d results become floats."""
        from lambert_et.utils.validation import restore_type

        assert isinstance(restore_type(np.asarray(1.5), 1.0, 2.0), float)

    def test_restore_series(self):
        """Test results take the first labelled template."""
        from lambert_et.utils.validation import restore_type

        index = pd.Index([10, 20, 30])
        result = restore_type(np.arange(3.0), 1.0, pd.Series([0.0, 0.0, 0.0], index=index))

        assert isinstance(result, pd.Series)
        assert result.index.equals(index)


class TestBroadcastInputs:
    """Test broadcast_inputs shape rules."""

    def test_scalars_only(self):
        """Test all-scalar inputs stay 0-d."""
        from lambert_et.utils.validation import broadcast_inputs

        arrays = broadcast_inputs(a=1.0, b=2.0)
        assert arrays["a"].shape == ()
        assert arrays["b"].shape == ()

    def test_scalar_expands_to_batch(self):
        """Test scalars expand to the batch shape."""
        from lambert_et.utils.validation import broadcast_inputs

        arrays = broadcast_inputs(a=np.zeros((2, 3)), b=5.0)
        assert arrays["b"].shape == (2, 3)
        assert np.all(arrays["b"] == 5.0)

    def test_mismatched_lengths(self):
        """Test batches of different lengths are rejected."""
        from lambert_et.utils.validation import broadcast_inputs
        from lambert_et.utils.exceptions import InputShapeMismatchError

        with pytest.raises(InputShapeMismatchError) as exc_info:
            broadcast_inputs(a=np.zeros(3), b=np.zeros(4), c=1.0)

        assert exc_info.value.details["shapes"] == {"a": (3,), "b": (4,)}

    def test_no_partial_broadcasting(self):
        """Test (3,) and (1,) are not combined."""
        from lambert_et.utils.validation import broadcast_inputs
        from lambert_et.utils.exceptions import InputShapeMismatchError

        with pytest.raises(InputShapeMismatchError):
            broadcast_inputs(a=np.zeros(3), b=np.zeros(1))


class TestRangeChecks:
    """Test check_temperature_range."""

    def test_in_range(self):
        """Test temperatures inside the calibration range."""
        from lambert_et.utils.validation import check_temperature_range

        is_valid, msg = check_temperature_range(np.array([-30.0, 0.0, 35.0]))
        assert is_valid is True

    def test_out_of_range(self):
        """Test temperatures outside the calibration range."""
        from lambert_et.utils.validation import check_temperature_range

        is_valid, msg = check_temperature_range(np.array([-40.0, 10.0, 40.0]))
        assert is_valid is False
        assert "2 of 3" in msg

    def test_nan_ignored(self):
        """Test missing values do not count as out of range."""
        from lambert_et.utils.validation import check_temperature_range

        is_valid, _ = check_temperature_range(np.array([np.nan, 20.0]))
        assert is_valid is True


class TestNumericalGuards:
    """Test guards against divisions by zero and invalid Lambert W arguments."""

    def test_branch_point(self):
        """Test the branch point constant is -1/e."""
        from lambert_et.utils.validation import LAMBERTW_BRANCH_POINT

        assert LAMBERTW_BRANCH_POINT == pytest.approx(-0.36787944117144233)

    def test_argument_at_branch_point_allowed(self):
        """Test z = -1/e itself is accepted."""
        from lambert_et.utils.validation import validate_lambertw_argument, LAMBERTW_BRANCH_POINT

        validate_lambertw_argument(np.array([LAMBERTW_BRANCH_POINT, 0.0, 5.0, np.nan]))

    def test_argument_below_branch_point(self):
        """Test z < -1/e raises with the offending minimum."""
        from lambert_et.utils.validation import validate_lambertw_argument
        from lambert_et.utils.exceptions import DomainInputError

        with pytest.raises(DomainInputError) as exc_info:
            validate_lambertw_argument(np.array([0.5, -0.5, -2.0]))

        assert exc_info.value.details["count"] == 2
        assert exc_info.value.details["min_value"] == -2.0

    def test_conductances_valid(self):
        """Test non-degenerate conductances pass."""
        from lambert_et.utils.validation import validate_conductances

        validate_conductances(np.array([0.0, 0.01]), np.array([0.02, 0.02]), np.array([0.02, 0.03]))

    def test_temperature_zero(self):
        """Test zero Kelvin is rejected."""
        from lambert_et.utils.validation import validate_temperature
        from lambert_et.utils.exceptions import DomainInputError

        with pytest.raises(DomainInputError):
            validate_temperature(np.array([293.0, 0.0]))


class TestPrincipalLambertW:
    """Test the default Lambert W solver."""

    def test_known_values(self):
        """Test W0 at 0, e and -1/e."""
        from lambert_et.et.lambertw import principal_lambertw

        w = principal_lambertw(np.array([0.0, np.e, -np.exp(-1.0)]))

        assert w[0] == pytest.approx(0.0, abs=1e-15)
        assert w[1] == pytest.approx(1.0, rel=1e-10)
        assert w[2] == pytest.approx(-1.0, abs=1e-6)

    def test_branch_point_is_real(self):
        """Test a scalar argument of exactly -1/e gives W0 = -1, not NaN."""
        from lambert_et.et.lambertw import principal_lambertw
        from lambert_et.utils.validation import LAMBERTW_BRANCH_POINT

        w = principal_lambertw(LAMBERTW_BRANCH_POINT)

        assert np.isrealobj(w)
        assert not np.isnan(w)
        assert float(w) == -1.0

    def test_inverse_identity(self):
        """Test w * exp(w) = z over several orders of magnitude."""
        from lambert_et.et.lambertw import principal_lambertw

        z = np.array([-0.3, -0.1, 1e-6, 0.5, 10.0, 1e3, 1e8])
        w = principal_lambertw(z)

        assert np.isrealobj(w)
        np.testing.assert_allclose(w * np.exp(w), z, rtol=1e-8)

    def test_rejects_below_branch_point(self):
        """Test arguments below -1/e are rejected."""
        from lambert_et.et.lambertw import principal_lambertw
        from lambert_et.utils.exceptions import DomainInputError

        with pytest.raises(DomainInputError):
            principal_lambertw(-0.5)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
