"""
Tests for fuzzy logic membership function implementations.
"""

import math

import numpy as np
import pytest

from fuzzyvis.errors import (
    ConstraintViolationError,
    ErrorCodes,
    MembershipError,
    ParameterTypeError,
)
from fuzzyvis.fuzzy.membership import (
    complement,
    gaussian,
    generalized_bell,
    left_shoulder,
    pi_curve,
    right_shoulder,
    s_curve,
    sigmoid,
    singleton,
    trapezoidal,
    triangular,
    z_curve,
)


class TestTriangular:
    """Tests for the triangular membership function."""

    def test_key_points(self):
        """Test evaluation at the feet and the peak."""
        assert triangular(0, 0, 5, 10) == 0.0  # At a
        assert triangular(5, 0, 5, 10) == 1.0  # At b (peak)
        assert triangular(10, 0, 5, 10) == 0.0  # At c

    def test_slopes(self):
        """Test linear interpolation on both slopes."""
        assert triangular(2.5, 0, 5, 10) == 0.5
        assert triangular(7.5, 0, 5, 10) == 0.5
        assert triangular(1, 0, 5, 10) == pytest.approx(0.2)
        assert triangular(9, 0, 5, 10) == pytest.approx(0.2)

    def test_outside_support(self):
        """Test values left of a and right of c."""
        assert triangular(-100, 0, 5, 10) == 0.0
        assert triangular(100, 0, 5, 10) == 0.0

    def test_degenerate_shapes(self):
        """Test that zero-width slopes still peak at b."""
        # a = b < c
        assert triangular(0, 0, 0, 10) == 1.0
        assert triangular(5, 0, 0, 10) == 0.5
        # a < b = c
        assert triangular(10, 0, 10, 10) == 1.0
        assert triangular(5, 0, 10, 10) == 0.5
        # a = b = c
        assert triangular(3, 3, 3, 3) == 1.0
        assert triangular(3.5, 3, 3, 3) == 0.0

    def test_huge_magnitudes(self):
        """Test that spans overflowing to infinity still interpolate."""
        assert triangular(0.9e308, -1e308, 1e308, 1e308) == pytest.approx(0.95)
        # Only the span overflows
        assert triangular(0.0, -1e308, 1e308, 1e308) == pytest.approx(0.5)
        assert s_curve(0.0, -1e308, 1e308) == pytest.approx(0.5)
        assert z_curve(0.0, -1e308, 1e308) == pytest.approx(0.5)
        assert trapezoidal(0.0, -1e308, 1e308, 1e308, 1e308) == pytest.approx(0.5)

    def test_invalid_ordering(self):
        """Test that unordered parameters are rejected."""
        with pytest.raises(ConstraintViolationError) as exc_info:
            triangular(5, 3, 2, 1)
        assert str(exc_info.value) == "triangular: require a <= b <= c"

        with pytest.raises(ConstraintViolationError):
            triangular(5, 0, 10, 5)  # b > c

    def test_numpy_scalars(self):
        """Test that numpy scalar inputs are accepted."""
        assert triangular(np.float64(2.5), 0, np.int64(5), 10) == 0.5


class TestTrapezoidal:
    """Tests for the trapezoidal membership function."""

    def test_key_points(self):
        """Test evaluation at the feet and on the plateau."""
        assert trapezoidal(0, 0, 2, 8, 10) == 0.0
        assert trapezoidal(2, 0, 2, 8, 10) == 1.0
        assert trapezoidal(5, 0, 2, 8, 10) == 1.0
        assert trapezoidal(8, 0, 2, 8, 10) == 1.0
        assert trapezoidal(10, 0, 2, 8, 10) == 0.0

    def test_slopes(self):
        """Test linear interpolation on both slopes."""
        assert trapezoidal(1, 0, 2, 8, 10) == 0.5
        assert trapezoidal(9, 0, 2, 8, 10) == 0.5

    def test_degenerate_shapes(self):
        """Test that collapsed shapes reach 1 on the plateau."""
        # Triangle shaped trapezoid (b = c)
        assert trapezoidal(5, 0, 5, 5, 10) == 1.0
        # Rectangle (a = b, c = d)
        assert trapezoidal(0, 0, 0, 10, 10) == 1.0
        assert trapezoidal(10, 0, 0, 10, 10) == 1.0
        assert trapezoidal(11, 0, 0, 10, 10) == 0.0
        # Single point
        assert trapezoidal(3, 3, 3, 3, 3) == 1.0

    def test_invalid_ordering(self):
        """Test that unordered parameters are rejected."""
        with pytest.raises(ConstraintViolationError) as exc_info:
            trapezoidal(5, 0, 8, 2, 10)
        assert str(exc_info.value) == "trapezoidal: require a <= b <= c <= d"


class TestGaussian:
    """Tests for the gaussian membership function."""

    def test_center_and_spread(self):
        """Test the peak and one standard deviation away."""
        assert gaussian(0, 0, 1) == 1.0
        assert gaussian(1, 0, 1) == pytest.approx(math.exp(-0.5))
        assert gaussian(-1, 0, 1) == pytest.approx(math.exp(-0.5))
        assert gaussian(50, 50, 10) == 1.0

    def test_far_tail(self):
        """Test that far values underflow to 0 without errors."""
        assert gaussian(1e6, 0, 1) == 0.0

    def test_invalid_sigma(self):
        """Test that sigma must be strictly positive."""
        with pytest.raises(ConstraintViolationError) as exc_info:
            gaussian(0, 0, 0)
        assert str(exc_info.value) == "gaussian: require sigma > 0"

        with pytest.raises(ConstraintViolationError):
            gaussian(0, 0, -1)

    def test_non_finite_sigma(self):
        """Test that a NaN sigma is a type error, not a constraint error."""
        with pytest.raises(ParameterTypeError) as exc_info:
            gaussian(0, 0, float("nan"))
        assert str(exc_info.value) == "gaussian: parameter 'sigma' must be a finite number."


class TestGeneralizedBell:
    """Tests for the generalized bell membership function."""

    def test_key_points(self):
        """Test the center and the half-height points c +/- a."""
        assert generalized_bell(0, 2, 1, 0) == 1.0
        assert generalized_bell(2, 2, 1, 0) == 0.5
        assert generalized_bell(-2, 2, 1, 0) == 0.5

    def test_negative_width(self):
        """Test that only |a| matters."""
        assert generalized_bell(2, -2, 1, 0) == 0.5
        assert generalized_bell(1, -2, 3, 0) == generalized_bell(1, 2, 3, 0)

    def test_overflow_returns_zero(self):
        """Test that an overflowing power gives 0 instead of raising."""
        assert generalized_bell(1e200, 1, 1, 0) == 0.0

    def test_invalid_parameters(self):
        """Test the width and slope constraints."""
        with pytest.raises(ConstraintViolationError) as exc_info:
            generalized_bell(0, 0, 1, 0)
        assert str(exc_info.value) == "generalizedBell: require a != 0"

        with pytest.raises(ConstraintViolationError) as exc_info:
            generalized_bell(0, 1, 0, 0)
        assert str(exc_info.value) == "generalizedBell: require b > 0"


class TestSigmoid:
    """Tests for the sigmoid membership function."""

    def test_crossover(self):
        """Test that the center always maps to 0.5."""
        assert sigmoid(5, 2, 5) == 0.5
        assert sigmoid(5, -2, 5) == 0.5

    def test_direction(self):
        """Test rising and falling slopes."""
        assert sigmoid(6, 1, 5) > 0.5
        assert sigmoid(6, -1, 5) < 0.5
        assert sigmoid(1, 1, 0) == pytest.approx(1 / (1 + math.exp(-1)))

    def test_saturation(self):
        """Test extreme inputs without overflow."""
        assert sigmoid(1000, 1, 0) == 1.0
        assert sigmoid(-1000, 1, 0) == 0.0
        assert sigmoid(1e308, 1e308, -1e308) == 1.0

    def test_zero_slope(self):
        """Test that a flat sigmoid is constant 0.5."""
        assert sigmoid(-1e308, 0, 1e308) == 0.5
        assert sigmoid(3, 0, 0) == 0.5

    def test_non_finite_input(self):
        """Test that infinite inputs are rejected."""
        with pytest.raises(ParameterTypeError) as exc_info:
            sigmoid(float("inf"), 1, 0)
        assert "parameter 'x'" in str(exc_info.value)


class TestSCurveZCurve:
    """Tests for the S-shaped and Z-shaped membership functions."""

    def test_s_curve(self):
        """Test S-curve key points."""
        assert s_curve(0, 0, 10) == 0.0
        assert s_curve(2.5, 0, 10) == 0.125
        assert s_curve(5, 0, 10) == 0.5
        assert s_curve(7.5, 0, 10) == 0.875
        assert s_curve(10, 0, 10) == 1.0
        assert s_curve(-5, 0, 10) == 0.0
        assert s_curve(15, 0, 10) == 1.0

    def test_z_curve(self):
        """Test Z-curve key points."""
        assert z_curve(0, 0, 10) == 1.0
        assert z_curve(2.5, 0, 10) == 0.875
        assert z_curve(5, 0, 10) == 0.5
        assert z_curve(7.5, 0, 10) == 0.125
        assert z_curve(10, 0, 10) == 0.0

    def test_invalid_parameters(self):
        """Test that the transition must have positive width."""
        with pytest.raises(ConstraintViolationError) as exc_info:
            s_curve(0, 5, 5)
        assert str(exc_info.value) == "sCurve: require a < b"

        with pytest.raises(ConstraintViolationError) as exc_info:
            z_curve(0, 10, 0)
        assert str(exc_info.value) == "zCurve: require a < b"


class TestPiCurve:
    """Tests for the Pi-shaped membership function."""

    def test_key_points(self):
        """Test the feet, the plateau and the midpoints of the slopes."""
        assert pi_curve(0, 0, 2, 8, 10) == 0.0
        assert pi_curve(1, 0, 2, 8, 10) == 0.5
        assert pi_curve(2, 0, 2, 8, 10) == 1.0
        assert pi_curve(5, 0, 2, 8, 10) == 1.0
        assert pi_curve(9, 0, 2, 8, 10) == 0.5
        assert pi_curve(10, 0, 2, 8, 10) == 0.0

    def test_degenerate_shapes(self):
        """Test zero-width slopes and plateau."""
        assert pi_curve(0, 0, 0, 10, 10) == 1.0
        assert pi_curve(5, 0, 5, 5, 10) == 1.0
        assert pi_curve(3, 3, 3, 3, 3) == 1.0

    def test_invalid_ordering(self):
        """Test that unordered parameters are rejected."""
        with pytest.raises(ConstraintViolationError) as exc_info:
            pi_curve(0, 10, 2, 8, 0)
        assert str(exc_info.value) == "piCurve: require a <= b <= c <= d"


class TestShoulders:
    """Tests for the left and right shoulder aliases."""

    def test_left_shoulder_matches_z_curve(self):
        """Test that the left shoulder is the Z-curve."""
        for x in (-1, 0, 2.5, 5, 7.5, 10, 11):
            assert left_shoulder(x, 0, 10) == z_curve(x, 0, 10)

    def test_right_shoulder_matches_s_curve(self):
        """Test that the right shoulder is the S-curve."""
        for x in (-1, 0, 2.5, 5, 7.5, 10, 11):
            assert right_shoulder(x, 0, 10) == s_curve(x, 0, 10)

    def test_errors_use_curve_names(self):
        """Test that shoulder errors are reported under the curve names."""
        with pytest.raises(ConstraintViolationError) as exc_info:
            left_shoulder(5, 3, 3)
        assert str(exc_info.value) == "zCurve: require a < b"
        assert exc_info.value.function_name == "zCurve"

        with pytest.raises(ConstraintViolationError) as exc_info:
            right_shoulder(5, 3, 3)
        assert str(exc_info.value) == "sCurve: require a < b"


class TestSingleton:
    """Tests for the singleton membership function."""

    def test_exact_match(self):
        """Test that only the exact point has membership."""
        assert singleton(3, 3) == 1.0
        assert singleton(3.0, 3) == 1.0
        assert singleton(3.0000001, 3) == 0.0
        assert singleton(-3, 3) == 0.0

    def test_non_finite_center(self):
        """Test that the center must be finite."""
        with pytest.raises(ParameterTypeError) as exc_info:
            singleton(0, float("-inf"))
        assert str(exc_info.value) == "singleton: parameter 'c' must be a finite number."


class TestComplement:
    """Tests for the complement operator."""

    def test_complement(self):
        """Test complement inside and outside [0, 1]."""
        assert complement(0.0) == 1.0
        assert complement(1.0) == 0.0
        assert complement(0.25) == 0.75
        assert complement(1.5) == 0.0
        assert complement(-0.5) == 1.0

    def test_involution(self):
        """Test that applying the complement twice restores the degree."""
        mu = triangular(2.5, 0, 5, 10)
        assert complement(complement(mu)) == mu

    def test_non_finite(self):
        """Test that NaN degrees are rejected."""
        with pytest.raises(ParameterTypeError) as exc_info:
            complement(float("nan"))
        assert str(exc_info.value) == "complement: mu must be a finite number"


class TestValidation:
    """Tests for argument validation shared by every function."""

    @pytest.mark.parametrize(
        "value", [float("nan"), float("inf"), float("-inf"), True, "1", None]
    )
    def test_rejects_non_finite_x(self, value):
        """Test that x must be a finite real number."""
        with pytest.raises(ParameterTypeError) as exc_info:
            triangular(value, 0, 5, 10)
        assert str(exc_info.value) == "triangular: parameter 'x' must be a finite number."

    def test_type_checked_before_constraints(self):
        """Test that a non-finite value wins over an ordering violation."""
        with pytest.raises(ParameterTypeError) as exc_info:
            triangular(0, 3, 2, float("inf"))
        assert "parameter 'c'" in str(exc_info.value)

    def test_rejects_integers_beyond_float_range(self):
        """Test that integers too large for a float are type errors."""
        with pytest.raises(ParameterTypeError) as exc_info:
            triangular(10**400, 0, 5, 10)
        assert str(exc_info.value) == "triangular: parameter 'x' must be a finite number."

        with pytest.raises(ParameterTypeError) as exc_info:
            gaussian(0, 0, -(10**400))
        assert exc_info.value.details["parameter"] == "sigma"

    def test_first_bad_parameter_reported(self):
        """Test that parameters are checked in declaration order."""
        with pytest.raises(ParameterTypeError) as exc_info:
            trapezoidal(0, 0, float("nan"), float("nan"), 1)
        assert exc_info.value.details["parameter"] == "b"

    def test_error_metadata(self):
        """Test error codes and details attached to membership errors."""
        with pytest.raises(MembershipError) as exc_info:
            gaussian(0, 0, -1)
        error = exc_info.value
        assert error.error_code == ErrorCodes.MF_CONSTRAINT_VIOLATION
        assert error.function_name == "gaussian"
        assert error.details["parameters"] == {"sigma": -1}

        with pytest.raises(MembershipError) as exc_info:
            gaussian(0, None, 1)
        assert exc_info.value.error_code == ErrorCodes.MF_NON_FINITE_PARAMETER
        assert exc_info.value.details["parameter"] == "mu"
