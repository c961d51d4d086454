"""
Membership function definitions for fuzzy logic.

Every function maps a crisp input ``x`` and a fixed number of shape
parameters to a membership degree in [0, 1]. Functions are pure: they hold
no state and produce no side effects.

Validation happens eagerly on every call, in two stages:

1. every argument must be a finite real number (``bool``, NaN and
   infinities are rejected) -> ParameterTypeError
2. the shape constraint (ordering / positivity) must hold
   -> ConstraintViolationError

Error messages have the form ``"<functionName>: <description>"``.
"""

import math
from numbers import Real
from typing import Any, Sequence

import numpy as np

from fuzzyvis.errors import (
    ConstraintViolationError,
    ErrorCodes,
    ParameterTypeError,
)

# Stand-in width for zero-width ramps (a == b or b == c)
_EPS = float(np.finfo(float).eps)


def _clamp01(value: float) -> float:
    if value <= 0.0:
        return 0.0
    if value >= 1.0:
        return 1.0
    return value


def _is_finite_number(value: Any) -> bool:
    if not isinstance(value, Real) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # Integers beyond the float range
        return False


def _assert_finite_numbers(name: str, values: Sequence[tuple[str, Any]]) -> None:
    """
    Check that every labelled value is a finite real number.

    Args:
        name: Function name used as the message prefix
        values: (label, value) pairs in declaration order

    Raises:
        ParameterTypeError: For the first value that is not a finite number
    """
    for label, value in values:
        if not _is_finite_number(value):
            raise ParameterTypeError(
                message=f"{name}: parameter '{label}' must be a finite number.",
                error_code=ErrorCodes.MF_NON_FINITE_PARAMETER,
                details={"function": name, "parameter": label, "value": repr(value)},
            )


def _require(condition: bool, name: str, constraint: str, **parameters: float) -> None:
    if not condition:
        raise ConstraintViolationError(
            message=f"{name}: require {constraint}",
            error_code=ErrorCodes.MF_CONSTRAINT_VIOLATION,
            details={"function": name, "constraint": constraint, "parameters": parameters},
        )


def _fraction(x: float, start: float, end: float) -> float:
    """Position of ``x`` along the segment start -> end (0 at start, 1 at end)."""
    offset = x - start
    span = end - start
    if math.isinf(offset) or math.isinf(span):
        # A difference overflowed; halving both keeps their ratio
        offset = x / 2 - start / 2
        span = end / 2 - start / 2
    return offset / (span or _EPS)


def triangular(x: float, a: float, b: float, c: float) -> float:
    """
    Triangular membership function.

    μ(x; a, b, c) =
      - 1,                 x = b
      - 0,                 x <= a or x >= c
      - (x - a) / (b - a), a < x < b
      - (c - x) / (c - b), b < x < c

    Constraints: a <= b <= c

    The peak is checked first, so degenerate shapes (a = b or b = c) still
    reach 1 at b.

    Args:
        x: Input value
        a: Left foot
        b: Peak
        c: Right foot

    Returns:
        Degree of membership in [0, 1]
    """
    _assert_finite_numbers("triangular", [("x", x), ("a", a), ("b", b), ("c", c)])
    _require(a <= b <= c, "triangular", "a <= b <= c", a=a, b=b, c=c)

    if x == b:
        return 1.0
    if x <= a or x >= c:
        return 0.0
    if x < b:
        return _clamp01(_fraction(x, a, b))
    return _clamp01(_fraction(x, c, b))


def trapezoidal(x: float, a: float, b: float, c: float, d: float) -> float:
    """
    Trapezoidal membership function with a plateau between b and c.

    μ(x; a, b, c, d) =
      - 1,                 b <= x <= c
      - 0,                 x <= a or x >= d
      - (x - a) / (b - a), a < x < b
      - (d - x) / (d - c), c < x < d

    Constraints: a <= b <= c <= d

    Args:
        x: Input value
        a: Left foot
        b: Left shoulder (start of plateau)
        c: Right shoulder (end of plateau)
        d: Right foot

    Returns:
        Degree of membership in [0, 1]
    """
    _assert_finite_numbers(
        "trapezoidal", [("x", x), ("a", a), ("b", b), ("c", c), ("d", d)]
    )
    _require(
        a <= b <= c <= d, "trapezoidal", "a <= b <= c <= d", a=a, b=b, c=c, d=d
    )

    if b <= x <= c:
        return 1.0
    if x <= a or x >= d:
        return 0.0
    if x < b:
        return _clamp01(_fraction(x, a, b))
    return _clamp01(_fraction(x, d, c))


def gaussian(x: float, mu: float, sigma: float) -> float:
    """
    Gaussian membership function.

    μ(x; μ, σ) = exp(-(x - μ)² / (2σ²))

    Constraints: σ > 0

    Args:
        x: Input value
        mu: Center (mean)
        sigma: Standard deviation

    Returns:
        Degree of membership in [0, 1]
    """
    _assert_finite_numbers("gaussian", [("x", x), ("mu", mu), ("sigma", sigma)])
    _require(sigma > 0, "gaussian", "sigma > 0", sigma=sigma)

    z = (x - mu) / sigma
    return _clamp01(math.exp(-0.5 * z * z))


def generalized_bell(x: float, a: float, b: float, c: float) -> float:
    """
    Generalized bell-shaped membership function.

    μ(x; a, b, c) = 1 / (1 + |(x - c) / a|^(2b))

    Constraints: a != 0, b > 0

    Args:
        x: Input value
        a: Width (|a| controls the spread)
        b: Slope
        c: Center

    Returns:
        Degree of membership in [0, 1]
    """
    _assert_finite_numbers(
        "generalizedBell", [("x", x), ("a", a), ("b", b), ("c", c)]
    )
    _require(a != 0, "generalizedBell", "a != 0", a=a)
    _require(b > 0, "generalizedBell", "b > 0", b=b)

    t = abs((x - c) / a)
    try:
        power = t ** (2 * b)
    except OverflowError:
        return 0.0
    return _clamp01(1 / (1 + power))


def sigmoid(x: float, a: float, c: float) -> float:
    """
    Sigmoid membership function.

    μ(x; a, c) = 1 / (1 + exp(-a(x - c)))

    A positive slope rises, a negative slope falls and a = 0 gives a
    constant 0.5.

    Args:
        x: Input value
        a: Slope
        c: Center (crossover point)

    Returns:
        Degree of membership in [0, 1]
    """
    _assert_finite_numbers("sigmoid", [("x", x), ("a", a), ("c", c)])

    if a == 0:
        return 0.5
    z = a * (x - c)
    if z >= 0:
        return _clamp01(1 / (1 + math.exp(-z)))
    e = math.exp(z)
    return _clamp01(e / (1 + e))


def s_curve(x: float, a: float, b: float) -> float:
    """
    S-shaped (increasing) membership function.

    Smoothly transitions from 0 at a to 1 at b. With t = (x - a) / (b - a):
    2t² for t <= 0.5, then 1 - 2(1 - t)².

    Constraints: a < b

    Args:
        x: Input value
        a: Start of transition
        b: End of transition

    Returns:
        Degree of membership in [0, 1]
    """
    _assert_finite_numbers("sCurve", [("x", x), ("a", a), ("b", b)])
    _require(a < b, "sCurve", "a < b", a=a, b=b)

    if x <= a:
        return 0.0
    if x >= b:
        return 1.0
    t = _fraction(x, a, b)
    if t <= 0.5:
        return _clamp01(2 * t * t)
    u = 1 - t
    return _clamp01(1 - 2 * u * u)


def z_curve(x: float, a: float, b: float) -> float:
    """
    Z-shaped (decreasing) membership function.

    Mirror of s_curve: 1 at a, 0 at b. With t = (x - a) / (b - a):
    1 - 2t² for t <= 0.5, then 2(1 - t)².

    Constraints: a < b

    Args:
        x: Input value
        a: Start of transition (where it starts to decrease)
        b: End of transition (where it reaches 0)

    Returns:
        Degree of membership in [0, 1]
    """
    _assert_finite_numbers("zCurve", [("x", x), ("a", a), ("b", b)])
    _require(a < b, "zCurve", "a < b", a=a, b=b)

    if x <= a:
        return 1.0
    if x >= b:
        return 0.0
    t = _fraction(x, a, b)
    if t <= 0.5:
        return _clamp01(1 - 2 * t * t)
    u = 1 - t
    return _clamp01(2 * u * u)


def pi_curve(x: float, a: float, b: float, c: float, d: float) -> float:
    """
    Π-shaped membership function.

    Rises from 0 at a to 1 at b (s_curve), stays at 1 until c, then falls
    to 0 at d (z_curve).

    Constraints: a <= b <= c <= d

    Args:
        x: Input value
        a: Left foot
        b: Left shoulder
        c: Right shoulder
        d: Right foot

    Returns:
        Degree of membership in [0, 1]
    """
    _assert_finite_numbers(
        "piCurve", [("x", x), ("a", a), ("b", b), ("c", c), ("d", d)]
    )
    _require(a <= b <= c <= d, "piCurve", "a <= b <= c <= d", a=a, b=b, c=c, d=d)

    if b <= x <= c:
        return 1.0
    if x <= a or x >= d:
        return 0.0
    if x < b:
        return s_curve(x, a, b)
    return z_curve(x, c, d)


def left_shoulder(x: float, a: float, b: float) -> float:
    """
    Left shoulder: 1 at or left of a, 0 at or right of b.

    Same curve (and same validation) as z_curve(x, a, b).
    """
    return z_curve(x, a, b)


def right_shoulder(x: float, a: float, b: float) -> float:
    """
    Right shoulder: 0 at or left of a, 1 at or right of b.

    Same curve (and same validation) as s_curve(x, a, b).
    """
    return s_curve(x, a, b)


def singleton(x: float, c: float) -> float:
    """
    Crisp (singleton) membership: 1 when x == c, else 0.

    Equality is strict; there is no tolerance band.
    """
    _assert_finite_numbers("singleton", [("x", x), ("c", c)])
    return 1.0 if x == c else 0.0


def complement(mu: float) -> float:
    """
    Complement of a membership degree.

    Args:
        mu: Membership degree; values outside [0, 1] are accepted

    Returns:
        1 - mu, clamped to [0, 1]
    """
    if not _is_finite_number(mu):
        raise ParameterTypeError(
            message="complement: mu must be a finite number",
            error_code=ErrorCodes.MF_NON_FINITE_PARAMETER,
            details={"function": "complement", "parameter": "mu", "value": repr(mu)},
        )
    return _clamp01(1 - mu)
