"""Elementary math functions built from series expansions and simple loops.

Domain errors give NaN rather than raising, and poles give infinities,
so results can be compared directly with those of the C maths library.
"""

from __future__ import annotations

import math

PI = 3.1415926535897932
E = 2.7182818284590452
PI_2 = 1.57079632679489661923
LN2 = 0.6931471805599453

NAN = float("nan")
INF = float("inf")

_TWO_PI = 2 * PI
_EXP_EPSILON = 1e-8
_SIN_TERMS = 15
_ATAN_INNER_TERMS = 5000
_ATAN_OUTER_TERMS = 7000
_LOG_ITERATIONS = 10

__all__ = [
    "PI",
    "E",
    "PI_2",
    "LN2",
    "NAN",
    "INF",
    "abs_int",
    "fabs",
    "fmod",
    "ceil",
    "floor",
    "factorial",
    "int_power",
    "power",
    "sqrt",
    "exp",
    "log",
    "acos",
    "asin",
    "atan",
    "cos",
    "sin",
    "tan",
]


def abs_int(x: int) -> int:
    """Absolute value of an integer."""
    return -x if x < 0 else x


def fabs(x: float) -> float:
    """Absolute value of a floating-point number."""
    return -x if x < 0 else float(x)


def fmod(x: float, y: float) -> float:
    """Remainder of ``x / y`` with the sign of ``x``; NaN when ``y`` is zero."""
    if y == 0:
        return NAN
    quotient = x / y
    if not math.isfinite(quotient):
        return NAN
    return x - int(quotient) * y


def ceil(x: float) -> float:
    """Smallest integral value not less than ``x``."""
    if not math.isfinite(x):
        return float(x)
    result = float(int(x))
    if x > 0 and x - result:
        result += 1
    return result


def floor(x: float) -> float:
    """Largest integral value not greater than ``x``."""
    if not math.isfinite(x):
        return float(x)
    result = float(int(x))
    if x < 0 and x - result:
        result -= 1
    return result


def factorial(x: int) -> float:
    """Factorial of a non-negative integer as a float; NaN for negatives."""
    if x < 0:
        return NAN
    result = 1.0
    for i in range(1, x + 1):
        result *= i
    return result


def int_power(base: float, exp: float) -> float:
    """Raise ``base`` to ``exp`` by repeated multiplication or division.

    A fractional exponent is rounded away from zero to a whole number of steps.
    """
    if exp == 0:
        return 1.0
    if base == 0:
        return 0.0 if exp > 0 else INF
    steps = math.ceil(exp) if exp > 0 else math.ceil(-exp)
    result = 1.0
    if exp > 0:
        for _ in range(steps):
            result *= base
    else:
        for _ in range(steps):
            result /= base
    return result


def exp(x: float) -> float:
    """e raised to ``x`` via range reduction by ln 2 and a Taylor series."""
    if x == 0:
        return 1.0
    if math.isnan(x):
        return NAN
    if math.isinf(x):
        return INF if x > 0 else 0.0
    k = float(int(x / LN2))
    r = x - k * LN2
    result = 0.0
    i = 0
    while True:
        current = int_power(r, i) / factorial(i)
        if fabs(current) < _EXP_EPSILON:
            break
        result += current
        i += 1
    return result * int_power(2, k)


_natural_exp = exp


def log(x: float) -> float:
    """Natural logarithm; -inf at zero and NaN for negative arguments."""
    if x == 0:
        return -INF
    if x < 0:
        return NAN
    if math.isnan(x):
        return NAN
    if math.isinf(x):
        return INF
    count = 0
    while x >= E:
        x /= E
        count += 1
    result = 0.0
    for _ in range(_LOG_ITERATIONS):
        guess = exp(result)
        result += 2 * (x - guess) / (x + guess)
    return result + count


def power(base: float, exp: float) -> float:
    """``base`` raised to ``exp`` computed as e^(exp * log|base|)."""
    if base == 0:
        if exp > 0:
            return 0.0
        if exp < 0:
            return INF
        return 1.0
    if exp == 0:
        return 1.0
    result = _natural_exp(exp * log(fabs(base)))
    if base < 0 and fmod(exp, 2):
        result = -result
    return result


def sqrt(x: float) -> float:
    """Square root; NaN for negative arguments."""
    if x < 0:
        return NAN
    return power(x, 0.5)


def _odd_alternating_series(z: float, terms: int) -> float:
    """Sum of (-1)^i * z^(2i+1) / (2i+1) for i below ``terms``."""
    total = 0.0
    term_power = z
    z_squared = z * z
    for i in range(terms):
        if term_power == 0:
            break
        contribution = term_power / (2 * i + 1)
        total += -contribution if i % 2 else contribution
        term_power *= z_squared
    return total


def atan(x: float) -> float:
    """Arctangent via its Maclaurin series, or the series in 1/x beyond [-1, 1]."""
    if math.isnan(x):
        return NAN
    if math.isinf(x):
        return PI_2 if x > 0 else -PI_2
    if x == 0:
        return 0.0
    if x == 1:
        return PI / 4.0
    if x == -1:
        return -PI / 4.0
    if -1 < x < 1:
        return _odd_alternating_series(x, _ATAN_INNER_TERMS)
    series = _odd_alternating_series(1 / x, _ATAN_OUTER_TERMS)
    return PI * sqrt(x * x) / (2 * x) - series


def asin(x: float) -> float:
    """Arcsine on [-1, 1]; NaN outside."""
    if -1.0 < x < 1.0:
        return atan(x / sqrt(1.0 - x * x))
    if x == 1.0:
        return PI_2
    if x == -1.0:
        return -PI_2
    return NAN


def acos(x: float) -> float:
    """Arccosine on [-1, 1]; NaN outside."""
    if 0 < x <= 1:
        return atan(sqrt(1 - x * x) / x)
    if -1.0 < x < 0:
        return PI + atan(sqrt(1 - x * x) / x)
    if x == 0:
        return PI_2
    if x == -1:
        return PI
    return NAN


def sin(x: float) -> float:
    """Sine via reduction into [-2pi, 2pi] and a 15-term Taylor series."""
    if not math.isfinite(x):
        return NAN
    if fabs(x) > _TWO_PI:
        x -= _TWO_PI * int(x / _TWO_PI)
    while fabs(x) - _TWO_PI > 0:
        x -= _TWO_PI if x > 0 else -_TWO_PI
    result = 0.0
    x_squared = x * x
    term = float(x)
    for i in range(1, _SIN_TERMS + 1):
        result += term
        term *= -x_squared / ((2 * i) * (2 * i + 1))
    return result


def cos(x: float) -> float:
    """Cosine as the sine shifted by pi/2."""
    return sin(x + PI / 2.0)


def tan(x: float) -> float:
    """Tangent; NaN where the cosine is exactly zero."""
    denominator = cos(x)
    if denominator == 0:
        return NAN
    return sin(x) / denominator