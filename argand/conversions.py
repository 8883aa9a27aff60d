"""
Coordinate conversions between rectangular (a + b i) and polar (r·e^{iθ}) form.

These are plain functions on floats; the value type in ``argand.complex`` is
built on top of them. Every function rejects anything that is not a finite
real number.
"""
import math
import numbers
from typing import Tuple

from argand import config

TWO_PI = math.pi + math.pi


# ---------- validation ----------
def as_real(value, name: str = "value") -> float:
    """Return ``value`` as a float, or raise if it is not a finite real number."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    return value


def as_modulus(value, name: str = "modulus") -> float:
    value = as_real(value, name)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def as_whole(value, name: str = "value") -> int:
    """Return ``value`` as an int if it is a whole number (``2`` or ``2.0``)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if not math.isfinite(value) or not float(value).is_integer():
        raise ValueError(f"{name} must be an integer, got {value}")
    return int(value)


# ---------- comparisons ----------
def within_tolerance(a, b) -> bool:
    """True when ``|a - b|`` does not exceed the configured tolerance."""
    return abs(as_real(a, "a") - as_real(b, "b")) <= config.TOLERANCE


def modulus_squared(real, imaginary) -> float:
    """Square of the distance from the origin; skips the square root."""
    real = as_real(real, "real")
    imaginary = as_real(imaginary, "imaginary")
    return real * real + imaginary * imaginary


# ---------- angles ----------
def principal_argument(real, imaginary) -> float:
    """Angle of (real, imaginary) from the positive real axis, in (−π, π]."""
    return math.atan2(as_real(imaginary, "imaginary"), as_real(real, "real"))


def reduce_argument(angle) -> float:
    """Map any finite angle into [0, 2π)."""
    angle = as_real(angle, "angle") % TWO_PI
    # tiny negative inputs round up to exactly 2π
    return 0.0 if angle >= TWO_PI else angle


# ---------- conversions ----------
def rectangular_to_polar(real, imaginary) -> Tuple[float, float]:
    """(real, imaginary) -> (modulus, argument) with argument in [0, 2π)."""
    real = as_real(real, "real")
    imaginary = as_real(imaginary, "imaginary")

    modulus = math.hypot(real, imaginary)
    if within_tolerance(real, 0) and within_tolerance(imaginary, 0):
        return modulus, 0.0

    angle = principal_argument(real, imaginary)
    if angle < 0:
        angle = reduce_argument(angle + TWO_PI)
    return modulus, angle


def polar_to_rectangular(modulus, argument) -> Tuple[float, float]:
    """(modulus, argument) -> (real, imaginary)."""
    modulus = as_modulus(modulus)
    argument = as_real(argument, "argument")
    return modulus * math.cos(argument), modulus * math.sin(argument)
