from argand.complex import (
    EAST,
    I,
    NORTH,
    NORTH_EAST,
    NORTH_WEST,
    SOUTH,
    SOUTH_EAST,
    SOUTH_WEST,
    WEST,
    ZERO,
    Complex,
)
from argand.config import TOLERANCE
from argand.conversions import (
    modulus_squared,
    polar_to_rectangular,
    principal_argument,
    rectangular_to_polar,
    within_tolerance,
)

__all__ = [
    "Complex",
    "ZERO",
    "EAST",
    "NORTH",
    "I",
    "WEST",
    "SOUTH",
    "NORTH_EAST",
    "NORTH_WEST",
    "SOUTH_WEST",
    "SOUTH_EAST",
    "TOLERANCE",
    "modulus_squared",
    "polar_to_rectangular",
    "principal_argument",
    "rectangular_to_polar",
    "within_tolerance",
]
