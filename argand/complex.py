import math
import numbers

from argand.conversions import (
    as_modulus,
    as_real,
    as_whole,
    polar_to_rectangular,
    rectangular_to_polar,
    reduce_argument,
    within_tolerance,
)


class Complex:
    """
    An immutable complex number that keeps both rectangular and polar form.

    Constructors
    ------------
    Complex.from_rectangular(a, b)    -> a + b i
    Complex.from_polar(r, theta)      -> r·e^{iθ}
    Complex.from_angle(theta)         -> e^{iθ}      (unit circle)

    All four coordinates are computed once, at construction. The argument is
    always reduced to [0, 2π) and is exactly 0 whenever the modulus is within
    tolerance of 0. Equality compares the rectangular components within the
    configured tolerance.

    Build instances through the factories only. ``Complex(re, im, mod, arg)``
    stores its four arguments unchecked and is reserved for the factories.
    """

    __slots__ = ("_real", "_imaginary", "_modulus", "_argument")

    # ---------- construction ----------
    def __init__(self, real: float, imaginary: float, modulus: float, argument: float):
        """Internal: the four coordinates must already be consistent."""
        object.__setattr__(self, "_real", real)
        object.__setattr__(self, "_imaginary", imaginary)
        object.__setattr__(self, "_modulus", modulus)
        object.__setattr__(self, "_argument", argument)

    @classmethod
    def from_rectangular(cls, real, imaginary) -> "Complex":
        """Build ``real + imaginary·i``."""
        real = as_real(real, "real")
        imaginary = as_real(imaginary, "imaginary")
        modulus, argument = rectangular_to_polar(real, imaginary)
        return cls(real, imaginary, modulus, argument)

    @classmethod
    def from_polar(cls, modulus, argument) -> "Complex":
        """Build ``modulus·e^{i·argument}``; the argument is reduced to [0, 2π)."""
        modulus = as_modulus(modulus)
        argument = as_real(argument, "argument")

        if within_tolerance(modulus, 0):
            argument = 0.0
        else:
            argument = reduce_argument(argument)

        real, imaginary = polar_to_rectangular(modulus, argument)
        return cls(real, imaginary, modulus, argument)

    @classmethod
    def from_angle(cls, theta) -> "Complex":
        """Point on the unit circle at angle ``theta``."""
        return cls.from_polar(1, theta)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ---------- basic properties ----------
    @property
    def re(self) -> float:
        return self._real

    @property
    def im(self) -> float:
        return self._imaginary

    @property
    def mod(self) -> float:
        return self._modulus

    @property
    def arg(self) -> float:
        """Argument in [0, 2π)."""
        return self._argument

    @property
    def principal_argument(self) -> float:
        """Argument in (−π, π], recomputed from the rectangular components."""
        return math.atan2(self._imaginary, self._real)

    @property
    def conjugate(self) -> "Complex":
        return Complex.from_rectangular(self._real, -self._imaginary)

    @property
    def negate(self) -> "Complex":
        """Additive inverse; ZERO maps to ZERO so no -0.0 components appear."""
        if self.equals(ZERO):
            return ZERO
        return Complex.from_rectangular(-self._real, -self._imaginary)

    @property
    def inverse(self) -> "Complex":
        """Multiplicative inverse, 1 / self."""
        return EAST.divide(self)

    # ---------- arithmetic ----------
    def add(self, other: "Complex") -> "Complex":
        other = _as_complex(other, "addend")
        return Complex.from_rectangular(self._real + other.re, self._imaginary + other.im)

    def subtract(self, other: "Complex") -> "Complex":
        other = _as_complex(other, "subtrahend")
        return Complex.from_rectangular(self._real - other.re, self._imaginary - other.im)

    def multiply(self, other: "Complex") -> "Complex":
        # moduli multiply, arguments add
        other = _as_complex(other, "factor")
        return Complex.from_polar(self._modulus * other.mod, self._argument + other.arg)

    def divide(self, other: "Complex") -> "Complex":
        other = _nonzero(_as_complex(other, "divisor"), "divide by")
        return Complex.from_polar(self._modulus / other.mod, self._argument - other.arg)

    def power(self, exponent) -> "Complex":
        """Raise to a whole-number power."""
        exponent = as_whole(exponent, "exponent")
        if exponent < 0 and self._modulus == 0:
            raise ZeroDivisionError("ZERO cannot be raised to a negative power")
        return Complex.from_polar(self._modulus ** exponent, self._argument * exponent)

    def root(self, degree) -> "Complex":
        """
        Principal root of the given degree.

        The principal argument (−π, π] is divided by ``degree``, which picks the
        root nearest the positive real axis. The other ``degree - 1`` roots are
        not returned.
        """
        degree = as_whole(degree, "degree")
        if degree <= 0:
            raise ValueError(f"degree must be positive, got {degree}")
        return Complex.from_polar(self._modulus ** (1 / degree), self.principal_argument / degree)

    def normalise(self) -> "Complex":
        """Same argument, modulus 1."""
        _nonzero(self, "normalise")
        return Complex.from_polar(1, self._argument)

    def scale(self, scalar) -> "Complex":
        scalar = as_real(scalar, "scalar")
        return Complex.from_rectangular(self._real * scalar, self._imaginary * scalar)

    def log(self) -> "Complex":
        """Principal natural logarithm: ln|z| + i·Arg(z)."""
        if self._modulus == 0:
            raise ValueError("the logarithm of ZERO is undefined")
        return Complex.from_rectangular(math.log(self._modulus), self.principal_argument)

    def equals(self, other: "Complex") -> bool:
        """Real and imaginary parts each match within tolerance."""
        other = _as_complex(other, "other")
        return (within_tolerance(self._real, other.re)
                and within_tolerance(self._imaginary, other.im))

    # ---------- dunder sugar ----------
    def __add__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if isinstance(other, Complex):
            return self.multiply(other)
        if isinstance(other, numbers.Real) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, exponent):
        return self.power(exponent)

    def __neg__(self):
        return self.negate

    def __abs__(self):
        return self._modulus

    def __complex__(self):
        return complex(self._real, self._imaginary)

    def __eq__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self.equals(other)

    # tolerance equality is not transitive, so no consistent hash exists
    __hash__ = None

    def __reduce__(self):
        return (Complex, (self._real, self._imaginary, self._modulus, self._argument))

    def __str__(self):
        return f"({self._modulus}∠{self._argument})"

    def __repr__(self):
        return f"Complex({self._real:+g} {self._imaginary:+g}i, {self._modulus:g}∠{self._argument:g})"


def _as_complex(value, name: str) -> Complex:
    if not isinstance(value, Complex):
        raise TypeError(f"{name} must be a Complex, got {type(value).__name__}")
    return value


def _nonzero(value: Complex, action: str) -> Complex:
    if value.equals(ZERO):
        raise ZeroDivisionError(f"cannot {action} ZERO")
    return value


# ---------- constants ----------
ZERO = Complex.from_rectangular(0, 0)
EAST = Complex.from_rectangular(1, 0)
NORTH = Complex.from_rectangular(0, 1)
WEST = Complex.from_rectangular(-1, 0)
SOUTH = Complex.from_rectangular(0, -1)
NORTH_EAST = Complex.from_polar(1, math.pi / 4)
NORTH_WEST = Complex.from_polar(1, 3 * math.pi / 4)
SOUTH_WEST = Complex.from_polar(1, 5 * math.pi / 4)
SOUTH_EAST = Complex.from_polar(1, 7 * math.pi / 4)
I = NORTH

Complex.ZERO = ZERO
Complex.EAST = EAST
Complex.NORTH = NORTH
Complex.WEST = WEST
Complex.SOUTH = SOUTH
Complex.NORTH_EAST = NORTH_EAST
Complex.NORTH_WEST = NORTH_WEST
Complex.SOUTH_WEST = SOUTH_WEST
Complex.SOUTH_EAST = SOUTH_EAST
Complex.i = NORTH


if __name__ == "__main__":
    z1 = Complex.from_rectangular(3, 4)     # 3 + 4i
    z2 = Complex.from_polar(2, math.pi / 4)  # 2·e^{iπ/4}
    print(z1.mod)                           # 5.0
    print(z1.normalise())                   # 1∠0.927…
    print(z1.add(z2))                       # vector addition
    print(z1 * z2)                          # operator sugar for multiply
    print(z1.inverse)                       # multiplicative inverse
    print(I.root(3))                        # principal cube root of i
    print(Complex.from_rectangular(-5, 0).log())
