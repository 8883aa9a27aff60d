"""Tests for the rectangular/polar conversion functions."""

import math

import numpy as np
import pytest

from argand import config
from argand.conversions import (
    TWO_PI,
    as_whole,
    modulus_squared,
    polar_to_rectangular,
    principal_argument,
    rectangular_to_polar,
    reduce_argument,
    within_tolerance,
)

NON_NUMBERS = ["string", None, True, complex(1, 2), object(), [1]]
NON_FINITE = [math.nan, math.inf, -math.inf]


class TestRectangularToPolar:
    """(real, imaginary) -> (modulus, argument)."""

    @pytest.mark.parametrize(
        "real, imaginary, modulus, argument",
        [
            (3, 4, 5, math.atan2(4, 3)),
            (1, 0, 1, 0),
            (0, 1, 1, math.pi / 2),
            (-1, 0, 1, math.pi),
            (0, -1, 1, 3 * math.pi / 2),
            (1, -1, math.sqrt(2), 7 * math.pi / 4),
        ],
    )
    def test_known_points(self, real, imaginary, modulus, argument):
        mod, arg = rectangular_to_polar(real, imaginary)
        assert mod == pytest.approx(modulus, abs=1e-12)
        assert arg == pytest.approx(argument, abs=1e-12)

    def test_origin_has_zero_argument(self):
        assert rectangular_to_polar(0, 0) == (0.0, 0.0)

    def test_near_origin_snaps_argument_to_zero(self):
        _, arg = rectangular_to_polar(1e-13, -1e-13)
        assert arg == 0.0

    def test_tiny_negative_angle_stays_below_two_pi(self):
        _, arg = rectangular_to_polar(1, -1e-300)
        assert 0 <= arg < TWO_PI

    @pytest.mark.parametrize("bad", NON_NUMBERS)
    def test_rejects_non_numbers(self, bad):
        with pytest.raises(TypeError):
            rectangular_to_polar(bad, 1)
        with pytest.raises(TypeError):
            rectangular_to_polar(1, bad)

    @pytest.mark.parametrize("bad", NON_FINITE)
    def test_rejects_non_finite(self, bad):
        with pytest.raises(ValueError):
            rectangular_to_polar(bad, 1)

    @pytest.mark.parametrize("real, imaginary", [(1e200, 0), (0, -1e200), (1e200, 1e200), (1e-200, 1e-200)])
    def test_extreme_components(self, real, imaginary):
        mod, _ = rectangular_to_polar(real, imaginary)
        assert mod == pytest.approx(math.hypot(real, imaginary))
        assert math.isfinite(mod)

    def test_accepts_numpy_scalars(self):
        mod, _ = rectangular_to_polar(np.float64(3), np.int64(4))
        assert mod == pytest.approx(5)


class TestPolarToRectangular:
    """(modulus, argument) -> (real, imaginary)."""

    def test_quarter_turn(self):
        real, imaginary = polar_to_rectangular(2, math.pi / 2)
        assert real == pytest.approx(0, abs=1e-12)
        assert imaginary == pytest.approx(2)

    def test_negative_modulus(self):
        with pytest.raises(ValueError):
            polar_to_rectangular(-1, 1)

    @pytest.mark.parametrize("bad", NON_NUMBERS)
    def test_rejects_non_numbers(self, bad):
        with pytest.raises(TypeError):
            polar_to_rectangular(bad, 1)
        with pytest.raises(TypeError):
            polar_to_rectangular(1, bad)

    @pytest.mark.parametrize("modulus", [0.5, 1, 2.5, 10])
    @pytest.mark.parametrize("argument", [0.3, 2, 4, 6])
    def test_round_trip(self, modulus, argument):
        mod, arg = rectangular_to_polar(*polar_to_rectangular(modulus, argument))
        assert within_tolerance(mod, modulus)
        assert within_tolerance(arg, argument)


class TestHelpers:
    """principal_argument, modulus_squared, within_tolerance, reduce_argument."""

    @pytest.mark.parametrize(
        "real, imaginary, expected",
        [(1, 0, 0), (0, 1, math.pi / 2), (-1, 0, math.pi), (0, -1, -math.pi / 2), (1, -1, -math.pi / 4)],
    )
    def test_principal_argument(self, real, imaginary, expected):
        assert principal_argument(real, imaginary) == pytest.approx(expected)

    def test_principal_argument_does_not_snap_to_zero(self):
        assert principal_argument(-1e-13, 1e-13) == pytest.approx(3 * math.pi / 4)

    def test_modulus_squared(self):
        assert modulus_squared(3, 4) == 25
        assert modulus_squared(-2, 0) == 4

    def test_modulus_squared_saturates(self):
        assert modulus_squared(1e200, 0) == math.inf

    def test_within_tolerance(self):
        assert within_tolerance(1, 1 + 5e-13)
        assert not within_tolerance(1, 1 + 2e-12)

    def test_within_tolerance_reads_configuration(self, monkeypatch):
        monkeypatch.setattr(config, "TOLERANCE", 0.1)
        assert within_tolerance(1, 1.05)

    def test_within_tolerance_rejects_strings(self):
        with pytest.raises(TypeError):
            within_tolerance("1", 1)

    @pytest.mark.parametrize(
        "angle, expected",
        [
            (0, 0),
            (-math.pi / 2, 3 * math.pi / 2),
            (TWO_PI, 0),
            (2 * TWO_PI, 0),
            (-TWO_PI, 0),
            (-1e-20, 0),
            (7 * math.pi / 2, 3 * math.pi / 2),
        ],
    )
    def test_reduce_argument(self, angle, expected):
        reduced = reduce_argument(angle)
        assert 0 <= reduced < TWO_PI
        assert reduced == pytest.approx(expected, abs=1e-12)

    def test_as_whole(self):
        assert as_whole(2) == 2
        assert as_whole(-3.0) == -3
        assert as_whole(np.int64(4)) == 4
        with pytest.raises(ValueError):
            as_whole(2.5)
        with pytest.raises(ValueError):
            as_whole(math.inf)
        with pytest.raises(TypeError):
            as_whole("2")
        with pytest.raises(TypeError):
            as_whole(True)
