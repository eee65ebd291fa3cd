"""
Тесты для complex_numbers и vectors (арифметика над парами)
"""

import math

import pytest

from scriptkit.core.errors import DomainViolation, InvalidArgumentError, QuestionableInputWarning
from scriptkit.core.math.complex_numbers import (
    complex_abs,
    complex_add,
    complex_arg,
    complex_conjugate,
    complex_div,
    complex_from_polar,
    complex_mul,
    complex_pow,
    complex_sub,
    complex_to_string,
)
from scriptkit.core.math.vectors import (
    ZERO,
    vec_add,
    vec_angle,
    vec_angle_between,
    vec_cross,
    vec_distance,
    vec_dot,
    vec_from_angle,
    vec_length,
    vec_lerp,
    vec_normalize,
    vec_perpendicular,
    vec_project,
    vec_reflect,
    vec_rotate,
    vec_scale,
    vec_sub,
)

# =============================================================================
# COMPLEX
# =============================================================================


class TestComplexArithmetic:
    def test_add_sub(self) -> None:
        assert complex_add((1.0, 2.0), (3.0, -1.0)) == (4.0, 1.0)
        assert complex_sub((1.0, 2.0), (3.0, -1.0)) == (-2.0, 3.0)

    def test_mul_matches_builtin(self) -> None:
        expected = complex(1, 2) * complex(3, -1)
        assert complex_mul((1.0, 2.0), (3.0, -1.0)) == pytest.approx((expected.real, expected.imag))

    def test_div_matches_builtin(self) -> None:
        expected = complex(1, 2) / complex(3, -1)
        assert complex_div((1.0, 2.0), (3.0, -1.0)) == pytest.approx((expected.real, expected.imag))

    def test_div_by_zero_raises(self) -> None:
        with pytest.raises(DomainViolation):
            complex_div((1.0, 1.0), (0.0, 0.0))

    def test_div_by_small_divisor(self) -> None:
        """Малый, но ненулевой делитель: честное частное, а не ошибка"""
        assert complex_div((1.0, 0.0), (1e-7, 0.0)) == pytest.approx((1e7, 0.0))
        assert complex_div((1.0, 1.0), (1e-200, 1e-200)) == pytest.approx((1e200, 0.0))

    def test_div_overflow_raises(self) -> None:
        with pytest.raises(DomainViolation):
            complex_div((1e300, 0.0), (1e-300, 0.0))

    def test_conjugate_abs_arg(self) -> None:
        assert complex_conjugate((3.0, 4.0)) == (3.0, -4.0)
        assert complex_abs((3.0, 4.0)) == pytest.approx(5.0)
        assert complex_arg((0.0, 1.0)) == pytest.approx(math.pi / 2)

    def test_from_polar(self) -> None:
        assert complex_from_polar(2.0, math.pi / 2) == pytest.approx((0.0, 2.0), abs=1e-12)

    def test_pow(self) -> None:
        assert complex_pow((0.0, 1.0), 2) == pytest.approx((-1.0, 0.0))
        assert complex_pow((2.0, 0.0), 0) == (1.0, 0.0)
        assert complex_pow((2.0, 0.0), -2) == pytest.approx((0.25, 0.0))

    def test_zero_to_negative_power_raises(self) -> None:
        with pytest.raises(DomainViolation):
            complex_pow((0.0, 0.0), -1)

    def test_pow_overflow_raises(self) -> None:
        with pytest.raises(DomainViolation):
            complex_pow((1e200, 0.0), 2)
        with pytest.raises(DomainViolation):
            complex_pow((1e-200, 0.0), -2)

    def test_to_string(self) -> None:
        assert complex_to_string((1.0, -2.5)) == "1.000 - 2.500i"
        assert complex_to_string((0.5, 2.0), precision=1) == "0.5 + 2.0i"

    @pytest.mark.parametrize("bad", [None, (1.0,), (1.0, 2.0, 3.0), (float("nan"), 0.0)])
    def test_malformed_pair_raises(self, bad) -> None:
        with pytest.raises(InvalidArgumentError):
            complex_add(bad, (0.0, 0.0))


# =============================================================================
# VECTORS
# =============================================================================


class TestVectorBasics:
    def test_add_sub_scale(self) -> None:
        assert vec_add((1.0, 2.0), (3.0, 4.0)) == (4.0, 6.0)
        assert vec_sub((1.0, 2.0), (3.0, 4.0)) == (-2.0, -2.0)
        assert vec_scale((1.0, -2.0), 3.0) == (3.0, -6.0)

    def test_dot_cross_length(self) -> None:
        assert vec_dot((1.0, 2.0), (3.0, 4.0)) == 11.0
        assert vec_cross((1.0, 0.0), (0.0, 1.0)) == 1.0
        assert vec_length((3.0, 4.0)) == 5.0
        assert vec_distance((1.0, 1.0), (4.0, 5.0)) == 5.0

    def test_normalize(self) -> None:
        x, y = vec_normalize((3.0, 4.0))
        assert (x, y) == pytest.approx((0.6, 0.8))

    def test_normalize_zero_warns(self) -> None:
        with pytest.warns(QuestionableInputWarning):
            assert vec_normalize(ZERO) == (0.0, 0.0)

    def test_normalize_short_vector(self) -> None:
        assert vec_normalize((1e-13, 0.0)) == pytest.approx((1.0, 0.0))


class TestVectorAngles:
    def test_angle(self) -> None:
        assert vec_angle((0.0, 1.0)) == pytest.approx(math.pi / 2)

    def test_angle_between_is_signed(self) -> None:
        assert vec_angle_between((1.0, 0.0), (0.0, 1.0)) == pytest.approx(math.pi / 2)
        assert vec_angle_between((0.0, 1.0), (1.0, 0.0)) == pytest.approx(-math.pi / 2)

    def test_rotate(self) -> None:
        assert vec_rotate((1.0, 0.0), math.pi / 2) == pytest.approx((0.0, 1.0), abs=1e-12)

    def test_from_angle(self) -> None:
        assert vec_from_angle(math.pi, 2.0) == pytest.approx((-2.0, 0.0), abs=1e-12)

    def test_perpendicular(self) -> None:
        assert vec_perpendicular((1.0, 0.0)) == (0.0, 1.0)


class TestVectorProjections:
    def test_lerp(self) -> None:
        assert vec_lerp((0.0, 0.0), (10.0, 20.0), 0.5) == (5.0, 10.0)

    @pytest.mark.parametrize("t", [None, float("nan"), float("inf")])
    def test_lerp_rejects_invalid_t(self, t) -> None:
        with pytest.raises(InvalidArgumentError):
            vec_lerp((0.0, 0.0), (1.0, 1.0), t)

    def test_project(self) -> None:
        assert vec_project((3.0, 4.0), (1.0, 0.0)) == pytest.approx((3.0, 0.0))

    def test_project_onto_short_vector(self) -> None:
        assert vec_project((1.0, 1.0), (1e-7, 0.0)) == pytest.approx((1.0, 0.0))

    def test_project_onto_zero_raises(self) -> None:
        with pytest.raises(DomainViolation):
            vec_project((1.0, 1.0), ZERO)

    def test_reflect(self) -> None:
        """Мяч, летящий вниз-вправо, отражается от пола"""
        assert vec_reflect((1.0, -1.0), (0.0, 2.0)) == pytest.approx((1.0, 1.0))
