"""
Тесты для модуля Basic Math

Проверяет:
1. Целочисленные функции (простые числа, powi, gcd/lcm, степени двойки)
2. Интерполяцию и ремаппинг
3. Описательную статистику
"""

import math

import pytest

from scriptkit.core.errors import DomainViolation, InvalidArgumentError, QuestionableInputWarning
from scriptkit.core.math.basic import (
    deg_to_rad,
    digit_sum,
    factorial,
    fibonacci,
    gcd,
    inverse_lerp,
    is_perfect_square,
    is_power_of_two,
    is_prime,
    lcm,
    lerp,
    mean,
    median,
    mode,
    next_power_of_two,
    rad_to_deg,
    percentage,
    powi,
    remap,
    sign,
    smoothstep,
    snapped,
    std_dev,
    variance,
    wrap,
)


def _is_prime_by_trial_division(n: int) -> bool:
    if n < 2:
        return False
    return all(n % d for d in range(2, int(math.isqrt(n)) + 1))


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ФУНКЦИИ
# =============================================================================


class TestIsPrime:
    def test_small_values(self) -> None:
        assert [k for k in range(-2, 20) if is_prime(k)] == [2, 3, 5, 7, 11, 13, 17, 19]

    def test_matches_trial_division(self) -> None:
        """Совпадает с наивным перебором делителей на [-5, 10000]"""
        for n in range(-5, 10001):
            assert is_prime(n) == _is_prime_by_trial_division(n), n

    def test_squares_of_primes_are_composite(self) -> None:
        assert not is_prime(25)
        assert not is_prime(49)
        assert not is_prime(121)

    def test_rejects_float(self) -> None:
        with pytest.raises(InvalidArgumentError):
            is_prime(7.0)


class TestPowi:
    @pytest.mark.parametrize("base", [-3, -1, 0, 1, 2, 7])
    @pytest.mark.parametrize("exp", [0, 1, 2, 5, 10])
    def test_matches_builtin_pow(self, base, exp) -> None:
        assert powi(base, exp) == base**exp

    def test_zero_to_zero_is_one(self) -> None:
        assert powi(0, 0) == 1

    def test_float_base(self) -> None:
        assert powi(1.5, 2) == pytest.approx(2.25)

    def test_int_base_gives_int(self) -> None:
        assert isinstance(powi(3, 4), int)

    def test_negative_exponent_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="non-negative"):
            powi(2, -1)


class TestIntegerHelpers:
    def test_factorial(self) -> None:
        assert factorial(0) == 1
        assert factorial(5) == 120
        with pytest.raises(InvalidArgumentError):
            factorial(-1)

    def test_fibonacci(self) -> None:
        assert [fibonacci(i) for i in range(10)] == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

    def test_gcd_lcm(self) -> None:
        assert gcd(12, 18) == 6
        assert gcd(-12, 18) == 6
        assert lcm(4, 6) == 12
        assert lcm(0, 5) == 0

    def test_powers_of_two(self) -> None:
        assert is_power_of_two(1)
        assert is_power_of_two(64)
        assert not is_power_of_two(0)
        assert not is_power_of_two(12)
        assert next_power_of_two(0) == 1
        assert next_power_of_two(5) == 8
        assert next_power_of_two(8) == 8

    def test_digit_sum_and_squares(self) -> None:
        assert digit_sum(-1234) == 10
        assert is_perfect_square(49)
        assert not is_perfect_square(50)
        assert not is_perfect_square(-4)


# =============================================================================
# ИНТЕРПОЛЯЦИЯ
# =============================================================================


class TestInterpolation:
    def test_sign(self) -> None:
        assert (sign(-2.5), sign(0), sign(3)) == (-1, 0, 1)

    def test_lerp_and_inverse(self) -> None:
        assert lerp(10.0, 20.0, 0.25) == 12.5
        assert inverse_lerp(10.0, 20.0, 12.5) == pytest.approx(0.25)

    def test_inverse_lerp_degenerate_range(self) -> None:
        with pytest.raises(DomainViolation):
            inverse_lerp(5.0, 5.0, 5.0)

    def test_remap(self) -> None:
        assert remap(5.0, 0.0, 10.0, 100.0, 200.0) == pytest.approx(150.0)

    def test_wrap(self) -> None:
        assert wrap(370.0, 0.0, 360.0) == pytest.approx(10.0)
        assert wrap(-1, 0, 10) == 9
        assert wrap(3.0, 2.0, 2.0) == 2.0

    def test_snapped(self) -> None:
        assert snapped(7.0, 5.0) == 5.0
        assert snapped(8.0, 5.0) == 10.0
        assert snapped(3.3, 0.0) == 3.3

    def test_smoothstep(self) -> None:
        assert smoothstep(0.0, 1.0, -1.0) == 0.0
        assert smoothstep(0.0, 1.0, 0.5) == pytest.approx(0.5)
        assert smoothstep(0.0, 1.0, 2.0) == 1.0

    @pytest.mark.parametrize(
        "func,args",
        [
            (lerp, (None, 1.0, 0.5)),
            (lerp, (0.0, 1.0, float("nan"))),
            (inverse_lerp, (0.0, 1.0, None)),
            (wrap, (float("inf"), 0.0, 1.0)),
            (wrap, (0.5, None, 1.0)),
            (snapped, (1.0, float("nan"))),
            (smoothstep, (0.0, 1.0, None)),
            (smoothstep, (float("nan"), 1.0, 0.5)),
            (deg_to_rad, (None,)),
            (rad_to_deg, (float("nan"),)),
        ],
    )
    def test_rejects_none_and_nan(self, func, args) -> None:
        with pytest.raises(InvalidArgumentError):
            func(*args)

    def test_snapped_overflow(self) -> None:
        with pytest.raises(DomainViolation):
            snapped(1e308, 1e-308)


class TestPercentage:
    def test_normal(self) -> None:
        assert percentage(25, 200) == pytest.approx(12.5)

    def test_zero_whole_warns_and_returns_zero(self) -> None:
        with pytest.warns(QuestionableInputWarning):
            assert percentage(5, 0) == 0.0


# =============================================================================
# СТАТИСТИКА
# =============================================================================


class TestStatistics:
    def test_mean_median(self) -> None:
        assert mean([1, 2, 3, 4]) == pytest.approx(2.5)
        assert median([3, 1, 2]) == 2.0
        assert median([4, 1, 3, 2]) == pytest.approx(2.5)

    def test_mode_prefers_smallest_on_tie(self) -> None:
        assert mode([3, 3, 1, 1, 2]) == 1
        assert mode([5, 5, 5, 2]) == 5

    def test_population_variance(self) -> None:
        data = [2, 4, 4, 4, 5, 5, 7, 9]
        assert variance(data) == pytest.approx(4.0)
        assert std_dev(data) == pytest.approx(2.0)

    @pytest.mark.parametrize("func", [mean, median, mode, variance, std_dev])
    def test_empty_sample_raises(self, func) -> None:
        with pytest.raises(InvalidArgumentError):
            func([])

    def test_nan_in_sample_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            mean([1.0, float("nan")])

    def test_sum_overflow_is_domain_error(self) -> None:
        with pytest.raises(DomainViolation):
            mean([1e308, 1e308])
        with pytest.raises(DomainViolation):
            variance([1e200, -1e200])

    def test_median_of_huge_values(self) -> None:
        assert median([1e308, 1e308]) == 1e308
