"""
Basic Math — целочисленные и скалярные помощники

- Простые числа, целые степени, factorial/fibonacci, gcd/lcm
- Интерполяция и ремаппинг (lerp, inverse_lerp, remap, wrap, smoothstep)
- Описательная статистика (mean, median, mode, variance, std_dev)

Все функции чистые. Целочисленные входы валидируются строго (bool не int).
"""

import math
from collections import Counter
from collections.abc import Sequence
from typing import Union

from scriptkit.core.errors import DomainViolation, InvalidArgumentError, warn_questionable
from scriptkit.core.math.numerical_safeguards import (
    EPS_CALC,
    ensure_finite_result,
    validate_finite,
    validate_int,
)

Number = Union[int, float]


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ФУНКЦИИ
# =============================================================================


def is_prime(n: int) -> bool:
    """
    Проверка на простоту (trial division по 6k ± 1).

    Examples:
        >>> [k for k in range(-2, 12) if is_prime(k)]
        [2, 3, 5, 7, 11]
    """
    validate_int(n, "n")

    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6

    return True


def powi(base: Number, exp: int) -> Number:
    """
    Возведение в неотрицательную целую степень (exponentiation by squaring).

    powi(v, 0) == 1 для любого v, включая 0.

    Raises:
        InvalidArgumentError: если exp < 0 или не int

    Examples:
        >>> powi(2, 10)
        1024
        >>> powi(0, 0)
        1
        >>> powi(1.5, 2)
        2.25
    """
    validate_finite(base, "base")
    validate_int(exp, "exp")
    if exp < 0:
        raise InvalidArgumentError(f"exp must be non-negative, got {exp}")

    result: Number = 1
    factor = base
    e = exp
    while e > 0:
        if e & 1:
            result *= factor
        factor *= factor
        e >>= 1

    return result


def factorial(n: int) -> int:
    """n! для n >= 0."""
    validate_int(n, "n", min_value=0)
    return math.factorial(n)


def fibonacci(n: int) -> int:
    """
    n-е число Фибоначчи (F(0) = 0, F(1) = 1), итеративно.

    Examples:
        >>> [fibonacci(i) for i in range(8)]
        [0, 1, 1, 2, 3, 5, 8, 13]
    """
    validate_int(n, "n", min_value=0)

    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def gcd(a: int, b: int) -> int:
    """Наибольший общий делитель (всегда >= 0)."""
    validate_int(a, "a")
    validate_int(b, "b")
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Наименьшее общее кратное; lcm(0, x) == 0."""
    validate_int(a, "a")
    validate_int(b, "b")
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // math.gcd(a, b)


def is_power_of_two(n: int) -> bool:
    validate_int(n, "n")
    return n > 0 and (n & (n - 1)) == 0


def next_power_of_two(n: int) -> int:
    """Наименьшая степень двойки >= n (для n <= 1 → 1)."""
    validate_int(n, "n")
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def digit_sum(n: int) -> int:
    """Сумма десятичных цифр |n|."""
    validate_int(n, "n")
    return sum(int(ch) for ch in str(abs(n)))


def is_perfect_square(n: int) -> bool:
    validate_int(n, "n")
    if n < 0:
        return False
    root = math.isqrt(n)
    return root * root == n


# =============================================================================
# ИНТЕРПОЛЯЦИЯ И РЕМАППИНГ
# =============================================================================


def sign(value: float) -> int:
    """-1, 0 или +1."""
    number = validate_finite(value, "value")
    if number > 0:
        return 1
    if number < 0:
        return -1
    return 0


def lerp(a: float, b: float, t: float) -> float:
    """Линейная интерполяция: a + (b - a) * t (t не ограничивается)."""
    a = validate_finite(a, "a")
    b = validate_finite(b, "b")
    t = validate_finite(t, "t")
    return a + (b - a) * t


def inverse_lerp(a: float, b: float, value: float) -> float:
    """
    Обратная интерполяция: t такое, что lerp(a, b, t) == value.

    Raises:
        DomainViolation: если a == b
    """
    a = validate_finite(a, "a")
    b = validate_finite(b, "b")
    value = validate_finite(value, "value")
    if abs(b - a) < EPS_CALC:
        raise DomainViolation(f"inverse_lerp requires a != b, got a=b={a}")
    return (value - a) / (b - a)


def remap(
    value: float,
    in_min: float,
    in_max: float,
    out_min: float,
    out_max: float,
) -> float:
    """Перевод value из [in_min, in_max] в [out_min, out_max]."""
    return lerp(out_min, out_max, inverse_lerp(in_min, in_max, value))


def wrap(value: float, min_value: float, max_value: float) -> float:
    """
    Циклическое заворачивание value в [min_value, max_value).

    При пустом диапазоне возвращает min_value.

    Examples:
        >>> wrap(370.0, 0.0, 360.0)
        10.0
        >>> wrap(-1, 0, 10)
        9.0
    """
    value = validate_finite(value, "value")
    min_value = validate_finite(min_value, "min_value")
    max_value = validate_finite(max_value, "max_value")
    span = max_value - min_value
    if span == 0:
        return min_value
    return min_value + (value - min_value) % span


def snapped(value: float, step: float) -> float:
    """Округление к ближайшему кратному step (step == 0 → value без изменений)."""
    value = validate_finite(value, "value")
    step = validate_finite(step, "step")
    if step == 0:
        return value
    ratio = value / step
    if not math.isfinite(ratio):
        raise DomainViolation(f"snapped: value={value} / step={step} overflows")
    return math.floor(ratio + 0.5) * step


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    """Hermite-сглаживание 3t² - 2t³ с ограничением t в [0, 1]."""
    edge0 = validate_finite(edge0, "edge0")
    edge1 = validate_finite(edge1, "edge1")
    x = validate_finite(x, "x")
    if edge0 == edge1:
        return 0.0 if x < edge0 else 1.0
    t = min(max((x - edge0) / (edge1 - edge0), 0.0), 1.0)
    return t * t * (3.0 - 2.0 * t)


def deg_to_rad(degrees: float) -> float:
    return math.radians(validate_finite(degrees, "degrees"))


def rad_to_deg(radians: float) -> float:
    return math.degrees(validate_finite(radians, "radians"))


def percentage(part: float, whole: float) -> float:
    """
    Доля part от whole в процентах.

    При whole == 0 — мягкое предупреждение и 0.0.
    """
    part_value = validate_finite(part, "part")
    whole_value = validate_finite(whole, "whole")

    if whole_value == 0:
        warn_questionable("percentage: whole is zero, returning 0.0")
        return 0.0

    return part_value / whole_value * 100.0


# =============================================================================
# ОПИСАТЕЛЬНАЯ СТАТИСТИКА
# =============================================================================


def _validated_sample(values: Sequence[float], name: str = "values") -> list[float]:
    if values is None or len(values) == 0:
        raise InvalidArgumentError(f"{name} must be a non-empty sequence")
    return [validate_finite(v, f"{name}[{i}]") for i, v in enumerate(values)]


def _fsum(values, context: str) -> float:
    try:
        total = math.fsum(values)
    except OverflowError as exc:
        raise DomainViolation(f"{context}: sum overflows") from exc
    return ensure_finite_result(total, context)


def mean(values: Sequence[float]) -> float:
    sample = _validated_sample(values)
    return _fsum(sample, "mean") / len(sample)


def median(values: Sequence[float]) -> float:
    """Медиана; для чётной длины — среднее двух центральных."""
    sample = sorted(_validated_sample(values))
    mid = len(sample) // 2
    if len(sample) % 2:
        return sample[mid]
    return sample[mid - 1] / 2.0 + sample[mid] / 2.0


def mode(values: Sequence[float]) -> float:
    """Мода; при нескольких самых частых значениях — наименьшее из них."""
    sample = _validated_sample(values)
    counts = Counter(sample)
    top = max(counts.values())
    return min(v for v, c in counts.items() if c == top)


def variance(values: Sequence[float]) -> float:
    """Популяционная дисперсия."""
    sample = _validated_sample(values)
    mu = _fsum(sample, "variance") / len(sample)
    return _fsum(((v - mu) * (v - mu) for v in sample), "variance") / len(sample)


def std_dev(values: Sequence[float]) -> float:
    """Популяционное стандартное отклонение."""
    return math.sqrt(variance(values))
