"""
Complex Numbers — арифметика над парами (re, im)

Комплексное число представлено кортежем из двух конечных float.
Каждая функция валидирует входы и возвращает новый кортеж.
"""

import math
from typing import Any

from scriptkit.core.errors import DomainViolation, InvalidArgumentError
from scriptkit.core.math.numerical_safeguards import validate_finite, validate_int

Complex = tuple[float, float]


def _as_complex(value: Any, name: str) -> Complex:
    if value is None or not hasattr(value, "__len__") or len(value) != 2:
        raise InvalidArgumentError(f"{name} must be a (re, im) pair, got {value!r}")
    return (
        validate_finite(value[0], f"{name}.re"),
        validate_finite(value[1], f"{name}.im"),
    )


def complex_add(a: Complex, b: Complex) -> Complex:
    ar, ai = _as_complex(a, "a")
    br, bi = _as_complex(b, "b")
    return (ar + br, ai + bi)


def complex_sub(a: Complex, b: Complex) -> Complex:
    ar, ai = _as_complex(a, "a")
    br, bi = _as_complex(b, "b")
    return (ar - br, ai - bi)


def _mul(a: Complex, b: Complex) -> Complex:
    ar, ai = a
    br, bi = b
    return (ar * br - ai * bi, ar * bi + ai * br)


def complex_mul(a: Complex, b: Complex) -> Complex:
    """(ar + ai·i)(br + bi·i) = (ar·br - ai·bi) + (ar·bi + ai·br)·i"""
    return _mul(_as_complex(a, "a"), _as_complex(b, "b"))


def complex_div(a: Complex, b: Complex) -> Complex:
    """
    Деление a / b (алгоритм Смита: без переполнения |b|² на малых и больших b).

    Raises:
        DomainViolation: если b == 0 или частное не представимо в float
    """
    ar, ai = _as_complex(a, "a")
    br, bi = _as_complex(b, "b")

    if br == 0.0 and bi == 0.0:
        raise DomainViolation("complex division by zero")

    if abs(br) >= abs(bi):
        ratio = bi / br
        denom = br + bi * ratio
        result = ((ar + ai * ratio) / denom, (ai - ar * ratio) / denom)
    else:
        ratio = br / bi
        denom = br * ratio + bi
        result = ((ar * ratio + ai) / denom, (ai * ratio - ar) / denom)

    if not all(math.isfinite(part) for part in result):
        raise DomainViolation(f"complex division overflows: {a!r} / {b!r}")
    return result


def complex_conjugate(z: Complex) -> Complex:
    re, im = _as_complex(z, "z")
    return (re, -im)


def complex_abs(z: Complex) -> float:
    """Модуль |z|."""
    re, im = _as_complex(z, "z")
    return math.hypot(re, im)


def complex_arg(z: Complex) -> float:
    """Аргумент (фаза) в радианах, диапазон (-π, π]."""
    re, im = _as_complex(z, "z")
    return math.atan2(im, re)


def complex_from_polar(magnitude: float, angle: float) -> Complex:
    r = validate_finite(magnitude, "magnitude")
    theta = validate_finite(angle, "angle")
    return (r * math.cos(theta), r * math.sin(theta))


def complex_pow(z: Complex, n: int) -> Complex:
    """
    Целая степень z^n (squaring). Отрицательная n — через обратное число.

    Raises:
        DomainViolation: 0 в отрицательной степени или переполнение

    Examples:
        >>> complex_pow((0.0, 1.0), 2)
        (-1.0, 0.0)
    """
    base = _as_complex(z, "z")
    validate_int(n, "n")

    if n < 0:
        base = complex_div((1.0, 0.0), base)
        n = -n

    result: Complex = (1.0, 0.0)
    while n > 0:
        if n & 1:
            result = _mul(result, base)
        base = _mul(base, base)
        n >>= 1

    if not all(math.isfinite(part) for part in result):
        raise DomainViolation(f"complex_pow overflows for z={z!r}")
    return result


def complex_to_string(z: Complex, precision: int = 3) -> str:
    """
    Examples:
        >>> complex_to_string((1.0, -2.5))
        '1.000 - 2.500i'
    """
    re, im = _as_complex(z, "z")
    op = "-" if im < 0 else "+"
    return f"{re:.{precision}f} {op} {abs(im):.{precision}f}i"
