"""
Numerical Safeguards — Safe Math Primitives & Argument Validation

Модуль обеспечивает численную устойчивость и единообразную валидацию входов
для всего каталога:
- NaN/Inf санитизация
- Безопасное деление с fallback
- Epsilon-сравнения float
- Валидаторы аргументов (бросают InvalidArgumentError)
- Степень и экспонента с переполнением → DomainViolation

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (возвращается fallback)
2. Валидаторы не модифицируют значение: либо возвращают его, либо бросают
3. None, NaN и Inf всегда отвергаются валидаторами как жёсткая ошибка
"""

import math
from numbers import Real
from typing import Any, Final, Optional, TypeVar

from scriptkit.core.errors import DomainViolation, InvalidArgumentError

T = TypeVar("T")

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для общих вычислений (защита делителей)
EPS_CALC: Final[float] = 1e-12

# Относительная толерантность для is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для is_close / is_zero
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: Any) -> bool:
    """
    Проверка, является ли значение конечным вещественным числом.

    bool не считается числом: True/False в арифметике почти всегда ошибка вызова.

    Examples:
        >>> is_valid_float(1.5)
        True
        >>> is_valid_float(float('nan'))
        False
        >>> is_valid_float(None)
        False
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def sanitize_float(value: Any, fallback: float = 0.0) -> float:
    """
    Замена NaN/Inf/не-числа на fallback.

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return float(value)
    return fallback


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ И СРАВНЕНИЯ
# =============================================================================


def safe_divide(
    numerator: float,
    denominator: float,
    fallback: float = 0.0,
    eps: float = EPS_CALC,
) -> float:
    """
    Деление с fallback при |denominator| < eps или невалидном результате.

    Examples:
        >>> safe_divide(10.0, 2.0)
        5.0
        >>> safe_divide(10.0, 0.0)
        0.0
        >>> safe_divide(1.0, 1e-20, fallback=-1.0)
        -1.0
    """
    num = sanitize_float(numerator)
    denom = sanitize_float(denominator)

    if abs(denom) < eps:
        return fallback

    return sanitize_float(num / denom, fallback=fallback)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """Сравнение float с учётом машинной точности (обёртка math.isclose)."""
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True если abs(value) <= tol."""
    return abs(value) <= tol


def clamp(
    value: float,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> float:
    """
    Ограничение значения диапазоном [min_value, max_value].

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, max_value=10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ АРГУМЕНТОВ
# =============================================================================


def require_not_none(value: Optional[T], name: str) -> T:
    """
    Аргумент обязателен.

    Raises:
        InvalidArgumentError: если value is None
    """
    if value is None:
        raise InvalidArgumentError(f"{name} is required, got None")
    return value


def validate_finite(value: Any, name: str) -> float:
    """
    Аргумент должен быть конечным числом.

    Returns:
        value как float

    Raises:
        InvalidArgumentError: если None, не число, NaN или Inf
    """
    require_not_none(value, name)
    if not is_valid_float(value):
        raise InvalidArgumentError(f"{name} must be a finite number, got {value!r}")
    return float(value)


def validate_int(value: Any, name: str, min_value: Optional[int] = None) -> int:
    """
    Аргумент должен быть целым (bool не допускается).

    Raises:
        InvalidArgumentError: если не int или меньше min_value
    """
    require_not_none(value, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if min_value is not None and value < min_value:
        raise InvalidArgumentError(f"{name} must be >= {min_value}, got {value}")
    return value


def validate_positive(value: Any, name: str) -> float:
    """
    Аргумент должен быть > 0.

    Raises:
        InvalidArgumentError: если value <= 0 или невалиден
    """
    number = validate_finite(value, name)
    if number <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")
    return number


def validate_non_negative(value: Any, name: str) -> float:
    """
    Аргумент должен быть >= 0.

    Raises:
        InvalidArgumentError: если value < 0 или невалиден
    """
    number = validate_finite(value, name)
    if number < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")
    return number


def validate_in_range(
    value: Any,
    name: str,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> float:
    """
    Аргумент должен лежать в [min_value, max_value].

    Raises:
        InvalidArgumentError: если значение вне диапазона или невалидно
    """
    number = validate_finite(value, name)

    if min_value is not None and number < min_value:
        raise InvalidArgumentError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and number > max_value:
        raise InvalidArgumentError(f"{name} must be <= {max_value}, got {value}")

    return number


# =============================================================================
# ПЕРЕПОЛНЕНИЕ
# =============================================================================


def ensure_finite_result(value: float, context: str) -> float:
    """
    Результат вычисления должен быть конечным.

    Raises:
        DomainViolation: если value — NaN или ±Inf
    """
    if not math.isfinite(value):
        raise DomainViolation(f"{context}: result is not representable as a finite float")
    return value


def checked_pow(base: float, exponent: float, context: str) -> float:
    """
    base ** exponent с переводом OverflowError/ZeroDivisionError в DomainViolation.

    Исчезновение порядка (underflow) не ошибка: результат 0.0.

    Examples:
        >>> checked_pow(2.0, 10, "pow")
        1024.0
        >>> checked_pow(10.0, -400, "pow")
        0.0
    """
    if base < 0 and not float(exponent).is_integer():
        raise DomainViolation(f"{context}: negative base {base!r} with fractional exponent")
    try:
        result = float(base) ** exponent
    except ZeroDivisionError as exc:
        raise DomainViolation(f"{context}: {base!r} ** {exponent!r} divides by zero") from exc
    except OverflowError as exc:
        # CPython может бросить OverflowError и на underflow в субнормальные числа
        if math.log(abs(base)) * exponent < 0:
            return 0.0
        raise DomainViolation(f"{context}: {base!r} ** {exponent!r} overflows") from exc
    return ensure_finite_result(result, context)


def checked_exp(x: float, context: str) -> float:
    """math.exp с переводом переполнения в DomainViolation (underflow → 0.0)."""
    try:
        result = math.exp(x)
    except OverflowError as exc:
        raise DomainViolation(f"{context}: exp({x!r}) overflows") from exc
    return ensure_finite_result(result, context)
