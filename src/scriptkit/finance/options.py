"""
Options — Black-Scholes для европейских опционов

Normal CDF вычисляется через рациональную аппроксимацию erf
Abramowitz & Stegun 7.1.26 (максимальная ошибка ~1.5e-7).

ФОРМУЛЫ:
    d1 = (ln(S/K) + (r + σ²/2)·T) / (σ·√T)
    d2 = d1 - σ·√T
    C  = S·N(d1) - K·e^(-rT)·N(d2)
    P  = C - S + K·e^(-rT)        (put-call parity)

Ставка r и волатильность σ — в ДОЛЯХ годовых, T — в годах.
"""

import math
from typing import Final

from scriptkit.core.math.numerical_safeguards import (
    checked_exp,
    ensure_finite_result,
    validate_finite,
    validate_positive,
)

# Коэффициенты A&S 7.1.26
_AS_P: Final[float] = 0.3275911
_AS_A1: Final[float] = 0.254829592
_AS_A2: Final[float] = -0.284496736
_AS_A3: Final[float] = 1.421413741
_AS_A4: Final[float] = -1.453152027
_AS_A5: Final[float] = 1.061405429


def erf_approx(x: float) -> float:
    """
    Аппроксимация функции ошибок (нечётная: erf(-x) = -erf(x)).

    Examples:
        >>> erf_approx(0.0)
        0.0
        >>> abs(erf_approx(1.0) - 0.8427007929) < 2e-7
        True
    """
    value = validate_finite(x, "x")
    # При x == 0 формула даёт ~1e-9 вместо 0
    if value == 0.0:
        return 0.0

    sign = -1.0 if value < 0 else 1.0
    z = abs(value)

    t = 1.0 / (1.0 + _AS_P * z)
    poly = ((((_AS_A5 * t + _AS_A4) * t + _AS_A3) * t + _AS_A2) * t + _AS_A1) * t
    return sign * (1.0 - poly * math.exp(-z * z))


def normal_cdf(x: float) -> float:
    """Функция распределения стандартного нормального закона."""
    return 0.5 * (1.0 + erf_approx(x / math.sqrt(2.0)))


def _d1_d2(spot: float, strike: float, time: float, rate: float, volatility: float) -> tuple[float, float]:
    s = validate_positive(spot, "spot")
    k = validate_positive(strike, "strike")
    t = validate_positive(time, "time")
    r = validate_finite(rate, "rate")
    sigma = validate_positive(volatility, "volatility")

    vol_sqrt_t = sigma * math.sqrt(t)
    d1 = (math.log(s) - math.log(k) + (r + 0.5 * sigma * sigma) * t) / vol_sqrt_t
    ensure_finite_result(d1, "black_scholes d1")
    return d1, d1 - vol_sqrt_t


def black_scholes_call(
    spot: float,
    strike: float,
    time: float,
    rate: float,
    volatility: float,
) -> float:
    """
    Цена европейского call.

    Raises:
        InvalidArgumentError: spot/strike/time/volatility <= 0
        DomainViolation: дисконт-фактор или d1 не представимы в float

    Examples:
        >>> round(black_scholes_call(100, 100, 1, 0.05, 0.2), 2)
        10.45
    """
    d1, d2 = _d1_d2(spot, strike, time, rate, volatility)
    discount = checked_exp(-rate * time, "black_scholes discount")
    return ensure_finite_result(
        spot * normal_cdf(d1) - strike * discount * normal_cdf(d2), "black_scholes_call"
    )


def black_scholes_put(
    spot: float,
    strike: float,
    time: float,
    rate: float,
    volatility: float,
) -> float:
    """Цена европейского put через put-call parity."""
    call = black_scholes_call(spot, strike, time, rate, volatility)
    discount = checked_exp(-rate * time, "black_scholes discount")
    return ensure_finite_result(call - spot + strike * discount, "black_scholes_put")
