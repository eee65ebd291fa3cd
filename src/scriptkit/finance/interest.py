"""
Interest — простые и сложные проценты, аннуитет, доходность

СОГЛАШЕНИЕ ПО СТАВКАМ:
- Функции этого модуля принимают ставки в ПРОЦЕНТАХ (10 = 10%)
- cashflows/options принимают ставки в ДОЛЯХ (0.10 = 10%)

ФОРМУЛЫ:
    simple:    I = P × R × T / 100
    compound:  I = P × (1 + R/100)^n - P,  n = T / interval
    annuity:   A = P × r / (1 - (1 + r)^-n),  r = R/100  (r = 0 → P / n)

Неположительные параметры процентов — мягкое предупреждение и 0.0.
"""

import logging
import math
from typing import Final, NamedTuple, Optional

from scriptkit.core.config import DEFAULT_COMPOUNDING, CompoundingConfig
from scriptkit.core.errors import DomainViolation, warn_questionable
from scriptkit.core.math.numerical_safeguards import (
    checked_pow,
    clamp,
    ensure_finite_result,
    is_close,
    validate_finite,
    validate_int,
    validate_positive,
)

logger = logging.getLogger(__name__)

# Ставка в процентах, при которой (1 + r/100) обращается в 0
RATE_FLOOR_PCT: Final[float] = -100.0


# =============================================================================
# SIMPLE INTEREST
# =============================================================================


def simple_interest(principal: float, rate: float, time: float) -> float:
    """
    Простые проценты P × R × T / 100.

    Args:
        principal: Сумма
        rate: Ставка за период, %
        time: Число периодов

    Returns:
        Начисленные проценты (не итоговая сумма)

    Examples:
        >>> simple_interest(12500, 10, 3)
        3750.0
    """
    p = validate_finite(principal, "principal")
    r = validate_finite(rate, "rate")
    t = validate_finite(time, "time")

    if p <= 0 or r <= 0 or t <= 0:
        warn_questionable(
            f"simple_interest: non-positive parameter (principal={p}, rate={r}, time={t}), "
            "returning 0.0"
        )
        return 0.0

    return p * r * t / 100.0


# Каталожное имя из исходного API
simple_intrst = simple_interest


# =============================================================================
# COMPOUND INTEREST
# =============================================================================


class CompoundingPeriods(NamedTuple):
    """Нормализованный интервал начисления и число периодов."""

    interval: float  # интервал в годах после округления/clamp
    periods: float  # time / interval (может быть дробным)


def compounding_periods(
    time: float,
    interval: float,
    config: Optional[CompoundingConfig] = None,
) -> CompoundingPeriods:
    """
    Нормализация интервала начисления и расчёт числа периодов.

    Интервал округляется до ближайшего кратного interval_step_years
    и ограничивается [min_interval_years, max_interval_years].

    Examples:
        >>> compounding_periods(2.0, 1.0).periods
        2.0
        >>> compounding_periods(1.0, 5.0).interval   # clamp к max
        1.0
    """
    cfg = config or DEFAULT_COMPOUNDING
    t = validate_finite(time, "time")
    requested = validate_finite(interval, "interval")

    steps = round(requested / cfg.interval_step_years)
    snapped_interval = clamp(
        steps * cfg.interval_step_years,
        cfg.min_interval_years,
        cfg.max_interval_years,
    )

    # Значение уже на сетке: сохраняем его без погрешности умножения
    if is_close(snapped_interval, requested):
        snapped_interval = requested
    else:
        logger.debug(
            "compounding interval %r normalized to %r", requested, snapped_interval
        )

    return CompoundingPeriods(interval=snapped_interval, periods=t / snapped_interval)


def compound_interest(
    principal: float,
    rate: float,
    time: float,
    interval: float = 1.0,
    config: Optional[CompoundingConfig] = None,
) -> float:
    """
    Сложные проценты: P × (1 + rate/100)^n - P.

    Args:
        principal: Сумма
        rate: Ставка за один интервал начисления, %
        time: Срок в годах
        interval: Запрошенный интервал начисления в годах
        config: Допустимые интервалы (default: DEFAULT_COMPOUNDING)

    Returns:
        Только проценты (итог минус principal)

    Raises:
        DomainViolation: итог не представим в float

    Examples:
        >>> round(compound_interest(1000, 5, 2), 6)
        102.5
    """
    p = validate_finite(principal, "principal")
    r = validate_finite(rate, "rate")
    t = validate_finite(time, "time")

    if p <= 0 or r <= 0 or t <= 0:
        warn_questionable(
            f"compound_interest: non-positive parameter (principal={p}, rate={r}, time={t}), "
            "returning 0.0"
        )
        return 0.0

    n = compounding_periods(t, interval, config).periods
    amount = p * checked_pow(1.0 + r / 100.0, n, "compound_interest")
    return ensure_finite_result(amount - p, "compound_interest")


# =============================================================================
# TIME VALUE OF MONEY
# =============================================================================


def _growth_factor(rate: float, periods: float) -> float:
    r = validate_finite(rate, "rate")
    n = validate_finite(periods, "periods")
    if r <= RATE_FLOOR_PCT:
        raise DomainViolation(f"rate must be > {RATE_FLOOR_PCT}%, got {r}")
    return checked_pow(1.0 + r / 100.0, n, "growth factor")


def future_value(present: float, rate: float, periods: float) -> float:
    """FV = PV × (1 + rate/100)^n"""
    value = validate_finite(present, "present") * _growth_factor(rate, periods)
    return ensure_finite_result(value, "future_value")


def present_value(future: float, rate: float, periods: float) -> float:
    """PV = FV × (1 + rate/100)^-n (большое n даёт 0.0, а не деление на ноль)"""
    n = validate_finite(periods, "periods")
    value = validate_finite(future, "future") * _growth_factor(rate, -n)
    return ensure_finite_result(value, "present_value")


def loan_payment(principal: float, rate: float, periods: int) -> float:
    """
    Уровневый аннуитетный платёж.

    Args:
        principal: Сумма кредита
        rate: Ставка за один платёжный период, %
        periods: Число платежей

    Examples:
        >>> loan_payment(1200, 0, 12)
        100.0
    """
    p = validate_positive(principal, "principal")
    r = validate_finite(rate, "rate") / 100.0
    n = validate_int(periods, "periods", min_value=1)

    if r <= -1.0:
        raise DomainViolation(f"rate must be > {RATE_FLOOR_PCT}%, got {rate}")

    if r == 0:
        return p / n

    # 1 - (1 + r)^-n через expm1/log1p: без потери точности при малых r
    try:
        annuity = -math.expm1(-n * math.log1p(r))
    except OverflowError as exc:
        raise DomainViolation(f"loan_payment: rate={rate}% over {n} periods overflows") from exc
    return ensure_finite_result(p * r / annuity, "loan_payment")


def return_on_investment(final_value: float, cost: float) -> float:
    """
    ROI в процентах: (final - cost) / cost × 100.

    cost == 0 — мягкое предупреждение и 0.0.
    """
    final = validate_finite(final_value, "final_value")
    c = validate_finite(cost, "cost")

    if c == 0:
        warn_questionable("return_on_investment: cost is zero, returning 0.0")
        return 0.0

    return ensure_finite_result((final - c) / c * 100.0, "return_on_investment")


def cagr(begin_value: float, end_value: float, years: float) -> float:
    """
    Compound annual growth rate (доля): (end / begin)^(1/years) - 1.

    Raises:
        InvalidArgumentError: begin_value <= 0 или years <= 0
    """
    begin = validate_positive(begin_value, "begin_value")
    end = validate_finite(end_value, "end_value")
    y = validate_positive(years, "years")

    if end < 0:
        raise DomainViolation(f"end_value must be >= 0 for CAGR, got {end}")

    return checked_pow(end / begin, 1.0 / y, "cagr") - 1.0
