"""
Amortization — график погашения кредита с фиксированной ставкой

Уровневый платёж по аннуитетной формуле, затем пошаговый проход:
    interest_k  = balance_{k-1} × r
    principal_k = payment - interest_k
    balance_k   = balance_{k-1} - principal_k

Последний balance принудительно обнуляется (остаток округления
переносится в principal последнего платежа).
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

from scriptkit.core.contracts import validate_amortization_schedule
from scriptkit.core.domain.finance import AmortizationRow, AmortizationSchedule
from scriptkit.core.errors import InvalidArgumentError
from scriptkit.core.math.numerical_safeguards import (
    validate_int,
    validate_non_negative,
    validate_positive,
)
from scriptkit.finance.interest import loan_payment
from scriptkit.utils.files import write_json

logger = logging.getLogger(__name__)


def amortization_schedule(
    principal: float,
    annual_rate: float,
    years: float,
    payments_per_year: int = 12,
) -> AmortizationSchedule:
    """
    Полный график погашения.

    Args:
        principal: Сумма кредита (> 0)
        annual_rate: Годовая ставка, % (>= 0)
        years: Срок в годах (> 0)
        payments_per_year: Платежей в год (default: 12)

    Returns:
        AmortizationSchedule с одной строкой на платёж

    Raises:
        InvalidArgumentError: невалидные параметры или < 1 платежа

    Examples:
        >>> s = amortization_schedule(1200, 0, 1)
        >>> s.payment, s.periods, s.rows[-1].balance
        (100.0, 12, 0.0)
    """
    p = validate_positive(principal, "principal")
    rate_pct = validate_non_negative(annual_rate, "annual_rate")
    y = validate_positive(years, "years")
    ppy = validate_int(payments_per_year, "payments_per_year", min_value=1)

    periods = int(round(y * ppy))
    if periods < 1:
        raise InvalidArgumentError(
            f"loan term of {y} years with {ppy} payments/year yields no payments"
        )

    period_rate_pct = rate_pct / ppy
    period_rate = period_rate_pct / 100.0
    payment = loan_payment(p, period_rate_pct, periods)

    rows: list[AmortizationRow] = []
    balance = p
    total_interest = 0.0
    total_paid = 0.0

    for period in range(1, periods + 1):
        interest = balance * period_rate
        principal_part = payment - interest
        actual_payment = payment

        if period == periods:
            # Последний платёж гасит остаток целиком
            principal_part = balance
            actual_payment = balance + interest

        balance = max(balance - principal_part, 0.0)
        if period == periods:
            balance = 0.0

        total_interest += interest
        total_paid += actual_payment
        rows.append(
            AmortizationRow(
                period=period,
                payment=actual_payment,
                interest=interest,
                principal=principal_part,
                balance=balance,
            )
        )

    logger.debug(
        "amortization: principal=%r rate=%r%% periods=%d payment=%r",
        p,
        rate_pct,
        periods,
        payment,
    )

    return AmortizationSchedule(
        principal=p,
        annual_rate=rate_pct,
        payments_per_year=ppy,
        periods=periods,
        payment=payment,
        total_interest=total_interest,
        total_paid=total_paid,
        rows=tuple(rows),
    )


def schedule_to_dict(schedule: AmortizationSchedule) -> Dict[str, Any]:
    """JSON-совместимое представление графика, проверенное по контракту."""
    data = schedule.model_dump(mode="json")
    validate_amortization_schedule(data)
    return data


def write_schedule_json(schedule: AmortizationSchedule, path: Union[str, Path]) -> Path:
    """
    Экспорт графика в JSON файл (с валидацией по контракту).

    Returns:
        Путь к записанному файлу
    """
    return write_json(path, schedule_to_dict(schedule))
