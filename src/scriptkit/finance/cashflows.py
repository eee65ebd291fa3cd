"""
Cash Flows — NPV и IRR

Ставки в ДОЛЯХ (0.1 = 10%). cash_flows[0] — поток в момент t=0
(не дисконтируется), обычно отрицательная инвестиция.

ФОРМУЛЫ:
    NPV(r)  = Σ CF_t / (1 + r)^t
    NPV'(r) = Σ -t × CF_t / (1 + r)^(t+1)
    IRR: Newton по r до NPV(r) = 0
"""

import logging
import math
from collections.abc import Sequence
from typing import NamedTuple, Optional

from scriptkit.core.config import DEFAULT_NUMERICS, NumericsConfig
from scriptkit.core.errors import DomainViolation, InvalidArgumentError, warn_questionable
from scriptkit.core.math.numerical_safeguards import (
    checked_exp,
    ensure_finite_result,
    validate_finite,
)

logger = logging.getLogger(__name__)


def _validated_flows(cash_flows: Sequence[float]) -> list[float]:
    if cash_flows is None:
        raise InvalidArgumentError("cash_flows is required, got None")
    return [validate_finite(cf, f"cash_flows[{t}]") for t, cf in enumerate(cash_flows)]


def _check_rate(rate: float) -> float:
    r = validate_finite(rate, "rate")
    if r <= -1.0:
        raise DomainViolation(f"discount rate must be > -1, got {r}")
    return r


def _discounted(cf: float, growth: float, t: int) -> float:
    """
    cf / growth^t. Если growth^t переполняется или исчезает, считаем
    в логарифмах: слагаемое либо уходит в 0.0, либо честно не представимо.
    """
    try:
        return cf / growth**t
    except (OverflowError, ZeroDivisionError):
        pass
    if cf == 0.0:
        return 0.0
    magnitude = checked_exp(math.log(abs(cf)) - t * math.log(growth), "discounting")
    return math.copysign(magnitude, cf)


def _npv(rate: float, flows: list[float]) -> float:
    growth = 1.0 + rate
    total = sum(_discounted(cf, growth, t) for t, cf in enumerate(flows))
    return ensure_finite_result(total, f"NPV at rate={rate!r}")


def net_present_value(rate: float, cash_flows: Sequence[float]) -> float:
    """
    Чистая приведённая стоимость. Пустой список → 0.0.

    Raises:
        DomainViolation: rate <= -1 или NPV не представима в float

    Examples:
        >>> round(net_present_value(0.1, [-100, 110]), 10)
        0.0
    """
    r = _check_rate(rate)
    flows = _validated_flows(cash_flows)
    return _npv(r, flows)


def _npv_derivative(rate: float, flows: list[float]) -> float:
    growth = 1.0 + rate
    total = sum(_discounted(-t * cf, growth, t + 1) for t, cf in enumerate(flows) if t > 0)
    return ensure_finite_result(total, f"NPV derivative at rate={rate!r}")


class IRRResult(NamedTuple):
    """Итог поиска внутренней нормы доходности."""

    rate: float  # лучшее найденное значение
    iterations: int
    converged: bool
    derivative_vanished: bool


def irr_solve(
    cash_flows: Sequence[float],
    guess: float = 0.1,
    config: Optional[NumericsConfig] = None,
) -> IRRResult:
    """
    IRR методом Ньютона с аналитической производной NPV.

    При |NPV'(r)| < tolerance — мягкое предупреждение, возвращается
    текущее r. Если итерация уводит r за -1, возвращается последнее
    допустимое r.

    Raises:
        InvalidArgumentError: < 2 потоков или потоки без смены знака
    """
    cfg = config or DEFAULT_NUMERICS
    flows = _validated_flows(cash_flows)

    if len(flows) < 2:
        raise InvalidArgumentError("IRR requires at least two cash flows")
    if not (any(cf > 0 for cf in flows) and any(cf < 0 for cf in flows)):
        raise InvalidArgumentError("IRR requires both positive and negative cash flows")

    r = _check_rate(guess)

    for iteration in range(cfg.max_iterations):
        try:
            value = _npv(r, flows)
            slope = _npv_derivative(r, flows)
        except DomainViolation as exc:
            warn_questionable(f"irr: {exc}, returning best guess")
            return IRRResult(rate=r, iterations=iteration, converged=False, derivative_vanished=False)

        if abs(slope) < cfg.tolerance:
            warn_questionable(
                f"irr: NPV derivative vanished at rate={r!r}, returning best guess"
            )
            return IRRResult(rate=r, iterations=iteration, converged=False, derivative_vanished=True)

        r_next = r - value / slope

        if not math.isfinite(r_next) or r_next <= -1.0:
            warn_questionable(
                f"irr: iteration left the domain (rate={r_next!r}), returning best guess"
            )
            return IRRResult(rate=r, iterations=iteration + 1, converged=False, derivative_vanished=False)

        if abs(r_next - r) < cfg.tolerance:
            logger.debug("irr converged after %d iterations: %r", iteration + 1, r_next)
            return IRRResult(rate=r_next, iterations=iteration + 1, converged=True, derivative_vanished=False)

        r = r_next

    warn_questionable(f"irr: no convergence after {cfg.max_iterations} iterations")
    return IRRResult(rate=r, iterations=cfg.max_iterations, converged=False, derivative_vanished=False)


def internal_rate_of_return(
    cash_flows: Sequence[float],
    guess: float = 0.1,
    config: Optional[NumericsConfig] = None,
) -> float:
    """
    Внутренняя норма доходности (только значение).

    Examples:
        >>> round(internal_rate_of_return([-100, 110]), 9)
        0.1
    """
    return irr_solve(cash_flows, guess, config).rate
