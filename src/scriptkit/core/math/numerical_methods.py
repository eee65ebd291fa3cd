"""
Numerical Methods — поиск корней, интегрирование, дифференцирование

- Newton's method с ранней остановкой при исчезающей производной
- Bisection для гарантированно сходящегося поиска в интервале
- Composite Simpson's rule и trapezoid rule
- Центральная разность для производной

ФОРМУЛЫ:
    Newton:      x_{n+1} = x_n - f(x_n) / f'(x_n)
    Simpson:     ∫ ≈ h/3 · [f0 + 4f1 + 2f2 + 4f3 + ... + 4f_{n-1} + f_n],  n чётное
    Derivative:  f'(x) ≈ (f(x+h) - f(x-h)) / 2h

Итерационные параметры берутся из NumericsConfig (tolerance, max_iterations).
"""

import logging
from typing import Callable, NamedTuple, Optional

from scriptkit.core.config import DEFAULT_NUMERICS, NumericsConfig
from scriptkit.core.errors import DomainViolation, warn_questionable
from scriptkit.core.math.numerical_safeguards import (
    require_not_none,
    validate_finite,
    validate_int,
    validate_positive,
)

logger = logging.getLogger(__name__)

RealFunction = Callable[[float], float]


# =============================================================================
# NEWTON'S METHOD
# =============================================================================


class NewtonResult(NamedTuple):
    """Итог поиска корня методом Ньютона."""

    root: float  # последняя итерация (лучшее приближение)
    iterations: int  # число выполненных шагов
    converged: bool  # |x_{n+1} - x_n| < tolerance
    derivative_vanished: bool  # остановка из-за |f'(x)| < tolerance
    is_root: bool  # |f(root)| < tolerance


def newton_solve(
    f: RealFunction,
    df: RealFunction,
    x0: float,
    config: Optional[NumericsConfig] = None,
) -> NewtonResult:
    """
    Поиск корня f методом Ньютона.

    Остановка:
    - |x_{n+1} - x_n| < tolerance → converged
    - |f'(x_n)| < tolerance → derivative_vanished, возвращается x_n;
      is_root показывает, является ли x_n корнем (мягкое предупреждение)
    - max_iterations исчерпан → converged=False (мягкое предупреждение)

    Raises:
        InvalidArgumentError: f/df отсутствуют или x0 невалиден

    Examples:
        >>> r = newton_solve(lambda x: x * x - 4, lambda x: 2 * x, 1.0)
        >>> r.converged, round(r.root, 9)
        (True, 2.0)
    """
    require_not_none(f, "f")
    require_not_none(df, "df")
    cfg = config or DEFAULT_NUMERICS
    x = validate_finite(x0, "x0")

    for iteration in range(cfg.max_iterations):
        fx = f(x)
        dfx = df(x)

        if abs(dfx) < cfg.tolerance:
            is_root = abs(fx) < cfg.tolerance
            if is_root:
                warn_questionable(
                    f"newton: derivative vanished at x={x!r}, which is a root"
                )
            else:
                warn_questionable(
                    f"newton: derivative vanished at x={x!r} (f(x)={fx!r}), "
                    "returning current iterate"
                )
            return NewtonResult(
                root=x,
                iterations=iteration,
                converged=False,
                derivative_vanished=True,
                is_root=is_root,
            )

        x_next = x - fx / dfx

        if abs(x_next - x) < cfg.tolerance:
            logger.debug("newton converged after %d iterations: %r", iteration + 1, x_next)
            return NewtonResult(
                root=x_next,
                iterations=iteration + 1,
                converged=True,
                derivative_vanished=False,
                is_root=abs(f(x_next)) < cfg.tolerance,
            )

        x = x_next

    warn_questionable(
        f"newton: no convergence after {cfg.max_iterations} iterations, last x={x!r}"
    )
    return NewtonResult(
        root=x,
        iterations=cfg.max_iterations,
        converged=False,
        derivative_vanished=False,
        is_root=abs(f(x)) < cfg.tolerance,
    )


def find_root_newton(
    f: RealFunction,
    df: RealFunction,
    x0: float,
    tolerance: float = DEFAULT_NUMERICS.tolerance,
    max_iterations: int = DEFAULT_NUMERICS.max_iterations,
) -> float:
    """
    Корень f методом Ньютона (только значение).

    См. newton_solve для полной диагностики.
    """
    config = NumericsConfig(tolerance=tolerance, max_iterations=max_iterations)
    return newton_solve(f, df, x0, config).root


def find_root_bisection(
    f: RealFunction,
    a: float,
    b: float,
    config: Optional[NumericsConfig] = None,
) -> float:
    """
    Корень f в [a, b] методом бисекции.

    Raises:
        DomainViolation: f(a) и f(b) одного знака
    """
    require_not_none(f, "f")
    cfg = config or DEFAULT_NUMERICS
    lo = validate_finite(a, "a")
    hi = validate_finite(b, "b")
    if lo > hi:
        lo, hi = hi, lo

    f_lo = f(lo)
    f_hi = f(hi)
    if f_lo == 0:
        return lo
    if f_hi == 0:
        return hi
    if (f_lo > 0) == (f_hi > 0):
        raise DomainViolation(
            f"bisection bracket [{lo}, {hi}] does not change sign "
            f"(f(a)={f_lo}, f(b)={f_hi})"
        )

    mid = (lo + hi) / 2.0
    for _ in range(cfg.max_iterations):
        mid = (lo + hi) / 2.0
        f_mid = f(mid)
        if f_mid == 0 or (hi - lo) / 2.0 < cfg.tolerance:
            return mid
        if (f_mid > 0) == (f_lo > 0):
            lo, f_lo = mid, f_mid
        else:
            hi = mid

    return mid


# =============================================================================
# ИНТЕГРИРОВАНИЕ
# =============================================================================


def integrate_simpson(
    f: RealFunction,
    a: float,
    b: float,
    n: int = DEFAULT_NUMERICS.simpson_intervals,
) -> float:
    """
    Определённый интеграл по составной формуле Симпсона.

    Нечётное n молча увеличивается на 1.

    Raises:
        InvalidArgumentError: n < 1

    Examples:
        >>> abs(integrate_simpson(lambda x: x * x, 0.0, 2.0, 100) - 8 / 3) < 1e-9
        True
    """
    require_not_none(f, "f")
    lo = validate_finite(a, "a")
    hi = validate_finite(b, "b")
    validate_int(n, "n", min_value=1)

    if lo == hi:
        return 0.0

    if n % 2 == 1:
        n += 1

    h = (hi - lo) / n
    total = f(lo) + f(hi)
    for i in range(1, n):
        weight = 4.0 if i % 2 == 1 else 2.0
        total += weight * f(lo + i * h)

    return total * h / 3.0


def integrate_trapezoid(
    f: RealFunction,
    a: float,
    b: float,
    n: int = DEFAULT_NUMERICS.simpson_intervals,
) -> float:
    """Определённый интеграл по составной формуле трапеций."""
    require_not_none(f, "f")
    lo = validate_finite(a, "a")
    hi = validate_finite(b, "b")
    validate_int(n, "n", min_value=1)

    h = (hi - lo) / n
    total = (f(lo) + f(hi)) / 2.0
    for i in range(1, n):
        total += f(lo + i * h)

    return total * h


# =============================================================================
# ДИФФЕРЕНЦИРОВАНИЕ
# =============================================================================


def derivative(
    f: RealFunction,
    x: float,
    h: float = DEFAULT_NUMERICS.derivative_step,
) -> float:
    """
    Производная центральной разностью (f(x+h) - f(x-h)) / 2h.

    Raises:
        InvalidArgumentError: h <= 0
    """
    require_not_none(f, "f")
    point = validate_finite(x, "x")
    step = validate_positive(h, "h")
    return (f(point + step) - f(point - step)) / (2.0 * step)
