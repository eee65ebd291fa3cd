"""
Paradoxes — парадоксы теории вероятностей

- Birthday paradox: 1 - Π_{i=0}^{n-1} (days - i) / days
- Monty Hall: эмпирическая доля выигрышей стратегии switch/stay
- Benford's law: P(d) = log10(1 + 1/d), d ∈ 1..9
- Simpson's paradox: фиксированный иллюстративный набор данных

Monty Hall с seed использует PCG32 (детерминирован); без seed —
random.Random() (результат не воспроизводим).
"""

import logging
import math
import random
from collections.abc import Iterable
from typing import Final, Optional, Union

from scriptkit.core.domain.paradox import GroupRate, SimpsonParadoxData
from scriptkit.core.errors import InvalidArgumentError
from scriptkit.core.math.numerical_safeguards import validate_finite, validate_int
from scriptkit.core.math.prng import PCG32

logger = logging.getLogger(__name__)

DAYS_IN_YEAR: Final[int] = 365
DOOR_COUNT: Final[int] = 3
BENFORD_DIGITS: Final[tuple[int, ...]] = tuple(range(1, 10))


# =============================================================================
# BIRTHDAY PARADOX
# =============================================================================


def birthday_paradox(n: int, days: int = DAYS_IN_YEAR) -> float:
    """
    Вероятность совпадения хотя бы двух дней рождения среди n человек.

    Examples:
        >>> 0.50 < birthday_paradox(23) < 0.51
        True
        >>> birthday_paradox(1)
        0.0
    """
    validate_int(n, "n")
    validate_int(days, "days", min_value=1)

    if n <= 1:
        return 0.0
    if n > days:
        return 1.0

    p_unique = 1.0
    for i in range(n):
        p_unique *= (days - i) / days

    return 1.0 - p_unique


# =============================================================================
# MONTY HALL
# =============================================================================


def monty_hall(trials: int, switch: bool = True, seed: Optional[int] = None) -> float:
    """
    Симуляция задачи Монти Холла.

    Каждое испытание: случайная дверь с призом, случайный выбор игрока,
    ведущий открывает случайную невыбранную пустую дверь, игрок
    меняет выбор (switch=True) или остаётся.

    Args:
        trials: Число испытаний (>= 1)
        switch: Стратегия игрока
        seed: Seed для PCG32 (None — недетерминированный запуск)

    Returns:
        Эмпирическая доля выигрышей в [0, 1]
    """
    validate_int(trials, "trials", min_value=1)
    rng: Union[PCG32, random.Random] = PCG32(seed) if seed is not None else random.Random()

    wins = 0
    for _ in range(trials):
        prize = rng.randint(0, DOOR_COUNT - 1)
        choice = rng.randint(0, DOOR_COUNT - 1)

        openable = [d for d in range(DOOR_COUNT) if d != choice and d != prize]
        revealed = openable[rng.randint(0, len(openable) - 1)]

        if switch:
            choice = next(d for d in range(DOOR_COUNT) if d != choice and d != revealed)

        if choice == prize:
            wins += 1

    rate = wins / trials
    logger.debug("monty_hall: trials=%d switch=%s win_rate=%.4f", trials, switch, rate)
    return rate


# =============================================================================
# BENFORD'S LAW
# =============================================================================


def benford_expected(digit: int) -> float:
    """
    Ожидаемая частота первой цифры по закону Бенфорда.

    Raises:
        InvalidArgumentError: digit вне 1..9

    Examples:
        >>> round(benford_expected(1), 4)
        0.301
    """
    validate_int(digit, "digit")
    if digit not in BENFORD_DIGITS:
        raise InvalidArgumentError(f"digit must be in 1..9, got {digit}")
    return math.log10(1.0 + 1.0 / digit)


def benford_distribution() -> dict[int, float]:
    """Ожидаемые частоты для цифр 1..9 (сумма = 1)."""
    return {d: benford_expected(d) for d in BENFORD_DIGITS}


def _leading_digit(value: float) -> Optional[int]:
    magnitude = abs(value)
    if magnitude == 0:
        return None
    # Нормализация в [1, 10) через форматирование: избегает ошибок log10 на границах
    return int(f"{magnitude:e}"[0])


def benford_observed(values: Iterable[float]) -> dict[int, float]:
    """
    Эмпирические частоты первых цифр. Нули пропускаются.

    Если ни одного ненулевого значения нет, все частоты = 0.0.
    """
    counts = {d: 0 for d in BENFORD_DIGITS}
    total = 0
    for i, value in enumerate(values):
        digit = _leading_digit(validate_finite(value, f"values[{i}]"))
        if digit is None:
            continue
        counts[digit] += 1
        total += 1

    if total == 0:
        return {d: 0.0 for d in BENFORD_DIGITS}
    return {d: c / total for d, c in counts.items()}


# =============================================================================
# SIMPSON'S PARADOX
# =============================================================================


def simpsons_paradox_example() -> SimpsonParadoxData:
    """
    Классический пример (лечение камней в почках, Charig et al. 1986).

    A лучше B и для малых, и для больших камней, но хуже в сумме.
    """
    treatment_a = {
        "small": GroupRate(successes=81, trials=87),
        "large": GroupRate(successes=192, trials=263),
    }
    treatment_b = {
        "small": GroupRate(successes=234, trials=270),
        "large": GroupRate(successes=55, trials=80),
    }

    combined_a = GroupRate(
        successes=sum(g.successes for g in treatment_a.values()),
        trials=sum(g.trials for g in treatment_a.values()),
    )
    combined_b = GroupRate(
        successes=sum(g.successes for g in treatment_b.values()),
        trials=sum(g.trials for g in treatment_b.values()),
    )

    a_wins_every_group = all(treatment_a[k].rate > treatment_b[k].rate for k in treatment_a)
    paradox_holds = a_wins_every_group and combined_a.rate < combined_b.rate

    return SimpsonParadoxData(
        treatment_a=treatment_a,
        treatment_b=treatment_b,
        combined_a=combined_a,
        combined_b=combined_b,
        paradox_holds=paradox_holds,
    )
