"""
Конфигурация численных алгоритмов и compounding.

Immutable dataclass-конфиги с дефолтами. Функции принимают config=None
и в этом случае используют модульные DEFAULT_*.
"""

from dataclasses import dataclass
from typing import Final

from scriptkit.core.errors import InvalidArgumentError


@dataclass(frozen=True)
class NumericsConfig:
    """Параметры итерационных методов (Newton, IRR, Simpson, derivative)."""

    # Порог сходимости и порог "нулевой" производной
    tolerance: float = 1e-7
    max_iterations: int = 100

    # Шаг центральной разности
    derivative_step: float = 1e-5

    # Число подынтервалов Simpson по умолчанию
    simpson_intervals: int = 100

    def __post_init__(self) -> None:
        if not self.tolerance > 0:
            raise InvalidArgumentError(f"tolerance must be positive, got {self.tolerance}")
        if self.max_iterations < 1:
            raise InvalidArgumentError(
                f"max_iterations must be >= 1, got {self.max_iterations}"
            )
        if not self.derivative_step > 0:
            raise InvalidArgumentError(
                f"derivative_step must be positive, got {self.derivative_step}"
            )
        if self.simpson_intervals < 1:
            raise InvalidArgumentError(
                f"simpson_intervals must be >= 1, got {self.simpson_intervals}"
            )


@dataclass(frozen=True)
class CompoundingConfig:
    """
    Допустимые интервалы начисления сложного процента (в годах).

    Запрошенный интервал округляется до ближайшего кратного step
    и ограничивается диапазоном [min, max].
    """

    min_interval_years: float = 1.0 / 12.0
    max_interval_years: float = 1.0
    interval_step_years: float = 1.0 / 12.0

    def __post_init__(self) -> None:
        if not 0 < self.min_interval_years <= self.max_interval_years:
            raise InvalidArgumentError(
                "expected 0 < min_interval_years <= max_interval_years, got "
                f"{self.min_interval_years}..{self.max_interval_years}"
            )
        if not self.interval_step_years > 0:
            raise InvalidArgumentError(
                f"interval_step_years must be positive, got {self.interval_step_years}"
            )


DEFAULT_NUMERICS: Final[NumericsConfig] = NumericsConfig()
DEFAULT_COMPOUNDING: Final[CompoundingConfig] = CompoundingConfig()
