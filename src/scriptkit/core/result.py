"""
Outcome — единый тип результата на границе вызова

Любую функцию каталога можно вызвать через attempt(): она никогда не
пробрасывает ScriptKitError, а возвращает Outcome со значением либо
с safe default и типизированной ошибкой. Мягкие предупреждения,
выпущенные во время вызова, собираются в Outcome.warnings.

Исключения вне иерархии ScriptKitError (баги, KeyboardInterrupt и т.п.)
пробрасываются как есть.
"""

import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

from scriptkit.core.errors import ScriptKitError, ScriptKitWarning

T = TypeVar("T")


class Severity(str, Enum):
    """Уровень сигнала"""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Issue:
    """Типизированный дескриптор ошибки или предупреждения."""

    severity: Severity
    code: str
    message: str


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Результат вызова: значение + опциональная ошибка + предупреждения.

    При error != None value содержит safe default.
    """

    value: T
    error: Optional[Issue] = None
    warnings: tuple[Issue, ...] = ()

    @property
    def ok(self) -> bool:
        """True если вызов завершился без жёсткой ошибки."""
        return self.error is None

    def unwrap(self) -> T:
        """
        Значение успешного вызова.

        Raises:
            ScriptKitError: если вызов завершился ошибкой
        """
        if self.error is not None:
            raise ScriptKitError(f"{self.error.code}: {self.error.message}")
        return self.value


def attempt(
    func: Callable[..., T],
    /,
    *args: Any,
    fallback: Any = None,
    **kwargs: Any,
) -> Outcome[T]:
    """
    Вызов функции каталога без проброса ScriptKitError.

    Args:
        func: Функция каталога
        *args: Позиционные аргументы func
        fallback: Safe default, возвращаемый при ошибке
        **kwargs: Именованные аргументы func

    Returns:
        Outcome со значением или fallback + Issue

    Examples:
        >>> from scriptkit.core.math.basic import powi
        >>> attempt(powi, 2, 10).value
        1024
        >>> attempt(powi, 2, -1, fallback=0).error.code
        'invalid_argument'
    """
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", ScriptKitWarning)
        try:
            value = func(*args, **kwargs)
            error = None
        except ScriptKitError as exc:
            value = fallback
            error = Issue(Severity.ERROR, exc.code, str(exc))

    collected = tuple(
        Issue(Severity.WARNING, w.category.__name__, str(w.message))
        for w in caught
        if issubclass(w.category, ScriptKitWarning)
    )
    # Чужие предупреждения возвращаем в стандартный канал
    for w in caught:
        if not issubclass(w.category, ScriptKitWarning):
            warnings.warn_explicit(w.message, w.category, w.filename, w.lineno)

    return Outcome(value=value, error=error, warnings=collected)
