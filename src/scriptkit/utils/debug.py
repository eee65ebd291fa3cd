"""
Debug — замер времени и дамп состояния в лог
"""

import json
import logging
import time
from collections.abc import Callable, Mapping
from typing import Any, Optional, TypeVar

from scriptkit.core.math.numerical_safeguards import require_not_none

logger = logging.getLogger(__name__)

R = TypeVar("R")


class Stopwatch:
    """
    Контекстный менеджер на time.perf_counter.

    При выходе пишет затраченное время в лог (DEBUG).

    Examples:
        >>> with Stopwatch("build") as sw:
        ...     pass
        >>> sw.elapsed_ms >= 0.0
        True
    """

    def __init__(self, label: str = "block", log: Optional[logging.Logger] = None):
        self.label = label
        self._log = log or logger
        self._start: Optional[float] = None
        self._stop: Optional[float] = None

    def __enter__(self) -> "Stopwatch":
        self._start = time.perf_counter()
        self._stop = None
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._stop = time.perf_counter()
        self._log.debug("%s took %.3f ms", self.label, self.elapsed_ms)

    @property
    def elapsed(self) -> float:
        """Секунды; внутри блока — время с момента входа."""
        if self._start is None:
            return 0.0
        end = self._stop if self._stop is not None else time.perf_counter()
        return end - self._start

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0


def measure_call(func: Callable[..., R], *args: Any, **kwargs: Any) -> tuple[R, float]:
    """Вызов func(*args, **kwargs); возвращает (результат, миллисекунды)."""
    require_not_none(func, "func")
    name = getattr(func, "__name__", repr(func))
    with Stopwatch(name) as sw:
        result = func(*args, **kwargs)
    return result, sw.elapsed_ms


def debug_dump(data: Mapping[str, Any], title: str = "dump", log: Optional[logging.Logger] = None) -> str:
    """
    Pretty-print словаря в лог (DEBUG). Возвращает отформатированный текст.

    Несериализуемые значения выводятся через repr.
    """
    require_not_none(data, "data")
    text = json.dumps(dict(data), indent=2, sort_keys=True, default=repr, ensure_ascii=False)
    (log or logger).debug("%s:\n%s", title, text)
    return text
