"""
Errors & Warnings — типизированные сигналы каталога

Два канала:
- Жёсткая ошибка (невалидный/отсутствующий аргумент, невозможное предусловие)
  → исключение из иерархии ScriptKitError
- Мягкое предупреждение (сомнительный, но восстановимый вход)
  → warnings.warn(..., QuestionableInputWarning) + запись в лог,
    функция возвращает безопасный default

Для вызывающих, которым нужен "никогда не падать", см. core.result.attempt.
"""

import logging
import warnings
from typing import Final

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ScriptKitError(Exception):
    """Базовое исключение каталога."""

    code: str = "scriptkit_error"


class InvalidArgumentError(ScriptKitError, ValueError):
    """
    Невалидный или отсутствующий аргумент.

    Например: отрицательная целая степень, None вместо значения,
    пустой ключ шифрования, NaN/Inf.
    """

    code = "invalid_argument"


class DomainViolation(ScriptKitError, ValueError):
    """
    Математически невозможный запрос.

    Например: деление на нулевое комплексное число, треугольник,
    нарушающий неравенство треугольника, скорость >= c.
    """

    code = "domain_violation"


class ContractViolation(ScriptKitError):
    """JSON данные не соответствуют схеме контракта."""

    code = "contract_violation"


# =============================================================================
# WARNINGS
# =============================================================================


class ScriptKitWarning(UserWarning):
    """Базовая категория предупреждений каталога."""


class QuestionableInputWarning(ScriptKitWarning):
    """Сомнительный, но восстановимый вход (функция вернула safe default)."""


# Стек для warnings.warn: указывает на вызывающий код, а не на этот модуль
_WARN_STACKLEVEL: Final[int] = 3


def warn_questionable(message: str) -> None:
    """
    Мягкое предупреждение: лог WARNING + QuestionableInputWarning.

    Args:
        message: Человекочитаемое описание проблемы
    """
    logger.warning(message)
    warnings.warn(message, QuestionableInputWarning, stacklevel=_WARN_STACKLEVEL)
