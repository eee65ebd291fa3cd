"""
Strings — преобразования регистра и мелкие строковые помощники
"""

import random
import re
import string
import unicodedata
from typing import Final, Optional

from scriptkit.core.errors import InvalidArgumentError
from scriptkit.core.math.numerical_safeguards import require_not_none, validate_int
from scriptkit.core.math.prng import PCG32

DEFAULT_ALPHABET: Final[str] = string.ascii_letters + string.digits

# Границы слов: разделители, переход aB, переход ABc (HTTPServer → HTTP Server)
_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[\s_\-]+")
_LOWER_UPPER: Final[re.Pattern[str]] = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM: Final[re.Pattern[str]] = re.compile(r"([A-Z]+)([A-Z][a-z])")
_NON_SLUG: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9]+")


def _text(value: Optional[str], name: str = "text") -> str:
    require_not_none(value, name)
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _words(text: str) -> list[str]:
    """Разбиение идентификатора/фразы на слова."""
    spaced = _ACRONYM.sub(r"\1 \2", _text(text))
    spaced = _LOWER_UPPER.sub(r"\1 \2", spaced)
    return [w for w in _SEPARATORS.split(spaced) if w]


# =============================================================================
# РЕГИСТР
# =============================================================================


def to_snake_case(text: str) -> str:
    """
    Examples:
        >>> to_snake_case("playerMaxHealth")
        'player_max_health'
        >>> to_snake_case("HTTPServer")
        'http_server'
    """
    return "_".join(w.lower() for w in _words(text))


def to_kebab_case(text: str) -> str:
    return "-".join(w.lower() for w in _words(text))


def to_pascal_case(text: str) -> str:
    """
    Examples:
        >>> to_pascal_case("player_max_health")
        'PlayerMaxHealth'
    """
    return "".join(w[:1].upper() + w[1:].lower() for w in _words(text))


def to_camel_case(text: str) -> str:
    pascal = to_pascal_case(text)
    return pascal[:1].lower() + pascal[1:]


def to_title_case(text: str) -> str:
    """Слова с заглавной буквы через пробел: "hello_world" → "Hello World"."""
    return " ".join(w[:1].upper() + w[1:].lower() for w in _words(text))


def capitalize_first(text: str) -> str:
    """Первая буква заглавная, остальное без изменений."""
    s = _text(text)
    return s[:1].upper() + s[1:]


# =============================================================================
# ПРОЧЕЕ
# =============================================================================


def truncate(text: str, length: int, suffix: str = "...") -> str:
    """
    Обрезка до length символов включая suffix.

    Examples:
        >>> truncate("Hello, world", 8)
        'Hello...'
        >>> truncate("short", 10)
        'short'
    """
    s = _text(text)
    suffix = _text(suffix, "suffix")
    validate_int(length, "length", min_value=0)

    if len(s) <= length:
        return s
    if length <= len(suffix):
        return suffix[:length]
    return s[: length - len(suffix)] + suffix


def reverse_string(text: str) -> str:
    return _text(text)[::-1]


def is_palindrome(text: str) -> bool:
    """
    Палиндром без учёта регистра и не-алфавитно-цифровых символов.

    Examples:
        >>> is_palindrome("A man, a plan, a canal: Panama")
        True
    """
    cleaned = [ch.casefold() for ch in _text(text) if ch.isalnum()]
    return cleaned == cleaned[::-1]


def count_words(text: str) -> int:
    return len(_text(text).split())


def slugify(text: str) -> str:
    """
    URL-slug: ASCII, lowercase, слова через '-'.

    Examples:
        >>> slugify("  Héllo, World! ")
        'hello-world'
    """
    normalized = unicodedata.normalize("NFKD", _text(text))
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii").lower()
    return _NON_SLUG.sub("-", ascii_text).strip("-")


def random_string(
    length: int,
    seed: Optional[int] = None,
    alphabet: str = DEFAULT_ALPHABET,
) -> str:
    """
    Случайная строка из alphabet. С seed — детерминированно (PCG32).

    Raises:
        InvalidArgumentError: отрицательная длина или пустой алфавит
    """
    validate_int(length, "length", min_value=0)
    chars = _text(alphabet, "alphabet")
    if not chars:
        raise InvalidArgumentError("alphabet must not be empty")

    if seed is not None:
        rng = PCG32(seed)
        return "".join(chars[rng.bounded(len(chars))] for _ in range(length))
    return "".join(random.choices(chars, k=length))


def pad_left(text: str, width: int, fill: str = " ") -> str:
    validate_int(width, "width", min_value=0)
    if len(_text(fill, "fill")) != 1:
        raise InvalidArgumentError("fill must be a single character")
    return _text(text).rjust(width, fill)


def pad_right(text: str, width: int, fill: str = " ") -> str:
    validate_int(width, "width", min_value=0)
    if len(_text(fill, "fill")) != 1:
        raise InvalidArgumentError("fill must be a single character")
    return _text(text).ljust(width, fill)
