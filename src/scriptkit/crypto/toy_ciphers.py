"""
Toy Ciphers — обфускация и контрольные суммы

ВНИМАНИЕ: ни одна функция этого модуля не обеспечивает криптостойкость.
Это утилиты обфускации/чексумм для игровых данных (сохранения, конфиги),
а не защита от злоумышленника.

- XOR stream: побайтовый XOR с повторяющимся ключом, вывод в lowercase hex
- Substitution: перестановка 62-символьного алфавита, PCG32 Fisher-Yates по seed
- djb2: rolling hash h = h·33 + c, маска 31 бит
- Base64: стандартный кодек, толерантное декодирование
- Caesar / ROT13
"""

import base64
import binascii
import re
import string
from typing import Final, Optional

from scriptkit.core.errors import InvalidArgumentError
from scriptkit.core.math.numerical_safeguards import require_not_none, validate_int
from scriptkit.core.math.prng import seeded_shuffle

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Порядок алфавита входит в контракт шифра: от него зависит перестановка для seed
SUBSTITUTION_ALPHABET: Final[str] = (
    string.ascii_lowercase + string.ascii_uppercase + string.digits
)

DJB2_SEED: Final[int] = 5381
DJB2_MASK: Final[int] = 0x7FFFFFFF

_BASE64_INVALID: Final[re.Pattern[str]] = re.compile(r"[^A-Za-z0-9+/]")


def _require_text(value: Optional[str], name: str) -> str:
    require_not_none(value, name)
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _require_key(key: Optional[str]) -> bytes:
    text = _require_text(key, "key")
    if not text:
        raise InvalidArgumentError("key must not be empty")
    return text.encode("utf-8")


# =============================================================================
# XOR STREAM
# =============================================================================


def xor_bytes(data: bytes, key: bytes) -> bytes:
    """
    XOR с повторяющимся ключом. Симметрична: xor_bytes(xor_bytes(d, k), k) == d.

    Raises:
        InvalidArgumentError: пустой ключ
    """
    require_not_none(data, "data")
    require_not_none(key, "key")
    if not key:
        raise InvalidArgumentError("key must not be empty")

    key_len = len(key)
    return bytes(b ^ key[i % key_len] for i, b in enumerate(data))


def xor_encrypt(text: str, key: str) -> str:
    """
    XOR-шифрование UTF-8 текста, результат — lowercase hex.

    Examples:
        >>> xor_encrypt("A", "a")
        '20'
    """
    plain = _require_text(text, "text").encode("utf-8")
    return xor_bytes(plain, _require_key(key)).hex()


def xor_decrypt(hex_text: str, key: str) -> str:
    """
    Обратная операция к xor_encrypt.

    Raises:
        InvalidArgumentError: невалидный hex или результат не UTF-8
    """
    encoded = _require_text(hex_text, "hex_text")
    key_bytes = _require_key(key)

    try:
        cipher = bytes.fromhex(encoded)
    except ValueError as e:
        raise InvalidArgumentError(f"hex_text is not valid hex: {e}") from e

    try:
        return xor_bytes(cipher, key_bytes).decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidArgumentError("decrypted bytes are not valid UTF-8 (wrong key?)") from e


# =============================================================================
# SUBSTITUTION CIPHER
# =============================================================================


def substitution_key(seed: int) -> str:
    """
    Перестановка SUBSTITUTION_ALPHABET для seed (PCG32 Fisher-Yates).

    Одинаковый seed → одинаковая перестановка в любой среде.
    """
    validate_int(seed, "seed")
    return "".join(seeded_shuffle(SUBSTITUTION_ALPHABET, seed))


def substitution_encrypt(text: str, seed: int) -> str:
    """
    Подстановка alphabet[i] → key[i]. Символы вне алфавита не меняются.
    """
    plain = _require_text(text, "text")
    table = str.maketrans(SUBSTITUTION_ALPHABET, substitution_key(seed))
    return plain.translate(table)


def substitution_decrypt(text: str, seed: int) -> str:
    cipher = _require_text(text, "text")
    table = str.maketrans(substitution_key(seed), SUBSTITUTION_ALPHABET)
    return cipher.translate(table)


# =============================================================================
# HASH
# =============================================================================


def djb2_hash(text: str) -> int:
    """
    djb2 по code points строки, результат в [0, 2^31).

    Examples:
        >>> djb2_hash("")
        5381
        >>> djb2_hash("a")
        177670
    """
    h = DJB2_SEED
    for ch in _require_text(text, "text"):
        h = ((h << 5) + h + ord(ch)) & DJB2_MASK
    return h


# =============================================================================
# BASE64
# =============================================================================


def base64_encode(text: str) -> str:
    """Base64 (стандартный алфавит, с padding) от UTF-8 байтов текста."""
    return base64.b64encode(_require_text(text, "text").encode("utf-8")).decode("ascii")


def base64_decode(text: str) -> str:
    """
    Толерантное декодирование Base64.

    Символы вне [A-Za-z0-9+/] удаляются (включая '=' и пробелы),
    затем строка дополняется '=' до длины, кратной 4.

    Raises:
        InvalidArgumentError: данные не декодируются или не UTF-8
    """
    cleaned = _BASE64_INVALID.sub("", _require_text(text, "text"))

    if len(cleaned) % 4 == 1:
        raise InvalidArgumentError("base64 input has an impossible length after cleanup")

    padded = cleaned + "=" * (-len(cleaned) % 4)
    try:
        raw = base64.b64decode(padded, validate=True)
        return raw.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise InvalidArgumentError(f"cannot decode base64 input: {e}") from e


# =============================================================================
# CAESAR / ROT13
# =============================================================================


def caesar_shift(text: str, shift: int) -> str:
    """Сдвиг латинских букв на shift позиций (регистр сохраняется)."""
    plain = _require_text(text, "text")
    validate_int(shift, "shift")
    k = shift % 26

    lower = string.ascii_lowercase
    upper = string.ascii_uppercase
    table = str.maketrans(
        lower + upper,
        lower[k:] + lower[:k] + upper[k:] + upper[:k],
    )
    return plain.translate(table)


def rot13(text: str) -> str:
    return caesar_shift(text, 13)
