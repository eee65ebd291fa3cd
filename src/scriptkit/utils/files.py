"""
Files — чтение/запись текста и JSON, файловая XOR-обфускация

Каждая функция открывает и закрывает свой дескриптор в пределах вызова.
Отсутствующий файл и битый JSON → InvalidArgumentError.
Несоответствие JSON-схеме → ContractViolation.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from scriptkit.core.contracts.validators import validate_against
from scriptkit.core.errors import InvalidArgumentError
from scriptkit.core.math.numerical_safeguards import require_not_none, validate_int
from scriptkit.crypto.toy_ciphers import xor_decrypt, xor_encrypt

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _as_path(path: Optional[PathLike], name: str = "path") -> Path:
    require_not_none(path, name)
    if not isinstance(path, (str, Path)):
        raise InvalidArgumentError(f"{name} must be str or Path, got {type(path).__name__}")
    if str(path) == "":
        raise InvalidArgumentError(f"{name} must not be empty")
    return Path(path)


def file_exists(path: PathLike) -> bool:
    return _as_path(path).is_file()


def read_text(path: PathLike, encoding: str = "utf-8") -> str:
    """
    Raises:
        InvalidArgumentError: файл не найден или не читается
    """
    p = _as_path(path)
    try:
        with p.open("r", encoding=encoding) as f:
            return f.read()
    except FileNotFoundError as e:
        raise InvalidArgumentError(f"file not found: {p}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidArgumentError(f"cannot read {p}: {e}") from e


def write_text(path: PathLike, text: str, encoding: str = "utf-8") -> Path:
    """Запись текста (родительские директории создаются). Возвращает путь."""
    p = _as_path(path)
    require_not_none(text, "text")
    if not isinstance(text, str):
        raise InvalidArgumentError(f"text must be a str, got {type(text).__name__}")
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("w", encoding=encoding) as f:
            f.write(text)
    except (OSError, LookupError, UnicodeEncodeError) as e:
        raise InvalidArgumentError(f"cannot write {p}: {e}") from e
    logger.debug("Wrote %d chars to %s", len(text), p)
    return p


def read_json(path: PathLike, schema: Optional[Dict[str, Any]] = None) -> Any:
    """
    Чтение JSON с опциональной проверкой схемой (Draft 2020-12).

    Raises:
        InvalidArgumentError: файла нет или JSON некорректен
        ContractViolation: данные не соответствуют schema
    """
    p = _as_path(path)
    raw = read_text(p)
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidArgumentError(f"malformed JSON in {p}: {e.msg} (line {e.lineno})") from e

    if schema is not None:
        validate_against(data, schema)
    return data


def write_json(
    path: PathLike,
    data: Any,
    schema: Optional[Dict[str, Any]] = None,
    indent: int = 2,
) -> Path:
    """
    Запись JSON. При заданной schema данные проверяются ДО записи,
    так что невалидный документ на диск не попадает.

    Raises:
        InvalidArgumentError: данные не сериализуются в JSON
        ContractViolation: данные не соответствуют schema
    """
    p = _as_path(path)
    validate_int(indent, "indent", min_value=0)

    if schema is not None:
        validate_against(data, schema)

    try:
        text = json.dumps(data, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"data is not JSON-serializable: {e}") from e

    return write_text(p, text + "\n")


def encrypt_file(src: PathLike, dst: PathLike, key: str) -> Path:
    """XOR-обфускация текстового файла: dst содержит hex."""
    source = _as_path(src, "src")
    target = _as_path(dst, "dst")
    return write_text(target, xor_encrypt(read_text(source), key))


def decrypt_file(src: PathLike, dst: PathLike, key: str) -> Path:
    """
    Обратная операция к encrypt_file.

    Raises:
        InvalidArgumentError: src не hex или ключ не подходит
    """
    source = _as_path(src, "src")
    target = _as_path(dst, "dst")
    return write_text(target, xor_decrypt(read_text(source).strip(), key))
