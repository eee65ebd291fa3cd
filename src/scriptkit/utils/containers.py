"""
Containers — помощники для списков и словарей

Функции не мутируют входы: всегда возвращается новый список/словарь.
Операции над множествами сохраняют порядок первого аргумента.
"""

import random
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from typing import Any, Optional, TypeVar

from scriptkit.core.errors import InvalidArgumentError, warn_questionable
from scriptkit.core.math.numerical_safeguards import require_not_none, validate_finite, validate_int
from scriptkit.core.math.prng import seeded_choice, seeded_shuffle

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

_MISSING = object()


# =============================================================================
# МАССИВЫ
# =============================================================================


def array_chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """
    Разбиение на куски длины size (последний может быть короче).

    Examples:
        >>> array_chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    require_not_none(items, "items")
    validate_int(size, "size", min_value=1)
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def array_unique(items: Iterable[T]) -> list[T]:
    """Уникальные элементы в порядке первого появления (элементы должны быть hashable)."""
    require_not_none(items, "items")
    return list(dict.fromkeys(items))


def array_intersect(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """
    Examples:
        >>> array_intersect([1, 2, 3], [2, 3, 4])
        [2, 3]
    """
    require_not_none(a, "a")
    other = set(require_not_none(b, "b"))
    return [x for x in array_unique(a) if x in other]


def array_difference(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """Элементы a, отсутствующие в b (без дублей)."""
    require_not_none(a, "a")
    other = set(require_not_none(b, "b"))
    return [x for x in array_unique(a) if x not in other]


def array_union(a: Iterable[T], b: Iterable[T]) -> list[T]:
    require_not_none(a, "a")
    require_not_none(b, "b")
    return array_unique([*a, *b])


def array_flatten(items: Iterable[Any]) -> list[Any]:
    """
    Рекурсивное раскрытие вложенных list/tuple (строки не раскрываются).

    Examples:
        >>> array_flatten([1, [2, (3, [4])], "ab"])
        [1, 2, 3, 4, 'ab']
    """
    require_not_none(items, "items")
    flat: list[Any] = []
    stack = [iter(items)]
    while stack:
        for item in stack[-1]:
            if isinstance(item, (list, tuple)):
                stack.append(iter(item))
                break
            flat.append(item)
        else:
            stack.pop()
    return flat


def array_sum(items: Iterable[float]) -> float:
    require_not_none(items, "items")
    return sum(validate_finite(v, f"items[{i}]") for i, v in enumerate(items))


def array_average(items: Sequence[float]) -> float:
    """Среднее; пустой список — мягкое предупреждение и 0.0."""
    require_not_none(items, "items")
    if len(items) == 0:
        warn_questionable("array_average: empty input, returning 0.0")
        return 0.0
    return array_sum(items) / len(items)


def array_rotate(items: Sequence[T], steps: int) -> list[T]:
    """Циклический сдвиг вправо на steps (отрицательный — влево)."""
    require_not_none(items, "items")
    validate_int(steps, "steps")
    if not items:
        return []
    k = steps % len(items)
    return list(items[-k:]) + list(items[:-k]) if k else list(items)


def array_count(items: Iterable[T], value: T) -> int:
    require_not_none(items, "items")
    return sum(1 for x in items if x == value)


def array_shuffle(items: Sequence[T], seed: Optional[int] = None) -> list[T]:
    """Перемешанная копия; с seed — детерминированно через PCG32."""
    require_not_none(items, "items")
    if seed is not None:
        return seeded_shuffle(items, seed)
    result = list(items)
    random.shuffle(result)
    return result


def array_pick_random(items: Sequence[T], seed: Optional[int] = None) -> Optional[T]:
    """Случайный элемент или None для пустого списка."""
    require_not_none(items, "items")
    if not items:
        return None
    if seed is not None:
        return seeded_choice(items, seed)
    return random.choice(items)


def array_group_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Группировка по key(item) с сохранением порядка."""
    require_not_none(items, "items")
    require_not_none(key, "key")
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return groups


# =============================================================================
# СЛОВАРИ
# =============================================================================


def dict_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """
    Глубокое слияние: вложенные словари сливаются, прочие значения
    из override заменяют значения base.

    Examples:
        >>> dict_merge({"a": {"x": 1, "y": 2}}, {"a": {"y": 3}, "b": 4})
        {'a': {'x': 1, 'y': 3}, 'b': 4}
    """
    require_not_none(base, "base")
    require_not_none(override, "override")

    merged: dict[str, Any] = {
        k: dict_merge(v, {}) if isinstance(v, Mapping) else v for k, v in base.items()
    }
    for k, v in override.items():
        if isinstance(v, Mapping) and isinstance(merged.get(k), Mapping):
            merged[k] = dict_merge(merged[k], v)
        elif isinstance(v, Mapping):
            merged[k] = dict_merge(v, {})
        else:
            merged[k] = v
    return merged


def dict_invert(data: Mapping[K, Any]) -> dict[Any, K]:
    """
    Меняет ключи и значения местами.

    Raises:
        InvalidArgumentError: значения повторяются или не hashable
    """
    require_not_none(data, "data")
    inverted: dict[Any, K] = {}
    for k, v in data.items():
        if not isinstance(v, Hashable):
            raise InvalidArgumentError(f"value for key {k!r} is not hashable")
        if v in inverted:
            raise InvalidArgumentError(f"duplicate value {v!r} cannot be inverted")
        inverted[v] = k
    return inverted


def dict_filter(data: Mapping[K, T], predicate: Callable[[K, T], bool]) -> dict[K, T]:
    require_not_none(data, "data")
    require_not_none(predicate, "predicate")
    return {k: v for k, v in data.items() if predicate(k, v)}


def dict_get_path(data: Mapping[str, Any], path: str, default: Any = None, sep: str = ".") -> Any:
    """
    Значение по пути "a.b.c"; default если какого-то звена нет.

    Examples:
        >>> dict_get_path({"a": {"b": {"c": 1}}}, "a.b.c")
        1
        >>> dict_get_path({"a": {}}, "a.x", default=0)
        0
    """
    require_not_none(data, "data")
    if not path:
        raise InvalidArgumentError("path must not be empty")

    node: Any = data
    for part in path.split(sep):
        if not isinstance(node, Mapping):
            return default
        node = node.get(part, _MISSING)
        if node is _MISSING:
            return default
    return node


def dict_sort_by_value(data: Mapping[K, Any], reverse: bool = False) -> dict[K, Any]:
    require_not_none(data, "data")
    return dict(sorted(data.items(), key=lambda kv: kv[1], reverse=reverse))
