"""
Engine glue — функции поверх capability-интерфейсов

Расчётная часть (shake_offsets, нормализация input) чистая и тестируется
без движка; побочные эффекты идут только через переданные capabilities.
"""

import logging
import random
from collections.abc import Callable, Iterator
from typing import Any, Optional

from scriptkit.core.math.numerical_safeguards import require_not_none, validate_int, validate_non_negative
from scriptkit.core.math.prng import PCG32
from scriptkit.core.math.vectors import ZERO, Vec2, vec_length, vec_scale
from scriptkit.host.capabilities import InputSource, PropertyAnimator, SceneNode

logger = logging.getLogger(__name__)

SHAKE_PROPERTY = "offset"


# =============================================================================
# INPUT
# =============================================================================


def get_input_vector(
    source: InputSource,
    left: str,
    right: str,
    up: str,
    down: str,
) -> Vec2:
    """
    Вектор направления из четырёх actions (y вниз, как в экранных координатах).

    Длина ограничена 1: диагональ не быстрее прямого движения,
    аналоговый наклон меньше 1 сохраняется.
    """
    require_not_none(source, "source")
    x = source.get_action_strength(right) - source.get_action_strength(left)
    y = source.get_action_strength(down) - source.get_action_strength(up)

    v = (float(x), float(y))
    length = vec_length(v)
    if length > 1.0:
        return vec_scale(v, 1.0 / length)
    return v


# =============================================================================
# SCREEN SHAKE
# =============================================================================


def shake_offsets(
    intensity: float,
    steps: int = 10,
    seed: Optional[int] = None,
) -> list[Vec2]:
    """
    Случайные смещения в квадрате [-intensity, intensity]² плюс
    завершающий (0, 0). Всего steps + 1 точек.

    Examples:
        >>> shake_offsets(5.0, steps=3, seed=1)[-1]
        (0.0, 0.0)
    """
    amp = validate_non_negative(intensity, "intensity")
    validate_int(steps, "steps", min_value=1)

    uniform: Callable[[float, float], float]
    uniform = PCG32(seed).uniform if seed is not None else random.uniform

    offsets = [(uniform(-amp, amp), uniform(-amp, amp)) for _ in range(steps)]
    offsets.append(ZERO)
    return offsets


def screen_shake(
    animator: PropertyAnimator,
    target: Any,
    intensity: float,
    duration: float,
    steps: int = 10,
    seed: Optional[int] = None,
) -> bool:
    """
    Ставит в очередь steps случайных смещений и возврат в (0, 0).

    Длительность делится поровну между шагами.

    Returns:
        True если все шаги приняты аниматором; на первом отказе
        постановка прекращается и возвращается False.
    """
    require_not_none(animator, "animator")
    require_not_none(target, "target")
    total = validate_non_negative(duration, "duration")

    offsets = shake_offsets(intensity, steps, seed)
    step_duration = total / len(offsets)

    for i, offset in enumerate(offsets):
        if not animator.animate(target, SHAKE_PROPERTY, offset, step_duration):
            logger.warning("screen_shake: animator rejected step %d of %d", i + 1, len(offsets))
            return False
    return True


# =============================================================================
# SCENE TREE
# =============================================================================


def is_node_valid(node: Optional[SceneNode]) -> bool:
    """None и удалённые узлы невалидны."""
    return node is not None and bool(node.is_valid())


def _walk(root: SceneNode) -> Iterator[SceneNode]:
    """Depth-first pre-order обход без рекурсии; невалидные ветви пропускаются."""
    stack = [root]
    while stack:
        node = stack.pop()
        if not is_node_valid(node):
            continue
        yield node
        stack.extend(reversed(list(node.children)))


def find_node(root: SceneNode, name: str) -> Optional[SceneNode]:
    """Первый узел с данным именем (depth-first, включая root) или None."""
    require_not_none(root, "root")
    require_not_none(name, "name")
    for node in _walk(root):
        if node.name == name:
            return node
    return None


def find_nodes(root: SceneNode, predicate: Callable[[SceneNode], bool]) -> list[SceneNode]:
    """Все узлы, удовлетворяющие predicate, в depth-first порядке."""
    require_not_none(root, "root")
    require_not_none(predicate, "predicate")
    return [node for node in _walk(root) if predicate(node)]
