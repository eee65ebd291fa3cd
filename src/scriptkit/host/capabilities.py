"""
Host capabilities — узкие интерфейсы к движку

Structural typing (typing.Protocol): интеграционный слой движка реализует
эти методы, наследование не требуется. Сам каталог реализаций не содержит.
"""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class InputSource(Protocol):
    """Опрос input actions (значение силы нажатия в [0, 1])."""

    def get_action_strength(self, action: str) -> float:
        ...


@runtime_checkable
class PropertyAnimator(Protocol):
    """
    Очередь анимаций свойств (tween).

    animate() ставит шаг в очередь после уже поставленных и
    возвращает False, если движок отказал (например, target удалён).
    """

    def animate(self, target: Any, prop: str, value: Any, duration: float) -> bool:
        ...


@runtime_checkable
class SceneNode(Protocol):
    """Узел дерева сцены."""

    @property
    def name(self) -> str:
        ...

    @property
    def children(self) -> Sequence["SceneNode"]:
        ...

    def is_valid(self) -> bool:
        ...
