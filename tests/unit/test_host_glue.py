"""
Тесты для host: capability-интерфейсы и функции поверх них

Движок заменяется простыми fake-реализациями протоколов.
"""

import math
from dataclasses import dataclass, field

import pytest

from scriptkit.core.errors import InvalidArgumentError
from scriptkit.host import (
    SHAKE_PROPERTY,
    InputSource,
    PropertyAnimator,
    SceneNode,
    find_node,
    find_nodes,
    get_input_vector,
    is_node_valid,
    screen_shake,
    shake_offsets,
)

# =============================================================================
# FAKES
# =============================================================================


class FakeInput:
    def __init__(self, **strengths: float):
        self.strengths = strengths

    def get_action_strength(self, action: str) -> float:
        return self.strengths.get(action, 0.0)


class FakeAnimator:
    def __init__(self, reject_after: int = -1):
        self.calls: list[tuple] = []
        self.reject_after = reject_after

    def animate(self, target, prop, value, duration) -> bool:
        if len(self.calls) == self.reject_after:
            return False
        self.calls.append((target, prop, value, duration))
        return True


@dataclass
class FakeNode:
    name: str
    children: list["FakeNode"] = field(default_factory=list)
    alive: bool = True

    def is_valid(self) -> bool:
        return self.alive


@pytest.fixture
def scene() -> FakeNode:
    r"""
    root
    ├── world
    │   ├── player
    │   └── enemy (удалён)
    │       └── weapon
    └── ui
        └── enemy
    """
    return FakeNode(
        "root",
        [
            FakeNode("world", [FakeNode("player"), FakeNode("enemy", [FakeNode("weapon")], alive=False)]),
            FakeNode("ui", [FakeNode("enemy")]),
        ],
    )


class TestProtocols:
    def test_fakes_satisfy_protocols(self, scene) -> None:
        assert isinstance(FakeInput(), InputSource)
        assert isinstance(FakeAnimator(), PropertyAnimator)
        assert isinstance(scene, SceneNode)


# =============================================================================
# INPUT
# =============================================================================


class TestInputVector:
    def test_idle(self) -> None:
        assert get_input_vector(FakeInput(), "left", "right", "up", "down") == (0.0, 0.0)

    def test_single_axis(self) -> None:
        source = FakeInput(right=1.0)
        assert get_input_vector(source, "left", "right", "up", "down") == (1.0, 0.0)

    def test_y_points_down(self) -> None:
        source = FakeInput(up=1.0)
        assert get_input_vector(source, "left", "right", "up", "down") == (0.0, -1.0)

    def test_diagonal_clamped_to_unit(self) -> None:
        x, y = get_input_vector(FakeInput(right=1.0, down=1.0), "left", "right", "up", "down")
        assert math.hypot(x, y) == pytest.approx(1.0)
        assert x == pytest.approx(y)

    def test_analog_below_unit_kept(self) -> None:
        source = FakeInput(right=0.3, up=0.4)
        assert get_input_vector(source, "left", "right", "up", "down") == pytest.approx((0.3, -0.4))

    def test_opposite_actions_cancel(self) -> None:
        source = FakeInput(left=1.0, right=1.0)
        assert get_input_vector(source, "left", "right", "up", "down") == (0.0, 0.0)


# =============================================================================
# SCREEN SHAKE
# =============================================================================


class TestShakeOffsets:
    def test_count_and_reset(self) -> None:
        offsets = shake_offsets(5.0, steps=4, seed=1)
        assert len(offsets) == 5
        assert offsets[-1] == (0.0, 0.0)

    def test_bounded_by_intensity(self) -> None:
        offsets = shake_offsets(2.0, steps=100, seed=2)
        assert all(abs(x) <= 2.0 and abs(y) <= 2.0 for x, y in offsets)

    def test_seeded_deterministic(self) -> None:
        assert shake_offsets(3.0, seed=9) == shake_offsets(3.0, seed=9)

    def test_zero_intensity(self) -> None:
        assert set(shake_offsets(0.0, steps=3)) == {(0.0, 0.0)}

    def test_invalid(self) -> None:
        with pytest.raises(InvalidArgumentError):
            shake_offsets(-1.0)
        with pytest.raises(InvalidArgumentError):
            shake_offsets(1.0, steps=0)


class TestScreenShake:
    def test_queues_steps_then_reset(self) -> None:
        animator = FakeAnimator()
        camera = object()

        assert screen_shake(animator, camera, 4.0, 1.1, steps=10, seed=5)

        assert len(animator.calls) == 11
        assert all(call[0] is camera and call[1] == SHAKE_PROPERTY for call in animator.calls)
        assert animator.calls[-1][2] == (0.0, 0.0)
        assert sum(call[3] for call in animator.calls) == pytest.approx(1.1)

    def test_same_offsets_as_pure_function(self) -> None:
        animator = FakeAnimator()
        screen_shake(animator, "cam", 4.0, 1.0, steps=3, seed=7)
        assert [call[2] for call in animator.calls] == shake_offsets(4.0, steps=3, seed=7)

    def test_rejection_stops_and_returns_false(self) -> None:
        animator = FakeAnimator(reject_after=2)
        assert not screen_shake(animator, "cam", 1.0, 1.0, steps=5, seed=1)
        assert len(animator.calls) == 2

    def test_missing_target(self) -> None:
        with pytest.raises(InvalidArgumentError):
            screen_shake(FakeAnimator(), None, 1.0, 1.0)


# =============================================================================
# SCENE TREE
# =============================================================================


class TestSceneTree:
    def test_find_root(self, scene) -> None:
        assert find_node(scene, "root") is scene

    def test_find_nested(self, scene) -> None:
        assert find_node(scene, "player").name == "player"

    def test_skips_invalid_branches(self, scene) -> None:
        """Удалённый enemy под world пропускается вместе с потомками"""
        found = find_node(scene, "enemy")
        assert found is scene.children[1].children[0]
        assert find_node(scene, "weapon") is None

    def test_missing(self, scene) -> None:
        assert find_node(scene, "boss") is None

    def test_find_nodes_depth_first_order(self, scene) -> None:
        names = [n.name for n in find_nodes(scene, lambda n: True)]
        assert names == ["root", "world", "player", "ui", "enemy"]

    def test_find_nodes_predicate(self, scene) -> None:
        leaves = find_nodes(scene, lambda n: not n.children)
        assert [n.name for n in leaves] == ["player", "enemy"]

    def test_is_node_valid(self, scene) -> None:
        assert is_node_valid(scene)
        assert not is_node_valid(None)
        assert not is_node_valid(scene.children[0].children[1])
