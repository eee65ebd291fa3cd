"""
Host — capability-интерфейсы движка и функции поверх них.
"""

from scriptkit.host.capabilities import InputSource, PropertyAnimator, SceneNode
from scriptkit.host.glue import (
    SHAKE_PROPERTY,
    find_node,
    find_nodes,
    get_input_vector,
    is_node_valid,
    screen_shake,
    shake_offsets,
)

__all__ = [
    # Capabilities
    "InputSource",
    "PropertyAnimator",
    "SceneNode",
    # Glue
    "SHAKE_PROPERTY",
    "find_node",
    "find_nodes",
    "get_input_vector",
    "is_node_valid",
    "screen_shake",
    "shake_offsets",
]
