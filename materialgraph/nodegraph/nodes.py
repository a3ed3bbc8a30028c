"""Node factory: classification tag -> node class, value type -> default value."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Type

import numpy as np

from materialgraph.material.block import BlockClass
from materialgraph.nodegraph.node import (
    GenericNode,
    InputNode,
    LightNode,
    TextureNode,
    VisualNode,
)
from materialgraph.nodegraph.port import PortDirection, VisualPort

if TYPE_CHECKING:
    from materialgraph.material.block import MaterialBlock
    from materialgraph.material.connection_point import ConnectionPoint


NODE_CLASSES: Dict[BlockClass, Type[VisualNode]] = {
    BlockClass.GENERIC: GenericNode,
    BlockClass.TEXTURE: TextureNode,
    BlockClass.LIGHT: LightNode,
}

# Fresh value per call, literal nodes must not share arrays
DEFAULT_VALUES: Dict[str, Callable[[], Any]] = {
    "Vector2": lambda: np.zeros(2, dtype=np.float32),
    "Vector3": lambda: np.zeros(3, dtype=np.float32),
    "Vector4": lambda: np.zeros(4, dtype=np.float32),
    "Matrix": lambda: np.identity(4, dtype=np.float32),
    "Color3": lambda: np.ones(3, dtype=np.float32),
    "Color4": lambda: np.ones(4, dtype=np.float32),
}


def get_value_types() -> List[str]:
    return list(DEFAULT_VALUES)


def default_value_for(type_name: str) -> Any:
    """Zero vector, identity matrix or white color; None for unknown types."""
    factory = DEFAULT_VALUES.get(type_name)
    if factory is None:
        return None
    return factory()


def node_class_for(block: Optional["MaterialBlock"]) -> Type[VisualNode]:
    if block is None:
        return InputNode
    return NODE_CLASSES.get(block.classification, GenericNode)


def create_node(block: Optional["MaterialBlock"]) -> VisualNode:
    """Factory function to create the visual node for a block (or a literal node)."""
    return node_class_for(block)(block)


def create_literal_node(
    type_name: str,
    connection: Optional["ConnectionPoint"] = None,
) -> InputNode:
    """
    Create an Input node with a single output port named after the type.

    Without a connection the port carries the type's default value. With
    one, the port references the point and starts from its current value.
    """
    if connection is None and type_name not in get_value_types():
        raise ValueError(f"Unsupported literal type: {type_name}")

    node = InputNode(title=type_name)
    port = node.add_port(VisualPort(type_name, PortDirection.OUTPUT, type_name))

    if connection is None:
        port.default_value = default_value_for(type_name)
    else:
        node.connection = connection
        port.connection = connection
        port.default_value = copy_value(connection.value)

    return node


def copy_value(value: Any) -> Any:
    """Copy arrays so literal values are never shared between points."""
    if isinstance(value, np.ndarray):
        return value.copy()
    return value
