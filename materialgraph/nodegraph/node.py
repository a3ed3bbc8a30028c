"""VisualNode and its variants."""

from __future__ import annotations

import itertools
from enum import Enum
from typing import TYPE_CHECKING, FrozenSet, List, Optional

from materialgraph.nodegraph.port import PortDirection, VisualPort

if TYPE_CHECKING:
    from materialgraph.material.block import MaterialBlock
    from materialgraph.material.connection_point import ConnectionPoint


class NodeVariant(Enum):
    GENERIC = "generic"
    TEXTURE = "texture"
    LIGHT = "light"
    INPUT = "input"


_node_ids = itertools.count(1)


class VisualNode:
    """
    Visual representation of a node in the graph.

    Each node has:
    - A grid cell (column, row) and the scene position derived from it
    - Input ports (left side) and output ports (right side)
    - Optionally the semantic block it stands for
    """

    variant = NodeVariant.GENERIC

    # Inputs that never get a literal node created for them during construction
    HIDDEN_INPUTS: FrozenSet[str] = frozenset()

    def __init__(self, block: Optional["MaterialBlock"] = None, title: str = ""):
        self.id = next(_node_ids)
        self.block = block
        self.title = title or (block.name if block is not None else self.variant.value)

        self.column = 0
        self.row = 0
        self.x = 0.0
        self.y = 0.0
        self.selected = False

        self.input_ports: List[VisualPort] = []
        self.output_ports: List[VisualPort] = []

        if block is not None:
            self._create_ports(block)

    def _create_ports(self, block: "MaterialBlock") -> None:
        for point in block.inputs:
            self.add_port(VisualPort.from_connection(point))
        for point in block.outputs:
            self.add_port(VisualPort.from_connection(point))

    def add_port(self, port: VisualPort) -> VisualPort:
        port.node = self
        if port.direction is PortDirection.INPUT:
            port.index = len(self.input_ports)
            self.input_ports.append(port)
        else:
            port.index = len(self.output_ports)
            self.output_ports.append(port)
        return port

    @property
    def ports(self) -> List[VisualPort]:
        return self.input_ports + self.output_ports

    def set_position(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def place(self, column: int, row: int, x: float, y: float) -> None:
        self.column = column
        self.row = row
        self.set_position(x, y)

    def get_port_for(self, point: "ConnectionPoint") -> Optional[VisualPort]:
        """Find the port referencing a connection point."""
        for port in self.ports:
            if port.connection is point:
                return port
        return None

    def get_input(self, name: str) -> Optional[VisualPort]:
        for port in self.input_ports:
            if port.name == name:
                return port
        return None

    def get_output(self, name: str) -> Optional[VisualPort]:
        for port in self.output_ports:
            if port.name == name:
                return port
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} #{self.id} {self.title!r} ({self.column}, {self.row})>"


class GenericNode(VisualNode):
    variant = NodeVariant.GENERIC


class TextureNode(VisualNode):
    variant = NodeVariant.TEXTURE
    HIDDEN_INPUTS = frozenset({"uv"})


class LightNode(VisualNode):
    variant = NodeVariant.LIGHT
    HIDDEN_INPUTS = frozenset({"worldPosition", "worldNormal", "cameraPosition"})


class InputNode(VisualNode):
    """Literal value node. Owns no block; feeds the point stored in ``connection``."""

    variant = NodeVariant.INPUT

    def __init__(self, block: Optional["MaterialBlock"] = None, title: str = ""):
        super().__init__(None, title)
        self.connection: Optional[ConnectionPoint] = None

    @property
    def output_port(self) -> Optional[VisualPort]:
        return self.output_ports[0] if self.output_ports else None
