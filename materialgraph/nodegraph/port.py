"""VisualPort - connection points on visual nodes."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from materialgraph.material.connection_point import ConnectionPoint
    from materialgraph.nodegraph.link import Link
    from materialgraph.nodegraph.node import VisualNode


class PortDirection(Enum):
    INPUT = "input"
    OUTPUT = "output"


class VisualPort:
    """
    A connection point on a visual node.

    Inputs are drawn on the left side, outputs on the right side.
    A port may reference a semantic connection point; it is *bound* only
    when its node also owns a block. Output ports of literal nodes carry
    a default value instead.
    """

    def __init__(
        self,
        name: str,
        direction: PortDirection,
        type_name: str = "",
        connection: Optional["ConnectionPoint"] = None,
    ):
        """
        Args:
            name: Display name of the port
            direction: INPUT or OUTPUT
            type_name: Value type shown next to the caption
            connection: Semantic connection point, if any
        """
        self.name = name
        self.direction = direction
        self.type_name = type_name
        self.connection = connection
        self.default_value: Any = None

        # Set by parent node
        self.node: Optional[VisualNode] = None
        self.index: int = 0

        self.links: List[Link] = []

    @classmethod
    def from_connection(cls, point: "ConnectionPoint") -> "VisualPort":
        direction = PortDirection.INPUT if point.is_input else PortDirection.OUTPUT
        return cls(point.name, direction, point.type_name, connection=point)

    @property
    def is_input(self) -> bool:
        return self.direction is PortDirection.INPUT

    @property
    def is_bound(self) -> bool:
        """True when the port stands for a connection point of its node's block."""
        return (
            self.connection is not None
            and self.node is not None
            and self.node.block is not None
        )

    def sync_with_connection_point(self, point: "ConnectionPoint") -> None:
        """Take caption and type from a connection point and reference it."""
        self.connection = point
        self.name = point.name
        self.type_name = point.type_name

    def add_link(self, link: "Link") -> None:
        if link not in self.links:
            self.links.append(link)

    def remove_link(self, link: "Link") -> None:
        if link in self.links:
            self.links.remove(link)

    def __repr__(self) -> str:
        owner = self.node.title if self.node is not None else "?"
        return f"<VisualPort {owner}.{self.name} {self.direction.value}>"
