"""ConnectionPoint - typed input/output terminal of a material block."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional

from materialgraph.material.errors import ConnectionPointError

if TYPE_CHECKING:
    from materialgraph.material.block import MaterialBlock


class PointDirection(Enum):
    INPUT = "input"
    OUTPUT = "output"


# Value type names understood by blocks and literal nodes
FLOAT = "Float"
VECTOR2 = "Vector2"
VECTOR3 = "Vector3"
VECTOR4 = "Vector4"
MATRIX = "Matrix"
COLOR3 = "Color3"
COLOR4 = "Color4"


class ConnectionPoint:
    """
    A typed terminal on a block.

    An input connects to at most one upstream output (``connected_point``)
    and may hold a literal ``value`` used while it is not connected.
    An output feeds any number of downstream inputs (``endpoints``).
    """

    def __init__(
        self,
        name: str,
        type_name: str,
        direction: PointDirection,
        owner: Optional["MaterialBlock"] = None,
        is_optional: bool = False,
    ):
        self.name = name
        self.type_name = type_name
        self.direction = direction
        self.owner = owner
        self.is_optional = is_optional

        self.value: Any = None
        self.connected_point: Optional[ConnectionPoint] = None
        self.endpoints: List[ConnectionPoint] = []

    @property
    def is_input(self) -> bool:
        return self.direction is PointDirection.INPUT

    @property
    def is_connected(self) -> bool:
        if self.is_input:
            return self.connected_point is not None
        return bool(self.endpoints)

    def can_connect_to(self, other: "ConnectionPoint") -> bool:
        if self.is_input or not other.is_input:
            return False
        if self.owner is not None and self.owner is other.owner:
            return False
        return self.type_name == other.type_name

    def connect_to(self, other: "ConnectionPoint") -> "ConnectionPoint":
        """Connect this output to the input ``other``, replacing its previous source."""
        if self.is_input or not other.is_input:
            raise ConnectionPointError(
                f"Cannot connect {self.name} to {other.name}: expected output -> input"
            )
        if not self.can_connect_to(other):
            raise ConnectionPointError(
                f"Cannot connect {self.name} ({self.type_name}) to "
                f"{other.name} ({other.type_name})"
            )

        if other.connected_point is not None:
            other.connected_point.disconnect_from(other)

        other.connected_point = self
        self.endpoints.append(other)
        return self

    def disconnect_from(self, other: "ConnectionPoint") -> "ConnectionPoint":
        """Remove the edge between this output and the input ``other``."""
        if other not in self.endpoints:
            raise ConnectionPointError(f"{self.name} is not connected to {other.name}")

        self.endpoints.remove(other)
        other.connected_point = None
        return self

    def __repr__(self) -> str:
        owner = self.owner.name if self.owner is not None else "?"
        return f"<ConnectionPoint {owner}.{self.name} {self.direction.value} {self.type_name}>"
