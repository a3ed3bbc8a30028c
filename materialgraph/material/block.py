"""MaterialBlock - base class of semantic graph blocks."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from materialgraph.material.connection_point import ConnectionPoint, PointDirection


class BlockClass(Enum):
    """Classification tag used to choose a visual node variant."""
    GENERIC = "generic"
    TEXTURE = "texture"
    LIGHT = "light"


class BlockTarget(Enum):
    VERTEX = "vertex"
    FRAGMENT = "fragment"
    NEUTRAL = "neutral"


class MaterialBlock:
    """
    A typed computation block with input and output connection points.

    Subclasses declare their points in __init__ via register_input() and
    register_output() and set the class-level tags.
    """

    classification: BlockClass = BlockClass.GENERIC
    target: BlockTarget = BlockTarget.NEUTRAL
    is_final_merger: bool = False

    def __init__(self, name: str = ""):
        self.name = name or self.get_class_name()
        self.inputs: List[ConnectionPoint] = []
        self.outputs: List[ConnectionPoint] = []

    @classmethod
    def get_class_name(cls) -> str:
        return cls.__name__

    def register_input(self, name: str, type_name: str, is_optional: bool = False) -> ConnectionPoint:
        point = ConnectionPoint(name, type_name, PointDirection.INPUT, owner=self, is_optional=is_optional)
        self.inputs.append(point)
        return point

    def register_output(self, name: str, type_name: str) -> ConnectionPoint:
        point = ConnectionPoint(name, type_name, PointDirection.OUTPUT, owner=self)
        self.outputs.append(point)
        return point

    def get_input(self, name: str) -> Optional[ConnectionPoint]:
        for point in self.inputs:
            if point.name == name:
                return point
        return None

    def get_output(self, name: str) -> Optional[ConnectionPoint]:
        for point in self.outputs:
            if point.name == name:
                return point
        return None

    def input_dependencies(self) -> List[ConnectionPoint]:
        """Inputs fed by another block, in declaration order."""
        return [p for p in self.inputs if p.connected_point is not None]

    def __repr__(self) -> str:
        return f"<{self.get_class_name()} {self.name!r}>"
