"""Predefined material blocks and block registry."""

from __future__ import annotations

from typing import Dict, List, Type

from materialgraph.material.block import BlockClass, BlockTarget, MaterialBlock
from materialgraph.material.connection_point import (
    COLOR3,
    COLOR4,
    FLOAT,
    MATRIX,
    VECTOR2,
    VECTOR3,
    VECTOR4,
)
from materialgraph.material.errors import UnknownBlockError


class VertexOutputBlock(MaterialBlock):
    """Final position of the vertex."""
    target = BlockTarget.VERTEX
    is_final_merger = True

    def __init__(self, name: str = ""):
        super().__init__(name)
        self.register_input("vector", VECTOR4)


class FragmentOutputBlock(MaterialBlock):
    """Final color of the fragment."""
    target = BlockTarget.FRAGMENT
    is_final_merger = True

    def __init__(self, name: str = ""):
        super().__init__(name)
        self.register_input("color", COLOR4, is_optional=True)
        self.register_input("rgb", COLOR3, is_optional=True)
        self.register_input("a", FLOAT, is_optional=True)


class TransformBlock(MaterialBlock):
    def __init__(self, name: str = ""):
        super().__init__(name)
        self.register_input("vector", VECTOR4)
        self.register_input("transform", MATRIX)
        self.register_output("output", VECTOR4)


class VectorMergerBlock(MaterialBlock):
    """Builds a Vector4 from a Vector3 and a w component."""

    def __init__(self, name: str = ""):
        super().__init__(name)
        self.register_input("xyz", VECTOR3)
        self.register_input("w", FLOAT)
        self.register_output("xyzw", VECTOR4)


class MultiplyBlock(MaterialBlock):
    def __init__(self, name: str = ""):
        super().__init__(name)
        self.register_input("left", COLOR4)
        self.register_input("right", COLOR4)
        self.register_output("output", COLOR4)


class TextureBlock(MaterialBlock):
    classification = BlockClass.TEXTURE
    target = BlockTarget.FRAGMENT

    def __init__(self, name: str = ""):
        super().__init__(name)
        self.register_input("uv", VECTOR2)
        self.register_output("rgba", COLOR4)
        self.register_output("rgb", COLOR3)


class LightBlock(MaterialBlock):
    classification = BlockClass.LIGHT
    target = BlockTarget.FRAGMENT

    def __init__(self, name: str = ""):
        super().__init__(name)
        self.register_input("worldPosition", VECTOR4)
        self.register_input("worldNormal", VECTOR4)
        self.register_input("cameraPosition", VECTOR3)
        self.register_output("diffuseOutput", COLOR3)
        self.register_output("specularOutput", COLOR3)


BLOCK_CLASSES: Dict[str, Type[MaterialBlock]] = {
    cls.get_class_name(): cls
    for cls in (
        VertexOutputBlock,
        FragmentOutputBlock,
        TransformBlock,
        VectorMergerBlock,
        MultiplyBlock,
        TextureBlock,
        LightBlock,
    )
}


def get_block_names() -> List[str]:
    return sorted(BLOCK_CLASSES)


def create_block(class_name: str, name: str = "") -> MaterialBlock:
    """Factory function to create blocks by class name."""
    cls = BLOCK_CLASSES.get(class_name)
    if cls is None:
        raise UnknownBlockError(f"Unknown block class: {class_name}")
    return cls(name)
