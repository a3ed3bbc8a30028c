"""Semantic material graph: blocks, connection points and the node material."""

from materialgraph.material.errors import (
    MaterialGraphError,
    ConnectionPointError,
    BuildError,
    UnknownBlockError,
)
from materialgraph.material.connection_point import ConnectionPoint, PointDirection
from materialgraph.material.block import MaterialBlock, BlockClass, BlockTarget
from materialgraph.material.blocks import (
    VertexOutputBlock,
    FragmentOutputBlock,
    TransformBlock,
    VectorMergerBlock,
    MultiplyBlock,
    TextureBlock,
    LightBlock,
    create_block,
    get_block_names,
)
from materialgraph.material.node_material import NodeMaterial

__all__ = [
    "MaterialGraphError",
    "ConnectionPointError",
    "BuildError",
    "UnknownBlockError",
    "ConnectionPoint",
    "PointDirection",
    "MaterialBlock",
    "BlockClass",
    "BlockTarget",
    "VertexOutputBlock",
    "FragmentOutputBlock",
    "TransformBlock",
    "VectorMergerBlock",
    "MultiplyBlock",
    "TextureBlock",
    "LightBlock",
    "create_block",
    "get_block_names",
    "NodeMaterial",
]
