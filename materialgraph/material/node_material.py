"""NodeMaterial - semantic graph container with output roots and build.

The build step validates the block graph reachable from the output roots
and orders it for code generation. Code generation itself lives elsewhere.
"""

from __future__ import annotations

from typing import Dict, List

from materialgraph import log
from materialgraph.material.block import BlockTarget, MaterialBlock
from materialgraph.material.errors import BuildError


class NodeMaterial:
    """Material described by a graph of blocks rooted at final-merger blocks."""

    def __init__(self, name: str = "material"):
        self.name = name
        self._vertex_output_nodes: List[MaterialBlock] = []
        self._fragment_output_nodes: List[MaterialBlock] = []

        # Result of the last successful build
        self.build_order: List[MaterialBlock] = []
        self.build_id = 0

    @property
    def vertex_output_nodes(self) -> List[MaterialBlock]:
        return self._vertex_output_nodes.copy()

    @property
    def fragment_output_nodes(self) -> List[MaterialBlock]:
        return self._fragment_output_nodes.copy()

    @property
    def output_nodes(self) -> List[MaterialBlock]:
        """All output roots, vertex roots first."""
        return self._vertex_output_nodes + self._fragment_output_nodes

    def _output_list(self, block: MaterialBlock) -> List[MaterialBlock]:
        if block.target is BlockTarget.VERTEX:
            return self._vertex_output_nodes
        return self._fragment_output_nodes

    def add_output_node(self, block: MaterialBlock) -> None:
        if not block.is_final_merger:
            raise BuildError(f"{block.name} is not a final merger block")
        nodes = self._output_list(block)
        if block not in nodes:
            nodes.append(block)

    def remove_output_node(self, block: MaterialBlock) -> None:
        nodes = self._output_list(block)
        if block in nodes:
            nodes.remove(block)

    def has_output_node(self, block: MaterialBlock) -> bool:
        return block in self._output_list(block)

    def build(self, verbose: bool = False) -> List[MaterialBlock]:
        """
        Validate the graph and compute the block evaluation order.

        Raises:
            BuildError: no output roots, a required input left unconnected
                without a value, or a cycle.
        """
        if not self.output_nodes:
            raise BuildError("Material has no output nodes")

        order: List[MaterialBlock] = []
        # 1 = visiting, 2 = done
        marks: Dict[int, int] = {}

        def visit(block: MaterialBlock) -> None:
            mark = marks.get(id(block))
            if mark == 2:
                return
            if mark == 1:
                raise BuildError(f"Graph has cycles through {block.name}")
            marks[id(block)] = 1

            for point in block.inputs:
                upstream = point.connected_point
                if upstream is not None:
                    if upstream.owner is None:
                        raise BuildError(f"{block.name}.{point.name} is connected to a detached point")
                    visit(upstream.owner)
                elif point.value is None and not point.is_optional:
                    raise BuildError(f"{block.name}.{point.name} input is not connected and has no value")

            marks[id(block)] = 2
            order.append(block)

        for root in self.output_nodes:
            visit(root)

        self.build_order = order
        self.build_id += 1
        if verbose:
            log.debug(f"Built {self.name}: " + " -> ".join(b.name for b in order))
        return order
