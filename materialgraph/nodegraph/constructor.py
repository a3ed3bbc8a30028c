"""Graph constructor - builds visual nodes recursively from material blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

from materialgraph import log
from materialgraph.nodegraph.layout import LayoutState
from materialgraph.nodegraph.link import Link
from materialgraph.nodegraph.model import PendingChangeSet
from materialgraph.nodegraph.node import InputNode, VisualNode
from materialgraph.nodegraph.nodes import create_literal_node, create_node

if TYPE_CHECKING:
    from materialgraph.material.block import MaterialBlock
    from materialgraph.material.connection_point import ConnectionPoint
    from materialgraph.nodegraph.registrar import OutputRootRegistrar


class ConstructionPass:
    """State threaded through one construction pass."""

    def __init__(
        self,
        layout: LayoutState,
        seen: Optional[Dict["MaterialBlock", VisualNode]] = None,
    ):
        self.layout = layout
        self.pending = PendingChangeSet()
        # Block -> node already built for it (in this pass or in the live model)
        self.seen: Dict["MaterialBlock", VisualNode] = dict(seen or {})

    @property
    def is_open(self) -> bool:
        return self.pending.is_open


class GraphConstructor:
    """
    Builds visual nodes for blocks, walking their input dependencies.

    Upstream blocks are placed one column further left. Nodes and links are
    collected in the pass's pending change-set; the caller commits it.
    """

    def __init__(self, registrar: "OutputRootRegistrar"):
        self._registrar = registrar
        self._current: Optional[ConstructionPass] = None

    @property
    def current_pass(self) -> Optional[ConstructionPass]:
        return self._current

    def begin_pass(
        self,
        layout: LayoutState,
        seen: Optional[Dict["MaterialBlock", VisualNode]] = None,
    ) -> ConstructionPass:
        """Start a pass. An uncommitted pending set of the previous pass is discarded."""
        if self._current is not None and self._current.is_open:
            log.debug(f"Discarding {len(self._current.pending)} uncommitted graph changes")
            self._current.pending.discard()
        self._current = ConstructionPass(layout, seen)
        return self._current

    def construct(
        self,
        block: Optional["MaterialBlock"],
        column: int,
        construction: ConstructionPass,
    ) -> VisualNode:
        """Create the node for block at column and, recursively, its predecessors."""
        node = create_node(block)
        self._place(node, column, construction)

        if block is None:
            return node

        construction.seen[block] = node
        if block.is_final_merger:
            self._registrar.register(block)

        dependencies = block.input_dependencies()
        for port in node.input_ports:
            point = port.connection
            if point in dependencies:
                upstream_point = point.connected_point
                upstream = construction.seen.get(upstream_point.owner)
                if upstream is None:
                    upstream = self.construct(upstream_point.owner, column + 1, construction)
                construction.pending.add_link(Link(upstream.get_port_for(upstream_point), port))
            elif point.value is not None and point.name not in node.HIDDEN_INPUTS:
                literal = self.construct_literal(point.type_name, column + 1, construction, connection=point)
                construction.pending.add_link(Link(literal.output_port, port))

        return node

    def construct_literal(
        self,
        type_name: str,
        column: int,
        construction: ConstructionPass,
        connection: Optional["ConnectionPoint"] = None,
    ) -> InputNode:
        node = create_literal_node(type_name, connection)
        self._place(node, column, construction)
        return node

    def _place(self, node: VisualNode, column: int, construction: ConstructionPass) -> None:
        row, x, y = construction.layout.allocate(column)
        node.place(column, row, x, y)
        construction.pending.add_node(node)
