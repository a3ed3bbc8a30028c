"""GraphEditor - keeps the visual graph and the node material in sync.

Overview:
- VisualModel holds the nodes, ports and links the rendering widget draws.
- GraphConstructor builds the visual graph recursively from the material's
  output roots; the result is committed once the widget reports it is ready.
- LinkSyncEngine listens to model events and mutates the material.
- MaterialRebuilder runs material.build() and reports through the log event.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from materialgraph import log
from materialgraph.material.blocks import create_block
from materialgraph.nodegraph.constructor import ConstructionPass, GraphConstructor
from materialgraph.nodegraph.layout import LayoutState
from materialgraph.nodegraph.link import Link
from materialgraph.nodegraph.model import VisualModel
from materialgraph.nodegraph.node import InputNode, VisualNode
from materialgraph.nodegraph.rebuild import MaterialRebuilder
from materialgraph.nodegraph.registrar import OutputRootRegistrar
from materialgraph.nodegraph.state import EditorState
from materialgraph.nodegraph.sync import LinkSyncEngine
from materialgraph.settings import LayoutSettings

if TYPE_CHECKING:
    from materialgraph.material.block import MaterialBlock
    from materialgraph.material.connection_point import ConnectionPoint
    from materialgraph.nodegraph.port import VisualPort
    from materialgraph.settings import EditorSettings


class GraphEditor:
    """
    Node material graph editor without any widget code.

    The rendering collaborator draws ``model``, forwards user edits through
    the link/node methods and calls notify_view_ready() once it has measured
    its initial layout.
    """

    # Key names or key codes that delete the selection
    DELETE_KEYS = ("Delete", 46)

    def __init__(self, state: EditorState, settings: Optional["EditorSettings"] = None):
        self._state = state
        self._layout_settings = settings.layout() if settings is not None else LayoutSettings()

        self.registrar = OutputRootRegistrar(lambda: self._state.material)
        self.rebuilder = MaterialRebuilder(state)
        self.constructor = GraphConstructor(self.registrar)
        self.sync = LinkSyncEngine(state, self.registrar, self.rebuild)

        self.model = VisualModel()
        self._layout = LayoutState(self._layout_settings)
        self._view_ready = False
        self._host: Any = None

        state.on_rebuild_required += self._on_rebuild_required
        state.on_reset_required += self._on_reset_required

        self._build_graph()

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def layout(self) -> LayoutState:
        return self._layout

    @property
    def view_ready(self) -> bool:
        return self._view_ready

    # --- Construction ---

    def _build_graph(self) -> None:
        """Fresh layout and model, one construction pass over the output roots."""
        self._layout = LayoutState(self._layout_settings)
        self.model = VisualModel()
        self.sync.bind(self.model)
        self._view_ready = False

        construction = self.constructor.begin_pass(self._layout)
        material = self._state.material
        if material is None:
            return

        for block in material.output_nodes:
            if block not in construction.seen:
                self.constructor.construct(block, 0, construction)

        log.debug(f"Constructed {len(construction.pending.nodes)} nodes from {material.name}")

    def _open_pass(self) -> ConstructionPass:
        """Current uncommitted pass, or a new one continuing the live layout."""
        construction = self.constructor.current_pass
        if construction is not None and construction.is_open:
            return construction
        seen = {n.block: n for n in self.model.get_nodes() if n.block is not None}
        return self.constructor.begin_pass(self._layout, seen)

    def construct_from_block(self, block: "MaterialBlock", column: int = 0) -> VisualNode:
        """Build a node (and missing predecessors) into the pending change-set."""
        return self.constructor.construct(block, column, self._open_pass())

    def construct_literal(
        self,
        type_name: str,
        column: int = 0,
        connection: Optional["ConnectionPoint"] = None,
    ) -> InputNode:
        """Build an Input node into the pending change-set."""
        return self.constructor.construct_literal(type_name, column, self._open_pass(), connection)

    def add_node_from_class(self, class_name: str) -> VisualNode:
        """Create a new block by class name and show it in column 0."""
        node = self.construct_from_block(create_block(class_name), 0)
        if self._view_ready:
            self.commit()
        return node

    def add_value_node(
        self,
        type_name: str,
        column: int = 0,
        connection: Optional["ConnectionPoint"] = None,
    ) -> InputNode:
        node = self.construct_literal(type_name, column, connection)
        if self._view_ready:
            self.commit()
        return node

    def commit(self) -> bool:
        """Move the pending change-set into the live model."""
        construction = self.constructor.current_pass
        if construction is None or not construction.is_open:
            return False
        self.model.commit(construction.pending)
        self._state.on_update_required.emit(None)
        return True

    def notify_view_ready(self) -> None:
        """Called by the rendering widget once it can lay out the graph."""
        self._view_ready = True
        self.commit()

    def reset_and_rebuild(self) -> None:
        """Rebuild the visual graph from the material's output roots, then build it."""
        self._build_graph()
        self.rebuild()

    def rebuild(self) -> bool:
        return self.rebuilder.rebuild()

    # --- User edits ---

    def start_link(self, port: "VisualPort") -> Link:
        """Start dragging a link from port."""
        link = Link()
        self.model.add_link(link)
        link.set_source_port(port)
        return link

    def complete_link(self, link: Link, port: "VisualPort") -> None:
        link.set_target_port(port)

    def connect_ports(self, source: "VisualPort", target: "VisualPort") -> Link:
        link = self.start_link(source)
        self.complete_link(link, target)
        return link

    def remove_link(self, link: Link) -> None:
        self.model.remove_link(link)

    def remove_node(self, node: VisualNode) -> None:
        self.model.remove_node(node)

    def delete_selected(self) -> None:
        self.model.delete_selected()

    # --- Host key events ---

    def attach(self, host: Any = None) -> bool:
        """
        Listen to key-up events of a host document.

        The host must provide add_key_listener/remove_key_listener. Without a
        usable host nothing is attached and False is returned.
        """
        host = host if host is not None else self._state.host_document
        if host is None or not hasattr(host, "add_key_listener"):
            return False
        self.detach()
        host.add_key_listener(self._on_key_up)
        self._host = host
        return True

    def detach(self) -> None:
        if self._host is not None:
            self._host.remove_key_listener(self._on_key_up)
            self._host = None

    def _on_key_up(self, key: Any) -> None:
        if key in self.DELETE_KEYS:
            self.delete_selected()

    def close(self) -> None:
        """Stop listening to the host, the state and the model."""
        self.detach()
        self._state.on_rebuild_required -= self._on_rebuild_required
        self._state.on_reset_required -= self._on_reset_required
        self.sync.unbind()

    # --- State events ---

    def _on_rebuild_required(self, _=None) -> None:
        self.rebuild()
        self._state.on_update_required.emit(None)

    def _on_reset_required(self, _=None) -> None:
        self.reset_and_rebuild()
