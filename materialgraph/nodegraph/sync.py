"""Link sync engine - propagates visual graph edits into the material graph."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, Optional

from materialgraph import log
from materialgraph.material.errors import ConnectionPointError
from materialgraph.nodegraph.link import Link, LinkEvent, LinkEventKind, LinkState
from materialgraph.nodegraph.model import NodeEvent, NodeEventKind, VisualModel
from materialgraph.nodegraph.node import InputNode
from materialgraph.nodegraph.nodes import copy_value
from materialgraph.nodegraph.orientation import OrientedLink, resolve_orientation
from materialgraph.nodegraph.port import VisualPort
from materialgraph.nodegraph.state import EditorState, LogEntry

if TYPE_CHECKING:
    from materialgraph.nodegraph.registrar import OutputRootRegistrar


class LinkSyncEngine:
    """
    Dispatcher for node and link events of one VisualModel.

    Tracks every link's lifecycle state by link id:
        UNBOUND -> SOURCE_SET -> FULLY_BOUND -> REMOVED

    Completing a link connects the underlying connection points (or injects
    a literal value for Input nodes) and requests a rebuild. Removing a link
    undoes the connection or clears the injected value. Moving an endpoint
    of a complete link undoes the old pair before applying the new one.

    An input port keeps a single link: completing a link onto an occupied
    input removes the links already attached to it.
    """

    def __init__(
        self,
        state: EditorState,
        registrar: "OutputRootRegistrar",
        rebuild: Callable[[], object],
    ):
        self._state = state
        self._registrar = registrar
        self._rebuild = rebuild
        self._model: Optional[VisualModel] = None
        self._link_states: Dict[int, LinkState] = {}

        self._handlers = {
            LinkEventKind.CREATED: self._on_created,
            LinkEventKind.SOURCE_BOUND: self._on_source_bound,
            LinkEventKind.TARGET_BOUND: self._on_target_bound,
            LinkEventKind.REMOVED: self._on_removed,
        }

    @property
    def model(self) -> Optional[VisualModel]:
        return self._model

    def bind(self, model: VisualModel) -> None:
        """Listen to model, forgetting the previously bound one."""
        self.unbind()
        self._model = model
        model.on_link_event += self.dispatch
        model.on_node_event += self.dispatch_node_event

    def unbind(self) -> None:
        if self._model is not None:
            self._model.on_link_event -= self.dispatch
            self._model.on_node_event -= self.dispatch_node_event
            self._model = None
        self._link_states.clear()

    def link_state(self, link: Link) -> Optional[LinkState]:
        return self._link_states.get(link.id)

    def dispatch(self, event: LinkEvent) -> None:
        self._handlers[event.kind](event)

    def dispatch_node_event(self, event: NodeEvent) -> None:
        if event.kind is not NodeEventKind.REMOVED:
            return
        block = event.node.block
        if block is not None and block.is_final_merger:
            self._registrar.unregister(block)

    # --- Link transitions ---

    def _on_created(self, event: LinkEvent) -> None:
        # Links committed by the graph constructor arrive complete and
        # mirror edges that already exist in the material.
        self._link_states[event.link.id] = event.link.state

    def _on_source_bound(self, event: LinkEvent) -> None:
        link = event.link
        if self._link_states.get(link.id, LinkState.UNBOUND) is not LinkState.FULLY_BOUND:
            self._link_states[link.id] = LinkState.SOURCE_SET
            return

        # Source moved on a complete link
        self._undo(link, resolve_orientation(event.previous, link.target_port))
        self._complete(link)

    def _on_target_bound(self, event: LinkEvent) -> None:
        link = event.link
        was_bound = self._link_states.get(link.id) is LinkState.FULLY_BOUND
        self._link_states[link.id] = LinkState.FULLY_BOUND

        if was_bound and event.previous is not None:
            self._undo(link, resolve_orientation(link.source_port, event.previous))
        self._complete(link)

    def _on_removed(self, event: LinkEvent) -> None:
        link = event.link
        self._link_states.pop(link.id, None)
        self._state.on_selection_changed.emit(None)
        self._undo(link, resolve_orientation(link.source_port, link.target_port))

    # --- Semantic edits ---

    def _complete(self, link: Link) -> None:
        """Apply a fully bound link to the material, then rebuild."""
        oriented = resolve_orientation(link.source_port, link.target_port)
        if oriented is None:
            log.debug(f"Link #{link.id} joins ports of the same direction, ignored")
            return

        if oriented.input.is_bound and oriented.output.is_bound:
            source, target = oriented.output.connection, oriented.input.connection
            if not source.can_connect_to(target):
                message = (
                    f"Cannot connect {source.name} ({source.type_name}) to "
                    f"{target.name} ({target.type_name})"
                )
                log.warn(f"Link #{link.id} rejected: {message}")
                self._state.on_log.emit(LogEntry(message, is_error=True))
                return
            self._evict(oriented.input, link)
            source.connect_to(target)
        else:
            self._evict(oriented.input, link)
            if oriented.input.is_bound:
                self._adopt(oriented)

        self._rebuild()

    def _evict(self, input_port: VisualPort, link: Link) -> None:
        """An input takes one link: remove the others attached to it."""
        if self._model is None:
            return
        for other in input_port.links[:]:
            if other is not link:
                self._model.remove_link(other)

    def _adopt(self, oriented: OrientedLink) -> None:
        """Bind a literal node's output to the input it now feeds."""
        output, input_port = oriented.output, oriented.input
        point = input_port.connection

        caption = output.name
        output.sync_with_connection_point(point)
        output.name = caption

        if isinstance(output.node, InputNode):
            output.node.connection = point

        point.value = copy_value(output.default_value)

    def _undo(self, link: Link, oriented: Optional[OrientedLink]) -> None:
        """Remove from the material what the pair of ports stood for."""
        if oriented is None:
            return

        output, input_port = oriented.output, oriented.input
        if input_port.is_bound:
            if output.is_bound:
                try:
                    output.connection.disconnect_from(input_port.connection)
                except ConnectionPointError as e:
                    # The input was already rewired to another source
                    log.debug(e, f"Link #{link.id} had no semantic edge")
                input_port.sync_with_connection_point(input_port.connection)
                output.sync_with_connection_point(output.connection)
            elif input_port.connection.value is not None:
                input_port.connection.value = None
        elif output.is_bound:
            # Only outputs are ever unbound; nothing to undo for this shape
            log.debug(f"Link #{link.id} removed from an unbound input")
