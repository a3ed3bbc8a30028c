"""VisualModel - live visual graph, and the pending change-set committed into it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from materialgraph.core.event import Event
from materialgraph.nodegraph.link import Link, LinkEvent, LinkEventKind
from materialgraph.nodegraph.node import VisualNode

if TYPE_CHECKING:
    from materialgraph.material.block import MaterialBlock


class NodeEventKind(Enum):
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class NodeEvent:
    kind: NodeEventKind
    node: VisualNode


class PendingChangeSet:
    """Nodes and links built by a construction pass, not yet visible to observers."""

    def __init__(self):
        self.nodes: List[VisualNode] = []
        self.links: List[Link] = []
        self.discarded = False
        self.committed = False

    @property
    def is_open(self) -> bool:
        return not (self.discarded or self.committed)

    def add_node(self, node: VisualNode) -> None:
        self.nodes.append(node)

    def add_link(self, link: Link) -> None:
        self.links.append(link)

    def discard(self) -> None:
        """Drop everything; the set can no longer be committed."""
        for link in self.links:
            link.detach()
        self.nodes.clear()
        self.links.clear()
        self.discarded = True

    def __len__(self) -> int:
        return len(self.nodes) + len(self.links)


class VisualModel:
    """
    Live visual graph.

    Structural changes are reported through on_node_event and on_link_event.
    Removing a node reports the node first, then each link attached to it.
    """

    def __init__(self):
        self._nodes: List[VisualNode] = []
        self._links: List[Link] = []

        self.on_node_event: Event[NodeEvent] = Event()
        self.on_link_event: Event[LinkEvent] = Event()

    def add_node(self, node: VisualNode) -> None:
        if node in self._nodes:
            return
        self._nodes.append(node)
        self.on_node_event.emit(NodeEvent(NodeEventKind.ADDED, node))

    def remove_node(self, node: VisualNode) -> None:
        """Remove a node and its links."""
        if node not in self._nodes:
            return
        self._nodes.remove(node)
        self.on_node_event.emit(NodeEvent(NodeEventKind.REMOVED, node))

        for port in node.ports:
            for link in port.links[:]:
                self.remove_link(link)

    def add_link(self, link: Link) -> None:
        if link in self._links:
            return
        link.model = self
        self._links.append(link)
        self.emit_link_event(LinkEvent(LinkEventKind.CREATED, link))

    def remove_link(self, link: Link) -> None:
        if link not in self._links:
            return
        self._links.remove(link)
        link.detach()
        self.emit_link_event(LinkEvent(LinkEventKind.REMOVED, link))
        link.model = None

    def emit_link_event(self, event: LinkEvent) -> None:
        self.on_link_event.emit(event)

    def commit(self, pending: PendingChangeSet) -> bool:
        """Move a pending change-set into the model. Returns False if it was not open."""
        if not pending.is_open:
            return False
        for node in pending.nodes:
            self.add_node(node)
        for link in pending.links:
            self.add_link(link)
        pending.committed = True
        return True

    def delete_selected(self) -> None:
        """Delete all selected nodes and links."""
        for node in [n for n in self._nodes if n.selected]:
            self.remove_node(node)
        for link in [l for l in self._links if l.selected]:
            self.remove_link(link)

    def clear(self) -> None:
        for node in self._nodes[:]:
            self.remove_node(node)
        for link in self._links[:]:
            self.remove_link(link)

    def get_nodes(self) -> List[VisualNode]:
        return self._nodes.copy()

    def get_links(self) -> List[Link]:
        return self._links.copy()

    def find_node(self, block: "MaterialBlock") -> Optional[VisualNode]:
        for node in self._nodes:
            if node.block is block:
                return node
        return None
