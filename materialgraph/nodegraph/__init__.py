"""Visual node graph kept in sync with a node material."""

from materialgraph.nodegraph.editor import GraphEditor
from materialgraph.nodegraph.state import EditorState, LogEntry
from materialgraph.nodegraph.model import VisualModel, PendingChangeSet, NodeEvent, NodeEventKind
from materialgraph.nodegraph.node import (
    VisualNode,
    GenericNode,
    TextureNode,
    LightNode,
    InputNode,
    NodeVariant,
)
from materialgraph.nodegraph.port import VisualPort, PortDirection
from materialgraph.nodegraph.link import Link, LinkState, LinkEvent, LinkEventKind
from materialgraph.nodegraph.layout import LayoutState
from materialgraph.nodegraph.orientation import OrientedLink, resolve_orientation

__all__ = [
    "GraphEditor",
    "EditorState",
    "LogEntry",
    "VisualModel",
    "PendingChangeSet",
    "NodeEvent",
    "NodeEventKind",
    "VisualNode",
    "GenericNode",
    "TextureNode",
    "LightNode",
    "InputNode",
    "NodeVariant",
    "VisualPort",
    "PortDirection",
    "Link",
    "LinkState",
    "LinkEvent",
    "LinkEventKind",
    "LayoutState",
    "OrientedLink",
    "resolve_orientation",
]
