"""Editor state shared between the graph editor and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from materialgraph.core.event import Event

if TYPE_CHECKING:
    from materialgraph.material.node_material import NodeMaterial


@dataclass(frozen=True)
class LogEntry:
    """Message for the log display."""
    message: str
    is_error: bool = False


class EditorState:
    """
    Material being edited plus the notification channels.

    Collaborators (property panel, log view, rendering widget) subscribe to
    the events; they read the graphs but never mutate them directly.
    """

    def __init__(self, material: Optional["NodeMaterial"] = None, host_document: Any = None):
        self.material = material
        # Object delivering key events (see GraphEditor.attach); may be None
        self.host_document = host_document

        self.on_rebuild_required: Event[None] = Event()
        self.on_reset_required: Event[None] = Event()
        self.on_update_required: Event[None] = Event()
        self.on_selection_changed: Event[Any] = Event()
        self.on_log: Event[LogEntry] = Event()
