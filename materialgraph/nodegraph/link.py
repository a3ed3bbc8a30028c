"""Link - visual connection between two ports, and its lifecycle events."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from materialgraph.nodegraph.model import VisualModel
    from materialgraph.nodegraph.port import VisualPort


class LinkState(Enum):
    UNBOUND = "unbound"
    SOURCE_SET = "source_set"
    FULLY_BOUND = "fully_bound"
    REMOVED = "removed"


class LinkEventKind(Enum):
    CREATED = "created"
    SOURCE_BOUND = "source_bound"
    TARGET_BOUND = "target_bound"
    REMOVED = "removed"


@dataclass(frozen=True)
class LinkEvent:
    kind: LinkEventKind
    link: "Link"
    # Port the link was attached to before a SOURCE_BOUND / TARGET_BOUND
    previous: Optional["VisualPort"] = None


_link_ids = itertools.count(1)


class Link:
    """
    Visual connection (edge) between two ports.

    The source port is the one the user started dragging from, so it may
    be either an input or an output; orientation is resolved later.
    Endpoint changes are reported to the owning model as LinkEvents.
    """

    def __init__(
        self,
        source_port: Optional["VisualPort"] = None,
        target_port: Optional["VisualPort"] = None,
    ):
        self.id = next(_link_ids)
        self.source_port: Optional[VisualPort] = None
        self.target_port: Optional[VisualPort] = None
        self.selected = False
        self.removed = False

        # Set by VisualModel.add_link
        self.model: Optional[VisualModel] = None

        if source_port is not None:
            self.set_source_port(source_port)
        if target_port is not None:
            self.set_target_port(target_port)

    @property
    def state(self) -> LinkState:
        if self.removed:
            return LinkState.REMOVED
        if self.source_port is None:
            return LinkState.UNBOUND
        if self.target_port is None:
            return LinkState.SOURCE_SET
        return LinkState.FULLY_BOUND

    def set_source_port(self, port: "VisualPort") -> None:
        previous = self.source_port
        if previous is not None:
            previous.remove_link(self)
        self.source_port = port
        port.add_link(self)
        self._notify(LinkEventKind.SOURCE_BOUND, previous)

    def set_target_port(self, port: "VisualPort") -> None:
        """Set the target port, completing the link (or moving its end)."""
        previous = self.target_port
        if previous is not None:
            previous.remove_link(self)
        self.target_port = port
        port.add_link(self)
        self._notify(LinkEventKind.TARGET_BOUND, previous)

    def detach(self) -> None:
        """Remove this link from both ports."""
        if self.source_port is not None:
            self.source_port.remove_link(self)
        if self.target_port is not None:
            self.target_port.remove_link(self)
        self.removed = True

    def _notify(self, kind: LinkEventKind, previous: Optional["VisualPort"] = None) -> None:
        if self.model is not None:
            self.model.emit_link_event(LinkEvent(kind, self, previous))

    def __repr__(self) -> str:
        return f"<Link #{self.id} {self.source_port!r} -> {self.target_port!r}>"
