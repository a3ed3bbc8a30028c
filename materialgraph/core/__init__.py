"""Core base classes for materialgraph."""

from materialgraph.core.event import Event

__all__ = ["Event"]
