"""Rebuild trigger: runs the material build and reports the outcome."""

from __future__ import annotations

from materialgraph import log
from materialgraph.material.errors import BuildError
from materialgraph.nodegraph.state import EditorState, LogEntry


BUILD_SUCCESS_MESSAGE = "Node material build successful"


class MaterialRebuilder:
    """Calls material.build() once per rebuild(); failures become log entries."""

    def __init__(self, state: EditorState):
        self._state = state

    def rebuild(self) -> bool:
        """Returns True when the build succeeded. Never raises."""
        material = self._state.material
        if material is None:
            return False

        try:
            material.build()
        except BuildError as e:
            log.warn(e, "Node material build failed")
            self._state.on_log.emit(LogEntry(str(e), is_error=True))
            return False
        except Exception as e:
            log.error(e, "Unexpected error during node material build")
            self._state.on_log.emit(LogEntry(f"{type(e).__name__}: {e}", is_error=True))
            return False

        log.info(BUILD_SUCCESS_MESSAGE)
        self._state.on_log.emit(LogEntry(BUILD_SUCCESS_MESSAGE))
        return True
