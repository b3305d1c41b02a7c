"""Application state management.

Author: Michael Economou
Date: 2026-03-02

Qt-free state containers.
"""

from listboard.app.state.selection_state import SelectionSnapshot, SelectionState

__all__ = ["SelectionSnapshot", "SelectionState"]
