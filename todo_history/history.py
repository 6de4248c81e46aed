"""
TODO HISTORY - Undo/Redo History
================================
Linear two-stack history of task snapshots, keyed by task id.

Every mutating operation pushes the task's resulting state (or a deletion
marker). The bottom entry of the undo stack is a baseline that is never
undone. A fresh change empties the redo stack.
"""

from typing import List, NamedTuple, Optional

from .schema import Snapshot


class HistoryStep(NamedTuple):
    """
    What the manager must do to the task with ``task_id``.

    ``snapshot`` is the state to restore; None means the task must not
    exist (undoing its add), as does a deletion marker.
    """
    task_id: int
    snapshot: Optional[Snapshot]

    @property
    def removes_task(self) -> bool:
        return self.snapshot is None or self.snapshot.is_deletion


class HistoryStack:
    """Undo stack (oldest first) and redo stack (most recently undone last)"""

    def __init__(self):
        self._undo_stack: List[Snapshot] = []
        self._redo_stack: List[Snapshot] = []

    def record_change(self, snapshot: Snapshot) -> None:
        self._undo_stack.append(snapshot)
        self._redo_stack.clear()

    def undo(self) -> Optional[HistoryStep]:
        """Pop the latest change; return the prior state of the same task"""
        if not self.can_undo:
            return None
        undone = self._undo_stack.pop()
        self._redo_stack.append(undone)
        return HistoryStep(undone.task_id, self._latest_for(undone.task_id))

    def redo(self) -> Optional[HistoryStep]:
        """Re-apply the most recently undone change"""
        if not self.can_redo:
            return None
        redone = self._redo_stack.pop()
        self._undo_stack.append(redone)
        return HistoryStep(redone.task_id, redone)

    def _latest_for(self, task_id: int) -> Optional[Snapshot]:
        for snapshot in reversed(self._undo_stack):
            if snapshot.task_id == task_id:
                return snapshot
        return None

    @property
    def can_undo(self) -> bool:
        return len(self._undo_stack) > 1

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    @property
    def undo_count(self) -> int:
        return len(self._undo_stack)

    @property
    def redo_count(self) -> int:
        return len(self._redo_stack)

    @property
    def undo_stack(self) -> List[Snapshot]:
        return list(self._undo_stack)

    @property
    def redo_stack(self) -> List[Snapshot]:
        return list(self._redo_stack)

    def clear(self) -> None:
        self._undo_stack.clear()
        self._redo_stack.clear()
