"""
TODO HISTORY - In-Memory Task List with Undo/Redo
=================================================

Usage:
    from todo_history import TodoListManager

    manager = TodoListManager()
    manager.create_task("Buy milk", "2024 01 01")
    manager.mark_completed("Buy milk")
    manager.undo()

    for line in manager.view_tasks("pending"):
        print(line)
"""

from .schema import (
    Task,
    Snapshot,
    TaskFilter,
    DueDateParse,
    parse_due_date
)
from .errors import (
    TodoError,
    ValidationError,
    InvalidDueDateError,
    InvalidTaskError,
    InvalidFilterError
)
from .history import HistoryStack, HistoryStep
from .manager import TodoListManager
from .activity_log import ActivityLog

__version__ = "1.0.0"
__all__ = [
    "TodoListManager",
    "HistoryStack",
    "HistoryStep",
    "Task",
    "Snapshot",
    "TaskFilter",
    "DueDateParse",
    "parse_due_date",
    "ActivityLog",
    "TodoError",
    "ValidationError",
    "InvalidDueDateError",
    "InvalidTaskError",
    "InvalidFilterError"
]
