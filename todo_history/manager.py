"""
TODO HISTORY - Task List Manager
================================
Owns the live task list and its undo/redo history.

Every mutating attempt, successful or not, writes one line to the
``todo_history`` logger. Not-found outcomes are returned as False rather
than raised.
"""

import logging
from datetime import date
from typing import List, Optional, Union

from .errors import InvalidTaskError
from .history import HistoryStack, HistoryStep
from .schema import Snapshot, Task, TaskFilter, parse_due_date

logger = logging.getLogger("todo_history")


class TodoListManager:
    """
    In-memory task list with linear undo/redo.

    Tasks are kept in insertion order. History entries are keyed by task id,
    so undo and redo always act on the task the change was made to, and a
    deleted task comes back at its original position.
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger
        self.history = HistoryStack()
        self._tasks: List[Task] = []
        self._next_id: int = 1

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add_task(self, task: Task) -> Task:
        """Append a task and record its initial state"""
        if not task.description.strip():
            raise InvalidTaskError("Task description must not be empty")

        task = task.model_copy()
        task.id = self._allocate_id()
        self._tasks.append(task)
        self.history.record_change(task.snapshot())

        self.log.info(f"Task added: {task.description}")
        return task.model_copy()

    def create_task(
        self,
        description: str,
        due_date: Union[date, str, None] = None
    ) -> Task:
        """Build and add a task; a string due date must parse"""
        if isinstance(due_date, str):
            due_date = parse_due_date(due_date).unwrap()
        return self.add_task(Task.create(description, due_date=due_date))

    def mark_completed(self, description: str) -> bool:
        for task in self._tasks:
            if task.description == description and not task.completed:
                task.mark_completed()
                self.history.record_change(task.snapshot())
                self.log.info(f"Task marked as completed: {task.description}")
                return True

        self.log.info(f"Task not found or already completed: {description}")
        return False

    def delete_task(self, description: str) -> bool:
        for task in self._tasks:
            if task.description == description:
                self._tasks.remove(task)
                self.history.record_change(Snapshot.deletion(task.id))
                self.log.info(f"Task deleted: {description}")
                return True

        self.log.info(f"Task not found: {description}")
        return False

    # ========================================
    # UNDO / REDO
    # ========================================

    def undo(self) -> bool:
        step = self.history.undo()
        if step is None:
            self.log.info("Undo not possible")
            return False

        self._apply(step)
        self.log.info("Undo completed")
        return True

    def redo(self) -> bool:
        step = self.history.redo()
        if step is None:
            self.log.info("Redo not possible")
            return False

        self._apply(step)
        if step.removes_task:
            self.log.info("Redo completed (Task deleted)")
        else:
            self.log.info("Redo completed")
        return True

    def _apply(self, step: HistoryStep) -> None:
        task = self._get_task_by_id(step.task_id)

        if step.removes_task:
            if task is not None:
                self._tasks.remove(task)
            return

        if task is None:
            task = Task(id=step.task_id, description=step.snapshot.description)
            self._insert_in_order(task)
        task.restore(step.snapshot)

    # ========================================
    # QUERIES
    # ========================================

    def filter_tasks(self, filter_option: Union[TaskFilter, str] = TaskFilter.ALL) -> List[Snapshot]:
        """Snapshots of the tasks matching the filter, in insertion order"""
        task_filter = TaskFilter.parse(filter_option)
        return [task.snapshot() for task in self._tasks if task_filter.matches(task)]

    def view_tasks(self, filter_option: Union[TaskFilter, str] = TaskFilter.ALL) -> List[str]:
        """Display lines for the tasks matching the filter"""
        return [snapshot.display_line() for snapshot in self.filter_tasks(filter_option)]

    def get_task(self, description: str) -> Optional[Task]:
        """Copy of the first task with this description"""
        for task in self._tasks:
            if task.description == description:
                return task.model_copy()
        return None

    @property
    def tasks(self) -> List[Task]:
        return [task.model_copy() for task in self._tasks]

    def __len__(self) -> int:
        return len(self._tasks)

    # ========================================
    # HELPER METHODS
    # ========================================

    def _allocate_id(self) -> int:
        task_id = self._next_id
        self._next_id += 1
        return task_id

    def _get_task_by_id(self, task_id: int) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def _insert_in_order(self, task: Task) -> None:
        """Ids grow with insertion, so id order is insertion order"""
        for index, existing in enumerate(self._tasks):
            if existing.id > task.id:
                self._tasks.insert(index, task)
                return
        self._tasks.append(task)
