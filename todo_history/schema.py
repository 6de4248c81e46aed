"""
TODO HISTORY - Task Schema Definition
=====================================
Task records, the immutable snapshots used by undo/redo, view filters and
due date parsing.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .errors import InvalidDueDateError, InvalidFilterError

DUE_DATE_FORMATS = ("%Y %m %d", "%Y-%m-%d")


class TaskFilter(str, Enum):
    """Which tasks a view shows"""
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"

    @classmethod
    def parse(cls, value) -> "TaskFilter":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise InvalidFilterError(f"Unknown filter '{value}' (expected one of: {choices})")

    def matches(self, task) -> bool:
        if self is TaskFilter.COMPLETED:
            return task.completed
        if self is TaskFilter.PENDING:
            return not task.completed
        return True


def format_task_line(description: str, completed: bool, due_date: Optional[date]) -> str:
    status = "Completed" if completed else "Pending"
    due = f"{due_date.year}-{due_date.month}-{due_date.day}" if due_date else "unset"
    return f"{description} - {status}, Due: {due}"


class Snapshot(BaseModel):
    """
    Frozen copy of a task's fields at one point in time.

    An empty description marks "this task does not exist" and is produced
    by delete.
    """
    model_config = ConfigDict(frozen=True)

    task_id: int
    description: str = ""
    completed: bool = False
    due_date: Optional[date] = None

    @classmethod
    def deletion(cls, task_id: int) -> "Snapshot":
        return cls(task_id=task_id)

    @property
    def is_deletion(self) -> bool:
        return self.description == ""

    def display_line(self) -> str:
        return format_task_line(self.description, self.completed, self.due_date)


class Task(BaseModel):
    """Individual task; id is assigned by the manager on add"""
    id: int = 0
    description: str
    completed: bool = False
    due_date: Optional[date] = None

    @classmethod
    def create(cls, description: str, due_date: Optional[date] = None) -> "Task":
        return cls(description=description, due_date=due_date)

    def mark_completed(self) -> None:
        self.completed = True

    def snapshot(self) -> Snapshot:
        return Snapshot(
            task_id=self.id,
            description=self.description,
            completed=self.completed,
            due_date=self.due_date
        )

    def restore(self, snapshot: Snapshot) -> None:
        """Overwrite fields in place from a snapshot of this same task"""
        self.description = snapshot.description
        self.completed = snapshot.completed
        self.due_date = snapshot.due_date

    def display_line(self) -> str:
        return format_task_line(self.description, self.completed, self.due_date)


class DueDateParse(BaseModel):
    """Outcome of parsing a due date: either a value or an error message"""
    model_config = ConfigDict(frozen=True)

    text: str
    value: Optional[date] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> date:
        if self.error is not None:
            raise InvalidDueDateError(self.error)
        return self.value


def parse_due_date(text: str) -> DueDateParse:
    """Parse 'YYYY MM DD' (or 'YYYY-MM-DD') without raising"""
    raw = text or ""
    cleaned = " ".join(raw.split())
    for fmt in DUE_DATE_FORMATS:
        try:
            return DueDateParse(text=raw, value=datetime.strptime(cleaned, fmt).date())
        except ValueError:
            continue
    return DueDateParse(text=raw, error=f"Invalid date format: '{raw}' (expected YYYY MM DD)")
