#!/usr/bin/env python3
"""
TODO HISTORY - CLI Interface
============================
Interactive menu for the in-memory task list.

Usage:
    todo-history
    todo-history --log-file /tmp/todo.log
    todo-history --no-log --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import Callable, Dict, Optional, TextIO

from .activity_log import ActivityLog
from .errors import ValidationError
from .manager import TodoListManager, logger
from .schema import TaskFilter, parse_due_date
from .settings import get_settings

MENU = """
Options:
1. Add Task
2. Mark Task as Completed
3. Delete Task
4. View Tasks
5. Undo
6. Redo
7. Exit"""

EXIT_CHOICE = "7"


class Console:
    """Menu loop; input and output are injectable for scripted sessions"""

    def __init__(
        self,
        manager: TodoListManager,
        input_fn: Optional[Callable[[str], str]] = None,
        output: Optional[TextIO] = None
    ):
        self.manager = manager
        self._input = input_fn or input
        self._output = output
        self._actions: Dict[str, Callable] = {
            "1": self._add,
            "2": self._mark_completed,
            "3": self._delete,
            "4": self._view,
            "5": self.manager.undo,
            "6": self.manager.redo,
        }

    def run(self) -> None:
        try:
            while True:
                self._print(MENU)
                choice = self._input("Enter your choice: ").strip()
                if choice == EXIT_CHOICE:
                    self._print("Exiting...")
                    return

                action = self._actions.get(choice)
                if action is None:
                    self._print("Invalid choice! Please enter a valid option.")
                    continue

                try:
                    action()
                except ValidationError as e:
                    self._print(f"Error: {e}")
        except (KeyboardInterrupt, EOFError):
            self._print("\nExiting...")

    # -------------------- menu actions --------------------
    def _add(self) -> None:
        description = self._input("Enter task description: ").strip()
        if not description:
            self._print("Task description must not be empty.")
            return

        while True:
            parsed = parse_due_date(self._input("Enter due date (YYYY MM DD): "))
            if parsed.ok:
                break
            self._print(f"{parsed.error}. Please try again.")

        self.manager.create_task(description, parsed.value)
        self._print("Task added successfully!")

    def _mark_completed(self) -> None:
        description = self._input("Enter task description to mark as completed: ").strip()
        if self.manager.mark_completed(description):
            self._print("Task marked as completed!")
        else:
            self._print("Task not found or already completed!")

    def _delete(self) -> None:
        description = self._input("Enter task description to delete: ").strip()
        if self.manager.delete_task(description):
            self._print("Task deleted!")
        else:
            self._print("Task not found!")

    def _view(self) -> None:
        self._print("Filter options: all, completed, pending")
        raw = self._input("Enter filter option: ").strip() or TaskFilter.ALL.value
        lines = self.manager.view_tasks(raw)
        if not lines:
            self._print("No tasks to show.")
        for line in lines:
            self._print(line)

    def _print(self, text: str = "") -> None:
        print(text, file=self._output or sys.stdout)


def main(argv=None):
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="To-Do List Manager with undo/redo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  TODO_LOG_FILE        Activity log path (default: app_log.txt)
  TODO_LOG_LEVEL       Level for diagnostics on stderr (default: WARNING)
  TODO_ACTIVITY_LOG    Set to false to disable the activity log
        """
    )
    parser.add_argument("--log-file", default=settings.log_file, help="Activity log path")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Level for diagnostics on stderr"
    )
    parser.add_argument("--no-log", action="store_true", help="Don't write the activity log")

    args = parser.parse_args(argv)

    # Activity lines are INFO; keep them off stderr unless asked for
    console_handler = logging.StreamHandler()
    console_handler.setLevel(args.log_level)
    logging.basicConfig(level=args.log_level, handlers=[console_handler])

    manager = TodoListManager()
    activity_log = ActivityLog(args.log_file)
    if settings.activity_log and not args.no_log:
        activity_log.open()

    try:
        logger.info("To-Do List Manager")
        Console(manager).run()
    except Exception as e:
        print(f"An exception occurred: {e}", file=sys.stderr)
        logger.error(f"An exception occurred: {e}")
        return 1
    finally:
        activity_log.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
