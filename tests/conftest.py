import io
import logging
from datetime import date

import pytest

from todo_history import TodoListManager
from todo_history.cli import Console


@pytest.fixture
def manager():
    return TodoListManager()


@pytest.fixture
def activity(caplog):
    """Captured activity-log messages for the todo_history logger"""
    caplog.set_level(logging.INFO, logger="todo_history")
    return caplog


@pytest.fixture
def shopping(manager):
    manager.create_task("Buy milk", date(2024, 1, 1))
    manager.create_task("Pay bills", date(2024, 1, 5))
    return manager


def scripted(*answers):
    """input() replacement that answers in order, then behaves like Ctrl-D"""
    remaining = list(answers)

    def _input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return _input


@pytest.fixture
def run_console():
    def _run(manager, *answers):
        out = io.StringIO()
        Console(manager, input_fn=scripted(*answers), output=out).run()
        return out.getvalue()
    return _run
