"""
TODO HISTORY - Exceptions
=========================
Validation problems are raised; not-found outcomes are reported as booleans
by the manager and never appear here.
"""


class TodoError(Exception):
    """Base class for all todo-history errors"""


class ValidationError(TodoError, ValueError):
    """Bad user input; the console reports it and returns to the menu"""


class InvalidDueDateError(ValidationError):
    """Due date could not be parsed"""


class InvalidTaskError(ValidationError):
    """Task cannot be added (e.g. blank description)"""


class InvalidFilterError(ValidationError):
    """Unknown view filter"""
