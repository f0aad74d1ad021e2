"""Shared fixtures for the todos tests."""

import logging
from datetime import datetime, timedelta

import pytest

from todos import Priority, TodoList


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI installs so later tests never log to a closed stream."""
    yield
    logger = logging.getLogger("todos")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def todos():
    """Four tasks with distinct, increasing creation times."""
    todo_list = TodoList()
    todo_list.add("Buy Milk", Priority.LOW, ["home", "errands"])
    todo_list.add("Fix login bug", Priority.HIGH, ["work"])
    todo_list.add("Write report", Priority.MEDIUM, ["work"])
    todo_list.add("Call plumber", Priority.HIGH, ["home"])

    start = datetime(2026, 1, 1, 9, 0)
    for i, task in enumerate(todo_list):
        task.created_at = start + timedelta(hours=i)
    return todo_list
