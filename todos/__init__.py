"""Minimalist command-line todo tracker."""

from todos.task import Priority, Task
from todos.todos import IndexOutOfRange, TodoList
from todos.models import Statistics

__all__ = ["IndexOutOfRange", "Priority", "Statistics", "Task", "TodoList"]
