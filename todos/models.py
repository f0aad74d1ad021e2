"""Derived values computed from a todo list."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Statistics:
    """Counts over a todo list.

    Attributes:
        total: Number of tasks
        completed: Number of completed tasks
        pending: Number of tasks not yet completed (total - completed)
        high: Number of High priority tasks, completed or not
    """

    total: int = 0
    completed: int = 0
    pending: int = 0
    high: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)
