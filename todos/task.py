"""Task module for the todo tracker."""

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Union


logger = logging.getLogger(__name__)


class Priority(str, Enum):
    """Task priority levels."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        """Sort rank, lowest first (High=1, Medium=2, Low=3)."""
        return _RANKS[self]

    @classmethod
    def parse(cls, value: Union["Priority", str, None]) -> "Priority":
        """Normalise a caller-supplied priority.

        Labels match case-insensitively. Missing, empty and unknown
        values fall back to Medium instead of being rejected.

        Args:
            value: A Priority, a label such as "high", or None.

        Returns:
            The matching Priority member.
        """
        if isinstance(value, cls):
            return value
        if not value or not value.strip():
            return cls.MEDIUM
        label = value.strip().lower()
        for member in cls:
            if member.value.lower() == label:
                return member
        logger.warning("Unknown priority %r, using %s", value, cls.MEDIUM.value)
        return cls.MEDIUM

    def __str__(self) -> str:
        return self.value


_RANKS = {Priority.HIGH: 1, Priority.MEDIUM: 2, Priority.LOW: 3}


@dataclass
class Task:
    """A single todo item.

    Attributes:
        title: The title of the task.
        completed: Whether the task is completed.
        priority: The task priority.
        tags: Free-form labels, in the order given.
        created_at: When the task was created.
        completed_at: When the task was last marked completed. Toggling a
            task back to pending keeps the previous value.
        due_date: Optional day the task is due.
    """

    title: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    tags: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None
    due_date: Optional[date] = None

    def toggle(self) -> None:
        """Flip the completion state, stamping completed_at on completion."""
        if not self.completed:
            self.completed_at = datetime.now()
        self.completed = not self.completed

    def is_due_on(self, day: date) -> bool:
        """Whether the task is still pending and due on the given day."""
        return self.due_date is not None and self.due_date == day and not self.completed

    def copy(self) -> "Task":
        """Return an independent copy of the task."""
        return replace(self, tags=list(self.tags))

    def __str__(self) -> str:
        """Return a string representation of the task."""
        status = "✓" if self.completed else " "
        return f"[{status}] {self.title}"

    def __repr__(self) -> str:
        """Return a detailed representation of the task."""
        return (
            f"Task(title='{self.title}', priority={self.priority.value}, "
            f"completed={self.completed})"
        )
