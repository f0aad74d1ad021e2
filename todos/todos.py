"""Todo list module: the ordered task collection and its operations."""

import logging
from datetime import date
from typing import Iterable, Iterator, List, Optional, Sequence, Union

from .models import Statistics
from .task import Priority, Task


logger = logging.getLogger(__name__)


class IndexOutOfRange(IndexError):
    """Raised when a position does not address a task in the list.

    Attributes:
        index: The rejected position.
        length: Number of tasks in the list at the time.
    """

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Invalid index: {index} (collection has {length} tasks)")


class TodoList:
    """An ordered collection of tasks addressed by position.

    Positions run from 0 to len - 1 and are renumbered after every
    deletion, so a task's index is only meaningful until the next
    delete.

    Attributes:
        tasks: The tasks, in display order.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        """Initialize a todo list.

        Args:
            tasks: Optional initial tasks, kept in the given order.
        """
        self.tasks: List[Task] = list(tasks) if tasks is not None else []

    def _validate_index(self, index: int) -> None:
        if index < 0 or index >= len(self.tasks):
            logger.debug("Rejected index %d (length %d)", index, len(self.tasks))
            raise IndexOutOfRange(index, len(self.tasks))

    def add(
        self,
        title: str,
        priority: Union[Priority, str, None] = Priority.MEDIUM,
        tags: Optional[Sequence[str]] = None,
        due_date: Optional[date] = None,
    ) -> Task:
        """Append a new pending task.

        Args:
            title: The task title.
            priority: Priority or label; missing or unknown labels become Medium.
            tags: Already split and trimmed tags.
            due_date: Optional day the task is due.

        Returns:
            The created task.
        """
        task = Task(
            title=title,
            priority=Priority.parse(priority),
            tags=list(tags) if tags else [],
            due_date=due_date,
        )
        self.tasks.append(task)
        logger.debug("Added task %d: %r", len(self.tasks) - 1, task)
        return task

    def delete(self, index: int) -> Task:
        """Remove the task at index; later tasks shift down by one.

        Raises:
            IndexOutOfRange: If index does not address a task.
        """
        self._validate_index(index)
        task = self.tasks.pop(index)
        logger.debug("Deleted task %d: %r", index, task)
        return task

    def toggle(self, index: int) -> Task:
        """Flip the completion state of the task at index.

        Raises:
            IndexOutOfRange: If index does not address a task.
        """
        self._validate_index(index)
        task = self.tasks[index]
        task.toggle()
        logger.debug("Toggled task %d: completed=%s", index, task.completed)
        return task

    def edit(self, index: int, title: str) -> Task:
        """Replace the title of the task at index.

        Raises:
            IndexOutOfRange: If index does not address a task.
        """
        self._validate_index(index)
        task = self.tasks[index]
        task.title = title
        logger.debug("Edited task %d: %r", index, task)
        return task

    def search(self, query: str) -> "TodoList":
        """Tasks whose title contains query, ignoring case."""
        needle = query.lower()
        return TodoList(t.copy() for t in self.tasks if needle in t.title.lower())

    def filter_by_tag(self, tag: str) -> "TodoList":
        """Tasks carrying exactly this tag (case-sensitive)."""
        return TodoList(t.copy() for t in self.tasks if tag in t.tags)

    def sort_by_priority(self) -> None:
        """Reorder in place: High, then Medium, then Low. Ties keep their order."""
        self.tasks.sort(key=lambda t: t.priority.rank)

    def sort_by_date(self) -> None:
        """Reorder in place by creation time, earliest first. Ties keep their order."""
        self.tasks.sort(key=lambda t: t.created_at)

    def delete_completed(self) -> int:
        """Remove every completed task.

        Returns:
            Number of tasks removed.
        """
        before = len(self.tasks)
        self.tasks = [t for t in self.tasks if not t.completed]
        removed = before - len(self.tasks)
        logger.debug("Removed %d completed task(s)", removed)
        return removed

    def get_statistics(self) -> Statistics:
        """Count total, completed, pending and High priority tasks."""
        completed = sum(1 for t in self.tasks if t.completed)
        return Statistics(
            total=len(self.tasks),
            completed=completed,
            pending=len(self.tasks) - completed,
            high=sum(1 for t in self.tasks if t.priority is Priority.HIGH),
        )

    def due_today(self, today: Optional[date] = None) -> List[Task]:
        """Pending tasks due on today's date, in list order.

        Args:
            today: The day to check against. Defaults to date.today().
        """
        day = today or date.today()
        return [t for t in self.tasks if t.is_due_on(day)]

    def get_task(self, index: int) -> Task:
        """Get a task by index.

        Raises:
            IndexOutOfRange: If index does not address a task.
        """
        self._validate_index(index)
        return self.tasks[index]

    def get_tasks(self, completed: Optional[bool] = None) -> List[Task]:
        """Get tasks, optionally only completed (True) or pending (False) ones."""
        if completed is None:
            return self.tasks.copy()
        return [task for task in self.tasks if task.completed == completed]

    def count_tasks(self, completed: Optional[bool] = None) -> int:
        return len(self.get_tasks(completed))

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __str__(self) -> str:
        """Return a plain-text listing of the tasks."""
        if not self.tasks:
            return "No tasks yet."
        lines = [f"{i}. {task}" for i, task in enumerate(self.tasks)]
        lines.append(f"\nTotal: {len(self.tasks)} tasks "
                     f"({self.count_tasks(completed=True)} completed, "
                     f"{self.count_tasks(completed=False)} pending)")
        return "\n".join(lines)
