"""Table and summary rendering for todo lists."""

from datetime import date
from io import StringIO
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from todos.models import Statistics
from todos.task import Priority
from todos.todos import TodoList


DATE_FORMAT = "%Y-%m-%d"

PRIORITY_STYLES = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "green",
}


def _buffer_console(width: int = 100) -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, force_terminal=True, width=width, highlight=False), buffer


def render_tasks(todos: TodoList) -> str:
    """Render the todo list as a table.

    Columns are position, title, priority, completion, creation date
    and due date. Priorities and completion markers are coloured.

    Args:
        todos: The tasks to render

    Returns:
        String representation of the table
    """
    if not todos:
        return "No tasks yet! Create one with --add"

    console, buffer = _buffer_console()

    table = Table(box=box.ROUNDED, show_lines=False)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Title")
    table.add_column("Priority")
    table.add_column("Completed", justify="center")
    table.add_column("Created At", style="magenta")
    table.add_column("Due Date", style="magenta")

    for index, task in enumerate(todos):
        style = PRIORITY_STYLES[task.priority]
        completed = "[green]✅[/green]" if task.completed else "[red]❌[/red]"
        due = task.due_date.strftime(DATE_FORMAT) if task.due_date else ""

        table.add_row(
            str(index),
            escape(task.title),
            f"[{style}]{task.priority.value}[/{style}]",
            completed,
            task.created_at.strftime(DATE_FORMAT),
            due,
        )

    console.print(table)
    return buffer.getvalue()


def render_statistics(stats: Statistics) -> str:
    """Render the one-line statistics summary."""
    return (
        "Task Statistics:\n"
        f"   Total: {stats.total} | Completed: {stats.completed} | "
        f"Pending: {stats.pending} | High Priority: {stats.high}"
    )


def render_due_today(todos: TodoList, today: Optional[date] = None) -> str:
    """Render the notice of pending tasks due today.

    Tasks are listed with their position in the full list.
    """
    day = today or date.today()
    lines = ["Due Today:"]
    for index, task in enumerate(todos):
        if task.is_due_on(day):
            lines.append(f"   [{index}] {task.title}")

    if len(lines) == 1:
        lines.append("   Nothing due today!")
    return "\n".join(lines)
