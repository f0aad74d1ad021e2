"""Command-line interface for the todo tracker."""

import logging
import sys
from datetime import date, datetime
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from todos.logging_setup import setup_logging
from todos.task import Priority
from todos.todos import IndexOutOfRange, TodoList
from todos.visualization import (
    DATE_FORMAT,
    render_tasks,
    render_statistics,
    render_due_today,
)


DEFAULT_PRIORITY = Priority.MEDIUM.value
PRIORITY_CHOICES = [p.value for p in (Priority.LOW, Priority.MEDIUM, Priority.HIGH)]

console = Console()
logger = logging.getLogger(__name__)


def parse_tags(value: Optional[str]) -> list[str]:
    """Split a comma-separated tag list, trimming whitespace around each tag."""
    if not value:
        return []
    return [tag.strip() for tag in value.split(",")]


def parse_due_date(value: Optional[str]) -> Optional[date]:
    """Parse a YYYY-MM-DD due date.

    Raises:
        click.BadParameter: If the value is not a valid date in that form.
    """
    if not value:
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise click.BadParameter(
            "invalid due date format. Use YYYY-MM-DD", param_hint="'--due'"
        )


def parse_edit_spec(value: str) -> tuple[int, str]:
    """Split an INDEX:NEW_TITLE edit specification.

    Only the first colon separates, so titles may contain colons.

    Raises:
        click.BadParameter: If the colon is missing or the index is not an integer.
    """
    parts = value.split(":", 1)
    if len(parts) != 2:
        raise click.BadParameter(
            "invalid format for edit. Please use id:new_title", param_hint="'--edit'"
        )
    try:
        index = int(parts[0])
    except ValueError:
        raise click.BadParameter("invalid index for edit", param_hint="'--edit'")
    return index, parts[1]


def print_list(todos: TodoList) -> None:
    """Print the task table, the statistics line and the due-today notice."""
    click.echo(render_tasks(todos).rstrip("\n"))
    click.echo()
    click.echo(render_statistics(todos.get_statistics()))
    click.echo()
    click.echo(render_due_today(todos))


def print_results(todos: TodoList, heading: str, empty_message: str) -> None:
    if not todos:
        console.print(empty_message)
        return
    console.print(heading)
    console.print()
    click.echo(render_tasks(todos).rstrip("\n"))


@click.command()
@click.option("--add", "add_title", help="Add a new todo with this title")
@click.option(
    "--priority",
    type=click.Choice(PRIORITY_CHOICES, case_sensitive=False),
    default=DEFAULT_PRIORITY,
    envvar="TODOS_PRIORITY",
    help="Priority for --add",
    show_default=True,
)
@click.option("--tags", help="Tags for --add (comma-separated)")
@click.option("--due", help="Due date for --add (YYYY-MM-DD)")
@click.option("--edit", "edit_spec", help="Edit a todo title by index: INDEX:NEW_TITLE")
@click.option("--del", "delete_index", type=int, help="Delete the todo at this index")
@click.option("--toggle", "toggle_index", type=int, help="Toggle completion of the todo at this index")
@click.option("--list", "list_all", is_flag=True, help="List all todos")
@click.option("--search", help="Search todos by title")
@click.option("--tag", "filter_tag", help="Filter todos by tag")
@click.option(
    "--sort",
    type=click.Choice(["priority", "date"], case_sensitive=False),
    help="Sort todos by priority or creation date",
)
@click.option("--stats", is_flag=True, help="Show task statistics")
@click.option("--clear-completed", is_flag=True, help="Delete all completed todos")
@click.option(
    "-v", "--verbose",
    is_flag=True,
    envvar="TODOS_VERBOSE",
    help="Log debug output to stderr",
)
@click.pass_context
def cli(ctx, add_title, priority, tags, due, edit_spec, delete_index, toggle_index,
        list_all, search, filter_tag, sort, stats, clear_completed, verbose):
    """A small command-line todo tracker.

    Runs one operation per invocation. When several are given, the first
    in this order wins: --list, --stats, --search, --tag, --sort, --add,
    --edit, --toggle, --del, --clear-completed.
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    todos = ctx.obj.setdefault("todos", TodoList())

    try:
        if list_all:
            print_list(todos)
        elif stats:
            click.echo(render_statistics(todos.get_statistics()))
        elif search:
            print_results(
                todos.search(search),
                f"Search results for: {escape(search)}",
                f"No todos found matching: {escape(search)}",
            )
        elif filter_tag:
            print_results(
                todos.filter_by_tag(filter_tag),
                f"Todos tagged with: {escape(filter_tag)}",
                f"No todos found with tag: {escape(filter_tag)}",
            )
        elif sort:
            if sort.lower() == "priority":
                todos.sort_by_priority()
                console.print("Sorted by priority")
            else:
                todos.sort_by_date()
                console.print("Sorted by date")
        elif add_title:
            task = todos.add(add_title, priority, parse_tags(tags), parse_due_date(due))
            console.print(
                f"[green]Added:[/green] {escape(task.title)} "
                f"(Priority: {task.priority.value})"
            )
        elif edit_spec:
            index, title = parse_edit_spec(edit_spec)
            todos.edit(index, title)
            console.print(f"Updated task {index}")
        elif toggle_index is not None:
            task = todos.toggle(toggle_index)
            state = "completed" if task.completed else "pending"
            console.print(f"Toggled task {toggle_index} ({state})")
        elif delete_index is not None:
            todos.delete(delete_index)
            console.print(f"Deleted task {delete_index}")
        elif clear_completed:
            removed = todos.delete_completed()
            console.print(f"Removed {removed} completed task(s)")
        else:
            console.print("[red]Invalid command[/red]")
            ctx.exit(1)
    except IndexOutOfRange as e:
        logger.debug("%s", e)
        console.print("[red]Error:[/red] Invalid index")
        ctx.exit(1)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    try:
        result = cli.main(args=argv, obj={}, standalone_mode=False)
        return result if isinstance(result, int) else 0
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.Abort:
        console.print("[red]Aborted.[/red]")
        return 1
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
