"""Example usage of the todos library."""

from datetime import date

from todos import IndexOutOfRange, Priority, TodoList
from todos.visualization import render_tasks, render_statistics, render_due_today


def main():
    """Demonstrate basic todo list functionality."""
    todos = TodoList()

    todos.add("Review code", Priority.HIGH, ["work"])
    todos.add("Water plants", Priority.LOW, ["home"], date.today())
    todos.add("Write documentation", Priority.MEDIUM, ["work", "docs"])

    print(render_tasks(todos))

    # Complete a task
    todos.toggle(0)
    todos.sort_by_priority()
    print("After completing task 0 and sorting by priority:")
    print(todos)
    print()

    print("Tagged 'work':")
    for task in todos.filter_by_tag("work"):
        print(f"  - {task}")
    print()

    print(render_statistics(todos.get_statistics()))
    print(render_due_today(todos))

    try:
        todos.delete(10)
    except IndexOutOfRange as e:
        print(f"\n{e}")


if __name__ == "__main__":
    main()
