"""Tests for the command-line interface."""

from datetime import date

import click
import pytest
from click.testing import CliRunner

from todos import Priority, TodoList
from todos.cli import cli, main, parse_due_date, parse_edit_spec, parse_tags


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, args, todo_list):
    return runner.invoke(cli, args, obj={"todos": todo_list})


class TestParsing:
    """Tests for argument parsing helpers."""

    def test_parse_tags(self):
        assert parse_tags("home, work ,errands") == ["home", "work", "errands"]
        assert parse_tags("") == []
        assert parse_tags(None) == []

    def test_parse_due_date(self):
        assert parse_due_date("2026-10-19") == date(2026, 10, 19)
        assert parse_due_date(None) is None

    @pytest.mark.parametrize("value", ["19/10/2026", "2026-13-01", "tomorrow"])
    def test_parse_due_date_rejects_malformed(self, value):
        with pytest.raises(click.BadParameter):
            parse_due_date(value)

    def test_parse_edit_spec(self):
        assert parse_edit_spec("2:New title") == (2, "New title")
        assert parse_edit_spec("0:Meeting at 10:30") == (0, "Meeting at 10:30")

    @pytest.mark.parametrize("value", ["no colon", "x:title"])
    def test_parse_edit_spec_rejects_malformed(self, value):
        with pytest.raises(click.BadParameter):
            parse_edit_spec(value)


class TestCommands:
    """Tests for dispatching one operation per invocation."""

    def test_add(self, runner):
        todo_list = TodoList()
        result = invoke(runner, [
            "--add", "Buy milk", "--priority", "high",
            "--tags", "home, errands", "--due", "2026-10-20",
        ], todo_list)

        assert result.exit_code == 0
        assert "Added: Buy milk (Priority: High)" in result.output
        task = todo_list.get_task(0)
        assert task.priority is Priority.HIGH
        assert task.tags == ["home", "errands"]
        assert task.due_date == date(2026, 10, 20)

    def test_add_default_priority(self, runner):
        todo_list = TodoList()
        result = invoke(runner, ["--add", "Read"], todo_list)
        assert result.exit_code == 0
        assert todo_list.get_task(0).priority is Priority.MEDIUM

    def test_add_priority_from_environment(self, runner):
        todo_list = TodoList()
        result = runner.invoke(
            cli, ["--add", "Read"], obj={"todos": todo_list}, env={"TODOS_PRIORITY": "Low"}
        )
        assert result.exit_code == 0
        assert todo_list.get_task(0).priority is Priority.LOW

    def test_add_rejects_bad_date(self, runner):
        todo_list = TodoList()
        result = invoke(runner, ["--add", "Read", "--due", "20-10-2026"], todo_list)
        assert result.exit_code == 2
        assert "YYYY-MM-DD" in result.output
        assert len(todo_list) == 0

    def test_add_rejects_bad_priority(self, runner):
        todo_list = TodoList()
        result = invoke(runner, ["--add", "Read", "--priority", "Urgent"], todo_list)
        assert result.exit_code == 2
        assert len(todo_list) == 0

    def test_list(self, runner, todos):
        result = invoke(runner, ["--list"], todos)
        assert result.exit_code == 0
        assert "Buy Milk" in result.output
        assert "Total: 4 | Completed: 0 | Pending: 4 | High Priority: 2" in result.output
        assert "Due Today:" in result.output

    def test_list_empty(self, runner):
        result = invoke(runner, ["--list"], TodoList())
        assert result.exit_code == 0
        assert "No tasks yet!" in result.output
        assert "Nothing due today!" in result.output

    def test_stats(self, runner, todos):
        todos.toggle(0)
        result = invoke(runner, ["--stats"], todos)
        assert result.exit_code == 0
        assert "Total: 4 | Completed: 1 | Pending: 3 | High Priority: 2" in result.output

    def test_search(self, runner, todos):
        result = invoke(runner, ["--search", "MILK"], todos)
        assert result.exit_code == 0
        assert "Search results for: MILK" in result.output
        assert "Buy Milk" in result.output
        assert "Write report" not in result.output

    def test_search_no_match(self, runner, todos):
        result = invoke(runner, ["--search", "holiday"], todos)
        assert result.exit_code == 0
        assert "No todos found matching: holiday" in result.output

    def test_tag(self, runner, todos):
        result = invoke(runner, ["--tag", "work"], todos)
        assert result.exit_code == 0
        assert "Todos tagged with: work" in result.output
        assert "Write report" in result.output
        assert "Buy Milk" not in result.output

    def test_tag_no_match(self, runner, todos):
        result = invoke(runner, ["--tag", "garden"], todos)
        assert "No todos found with tag: garden" in result.output

    def test_sort_priority(self, runner, todos):
        result = invoke(runner, ["--sort", "priority"], todos)
        assert result.exit_code == 0
        assert "Sorted by priority" in result.output
        assert [t.title for t in todos] == [
            "Fix login bug", "Call plumber", "Write report", "Buy Milk",
        ]

    def test_sort_date(self, runner, todos):
        todos.sort_by_priority()
        result = invoke(runner, ["--sort", "date"], todos)
        assert "Sorted by date" in result.output
        assert todos.get_task(0).title == "Buy Milk"

    def test_sort_rejects_unknown_key(self, runner, todos):
        result = invoke(runner, ["--sort", "title"], todos)
        assert result.exit_code == 2

    def test_edit(self, runner, todos):
        result = invoke(runner, ["--edit", "1:Fix logout bug"], todos)
        assert result.exit_code == 0
        assert todos.get_task(1).title == "Fix logout bug"

    def test_edit_malformed(self, runner, todos):
        result = invoke(runner, ["--edit", "Fix logout bug"], todos)
        assert result.exit_code == 2
        assert todos.get_task(1).title == "Fix login bug"

    def test_toggle(self, runner, todos):
        result = invoke(runner, ["--toggle", "2"], todos)
        assert result.exit_code == 0
        assert todos.get_task(2).completed is True

    def test_delete(self, runner, todos):
        result = invoke(runner, ["--del", "0"], todos)
        assert result.exit_code == 0
        assert "Deleted task 0" in result.output
        assert len(todos) == 3

    def test_clear_completed(self, runner, todos):
        todos.toggle(0)
        todos.toggle(3)
        result = invoke(runner, ["--clear-completed"], todos)
        assert result.exit_code == 0
        assert "Removed 2 completed task(s)" in result.output
        assert [t.title for t in todos] == ["Fix login bug", "Write report"]

    @pytest.mark.parametrize("args", [
        ["--del", "9"], ["--toggle", "-1"], ["--edit", "4:Nope"],
    ])
    def test_invalid_index(self, runner, todos, args):
        result = invoke(runner, args, todos)
        assert result.exit_code == 1
        assert "Invalid index" in result.output
        assert len(todos) == 4
        assert not any(t.completed for t in todos)

    def test_invalid_command(self, runner):
        result = invoke(runner, [], TodoList())
        assert result.exit_code == 1
        assert "Invalid command" in result.output

    def test_first_option_wins(self, runner, todos):
        """Stats outranks add, so nothing is added."""
        result = invoke(runner, ["--add", "Ignored", "--stats"], todos)
        assert result.exit_code == 0
        assert "Task Statistics:" in result.output
        assert len(todos) == 4

    def test_fresh_list_without_context(self, runner):
        result = runner.invoke(cli, ["--stats"])
        assert result.exit_code == 0
        assert "Total: 0 | Completed: 0 | Pending: 0 | High Priority: 0" in result.output


class TestMain:
    """Tests for the entry point's exit codes."""

    def test_success(self, capsys):
        assert main(["--add", "Read"]) == 0
        assert "Added: Read" in capsys.readouterr().out

    def test_invalid_index(self, capsys):
        assert main(["--del", "0"]) == 1

    def test_usage_error(self, capsys):
        assert main(["--due", "soon", "--add", "Read"]) == 2
