import pytest

from todo_history import TodoListManager
from todo_history import cli

from .conftest import scripted


class TestConsole:
    def test_add_and_view(self, manager, run_console):
        out = run_console(manager, "1", "Buy milk", "2024 01 01", "4", "all", "7")
        assert "Task added successfully!" in out
        assert "Buy milk - Pending, Due: 2024-1-1" in out
        assert out.rstrip().endswith("Exiting...")

    def test_bad_due_date_is_reprompted(self, manager, run_console):
        out = run_console(manager, "1", "Pay bills", "next week", "2024 1 5", "7")
        assert "Invalid date format: 'next week' (expected YYYY MM DD). Please try again." in out
        assert manager.view_tasks() == ["Pay bills - Pending, Due: 2024-1-5"]

    def test_blank_description(self, manager, run_console):
        out = run_console(manager, "1", "   ", "7")
        assert "Task description must not be empty." in out
        assert len(manager) == 0

    def test_mark_completed_messages(self, shopping, run_console):
        out = run_console(shopping, "2", "Buy milk", "2", "Buy milk", "7")
        assert "Task marked as completed!" in out
        assert "Task not found or already completed!" in out

    def test_delete_messages(self, shopping, run_console):
        out = run_console(shopping, "3", "Walk dog", "3", "Pay bills", "7")
        assert "Task not found!" in out
        assert "Task deleted!" in out
        assert shopping.view_tasks() == ["Buy milk - Pending, Due: 2024-1-1"]

    def test_undo_redo_choices(self, shopping, run_console):
        run_console(shopping, "2", "Buy milk", "5", "7")
        assert shopping.view_tasks("completed") == []
        run_console(shopping, "6", "7")
        assert shopping.view_tasks("completed") == ["Buy milk - Completed, Due: 2024-1-1"]

    def test_view_filters(self, shopping, run_console):
        shopping.mark_completed("Pay bills")
        out = run_console(shopping, "4", "pending", "4", "", "7")
        assert out.count("Buy milk - Pending, Due: 2024-1-1") == 2
        assert out.count("Pay bills - Completed, Due: 2024-1-5") == 1

    def test_view_unknown_filter_returns_to_menu(self, shopping, run_console):
        out = run_console(shopping, "4", "overdue", "7")
        assert "Error: Unknown filter 'overdue'" in out
        assert out.rstrip().endswith("Exiting...")

    def test_empty_view(self, manager, run_console):
        out = run_console(manager, "4", "completed", "7")
        assert "No tasks to show." in out

    def test_invalid_choice(self, manager, run_console):
        out = run_console(manager, "9", "abc", "7")
        assert out.count("Invalid choice! Please enter a valid option.") == 2

    def test_end_of_input_exits(self, manager, run_console):
        out = run_console(manager, "1", "Buy milk")
        assert out.rstrip().endswith("Exiting...")
        assert len(manager) == 0


class TestMain:
    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ["TODO_LOG_FILE", "TODO_LOG_LEVEL", "TODO_ACTIVITY_LOG"]:
            monkeypatch.delenv(name, raising=False)

    def test_session_writes_activity_log(self, tmp_path, monkeypatch, capsys):
        log_file = tmp_path / "app_log.txt"
        monkeypatch.setattr("builtins.input", scripted("1", "Buy milk", "2024 01 01", "5", "7"))

        assert cli.main(["--log-file", str(log_file)]) == 0

        text = log_file.read_text(encoding="utf-8")
        assert "] To-Do List Manager" in text
        assert "] Task added: Buy milk" in text
        assert "] Undo not possible" in text
        assert "Task added successfully!" in capsys.readouterr().out

    def test_no_log_flag(self, tmp_path, monkeypatch):
        log_file = tmp_path / "app_log.txt"
        monkeypatch.setattr("builtins.input", scripted("7"))
        assert cli.main(["--log-file", str(log_file), "--no-log"]) == 0
        assert not log_file.exists()

    def test_activity_log_disabled_by_environment(self, tmp_path, monkeypatch):
        log_file = tmp_path / "app_log.txt"
        monkeypatch.setenv("TODO_ACTIVITY_LOG", "false")
        monkeypatch.setenv("TODO_LOG_FILE", str(log_file))
        monkeypatch.setattr("builtins.input", scripted("1", "Buy milk", "2024 01 01", "7"))
        assert cli.main([]) == 0
        assert not log_file.exists()

    def test_unexpected_error_exits_non_zero(self, tmp_path, monkeypatch, capsys):
        log_file = tmp_path / "app_log.txt"

        def boom(self, filter_option="all"):
            raise RuntimeError("boom")

        monkeypatch.setattr(TodoListManager, "view_tasks", boom)
        monkeypatch.setattr("builtins.input", scripted("4", "all"))

        assert cli.main(["--log-file", str(log_file)]) == 1
        assert "An exception occurred: boom" in capsys.readouterr().err
        assert "] An exception occurred: boom" in log_file.read_text(encoding="utf-8")

