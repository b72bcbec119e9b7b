"""CLI 入口测试"""

import pytest
import todolist.__main__ as cli
from todolist.models import Priority, Task


@pytest.fixture(autouse=True)
def quiet(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda: None)
    monkeypatch.delenv("TODOLIST_SEED_DEMO", raising=False)
    monkeypatch.delenv("TODOLIST_STRICT_UPDATES", raising=False)


class TestFormatTask:
    def test_with_description(self):
        task = Task(title="Buy milk", description="2% milk", priority=Priority.LOW)
        assert cli.format_task(1, task) == "1. [ ] Buy milk (LOW) -- 2% milk"

    def test_completed(self):
        task = Task(title="Exercise", is_completed=True)
        assert cli.format_task(3, task) == "3. [x] Exercise (MEDIUM)"


class TestMain:
    """python -m todolist"""

    def test_no_args(self, capsys):
        assert cli.main([]) == 1
        assert "用法" in capsys.readouterr().out

    def test_list(self, capsys):
        assert cli.main(["list"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert lines[0].startswith("1. [ ] Learn Jetpack Compose (HIGH)")

    def test_list_with_query(self, capsys):
        assert cli.main(["list", "GROC"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "1. [ ] Buy groceries (MEDIUM) -- Fruit and vegetables"
        ]

    def test_list_no_match(self, capsys):
        assert cli.main(["list", "جرد"]) == 0
        assert capsys.readouterr().out.strip() == "没有任务"

    def test_toggle(self, capsys):
        assert cli.main(["toggle", "3"]) == 0
        assert capsys.readouterr().out.splitlines()[2] == "3. [x] Exercise (LOW)"

    def test_toggle_out_of_range(self, capsys):
        assert cli.main(["toggle", "9"]) == 1
        assert "9" in capsys.readouterr().out

    def test_toggle_bad_index(self):
        assert cli.main(["toggle", "x"]) == 1

    def test_unknown_command(self, capsys):
        assert cli.main(["purge"]) == 1
        assert "未知命令" in capsys.readouterr().out

    def test_toggle_non_ascii_digit(self, capsys):
        """上标数字不是合法序号"""
        assert cli.main(["toggle", "²"]) == 1
        assert "用法" in capsys.readouterr().out
