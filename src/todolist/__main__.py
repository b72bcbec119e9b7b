"""CLI 入口模块 -- python -m todolist <command>

支持的命令：
  list [query]            写入示例任务并打印可见任务
  toggle <n> [query]      翻转第 n 个可见任务的完成状态后打印
"""

import sys

from .exceptions import TodoError
from .logging_config import setup_logging
from .models import Task
from .services.session import TodoSession

USAGE = """用法: python -m todolist <command>
命令:
  list [query]         写入示例任务并打印可见任务
  toggle <n> [query]   翻转第 n 个可见任务的完成状态后打印"""


def format_task(index: int, task: Task) -> str:
    """渲染单行任务"""
    mark = "x" if task.is_completed else " "
    line = f"{index}. [{mark}] {task.title} ({task.priority.value})"
    if task.description is not None:
        line += f" -- {task.description}"
    return line


def print_tasks(tasks: list[Task]) -> None:
    if not tasks:
        print("没有任务")
        return
    for index, task in enumerate(tasks, start=1):
        print(format_task(index, task))


def main(argv: list[str] | None = None) -> int:
    """CLI 主入口"""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(USAGE)
        return 1

    setup_logging()
    session = TodoSession()
    session.open_list()

    command = args[0]
    if command == "list":
        if len(args) > 1:
            session.filter_view.set_query(args[1])
        print_tasks(session.visible_tasks())
        return 0

    if command == "toggle":
        if len(args) < 2 or not args[1].isdecimal():
            print(USAGE)
            return 1
        if len(args) > 2:
            session.filter_view.set_query(args[2])
        visible = session.visible_tasks()
        position = int(args[1])
        if not 1 <= position <= len(visible):
            print(f"没有第 {position} 个任务")
            return 1
        try:
            session.store.toggle_completed(visible[position - 1].task_id)
        except TodoError as e:
            print(f"操作失败: {e}")
            return 1
        print_tasks(session.visible_tasks())
        return 0

    print(f"未知命令: {command}")
    print("可用命令: list, toggle")
    return 1


if __name__ == "__main__":
    sys.exit(main())
