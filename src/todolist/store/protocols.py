"""Store Protocol 接口定义

使用 Python Protocol 实现结构化子类型（duck typing），
展示层只依赖此接口而非具体实现。
"""

from collections.abc import Callable
from typing import Protocol

from ..models.task import Task, TaskSnapshot


class TaskStore(Protocol):
    """Task 存储接口"""

    @property
    def snapshot(self) -> TaskSnapshot:
        """当前快照"""
        ...

    @property
    def initialized(self) -> bool:
        """initialize() 是否已调用过"""
        ...

    def initialize(self) -> None:
        """写入示例任务集（无条件替换现有内容）"""
        ...

    def add_task(self, task: Task) -> None:
        """追加任务"""
        ...

    def update_task(self, task: Task) -> None:
        """按 task_id 整体替换任务"""
        ...

    def delete_task(self, task: Task) -> None:
        """删除任务（不存在时无操作）"""
        ...

    def toggle_completed(self, task_id: str) -> Task:
        """翻转完成状态，返回新任务"""
        ...

    def find_by_id(self, task_id: str | None) -> Task | None:
        """按 task_id 查询任务"""
        ...

    def subscribe(
        self, callback: Callable[[TaskSnapshot], None], replay: bool = True
    ) -> Callable[[], None]:
        """订阅快照变化"""
        ...
