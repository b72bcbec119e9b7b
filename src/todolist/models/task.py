"""Task Domain Model

Task 是不可变值：更新时整体替换，从不就地修改。
TaskSnapshot 是带版本号的任务序列快照，每次发布都整体替换上一个。
"""

import threading
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field
from ulid import ULID

from .enums import Priority

_clock_lock = threading.Lock()
_last_created_at: datetime | None = None


def new_task_id() -> str:
    """生成新的任务 ID（ULID 字符串）"""
    return str(ULID())


def utc_now() -> datetime:
    """返回当前 UTC 时间，进程内单调不减"""
    global _last_created_at
    with _clock_lock:
        now = datetime.now(UTC)
        if _last_created_at is not None and now < _last_created_at:
            now = _last_created_at
        _last_created_at = now
        return now


class Task(BaseModel):
    """Task 数据模型

    description 为 None 表示未填写，与空字符串语义不同。
    created_at 仅作记录，不参与排序。
    """

    model_config = ConfigDict(frozen=True)

    task_id: str = Field(
        default_factory=new_task_id,
        min_length=1,
        description="唯一标识，ULID 格式",
    )
    title: str = Field(min_length=1, description="任务标题")
    description: str | None = Field(default=None, description="可选描述")
    priority: Priority = Field(default=Priority.MEDIUM, description="优先级")
    is_completed: bool = Field(default=False, description="是否已完成")
    created_at: datetime = Field(default_factory=utc_now, description="创建时间")


class TaskSnapshot(BaseModel):
    """任务集合快照

    version 从 0（空仓库）开始，每次发布递增 1。
    """

    model_config = ConfigDict(frozen=True)

    version: int = Field(default=0, ge=0, description="快照版本号")
    tasks: tuple[Task, ...] = Field(default=(), description="按插入顺序排列的任务")

    def __len__(self) -> int:
        return len(self.tasks)

    def find(self, task_id: str | None) -> Task | None:
        """按 task_id 查找任务"""
        if not task_id:
            return None
        for task in self.tasks:
            if task.task_id == task_id:
                return task
        return None
