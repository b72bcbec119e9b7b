"""todolist Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import Priority
from .task import Task, TaskSnapshot, new_task_id, utc_now

__all__ = [
    "Priority",
    "Task",
    "TaskSnapshot",
    "new_task_id",
    "utc_now",
]
