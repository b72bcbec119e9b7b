"""todolist -- 内存任务仓库，支持同步快照订阅与实时搜索

公共类型从此入口导入。
"""

from .exceptions import DuplicateIdError, NotFoundError, TodoError, ValidationError
from .models import Priority, Task, TaskSnapshot
from .services.editor import EditTarget, TaskEditor
from .services.filter_view import FilterView, matches
from .services.session import TodoSession
from .services.state_hub import StateHub
from .store import InMemoryTaskStore, TaskStore

__all__ = [
    # 模型
    "Priority",
    "Task",
    "TaskSnapshot",
    # 仓库
    "TaskStore",
    "InMemoryTaskStore",
    # 服务
    "StateHub",
    "FilterView",
    "matches",
    "TaskEditor",
    "EditTarget",
    "TodoSession",
    # 异常
    "TodoError",
    "NotFoundError",
    "DuplicateIdError",
    "ValidationError",
]
