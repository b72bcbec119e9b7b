"""todolist Store -- 内存任务仓库"""

from .memory_store import InMemoryTaskStore
from .protocols import TaskStore
from .seed import demo_tasks

__all__ = [
    "InMemoryTaskStore",
    "TaskStore",
    "demo_tasks",
]
