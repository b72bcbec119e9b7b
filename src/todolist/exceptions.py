"""todolist 异常体系

所有异常均可恢复：调用方（展示层）回到列表上下文即可。
"""


class TodoError(Exception):
    """todolist 基础异常"""

    def __init__(self, message: str, recoverable: bool = True) -> None:
        """
        Args:
            message: 错误描述
            recoverable: 是否可由调用方恢复
        """
        super().__init__(message)
        self.recoverable = recoverable


class NotFoundError(TodoError):
    """目标任务不存在，或标识符无法解析"""

    def __init__(self, task_id: str | None) -> None:
        super().__init__(f"任务不存在: {task_id!r}")
        self.task_id = task_id


class DuplicateIdError(TodoError):
    """add_task 时 task_id 已存在"""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"task_id 已存在: {task_id!r}")
        self.task_id = task_id


class ValidationError(TodoError):
    """表单提交校验失败"""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
