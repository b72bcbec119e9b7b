"""TaskEditor -- 列表/编辑上下文之间的标识符解析与表单提交

进入编辑上下文时只携带一个可空的 task_id 字符串：
- None 表示新建任务，新 ID 在提交时才生成
- 否则解析为仓库中的现有任务，用于预填表单
"""

import structlog
from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import NotFoundError, ValidationError
from ..models import Priority, Task
from ..store.protocols import TaskStore

log = structlog.get_logger()


class EditTarget(BaseModel):
    """编辑上下文 -- 目标任务与预填表单值"""

    model_config = ConfigDict(frozen=True)

    task: Task | None = Field(default=None, description="被编辑的任务；None 表示新建")
    title: str = Field(default="", description="预填标题")
    description: str = Field(default="", description="预填描述（None 显示为空）")
    priority: Priority = Field(default=Priority.MEDIUM, description="预填优先级")

    @property
    def is_new(self) -> bool:
        return self.task is None


class TaskEditor:
    """任务编辑服务"""

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    def open(self, raw_id: str | None) -> EditTarget:
        """解析编辑上下文携带的标识符

        Args:
            raw_id: 列表上下文传来的 task_id；None 表示新建

        Returns:
            EditTarget 实例

        Raises:
            NotFoundError: 标识符为空白或不匹配任何任务（调用方错误）
        """
        if raw_id is None:
            return EditTarget()

        task = self._store.find_by_id(raw_id.strip())
        if task is None:
            log.warning("edit_target_not_found", task_id=raw_id)
            raise NotFoundError(raw_id)

        return EditTarget(
            task=task,
            title=task.title,
            description=task.description or "",
            priority=task.priority,
        )

    def submit(
        self,
        target: EditTarget,
        title: str,
        description: str | None = None,
        priority: Priority = Priority.MEDIUM,
    ) -> Task:
        """提交表单：新建时 add_task，编辑时 update_task

        编辑时保留原任务的 task_id、created_at 和 is_completed。

        Returns:
            写入仓库的任务

        Raises:
            ValidationError: 标题为空白
            NotFoundError: 编辑目标已不在仓库中
        """
        title = title.strip()
        if not title:
            raise ValidationError("title", "标题不能为空")
        # 空描述视为未填写
        description = description or None

        if target.task is None:
            task = Task(title=title, description=description, priority=priority)
            self._store.add_task(task)
            return task

        # 打开编辑后任务可能已被删除
        if self._store.find_by_id(target.task.task_id) is None:
            log.warning("edit_target_gone", task_id=target.task.task_id)
            raise NotFoundError(target.task.task_id)

        task = target.task.model_copy(
            update={
                "title": title,
                "description": description,
                "priority": priority,
            }
        )
        self._store.update_task(task)
        return task
