"""TodoSession -- 一个展示层会话所需的仓库、过滤视图与编辑器组合"""

import structlog

from ..config import TodoConfig, load_config
from ..models import Task
from ..store import InMemoryTaskStore
from .editor import TaskEditor
from .filter_view import FilterView

log = structlog.get_logger()


class TodoSession:
    """会话组合 -- 多个会话可以共享同一个任务仓库"""

    def __init__(
        self,
        store: InMemoryTaskStore | None = None,
        config: TodoConfig | None = None,
    ) -> None:
        self.config = config if config is not None else load_config()
        if store is None:
            store = InMemoryTaskStore(strict_updates=self.config.strict_updates)
        self.store = store
        self.filter_view = FilterView()
        self.editor = TaskEditor(self.store)

    def open_list(self) -> list[Task]:
        """进入列表上下文

        示例数据在仓库生命周期内只写入一次，重复进入列表不会覆盖用户编辑。
        """
        if not self.config.seed_demo:
            log.debug("seed_skipped")
        elif not self.store.initialized:
            self.store.initialize()
        return self.visible_tasks()

    def visible_tasks(self) -> list[Task]:
        """由当前快照和当前查询推导可见任务"""
        return self.filter_view.visible_tasks(self.store.tasks)
