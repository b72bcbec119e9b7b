"""FilterView -- 任务搜索过滤视图

只持有一个查询字符串；过滤结果按需从仓库快照重新计算，不缓存。
"""

from collections.abc import Callable, Iterable

import structlog

from ..models.task import Task
from .state_hub import StateHub

log = structlog.get_logger()


def matches(task: Task, query: str) -> bool:
    """判断任务是否匹配查询

    查询（忽略大小写）是 title 的子串，或是 description（存在时）的子串。
    空查询匹配所有任务。不匹配 priority、is_completed 和 task_id。
    """
    needle = query.lower()
    if needle in task.title.lower():
        return True
    return task.description is not None and needle in task.description.lower()


class FilterView:
    """搜索过滤视图"""

    def __init__(self, query: str = "") -> None:
        self._hub: StateHub[str] = StateHub(query, name="query")

    @property
    def query(self) -> str:
        return self._hub.value

    def set_query(self, query: str) -> None:
        """替换查询字符串并发布新值"""
        self._hub.publish(query)
        log.debug("query_changed", query=query)

    def subscribe(
        self, callback: Callable[[str], None], replay: bool = True
    ) -> Callable[[], None]:
        """订阅查询变化，返回取消订阅函数"""
        return self._hub.subscribe(callback, replay=replay)

    def visible_tasks(self, all_tasks: Iterable[Task]) -> list[Task]:
        """返回匹配当前查询的任务，保持原有相对顺序"""
        query = self.query
        return [task for task in all_tasks if matches(task, query)]
