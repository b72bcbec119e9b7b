"""TaskStore 内存实现

任务集合以不可变快照保存，每次变更都构造新快照整体替换（copy-on-write），
并在返回调用方之前同步通知所有订阅者。
"""

import threading
from collections.abc import Callable

import structlog

from ..exceptions import DuplicateIdError, NotFoundError
from ..models.task import Task, TaskSnapshot
from ..services.state_hub import StateHub
from .seed import demo_tasks

log = structlog.get_logger()


class InMemoryTaskStore:
    """TaskStore 的内存实现 -- 任务集合的唯一数据源"""

    def __init__(
        self,
        tasks: list[Task] | None = None,
        strict_updates: bool = False,
    ) -> None:
        """
        Args:
            tasks: 初始任务（不发布，作为 version 0 的内容）
            strict_updates: update_task 目标不存在时抛出 NotFoundError
        """
        initial = tuple(tasks or ())
        self._check_unique(initial)
        self._hub: StateHub[TaskSnapshot] = StateHub(
            TaskSnapshot(version=0, tasks=initial), name="tasks"
        )
        self._strict_updates = strict_updates
        self._initialized = False
        # 可重入：订阅者回调中读取仓库不会死锁
        self._lock = threading.RLock()

    # ---- 读取 ----

    @property
    def snapshot(self) -> TaskSnapshot:
        return self._hub.value

    @property
    def initialized(self) -> bool:
        """initialize() 是否已在本仓库上调用过"""
        return self._initialized

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._hub.value.tasks

    def __len__(self) -> int:
        return len(self._hub.value)

    def find_by_id(self, task_id: str | None) -> Task | None:
        """按 task_id 查询任务，不存在或标识符为空时返回 None"""
        return self._hub.value.find(task_id)

    def get_task(self, task_id: str | None) -> Task:
        """按 task_id 查询任务

        Raises:
            NotFoundError: 任务不存在
        """
        task = self.find_by_id(task_id)
        if task is None:
            raise NotFoundError(task_id)
        return task

    def subscribe(
        self, callback: Callable[[TaskSnapshot], None], replay: bool = True
    ) -> Callable[[], None]:
        """订阅快照变化，返回取消订阅函数"""
        return self._hub.subscribe(callback, replay=replay)

    # ---- 变更 ----

    def initialize(self) -> None:
        """写入示例任务集

        无条件替换现有内容；是否只调用一次由调用方决定。
        """
        with self._lock:
            seeded = tuple(demo_tasks())
            self._initialized = True
            self._publish(seeded)
            log.info("store_initialized", count=len(seeded))

    def add_task(self, task: Task) -> None:
        """追加任务到末尾

        Raises:
            DuplicateIdError: task_id 已存在
        """
        with self._lock:
            current = self.snapshot.tasks
            if any(t.task_id == task.task_id for t in current):
                log.warning("task_add_duplicate", task_id=task.task_id)
                raise DuplicateIdError(task.task_id)
            self._publish((*current, task))
            log.info("task_added", task_id=task.task_id, priority=task.priority.value)

    def update_task(self, task: Task) -> None:
        """按 task_id 原位整体替换任务

        目标不存在时：默认发布内容不变的新快照；strict_updates 模式抛错。

        Raises:
            NotFoundError: strict_updates 且目标不存在
        """
        with self._lock:
            current = self.snapshot.tasks
            found = any(t.task_id == task.task_id for t in current)
            if not found:
                if self._strict_updates:
                    raise NotFoundError(task.task_id)
                log.debug("task_update_missing", task_id=task.task_id)
            self._publish(
                tuple(task if t.task_id == task.task_id else t for t in current)
            )
            if found:
                log.info("task_updated", task_id=task.task_id)

    def delete_task(self, task: Task) -> None:
        """删除与 task.task_id 相同的任务（不存在时无操作）"""
        self.delete_task_by_id(task.task_id)

    def delete_task_by_id(self, task_id: str) -> None:
        """按 task_id 删除任务（不存在时无操作，仍发布快照）"""
        with self._lock:
            current = self.snapshot.tasks
            remaining = tuple(t for t in current if t.task_id != task_id)
            self._publish(remaining)
            if len(remaining) != len(current):
                log.info("task_deleted", task_id=task_id)

    def toggle_completed(self, task_id: str) -> Task:
        """翻转 is_completed，基于 get_task + update_task 组合实现

        Raises:
            NotFoundError: 任务不存在
        """
        with self._lock:
            task = self.get_task(task_id)
            toggled = task.model_copy(update={"is_completed": not task.is_completed})
            self.update_task(toggled)
            return toggled

    # ---- 内部 ----

    def _publish(self, tasks: tuple[Task, ...]) -> None:
        snapshot = TaskSnapshot(version=self.snapshot.version + 1, tasks=tasks)
        self._hub.publish(snapshot)

    @staticmethod
    def _check_unique(tasks: tuple[Task, ...]) -> None:
        seen: set[str] = set()
        for task in tasks:
            if task.task_id in seen:
                raise DuplicateIdError(task.task_id)
            seen.add(task.task_id)
