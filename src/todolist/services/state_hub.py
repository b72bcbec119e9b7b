"""StateHub -- 内存中的同步状态广播器

持有一个当前值和有序的订阅者列表，最外层 publish 返回前所有订阅者都已
按发布顺序收到每一个新值。
"""

from collections import deque
from collections.abc import Callable
from typing import Generic, TypeVar

import structlog

log = structlog.get_logger()

T = TypeVar("T")


class StateHub(Generic[T]):
    """同步发布/订阅：每个订阅者按发布顺序收到每一个值"""

    def __init__(self, initial: T, name: str = "state") -> None:
        self._value = initial
        self._name = name
        self._subscribers: list[Callable[[T], None]] = []
        self._pending: deque[T] = deque()
        self._delivering = False

    @property
    def value(self) -> T:
        """当前值"""
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(
        self, callback: Callable[[T], None], replay: bool = True
    ) -> Callable[[], None]:
        """注册订阅者

        Args:
            callback: 接收新值的回调
            replay: 为 True 时立即以当前值回调一次

        Returns:
            取消订阅的函数（重复调用无副作用）
        """
        self._subscribers.append(callback)
        if replay:
            self._deliver(callback, self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, value: T) -> None:
        """替换当前值并通知所有订阅者

        投递过程中（订阅者回调里）再次 publish 的值进入队列，
        当前值投递完所有订阅者后再按 FIFO 顺序投递。
        """
        self._value = value
        self._pending.append(value)
        if self._delivering:
            return
        self._delivering = True
        try:
            while self._pending:
                current = self._pending.popleft()
                # 复制列表：回调中取消订阅不影响本轮投递
                for callback in list(self._subscribers):
                    self._deliver(callback, current)
        finally:
            self._delivering = False
            self._pending.clear()

    def _deliver(self, callback: Callable[[T], None], value: T) -> None:
        try:
            callback(value)
        except Exception:
            # 单个订阅者失败不影响其他订阅者
            log.exception("subscriber_failed", hub=self._name)
