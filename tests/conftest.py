"""全局 pytest 配置 -- 任务仓库与示例任务 fixture"""

import pytest
import structlog
from todolist.models import Priority, Task
from todolist.store import InMemoryTaskStore


@pytest.fixture(autouse=True)
def structlog_to_stdlib():
    """日志走标准库 logging，避免写入 stdout 干扰 capsys"""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


class Recorder:
    """记录订阅者收到的所有值"""

    def __init__(self) -> None:
        self.values: list = []

    def __call__(self, value) -> None:
        self.values.append(value)

    @property
    def last(self):
        return self.values[-1]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def store() -> InMemoryTaskStore:
    """空仓库"""
    return InMemoryTaskStore()


@pytest.fixture
def sample_tasks() -> list[Task]:
    """A / B / C 三条任务"""
    return [
        Task(task_id="task-a", title="Learn X", priority=Priority.HIGH),
        Task(task_id="task-b", title="Buy milk", description="2% milk"),
        Task(task_id="task-c", title="Exercise", priority=Priority.LOW),
    ]


@pytest.fixture
def filled_store(store: InMemoryTaskStore, sample_tasks: list[Task]) -> InMemoryTaskStore:
    """依次 add_task 写入 A / B / C 的仓库"""
    for task in sample_tasks:
        store.add_task(task)
    return store
