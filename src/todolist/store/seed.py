"""示例任务集 -- initialize() 写入的固定演示数据"""

from ..models import Priority, Task


def demo_tasks() -> list[Task]:
    """构造三条示例任务（每次调用生成新的 task_id）"""
    return [
        Task(
            title="Learn Jetpack Compose",
            description="Build modern apps",
            priority=Priority.HIGH,
        ),
        Task(
            title="Buy groceries",
            description="Fruit and vegetables",
            priority=Priority.MEDIUM,
        ),
        Task(title="Exercise", priority=Priority.LOW),
    ]
