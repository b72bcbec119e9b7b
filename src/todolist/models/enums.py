"""枚举定义"""

from enum import StrEnum


class Priority(StrEnum):
    """任务优先级"""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
