"""TodoConfig -- 运行配置加载

从环境变量加载配置，非法取值记录警告并回退到默认值，不阻塞启动。
"""

import os
from typing import Literal

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class TodoConfig(BaseModel):
    """todolist 配置 -- 从环境变量加载

    环境变量:
        TODOLIST_LOG_FORMAT: 日志渲染模式（dev/json）
        TODOLIST_LOG_LEVEL: 日志级别（默认 INFO）
        TODOLIST_STRICT_UPDATES: 更新不存在的任务时是否抛出 NotFoundError
        TODOLIST_SEED_DEMO: 首次打开列表时是否写入示例任务
    """

    log_format: Literal["dev", "json"] = Field(
        default="dev",
        description="日志渲染模式：dev / json",
    )
    log_level: str = Field(default="INFO", description="日志级别")
    strict_updates: bool = Field(
        default=False,
        description="update_task 目标不存在时抛错（默认静默发布未变快照）",
    )
    seed_demo: bool = Field(default=True, description="首次打开列表时写入示例任务")


def _parse_bool(env_var: str, raw: str, fallback: bool) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    log.warning("invalid_bool_config", env_var=env_var, value=raw, fallback=fallback)
    return fallback


def load_config() -> TodoConfig:
    """从环境变量加载配置

    Returns:
        TodoConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("TODOLIST_LOG_FORMAT"):
        if val in ("dev", "json"):
            kwargs["log_format"] = val
        else:
            log.warning(
                "invalid_log_format_config",
                env_var="TODOLIST_LOG_FORMAT",
                value=val,
                fallback="dev",
            )

    if val := os.environ.get("TODOLIST_LOG_LEVEL"):
        kwargs["log_level"] = val.upper()

    if val := os.environ.get("TODOLIST_STRICT_UPDATES"):
        kwargs["strict_updates"] = _parse_bool("TODOLIST_STRICT_UPDATES", val, False)

    if val := os.environ.get("TODOLIST_SEED_DEMO"):
        kwargs["seed_demo"] = _parse_bool("TODOLIST_SEED_DEMO", val, True)

    return TodoConfig(**kwargs)
