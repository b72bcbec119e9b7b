"""Domain Models 单元测试

测试内容：
1. 枚举序列化/反序列化
2. Task 默认值与不可变性
3. TaskSnapshot 查找
"""

from datetime import UTC

import pytest
from pydantic import ValidationError as PydanticValidationError
from todolist.models import Priority, Task, TaskSnapshot, new_task_id, utc_now
from ulid import ULID


class TestEnums:
    """枚举测试"""

    def test_priority_values(self):
        """Priority 枚举值正确"""
        assert Priority.LOW == "LOW"
        assert Priority.MEDIUM == "MEDIUM"
        assert Priority.HIGH == "HIGH"

    def test_priority_from_string(self):
        assert Priority("HIGH") is Priority.HIGH


class TestTask:
    """Task 模型测试"""

    def test_defaults(self):
        """默认 MEDIUM、未完成、无描述、自动生成 ID"""
        task = Task(title="Write report")
        assert task.priority == Priority.MEDIUM
        assert task.is_completed is False
        assert task.description is None
        assert task.created_at.tzinfo == UTC
        assert str(ULID.from_str(task.task_id)) == task.task_id

    def test_ids_are_unique(self):
        ids = {Task(title="t").task_id for _ in range(200)}
        assert len(ids) == 200

    def test_new_task_id_is_ulid(self):
        assert len(new_task_id()) == 26

    def test_empty_description_distinct_from_none(self):
        task = Task(task_id="x", title="t", description="")
        assert task.description == ""
        assert task != task.model_copy(update={"description": None})

    def test_frozen(self):
        """Task 不可就地修改"""
        task = Task(title="t")
        with pytest.raises(PydanticValidationError):
            task.title = "changed"

    def test_empty_title_rejected(self):
        with pytest.raises(PydanticValidationError):
            Task(title="")

    def test_empty_id_rejected(self):
        with pytest.raises(PydanticValidationError):
            Task(task_id="", title="t")

    def test_model_copy_replaces_fields(self):
        task = Task(title="t")
        done = task.model_copy(update={"is_completed": True})
        assert done.is_completed is True
        assert done.task_id == task.task_id
        assert task.is_completed is False

    def test_created_at_non_decreasing(self):
        """连续创建的任务 created_at 单调不减"""
        stamps = [Task(title="t").created_at for _ in range(50)]
        assert stamps == sorted(stamps)

    def test_utc_now_non_decreasing(self):
        first = utc_now()
        second = utc_now()
        assert second >= first


class TestTaskSnapshot:
    """TaskSnapshot 测试"""

    def test_empty_snapshot(self):
        snapshot = TaskSnapshot()
        assert snapshot.version == 0
        assert len(snapshot) == 0

    def test_find(self):
        a = Task(task_id="a", title="A")
        b = Task(task_id="b", title="B")
        snapshot = TaskSnapshot(version=1, tasks=(a, b))
        assert snapshot.find("b") == b
        assert snapshot.find("zzz") is None

    def test_find_blank_id(self):
        snapshot = TaskSnapshot(tasks=(Task(task_id="a", title="A"),))
        assert snapshot.find("") is None
        assert snapshot.find(None) is None
