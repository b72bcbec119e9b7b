"""todolist Services -- 状态广播、搜索过滤、编辑提交"""
