# -*- coding: UTF-8 -*-
"""
@File ：__init__.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/31 17:00
@DOC: 工具模块包

- migrations.py: 数据库迁移管理工具
"""

from app.utils.migrations import (
    run_migrations,           # 执行数据库迁移
)

__all__ = [
    "run_migrations",          # 执行数据库迁移
]
