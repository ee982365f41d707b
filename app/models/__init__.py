# -*- coding: UTF-8 -*-
"""
@File ：__init__.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/31 16:25
@DOC: 数据模型包

所有模型都继承自Base基类和DateTimeMixin，提供统一的
创建时间和更新时间字段。
"""

from app.models.models import (
    Base,                    # SQLAlchemy声明基类
    DateTimeMixin,          # 日期时间混入类
    Document,               # 文档模型
)

__all__ = [
    "Base",                 # SQLAlchemy声明基类
    "DateTimeMixin",       # 日期时间混入类
    "Document",            # 文档模型
]
