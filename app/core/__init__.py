# -*- coding: UTF-8 -*-
"""
@File ：__init__.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/29 17:31
@DOC: 核心模块包

该模块包含应用程序的核心功能组件：
- config.py: 应用配置管理
- database.py: 数据库连接和会话管理
- logging.py: 日志系统配置
- s3_client.py: S3/MinIO 对象存储客户端
- exceptions.py: HTTP 异常和适配器异常

这些核心模块为整个应用程序提供基础服务支持。
"""

from loguru import logger

from app.core.logging import get_logger

__all__ = [
    "logger",                     # 日志记录器
    "get_logger",                 # 获取日志记录器
]
