# -*- coding: UTF-8 -*-
"""
@File ：__init__.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/31 02:10
@DOC: Document Analyzer 应用程序包

基于FastAPI的文档分析服务：上传 PDF/DOCX，保存到对象存储，
提取纯文本，再调用 LLM 生成摘要、文档类型和元数据。

核心功能模块：
- core: 核心功能（配置、数据库、日志、对象存储、异常）
- models: SQLAlchemy数据模型
- schemas: Pydantic 请求/响应模式
- documents: 文档上传、解析、分析和查询
- utils: 数据库迁移

技术栈：
- FastAPI: Web框架
- PostgreSQL + SQLAlchemy(async): 主数据库
- Alembic: 数据库迁移
- MinIO/S3 (boto3): 对象存储
- unstructured: PDF/DOCX 文本提取
- httpx: 调用 OpenRouter 等 OpenAI 兼容接口
"""

__version__ = "0.1.0"
__author__ = "zhanzhicai"
__description__ = "Document Analyzer - 文档上传与 LLM 分析服务"

__all__ = [
    "__version__",           # 版本号
    "__author__",            # 作者
    "__description__",       # 应用描述
]
