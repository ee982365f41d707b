# -*- coding: UTF-8 -*-
"""
@File ：__init__.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/29 17:31
@DOC: 文档管理模块

该模块负责处理文档上传、存储、解析和 LLM 分析：
- 文档上传和校验（大小、MIME 类型）
- S3/MinIO 对象存储集成
- PDF、DOCX 文本提取
- LLM 摘要、分类和元数据提取
"""

__all__ = [
    "DocumentService",           # 文档服务类，编排上传/分析/查询流程
    "DocumentRepository",        # 文档数据仓库类，提供数据库操作方法
]

from app.documents.repository import DocumentRepository
from app.documents.service import DocumentService
