# -*- coding: UTF-8 -*-
"""
@File ：ports.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/11/2 10:12
@DOC: 文档服务依赖的能力接口

服务层只依赖这些接口，存储、数据库、文本提取和 LLM 都可以替换为内存实现。
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.models.models import Document
    from app.schemas.schemas import (
        AnalysisResult,
        DocumentAnalysisUpdate,
        DocumentCreate,
        IncomingFile,
        StoredObject,
    )


class StoragePort(ABC):
    """对象存储：上传、读取、删除"""

    @abstractmethod
    async def upload_file(self, file: "IncomingFile") -> "StoredObject":
        pass

    @abstractmethod
    async def get_file(self, key: str) -> bytes:
        pass

    @abstractmethod
    async def delete_file(self, key: str) -> None:
        pass


class TextExtractorPort(ABC):
    """按 MIME 类型把文件内容转成纯文本"""

    @abstractmethod
    async def extract_text(self, content: bytes, mime_type: str) -> str:
        pass


class AnalyzerPort(ABC):
    """LLM 文档分析"""

    @abstractmethod
    async def analyze_document(self, text: str) -> "AnalysisResult":
        pass


class DocumentRepositoryPort(ABC):
    """文档表的数据访问"""

    @abstractmethod
    async def create(self, data: "DocumentCreate") -> "Document":
        pass

    @abstractmethod
    async def get_by_id(self, document_id: str) -> "Document | None":
        pass

    @abstractmethod
    async def update(self, document_id: str, data: "DocumentAnalysisUpdate") -> "Document | None":
        pass
