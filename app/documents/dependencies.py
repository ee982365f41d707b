# -*- coding: UTF-8 -*-
"""
@File ：dependencies.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/11/4 18:07
@DOC: 文档服务的依赖注入函数，测试时通过 app.dependency_overrides 替换
"""
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.documents.llm_analyzer import OpenRouterAnalyzer
from app.documents.ports import AnalyzerPort, StoragePort, TextExtractorPort
from app.documents.repository import DocumentRepository
from app.documents.service import DocumentService
from app.documents.storage import S3StorageService
from app.documents.text_extraction import UnstructuredTextExtractor


@lru_cache(maxsize=1)
def get_storage() -> StoragePort:
    return S3StorageService()


@lru_cache(maxsize=1)
def get_text_extractor() -> TextExtractorPort:
    return UnstructuredTextExtractor()


@lru_cache(maxsize=1)
def get_analyzer() -> AnalyzerPort:
    return OpenRouterAnalyzer()


def get_document_service(
        session: AsyncSession = Depends(get_db),
        storage: StoragePort = Depends(get_storage),
        text_extractor: TextExtractorPort = Depends(get_text_extractor),
        analyzer: AnalyzerPort = Depends(get_analyzer),
) -> DocumentService:
    """
    为每个请求创建 DocumentService 实例
    :param session: 异步数据库会话对象
    :return: 配置好的文档服务实例
    """
    repository = DocumentRepository(session)
    return DocumentService(repository, storage, text_extractor, analyzer)
