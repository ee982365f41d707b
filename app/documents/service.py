# -*- coding: UTF-8 -*-
"""
@File ：service.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/31 19:11
@DOC: 文档服务层模块

该模块编排文档处理流程：
- 上传：校验 → 对象存储 → 文本提取 → 写入数据库
- 分析：读取文档 → 调用 LLM → 一次性写回 summary/docType/metadata
- 查询：读取文档并把 metadata JSON 文本还原为映射
- 下载：从对象存储读取原始文件

适配器抛出的具体异常在这里统一包装成 "Upload failed" / "Analysis failed"。
"""

import json

from loguru import logger

from app.core.config import settings
from app.core.exceptions import BadRequestException, NotFoundException
from app.documents.ports import (
    AnalyzerPort,
    DocumentRepositoryPort,
    StoragePort,
    TextExtractorPort,
)
from app.documents.text_extraction import SUPPORTED_MIME_TYPES
from app.models.models import Document
from app.schemas.schemas import (
    AnalyzeDocumentResponse,
    DocumentAnalysisUpdate,
    DocumentCreate,
    DocumentDetailResponse,
    FileInfo,
    IncomingFile,
    UploadDocumentResponse,
)

FILE_TOO_LARGE_MESSAGE = "File size must not exceed {limit}MB"
UNSUPPORTED_TYPE_MESSAGE = "Only PDF and DOCX files are supported"
NO_TEXT_MESSAGE = "No extracted text available for analysis"
NOT_FOUND_MESSAGE = "Document not found"


# 文档服务类：提供文档管理的业务逻辑
class DocumentService:
    def __init__(
            self,
            repository: DocumentRepositoryPort,
            storage: StoragePort,
            text_extractor: TextExtractorPort,
            analyzer: AnalyzerPort,
            max_file_size: int | None = None,
    ):
        """Service layer for document operations."""
        self.repository = repository
        self.storage = storage
        self.text_extractor = text_extractor
        self.analyzer = analyzer
        self.max_file_size = max_file_size or settings.MAX_FILE_SIZE

    def validate_file(self, file: IncomingFile) -> None:
        """按顺序校验，第一个失败即返回"""
        if file.size > self.max_file_size:
            logger.warning(f"文件过大: {file.filename} ({file.size} bytes)")
            raise BadRequestException(
                FILE_TOO_LARGE_MESSAGE.format(limit=self.max_file_size // (1024 * 1024))
            )
        if file.content_type not in SUPPORTED_MIME_TYPES:
            logger.warning(f"不支持的文件类型: {file.filename} ({file.content_type})")
            raise BadRequestException(UNSUPPORTED_TYPE_MESSAGE)

    async def _find_document(self, document_id: str) -> Document:
        document = await self.repository.get_by_id(document_id)
        if not document:
            logger.warning(f"文档 {document_id} 不存在")
            raise NotFoundException(NOT_FOUND_MESSAGE)
        return document

    # 异步方法：上传文档
    async def upload_document(self, file: IncomingFile) -> UploadDocumentResponse:
        self.validate_file(file)

        # ===== 1. 上传原始文件到对象存储 =====
        try:
            stored = await self.storage.upload_file(file)
        except Exception as e:
            logger.error(f"上传文件 {file.filename} 到对象存储失败: {e}")
            raise BadRequestException(f"Upload failed: {e}") from e

        # ===== 2. 提取文本并写入数据库 =====
        try:
            text = await self.text_extractor.extract_text(file.content, file.content_type)
            document = await self.repository.create(
                DocumentCreate(
                    original_name=file.filename,
                    mime_type=file.content_type,
                    size=file.size,
                    s3_key=stored.key,
                    extracted_text=text,
                )
            )
        except Exception as e:
            logger.error(f"处理文件 {file.filename} 失败: {e}")
            await self._cleanup_orphan(stored.key)
            raise BadRequestException(f"Upload failed: {e}") from e

        logger.info(f"文档 {document.id} 上传完成 ({file.filename})")
        return UploadDocumentResponse.model_validate(document)

    async def _cleanup_orphan(self, key: str) -> None:
        # 数据库里没有对应记录，删除已上传的对象
        try:
            await self.storage.delete_file(key)
            logger.info(f"Cleaned up orphaned file {key}")
        except Exception as cleanup_error:
            logger.error(f"Failed to clean up {key}: {cleanup_error}")

    # 异步方法：分析文档
    async def analyze_document(self, document_id: str) -> AnalyzeDocumentResponse:
        document = await self._find_document(document_id)
        if not document.extracted_text:
            logger.warning(f"文档 {document_id} 没有可分析的文本")
            raise BadRequestException(NO_TEXT_MESSAGE)

        try:
            result = await self.analyzer.analyze_document(document.extracted_text)
            updated = await self.repository.update(
                document_id,
                DocumentAnalysisUpdate(
                    summary=result.summary,
                    doc_type=result.doc_type,
                    metadata_text=json.dumps(result.attributes, ensure_ascii=False),
                ),
            )
        except Exception as e:
            logger.error(f"分析文档 {document_id} 失败: {e}")
            raise BadRequestException(f"Analysis failed: {e}") from e

        if updated is None:
            # 分析期间记录被删除
            logger.warning(f"文档 {document_id} 在分析期间已不存在")
            raise NotFoundException(NOT_FOUND_MESSAGE)

        logger.info(f"文档 {document_id} 分析完成，类型: {result.doc_type}")
        return AnalyzeDocumentResponse(
            id=document_id,
            summary=result.summary,
            doc_type=result.doc_type,
            attributes=result.attributes,
        )

    # 异步方法：获取单个文档详情
    async def get_document(self, document_id: str) -> DocumentDetailResponse:
        document = await self._find_document(document_id)
        # 还未分析时 metadata 为 None，这是正常状态而不是错误
        metadata = json.loads(document.metadata_text) if document.metadata_text else None
        return DocumentDetailResponse(
            file_info=FileInfo.model_validate(document),
            text=document.extracted_text,
            summary=document.summary,
            doc_type=document.doc_type,
            metadata=metadata,
        )

    # 异步方法：下载原始文件
    async def download_document(self, document_id: str) -> tuple[Document, bytes]:
        document = await self._find_document(document_id)
        content = await self.storage.get_file(document.s3_key)
        logger.info(f"读取文档 {document_id} 原始文件 ({len(content)} bytes)")
        return document, content
