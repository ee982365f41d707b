# -*- coding: UTF-8 -*-
"""
@File ：routes.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/11/1 01:46
@DOC: 文档路由模块

- POST /documents/upload         上传 PDF/DOCX
- POST /documents/{id}/analyze   调用 LLM 分析
- GET  /documents/{id}           获取文档详情
- GET  /documents/{id}/download  下载原始文件
"""

from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import Response

from app.core import get_logger
from app.core.exceptions import BadRequestException
from app.documents.dependencies import get_document_service
from app.documents.service import DocumentService
from app.schemas.schemas import (
    AnalyzeDocumentResponse,
    DocumentDetailResponse,
    IncomingFile,
    UploadDocumentResponse,
)

logger = get_logger(__name__)
router = APIRouter(prefix="/documents", tags=["Documents"])


# 文档上传路由端点：POST /documents/upload
@router.post(
    "/upload",
    response_model=UploadDocumentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload Document",
)
async def upload_document(
        file: Annotated[
            UploadFile | str | None, File(title="Source Document", description="PDF or DOCX file, max 5MB")
        ] = None,
        service: DocumentService = Depends(get_document_service),
):
    # 表单字段 file 不是文件（普通文本或缺失）时都按未上传处理
    if file is None or isinstance(file, str):
        raise BadRequestException("No file uploaded")

    content = await file.read()
    incoming = IncomingFile(
        filename=file.filename or "unnamed",
        content_type=file.content_type or "application/octet-stream",
        size=len(content),
        content=content,
    )
    try:
        created = await service.upload_document(incoming)
        logger.info(f"Uploaded document {created.id}")
        return created
    except Exception as e:
        logger.error(f"Failed to upload document {incoming.filename}: {str(e)}")
        raise


# 文档分析路由端点：POST /documents/{document_id}/analyze
@router.post(
    "/{document_id}/analyze",
    response_model=AnalyzeDocumentResponse,
    summary="Analyze document with LLM",
)
async def analyze_document(
        document_id: str,
        service: DocumentService = Depends(get_document_service),
):
    try:
        result = await service.analyze_document(document_id)
        logger.info(f"Analyzed document {document_id}")
        return result
    except Exception as e:
        logger.error(f"Failed to analyze document {document_id}: {str(e)}")
        raise


# 文档下载路由端点：GET /documents/{document_id}/download
@router.get(
    "/{document_id}/download",
    response_class=Response,
    summary="Download original file",
)
async def download_document(
        document_id: str,
        service: DocumentService = Depends(get_document_service),
):
    try:
        document, content = await service.download_document(document_id)
    except Exception as e:
        logger.error(f"Failed to download document {document_id}: {str(e)}")
        raise
    safe_filename = quote(document.original_name)  # URL编码文件名
    return Response(
        content=content,
        media_type=document.mime_type,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{safe_filename}"},
    )


# 文档详情获取路由端点：GET /documents/{document_id}
@router.get(
    "/{document_id}",
    response_model=DocumentDetailResponse,
    summary="Get document by id",
)
async def get_document(
        document_id: str,
        service: DocumentService = Depends(get_document_service),
) -> DocumentDetailResponse:
    try:
        document = await service.get_document(document_id)
        logger.info(f"Retrieved document {document_id}")
        return document
    except Exception as e:
        logger.error(f"Failed to get document {document_id}: {str(e)}")
        raise
