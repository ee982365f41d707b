# -*- coding: UTF-8 -*-
"""
@File ：text_extraction.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/11/8 05:06
@DOC: PDF/DOCX 文本提取适配器，基于 unstructured
"""
import asyncio
import io
import re

from loguru import logger

from app.core.exceptions import TextExtractionError, UnsupportedFileTypeError
from app.documents.ports import TextExtractorPort

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
SUPPORTED_MIME_TYPES = (PDF_MIME_TYPE, DOCX_MIME_TYPE)


def _normalize_whitespace(text: str) -> str:
    """
    规范化文本中的空白字符：去掉零宽空格、合并多余空行和连续空格、去掉首尾空白。
    """
    if not isinstance(text, str):
        return ""
    text = text.replace('\u200b', '')
    text = re.sub(r'\n\s*\n', '\n\n', text)
    text = re.sub(r'\n{3,}', '\n\n', text)
    text = re.sub(r' {2,}', ' ', text)
    return text.strip()


def _join_elements(elements) -> str:
    if not elements:
        return ""
    return _normalize_whitespace("\n\n".join(str(el) for el in elements))


class UnstructuredTextExtractor(TextExtractorPort):

    async def extract_text(self, content: bytes, mime_type: str) -> str:
        # 服务层已经校验过类型，这里再校验一次，防止被越过契约调用
        match mime_type:
            case "application/pdf":
                return await asyncio.to_thread(self.extract_text_from_pdf, content)
            case "application/vnd.openxmlformats-officedocument.wordprocessingml.document":
                return await asyncio.to_thread(self.extract_text_from_docx, content)
            case _:
                logger.error(f"不支持的内容类型: {mime_type}")
                raise UnsupportedFileTypeError()

    def extract_text_from_pdf(self, content: bytes) -> str:
        try:
            elements = self._partition_pdf(content)
        except Exception as e:
            logger.error(f"PDF 解析失败: {e}")
            raise TextExtractionError(f"Failed to extract text from PDF: {e}") from e
        text = _join_elements(elements)
        logger.info(f"PDF 解析完成，文本长度: {len(text)}")
        return text

    def extract_text_from_docx(self, content: bytes) -> str:
        try:
            elements = self._partition_docx(content)
        except Exception as e:
            logger.error(f"DOCX 解析失败: {e}")
            raise TextExtractionError(f"Failed to extract text from DOCX: {e}") from e
        text = _join_elements(elements)
        logger.info(f"DOCX 解析完成，文本长度: {len(text)}")
        return text

    @staticmethod
    def _partition_pdf(content: bytes):
        # unstructured 的依赖很重，用到时再导入
        from unstructured.partition.pdf import partition_pdf

        return partition_pdf(file=io.BytesIO(content), strategy="fast")

    @staticmethod
    def _partition_docx(content: bytes):
        from unstructured.partition.docx import partition_docx

        return partition_docx(file=io.BytesIO(content))
