# -*- coding: UTF-8 -*-
"""
@File ：exceptions.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/31 17:54
@DOC: 异常定义

HTTP 异常直接继承 HTTPException，由 FastAPI 渲染为 {"detail": ...}；
适配器层异常是普通异常，由服务层统一包装成 400。
"""

from fastapi import HTTPException,status


class NotFoundException(HTTPException):
    """
    404 未找到异常
    """
    def __init__(self, detail: str = "Document not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

class BadRequestException(HTTPException):
    """
    400 请求错误（校验失败、上传失败、分析失败）
    """
    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

class ForbiddenException(HTTPException):
    """
    403 禁止异常
    """
    def __init__(self, detail: str = "禁止访问"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


# --- 适配器层异常 ---

class UnsupportedFileTypeError(ValueError):
    """文本提取器收到不支持的 MIME 类型"""
    def __init__(self, message: str = "Only PDF and DOCX files are supported"):
        super().__init__(message)

class TextExtractionError(ValueError):
    """PDF/DOCX 解析失败"""

class LLMAnalysisError(RuntimeError):
    """调用 LLM 接口失败"""

class LLMResponseParseError(LLMAnalysisError):
    """LLM 返回内容中找不到可解析的 JSON"""
