# -*- coding: UTF-8 -*-
"""
@File ：models/models.py # 数据模型定义
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/31 16:25
@DOC: SQLAlchemy数据模型定义

- Base: SQLAlchemy声明基类
- DateTimeMixin: 日期时间混入类，提供统一的时间戳字段
- Document: 上传文档模型，保存文件信息、提取文本和 LLM 分析结果
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    Integer,
    String,
    DateTime,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


# --- 基础类和混入 (Mixin) ---
class Base(DeclarativeBase):
    pass

# --- 日期时间混入类 ---
class DateTimeMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


def _new_document_id() -> str:
    return str(uuid.uuid4())


# --- 文档模型 ---
class Document(Base, DateTimeMixin):
    __tablename__ = "documents"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=_new_document_id
    )
    original_name: Mapped[str] = mapped_column(Text, nullable=False)
    mime_type: Mapped[str] = mapped_column(String(100), nullable=False)
    size: Mapped[int] = mapped_column(Integer, nullable=False)
    # 对象存储中的 Key，与文档 id 无关
    s3_key: Mapped[str] = mapped_column(
        Text, nullable=False, unique=True, index=True
    )
    extracted_text: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # 以下三个字段由分析接口一次性写入
    summary: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    doc_type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # Base 上的 metadata 属性被 SQLAlchemy 占用，列名仍为 metadata；内容是 JSON 文本
    metadata_text: Mapped[Optional[str]] = mapped_column("metadata", Text, nullable=True)
