# -*- coding: UTF-8 -*-
"""
@File ：schemas.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/31 18:14
@DOC: Pydantic数据模式定义模块

该模块定义了应用程序中使用的所有Pydantic数据模式，用于：
- API请求和响应的数据验证
- 数据序列化（对外 JSON 字段统一为 camelCase）
- 服务层与仓库层之间传递的数据结构
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# 任意 JSON 值的键值映射，模型输出的结构不保证固定
JsonMapping = dict[str, Any]


# ===================================================================
# 配置基类：启用 ORM 模式，对外输出 camelCase 字段名
# ===================================================================
class BaseSchema(BaseModel):
    # from_attributes=True 允许从SQLAlchemy模型直接创建Pydantic模型
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ===================================================================
# 上传文件描述：路由层从 UploadFile 读取后交给服务层
# ===================================================================
class IncomingFile(BaseModel):
    filename: str = Field(..., description="用户上传时的原始文件名")
    content_type: str = Field(..., description="声明的 MIME 类型")
    size: int = Field(..., ge=0, description="文件大小（字节）")
    content: bytes = Field(..., repr=False, description="文件内容")


class StoredObject(BaseModel):
    key: str
    url: str


# ===================================================================
# 文档写入模型
# ===================================================================
class DocumentCreate(BaseSchema):
    original_name: str = Field(..., description="原始文件名，例如 'report.pdf'")
    mime_type: str = Field(..., max_length=100, description="文件的MIME类型")
    size: int = Field(..., ge=0, description="文件大小，以字节为单位")
    s3_key: str = Field(..., description="对象存储中的 Key")
    extracted_text: str | None = Field(None, description="提取的纯文本")


class DocumentAnalysisUpdate(BaseSchema):
    """分析结果写回数据库，metadata_text 是序列化后的 JSON 文本"""
    summary: str
    doc_type: str
    metadata_text: str


# ===================================================================
# LLM 分析结果
# ===================================================================
class AnalysisResult(BaseSchema):
    summary: str
    doc_type: str
    attributes: JsonMapping = Field(default_factory=dict)


# ===================================================================
# 响应模型
# ===================================================================
class UploadDocumentResponse(BaseSchema):
    id: str
    original_name: str
    mime_type: str
    size: int
    created_at: datetime


class AnalyzeDocumentResponse(BaseSchema):
    id: str
    summary: str
    doc_type: str
    attributes: JsonMapping


class FileInfo(BaseSchema):
    id: str
    original_name: str
    mime_type: str
    size: int
    s3_key: str
    created_at: datetime
    updated_at: datetime


class DocumentDetailResponse(BaseSchema):
    file_info: FileInfo
    text: str | None = None
    summary: str | None = None
    doc_type: str | None = None
    metadata: JsonMapping | None = None
