# -*- coding: UTF-8 -*-
"""
@File ：repository.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/31 19:11
@DOC: 文档数据访问层模块

该模块提供文档表的数据库操作：创建、按 ID 查询、更新。
查不到记录时返回 None，是否算错误由服务层决定。
"""

# 导入SQLAlchemy相关组件
from loguru import logger
from sqlalchemy import select  # SQL查询语句
from sqlalchemy.ext.asyncio import AsyncSession  # 异步数据库会话

# 导入数据模型
from app.models.models import Document  # 文档数据模型

# 导入数据模式
from app.schemas.schemas import DocumentCreate, DocumentAnalysisUpdate  # 文档数据模式
from app.documents.ports import DocumentRepositoryPort


# 文档数据仓库类：提供数据库操作接口
class DocumentRepository(DocumentRepositoryPort):
    # 初始化方法：注入数据库会话依赖
    def __init__(self, session: AsyncSession):  # 参数：异步数据库会话
        self.session = session  # 存储数据库会话实例，用于执行数据库操作

    # 异步方法：创建新的文档记录
    async def create(self, data: DocumentCreate) -> Document:  # 参数：创建数据，返回值：文档对象
        """
        创建一个新的文档记录
        :param data: 文档创建数据
        :return: 创建的文档记录（已刷新，包含 id 和时间戳）
        """
        new_document = Document(  # 实例化文档模型
            original_name=data.original_name,  # 原始文件名
            mime_type=data.mime_type,  # MIME类型
            size=data.size,  # 文件大小
            s3_key=data.s3_key,  # 对象存储 Key
            extracted_text=data.extracted_text,  # 提取的文本
        )
        self.session.add(new_document)  # 添加到数据库会话
        try:
            await self.session.commit()  # 提交数据库事务
            await self.session.refresh(new_document)  # 刷新对象，获取ID和时间戳
        except Exception:
            await self.session.rollback()  # 回滚数据库事务
            logger.error(f"创建文档记录失败，s3_key: '{data.s3_key}'")
            raise
        logger.success(f"成功创建文档记录 ID: {new_document.id}")
        return new_document

    async def get_by_id(self, document_id: str) -> Document | None:
        """
        根据文档ID查询文档记录，不存在时返回 None
        """
        query = select(Document).where(Document.id == document_id)
        return await self.session.scalar(query)

    # 异步方法：更新文档记录
    async def update(
            self, document_id: str, data: DocumentAnalysisUpdate) -> Document | None:  # 参数：文档ID，更新数据

        # 查询指定ID的文档，不存在时返回 None，由服务层决定如何处理
        document = await self.get_by_id(document_id)
        if not document:
            logger.warning(f"更新失败，文档 {document_id} 不存在")
            return None
        # 只包含有值的字段，确保不修改 id
        update_data = data.model_dump(exclude_unset=True)
        update_data.pop("id", None)
        if not update_data:  # 没有可更新的字段
            raise ValueError("No fields to update")
        for key, value in update_data.items():  # 遍历键值对
            setattr(document, key, value)  # 设置对象属性
        try:
            await self.session.commit()  # 提交数据库事务
            await self.session.refresh(document)  # 刷新对象以获取最新的 updated_at
        except Exception:
            await self.session.rollback()
            logger.error(f"更新文档记录失败 ID: {document_id}")
            raise
        logger.success(f"成功更新文档记录 ID: {document_id}")
        return document
