# -*- coding: UTF-8 -*-
"""
@File ：storage.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/11/2 10:40
@DOC: S3 对象存储适配器

boto3 是同步 SDK，所有调用都放到线程池里执行，避免阻塞事件循环。
底层客户端的异常原样抛出，由服务层决定如何包装。
"""
import asyncio
import uuid

from loguru import logger

from app.core.config import settings
from app.core.s3_client import get_s3_client
from app.documents.ports import StoragePort
from app.schemas.schemas import IncomingFile, StoredObject


class S3StorageService(StoragePort):
    def __init__(self, s3_client=None, bucket_name: str | None = None, endpoint: str | None = None):
        self.s3_client = s3_client or get_s3_client()
        self.bucket_name = bucket_name or settings.S3_BUCKET_NAME
        self.endpoint = (endpoint if endpoint is not None else settings.S3_ENDPOINT).rstrip("/")

    @staticmethod
    def generate_key(original_filename: str) -> str:
        """随机 UUID + 原始文件名，既不冲突又保留可读后缀"""
        return f"{uuid.uuid4()}-{original_filename}"

    async def upload_file(self, file: IncomingFile) -> StoredObject:
        key = self.generate_key(file.filename)
        logger.info(f"上传文件到存储桶 {self.bucket_name}: {key} ({file.size} bytes)")
        await asyncio.to_thread(
            self.s3_client.put_object,
            Bucket=self.bucket_name,
            Key=key,
            Body=file.content,
            ContentType=file.content_type,
        )
        url = f"{self.endpoint}/{self.bucket_name}/{key}"
        logger.success(f"文件上传成功: {key}")
        return StoredObject(key=key, url=url)

    async def get_file(self, key: str) -> bytes:
        logger.info(f"从存储桶 {self.bucket_name} 读取文件: {key}")
        response = await asyncio.to_thread(
            self.s3_client.get_object, Bucket=self.bucket_name, Key=key
        )
        body = response["Body"]
        try:
            # 流式响应按块读取后拼接
            chunks = await asyncio.to_thread(lambda: list(body.iter_chunks()))
        finally:
            body.close()
        return b"".join(chunks)

    async def delete_file(self, key: str) -> None:
        logger.info(f"从存储桶 {self.bucket_name} 删除文件: {key}")
        await asyncio.to_thread(
            self.s3_client.delete_object, Bucket=self.bucket_name, Key=key
        )
