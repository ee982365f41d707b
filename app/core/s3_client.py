# -*- coding: UTF-8 -*-
"""
@File ：s3_client.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/31 16:59
@DOC: S3/MinIO 客户端模块

该模块负责创建 boto3 S3 客户端，并在应用启动时确保存储桶存在。
任何兼容 S3 API 的对象存储（MinIO、AWS S3 等）都可以使用。
"""

from functools import lru_cache

import boto3
from botocore.client import Config
from botocore.exceptions import ClientError
from loguru import logger

from app.core.config import settings
from app.core.exceptions import ForbiddenException


@lru_cache(maxsize=1)
def get_s3_client():
    """
    创建全局 S3 客户端实例

    MinIO 需要 path-style 地址，签名版本使用 s3v4。
    """
    return boto3.client(
        "s3",
        endpoint_url=settings.S3_ENDPOINT or None,
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
        config=Config(signature_version="s3v4", s3={"addressing_style": "path"}),
        region_name=settings.AWS_REGION,
    )


def ensure_bucket_exists(bucket_name: str, s3_client=None):
    """
    确保指定的存储桶存在

    检查存储桶是否存在，如果不存在则创建该存储桶。
    通常在应用启动时调用。

    Args:
        bucket_name (str): 存储桶名称
        s3_client: 可选的 boto3 客户端，默认使用全局客户端
    """
    client = s3_client or get_s3_client()
    try:
        client.head_bucket(Bucket=bucket_name)
        logger.info(f"Bucket {bucket_name} exists")
    except ClientError as e:
        err_code = e.response.get("Error", {}).get("Code", "UnknownError")
        match err_code:
            case "404" | "NoSuchBucket":
                logger.info(f"Bucket {bucket_name} does not exist, creating it")
                try:
                    client.create_bucket(Bucket=bucket_name)
                    logger.success(f"Bucket {bucket_name} created")
                except ClientError as create_error:
                    logger.error(f"Failed to create bucket '{bucket_name}': {str(create_error)}")
                    raise
            case "403":
                logger.error(f"Permission denied for bucket {bucket_name}")
                raise ForbiddenException("Permission denied to access storage bucket")
            case _:
                logger.error(f"Unexpected error checking bucket '{bucket_name}': {str(e)}")
                raise
