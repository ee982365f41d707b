# -*- coding: UTF-8 -*-
"""
@File ：config.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/29 17:36
@DOC: 应用配置，全部可由环境变量或 .env 文件覆盖
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    APP_NAME: str = "Document Analyzer"
    DEBUG: bool = False
    PORT: int = 3000

    # 数据库配置：优先使用 DATABASE_URL，否则由 POSTGRES_* 拼接
    DATABASE_URL: str | None = None
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: str = "documents"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    # 为 True 时启动阶段直接 create_all，跳过 alembic
    DB_AUTO_CREATE: bool = False

    # S3/MinIO 配置
    S3_ENDPOINT: str = "http://localhost:9000"
    AWS_REGION: str = "us-east-1"
    AWS_ACCESS_KEY_ID: str = "minioadmin"
    AWS_SECRET_ACCESS_KEY: str = "minioadmin"
    S3_BUCKET_NAME: str = "documents"

    # LLM (OpenRouter, OpenAI 兼容接口)
    OPENROUTER_API_KEY: str = ""
    OPENROUTER_MODEL: str = "gpt-3.5-turbo"
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"
    OPENROUTER_REFERER: str = "http://localhost:3000"
    OPENROUTER_TITLE: str = "Document Analyzer"
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_TOKENS: int = 2000
    LLM_MAX_INPUT_CHARS: int = 8000  # 只把文本前 8000 个字符发给模型
    LLM_TIMEOUT: float = 600.0

    # 上传限制
    MAX_FILE_SIZE: int = 5 * 1024 * 1024  # 5MB

    # 日志
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )


@lru_cache()
def get_settings():
    return BaseConfig()

settings = get_settings()
