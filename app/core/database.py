# -*- coding: UTF-8 -*-
"""
@File ：database.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/31 16:15
@DOC: 数据库连接和会话管理模块

该模块负责创建异步数据库引擎，并提供数据库会话管理功能。
默认连接 PostgreSQL (asyncpg)，DATABASE_URL 也可以指向 sqlite+aiosqlite。
"""
from typing import AsyncGenerator, Optional

from loguru import logger
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession, AsyncEngine

from app.core.config import settings
from app.models.models import Base

# --- 1. 全局变量定义 ---
# 由 FastAPI 的生命周期事件来填充和管理。
engine: Optional[AsyncEngine] = None
SessionLocal: Optional[async_sessionmaker[AsyncSession]] = None


def _engine_kwargs(url: str) -> dict:
    # sqlite 不支持连接池参数
    if url.startswith("sqlite"):
        return {"echo": False}
    return {
        "pool_size": 20,
        "max_overflow": 10,
        "pool_timeout": 30,
        "pool_recycle": 3600,
        "echo": False,
    }


# --- 2. FastAPI 生命周期管理函数 ---
def initialize_database_for_fastapi():
    """
    在 FastAPI 应用启动时，创建全局的数据库引擎和会话工厂。
    """
    global engine, SessionLocal
    url = settings.database_url
    engine = create_async_engine(url, **_engine_kwargs(url))

    # expire_on_commit=False: 事务提交后对象不过期，可以在会话外继续使用
    SessionLocal = async_sessionmaker(
        class_=AsyncSession,
        expire_on_commit=False,
        bind=engine,
    )
    logger.info("数据库引擎和会话工厂已为 FastAPI 创建。")


async def close_database_for_fastapi():
    """
    在 FastAPI 应用关闭时，关闭全局的数据库引擎。
    """
    global engine
    if engine:
        await engine.dispose()
        logger.info("FastAPI 的数据库引擎连接池已关闭。")


# --- 3. FastAPI 依赖注入函数 ---
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 依赖项，为每个请求提供数据库会话。
    """
    if SessionLocal is None:
        raise RuntimeError("数据库未初始化。请检查 FastAPI 的 lifespan 配置。")

    async with SessionLocal() as session:
        yield session


# --- 4. 数据库表创建工具 ---
# 正常通过 Alembic 管理；DB_AUTO_CREATE=True 时在启动阶段调用
async def create_db_and_tables():
    """
    根据模型定义创建所有不存在的表，不会删除已存在的表或数据。
    """
    if not engine:
        raise RuntimeError("无法创建表，因为数据库引擎未初始化。")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("数据表检查/创建完成")
