# -*- coding: UTF-8 -*-
"""
@File ：main.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/29 17:31
@DOC: FastAPI 应用入口
"""
from contextlib import asynccontextmanager
import asyncio
import uvicorn
from fastapi import FastAPI, Response
from starlette.middleware.cors import CORSMiddleware
from loguru import logger

from app import __version__
from app.core.config import settings
from app.core.logging import setup_logging
from app.core import database
from app.core.s3_client import ensure_bucket_exists
from app.utils.migrations import run_migrations
from app.documents.routes import router as documents_router

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- 应用启动阶段 ---
    logger.info("应用启动，开始初始化资源...")
    # 同步的启动任务放到线程里并行执行，避免阻塞事件循环
    startup_tasks = [
        asyncio.to_thread(database.initialize_database_for_fastapi),
        asyncio.to_thread(ensure_bucket_exists, bucket_name=settings.S3_BUCKET_NAME),
    ]
    if not settings.DB_AUTO_CREATE:
        startup_tasks.append(asyncio.to_thread(run_migrations))
    await asyncio.gather(*startup_tasks)

    if settings.DB_AUTO_CREATE:
        await database.create_db_and_tables()

    logger.success("所有资源加载完毕，应用准备就绪。")
    yield
    # --- 应用关闭阶段 ---
    logger.info("应用关闭，开始释放资源...")
    await database.close_database_for_fastapi()
    logger.info("所有资源已释放，应用关闭。")


app = FastAPI(title=settings.APP_NAME, version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(documents_router)


@app.get("/health")
async def health_check(response: Response):
    response.status_code = 200
    return {"status": "healthy"}


def run():
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
