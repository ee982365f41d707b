# -*- coding: UTF-8 -*-
"""
@File ：logging.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/31 16:07
@DOC: 日志配置模块

该模块负责配置应用程序的日志系统，提供统一的日志格式和输出方式。
支持同时输出到控制台和文件，日志级别和目录来自配置。
"""

import sys
from pathlib import Path
from loguru import logger

from app.core.config import settings


def setup_logging():
    """
    配置 loguru 日志系统

    功能：
    1. 移除默认的处理器
    2. 添加彩色控制台输出
    3. LOG_TO_FILE 为 True 时添加文件日志输出（按日期轮转）和单独的错误日志
    """
    # 移除默认处理器
    logger.remove()

    # 添加控制台处理器（彩色输出）
    logger.add(
        sys.stdout,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level="DEBUG" if settings.DEBUG else settings.LOG_LEVEL,
        colorize=True,
        backtrace=True,
        diagnose=settings.DEBUG,
    )

    if not settings.LOG_TO_FILE:
        logger.info("日志系统配置完成（仅控制台）")
        return

    # 确保日志目录存在
    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    # 添加文件处理器（按日期轮转）
    logger.add(
        log_dir / "app.log",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        level="DEBUG",  # 文件记录DEBUG级别及以上
        rotation="1 day",  # 每天轮转
        retention="30 days",  # 保留30天
        compression="zip",  # 压缩旧日志
        backtrace=True,
        diagnose=False,
        encoding="utf-8"
    )

    # 添加错误日志文件（单独记录错误和异常）
    logger.add(
        log_dir / "error.log",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        level="ERROR",  # 只记录ERROR级别
        rotation="1 day",
        retention="30 days",
        compression="zip",
        backtrace=True,
        diagnose=False,
        encoding="utf-8"
    )

    logger.info("日志系统配置完成")


def get_logger(name: str | None = None):
    """获取配置好的logger实例，name 会作为 extra 字段绑定"""
    if name:
        return logger.bind(module=name)
    return logger
