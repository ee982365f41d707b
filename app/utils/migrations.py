# -*- coding: UTF-8 -*-
"""
@File ：migrations.py
@IDE ：PyCharm
@Author ：zhanzhicai
@Date ：2025/10/31 17:00
@DOC: 数据库迁移管理模块

在应用启动时执行 alembic upgrade head，确保数据库结构与模型定义保持同步。
"""

import subprocess
import sys
from pathlib import Path

from app.core.logging import get_logger

logger = get_logger(__name__)

# alembic.ini 所在的项目根目录
PROJECT_ROOT = Path(__file__).resolve().parents[2]


def run_migrations() -> bool:
    """
    执行数据库迁移操作

    Returns:
        bool: 迁移成功返回True，失败时抛出 CalledProcessError
    """
    try:
        # sys.executable是当前Python解释器的路径，"-m alembic upgrade head" 升级到最新版本
        result = subprocess.run(
            [sys.executable, "-m", "alembic", "upgrade", "head"],
            cwd=PROJECT_ROOT,
            capture_output=True,  # 捕获标准输出和错误输出
            text=True,            # 以文本形式返回输出结果
            check=True            # 如果命令返回非零退出码则抛出异常
        )
        if result.stdout:
            logger.info(f"数据库迁移输出: {result.stdout}")
        logger.info("数据库迁移完成")
        return True
    except subprocess.CalledProcessError as e:
        logger.error(f"数据库迁移失败: {e.stderr}")
        raise
