"""
数据库初始化脚本
负责解析连接地址、创建引擎和两张档案表
"""

import logging
import os
from pathlib import Path

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from volunteer_registry.core.config import Settings, settings as default_settings
from volunteer_registry.core.logging_config import setup_logging
# 导入模型以便注册到 SQLModel.metadata
from volunteer_registry.models.profile import VolunteerProfile, VolunteerProfileBackup  # noqa: F401

logger = logging.getLogger(__name__)


def get_database_url(settings: Settings = default_settings) -> str:
    """
    获取数据库连接 URL
    优先使用 DATABASE_URL，否则使用 DATABASE_PATH 指向的 SQLite 文件
    """
    if settings.database_url:
        return settings.database_url

    db_path = settings.database_path
    if not os.path.isabs(db_path):
        # 从项目根目录解析（backend/ 的上一级）
        project_root = Path(__file__).parent.parent.parent.parent
        db_path = str(project_root / db_path)
    return f"sqlite:///{db_path}"


def get_engine(settings: Settings = default_settings) -> Engine:
    """
    创建并返回数据库引擎
    """
    database_url = get_database_url(settings)
    connect_args = {}
    if database_url.startswith("sqlite"):
        # SQLite 特有配置
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=settings.sql_echo, connect_args=connect_args)


def create_tables(engine: Engine) -> None:
    """
    创建所有数据库表（已存在的表会跳过）
    """
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables created at %s", engine.url)


def init_db(settings: Settings = default_settings) -> Engine:
    """
    完整的数据库初始化流程
    1. 创建数据库引擎
    2. 创建所有表结构
    """
    engine = get_engine(settings)
    create_tables(engine)
    return engine


if __name__ == "__main__":
    # 直接运行此脚本时，执行数据库初始化
    setup_logging(default_settings.log_level, default_settings.log_file)
    init_db()
