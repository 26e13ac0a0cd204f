"""
配置管理模块

只从系统环境变量读取配置，从不读取 .env 文件。
模块导入时实例化一次 settings，因此环境变量需在导入前设置。
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """从环境变量加载的应用配置"""

    # SQLite 文件路径，相对路径按项目根目录解析
    database_path: str = field(
        default_factory=lambda: os.getenv("DATABASE_PATH", "volunteer_registry.db")
    )

    # 完整连接串，设置后优先于 database_path
    database_url: Optional[str] = field(default_factory=lambda: os.getenv("DATABASE_URL"))

    # 是否打印 SQL 语句
    sql_echo: bool = field(default_factory=lambda: _env_bool("SQL_ECHO"))

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE"))


settings = Settings()
