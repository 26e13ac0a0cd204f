"""
核心配置模块
提供环境变量配置和日志初始化
"""

from .config import Settings, settings
from .logging_config import setup_logging

__all__ = ["Settings", "settings", "setup_logging"]
