"""
日志配置模块

setup_logging 为根 logger 挂载控制台 handler（可选文件 handler），
并保证只配置一次。
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """
    配置根 logger

    Args:
        level: 日志级别名称（如 "DEBUG"、"INFO"），大小写不敏感
        logfile: 日志文件路径（可选），相对路径按当前工作目录解析
    """
    logger = logging.getLogger()
    if logger.handlers:
        # 已配置过（例如测试中重复调用），直接返回
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
