"""
Repository (DAO) 模块
提供数据库操作的抽象层，封装按 owner 的键值读写
"""

from .profile_repository import ProfileRepository

__all__ = ["ProfileRepository"]
