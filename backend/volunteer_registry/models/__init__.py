"""
数据库模型模块
导出所有表模型和字段上限常量
"""

from .profile import VolunteerProfile, VolunteerProfileBackup
from .base import (
    TimestampModel,
    ProfileFields,
    NAME_MAX_LENGTH,
    LOCATION_MAX_LENGTH,
    SKILL_MAX_LENGTH,
    MAX_SKILLS,
    MAX_HOURS,
)

__all__ = [
    # 档案域
    "VolunteerProfile", "VolunteerProfileBackup",
    # 基础模型
    "TimestampModel", "ProfileFields",
    # 字段上限
    "NAME_MAX_LENGTH", "LOCATION_MAX_LENGTH", "SKILL_MAX_LENGTH", "MAX_SKILLS", "MAX_HOURS",
]
