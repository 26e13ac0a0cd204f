"""
基础模型模块
提供档案表与备份表共用的字段定义
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlmodel import SQLModel, Field, JSON

# 存储层的长度上限
NAME_MAX_LENGTH = 100
LOCATION_MAX_LENGTH = 100
SKILL_MAX_LENGTH = 50
MAX_SKILLS = 10
# SQLite INTEGER 为有符号 64 位
MAX_HOURS = 2 ** 63 - 1


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimestampModel(SQLModel):
    """时间戳基类，为所有表提供 created_at 和 updated_at 字段"""
    created_at: Optional[datetime] = Field(
        default_factory=utc_now,
        nullable=False
    )
    updated_at: Optional[datetime] = Field(
        default_factory=utc_now,
        nullable=False,
        sa_column_kwargs={"onupdate": utc_now}
    )


class ProfileFields(TimestampModel):
    """
    档案字段基类（非表模型）
    VolunteerProfile 与 VolunteerProfileBackup 形状一致，统一在此声明

    注意：skills 使用 sa_type 而非 sa_column，
    这样两张表各自生成独立的 Column 对象
    """
    name: str = Field(default="", max_length=NAME_MAX_LENGTH, nullable=False)
    location: str = Field(default="", max_length=LOCATION_MAX_LENGTH, nullable=False)

    # 有序技能列表，插入顺序即读取顺序
    skills: List[str] = Field(default_factory=list, sa_type=JSON, nullable=False)

    # 非负与上限由 validation 在写入前保证，表模型构造时不做校验
    hours_available: int = Field(default=0, nullable=False)
