"""
志愿者档案存储
每个调用方身份至多拥有一条档案记录（姓名、地点、技能列表、可用时长）
"""

from .services.profile_store import ProfileStore
from .errors import (
    ProfileErrorKind,
    ProfileStoreError,
    NotFoundError,
    AlreadyExistsError,
    InvalidSkillsError,
    InvalidInputError,
    InvalidNameError,
    InvalidLocationError,
    InvalidHoursError,
)

__all__ = [
    "ProfileStore",
    "ProfileErrorKind",
    "ProfileStoreError",
    "NotFoundError",
    "AlreadyExistsError",
    "InvalidSkillsError",
    "InvalidInputError",
    "InvalidNameError",
    "InvalidLocationError",
    "InvalidHoursError",
]
