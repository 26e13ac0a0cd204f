"""
档案读取投影

所有只读接口都归结为"按字段选择器投影一条档案"，
ProfileStore 中的具名读取方法只是这里的薄包装。
"""

from enum import Enum
from typing import Any, Callable, Dict, Iterable

from volunteer_registry.models.profile import VolunteerProfile

VALID_SKILLS = "Valid Skills"
INVALID_SKILLS = "Invalid Skills"


class ProfileField(str, Enum):
    """投影字段选择器，值即输出字典的键名"""
    NAME = "name"
    LOCATION = "location"
    SKILLS = "skills"
    HOURS = "hours_available"
    SKILL_COUNT = "skill_count"
    SKILL_STATUS = "skill_status"


def skill_status(profile: VolunteerProfile) -> str:
    return VALID_SKILLS if len(profile.skills) > 0 else INVALID_SKILLS


_EXTRACTORS: Dict[ProfileField, Callable[[VolunteerProfile], Any]] = {
    ProfileField.NAME: lambda p: p.name,
    ProfileField.LOCATION: lambda p: p.location,
    # 返回副本，调用方修改不会影响会话中的对象
    ProfileField.SKILLS: lambda p: list(p.skills),
    ProfileField.HOURS: lambda p: p.hours_available,
    ProfileField.SKILL_COUNT: lambda p: len(p.skills),
    ProfileField.SKILL_STATUS: skill_status,
}

# 完整档案的字段顺序
FULL_RECORD = (
    ProfileField.NAME,
    ProfileField.LOCATION,
    ProfileField.SKILLS,
    ProfileField.HOURS,
)


def project_value(profile: VolunteerProfile, field: ProfileField) -> Any:
    """提取单个字段的值"""
    return _EXTRACTORS[ProfileField(field)](profile)


def project(profile: VolunteerProfile, fields: Iterable[ProfileField]) -> Dict[str, Any]:
    """
    按选择器投影档案

    Args:
        profile: 档案对象
        fields: 字段选择器序列，输出字典保持相同顺序

    Returns:
        字典，键为 ProfileField 的值
        例如: {"name": "Ann", "location": "NYC", "skill_count": 1}
    """
    result: Dict[str, Any] = {}
    for field in fields:
        field = ProfileField(field)
        result[field.value] = _EXTRACTORS[field](profile)
    return result
