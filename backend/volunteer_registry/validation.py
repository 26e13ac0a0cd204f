"""
档案字段校验

两层校验边界：
1. 字段级校验：单字段修改操作只校验自己触及的字段
2. 整条记录校验：仅 register / update 同时校验四个字段；
   同一谓词也作为只读诊断 is_profile_valid 的依据
"""

from typing import Sequence

from .errors import (
    InvalidInputError,
    InvalidNameError,
    InvalidLocationError,
    InvalidHoursError,
    InvalidSkillsError,
)
from .models.base import (
    NAME_MAX_LENGTH,
    LOCATION_MAX_LENGTH,
    SKILL_MAX_LENGTH,
    MAX_SKILLS,
    MAX_HOURS,
)


# ==================== 纯谓词 ====================

def is_well_formed(name: str, location: str, skills: Sequence[str], hours: int) -> bool:
    """整条记录是否合法：姓名、地点、技能均非空且时长大于 0"""
    return bool(name) and bool(location) and len(skills) > 0 and hours > 0


def is_incomplete(name: str, location: str, skills: Sequence[str]) -> bool:
    """档案是否缺项：姓名、地点、技能任一为空（不考虑时长）"""
    return not name or not location or len(skills) == 0


# ==================== 字段级校验（失败抛异常） ====================

def validate_name(name: str) -> None:
    if not name:
        raise InvalidNameError()
    if len(name) > NAME_MAX_LENGTH:
        raise InvalidNameError(f"Name must be at most {NAME_MAX_LENGTH} characters")


def validate_location(location: str) -> None:
    if not location:
        raise InvalidLocationError()
    if len(location) > LOCATION_MAX_LENGTH:
        raise InvalidLocationError(
            f"Location must be at most {LOCATION_MAX_LENGTH} characters"
        )


def validate_hours(hours: int) -> None:
    """可用时长必须 >= 1（register / update / reset_hours）"""
    if hours < 1:
        raise InvalidHoursError()
    if hours > MAX_HOURS:
        raise InvalidHoursError(f"Hours must be at most {MAX_HOURS}")


def validate_hours_delta(delta: int) -> None:
    """增减量为无符号数，允许为 0"""
    if delta < 0:
        raise InvalidHoursError("Hours delta must not be negative")
    if delta > MAX_HOURS:
        raise InvalidHoursError(f"Hours delta must be at most {MAX_HOURS}")


def validate_skill_text(skill: str) -> None:
    if len(skill) > SKILL_MAX_LENGTH:
        raise InvalidSkillsError(f"Skill must be at most {SKILL_MAX_LENGTH} characters")


def validate_skill_list(skills: Sequence[str]) -> None:
    """replace_skills 使用：必须是列表而非单个字符串，非空、不超过容量、单项不超长"""
    if isinstance(skills, str):
        raise InvalidSkillsError("Skills must be a list of strings, not a single string")
    if len(skills) == 0:
        raise InvalidSkillsError("Skills must not be empty")
    if len(skills) > MAX_SKILLS:
        raise InvalidSkillsError(f"At most {MAX_SKILLS} skills are allowed")
    for skill in skills:
        validate_skill_text(skill)


def validate_profile(name: str, location: str, skills: Sequence[str], hours: int) -> None:
    """
    register / update 的整条记录校验

    校验顺序：姓名 -> 地点 -> 技能 -> 时长。
    技能为空归入通用输入错误（400），与 replace_skills 的 InvalidSkillsError 区分；
    技能超出存储容量仍按技能错误处理。

    Raises:
        InvalidInputError: 任一字段不合法
        InvalidSkillsError: 技能列表超出容量或单项过长
    """
    validate_name(name)
    validate_location(location)
    if isinstance(skills, str):
        raise InvalidInputError("Skills must be a list of strings, not a single string", field="skills")
    if len(skills) == 0:
        raise InvalidInputError("Skills must not be empty", field="skills")
    if len(skills) > MAX_SKILLS:
        raise InvalidSkillsError(f"At most {MAX_SKILLS} skills are allowed")
    for skill in skills:
        validate_skill_text(skill)
    validate_hours(hours)
