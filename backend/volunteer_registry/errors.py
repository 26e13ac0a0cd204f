"""
档案存储错误定义

所有预期内的失败（记录不存在、重复注册、输入不合法）都以异常形式抛给直接调用方，
宿主环境再把 kind/code 编码为自己的结果格式。存储内部不做重试或回退。
"""

from enum import Enum
from typing import Any, Dict, Optional


class ProfileErrorKind(str, Enum):
    """错误类别枚举"""
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_SKILLS = "invalid_skills"
    # 沿用原有编码：姓名、地点、时长等输入校验失败统一归入此类
    INVALID_HOURS = "invalid_hours"


ERROR_CODES: Dict[ProfileErrorKind, int] = {
    ProfileErrorKind.NOT_FOUND: 404,
    ProfileErrorKind.ALREADY_EXISTS: 409,
    ProfileErrorKind.INVALID_SKILLS: 403,
    ProfileErrorKind.INVALID_HOURS: 400,
}


class ProfileStoreError(Exception):
    """
    档案存储错误基类

    Attributes:
        kind: 错误类别
        code: 对外数字编码
        message: 可读错误信息
        field: 校验失败的字段名（仅输入校验类错误）
    """

    kind: ProfileErrorKind = ProfileErrorKind.INVALID_HOURS

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)

    @property
    def code(self) -> int:
        return ERROR_CODES[self.kind]

    def to_dict(self) -> Dict[str, Any]:
        """转换为宿主可编码的字典"""
        data: Dict[str, Any] = {
            "kind": self.kind.value,
            "code": self.code,
            "message": self.message,
        }
        if self.field is not None:
            data["field"] = self.field
        return data


class NotFoundError(ProfileStoreError):
    """调用方没有档案记录"""
    kind = ProfileErrorKind.NOT_FOUND

    def __init__(self, owner: str):
        super().__init__(f"Volunteer profile not found for '{owner}'")
        self.owner = owner


class AlreadyExistsError(ProfileStoreError):
    """调用方已存在档案记录，不能重复注册"""
    kind = ProfileErrorKind.ALREADY_EXISTS

    def __init__(self, owner: str):
        super().__init__(f"Volunteer profile already exists for '{owner}'")
        self.owner = owner


class InvalidSkillsError(ProfileStoreError):
    """技能列表校验失败（为空、超出容量或单项过长）"""
    kind = ProfileErrorKind.INVALID_SKILLS

    def __init__(self, message: str):
        super().__init__(message, field="skills")


class InvalidInputError(ProfileStoreError):
    """通用输入校验失败，field 标明具体字段"""
    kind = ProfileErrorKind.INVALID_HOURS


class InvalidNameError(InvalidInputError):
    def __init__(self, message: str = "Name must not be empty"):
        super().__init__(message, field="name")


class InvalidLocationError(InvalidInputError):
    def __init__(self, message: str = "Location must not be empty"):
        super().__init__(message, field="location")


class InvalidHoursError(InvalidInputError):
    def __init__(self, message: str = "Hours must be at least 1"):
        super().__init__(message, field="hours")
