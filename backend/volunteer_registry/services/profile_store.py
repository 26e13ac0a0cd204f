"""
志愿者档案存储服务

封装全部写操作与读取投影：
1. 每次调用在独立的数据库会话中执行，成功时只提交一次
2. 任何异常都会回滚会话，失败的操作不留下部分修改
3. 所有操作都以调用方身份 owner 为键，调用方只能操作自己的记录

校验顺序对外可见，必须保持：
- set_location / set_name / reset_hours / replace_skills：先校验输入，再检查记录是否存在
- add_skill / increment_hours / decrement_hours：先检查记录是否存在，再校验参数

使用示例：
    store = ProfileStore(engine)
    store.register("principal-1", "Ann", "NYC", ["Python"], 5)
    store.get_volunteer_summary("principal-1")
    # {"name": "Ann", "location": "NYC", "skill_count": 1}
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence

from sqlalchemy.engine import Engine
from sqlmodel import Session

from volunteer_registry.db.init_db import init_db
from volunteer_registry.errors import (
    AlreadyExistsError,
    InvalidHoursError,
    InvalidSkillsError,
    NotFoundError,
    ProfileStoreError,
)
from volunteer_registry.models.base import MAX_HOURS, MAX_SKILLS
from volunteer_registry.models.profile import VolunteerProfile
from volunteer_registry.repositories.profile_repository import ProfileRepository
from volunteer_registry.services.projections import (
    FULL_RECORD,
    ProfileField,
    project,
    project_value,
)
from volunteer_registry import validation

logger = logging.getLogger(__name__)

REGISTERED = "Registered"
NOT_REGISTERED = "Not Registered"


class ProfileStore:
    """
    档案存储服务类

    核心职责：
    1. 维护"每个身份至多一条档案"的不变量
    2. 写入前校验（register/update 校验整条记录，单字段操作只校验自己的字段）
    3. 提供按字段选择器的只读投影
    """

    def __init__(self, engine: Optional[Engine] = None):
        """
        Args:
            engine: 数据库引擎，不传则按配置创建并建表
        """
        self.engine = engine if engine is not None else init_db()

    # ==================== 事务与查找 ====================

    @contextmanager
    def _transaction(self, operation: Optional[str] = None) -> Iterator[ProfileRepository]:
        """
        打开一个会话并返回 Repository；异常时回滚并原样抛出

        Args:
            operation: 写操作名称，用于记录被拒绝的写入
        """
        with Session(self.engine) as session:
            try:
                yield ProfileRepository(session)
            except ProfileStoreError as e:
                session.rollback()
                if operation is not None:
                    logger.warning("%s rejected: [%s] %s", operation, e.code, e.message)
                raise
            except Exception:
                session.rollback()
                raise

    @staticmethod
    def _require(repo: ProfileRepository, owner: str) -> VolunteerProfile:
        profile = repo.get_by_owner(owner)
        if profile is None:
            raise NotFoundError(owner)
        return profile

    def _read(self, owner: str, projector: Callable[[VolunteerProfile], Any]) -> Any:
        with self._transaction() as repo:
            return projector(self._require(repo, owner))

    # ==================== 写操作 ====================

    def register(
        self,
        owner: str,
        name: str,
        location: str,
        skills: Sequence[str],
        hours: int
    ) -> str:
        """
        注册新档案

        Raises:
            AlreadyExistsError: owner 已有档案（优先于输入校验）
            InvalidInputError: 姓名、地点、技能或时长不合法
        """
        with self._transaction("register") as repo:
            if repo.exists(owner):
                raise AlreadyExistsError(owner)
            validation.validate_profile(name, location, skills, hours)
            repo.create(owner, name, location, list(skills), hours)
        logger.info("Registered volunteer profile for %s", owner)
        return "Volunteer registered successfully"

    def update(
        self,
        owner: str,
        name: str,
        location: str,
        skills: Sequence[str],
        hours: int
    ) -> str:
        """
        整体覆盖已有档案的四个字段

        Raises:
            NotFoundError: owner 没有档案
            InvalidInputError: 校验规则与 register 相同
        """
        with self._transaction("update") as repo:
            profile = self._require(repo, owner)
            validation.validate_profile(name, location, skills, hours)
            profile.name = name
            profile.location = location
            profile.skills = list(skills)
            profile.hours_available = hours
            repo.save(profile)
        logger.info("Updated volunteer profile for %s", owner)
        return "Volunteer profile updated successfully"

    def add_skill(self, owner: str, skill: str) -> str:
        """
        追加一项技能，容量满时拒绝（不截断）

        Raises:
            NotFoundError: owner 没有档案
            InvalidSkillsError: 已有 MAX_SKILLS 项技能，或技能文本过长
        """
        with self._transaction("add_skill") as repo:
            profile = self._require(repo, owner)
            validation.validate_skill_text(skill)
            if len(profile.skills) >= MAX_SKILLS:
                raise InvalidSkillsError(f"Cannot add more than {MAX_SKILLS} skills")
            profile.skills = [*profile.skills, skill]
            repo.save(profile)
        logger.info("Added skill for %s", owner)
        return "Skill added successfully"

    def increment_hours(self, owner: str, delta: int) -> str:
        with self._transaction("increment_hours") as repo:
            profile = self._require(repo, owner)
            validation.validate_hours_delta(delta)
            if profile.hours_available + delta > MAX_HOURS:
                raise InvalidHoursError(
                    f"Cannot increment {delta} hours, balance would exceed {MAX_HOURS}"
                )
            profile.hours_available += delta
            repo.save(profile)
        logger.info("Incremented hours for %s by %d", owner, delta)
        return "Hours incremented successfully"

    def decrement_hours(self, owner: str, delta: int) -> str:
        """
        扣减可用时长，余额不足时拒绝且不修改

        Raises:
            NotFoundError: owner 没有档案
            InvalidHoursError: delta 为负或超过当前余额
        """
        with self._transaction("decrement_hours") as repo:
            profile = self._require(repo, owner)
            validation.validate_hours_delta(delta)
            if delta > profile.hours_available:
                raise InvalidHoursError(
                    f"Cannot decrement {delta} hours, only {profile.hours_available} available"
                )
            profile.hours_available -= delta
            repo.save(profile)
        logger.info("Decremented hours for %s by %d", owner, delta)
        return "Hours decremented successfully"

    def set_location(self, owner: str, new_location: str) -> str:
        with self._transaction("set_location") as repo:
            validation.validate_location(new_location)
            profile = self._require(repo, owner)
            profile.location = new_location
            repo.save(profile)
        logger.info("Updated location for %s", owner)
        return "Location updated successfully"

    def replace_skills(self, owner: str, new_skills: Sequence[str]) -> str:
        """
        整体替换技能列表

        Raises:
            InvalidSkillsError: 列表为空、超过 MAX_SKILLS 项或单项过长（先于存在性检查）
            NotFoundError: owner 没有档案
        """
        with self._transaction("replace_skills") as repo:
            validation.validate_skill_list(new_skills)
            profile = self._require(repo, owner)
            profile.skills = list(new_skills)
            repo.save(profile)
        logger.info("Replaced skills for %s", owner)
        return "Skills updated successfully"

    def set_name(self, owner: str, new_name: str) -> str:
        with self._transaction("set_name") as repo:
            validation.validate_name(new_name)
            profile = self._require(repo, owner)
            profile.name = new_name
            repo.save(profile)
        logger.info("Updated name for %s", owner)
        return "Name updated successfully"

    def reset_hours(self, owner: str, new_hours: int) -> str:
        with self._transaction("reset_hours") as repo:
            validation.validate_hours(new_hours)
            profile = self._require(repo, owner)
            profile.hours_available = new_hours
            repo.save(profile)
        logger.info("Reset hours for %s to %d", owner, new_hours)
        return "Hours reset successfully"

    def backup(self, owner: str) -> str:
        """
        把当前档案快照写入备份表，覆盖旧快照

        备份只写不读：没有对应的恢复操作
        """
        with self._transaction("backup") as repo:
            profile = self._require(repo, owner)
            repo.overwrite_backup(profile)
        logger.info("Backed up volunteer profile for %s", owner)
        return "Profile backed up successfully"

    # ==================== 通用投影 ====================

    def project(self, owner: str, *fields: ProfileField) -> Dict[str, Any]:
        """
        按字段选择器投影 owner 的档案

        Raises:
            NotFoundError: owner 没有档案
        """
        return self._read(owner, lambda p: project(p, fields))

    def _value(self, owner: str, field: ProfileField) -> Any:
        return self._read(owner, lambda p: project_value(p, field))

    # ==================== 具名读取 ====================

    def get_volunteer_profile(self, owner: str) -> Dict[str, Any]:
        return self.project(owner, *FULL_RECORD)

    def get_volunteer_skills(self, owner: str) -> List[str]:
        return self._value(owner, ProfileField.SKILLS)

    def get_volunteer_hours(self, owner: str) -> int:
        return self._value(owner, ProfileField.HOURS)

    def get_volunteer_location(self, owner: str) -> str:
        return self._value(owner, ProfileField.LOCATION)

    def get_volunteer_name(self, owner: str) -> str:
        return self._value(owner, ProfileField.NAME)

    def get_skill_count(self, owner: str) -> int:
        return self._value(owner, ProfileField.SKILL_COUNT)

    def get_volunteer_summary(self, owner: str) -> Dict[str, Any]:
        return self.project(owner, ProfileField.NAME, ProfileField.LOCATION, ProfileField.SKILL_COUNT)

    get_profile_overview = get_volunteer_summary

    get_full_profile = get_volunteer_profile
    get_volunteer_details = get_volunteer_profile

    def get_location_and_skills(self, owner: str) -> Dict[str, Any]:
        return self.project(owner, ProfileField.LOCATION, ProfileField.SKILLS)

    def get_location_and_hours(self, owner: str) -> Dict[str, Any]:
        return self.project(owner, ProfileField.LOCATION, ProfileField.HOURS)

    get_availability = get_location_and_hours

    def get_location_and_skill_count(self, owner: str) -> Dict[str, Any]:
        return self.project(owner, ProfileField.LOCATION, ProfileField.SKILL_COUNT)

    def get_skills_and_hours(self, owner: str) -> Dict[str, Any]:
        return self.project(owner, ProfileField.SKILLS, ProfileField.HOURS)

    def get_name_and_hours(self, owner: str) -> Dict[str, Any]:
        return self.project(owner, ProfileField.NAME, ProfileField.HOURS)

    def get_name_and_location(self, owner: str) -> Dict[str, Any]:
        return self.project(owner, ProfileField.NAME, ProfileField.LOCATION)

    get_contact_info = get_name_and_location

    def get_skill_count_and_hours(self, owner: str) -> Dict[str, Any]:
        return self.project(owner, ProfileField.SKILL_COUNT, ProfileField.HOURS)

    def get_hours_and_skill_status(self, owner: str) -> Dict[str, Any]:
        return self.project(owner, ProfileField.HOURS, ProfileField.SKILL_STATUS)

    # ==================== 布尔与状态探针 ====================

    def is_registered(self, owner: str) -> bool:
        """owner 是否已注册，记录不存在时返回 False 而不是抛错"""
        with self._transaction() as repo:
            return repo.exists(owner)

    def get_registration_status(self, owner: str) -> str:
        return REGISTERED if self.is_registered(owner) else NOT_REGISTERED

    def has_skills(self, owner: str) -> bool:
        return self._read(owner, lambda p: len(p.skills) >= 1)

    has_any_skills = has_skills

    def get_skill_status(self, owner: str) -> str:
        return self._value(owner, ProfileField.SKILL_STATUS)

    def has_multiple_skills(self, owner: str) -> bool:
        return self._read(owner, lambda p: len(p.skills) > 1)

    def is_available_for(self, owner: str, hours: int) -> bool:
        return self._read(owner, lambda p: p.hours_available >= hours)

    has_required_hours = is_available_for

    def is_available(self, owner: str) -> bool:
        return self._read(owner, lambda p: p.hours_available > 0)

    def is_in_location(self, owner: str, location: str) -> bool:
        return self._read(owner, lambda p: p.location == location)

    def has_more_hours_than(self, owner: str, minimum: int) -> bool:
        return self._read(owner, lambda p: p.hours_available > minimum)

    def has_location(self, owner: str) -> bool:
        return self._read(owner, lambda p: bool(p.location))

    def is_profile_incomplete(self, owner: str) -> bool:
        return self._read(
            owner,
            lambda p: validation.is_incomplete(p.name, p.location, p.skills)
        )

    def is_profile_valid(self, owner: str) -> bool:
        return self._read(
            owner,
            lambda p: validation.is_well_formed(p.name, p.location, p.skills, p.hours_available)
        )
