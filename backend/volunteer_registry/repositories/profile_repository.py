"""
志愿者档案 Repository
提供 volunteer_profiles 与 volunteer_profile_backups 的按键读写操作
"""

from typing import List, Optional

from sqlmodel import Session

from volunteer_registry.models.base import utc_now
from volunteer_registry.models.profile import VolunteerProfile, VolunteerProfileBackup


class ProfileRepository:
    """
    档案数据访问对象
    所有操作都以 owner 为键，不提供跨记录查询
    """

    def __init__(self, session: Session):
        """
        初始化 Repository

        Args:
            session: SQLModel 数据库会话
        """
        self.session = session

    def get_by_owner(self, owner: str) -> Optional[VolunteerProfile]:
        """
        根据 owner 获取档案

        Args:
            owner: 调用方身份

        Returns:
            VolunteerProfile 对象，不存在则返回 None
        """
        return self.session.get(VolunteerProfile, owner)

    def exists(self, owner: str) -> bool:
        return self.get_by_owner(owner) is not None

    def create(
        self,
        owner: str,
        name: str,
        location: str,
        skills: List[str],
        hours_available: int
    ) -> VolunteerProfile:
        """
        插入新档案（调用方负责事先检查是否已存在）

        Returns:
            创建的 VolunteerProfile 对象
        """
        profile = VolunteerProfile(
            owner=owner,
            name=name,
            location=location,
            skills=list(skills),
            hours_available=hours_available
        )
        return self.save(profile)

    def save(self, profile: VolunteerProfile) -> VolunteerProfile:
        """
        提交档案的修改

        注意：skills 是 JSON 列，原地修改列表不会被追踪，
        调用方必须整体赋值新列表

        Returns:
            刷新后的 VolunteerProfile 对象
        """
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return profile

    # ==================== 备份操作 ====================

    def get_backup(self, owner: str) -> Optional[VolunteerProfileBackup]:
        """
        获取 owner 的备份快照

        Returns:
            VolunteerProfileBackup 对象，不存在则返回 None
        """
        return self.session.get(VolunteerProfileBackup, owner)

    def overwrite_backup(self, profile: VolunteerProfile) -> VolunteerProfileBackup:
        """
        将当前档案复制到备份表，无条件覆盖同一 owner 的旧快照

        Args:
            profile: 当前档案

        Returns:
            写入后的 VolunteerProfileBackup 对象
        """
        backup = self.get_backup(profile.owner)
        if backup is None:
            backup = VolunteerProfileBackup(owner=profile.owner)

        backup.name = profile.name
        backup.location = profile.location
        backup.skills = list(profile.skills)
        backup.hours_available = profile.hours_available
        # 内容可能与旧快照一致，显式刷新时间戳
        backup.updated_at = utc_now()

        self.session.add(backup)
        self.session.commit()
        self.session.refresh(backup)
        return backup
