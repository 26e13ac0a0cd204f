"""
档案域模型 - 志愿者档案表与单槽备份表
"""

from sqlmodel import Field

from .base import ProfileFields


class VolunteerProfile(ProfileFields, table=True):
    """
    志愿者档案表
    以调用方身份 owner 为主键，保证每个身份至多一条记录
    """
    __tablename__ = "volunteer_profiles"

    # 主键：调用方身份（由宿主环境认证）
    owner: str = Field(primary_key=True)


class VolunteerProfileBackup(ProfileFields, table=True):
    """
    档案备份表
    每个 owner 一个槽位，每次 backup 无条件覆盖上一份快照
    """
    __tablename__ = "volunteer_profile_backups"

    owner: str = Field(primary_key=True)
