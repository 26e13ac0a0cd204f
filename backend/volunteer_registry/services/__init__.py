"""
服务层
"""

from .profile_store import ProfileStore
from .projections import ProfileField, project, project_value

__all__ = ["ProfileStore", "ProfileField", "project", "project_value"]
