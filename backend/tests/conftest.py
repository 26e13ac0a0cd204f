"""
Pytest 测试配置
提供测试数据库、Repository、ProfileStore 等测试基础设施
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

# 添加 backend 目录到 sys.path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from volunteer_registry.db.init_db import create_tables
from volunteer_registry.models import VolunteerProfile
from volunteer_registry.repositories import ProfileRepository
from volunteer_registry.services import ProfileStore


# ==================== 数据库 Fixtures ====================

@pytest.fixture(scope="function")
def test_db_engine():
    """
    创建测试用的内存数据库引擎
    每个测试函数都会获得一个全新的数据库；
    StaticPool 让多个会话共享同一个内存连接
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )

    create_tables(engine)

    yield engine

    engine.dispose()


@pytest.fixture(scope="function")
def test_db_session(test_db_engine) -> Generator[Session, None, None]:
    """
    创建测试用的数据库会话
    """
    with Session(test_db_engine) as session:
        yield session


# ==================== Repository / Service Fixtures ====================

@pytest.fixture(scope="function")
def profile_repository(test_db_session: Session) -> ProfileRepository:
    """
    创建 ProfileRepository 实例
    """
    return ProfileRepository(test_db_session)


@pytest.fixture(scope="function")
def store(test_db_engine) -> ProfileStore:
    """
    创建绑定测试引擎的 ProfileStore
    """
    return ProfileStore(test_db_engine)


# ==================== 测试数据 Fixtures ====================

@pytest.fixture(scope="function")
def ann(store: ProfileStore) -> str:
    """
    注册示例志愿者 Ann，返回其 owner 身份
    """
    owner = "principal-ann"
    store.register(owner, "Ann", "NYC", ["Python"], 5)
    return owner


@pytest.fixture(scope="function")
def incomplete_profile(profile_repository: ProfileRepository) -> VolunteerProfile:
    """
    绕过整条记录校验直接写入一条缺项档案
    模拟只经过单字段修改、从未整体校验过的记录
    """
    return profile_repository.create(
        owner="principal-partial",
        name="",
        location="L",
        skills=[],
        hours_available=5
    )


# ==================== Pytest 配置 ====================

def pytest_configure(config):
    """
    Pytest 初始化配置
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )
