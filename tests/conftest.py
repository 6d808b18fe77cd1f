"""测试夹具：为 pytest 提供数据库、上传目录与客户端的共享配置。"""

import os
import tempfile
from pathlib import Path
from typing import Generator

TEST_DB_PATH = os.path.join(os.path.dirname(__file__), "test.db")
TEST_DATABASE_URL = f"sqlite:///{TEST_DB_PATH}"
_RUNTIME_DIR = tempfile.mkdtemp(prefix="school_admin_tests_")

# 必须在导入应用之前设置，配置对象在首次读取后即被缓存
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ.setdefault("UPLOAD_DIR", os.path.join(_RUNTIME_DIR, "uploads"))
os.environ.setdefault("LOG_DIR", os.path.join(_RUNTIME_DIR, "log"))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from app.main import app  # noqa: E402
from app.packages.school.core.config import get_settings  # noqa: E402
from app.packages.school.core.dependencies import get_blob_store, get_db  # noqa: E402
from app.packages.school.db import session as db_session  # noqa: E402
from app.packages.school.db.init_db import init_db  # noqa: E402
from app.packages.school.models.base import Base  # noqa: E402
from app.packages.school.services.blob_store import LocalBlobStore  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def setup_test_database() -> Generator[None, None, None]:
    """创建隔离的 SQLite 测试数据库，并在会话结束后清理。"""
    if os.path.exists(TEST_DB_PATH):
        os.remove(TEST_DB_PATH)

    engine = db_session.build_engine(TEST_DATABASE_URL)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    db_session.engine = engine
    db_session.SessionLocal = TestingSessionLocal

    Base.metadata.create_all(bind=engine)
    init_db()
    yield

    engine.dispose()
    if os.path.exists(TEST_DB_PATH):
        os.remove(TEST_DB_PATH)


@pytest.fixture(autouse=True)
def clean_tables(setup_test_database) -> Generator[None, None, None]:
    """每个用例结束后清空所有表，避免唯一字段互相干扰。"""
    yield
    session = db_session.SessionLocal()
    try:
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()
    finally:
        session.close()


@pytest.fixture()
def db_session_fixture() -> Generator[Session, None, None]:
    """提供给测试用例使用的数据库会话。"""
    session = db_session.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def store(tmp_path: Path) -> LocalBlobStore:
    """每个用例独立的上传目录。"""
    return LocalBlobStore(tmp_path / "uploads", get_settings().upload_url_root)


@pytest.fixture()
def client(db_session_fixture, store: LocalBlobStore):
    """构建 FastAPI TestClient，并注入测试专用的数据库与上传目录依赖。"""
    def override_get_db() -> Generator[Session, None, None]:
        session = db_session.SessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_blob_store] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
