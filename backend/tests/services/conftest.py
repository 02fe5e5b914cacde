"""Service test fixtures - async DB, identity tokens, and FastAPI test clients.

Invariants:
    - Every test gets a fresh file-backed SQLite database (separate connections per session,
      so concurrent requests really run in separate transactions)
    - get_db and get_identity_verifier overridden; app.state.db_manager points at the test DB
    - make_token issues HS256 tokens the overridden verifier accepts

Design Decisions:
    - File DB over :memory: - an in-memory database is per-connection, concurrency tests need sharing
    - Tokens signed locally: token issuance belongs to the identity service, tests only need valid ones
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import app.models  # noqa: F401
from app.db.base import Base
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.infrastructure.identity import JWTIdentityVerifier, get_identity_verifier
from app.main import app
from app.models.course import Course
from app.models.student import Student
from app.seed_main import seed_app

TEST_SECRET = "test-signing-secret-0123456789abcdef"


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'enrollment.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def make_token():
    """Build a bearer token for a subject id."""
    def _make(subject: str, secret: str = TEST_SECRET, expires_in: int = 3600) -> str:
        now = datetime.now(timezone.utc)
        return jwt.encode(
            {"sub": subject, "iat": now, "exp": now + timedelta(seconds=expires_in)},
            secret,
            algorithm="HS256",
        )
    return _make


@pytest.fixture
def auth_headers(make_token):
    def _headers(subject: str) -> dict:
        return {"Authorization": f"Bearer {make_token(subject)}"}
    return _headers


def _bind_test_dependencies(target, test_engine, test_session_factory):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    target.dependency_overrides[get_db] = override_get_db
    target.dependency_overrides[get_identity_verifier] = (
        lambda: JWTIdentityVerifier(secret=TEST_SECRET)
    )

    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    target.state.db_manager = fake_manager


def _unbind_test_dependencies(target):
    target.dependency_overrides.clear()
    if hasattr(target.state, "db_manager"):
        del target.state.db_manager


@pytest.fixture
async def client(test_engine, test_session_factory):
    """API test client with DB and identity dependencies overridden."""
    _bind_test_dependencies(app, test_engine, test_session_factory)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    _unbind_test_dependencies(app)


@pytest.fixture
async def seed_client(test_engine, test_session_factory):
    """Client for the standalone seed app."""
    _bind_test_dependencies(seed_app, test_engine, test_session_factory)
    async with AsyncClient(
        transport=ASGITransport(app=seed_app), base_url="http://test",
    ) as c:
        yield c
    _unbind_test_dependencies(seed_app)


@pytest.fixture
def add_student(test_db):
    """Insert a registered student directly into the test DB."""
    async def _add(student_id: str, **fields) -> Student:
        student = Student(
            id=student_id,
            email=fields.pop("email", f"{student_id}@uni.edu"),
            name=fields.pop("name", f"Student {student_id}"),
            **fields,
        )
        test_db.add(student)
        await test_db.commit()
        return student
    return _add


@pytest.fixture
def add_course(test_db):
    """Insert a course directly into the test DB."""
    async def _add(code: str = "CS101", capacity: int = 30, enrolled_count: int = 0, **fields) -> Course:
        course = Course(
            code=code,
            name=fields.pop("name", f"Course {code}"),
            credits=fields.pop("credits", 3),
            capacity=capacity,
            enrolled_count=enrolled_count,
            **fields,
        )
        test_db.add(course)
        await test_db.commit()
        return course
    return _add


@pytest.fixture
def reload(test_db):
    """Re-read a row from the DB, bypassing the identity map."""
    async def _reload(model, pk):
        return await test_db.get(model, pk, populate_existing=True)
    return _reload
