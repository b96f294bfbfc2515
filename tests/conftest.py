"""테스트 인프라 — 임시 DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Temporary database, session, and httpx client fixtures.
TEST_DATABASE_URL selects the database; without it a temporary SQLite file
(aiosqlite) is used. PostgreSQL databases are created/dropped with psql.
Schema is applied once per session, data is deleted after each test.
"""

import os
import subprocess
from collections.abc import AsyncGenerator, Iterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models.member import Member
from app.models.team import Team

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "")

_schema_created = False


def _psql(sql: str, check: bool = False) -> None:
    subprocess.run(
        ["psql", "-h", "localhost", "-d", "postgres", "-c", sql],
        capture_output=True, check=check,
    )


def _drop_postgres_database(name: str) -> None:
    _psql(
        f"SELECT pg_terminate_backend(pid) FROM pg_stat_activity "
        f"WHERE datname = '{name}' AND pid <> pg_backend_pid();"
    )
    _psql(f"DROP DATABASE IF EXISTS {name};")


# ---------------------------------------------------------------------------
# Session-scoped: DB 생성/삭제
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def database_url(tmp_path_factory: pytest.TempPathFactory) -> Iterator[str]:
    """세션 시작 시 테스트 DB를 준비하고, 종료 시 삭제합니다."""
    if not TEST_DATABASE_URL:
        db_file = tmp_path_factory.mktemp("db") / "test_datajpa.sqlite3"
        yield f"sqlite+aiosqlite:///{db_file}"
        return

    name = make_url(TEST_DATABASE_URL).database
    _drop_postgres_database(name)
    _psql(f"CREATE DATABASE {name};", check=True)
    yield TEST_DATABASE_URL
    _drop_postgres_database(name)


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 첫 호출 시 스키마를 생성합니다."""
    global _schema_created
    eng = create_async_engine(database_url, echo=False, pool_pre_ping=True)

    if not _schema_created:
        async with eng.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        _schema_created = True

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    async with session_factory() as session:
        yield session
        # 커밋되지 않은 변경 처리
        try:
            await session.commit()
        except Exception:
            await session.rollback()

    # 테스트 후 모든 데이터 정리
    async with session_factory() as cleanup:
        for table in reversed(Base.metadata.sorted_tables):
            await cleanup.execute(table.delete())
        await cleanup.commit()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def team_a(db: AsyncSession) -> Team:
    """테스트 팀 teamA를 생성합니다."""
    team = Team(name="teamA")
    db.add(team)
    await db.flush()
    return team


@pytest_asyncio.fixture
async def team_b(db: AsyncSession) -> Team:
    """테스트 팀 teamB를 생성합니다."""
    team = Team(name="teamB")
    db.add(team)
    await db.flush()
    return team


@pytest_asyncio.fixture
async def members(db: AsyncSession, team_a: Team, team_b: Team) -> list[Member]:
    """팀에 소속된 회원 4명을 생성합니다 (member1~2: teamA, member3~4: teamB)."""
    result = [
        Member("member1", 10, team_a),
        Member("member2", 20, team_a),
        Member("member3", 30, team_b),
        Member("member4", 40, team_b),
    ]
    db.add_all(result)
    await db.flush()
    return result
