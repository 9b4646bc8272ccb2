"""
Integration test configuration

Repository implementations run against a real PostgreSQL test database
(`POSTGRES_DB` is pinned to show_booking_test_db by the root conftest).
The schema is rebuilt once per session and every table is truncated before
each test.
"""

import asyncio
from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import timedelta

import pytest
from sqlalchemy import text, update
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import create_async_engine
from uuid_utils import UUID

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Base, Database, _engine_manager
from src.service.ticketing.driven_adapter.model import booking_model, show_model  # noqa: F401
from src.service.ticketing.driven_adapter.model.booking_model import BookingModel
from src.service.ticketing.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.ticketing.driven_adapter.repo.booking_mapper import to_pg_uuid
from src.service.ticketing.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl
from src.service.ticketing.driven_adapter.repo.show_command_repo_impl import ShowCommandRepoImpl
from src.service.ticketing.driven_adapter.repo.show_query_repo_impl import ShowQueryRepoImpl


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
async def _setup_test_database() -> None:
    db_url = settings.DATABASE_URL_ASYNC

    # Create database if not exists
    postgres_url = db_url.replace(f'/{settings.POSTGRES_DB}', '/postgres')
    engine = create_async_engine(postgres_url, isolation_level='AUTOCOMMIT')
    try:
        async with engine.begin() as conn:
            result = await conn.execute(
                text('SELECT 1 FROM pg_database WHERE datname = :name'),
                {'name': settings.POSTGRES_DB},
            )
            if not result.fetchone():
                await conn.execute(text(f'CREATE DATABASE "{settings.POSTGRES_DB}"'))
    finally:
        await engine.dispose()

    # Rebuild the schema from the ORM models
    reset_engine = create_async_engine(db_url)
    try:
        async with reset_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await reset_engine.dispose()


async def _clean_all_tables() -> None:
    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with engine.begin() as conn:
            tables = ', '.join(f'"{table.name}"' for table in Base.metadata.sorted_tables)
            await conn.execute(text(f'TRUNCATE {tables} RESTART IDENTITY CASCADE'))
    finally:
        await engine.dispose()


async def _dispose_loop_engine() -> None:
    """Drop the app engine bound to this test's event loop before the loop closes"""
    if _engine_manager._loop is asyncio.get_running_loop() and _engine_manager._engine:
        await _engine_manager._engine.dispose()
        _engine_manager._engine = None
        _engine_manager._session_maker = None
        _engine_manager._loop = None


@pytest.fixture(scope='session')
def prepared_database() -> None:
    try:
        asyncio.run(_setup_test_database())
    except (OSError, DBAPIError) as e:
        pytest.skip(f'PostgreSQL test database unavailable: {e}')


@pytest.fixture(autouse=True)
async def clean_database(prepared_database: None) -> AsyncGenerator[None, None]:
    await _clean_all_tables()
    yield
    await _dispose_loop_engine()


# =============================================================================
# Repository Fixtures
# =============================================================================
@pytest.fixture
def database() -> Database:
    return Database()


@pytest.fixture
def booking_command_repo(database: Database) -> BookingCommandRepoImpl:
    return BookingCommandRepoImpl(session_factory=database.session)


@pytest.fixture
def booking_query_repo(database: Database) -> BookingQueryRepoImpl:
    return BookingQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def show_command_repo(database: Database) -> ShowCommandRepoImpl:
    return ShowCommandRepoImpl(session_factory=database.session)


@pytest.fixture
def show_query_repo(database: Database) -> ShowQueryRepoImpl:
    return ShowQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def age_booking(database: Database) -> Callable[..., Awaitable[None]]:
    """Move a stored booking's created_at back, as if it were made `minutes` ago"""

    async def _age(booking_id: UUID, *, minutes: float) -> None:
        async with database.session() as session:
            await session.execute(
                update(BookingModel)
                .where(BookingModel.id == to_pg_uuid(booking_id))
                .values(created_at=BookingModel.created_at - timedelta(minutes=minutes))
            )
            await session.commit()

    return _age
