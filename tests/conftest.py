"""Конфигурация и фикстуры для тестов Pytest."""

from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from customer_service.db import models as customer_models  # noqa: F401
from inventory_service.db import models as inventory_models  # noqa: F401

# Используем асинхронный драйвер для SQLite для тестов
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
# Каталога не существует, поэтому SQLite не сможет открыть файл
UNREACHABLE_DATABASE_URL = "sqlite+aiosqlite:////nonexistent-dir/unreachable.db"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    Фикстура для создания чистой базы в памяти для каждого теста.
    """
    async_engine = create_async_engine(
        TEST_DATABASE_URL, echo=False, poolclass=StaticPool
    )
    async with async_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield async_engine

    await async_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Фикстура, создающая фабрику сессий для тестов.
    """
    return async_sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
        class_=AsyncSession,
    )


@pytest.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """
    Фикстура, предоставляющая изолированную сессию БД для каждого теста.
    """
    async with session_factory() as db_session:
        yield db_session


@pytest.fixture
async def unreachable_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Сессия, привязанная к базе, к которой невозможно подключиться.
    """
    async_engine = create_async_engine(UNREACHABLE_DATABASE_URL, echo=False)
    async with AsyncSession(async_engine, expire_on_commit=False) as db_session:
        yield db_session
    await async_engine.dispose()


@pytest.fixture
def disposed(monkeypatch: pytest.MonkeyPatch) -> list[AsyncEngine]:
    """
    Записывает каждый движок, у которого вызвали dispose().
    """
    calls: list[AsyncEngine] = []
    original_dispose = AsyncEngine.dispose

    async def spy_dispose(self: AsyncEngine, close: bool = True) -> None:
        calls.append(self)
        await original_dispose(self, close)

    monkeypatch.setattr(AsyncEngine, "dispose", spy_dispose)
    return calls
