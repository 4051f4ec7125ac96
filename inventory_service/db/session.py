"""Настройка сессии базы данных."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel

from inventory_service.core.config import settings
from inventory_service.core.exceptions import StorageError
from inventory_service.db.models import Product

# Создаем асинхронный "движок" для SQLAlchemy
async_engine = create_async_engine(
    settings.database_url,
    echo=False,
    pool_pre_ping=True,
)

# Фабрика асинхронных сессий
AsyncSessionFactory = async_sessionmaker(
    async_engine,
    autoflush=False,
    expire_on_commit=False,
    class_=AsyncSession,
)


async def init_models(engine: AsyncEngine) -> None:
    """Создает таблицу товаров, если ее еще нет."""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(
                SQLModel.metadata.create_all,
                tables=[Product.__table__],  # type: ignore[attr-defined]
            )
    except (SQLAlchemyError, OSError) as e:
        raise StorageError("Не удалось создать таблицу товаров") from e
