"""Настройка сессии базы данных."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel

from customer_service.core.config import settings
from customer_service.core.exceptions import StorageError
from customer_service.db.models import Customer

async_engine = create_async_engine(
    settings.database_url,
    echo=False,
    pool_pre_ping=True,  # Проверяет "живо" ли соединение перед использованием
)

AsyncSessionFactory = async_sessionmaker(
    async_engine,
    autoflush=False,
    expire_on_commit=False,
    class_=AsyncSession,
)


async def init_models(engine: AsyncEngine) -> None:
    """
    Создает таблицу клиентов, если ее еще нет.

    Args:
        engine: Асинхронный движок SQLAlchemy.

    Raises:
        StorageError: Если база недоступна.
    """
    try:
        async with engine.begin() as conn:
            await conn.run_sync(
                SQLModel.metadata.create_all,
                tables=[Customer.__table__],  # type: ignore[attr-defined]
            )
    except (SQLAlchemyError, OSError) as e:
        raise StorageError("Не удалось создать таблицу клиентов") from e

