"""Главный файл сервиса склада. Точка входа."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from inventory_service.core.config import settings
from inventory_service.db.session import AsyncSessionFactory, async_engine, init_models
from inventory_service.repositories.product_repository import SqlProductRepository
from inventory_service.services.seed import seed_products

logging.basicConfig(level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Контекстный менеджер для управления жизненным циклом сервиса.
    """
    logging.info("--- LIFESPAN START ---")
    try:
        logging.info("1. Creating product table...")
        await init_models(async_engine)
        logging.info("-> Product table ready.")

        logging.info("2. Seeding products...")
        async with AsyncSessionFactory() as session:
            await seed_products(SqlProductRepository(session))
        logging.info("-> Products seeded.")
        logging.info("--- LIFESPAN STARTUP COMPLETE. APP IS READY. ---")

        yield

        logging.info("--- LIFESPAN SHUTDOWN ---")
    finally:
        # Пул соединений освобождается и при сбое запуска
        await async_engine.dispose()
    logging.info("--- LIFESPAN SHUTDOWN COMPLETE ---")


# --- Приложение FastAPI ---
app = FastAPI(title="inventory-service", lifespan=lifespan)


@app.get("/health")
async def health() -> dict[str, str]:
    """
    Проверка, что сервис запущен.
    """
    return {"status": "ok", "service": "inventory-service"}


def run() -> None:
    """Запускает сервис через uvicorn."""
    uvicorn.run(
        "inventory_service.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
    )


# --- Точка входа для локального запуска ---
if __name__ == "__main__":
    run()
