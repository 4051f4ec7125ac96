"""Главный файл сервиса клиентов. Точка входа."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from customer_service.core.config import settings
from customer_service.db.session import AsyncSessionFactory, async_engine, init_models
from customer_service.repositories.customer_repository import SqlCustomerRepository
from customer_service.services.seed import seed_customers

logging.basicConfig(level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Контекстный менеджер для управления жизненным циклом сервиса.

    Ошибки хранилища при заполнении не перехватываются и срывают запуск.
    """
    logging.info("--- LIFESPAN START ---")
    try:
        logging.info("1. Creating customer table...")
        await init_models(async_engine)
        logging.info("-> Customer table ready.")

        logging.info("2. Seeding customers...")
        async with AsyncSessionFactory() as session:
            await seed_customers(SqlCustomerRepository(session))
        logging.info("-> Customers seeded.")
        logging.info("--- LIFESPAN STARTUP COMPLETE. APP IS READY. ---")

        yield

        logging.info("--- LIFESPAN SHUTDOWN ---")
    finally:
        # Пул соединений освобождается и при сбое запуска
        await async_engine.dispose()
    logging.info("--- LIFESPAN SHUTDOWN COMPLETE ---")


# --- Приложение FastAPI ---
app = FastAPI(title="customer-service", lifespan=lifespan)


@app.get("/health")
async def health() -> dict[str, str]:
    """
    Проверка, что сервис запущен.
    """
    return {"status": "ok", "service": "customer-service"}


def run() -> None:
    """Запускает сервис через uvicorn."""
    uvicorn.run(
        "customer_service.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
    )


# --- Точка входа для локального запуска ---
if __name__ == "__main__":
    run()
