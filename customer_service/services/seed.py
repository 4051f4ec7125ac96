"""Начальное заполнение базы клиентами при старте сервиса."""

import logging

from customer_service.db.models import Customer
from customer_service.repositories.customer_repository import CustomerRepository

SEED_CUSTOMERS = (
    ("yassin", "yassin@gmail.com"),
    ("mohamed", "mohamed@gmail.com"),
    ("said", "said@gmail.com"),
)


async def seed_customers(repository: CustomerRepository) -> None:
    """
    Сохраняет трех клиентов по порядку.

    Ошибки хранилища не перехватываются: первая же StorageError
    прерывает заполнение и уходит наверх.

    Args:
        repository: Репозиторий клиентов.
    """
    for name, email in SEED_CUSTOMERS:
        customer = await repository.save(Customer(name=name, email=email))
        logging.info("Seeded customer %s with id %s", customer.name, customer.id)
