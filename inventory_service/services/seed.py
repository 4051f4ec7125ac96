"""Начальное заполнение склада при старте сервиса."""

import uuid

from inventory_service.db.models import Product
from inventory_service.repositories.product_repository import ProductRepository

SEED_PRODUCTS = (
    ("Laptop", 1000.0, 299),
    ("Smartphone", 500.0, 450),
    ("Headphones", 150.0, 120),
)


async def seed_products(repository: ProductRepository) -> None:
    """
    Сохраняет три товара со случайными UUID и печатает содержимое склада.

    Каждый товар выводится в stdout отдельной строкой в порядке,
    который вернуло хранилище. StorageError не перехватывается.

    Args:
        repository: Репозиторий товаров.
    """
    for name, price, quantity in SEED_PRODUCTS:
        await repository.save(
            Product(id=str(uuid.uuid4()), name=name, price=price, quantity=quantity)
        )

    for product in await repository.find_all():
        print(product)
