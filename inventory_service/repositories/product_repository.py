"""Репозиторий товаров: интерфейс, SQL-адаптер и хранилище в памяти."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from inventory_service.core.exceptions import StorageError
from inventory_service.db.models import Product


class ProductRepository(ABC):
    """Абстрактный интерфейс репозитория товаров."""

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Сохраняет товар и возвращает сохраненную запись."""

    @abstractmethod
    async def find_all(self) -> Sequence[Product]:
        """Возвращает все товары в порядке хранилища."""


class SqlProductRepository(ProductRepository):
    """Реализация репозитория товаров поверх сессии SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, product: Product) -> Product:
        """
        Сохраняет новый товар в базе данных.

        Args:
            product: Товар с заранее сгенерированным ID.

        Returns:
            Сохраненный объект товара.

        Raises:
            StorageError: Если база недоступна или товар с таким ID уже есть.
        """
        self._session.add(product)
        try:
            await self._session.commit()
            await self._session.refresh(product)
        except (SQLAlchemyError, OSError) as e:
            logging.exception("Failed to save product %s", product.id)
            await self._session.rollback()
            raise StorageError(
                f"Не удалось сохранить товар с ID {product.id}"
            ) from e
        return product

    async def find_all(self) -> Sequence[Product]:
        """
        Возвращает список всех товаров.

        Returns:
            Последовательность объектов Product.

        Raises:
            StorageError: Если база недоступна.
        """
        statement = select(Product)
        try:
            result = await self._session.execute(statement)
        except (SQLAlchemyError, OSError) as e:
            logging.exception("Failed to load products")
            raise StorageError("Не удалось получить список товаров") from e
        return result.scalars().all()


class InMemoryProductRepository(ProductRepository):
    """Хранилище товаров в памяти, порядок совпадает с порядком вставки."""

    def __init__(self) -> None:
        self._products: dict[str, Product] = {}

    async def save(self, product: Product) -> Product:
        if product.id in self._products:
            raise StorageError(f"Товар с ID {product.id} уже существует")
        self._products[product.id] = product
        return product

    async def find_all(self) -> Sequence[Product]:
        return list(self._products.values())
